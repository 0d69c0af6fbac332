"""Runtime configuration read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


def _env_flag(name: str, default: str = "1") -> bool:
    value = os.getenv(name, default)
    return value.lower() not in {"0", "false", "no"}


@dataclass(frozen=True)
class ValidationConfig:
    """Configuration for validation registries and validatable models.

    Attributes:
        default_path: Display path of entries registered without one.
        log_failures: Log failing entries at DEBUG level.
        validate_on_init: Run model validations during Pydantic validation.
    """

    default_path: str = field(
        default_factory=lambda: os.getenv("RYANDATA_VALIDATION_DEFAULT_PATH", "data")
    )
    log_failures: bool = field(
        default_factory=lambda: _env_flag("RYANDATA_VALIDATION_LOG_FAILURES", "1")
    )
    validate_on_init: bool = field(
        default_factory=lambda: _env_flag("RYANDATA_VALIDATION_ON_INIT", "1")
    )
