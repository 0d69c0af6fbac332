"""Presence validators: emptiness of containers and absence of values.

Negate them to require content: ``~empty()`` and ``~is_none()``.
"""

from __future__ import annotations

from collections.abc import Sized
from dataclasses import dataclass
from typing import Any

from ryandata_validation.core.results import Invalid
from ryandata_validation.core.validator import Validator
from ryandata_validation.protocols import ValidatorResultProtocol


@dataclass(frozen=True)
class EmptyResult:
    """Result of the emptiness validator."""

    is_empty: bool

    @property
    def is_failure(self) -> bool:
        return not self.is_empty

    @property
    def success_description(self) -> str | None:
        return "is empty"

    @property
    def failure_description(self) -> str | None:
        return "is not empty"


@dataclass(frozen=True)
class NoneResult:
    """Result of the absence validator."""

    is_none: bool

    @property
    def is_failure(self) -> bool:
        return not self.is_none

    @property
    def success_description(self) -> str | None:
        return "is null"

    @property
    def failure_description(self) -> str | None:
        return "is not null"


def empty() -> Validator[Any]:
    """Validate that the container has no elements."""

    def run(data: Any) -> ValidatorResultProtocol:
        if not isinstance(data, Sized):
            return Invalid("not a container")
        return EmptyResult(len(data) == 0)

    return Validator(run, name="empty")


def is_none() -> Validator[Any]:
    """Validate that the optional value is absent."""

    def run(data: Any) -> ValidatorResultProtocol:
        return NoneResult(data is None)

    return Validator(run, name="is_none")
