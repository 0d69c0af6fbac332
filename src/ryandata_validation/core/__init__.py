"""Core building blocks: validator type, results, combinators and errors."""

from __future__ import annotations

from ryandata_validation.core.errors import (
    GENERIC_IDENTIFIER,
    PACKAGE_NAME,
    NotComparableError,
    ValidationFailure,
)
from ryandata_validation.core.formatting import join_descriptions, natural_list
from ryandata_validation.core.results import AndResult, Invalid, NotResult, OrResult
from ryandata_validation.core.validator import Validator, and_, not_, or_

__all__ = [
    # Errors
    "GENERIC_IDENTIFIER",
    "PACKAGE_NAME",
    "NotComparableError",
    "ValidationFailure",
    # Results
    "AndResult",
    "Invalid",
    "NotResult",
    "OrResult",
    # Validator and combinators
    "Validator",
    "and_",
    "not_",
    "or_",
    # Formatting
    "join_descriptions",
    "natural_list",
]
