"""ryandata-validation: composable validators for model properties.

This package provides a fail-fast validation engine with:
- A composable ``Validator`` type (``&``, ``|``, ``~``)
- Primitive validators (range, count, pattern, enum cases, emptiness, absence)
- An ordered ``Validations`` registry binding validators to model properties
- A ``Validatable`` contract and a Pydantic ``ValidatableModel`` base

Quick Start:
    >>> from ryandata_validation import Validatable, Validations, count, in_range, alphanumeric
    >>> class User(Validatable):
    ...     def __init__(self, name: str, age: int) -> None:
    ...         self.name = name
    ...         self.age = age
    ...
    ...     @classmethod
    ...     def register_validations(cls, validations: Validations[User]) -> None:
    ...         validations.add("name", count(minimum=5) & alphanumeric())
    ...         validations.add("age", in_range(minimum=18), custom_message="age is less than 18")
    >>> User("Natan", 30).validate()

    # Errors carry an identifier and a reason
    >>> try:
    ...     User("Nat", 30).validate()
    ... except ValidationFailure as error:
    ...     print(error.reason)
    name is less than minimum of 5 character(s)
"""

from __future__ import annotations  # noqa: I001

from ryandata_validation.config import ValidationConfig
from ryandata_validation.core import (
    GENERIC_IDENTIFIER,
    PACKAGE_NAME,
    AndResult,
    Invalid,
    NotComparableError,
    NotResult,
    OrResult,
    ValidationFailure,
    Validator,
    and_,
    natural_list,
    not_,
    or_,
)
from ryandata_validation.protocols import (
    ValidatableProtocol,
    ValidationErrorProtocol,
    ValidatorResultProtocol,
)
from ryandata_validation.validators import (
    ALPHANUMERICS,
    ASCII,
    DIGITS,
    LETTERS,
    WHITESPACES,
    RangeResult,
    RangeStatus,
    alphanumeric,
    ascii_only,
    case_of,
    character_set,
    count,
    email,
    empty,
    in_range,
    is_none,
    one_of,
    pattern,
    url,
)
from ryandata_validation.validation import (
    Validatable,
    ValidatableModel,
    ValidationEntry,
    Validations,
)

__version__ = "0.1.0"
__package_name__ = "ryandata-validation"

__all__ = [
    # Version
    "__version__",
    # Primary interface
    "Validatable",
    "ValidatableModel",
    "Validations",
    "ValidationEntry",
    "ValidationConfig",
    # Validator and combinators
    "Validator",
    "and_",
    "or_",
    "not_",
    # Results
    "AndResult",
    "Invalid",
    "NotResult",
    "OrResult",
    "RangeResult",
    "RangeStatus",
    # Primitive validators
    "in_range",
    "count",
    "pattern",
    "email",
    "url",
    "case_of",
    "one_of",
    "empty",
    "is_none",
    "character_set",
    "ascii_only",
    "alphanumeric",
    # Character groups
    "ALPHANUMERICS",
    "ASCII",
    "DIGITS",
    "LETTERS",
    "WHITESPACES",
    # Errors
    "GENERIC_IDENTIFIER",
    "PACKAGE_NAME",
    "NotComparableError",
    "ValidationFailure",
    # Protocols
    "ValidatableProtocol",
    "ValidationErrorProtocol",
    "ValidatorResultProtocol",
    # Utilities
    "natural_list",
]
