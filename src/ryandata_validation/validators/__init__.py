"""Primitive validators.

Each constructor returns a ``Validator`` that can be composed with
``&``, ``|`` and ``~``.
"""

from ryandata_validation.validators.characters import (
    ALPHANUMERICS,
    ASCII,
    DIGITS,
    LETTERS,
    WHITESPACES,
    CharacterSetResult,
    alphanumeric,
    ascii_only,
    character_set,
)
from ryandata_validation.validators.membership import MembershipResult, case_of, one_of
from ryandata_validation.validators.pattern import (
    EmailResult,
    PatternResult,
    URLResult,
    email,
    pattern,
    url,
)
from ryandata_validation.validators.presence import EmptyResult, NoneResult, empty, is_none
from ryandata_validation.validators.range import (
    NOT_COMPARABLE,
    RangeResult,
    RangeStatus,
    RangeValidatorResult,
    count,
    in_range,
)

__all__ = [
    # Range and count
    "NOT_COMPARABLE",
    "RangeResult",
    "RangeStatus",
    "RangeValidatorResult",
    "count",
    "in_range",
    # Text formats
    "EmailResult",
    "PatternResult",
    "URLResult",
    "email",
    "pattern",
    "url",
    # Membership
    "MembershipResult",
    "case_of",
    "one_of",
    # Presence
    "EmptyResult",
    "NoneResult",
    "empty",
    "is_none",
    # Character classes
    "ALPHANUMERICS",
    "ASCII",
    "DIGITS",
    "LETTERS",
    "WHITESPACES",
    "CharacterSetResult",
    "alphanumeric",
    "ascii_only",
    "character_set",
]
