"""Character-class validators for strings."""

from __future__ import annotations

import string
from dataclasses import dataclass

from ryandata_validation.core.results import Invalid
from ryandata_validation.core.validator import Validator
from ryandata_validation.protocols import ValidatorResultProtocol

LETTERS = string.ascii_letters
DIGITS = string.digits
ALPHANUMERICS = LETTERS + DIGITS
WHITESPACES = string.whitespace
ASCII = "".join(chr(code) for code in range(128))


@dataclass(frozen=True)
class CharacterSetResult:
    """Result of a character-class validator.

    Attributes:
        invalid_character: First character outside the allowed set, if any.
        allowed: Display name of the allowed set.
    """

    invalid_character: str | None
    allowed: str

    @property
    def is_failure(self) -> bool:
        return self.invalid_character is not None

    @property
    def success_description(self) -> str | None:
        return f"contains only {self.allowed}"

    @property
    def failure_description(self) -> str | None:
        if self.invalid_character is None:
            return f"does not contain only {self.allowed}"
        return (
            f"contains an invalid character: {self.invalid_character!r} "
            f"(allowed: {self.allowed})"
        )


def _describe(groups: tuple[str, ...]) -> str:
    names = {
        LETTERS: "A-Z, a-z",
        DIGITS: "0-9",
        ALPHANUMERICS: "A-Z, a-z, 0-9",
        WHITESPACES: "whitespace",
        ASCII: "ASCII",
    }
    return ", ".join(names.get(group, group) for group in groups)


def character_set(*groups: str, name: str | None = None) -> Validator[str]:
    """Validate that every character of the string belongs to the allowed groups.

    Args:
        *groups: Strings of allowed characters, e.g. ALPHANUMERICS, WHITESPACES.
        name: Display name of the allowed set (derived from groups if omitted).

    Raises:
        ValueError: If no characters are allowed.
    """
    allowed = frozenset("".join(groups))
    if not allowed:
        raise ValueError("character_set() requires at least one allowed character")
    display = name or _describe(groups)

    def run(data: str) -> ValidatorResultProtocol:
        if not isinstance(data, str):
            return Invalid("not a string")
        invalid = next((char for char in data if char not in allowed), None)
        return CharacterSetResult(invalid, display)

    return Validator(run, name=f"character_set({display})")


def ascii_only() -> Validator[str]:
    """Validate that the string contains only ASCII characters."""
    return character_set(ASCII)


def alphanumeric() -> Validator[str]:
    """Validate that the string contains only ASCII letters and digits."""
    return character_set(ALPHANUMERICS)
