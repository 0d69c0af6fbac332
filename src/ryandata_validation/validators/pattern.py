"""Text format validators: regular expressions, email addresses and URLs."""

from __future__ import annotations

import re
from dataclasses import dataclass

from pydantic import AnyUrl, EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ryandata_validation.core.validator import Validator
from ryandata_validation.protocols import ValidatorResultProtocol

_email_adapter: TypeAdapter[str] = TypeAdapter(EmailStr)
_url_adapter: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


@dataclass(frozen=True)
class PatternResult:
    """Result of a regular-expression validator."""

    is_valid_pattern: bool
    pattern: str

    @property
    def is_failure(self) -> bool:
        return not self.is_valid_pattern

    @property
    def success_description(self) -> str | None:
        return "is a valid pattern"

    @property
    def failure_description(self) -> str | None:
        return f"is not a valid pattern {self.pattern}"


@dataclass(frozen=True)
class EmailResult:
    """Result of the email validator."""

    is_valid_email: bool

    @property
    def is_failure(self) -> bool:
        return not self.is_valid_email

    @property
    def success_description(self) -> str | None:
        return "is a valid email address"

    @property
    def failure_description(self) -> str | None:
        return "is not a valid email address"


@dataclass(frozen=True)
class URLResult:
    """Result of the URL validator."""

    is_valid_url: bool

    @property
    def is_failure(self) -> bool:
        return not self.is_valid_url

    @property
    def success_description(self) -> str | None:
        return "is a valid URL"

    @property
    def failure_description(self) -> str | None:
        return "is an invalid URL"


def pattern(regex: str) -> Validator[str]:
    """Validate that the whole string matches a regular expression.

    Matching is anchored at both ends: a match covering only part of the
    input is a failure.

    Raises:
        re.error: If the expression does not compile.
    """
    compiled = re.compile(regex)

    def run(data: str) -> ValidatorResultProtocol:
        matched = isinstance(data, str) and compiled.fullmatch(data) is not None
        return PatternResult(matched, regex)

    return Validator(run, name=f"pattern({regex!r})")


def email() -> Validator[str]:
    """Validate that the string is an email address.

    Syntax only: the domain is not checked for deliverability.
    """

    def run(data: str) -> ValidatorResultProtocol:
        try:
            _email_adapter.validate_python(data)
        except PydanticValidationError:
            return EmailResult(False)
        return EmailResult(True)

    return Validator(run, name="email")


def url() -> Validator[str]:
    """Validate that the string is an absolute URL with a scheme.

    ``file:`` URLs need no host; other schemes do.
    """

    def run(data: str) -> ValidatorResultProtocol:
        try:
            parsed = _url_adapter.validate_python(data)
        except PydanticValidationError:
            return URLResult(False)
        return URLResult(parsed.scheme == "file" or bool(parsed.host))

    return Validator(run, name="url")
