"""Composable validator type and its logical combinators.

A ``Validator`` wraps a pure function from a value to a result. Validators
compose with ``&`` (and), ``|`` (or) and ``~`` (not):

    >>> from ryandata_validation import count, alphanumeric, is_none, email
    >>> name_rule = count(minimum=5) & alphanumeric()
    >>> email_rule = is_none() | email()
    >>> name_rule.validate("Vapor").is_failure
    False

Both operands of ``&`` and ``|`` are always evaluated so the composed
descriptions are complete for either outcome.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from ryandata_validation.core.results import AndResult, NotResult, OrResult
from ryandata_validation.protocols import ValidatorResultProtocol

T = TypeVar("T")


@dataclass(frozen=True)
class Validator(Generic[T]):
    """A discrete, reusable validation rule.

    Attributes:
        validate: Function evaluating a value and returning its result.
        name: Label used in representations of composed validators.
    """

    validate: Callable[[T], ValidatorResultProtocol]
    name: str = "validator"

    def __call__(self, data: T) -> ValidatorResultProtocol:
        return self.validate(data)

    def __and__(self, other: Validator[T]) -> Validator[T]:
        return and_(self, other)

    def __or__(self, other: Validator[T]) -> Validator[T]:
        return or_(self, other)

    def __invert__(self) -> Validator[T]:
        return not_(self)

    def __repr__(self) -> str:
        return f"Validator({self.name})"


def and_(left: Validator[T], right: Validator[T]) -> Validator[T]:
    """Validator that fails if either operand fails."""

    def run(data: T) -> ValidatorResultProtocol:
        return AndResult(left.validate(data), right.validate(data))

    return Validator(run, name=f"({left.name} & {right.name})")


def or_(left: Validator[T], right: Validator[T]) -> Validator[T]:
    """Validator that fails only if both operands fail."""

    def run(data: T) -> ValidatorResultProtocol:
        return OrResult(left.validate(data), right.validate(data))

    return Validator(run, name=f"({left.name} | {right.name})")


def not_(validator: Validator[T]) -> Validator[T]:
    """Validator that fails exactly when the wrapped validator passes."""

    def run(data: T) -> ValidatorResultProtocol:
        return NotResult(validator.validate(data))

    return Validator(run, name=f"~{validator.name}")
