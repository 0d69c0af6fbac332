from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ryandata_validation.validation.validations import Validations


@runtime_checkable
class ValidatorResultProtocol(Protocol):
    """Protocol for the outcome of a single validator evaluation.

    ``is_failure`` is the only value used for decisions. The two descriptions
    are presentation-only and may be None when a validator declines to
    describe that branch. Both must be computable whatever the outcome, since
    negation swaps them.
    """

    @property
    def is_failure(self) -> bool:
        """True if the evaluated value did not pass."""
        ...

    @property
    def success_description(self) -> str | None:
        """Text describing a passing value, if any."""
        ...

    @property
    def failure_description(self) -> str | None:
        """Text describing a failing value, if any."""
        ...


@runtime_checkable
class ValidationErrorProtocol(Protocol):
    """Protocol for errors reported by a validation registry.

    Custom errors attached to a registry entry must be exceptions that
    provide these two members.
    """

    @property
    def identifier(self) -> str:
        """Stable machine-readable tag."""
        ...

    @property
    def reason(self) -> str:
        """Human-readable text."""
        ...


@runtime_checkable
class ValidatableProtocol(Protocol):
    """Protocol for models that can validate themselves."""

    @classmethod
    def validations(cls) -> Validations:
        """Build a fresh registry configured for this model type."""
        ...

    def validate(self) -> None:
        """Raise ValidationFailure on the first failing validation."""
        ...
