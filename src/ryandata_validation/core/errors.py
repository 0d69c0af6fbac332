"""Validation error classes with package identification.

``ValidationFailure`` is the single user-visible error kind raised by a
validation registry. It wraps a Pydantic custom error so that failures raised
inside Pydantic validators keep their identifier and reason.
"""

from __future__ import annotations

from typing import Any

from pydantic_core import PydanticCustomError

# Package identifier for error context
PACKAGE_NAME = "ryandata_validation"

# Identifier used for every failure that does not carry a custom error
GENERIC_IDENTIFIER = "validation failed"


class ValidationFailure(PydanticCustomError):
    """Error raised for the first failing validation of a model.

    Inherits from PydanticCustomError: ``type`` holds the machine-readable
    identifier and the message template holds the human-readable reason.
    The reason is reported as written: placeholders such as ``{path}`` are
    never filled in from the context.

    Example:
        >>> error = ValidationFailure.from_reason("name is not empty")
        >>> error.identifier
        'validation failed'
        >>> error.reason
        'name is not empty'
    """

    @property
    def identifier(self) -> str:
        """Stable machine-readable tag of the error."""
        return self.type

    @property
    def reason(self) -> str:
        """Human-readable reason of the error."""
        return self.message_template

    @classmethod
    def from_reason(
        cls,
        reason: str,
        identifier: str = GENERIC_IDENTIFIER,
        context: dict[str, Any] | None = None,
    ) -> ValidationFailure:
        """Create a failure from a plain reason.

        Args:
            reason: Human-readable text of the failure.
            identifier: Machine-readable tag (defaults to "validation failed").
            context: Additional context merged into the error context.

        Returns:
            ValidationFailure instance.
        """
        return cls(identifier, reason, {"package": PACKAGE_NAME, **(context or {})})

    @classmethod
    def from_pydantic_error(cls, error: PydanticCustomError) -> ValidationFailure:
        """Wrap a PydanticCustomError as ValidationFailure.

        Args:
            error: The PydanticCustomError to wrap.

        Returns:
            ValidationFailure with the same type, message and context.
        """
        return cls(error.type, error.message(), error.context)

    @classmethod
    def from_validation_error(
        cls, error: Exception, context: dict[str, Any] | None = None
    ) -> ValidationFailure:
        """Extract the failure from a pydantic.ValidationError.

        The first error entry of the ValidationError is used. Any other
        exception is converted using its string representation.

        Args:
            error: The ValidationError (or other exception) to convert.
            context: Additional context to include in the error.

        Returns:
            ValidationFailure instance.
        """
        from pydantic import ValidationError

        if isinstance(error, ValidationError):
            for err_dict in error.errors():
                ctx = {"package": PACKAGE_NAME, **(err_dict.get("ctx") or {}), **(context or {})}
                return cls(
                    err_dict.get("type", GENERIC_IDENTIFIER),
                    err_dict.get("msg", str(error)),
                    ctx,
                )
        return cls.from_reason(str(error), context=context)

    def for_pydantic(self) -> ValidationFailure:
        """Copy of the error whose pydantic message is exactly its reason.

        Pydantic fills ``{key}`` placeholders of the message from the context,
        so context entries that the reason names as placeholders are dropped.
        """
        context = {
            key: value
            for key, value in (self.context or {}).items()
            if f"{{{key}}}" not in self.message_template
        }
        return type(self)(self.type, self.message_template, context)

    def __str__(self) -> str:
        return self.reason

    def __repr__(self) -> str:
        return f"ValidationFailure(identifier={self.identifier!r}, reason={self.reason!r})"


class NotComparableError(TypeError):
    """Raised when a value cannot be compared against configured range bounds.

    Internal: range validators catch it and report an ``Invalid`` result.
    """
