"""Ordered registry of property-bound validators for a model type.

Entries are evaluated in registration order and evaluation stops at the
first failure, which is converted into a single reported error.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Generic, Self, TypeVar

from ryandata_validation.config import ValidationConfig
from ryandata_validation.core.errors import ValidationFailure
from ryandata_validation.core.validator import Validator
from ryandata_validation.protocols import ValidationErrorProtocol, ValidatorResultProtocol

logger = logging.getLogger(__name__)

M = TypeVar("M")
T = TypeVar("T")


@dataclass(frozen=True)
class ValidationEntry(Generic[M]):
    """A validator bound to one property of a model.

    Attributes:
        path: Readable path of the property, used in generated errors.
        run: Extracts the property from a model and evaluates the validator.
        custom_error: Error reported instead of a generated one.
        custom_message: Reason reported instead of a generated one.
    """

    path: str
    run: Callable[[M], ValidatorResultProtocol]
    custom_error: BaseException | None = None
    custom_message: str | None = None

    def error_for(self, result: ValidatorResultProtocol) -> BaseException:
        """Resolve the error to report for a failing result.

        Priority: custom error, then custom message, then
        "<path> <failure description>".
        """
        if self.custom_error is not None:
            return self.custom_error
        if self.custom_message is not None:
            return ValidationFailure.from_reason(self.custom_message, context={"path": self.path})
        description = result.failure_description
        reason = f"{self.path} {description}" if description is not None else self.path
        return ValidationFailure.from_reason(reason, context={"path": self.path})


def _resolve_accessor(accessor: Callable[[M], Any] | str) -> Callable[[M], Any]:
    if isinstance(accessor, str):
        return attrgetter(accessor)
    if callable(accessor):
        return accessor
    raise TypeError(f"Accessor must be an attribute name or a callable, got {accessor!r}")


class Validations(Generic[M]):
    """Holds zero or more validations for a model type.

    Example:
        >>> validations: Validations[User] = Validations(User)
        >>> validations.add("name", count(minimum=5) & alphanumeric())
        >>> validations.add(lambda u: u.age, in_range(minimum=18), custom_message="too young")
        >>> validations.validate(user)
    """

    def __init__(
        self, model: type[M] | None = None, config: ValidationConfig | None = None
    ) -> None:
        """Create an empty registry.

        Args:
            model: Model type the registry validates (informational).
            config: Configuration; read from the environment if omitted.
        """
        self._model = model
        self._config = config or ValidationConfig()
        self._entries: list[ValidationEntry[M]] = []

    def add(
        self,
        accessor: Callable[[M], T] | str,
        validator: Validator[T] | Validator[Any],
        *,
        at: str | None = None,
        custom_error: BaseException | None = None,
        custom_message: str | None = None,
    ) -> Self:
        """Add a validation for one property of the model.

        Args:
            accessor: Callable returning the property value from a model, or
                a (dotted) attribute name.
            validator: Validator to run on the property value.
            at: Readable path shown in generated errors. Defaults to the
                attribute name, or the configured default path.
            custom_error: Exception with ``identifier`` and ``reason`` raised
                when this validation fails.
            custom_message: Reason of the generic error raised when this
                validation fails.

        Returns:
            Self, for chaining.

        Raises:
            TypeError: If the accessor or custom error is unusable.
        """
        if custom_error is not None and not (
            isinstance(custom_error, BaseException)
            and isinstance(custom_error, ValidationErrorProtocol)
        ):
            raise TypeError(
                "custom_error must be an exception providing 'identifier' and 'reason', "
                f"got {custom_error!r}"
            )
        getter = _resolve_accessor(accessor)
        if at is not None:
            path = at
        elif isinstance(accessor, str):
            path = accessor
        else:
            path = self._config.default_path

        def run(model: M) -> ValidatorResultProtocol:
            return validator.validate(getter(model))

        self._entries.append(
            ValidationEntry(
                path=path,
                run=run,
                custom_error=custom_error,
                custom_message=custom_message,
            )
        )
        return self

    def first_failure(self, model: M) -> BaseException | None:
        """Evaluate entries in order and return the error of the first failure.

        Later entries are not evaluated once one fails.

        Args:
            model: Instance to validate.

        Returns:
            The error to report, or None if every entry passes.
        """
        for entry in self._entries:
            result = entry.run(model)
            if result.is_failure:
                if self._config.log_failures:
                    logger.debug(
                        "Validation failed at %s: %s", entry.path, result.failure_description
                    )
                return entry.error_for(result)
        logger.debug(
            "Validated %s against %d validation(s)", type(model).__name__, len(self._entries)
        )
        return None

    def validate(self, model: M) -> None:
        """Validate an instance of the model.

        Raises:
            ValidationFailure: For the first failing validation, unless that
                validation carries a custom error, which is raised instead.
        """
        error = self.first_failure(model)
        if error is not None:
            raise error

    def is_valid(self, model: M) -> bool:
        """Check whether every validation passes, without raising."""
        return self.first_failure(model) is None

    @property
    def entries(self) -> list[ValidationEntry[M]]:
        """Get copy of the entries list, in evaluation order."""
        return self._entries.copy()

    @property
    def model(self) -> type[M] | None:
        return self._model

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ValidationEntry[M]]:
        return iter(self._entries)

    def __repr__(self) -> str:
        model_name = self._model.__name__ if self._model is not None else "Any"
        paths = ", ".join(entry.path for entry in self._entries)
        return f"Validations[{model_name}]({paths})"
