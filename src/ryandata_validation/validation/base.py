"""Validatable contract and its Pydantic model base.

Also provides ValidatableModel, a Pydantic base model that runs its
registered validations as part of Pydantic validation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Self

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic_core import PydanticCustomError

from ryandata_validation.config import ValidationConfig
from ryandata_validation.core.errors import ValidationFailure
from ryandata_validation.validation.validations import Validations

__all__ = ["Validatable", "ValidatableModel"]


class Validatable(ABC):
    """Capable of being validated. Subclasses register their validations.

    Example:
        class User(Validatable):
            def __init__(self, name: str, age: int) -> None:
                self.name = name
                self.age = age

            @classmethod
            def register_validations(cls, validations: Validations[User]) -> None:
                validations.add("name", count(minimum=5) & alphanumeric())
                validations.add("age", in_range(minimum=18), custom_message="age is less than 18")

        User(name="Vapor", age=3).validate()  # raises ValidationFailure
    """

    @classmethod
    @abstractmethod
    def register_validations(cls, validations: Validations[Self]) -> None:
        """Register the validations run by validate().

        Args:
            validations: Empty registry to populate.
        """
        ...

    @classmethod
    def validations(cls) -> Validations[Self]:
        """Build a fresh registry configured by register_validations().

        Returns:
            The configured Validations instance.
        """
        validations: Validations[Self] = Validations(cls)
        cls.register_validations(validations)
        return validations

    def validate(self) -> None:
        """Validate the model, raising on the first failing validation.

        Raises:
            ValidationFailure: If any validation fails (or the custom error
                registered for that validation).
        """
        type(self).validations().validate(self)


class ValidatableModel(BaseModel, Validatable):
    """Pydantic model whose registered validations run after field validation.

    A failure surfaces as a pydantic.ValidationError whose error type is the
    failure identifier and whose message is its reason. Use
    ValidationFailure.from_validation_error() to recover the failure.
    Set RYANDATA_VALIDATION_ON_INIT=0 to only validate on explicit
    validate() calls.

    Note:
        validate() is an instance method running the registered validations.
        It replaces Pydantic's deprecated ``BaseModel.validate(data)``
        classmethod; build instances from data with ``model_validate(data)``.

    Example:
        class Pet(ValidatableModel):
            name: str
            age: int

            @classmethod
            def register_validations(cls, validations: Validations[Pet]) -> None:
                validations.add("age", in_range(minimum=3), at="age")

        Pet(name="Nina", age=1)  # raises pydantic.ValidationError
    """

    model_config = ConfigDict(
        # Subclasses can override this
        extra="ignore",
    )

    def validate(self) -> None:  # type: ignore[override]
        """Validate the model, raising on the first failing validation."""
        Validatable.validate(self)

    @model_validator(mode="after")
    def run_registered_validations(self) -> Self:
        if not ValidationConfig().validate_on_init:
            return self
        error = type(self).validations().first_failure(self)
        if error is None:
            return self
        if isinstance(error, ValidationFailure):
            raise error.for_pydantic()
        if isinstance(error, PydanticCustomError):
            raise error
        raise ValidationFailure.from_reason(
            getattr(error, "reason", str(error)),
            identifier=getattr(error, "identifier", type(error).__name__),
        ).for_pydantic()
