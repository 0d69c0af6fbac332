"""Model validation: registries of property-bound validators."""

from ryandata_validation.validation.base import Validatable, ValidatableModel
from ryandata_validation.validation.validations import ValidationEntry, Validations

__all__ = [
    "Validatable",
    "ValidatableModel",
    "ValidationEntry",
    "Validations",
]
