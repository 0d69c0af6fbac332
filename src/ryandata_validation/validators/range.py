"""Range and count validators.

Range validators classify a value against optional inclusive bounds. A
builtin ``range`` may be passed as bounds; being half-open, its upper bound
is stored as ``stop - 1``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from ryandata_validation.core.errors import NotComparableError
from ryandata_validation.core.results import Invalid
from ryandata_validation.core.validator import Validator
from ryandata_validation.protocols import ValidatorResultProtocol

C = TypeVar("C")

NOT_COMPARABLE = "not comparable"


class RangeStatus(str, Enum):
    """Position of a value relative to a range."""

    BELOW_MINIMUM = "below_minimum"
    ABOVE_MAXIMUM = "above_maximum"
    WITHIN_RANGE = "within_range"


@dataclass(frozen=True)
class RangeResult(Generic[C]):
    """Classification of a value against optional lower and upper bounds.

    Attributes:
        status: Where the value lies relative to the bounds.
        minimum: Inclusive lower bound, None if unbounded.
        maximum: Inclusive upper bound, None if unbounded.
    """

    status: RangeStatus
    minimum: C | None = None
    maximum: C | None = None

    @classmethod
    def classify(
        cls, value: Any, minimum: C | None = None, maximum: C | None = None
    ) -> RangeResult[C]:
        """Classify a value against the bounds.

        A value is always within range when both bounds are absent.

        Raises:
            NotComparableError: If the value cannot be compared with a bound.
        """
        try:
            if minimum is not None and value < minimum:
                return cls(RangeStatus.BELOW_MINIMUM, minimum, maximum)
            if maximum is not None and value > maximum:
                return cls(RangeStatus.ABOVE_MAXIMUM, minimum, maximum)
        except TypeError as exc:
            raise NotComparableError(
                f"cannot compare {type(value).__name__} with range bounds"
            ) from exc
        return cls(RangeStatus.WITHIN_RANGE, minimum, maximum)

    @property
    def is_within_range(self) -> bool:
        return self.status is RangeStatus.WITHIN_RANGE

    @property
    def description(self) -> str:
        """Describe the classification, e.g. "less than minimum of 5"."""
        if self.status is RangeStatus.BELOW_MINIMUM:
            return f"less than minimum of {self.minimum}"
        if self.status is RangeStatus.ABOVE_MAXIMUM:
            return f"greater than maximum of {self.maximum}"
        if self.minimum is not None and self.maximum is not None:
            return f"between {self.minimum} and {self.maximum}"
        if self.minimum is not None:
            return f"greater than or equal to minimum of {self.minimum}"
        if self.maximum is not None:
            return f"less than or equal to maximum of {self.maximum}"
        return "within range"


@dataclass(frozen=True)
class RangeValidatorResult(Generic[C]):
    """Result of a range or count validator.

    Attributes:
        result: Classification of the validated value.
        suffix: Unit appended to descriptions, e.g. "character".
    """

    result: RangeResult[C]
    suffix: str | None = None

    @property
    def is_failure(self) -> bool:
        return not self.result.is_within_range

    @property
    def success_description(self) -> str | None:
        return self._description

    @property
    def failure_description(self) -> str | None:
        return self._description

    @property
    def _description(self) -> str:
        if self.suffix:
            return f"is {self.result.description} {self.suffix}(s)"
        return f"is {self.result.description}"


def _resolve_bounds(bounds: range | None, minimum: Any, maximum: Any) -> tuple[Any, Any]:
    """Turn a builtin range or explicit bounds into inclusive (minimum, maximum)."""
    if bounds is not None:
        if minimum is not None or maximum is not None:
            raise ValueError("Pass either a range or minimum/maximum, not both")
        if bounds.step != 1:
            raise ValueError(f"Range bounds must have a step of 1, got {bounds.step}")
        if len(bounds) == 0:
            raise ValueError(f"Range bounds must not be empty: {bounds!r}")
        return bounds.start, bounds.stop - 1
    if minimum is not None and maximum is not None and minimum > maximum:
        raise ValueError(f"Minimum {minimum!r} is greater than maximum {maximum!r}")
    return minimum, maximum


def _keyed_range(
    minimum: Any,
    maximum: Any,
    key: Callable[[Any], Any] | None,
    suffix: Callable[[Any], str | None],
    name: str,
) -> Validator[Any]:
    def run(data: Any) -> ValidatorResultProtocol:
        try:
            value = key(data) if key is not None else data
            result: RangeResult[Any] = RangeResult.classify(value, minimum, maximum)
        except NotComparableError:
            return Invalid(NOT_COMPARABLE)
        return RangeValidatorResult(result, suffix(data))

    return Validator(run, name=name)


def in_range(
    bounds: range | None = None,
    *,
    minimum: Any = None,
    maximum: Any = None,
) -> Validator[Any]:
    """Validate that the data is within inclusive bounds.

    Args:
        bounds: Half-open integer range; ``range(-5, 6)`` accepts -5 to 5.
        minimum: Inclusive lower bound for any comparable type.
        maximum: Inclusive upper bound for any comparable type.

    Returns:
        Validator failing with "is less than minimum of <min>" or
        "is greater than maximum of <max>".

    Raises:
        ValueError: If the bounds are inconsistent.
    """
    low, high = _resolve_bounds(bounds, minimum, maximum)
    return _keyed_range(low, high, None, lambda _: None, f"in_range({low}, {high})")


def _length(data: Any) -> int:
    try:
        return len(data)
    except TypeError as exc:
        raise NotComparableError(f"{type(data).__name__} has no length") from exc


def _count_unit(data: Any) -> str:
    return "character" if isinstance(data, str) else "item"


def count(
    bounds: range | None = None,
    *,
    minimum: int | None = None,
    maximum: int | None = None,
) -> Validator[Any]:
    """Validate that the number of elements of the data is within bounds.

    Descriptions use "character(s)" for strings and "item(s)" for any other
    sized container.

    Args:
        bounds: Half-open integer range of allowed counts.
        minimum: Inclusive minimum count.
        maximum: Inclusive maximum count.

    Returns:
        Validator on the element count.
    """
    low, high = _resolve_bounds(bounds, minimum, maximum)
    return _keyed_range(low, high, _length, _count_unit, f"count({low}, {high})")
