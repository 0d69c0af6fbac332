"""Membership validators: enumeration cases and explicit value lists."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ryandata_validation.core.formatting import natural_list
from ryandata_validation.core.validator import Validator
from ryandata_validation.protocols import ValidatorResultProtocol


@dataclass(frozen=True)
class MembershipResult:
    """Result of a validator checking a value against a list of valid items.

    Attributes:
        is_member: The value is one of the items.
        items: Display form of every valid item, in declaration order.
    """

    is_member: bool
    items: tuple[str, ...]

    @property
    def is_failure(self) -> bool:
        return not self.is_member

    @property
    def success_description(self) -> str | None:
        return self._make_description(negated=False)

    @property
    def failure_description(self) -> str | None:
        return self._make_description(negated=True)

    def _make_description(self, negated: bool) -> str:
        prefix = "is not" if negated else "is"
        return f"{prefix} {natural_list(self.items)}"


def _is_case(enum_type: type[Enum], raw_value: Any) -> bool:
    try:
        enum_type(raw_value)
    except ValueError:
        return False
    return True


def case_of(enum_type: type[Enum]) -> Validator[Any]:
    """Validate that the raw value matches one of the enumeration's cases.

    Descriptions list every case value: "is A", "is A or B", "is A, B, or C".

    Raises:
        ValueError: If the enumeration declares no members.
    """
    items = tuple(str(member.value) for member in enum_type)
    if not items:
        raise ValueError(f"Enumeration {enum_type.__name__} has no members")

    def run(data: Any) -> ValidatorResultProtocol:
        return MembershipResult(_is_case(enum_type, data), items)

    return Validator(run, name=f"case_of({enum_type.__name__})")


def one_of(*values: Any) -> Validator[Any]:
    """Validate that the data equals one of the supplied values.

    Raises:
        ValueError: If no values are supplied.
    """
    if not values:
        raise ValueError("one_of() requires at least one value")
    items = tuple(str(value) for value in values)

    def run(data: Any) -> ValidatorResultProtocol:
        return MembershipResult(data in values, items)

    return Validator(run, name=f"one_of({', '.join(items)})")
