"""Stateful property-based tests using Hypothesis for registry workflows.

This module uses Hypothesis's RuleBasedStateMachine to register arbitrary
sequences of validations and check that the registry always reports the
first failing entry in registration order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import hypothesis.strategies as st
from hypothesis import HealthCheck, settings
from hypothesis.stateful import RuleBasedStateMachine, invariant, rule

from ryandata_validation import ValidationFailure, Validations, Validator
from tests.strategies import int_validators, small_integers

FIELDS = ["a", "b", "c"]


@dataclass
class Record:
    a: int
    b: int
    c: int


class ValidationsStateMachine(RuleBasedStateMachine):
    """State machine for testing registration order and error selection."""

    def __init__(self) -> None:
        super().__init__()
        self.validations: Validations[Record] = Validations(Record)
        self.registered: list[tuple[str, Validator[Any], str | None]] = []

    # =========================================================================
    # Registration rules
    # =========================================================================

    @rule(field=st.sampled_from(FIELDS), validator=int_validators)
    def add_with_path(self, field: str, validator: Validator[Any]) -> None:
        """Register a validator with a generated error."""
        self.validations.add(field, validator, at=f"field {field}")
        self.registered.append((field, validator, None))

    @rule(
        field=st.sampled_from(FIELDS),
        validator=int_validators,
        message=st.sampled_from(["bad value", "out of bounds", "rejected"]),
    )
    def add_with_message(self, field: str, validator: Validator[Any], message: str) -> None:
        """Register a validator with a custom message."""
        self.validations.add(field, validator, custom_message=message)
        self.registered.append((field, validator, message))

    # =========================================================================
    # Validation rule
    # =========================================================================

    @rule(a=small_integers, b=small_integers, c=small_integers)
    def validate_record(self, a: int, b: int, c: int) -> None:
        """The reported error belongs to the first failing registration."""
        record = Record(a=a, b=b, c=c)
        expected: str | None = None
        for field, validator, message in self.registered:
            result = validator.validate(getattr(record, field))
            if result.is_failure:
                if message is not None:
                    expected = message
                else:
                    description = result.failure_description
                    expected = (
                        f"field {field} {description}"
                        if description is not None
                        else f"field {field}"
                    )
                break

        if expected is None:
            self.validations.validate(record)
            return
        try:
            self.validations.validate(record)
        except ValidationFailure as error:
            assert error.reason == expected
        else:
            raise AssertionError("validate() did not raise for a failing record")

    # =========================================================================
    # Invariants
    # =========================================================================

    @invariant()
    def registration_order_is_preserved(self) -> None:
        assert len(self.validations) == len(self.registered)
        paths = [entry.path for entry in self.validations]
        expected = [f"field {f}" if m is None else f for f, _, m in self.registered]
        assert paths == expected


# Create pytest test case
TestValidations = ValidationsStateMachine.TestCase
TestValidations.settings = settings(
    max_examples=50,
    stateful_step_count=20,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
