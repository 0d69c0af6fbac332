"""Property-based tests using Hypothesis for the validator algebra.

This module contains property tests that verify the logical laws of the
combinators and the invariants of the primitive validators.
"""

from __future__ import annotations

from typing import Any

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from ryandata_validation import RangeResult, RangeStatus, Validator, count, in_range, natural_list
from tests.strategies import int_validators, small_integers, short_text, text_validators

# =============================================================================
# Combinator Laws
# =============================================================================


class TestCombinatorLaws:
    """Logical laws that hold for every validator and input."""

    @given(int_validators, small_integers)
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_double_negation(self, validator: Validator[Any], value: int) -> None:
        """~~a has the same outcome and text as a."""
        original = validator.validate(value)
        doubled = (~~validator).validate(value)
        assert doubled.is_failure == original.is_failure
        assert doubled.success_description == original.success_description
        assert doubled.failure_description == original.failure_description

    @given(int_validators, int_validators, small_integers)
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_and_fails_if_either_fails(
        self, left: Validator[Any], right: Validator[Any], value: int
    ) -> None:
        expected = left.validate(value).is_failure or right.validate(value).is_failure
        assert (left & right).validate(value).is_failure == expected

    @given(int_validators, int_validators, small_integers)
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_or_fails_if_both_fail(
        self, left: Validator[Any], right: Validator[Any], value: int
    ) -> None:
        expected = left.validate(value).is_failure and right.validate(value).is_failure
        assert (left | right).validate(value).is_failure == expected

    @given(text_validators, text_validators, short_text)
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_de_morgan(self, left: Validator[Any], right: Validator[Any], value: str) -> None:
        """~(a & b) and ~a | ~b agree on every input."""
        assert (~(left & right)).validate(value).is_failure == (
            (~left | ~right).validate(value).is_failure
        )

    @given(text_validators, short_text)
    @settings(max_examples=100, suppress_health_check=[HealthCheck.too_slow])
    def test_negation_swaps_descriptions(self, validator: Validator[Any], value: str) -> None:
        original = validator.validate(value)
        negated = (~validator).validate(value)
        assert negated.is_failure is not original.is_failure
        assert negated.success_description == original.failure_description
        assert negated.failure_description == original.success_description

    @given(text_validators, short_text)
    @settings(max_examples=100, suppress_health_check=[HealthCheck.too_slow])
    def test_evaluation_is_deterministic(self, validator: Validator[Any], value: str) -> None:
        assert validator.validate(value) == validator.validate(value)


# =============================================================================
# Range Properties
# =============================================================================


class TestRangeProperties:
    """Properties of range classification."""

    @given(small_integers, small_integers, small_integers)
    def test_inclusive_bounds(self, a: int, b: int, value: int) -> None:
        low, high = min(a, b), max(a, b)
        result = in_range(minimum=low, maximum=high).validate(value)
        assert result.is_failure == (not low <= value <= high)

    @given(small_integers, st.integers(min_value=1, max_value=30), small_integers)
    def test_half_open_matches_builtin_membership(self, start: int, size: int, value: int) -> None:
        bounds = range(start, start + size)
        assert in_range(bounds).validate(value).is_failure == (value not in bounds)

    @given(small_integers)
    def test_no_bounds_is_within_range(self, value: int) -> None:
        assert RangeResult.classify(value).status is RangeStatus.WITHIN_RANGE

    @given(st.lists(st.integers(), max_size=10), st.integers(min_value=0, max_value=10))
    def test_count_uses_item_suffix(self, items: list[int], maximum: int) -> None:
        result = count(maximum=maximum).validate(items)
        assert result.is_failure == (len(items) > maximum)
        assert result.failure_description is not None
        assert result.failure_description.endswith("item(s)")

    @given(short_text, st.integers(min_value=0, max_value=12))
    def test_count_uses_character_suffix(self, text: str, minimum: int) -> None:
        result = count(minimum=minimum).validate(text)
        assert result.is_failure == (len(text) < minimum)
        assert result.success_description is not None
        assert result.success_description.endswith("character(s)")


# =============================================================================
# Formatting Properties
# =============================================================================


class TestNaturalListProperties:
    @given(st.lists(st.sampled_from(["A", "B", "C", "D"]), min_size=1, max_size=6))
    def test_every_item_is_listed(self, items: list[str]) -> None:
        rendered = natural_list(items)
        for item in items:
            assert item in rendered

    @given(st.lists(st.sampled_from(["A", "B", "C"]), min_size=3, max_size=6))
    def test_oxford_comma_for_three_or_more(self, items: list[str]) -> None:
        assert natural_list(items).endswith(f", or {items[-1]}")

    def test_small_lists(self) -> None:
        assert natural_list(["A"]) == "A"
        assert natural_list(["A", "B"]) == "A or B"
        assert natural_list(["A", "B", "C"]) == "A, B, or C"
        assert natural_list(["A", "B"], conjunction="and") == "A and B"
        assert natural_list([]) == ""
