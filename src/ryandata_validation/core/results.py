"""Result classes for validator evaluations.

Every result implements ValidatorResultProtocol. Results of the logical
combinators hold the results of their operands and derive both descriptions
from them, so composed text is always fully formed.
"""

from __future__ import annotations

from dataclasses import dataclass

from ryandata_validation.core.formatting import join_descriptions
from ryandata_validation.protocols import ValidatorResultProtocol


@dataclass(frozen=True)
class Invalid:
    """Generic failure carrying a reason.

    Attributes:
        reason: Why the value could not be validated.
    """

    reason: str

    @property
    def is_failure(self) -> bool:
        return True

    @property
    def success_description(self) -> str | None:
        return None

    @property
    def failure_description(self) -> str | None:
        return f"is invalid: {self.reason}"


@dataclass(frozen=True)
class NotResult:
    """Inverted result: the descriptions of the wrapped result are swapped."""

    result: ValidatorResultProtocol

    @property
    def is_failure(self) -> bool:
        return not self.result.is_failure

    @property
    def success_description(self) -> str | None:
        return self.result.failure_description

    @property
    def failure_description(self) -> str | None:
        return self.result.success_description


@dataclass(frozen=True)
class AndResult:
    """Conjunction of two results. Fails if either operand fails."""

    left: ValidatorResultProtocol
    right: ValidatorResultProtocol

    @property
    def is_failure(self) -> bool:
        return self.left.is_failure or self.right.is_failure

    @property
    def success_description(self) -> str | None:
        return join_descriptions(
            [self.left.success_description, self.right.success_description], " and "
        )

    @property
    def failure_description(self) -> str | None:
        failed = [r.failure_description for r in (self.left, self.right) if r.is_failure]
        described = join_descriptions(failed, " and ")
        if described is not None:
            return described
        return join_descriptions(
            [self.left.failure_description, self.right.failure_description], " and "
        )


@dataclass(frozen=True)
class OrResult:
    """Disjunction of two results. Fails only if both operands fail."""

    left: ValidatorResultProtocol
    right: ValidatorResultProtocol

    @property
    def is_failure(self) -> bool:
        return self.left.is_failure and self.right.is_failure

    @property
    def success_description(self) -> str | None:
        passed = [r.success_description for r in (self.left, self.right) if not r.is_failure]
        described = join_descriptions(passed, " or ")
        if described is not None:
            return described
        return join_descriptions(
            [self.left.success_description, self.right.success_description], " or "
        )

    @property
    def failure_description(self) -> str | None:
        return join_descriptions(
            [self.left.failure_description, self.right.failure_description], " or "
        )
