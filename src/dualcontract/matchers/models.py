"""
Body matcher domain models.

A body matcher attaches a matching rule ("by regex", "by type",
"by timestamp", ...) to a path in the body tree and says whether it is
meant for stub generation, test generation, or both.

Example:
    BodyMatchers((
        BodyMatcher("$.id.value", by_regex(any_integer()), AppliesTo.STUB),
        BodyMatcher("$.created", by_timestamp(), AppliesTo.TEST),
    ))
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any

from dualcontract.matchers.path import BodyPath
from dualcontract.model.values import Mode, strict_key
from dualcontract.patterns import (
    PatternKind,
    PatternMatcher,
    any_date,
    any_date_time,
    any_time,
    regex,
    resolve,
)
from dualcontract.shared.domain.exceptions import AmbiguousBodyMatcherError, ContractDefinitionError
from dualcontract.shared.infrastructure.config import settings
from dualcontract.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


class MatchingType(str, Enum):
    """How a value at a path is compared."""

    EQUALITY = "equality"
    TYPE = "type"
    REGEX = "regex"
    DATE = "date"
    TIME = "time"
    TIMESTAMP = "timestamp"
    NULL = "null"
    COMMAND = "command"  # Delegated to a method of the generated test


class AppliesTo(str, Enum):
    """Which render a body matcher refines."""

    STUB = "stub"  # Consumer-side fixtures only
    TEST = "test"  # Producer-side assertions only
    BOTH = "both"


class MatcherConflictPolicy(str, Enum):
    """Tie-break rule for several matchers on the same path and mode."""

    MOST_SPECIFIC = "most_specific"  # STUB/TEST beat BOTH, then last declaration wins
    LAST_DECLARED = "last_declared"  # Last declaration wins regardless of scope
    STRICT = "strict"  # Differing rules at the same specificity raise


_PATTERN_TYPES = {MatchingType.REGEX, MatchingType.DATE, MatchingType.TIME, MatchingType.TIMESTAMP}


@dataclass(frozen=True)
class MatchingRule:
    """A rule describing how the value at a path is matched."""

    matching_type: MatchingType
    pattern: PatternMatcher | None = None
    min_occurrence: int | None = None
    max_occurrence: int | None = None
    command: str | None = None

    def __post_init__(self) -> None:
        if self.matching_type in _PATTERN_TYPES and self.pattern is None:
            raise ContractDefinitionError(f"{self.matching_type.value} matching requires a pattern")
        if self.matching_type is MatchingType.COMMAND and not self.command:
            raise ContractDefinitionError("command matching requires a command")
        for bound in (self.min_occurrence, self.max_occurrence):
            if bound is not None and bound < 0:
                raise ContractDefinitionError("Occurrence bounds must not be negative")
        if (
            self.min_occurrence is not None
            and self.max_occurrence is not None
            and self.min_occurrence > self.max_occurrence
        ):
            raise ContractDefinitionError(
                f"min_occurrence ({self.min_occurrence}) is greater than max_occurrence ({self.max_occurrence})"
            )

    @property
    def is_pattern_based(self) -> bool:
        return self.matching_type in _PATTERN_TYPES

    def assertion(self, resolved: Any) -> Any:
        """
        Value placed in a producer-side render.

        Pattern-based rules yield their PatternMatcher and equality keeps the
        resolved literal. Type, null and command rules yield a RuleAssertion
        that keeps the contract literal for comparison.
        """
        if self.is_pattern_based:
            return self.pattern
        if self.matching_type is MatchingType.EQUALITY:
            return resolved
        return RuleAssertion(self, resolved)

    def stub_value(self, resolved: Any, seed: int | None = None) -> Any:
        """
        Value placed in a consumer-side render.

        Pattern-based rules keep a value that already matches and otherwise
        place the pattern's example; null rules place None.
        """
        if self.is_pattern_based:
            if self.pattern.matches(resolved):
                return resolved
            return self.pattern.example(seed)
        if self.matching_type is MatchingType.NULL:
            return None
        return resolved

    def matches(self, actual: Any, expected: Any = None) -> bool:
        """
        Evaluate the rule against a runtime value.

        Args:
            actual: Value received at runtime
            expected: Contract value at the same path (equality/type rules)

        Raises:
            ContractDefinitionError: For command rules, which only a test renderer can run
        """
        if self.is_pattern_based:
            return self.pattern.matches(actual)
        if self.matching_type is MatchingType.EQUALITY:
            return actual == expected
        if self.matching_type is MatchingType.NULL:
            return actual is None
        if self.matching_type is MatchingType.TYPE:
            if expected is not None and _json_type(actual) != _json_type(expected):
                return False
            if isinstance(actual, (list, tuple)):
                if self.min_occurrence is not None and len(actual) < self.min_occurrence:
                    return False
                if self.max_occurrence is not None and len(actual) > self.max_occurrence:
                    return False
            return True
        raise ContractDefinitionError(
            f"Command matcher '{self.command}' cannot be evaluated outside a generated test"
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        result: dict[str, Any] = {"type": self.matching_type.value}
        if self.pattern is not None:
            result["value"] = self.pattern.to_dict()
        if self.min_occurrence is not None:
            result["minTypeOccurrence"] = self.min_occurrence
        if self.max_occurrence is not None:
            result["maxTypeOccurrence"] = self.max_occurrence
        if self.command is not None:
            result["command"] = self.command
        return result


@dataclass(frozen=True)
class RuleAssertion:
    """
    A matching rule bound to the contract value it replaced.

    Usage:
        assertion = by_type().assertion(132)
        assertion.expected          # 132
        assertion.matches(7)        # True, same JSON type
        assertion.matches("7")      # False
    """

    rule: MatchingRule
    expected: Any = field(default=None, compare=False)
    expected_key: Any = field(init=False, repr=False)  # Type-strict comparison form of expected

    def __post_init__(self) -> None:
        object.__setattr__(self, "expected_key", strict_key(self.expected))

    def matches(self, actual: Any) -> bool:
        """Evaluate the rule against a runtime value and the bound contract value."""
        return self.rule.matches(actual, self.expected)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {**self.rule.to_dict(), "expected": self.expected}


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float, Decimal)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__


def by_equality() -> MatchingRule:
    return MatchingRule(MatchingType.EQUALITY)


def by_type(min_occurrence: int | None = None, max_occurrence: int | None = None) -> MatchingRule:
    return MatchingRule(MatchingType.TYPE, min_occurrence=min_occurrence, max_occurrence=max_occurrence)


def by_regex(pattern: str | re.Pattern | PatternMatcher | PatternKind) -> MatchingRule:
    """Match by a literal regex, a compiled pattern, or a named pattern kind."""
    if isinstance(pattern, PatternMatcher):
        matcher = pattern
    elif isinstance(pattern, PatternKind):
        matcher = resolve(pattern)
    else:
        matcher = regex(pattern)
    return MatchingRule(MatchingType.REGEX, pattern=matcher)


def by_date() -> MatchingRule:
    return MatchingRule(MatchingType.DATE, pattern=any_date())


def by_time() -> MatchingRule:
    return MatchingRule(MatchingType.TIME, pattern=any_time())


def by_timestamp() -> MatchingRule:
    return MatchingRule(MatchingType.TIMESTAMP, pattern=any_date_time())


def by_null() -> MatchingRule:
    return MatchingRule(MatchingType.NULL)


def by_command(command: str) -> MatchingRule:
    return MatchingRule(MatchingType.COMMAND, command=command)


@dataclass(frozen=True)
class BodyMatcher:
    """A matching rule bound to a body path."""

    path: BodyPath
    rule: MatchingRule
    applies_to: AppliesTo = AppliesTo.BOTH

    def __post_init__(self) -> None:
        if isinstance(self.path, str):
            object.__setattr__(self, "path", BodyPath.parse(self.path))
        object.__setattr__(self, "applies_to", AppliesTo(self.applies_to))

    def applies_in(self, mode: Mode) -> bool:
        """True if this matcher is consulted when rendering for the mode."""
        if self.applies_to is AppliesTo.BOTH:
            return True
        if mode is Mode.CONSUMER:
            return self.applies_to is AppliesTo.STUB
        return self.applies_to is AppliesTo.TEST

    @property
    def specificity(self) -> int:
        return 0 if self.applies_to is AppliesTo.BOTH else 1

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"path": self.path.canonical, "appliesTo": self.applies_to.value, **self.rule.to_dict()}


@dataclass(frozen=True)
class BodyMatchers:
    """Ordered, declaration-preserving set of body matchers."""

    entries: tuple[BodyMatcher, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", tuple(self.entries))

    def __iter__(self) -> Iterator[BodyMatcher]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def has_matchers(self) -> bool:
        """Whether body-level custom matching is needed at all."""
        return bool(self.entries)

    def with_matcher(self, matcher: BodyMatcher) -> BodyMatchers:
        """Return a copy with one more matcher appended."""
        return BodyMatchers(self.entries + (matcher,))

    def effective(
        self,
        mode: Mode,
        policy: MatcherConflictPolicy | str | None = None,
    ) -> tuple[BodyMatcher, ...]:
        """
        Matchers in force for a mode, at most one per path.

        Args:
            mode: Render side
            policy: Conflict policy (defaults to the configured policy)

        Returns:
            Winning matchers in the declaration order of the winners

        Raises:
            AmbiguousBodyMatcherError: Under the strict policy, when rules conflict
        """
        mode = Mode(mode)
        active_policy = MatcherConflictPolicy(policy or settings.body_matcher_conflict_policy)

        candidates: dict[str, list[tuple[int, BodyMatcher]]] = {}
        for index, entry in enumerate(self.entries):
            if entry.applies_in(mode):
                candidates.setdefault(entry.path.canonical, []).append((index, entry))

        winners = [
            _pick_winner(path, entries, mode, active_policy) for path, entries in candidates.items()
        ]
        winners.sort(key=lambda item: item[0])
        return tuple(entry for _, entry in winners)

    def to_dict(self) -> list[dict[str, Any]]:
        """Convert to a list of entries for serialization."""
        return [entry.to_dict() for entry in self.entries]


def _pick_winner(
    path: str,
    candidates: list[tuple[int, BodyMatcher]],
    mode: Mode,
    policy: MatcherConflictPolicy,
) -> tuple[int, BodyMatcher]:
    if len(candidates) == 1:
        return candidates[0]

    if policy is MatcherConflictPolicy.LAST_DECLARED:
        winner = candidates[-1]
    else:
        top = max(entry.specificity for _, entry in candidates)
        contenders = [item for item in candidates if item[1].specificity == top]
        if policy is MatcherConflictPolicy.STRICT and len({entry.rule for _, entry in contenders}) > 1:
            raise AmbiguousBodyMatcherError(
                f"Conflicting body matchers for path {path} in {mode.value} mode",
                context={"path": path, "mode": mode.value, "count": len(contenders)},
            )
        winner = contenders[-1]

    logger.debug(
        "body_matcher_conflict_resolved",
        path=path,
        mode=mode.value,
        policy=policy.value,
        candidates=len(candidates),
        winner_index=winner[0],
    )
    return winner
