"""
Body matcher set: path-addressed matching rules for stubs and tests.

Exports:
    - MatchingType, AppliesTo, MatcherConflictPolicy: Enums
    - MatchingRule and the by_* rule constructors
    - RuleAssertion: Rule bound to the contract value it replaced (producer renders)
    - BodyMatcher, BodyMatchers: Path-bound rules and their ordered set
    - BodyPath: Parsed JSON-path subset
    - EffectiveAssertions, apply: Application to a resolved body
"""

from dualcontract.matchers.application import EffectiveAssertions, apply
from dualcontract.matchers.models import (
    AppliesTo,
    BodyMatcher,
    BodyMatchers,
    MatcherConflictPolicy,
    MatchingRule,
    MatchingType,
    RuleAssertion,
    by_command,
    by_date,
    by_equality,
    by_null,
    by_regex,
    by_time,
    by_timestamp,
    by_type,
)
from dualcontract.matchers.path import BodyPath

__all__ = [
    "AppliesTo",
    "BodyMatcher",
    "BodyMatchers",
    "BodyPath",
    "EffectiveAssertions",
    "MatcherConflictPolicy",
    "MatchingRule",
    "MatchingType",
    "RuleAssertion",
    "apply",
    "by_command",
    "by_date",
    "by_equality",
    "by_null",
    "by_regex",
    "by_time",
    "by_timestamp",
    "by_type",
]
