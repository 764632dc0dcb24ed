"""
Process-wide pattern registry.

The registry is built once at import time and exposed read-only. Named
kinds are interned (one shared matcher per kind); literal regex matchers
are cached per (pattern, flags).
"""

from __future__ import annotations

import functools
import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from dualcontract.patterns import generators, regex_patterns
from dualcontract.patterns.models import PatternKind, PatternMatcher
from dualcontract.shared.domain.exceptions import InvalidPatternError, UnknownPatternKindError
from dualcontract.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


_CANONICAL: dict[PatternKind, tuple[str, generators.ExampleGenerator]] = {
    PatternKind.NON_BLANK_STRING: (regex_patterns.NON_BLANK, generators.non_blank_string),
    PatternKind.NON_EMPTY: (regex_patterns.NON_EMPTY, generators.non_blank_string),
    PatternKind.ANY_STRING: (regex_patterns.ANY_STRING, generators.non_blank_string),
    PatternKind.ANY_BOOLEAN: (regex_patterns.TRUE_OR_FALSE, generators.any_boolean),
    PatternKind.ANY_NUMBER: (regex_patterns.NUMBER, generators.any_number),
    PatternKind.ANY_INTEGER: (regex_patterns.INTEGER, generators.any_integer),
    PatternKind.ANY_POSITIVE_INT: (regex_patterns.POSITIVE_INT, generators.any_positive_int),
    PatternKind.ANY_DECIMAL: (regex_patterns.DOUBLE, generators.any_double),
    PatternKind.ANY_HEX: (regex_patterns.HEX, generators.any_hex),
    PatternKind.ANY_ALPHANUMERIC: (regex_patterns.ALPHA_NUMERIC, generators.any_alpha_numeric),
    PatternKind.ONLY_ALPHA_UNICODE: (regex_patterns.ONLY_ALPHA_UNICODE, generators.any_alpha_unicode),
    PatternKind.ANY_URL: (regex_patterns.URL, generators.any_url),
    PatternKind.ANY_HTTPS_URL: (regex_patterns.HTTPS_URL, generators.any_https_url),
    PatternKind.ANY_IP_ADDRESS: (regex_patterns.IP_ADDRESS, generators.any_ip_address),
    PatternKind.ANY_HOSTNAME: (regex_patterns.HOSTNAME, generators.any_hostname),
    PatternKind.ANY_EMAIL: (regex_patterns.EMAIL, generators.any_email),
    PatternKind.ANY_UUID: (regex_patterns.UUID, generators.any_uuid),
    PatternKind.ANY_DATE: (regex_patterns.ANY_DATE, generators.any_date),
    PatternKind.ANY_TIME: (regex_patterns.ANY_TIME, generators.any_time),
    PatternKind.ANY_DATE_TIME: (regex_patterns.ANY_DATE_TIME, generators.any_date_time),
    PatternKind.ISO8601_WITH_OFFSET: (regex_patterns.ISO8601_WITH_OFFSET, generators.iso8601_with_offset),
}


def parse_kind(kind: PatternKind | str) -> PatternKind:
    """
    Normalize a kind given as enum, value ("any_number") or name ("ANY_NUMBER").

    Raises:
        UnknownPatternKindError: If the kind is not registered
    """
    if isinstance(kind, PatternKind):
        return kind
    if isinstance(kind, str):
        normalized = kind.strip().lower()
        try:
            return PatternKind(normalized)
        except ValueError:
            pass
    raise UnknownPatternKindError(kind)


@functools.lru_cache(maxsize=1024)
def _regex_matcher(pattern: str, flags: int) -> PatternMatcher:
    return PatternMatcher(kind=PatternKind.REGEX, pattern=pattern, flags=flags)


class PatternRegistry:
    """
    Read-only catalog of named pattern matchers.

    Usage:
        matcher = default_registry.resolve("any_number")
        matcher.matches("42")     # True
        matcher.example(seed=7)   # deterministic sample, e.g. "5214"
    """

    def __init__(self, matchers: Mapping[PatternKind, PatternMatcher]):
        self._matchers = MappingProxyType(dict(matchers))

    @classmethod
    def default(cls) -> PatternRegistry:
        """Build the registry of all canonical kinds."""
        matchers = {
            kind: PatternMatcher(kind=kind, pattern=pattern, generator=generator)
            for kind, (pattern, generator) in _CANONICAL.items()
        }
        logger.debug("pattern_registry_initialized", kinds=len(matchers))
        return cls(matchers)

    @property
    def matchers(self) -> Mapping[PatternKind, PatternMatcher]:
        """Read-only view of the interned matchers."""
        return self._matchers

    def resolve(self, kind: PatternKind | str, pattern: str | re.Pattern | None = None) -> PatternMatcher:
        """
        Resolve a pattern kind to its matcher.

        Args:
            kind: Registered kind (enum, value or name)
            pattern: Regular expression, required for the ``regex`` kind

        Returns:
            The shared PatternMatcher for the kind

        Raises:
            UnknownPatternKindError: If the kind is not registered
            InvalidPatternError: If a regex pattern is missing or invalid
        """
        resolved = parse_kind(kind)
        if resolved is PatternKind.REGEX:
            if pattern is None:
                raise InvalidPatternError("The regex pattern kind requires a pattern", context={"kind": "regex"})
            return self.regex(pattern)
        return self._matchers[resolved]

    def regex(self, pattern: str | re.Pattern, flags: int = 0) -> PatternMatcher:
        """Build (or reuse) a matcher for a literal regular expression."""
        if isinstance(pattern, re.Pattern):
            return _regex_matcher(pattern.pattern, pattern.flags & ~re.UNICODE)
        return _regex_matcher(pattern, flags)

    def __contains__(self, kind: Any) -> bool:
        try:
            parse_kind(kind)
        except UnknownPatternKindError:
            return False
        return True


default_registry = PatternRegistry.default()


def resolve(kind: PatternKind | str, pattern: str | re.Pattern | None = None) -> PatternMatcher:
    """Resolve a kind against the process-wide registry."""
    return default_registry.resolve(kind, pattern)


def regex(pattern: str | re.Pattern, flags: int = 0) -> PatternMatcher:
    """Matcher for a literal regular expression."""
    return default_registry.regex(pattern, flags)


def any_of(*values: Any) -> PatternMatcher:
    """Matcher accepting exactly one of the given literal values."""
    if not values:
        raise InvalidPatternError("any_of requires at least one value")
    return regex("(" + "|".join(re.escape(str(v)) for v in values) + ")")


def any_non_blank_string() -> PatternMatcher:
    return resolve(PatternKind.NON_BLANK_STRING)


def any_non_empty_string() -> PatternMatcher:
    return resolve(PatternKind.NON_EMPTY)


def any_string() -> PatternMatcher:
    return resolve(PatternKind.ANY_STRING)


def any_boolean() -> PatternMatcher:
    return resolve(PatternKind.ANY_BOOLEAN)


def any_number() -> PatternMatcher:
    return resolve(PatternKind.ANY_NUMBER)


def any_integer() -> PatternMatcher:
    return resolve(PatternKind.ANY_INTEGER)


def any_positive_int() -> PatternMatcher:
    return resolve(PatternKind.ANY_POSITIVE_INT)


def any_double() -> PatternMatcher:
    return resolve(PatternKind.ANY_DECIMAL)


def any_hex() -> PatternMatcher:
    return resolve(PatternKind.ANY_HEX)


def any_alpha_numeric() -> PatternMatcher:
    return resolve(PatternKind.ANY_ALPHANUMERIC)


def any_alpha_unicode() -> PatternMatcher:
    return resolve(PatternKind.ONLY_ALPHA_UNICODE)


def any_url() -> PatternMatcher:
    return resolve(PatternKind.ANY_URL)


def any_https_url() -> PatternMatcher:
    return resolve(PatternKind.ANY_HTTPS_URL)


def any_ip_address() -> PatternMatcher:
    return resolve(PatternKind.ANY_IP_ADDRESS)


def any_hostname() -> PatternMatcher:
    return resolve(PatternKind.ANY_HOSTNAME)


def any_email() -> PatternMatcher:
    return resolve(PatternKind.ANY_EMAIL)


def any_uuid() -> PatternMatcher:
    return resolve(PatternKind.ANY_UUID)


def any_date() -> PatternMatcher:
    return resolve(PatternKind.ANY_DATE)


def any_time() -> PatternMatcher:
    return resolve(PatternKind.ANY_TIME)


def any_date_time() -> PatternMatcher:
    return resolve(PatternKind.ANY_DATE_TIME)


def any_iso8601_with_offset() -> PatternMatcher:
    return resolve(PatternKind.ISO8601_WITH_OFFSET)
