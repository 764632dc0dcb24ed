"""
Pattern library domain models.

A PatternMatcher is a semantic value constraint ("any number", "any UUID")
backed by a canonical regular expression and an example generator.
"""

from __future__ import annotations

import random
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from dualcontract.patterns.generators import ExampleGenerator, xeger
from dualcontract.shared.domain.exceptions import InvalidPatternError
from dualcontract.shared.infrastructure.config import settings


class PatternKind(str, Enum):
    """Named kinds of pattern matchers known to the registry."""

    NON_BLANK_STRING = "non_blank_string"
    NON_EMPTY = "non_empty"
    ANY_STRING = "any_string"
    ANY_BOOLEAN = "any_boolean"
    ANY_NUMBER = "any_number"
    ANY_INTEGER = "any_integer"
    ANY_POSITIVE_INT = "any_positive_int"
    ANY_DECIMAL = "any_decimal"
    ANY_HEX = "any_hex"
    ANY_ALPHANUMERIC = "any_alphanumeric"
    ONLY_ALPHA_UNICODE = "only_alpha_unicode"
    ANY_URL = "any_url"
    ANY_HTTPS_URL = "any_https_url"
    ANY_IP_ADDRESS = "any_ip_address"
    ANY_HOSTNAME = "any_hostname"
    ANY_EMAIL = "any_email"
    ANY_UUID = "any_uuid"
    ANY_DATE = "any_date"
    ANY_TIME = "any_time"
    ANY_DATE_TIME = "any_date_time"
    ISO8601_WITH_OFFSET = "iso8601_with_offset"
    REGEX = "regex"  # Literal pattern supplied by the contract author


@dataclass(frozen=True)
class PatternMatcher:
    """
    Immutable matcher: kind + regular expression + example generator.

    Equality and hashing use kind, pattern and flags only, so two matchers
    built independently for the same expression compare equal.
    """

    kind: PatternKind
    pattern: str
    flags: int = 0
    generator: ExampleGenerator | None = field(default=None, compare=False, repr=False)
    compiled: re.Pattern = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        try:
            compiled = re.compile(self.pattern, self.flags)
        except re.error as e:
            raise InvalidPatternError(
                f"Invalid regular expression for {self.kind.value}: {self.pattern!r} ({e})",
                context={"kind": self.kind.value, "pattern": self.pattern},
            ) from e
        object.__setattr__(self, "compiled", compiled)

    def matches(self, value: Any) -> bool:
        """
        Check whether a runtime value satisfies this matcher.

        Args:
            value: Scalar (or, for non-empty matchers, a sequence/mapping)

        Returns:
            True if the string form of the value fully matches the pattern
        """
        if value is None:
            return False
        if isinstance(value, (list, tuple, Mapping)):
            return self.kind is PatternKind.NON_EMPTY and len(value) > 0
        if isinstance(value, bool):
            text = "true" if value else "false"
        else:
            text = str(value)
        return self.compiled.fullmatch(text) is not None

    def example(self, seed: int | None = None) -> str:
        """
        Generate a deterministic example value for this matcher.

        Args:
            seed: Random seed (defaults to the configured example seed)

        Returns:
            A string that fully matches the pattern
        """
        rng = random.Random(settings.example_seed if seed is None else seed)
        if self.generator is None:
            return xeger(self.pattern, rng)
        return self.generator(rng)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        result: dict[str, Any] = {"kind": self.kind.value, "regex": self.pattern}
        if self.flags:
            result["flags"] = self.flags
        return result

    def __str__(self) -> str:
        return self.pattern
