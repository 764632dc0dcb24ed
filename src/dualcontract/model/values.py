"""
Dual-value cells and frozen literal trees.

Every value in a contract is either a Literal (scalar, or a frozen
sequence/mapping of literals and cells) or a DualValue carrying a
consumer side and a producer side. Each side is a Literal or a
PatternMatcher.

User input (dicts, lists, compiled regexes) is frozen at construction so
that contracts are immutable and hashable.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Union

from dualcontract.patterns import PatternMatcher, regex
from dualcontract.shared.domain.exceptions import ContractDefinitionError

SCALAR_TYPES = (str, bool, int, float, Decimal, type(None))


class Mode(str, Enum):
    """Side of the contract a projection is rendered for."""

    CONSUMER = "consumer"  # Stub generation
    PRODUCER = "producer"  # Verification test generation

    @classmethod
    def _missing_(cls, value: object) -> Mode:
        if isinstance(value, str):
            for member in cls:
                if member.value == value.strip().lower():
                    return member
        raise ContractDefinitionError(f"Unknown mode: {value!r}", context={"mode": repr(value)})


def strict_key(node: Any) -> Any:
    """
    Type-tagged comparison key for a contract value.

    Python's ``==`` treats ``True``, ``1`` and ``1.0`` as equal, while their
    serialized forms differ. Comparing these keys keeps equality and hashing
    aligned with the fingerprint: leaves compare by JSON type and value,
    mapping key order is ignored, sequence order is kept.
    """
    if isinstance(node, DualValue):
        return ("cell", strict_key(node.consumer), strict_key(node.producer))
    if isinstance(node, Mapping):
        return ("object", frozenset((strict_key(key), strict_key(item)) for key, item in node.items()))
    if isinstance(node, (list, tuple)):
        return ("array", tuple(strict_key(item) for item in node))
    if node is None:
        return ("null", None)
    if isinstance(node, bool):
        return ("boolean", bool(node))
    if isinstance(node, int):
        return ("integer", int(node))
    if isinstance(node, float):
        return ("float", float(node))
    if isinstance(node, Decimal):
        return ("decimal", str(node))
    if isinstance(node, str):
        return ("string", node.value if isinstance(node, Enum) else str(node))
    return (type(node).__name__, node)


class FrozenMapping(Mapping):
    """
    Immutable, hashable mapping that preserves insertion order.

    Equality ignores key order (same as ``dict``) but not leaf types:
    ``{"a": True}`` and ``{"a": 1}`` differ. Hashing is consistent with that.
    """

    __slots__ = ("_data", "_hash")

    def __init__(self, items: Mapping | Any = ()):
        self._data = dict(items)
        self._hash: int | None = None

    def __getitem__(self, key: Any) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Mapping):
            return strict_key(self) == strict_key(other)
        return NotImplemented

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(strict_key(self))
        return self._hash

    def __repr__(self) -> str:
        return f"FrozenMapping({self._data!r})"


Literal = Union[str, bool, int, float, Decimal, None, tuple, FrozenMapping]
Side = Union[Literal, PatternMatcher, "DualValue"]


def freeze(node: Any, _path: tuple[int, ...] = ()) -> Any:
    """
    Convert user input into an immutable body/literal tree.

    - dict -> FrozenMapping, list/tuple -> tuple
    - PatternMatcher / compiled regex -> DualValue(matcher, matcher)
    - DualValue and scalars are kept

    Raises:
        ContractDefinitionError: On cycles or unsupported value types
    """
    if isinstance(node, (DualValue, FrozenMapping)) or isinstance(node, SCALAR_TYPES):
        return node
    if isinstance(node, (PatternMatcher, re.Pattern)):
        matcher = freeze_side(node)
        return DualValue(matcher, matcher)
    if isinstance(node, (Mapping, list, tuple)):
        if id(node) in _path:
            raise ContractDefinitionError("Cyclic structures are not allowed in contract values")
        path = _path + (id(node),)
        if isinstance(node, Mapping):
            return FrozenMapping((key, freeze(item, path)) for key, item in node.items())
        return tuple(freeze(item, path) for item in node)
    raise ContractDefinitionError(
        f"Unsupported contract value type: {type(node).__name__}",
        context={"type": type(node).__name__},
    )


def freeze_side(side: Any) -> Side:
    """Freeze one side of a cell; matchers stay matchers."""
    if isinstance(side, PatternMatcher):
        return side
    if isinstance(side, re.Pattern):
        return regex(side)
    return freeze(side)


def to_plain(node: Any) -> Any:
    """Convert a frozen tree into JSON-compatible dicts/lists (for serialization)."""
    if isinstance(node, (DualValue, PatternMatcher)):
        return node.to_dict()
    if isinstance(node, Mapping):
        return {key: to_plain(item) for key, item in node.items()}
    if isinstance(node, tuple):
        return [to_plain(item) for item in node]
    if isinstance(node, Decimal):
        return str(node)
    return node


@dataclass(frozen=True, eq=False)
class DualValue:
    """
    A value with a consumer interpretation and a producer interpretation.

    Examples:
        DualValue("/1", "/1")                              # symmetric
        DualValue(regex("text/.*"), "text/plain")          # stub matches, test sends
    """

    consumer: Side
    producer: Side

    def __post_init__(self) -> None:
        object.__setattr__(self, "consumer", freeze_side(self.consumer))
        object.__setattr__(self, "producer", freeze_side(self.producer))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DualValue):
            return strict_key(self) == strict_key(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(strict_key(self))

    @property
    def is_symmetric(self) -> bool:
        """True when both sides are the same literal."""
        if isinstance(self.consumer, PatternMatcher) or isinstance(self.producer, PatternMatcher):
            return False
        return strict_key(self.consumer) == strict_key(self.producer)

    def select(self, mode: Mode) -> Side:
        """Return the side used for the given mode."""
        return self.consumer if mode is Mode.CONSUMER else self.producer

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"consumer": to_plain(self.consumer), "producer": to_plain(self.producer)}


_MISSING = object()


def value(*args: Any, consumer: Any = _MISSING, producer: Any = _MISSING) -> DualValue:
    """
    Build a DualValue.

    Usage:
        value("/1")                                             # both sides "/1"
        value(consumer=regex("text/.*"), producer="text/plain")
        value(consumer=regex("[0-9]+"))                         # producer = example

    When only one side is given and it is a pattern matcher, the other side
    is the matcher's deterministic example; a single literal side is used for
    both sides.
    """
    if args:
        if len(args) != 1 or consumer is not _MISSING or producer is not _MISSING:
            raise ContractDefinitionError("value() takes either one positional value or consumer/producer keywords")
        single = args[0]
        if isinstance(single, DualValue):
            return single
        side = freeze_side(single)
        return DualValue(side, side)

    if consumer is _MISSING and producer is _MISSING:
        raise ContractDefinitionError("value() requires a value or at least one of consumer/producer")

    if producer is _MISSING:
        side = freeze_side(consumer)
        return DualValue(side, side.example() if isinstance(side, PatternMatcher) else side)
    if consumer is _MISSING:
        side = freeze_side(producer)
        return DualValue(side.example() if isinstance(side, PatternMatcher) else side, side)
    return DualValue(consumer, producer)


def as_dual_value(raw: Any) -> DualValue:
    """Wrap a raw builder argument into a DualValue (cells pass through)."""
    if isinstance(raw, DualValue):
        return raw
    return value(raw)
