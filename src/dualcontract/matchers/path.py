"""
JSON-path subset used to address locations in a body tree.

Supported syntax:
    $                 root
    .key  ['key']     mapping key ("key" quoting also accepted)
    [3]               sequence index
    [*]  .*           every element of a sequence or every value of a mapping

Recursive descent (``..``) and filter expressions are not supported.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from dualcontract.shared.domain.exceptions import InvalidPathError


class _Wildcard:
    def __repr__(self) -> str:
        return "WILDCARD"


WILDCARD = _Wildcard()

_DOT_KEY = re.compile(r"\.([^.\[\]]+)")
_BRACKET = re.compile(r"""\[\s*(?:(\d+)|(\*)|'([^']*)'|"([^"]*)")\s*\]""")
_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_\-]*")

Segment = str | int | _Wildcard
Location = tuple[str | int, ...]


@dataclass(frozen=True)
class BodyPath:
    """A parsed path expression."""

    segments: tuple[Segment, ...]

    @classmethod
    def parse(cls, expression: str) -> BodyPath:
        """
        Parse a path expression.

        Raises:
            InvalidPathError: If the expression is not in the supported subset
        """
        if not isinstance(expression, str):
            raise InvalidPathError(f"Path must be a string, got {type(expression).__name__}")
        text = expression.strip()
        if not text.startswith("$"):
            raise InvalidPathError(f"Path must start with '$': {expression!r}", context={"path": expression})

        segments: list[Segment] = []
        position = 1
        while position < len(text):
            if text.startswith("..", position):
                raise InvalidPathError(
                    f"Recursive descent is not supported: {expression!r}", context={"path": expression}
                )
            dot = _DOT_KEY.match(text, position)
            if dot:
                key = dot.group(1)
                segments.append(WILDCARD if key == "*" else key)
                position = dot.end()
                continue
            bracket = _BRACKET.match(text, position)
            if bracket:
                index, star, single, double = bracket.groups()
                if index is not None:
                    segments.append(int(index))
                elif star is not None:
                    segments.append(WILDCARD)
                else:
                    segments.append(single if single is not None else double)
                position = bracket.end()
                continue
            raise InvalidPathError(
                f"Unexpected token at position {position} in path {expression!r}",
                context={"path": expression, "position": position},
            )
        return cls(tuple(segments))

    @property
    def canonical(self) -> str:
        """Normalized form; equivalent expressions share one canonical string."""
        parts = ["$"]
        for segment in self.segments:
            if segment is WILDCARD:
                parts.append("[*]")
            elif isinstance(segment, int):
                parts.append(f"[{segment}]")
            elif isinstance(segment, str) and _IDENTIFIER.fullmatch(segment):
                parts.append(f".{segment}")
            elif "'" in str(segment):
                parts.append(f'["{segment}"]')
            else:
                parts.append(f"['{segment}']")
        return "".join(parts)

    def find(self, tree: Any) -> list[Location]:
        """Return every concrete location in the tree addressed by this path."""
        locations: list[Location] = [()]
        for segment in self.segments:
            expanded: list[Location] = []
            for location in locations:
                node = get_at(tree, location)
                expanded.extend(location + (step,) for step in _steps(node, segment))
            locations = expanded
        return locations

    def __str__(self) -> str:
        return self.canonical


def _steps(node: Any, segment: Segment) -> list[str | int]:
    if isinstance(node, Mapping):
        if segment is WILDCARD:
            return list(node.keys())
        return [segment] if isinstance(segment, str) and segment in node else []
    if isinstance(node, (list, tuple)):
        if segment is WILDCARD:
            return list(range(len(node)))
        return [segment] if isinstance(segment, int) and segment < len(node) else []
    return []


def get_at(tree: Any, location: Location) -> Any:
    """Read the value stored at a concrete location."""
    node = tree
    for step in location:
        node = node[step]
    return node


def replace_at(tree: Any, location: Location, update: Callable[[Any], Any]) -> Any:
    """
    Return a copy of the tree with the value at ``location`` replaced.

    Only the containers along the location are copied; the input tree is
    never mutated.
    """
    if not location:
        return update(tree)
    step, rest = location[0], location[1:]
    if isinstance(tree, Mapping):
        copied = dict(tree)
        copied[step] = replace_at(tree[step], rest, update)
        return copied
    copied_list = list(tree)
    copied_list[step] = replace_at(tree[step], rest, update)
    return copied_list
