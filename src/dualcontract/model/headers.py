"""
Header and query parameter models.

Headers are an ordered sequence of (name, DualValue) pairs. Duplicate names
are allowed so that header repetition survives, and lookups are
case-sensitive.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

from dualcontract.model.values import DualValue, as_dual_value

CONTENT_TYPE = "Content-Type"
ACCEPT = "Accept"


class MediaType(str, Enum):
    """Common media types for Content-Type / Accept headers."""

    APPLICATION_JSON = "application/json"
    APPLICATION_JSON_UTF8 = "application/json;charset=UTF-8"
    APPLICATION_XML = "application/xml"
    APPLICATION_FORM_URLENCODED = "application/x-www-form-urlencoded"
    APPLICATION_OCTET_STREAM = "application/octet-stream"
    MULTIPART_FORM_DATA = "multipart/form-data"
    TEXT_PLAIN = "text/plain"
    TEXT_HTML = "text/html"
    TEXT_XML = "text/xml"
    ALL = "*/*"


@dataclass(frozen=True)
class Header:
    """A single header entry."""

    name: str
    value: DualValue

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", as_dual_value(_unwrap_enum(self.value)))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"name": self.name, "value": self.value.to_dict()}


@dataclass(frozen=True)
class Headers:
    """Ordered header entries."""

    entries: tuple[Header, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", tuple(self.entries))

    def __iter__(self) -> Iterator[Header]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)

    def get(self, name: str) -> DualValue | None:
        """Return the first value for a header name, or None."""
        for entry in self.entries:
            if entry.name == name:
                return entry.value
        return None

    def get_all(self, name: str) -> list[DualValue]:
        """Return every value declared for a header name, in order."""
        return [entry.value for entry in self.entries if entry.name == name]

    def names(self) -> list[str]:
        """Header names in declaration order (duplicates included)."""
        return [entry.name for entry in self.entries]

    def with_header(self, name: str, value: Any) -> Headers:
        """Return a copy with one more entry appended."""
        return Headers(self.entries + (Header(name, value),))

    def to_dict(self) -> list[dict[str, Any]]:
        """Convert to a list of entries for serialization."""
        return [entry.to_dict() for entry in self.entries]


@dataclass(frozen=True)
class QueryParameter:
    """A single URL query parameter."""

    name: str
    value: DualValue

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", as_dual_value(self.value))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"name": self.name, "value": self.value.to_dict()}


def _unwrap_enum(raw: Any) -> Any:
    if isinstance(raw, Enum):
        return raw.value
    return raw
