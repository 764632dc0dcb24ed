"""
HTTP interaction models.

Request:  method + URL (+ query parameters), headers, body, body matchers
Response: status code, headers, body, body matchers

Required fields are not enforced here; the owning Contract validates them
when it is constructed.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from http import HTTPStatus
from typing import Any

from dualcontract.matchers.models import BodyMatcher, BodyMatchers
from dualcontract.model.headers import Header, Headers, QueryParameter
from dualcontract.model.values import DualValue, as_dual_value, freeze, strict_key, to_plain
from dualcontract.shared.domain.exceptions import ContractDefinitionError


class HttpMethod(str, Enum):
    """HTTP request methods."""

    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"


@dataclass(frozen=True)
class Url:
    """URL path (a DualValue) with ordered query parameters."""

    path: DualValue
    query_parameters: tuple[QueryParameter, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", as_dual_value(self.path))
        object.__setattr__(
            self,
            "query_parameters",
            tuple(
                item if isinstance(item, QueryParameter) else QueryParameter(*item)
                for item in _pairs(self.query_parameters)
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        result: dict[str, Any] = {"path": self.path.to_dict()}
        if self.query_parameters:
            result["queryParameters"] = [q.to_dict() for q in self.query_parameters]
        return result


@dataclass(frozen=True)
class Request:
    """HTTP request side of an interaction."""

    method: DualValue | None = None
    url: Url | None = None
    headers: Headers = field(default_factory=Headers)
    body: Any = field(default=None, compare=False)
    body_matchers: BodyMatchers = field(default_factory=BodyMatchers)
    body_key: Any = field(init=False, repr=False)  # Type-strict comparison form of body

    def __post_init__(self) -> None:
        if self.method is not None:
            method = self.method.value if isinstance(self.method, Enum) else self.method
            object.__setattr__(self, "method", as_dual_value(method))
        if self.url is not None and not isinstance(self.url, Url):
            object.__setattr__(self, "url", Url(self.url))
        object.__setattr__(self, "headers", coerce_headers(self.headers))
        object.__setattr__(self, "body", freeze(self.body))
        object.__setattr__(self, "body_key", strict_key(self.body))
        object.__setattr__(self, "body_matchers", coerce_body_matchers(self.body_matchers))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "method": self.method.to_dict() if self.method is not None else None,
            "url": self.url.to_dict() if self.url is not None else None,
            "headers": self.headers.to_dict(),
            "body": to_plain(self.body),
            "bodyMatchers": self.body_matchers.to_dict(),
        }


@dataclass(frozen=True)
class Response:
    """HTTP response side of an interaction."""

    status: int | None = None
    headers: Headers = field(default_factory=Headers)
    body: Any = field(default=None, compare=False)
    body_matchers: BodyMatchers = field(default_factory=BodyMatchers)
    body_key: Any = field(init=False, repr=False)  # Type-strict comparison form of body

    def __post_init__(self) -> None:
        if self.status is not None:
            if isinstance(self.status, bool) or not isinstance(self.status, int):
                raise ContractDefinitionError(
                    f"Status must be an integer, got {type(self.status).__name__}",
                    context={"status": repr(self.status)},
                )
            if not 100 <= int(self.status) <= 599:
                raise ContractDefinitionError(
                    f"Status must be between 100 and 599, got {self.status}",
                    context={"status": int(self.status)},
                )
            object.__setattr__(self, "status", int(self.status))
        object.__setattr__(self, "headers", coerce_headers(self.headers))
        object.__setattr__(self, "body", freeze(self.body))
        object.__setattr__(self, "body_key", strict_key(self.body))
        object.__setattr__(self, "body_matchers", coerce_body_matchers(self.body_matchers))

    @property
    def reason(self) -> str | None:
        """Standard reason phrase for the status, if it is a known code."""
        try:
            return HTTPStatus(self.status).phrase
        except ValueError:
            return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "status": self.status,
            "headers": self.headers.to_dict(),
            "body": to_plain(self.body),
            "bodyMatchers": self.body_matchers.to_dict(),
        }


def _pairs(raw: Any) -> Iterable[Any]:
    if isinstance(raw, Mapping):
        return raw.items()
    return raw or ()


def coerce_headers(raw: Any) -> Headers:
    """Accept Headers, a mapping, or an iterable of Header / (name, value) pairs."""
    if isinstance(raw, Headers):
        return raw
    return Headers(tuple(item if isinstance(item, Header) else Header(*item) for item in _pairs(raw)))


def coerce_body_matchers(raw: Any) -> BodyMatchers:
    """Accept BodyMatchers or an iterable of BodyMatcher."""
    if isinstance(raw, BodyMatchers):
        return raw
    entries = tuple(raw or ())
    for entry in entries:
        if not isinstance(entry, BodyMatcher):
            raise ContractDefinitionError(f"Expected BodyMatcher, got {type(entry).__name__}")
    return BodyMatchers(entries)
