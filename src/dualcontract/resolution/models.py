"""
Concrete projections of a contract.

These are the read-only outputs handed to stub renderers (consumer mode)
and test renderers (producer mode). Values are plain Python data
(dict/list/scalars); in producer mode, leaves may also be PatternMatcher
or MatchingRule assertions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from dualcontract.matchers.models import BodyMatcher
from dualcontract.model.values import Mode


@dataclass
class ConcreteRequest:
    method: Any
    url: Any
    query_parameters: list[tuple[str, Any]] = field(default_factory=list)
    headers: list[tuple[str, Any]] = field(default_factory=list)
    body: Any = None
    body_matchers: tuple[BodyMatcher, ...] = ()


@dataclass
class ConcreteResponse:
    status: int
    headers: list[tuple[str, Any]] = field(default_factory=list)
    body: Any = None
    body_matchers: tuple[BodyMatcher, ...] = ()


@dataclass
class ConcreteMessageInput:
    message_from: Any
    headers: list[tuple[str, Any]] = field(default_factory=list)
    body: Any = None
    body_matchers: tuple[BodyMatcher, ...] = ()
    triggered_by: str | None = None
    assert_that: str | None = None


@dataclass
class ConcreteOutputMessage:
    sent_to: Any
    headers: list[tuple[str, Any]] = field(default_factory=list)
    body: Any = None
    body_matchers: tuple[BodyMatcher, ...] = ()
    assert_that: str | None = None


@dataclass
class ConcreteContract:
    """A contract rendered for one side."""

    mode: Mode = field(compare=False)
    name: str | None = None
    description: str | None = None
    label: str | None = None
    priority: int | None = None
    ignored: bool = False
    in_progress: bool = False
    request: ConcreteRequest | None = None
    response: ConcreteResponse | None = None
    input: ConcreteMessageInput | None = None
    output_message: ConcreteOutputMessage | None = None

    def header(self, part: str, name: str) -> Any:
        """First resolved value of a header on a part ("request", "response", ...)."""
        concrete = getattr(self, part)
        if concrete is None:
            return None
        for header_name, header_value in concrete.headers:
            if header_name == name:
                return header_value
        return None
