"""
Asynchronous messaging interaction models.

MessageInput:  source destination (message_from), headers, body, body matchers
OutputMessage: target destination (sent_to), headers, body, body matchers

``triggered_by`` and ``assert_that`` name methods in the generated test
(the trigger that makes the producer send a message, and an extra
assertion to run); the core only carries them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from dualcontract.matchers.models import BodyMatchers
from dualcontract.model.headers import Headers
from dualcontract.model.http import coerce_body_matchers, coerce_headers
from dualcontract.model.values import DualValue, as_dual_value, freeze, strict_key, to_plain


@dataclass(frozen=True)
class MessageInput:
    """Message received by the producer (or the trigger that starts the flow)."""

    message_from: DualValue | None = None
    headers: Headers = field(default_factory=Headers)
    body: Any = field(default=None, compare=False)
    body_matchers: BodyMatchers = field(default_factory=BodyMatchers)
    body_key: Any = field(init=False, repr=False)  # Type-strict comparison form of body
    triggered_by: str | None = None
    assert_that: str | None = None

    def __post_init__(self) -> None:
        if self.message_from is not None:
            object.__setattr__(self, "message_from", as_dual_value(self.message_from))
        object.__setattr__(self, "headers", coerce_headers(self.headers))
        object.__setattr__(self, "body", freeze(self.body))
        object.__setattr__(self, "body_key", strict_key(self.body))
        object.__setattr__(self, "body_matchers", coerce_body_matchers(self.body_matchers))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "messageFrom": self.message_from.to_dict() if self.message_from is not None else None,
            "headers": self.headers.to_dict(),
            "body": to_plain(self.body),
            "bodyMatchers": self.body_matchers.to_dict(),
            "triggeredBy": self.triggered_by,
            "assertThat": self.assert_that,
        }


@dataclass(frozen=True)
class OutputMessage:
    """Message the producer is expected to send."""

    sent_to: DualValue | None = None
    headers: Headers = field(default_factory=Headers)
    body: Any = field(default=None, compare=False)
    body_matchers: BodyMatchers = field(default_factory=BodyMatchers)
    body_key: Any = field(init=False, repr=False)  # Type-strict comparison form of body
    assert_that: str | None = None

    def __post_init__(self) -> None:
        if self.sent_to is not None:
            object.__setattr__(self, "sent_to", as_dual_value(self.sent_to))
        object.__setattr__(self, "headers", coerce_headers(self.headers))
        object.__setattr__(self, "body", freeze(self.body))
        object.__setattr__(self, "body_key", strict_key(self.body))
        object.__setattr__(self, "body_matchers", coerce_body_matchers(self.body_matchers))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "sentTo": self.sent_to.to_dict() if self.sent_to is not None else None,
            "headers": self.headers.to_dict(),
            "body": to_plain(self.body),
            "bodyMatchers": self.body_matchers.to_dict(),
            "assertThat": self.assert_that,
        }
