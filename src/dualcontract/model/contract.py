"""
Contract aggregate.

A Contract holds exactly one interaction kind (HTTP or messaging) as a
tagged union, plus metadata that is independent of the kind. Contracts
validate themselves on construction, so every Contract instance is a
complete, immutable value object.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, Union

from dualcontract.model.http import Request, Response
from dualcontract.model.messaging import MessageInput, OutputMessage
from dualcontract.validation.validator import validate

if TYPE_CHECKING:
    from dualcontract.model.builder import ContractBuilder


class InteractionKind(str, Enum):
    """Kind of interaction a contract describes."""

    HTTP = "HTTP"
    MESSAGING = "messaging"


@dataclass(frozen=True)
class HttpInteraction:
    """Request/response pair."""

    kind: ClassVar[InteractionKind] = InteractionKind.HTTP

    request: Request | None = None
    response: Response | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "request": self.request.to_dict() if self.request is not None else None,
            "response": self.response.to_dict() if self.response is not None else None,
        }


@dataclass(frozen=True)
class MessageInteraction:
    """Input/output message pair."""

    kind: ClassVar[InteractionKind] = InteractionKind.MESSAGING

    input: MessageInput | None = None
    output_message: OutputMessage | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "input": self.input.to_dict() if self.input is not None else None,
            "outputMessage": self.output_message.to_dict() if self.output_message is not None else None,
        }


Interaction = Union[HttpInteraction, MessageInteraction]


@dataclass(frozen=True)
class Contract:
    """
    Consumer-driven contract for a single interaction.

    Usage:
        contract = (
            Contract.builder()
            .name("should_return_user")
            .request(lambda r: r.method("GET").url("/users/1"))
            .response(lambda r: r.status(200).body({"id": 1}))
            .build()
        )

    Raises:
        MissingRequiredFieldError: If a declared part lacks a required field
        ContractDefinitionError: If the interaction is otherwise inconsistent
    """

    interaction: Interaction | None = None
    name: str | None = None
    description: str | None = None
    label: str | None = None
    priority: int | None = None
    ignored: bool = False
    in_progress: bool = False

    def __post_init__(self) -> None:
        validate(self)

    @classmethod
    def builder(cls) -> ContractBuilder:
        """Start a new fluent builder."""
        from dualcontract.model.builder import ContractBuilder

        return ContractBuilder()

    @property
    def kind(self) -> InteractionKind | None:
        return self.interaction.kind if self.interaction is not None else None

    @property
    def request(self) -> Request | None:
        return self.interaction.request if isinstance(self.interaction, HttpInteraction) else None

    @property
    def response(self) -> Response | None:
        return self.interaction.response if isinstance(self.interaction, HttpInteraction) else None

    @property
    def input(self) -> MessageInput | None:
        return self.interaction.input if isinstance(self.interaction, MessageInteraction) else None

    @property
    def output_message(self) -> OutputMessage | None:
        return self.interaction.output_message if isinstance(self.interaction, MessageInteraction) else None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization (canonical form for fingerprints)."""
        return {
            "name": self.name,
            "description": self.description,
            "label": self.label,
            "priority": self.priority,
            "ignored": self.ignored,
            "inProgress": self.in_progress,
            "kind": self.kind.value if self.kind is not None else None,
            "interaction": self.interaction.to_dict() if self.interaction is not None else None,
        }
