"""
Fluent builder for contracts.

Replaces free-form nested DSL construction with explicit builders that end
in a single ``build()`` call. ``build()`` constructs the immutable Contract,
which validates itself; callers either get a complete contract or an error.

Usage:
    builder = ContractBuilder().name("should_update_foo")
    builder.request().method(HttpMethod.PUT).url("/foo").header("foo", "bar").body({"foo": "bar"})
    builder.response().status(200).body({"foo2": "bar"})
    contract = builder.build()

    # or, configuring sub-builders inline
    contract = (
        ContractBuilder()
        .input(lambda i: i.message_from("input").body({"foo": "bar"}))
        .output_message(lambda o: o.sent_to("output").body({"foo2": "bar"}))
        .build()
    )
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from dualcontract.matchers.models import AppliesTo, BodyMatcher, BodyMatchers, MatchingRule
from dualcontract.model.contract import (
    Contract,
    HttpInteraction,
    InteractionKind,
    MessageInteraction,
)
from dualcontract.model.headers import ACCEPT, CONTENT_TYPE, Header, Headers, QueryParameter
from dualcontract.model.http import Request, Response, Url
from dualcontract.model.messaging import MessageInput, OutputMessage
from dualcontract.shared.domain.exceptions import ContractDefinitionError
from dualcontract.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)

_UNSET = object()


class _PartBuilder:
    """Headers, body and body matchers shared by every interaction part."""

    def __init__(self) -> None:
        self._headers: list[Header] = []
        self._body: Any = None
        self._body_matchers: list[BodyMatcher] = []

    def header(self, name: str, value: Any):
        """Append a header (duplicates are kept in order)."""
        self._headers.append(Header(name, value))
        return self

    def headers(self, entries: Mapping[str, Any] | None = None, **named: Any):
        """Append several headers from a mapping and/or keyword arguments."""
        for name, value in {**(entries or {}), **named}.items():
            self.header(name, value)
        return self

    def content_type(self, value: Any):
        return self.header(CONTENT_TYPE, value)

    def accept(self, value: Any):
        return self.header(ACCEPT, value)

    def body(self, body: Any = _UNSET, **fields: Any):
        """Set the body; ``body(foo="bar")`` is shorthand for ``body({"foo": "bar"})``."""
        if body is not _UNSET and fields:
            raise ContractDefinitionError("body() takes either a value or keyword fields, not both")
        self._body = fields if body is _UNSET else body
        return self

    def body_matcher(self, path: str, rule: MatchingRule, applies_to: AppliesTo | str = AppliesTo.BOTH):
        """Bind a matching rule to a body path."""
        self._body_matchers.append(BodyMatcher(path, rule, AppliesTo(applies_to)))
        return self

    def stub_matcher(self, path: str, rule: MatchingRule):
        """Matcher consulted only when rendering stubs."""
        return self.body_matcher(path, rule, AppliesTo.STUB)

    def test_matcher(self, path: str, rule: MatchingRule):
        """Matcher consulted only when rendering verification tests."""
        return self.body_matcher(path, rule, AppliesTo.TEST)

    def _part_fields(self) -> dict[str, Any]:
        return {
            "headers": Headers(tuple(self._headers)),
            "body": self._body,
            "body_matchers": BodyMatchers(tuple(self._body_matchers)),
        }


class RequestBuilder(_PartBuilder):
    def __init__(self) -> None:
        super().__init__()
        self._method: Any = None
        self._url: Any = None
        self._query: list[QueryParameter] = []

    def method(self, method: Any) -> RequestBuilder:
        self._method = method
        return self

    def url(self, path: Any, **query: Any) -> RequestBuilder:
        """Set the URL path; keyword arguments become query parameters."""
        self._url = path
        for name, value in query.items():
            self.query_parameter(name, value)
        return self

    def query_parameter(self, name: str, value: Any) -> RequestBuilder:
        self._query.append(QueryParameter(name, value))
        return self

    def build(self) -> Request:
        url = None
        if isinstance(self._url, Url):
            url = Url(self._url.path, self._url.query_parameters + tuple(self._query))
        elif self._url is not None:
            url = Url(self._url, tuple(self._query))
        elif self._query:
            raise ContractDefinitionError("Query parameters were given without a URL")
        return Request(method=self._method, url=url, **self._part_fields())


class ResponseBuilder(_PartBuilder):
    def __init__(self) -> None:
        super().__init__()
        self._status: int | None = None

    def status(self, status: int) -> ResponseBuilder:
        self._status = status
        return self

    def build(self) -> Response:
        return Response(status=self._status, **self._part_fields())


class InputBuilder(_PartBuilder):
    def __init__(self) -> None:
        super().__init__()
        self._message_from: Any = None
        self._triggered_by: str | None = None
        self._assert_that: str | None = None

    def message_from(self, source: Any) -> InputBuilder:
        self._message_from = source
        return self

    def triggered_by(self, method_name: str) -> InputBuilder:
        self._triggered_by = method_name
        return self

    def assert_that(self, method_name: str) -> InputBuilder:
        self._assert_that = method_name
        return self

    def build(self) -> MessageInput:
        return MessageInput(
            message_from=self._message_from,
            triggered_by=self._triggered_by,
            assert_that=self._assert_that,
            **self._part_fields(),
        )


class OutputMessageBuilder(_PartBuilder):
    def __init__(self) -> None:
        super().__init__()
        self._sent_to: Any = None
        self._assert_that: str | None = None

    def sent_to(self, destination: Any) -> OutputMessageBuilder:
        self._sent_to = destination
        return self

    def assert_that(self, method_name: str) -> OutputMessageBuilder:
        self._assert_that = method_name
        return self

    def build(self) -> OutputMessage:
        return OutputMessage(sent_to=self._sent_to, assert_that=self._assert_that, **self._part_fields())


class ContractBuilder:
    """
    Builder for a single Contract.

    Sub-builder accessors (``request``, ``response``, ``input``,
    ``output_message``) create their part once. Called without arguments
    they return the sub-builder; called with a callable they pass the
    sub-builder to it and return this builder for chaining.
    """

    def __init__(self) -> None:
        self._kind: InteractionKind | None = None
        self._parts: dict[str, _PartBuilder] = {}
        self._name: str | None = None
        self._description: str | None = None
        self._label: str | None = None
        self._priority: int | None = None
        self._ignored = False
        self._in_progress = False

    def name(self, name: str) -> ContractBuilder:
        self._name = name
        return self

    def description(self, description: str) -> ContractBuilder:
        self._description = description
        return self

    def label(self, label: str) -> ContractBuilder:
        self._label = label
        return self

    def priority(self, priority: int) -> ContractBuilder:
        self._priority = priority
        return self

    def ignored(self, flag: bool = True) -> ContractBuilder:
        self._ignored = flag
        return self

    def in_progress(self, flag: bool = True) -> ContractBuilder:
        self._in_progress = flag
        return self

    def request(self, configure: Callable[[RequestBuilder], Any] | None = None):
        return self._part("request", InteractionKind.HTTP, RequestBuilder, configure)

    def response(self, configure: Callable[[ResponseBuilder], Any] | None = None):
        return self._part("response", InteractionKind.HTTP, ResponseBuilder, configure)

    def input(self, configure: Callable[[InputBuilder], Any] | None = None):
        return self._part("input", InteractionKind.MESSAGING, InputBuilder, configure)

    def output_message(self, configure: Callable[[OutputMessageBuilder], Any] | None = None):
        return self._part("output_message", InteractionKind.MESSAGING, OutputMessageBuilder, configure)

    def _part(self, key: str, kind: InteractionKind, factory: type, configure: Callable | None):
        if self._kind is not None and self._kind is not kind:
            raise ContractDefinitionError(
                f"Cannot declare '{key}' on a {self._kind.value} contract",
                context={"part": key, "contract_kind": self._kind.value},
            )
        self._kind = kind
        part = self._parts.setdefault(key, factory())
        if configure is None:
            return part
        configure(part)
        return self

    def build(self) -> Contract:
        """
        Finalize the contract.

        Raises:
            MissingRequiredFieldError: If a declared part lacks a required field
        """
        built = {key: part.build() for key, part in self._parts.items()}
        interaction = None
        if self._kind is InteractionKind.HTTP:
            interaction = HttpInteraction(request=built.get("request"), response=built.get("response"))
        elif self._kind is InteractionKind.MESSAGING:
            interaction = MessageInteraction(input=built.get("input"), output_message=built.get("output_message"))

        contract = Contract(
            interaction=interaction,
            name=self._name,
            description=self._description,
            label=self._label,
            priority=self._priority,
            ignored=self._ignored,
            in_progress=self._in_progress,
        )
        logger.debug(
            "contract_built",
            contract=contract.name,
            kind=contract.kind.value if contract.kind is not None else None,
        )
        return contract
