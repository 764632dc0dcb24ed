"""
Dual-value resolution engine.

Walks a contract tree and produces the concrete projection for one mode:

- Literal: returned as-is (frozen structures become dict/list, order kept)
- DualValue: the side for the mode is selected
- PatternMatcher: CONSUMER mode gets the matcher's example value,
  PRODUCER mode gets the matcher itself (to assert arbitrary runtime values)

Resolution is pure. Example values are seeded from the configured seed and
the location of the node, so resolving the same contract twice yields equal
output.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dualcontract.matchers.application import apply
from dualcontract.matchers.models import MatcherConflictPolicy
from dualcontract.matchers.path import BodyPath
from dualcontract.model.contract import Contract
from dualcontract.model.headers import Headers
from dualcontract.model.http import Request, Response
from dualcontract.model.messaging import MessageInput, OutputMessage
from dualcontract.model.values import DualValue, Mode
from dualcontract.patterns import PatternMatcher
from dualcontract.patterns.generators import derive_seed
from dualcontract.resolution.models import (
    ConcreteContract,
    ConcreteMessageInput,
    ConcreteOutputMessage,
    ConcreteRequest,
    ConcreteResponse,
)
from dualcontract.shared.infrastructure.config import settings
from dualcontract.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


def resolve(node: Any, mode: Mode, seed: int | None = None) -> Any:
    """
    Resolve any contract node for a mode.

    Args:
        node: Literal, DualValue, PatternMatcher or frozen structure
        mode: CONSUMER or PRODUCER
        seed: Base seed for examples (defaults to configured seed)

    Returns:
        Concrete value tree
    """
    return _resolve(node, Mode(mode), _base_seed(seed), ())


def resolve_headers(headers: Headers, mode: Mode, seed: int | None = None) -> list[tuple[str, Any]]:
    """Resolve header cells in declaration order, keeping duplicates."""
    return _resolve_headers(headers, Mode(mode), _base_seed(seed), "headers")


def resolve_contract(
    contract: Contract,
    mode: Mode,
    seed: int | None = None,
    policy: MatcherConflictPolicy | str | None = None,
) -> ConcreteContract:
    """
    Render a contract for one side.

    Args:
        contract: Validated contract
        mode: CONSUMER (stub rendering) or PRODUCER (test rendering)
        seed: Base seed for examples (defaults to configured seed)
        policy: Body matcher conflict policy override

    Returns:
        ConcreteContract with every part resolved and body matchers applied
    """
    mode = Mode(mode)
    base_seed = _base_seed(seed)
    renderer = _PartRenderer(mode, base_seed, policy)

    concrete = ConcreteContract(
        mode=mode,
        name=contract.name,
        description=contract.description,
        label=contract.label,
        priority=contract.priority,
        ignored=contract.ignored,
        in_progress=contract.in_progress,
        request=renderer.request(contract.request) if contract.request is not None else None,
        response=renderer.response(contract.response) if contract.response is not None else None,
        input=renderer.message_input(contract.input) if contract.input is not None else None,
        output_message=(
            renderer.output_message(contract.output_message) if contract.output_message is not None else None
        ),
    )

    logger.debug(
        "contract_resolved",
        contract=contract.name,
        mode=mode.value,
        kind=contract.kind.value if contract.kind is not None else None,
    )
    return concrete


class _PartRenderer:
    """Resolves the parts of one contract for one mode."""

    def __init__(self, mode: Mode, seed: int, policy: MatcherConflictPolicy | str | None):
        self.mode = mode
        self.seed = seed
        self.policy = policy

    def request(self, request: Request) -> ConcreteRequest:
        body, matchers = self._body(request.body, request.body_matchers, "request")
        return ConcreteRequest(
            method=_resolve(request.method, self.mode, self.seed, ("request", "method")),
            url=_resolve(request.url.path, self.mode, self.seed, ("request", "url")),
            query_parameters=[
                (param.name, _resolve(param.value, self.mode, self.seed, ("request", "query", param.name)))
                for param in request.url.query_parameters
            ],
            headers=_resolve_headers(request.headers, self.mode, self.seed, "request"),
            body=body,
            body_matchers=matchers,
        )

    def response(self, response: Response) -> ConcreteResponse:
        body, matchers = self._body(response.body, response.body_matchers, "response")
        return ConcreteResponse(
            status=response.status,
            headers=_resolve_headers(response.headers, self.mode, self.seed, "response"),
            body=body,
            body_matchers=matchers,
        )

    def message_input(self, message_input: MessageInput) -> ConcreteMessageInput:
        body, matchers = self._body(message_input.body, message_input.body_matchers, "input")
        return ConcreteMessageInput(
            message_from=_resolve(message_input.message_from, self.mode, self.seed, ("input", "from")),
            headers=_resolve_headers(message_input.headers, self.mode, self.seed, "input"),
            body=body,
            body_matchers=matchers,
            triggered_by=message_input.triggered_by,
            assert_that=message_input.assert_that,
        )

    def output_message(self, output_message: OutputMessage) -> ConcreteOutputMessage:
        body, matchers = self._body(output_message.body, output_message.body_matchers, "output")
        return ConcreteOutputMessage(
            sent_to=_resolve(output_message.sent_to, self.mode, self.seed, ("output", "to")),
            headers=_resolve_headers(output_message.headers, self.mode, self.seed, "output"),
            body=body,
            body_matchers=matchers,
            assert_that=output_message.assert_that,
        )

    def _body(self, body: Any, body_matchers: Any, part: str) -> tuple[Any, tuple]:
        part_seed = derive_seed(self.seed, part)
        resolved = _resolve(body, self.mode, part_seed, ())
        effective = apply(resolved, body_matchers, self.mode, policy=self.policy, seed=part_seed)
        return effective.body, effective.matchers


def _base_seed(seed: int | None) -> int:
    return settings.example_seed if seed is None else seed


def _resolve_headers(headers: Headers, mode: Mode, seed: int, part: str) -> list[tuple[str, Any]]:
    return [
        (header.name, _resolve(header.value, mode, seed, (part, "headers", index)))
        for index, header in enumerate(headers)
    ]


def _resolve(node: Any, mode: Mode, seed: int, location: tuple) -> Any:
    if isinstance(node, DualValue):
        return _resolve_side(node.select(mode), mode, seed, location)
    if isinstance(node, PatternMatcher):
        return _resolve_side(node, mode, seed, location)
    if isinstance(node, Mapping):
        return {key: _resolve(item, mode, seed, location + (key,)) for key, item in node.items()}
    if isinstance(node, (tuple, list)):
        return [_resolve(item, mode, seed, location + (index,)) for index, item in enumerate(node)]
    return node


def _resolve_side(side: Any, mode: Mode, seed: int, location: tuple) -> Any:
    if isinstance(side, PatternMatcher):
        if mode is Mode.CONSUMER:
            return side.example(derive_seed(seed, BodyPath(location).canonical))
        return side
    return _resolve(side, mode, seed, location)
