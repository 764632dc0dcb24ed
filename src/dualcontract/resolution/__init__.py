"""
Resolution engine: concrete consumer/producer projections of contracts.

Exports:
    - Mode: CONSUMER / PRODUCER
    - resolve, resolve_headers, resolve_contract
    - Concrete* result models
"""

from dualcontract.model.values import Mode
from dualcontract.resolution.engine import resolve, resolve_contract, resolve_headers
from dualcontract.resolution.models import (
    ConcreteContract,
    ConcreteMessageInput,
    ConcreteOutputMessage,
    ConcreteRequest,
    ConcreteResponse,
)

__all__ = [
    "Mode",
    "resolve",
    "resolve_headers",
    "resolve_contract",
    "ConcreteContract",
    "ConcreteRequest",
    "ConcreteResponse",
    "ConcreteMessageInput",
    "ConcreteOutputMessage",
]
