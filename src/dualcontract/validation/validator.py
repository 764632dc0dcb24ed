"""
Contract validation.

Runs when a Contract is constructed and fails fast with the name of the
missing field:
- HTTP request: method and URL
- HTTP response: status
- Message input: source (message_from)
- Output message: destination (sent_to)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from dualcontract.shared.domain.exceptions import ContractDefinitionError, MissingRequiredFieldError
from dualcontract.shared.infrastructure.logging import get_logger

if TYPE_CHECKING:
    from dualcontract.model.contract import Contract

logger = get_logger(__name__)

HTTP = "HTTP"
MESSAGING = "messaging"


def validate(contract: Contract) -> None:
    """
    Validate a contract.

    Args:
        contract: Contract being finalized

    Raises:
        MissingRequiredFieldError: If a declared part lacks a required field
        ContractDefinitionError: If an interaction declares no parts at all
    """
    interaction = contract.interaction
    if interaction is None:
        return

    try:
        if interaction.kind.value == HTTP:
            _validate_http(interaction)
        else:
            _validate_messaging(interaction)
    except ContractDefinitionError as e:
        logger.warning(
            "contract_validation_failed",
            contract=contract.name,
            error=str(e),
            **e.context,
        )
        raise


def _validate_http(interaction: Any) -> None:
    request, response = interaction.request, interaction.response
    if request is None and response is None:
        raise ContractDefinitionError(
            "HTTP contract declares neither a request nor a response",
            context={"contract_kind": HTTP},
        )
    if request is not None:
        if request.method is None:
            raise MissingRequiredFieldError("method", HTTP, "Method is missing for HTTP contract")
        if request.url is None:
            raise MissingRequiredFieldError("url", HTTP, "URL is missing for HTTP contract")
    if response is not None and response.status is None:
        raise MissingRequiredFieldError("status", HTTP, "Status is missing for HTTP contract")


def _validate_messaging(interaction: Any) -> None:
    message_input, output_message = interaction.input, interaction.output_message
    if message_input is None and output_message is None:
        raise ContractDefinitionError(
            "Messaging contract declares neither an input nor an output message",
            context={"contract_kind": MESSAGING},
        )
    if message_input is not None and message_input.message_from is None:
        raise MissingRequiredFieldError(
            "message_from", MESSAGING, "Source (message_from) is missing for messaging contract"
        )
    if output_message is not None and output_message.sent_to is None:
        raise MissingRequiredFieldError(
            "sent_to", MESSAGING, "Destination (sent_to) is missing for messaging contract"
        )
