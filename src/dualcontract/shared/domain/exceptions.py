"""
Domain exceptions for dualcontract.

Follows the "Fail Fast" principle: every error is raised synchronously
to the caller building or resolving a single contract.
All library errors inherit from ContractError.
"""


class ContractError(Exception):
    """Base class for all dualcontract exceptions."""

    def __init__(self, message: str, context: dict = None):
        super().__init__(message)
        self.context = context or {}


class ContractDefinitionError(ContractError):
    """Raised when a contract is assembled from inconsistent or unsupported parts."""

    pass


class MissingRequiredFieldError(ContractDefinitionError):
    """Raised when a contract is finalized without one of its required fields."""

    def __init__(self, field_name: str, contract_kind: str, message: str | None = None):
        super().__init__(
            message or f"{field_name.capitalize()} is missing for {contract_kind} contract",
            context={"field": field_name, "contract_kind": contract_kind},
        )
        self.field_name = field_name
        self.contract_kind = contract_kind


class UnknownPatternKindError(ContractError):
    """Raised when the pattern library has no matcher for a requested kind."""

    def __init__(self, kind: object):
        super().__init__(f"Unknown pattern kind: {kind!r}", context={"kind": str(kind)})
        self.kind = kind


class InvalidPatternError(ContractError):
    """Raised when a regular expression cannot be compiled into a matcher."""

    pass


class InvalidPathError(ContractError):
    """Raised when a body matcher path expression cannot be parsed."""

    pass


class AmbiguousBodyMatcherError(ContractError):
    """Raised when two body matchers conflict irreconcilably on the same path."""

    pass
