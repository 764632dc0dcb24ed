"""
dualcontract - consumer-driven contract model with dual-value resolution.

Every value in a contract can carry a consumer interpretation (used to
generate stubs) and a producer interpretation (used to generate
verification tests). This package provides the data model, the pattern
library, body matchers, validation and the resolution engine; parsing
contract sources and rendering stubs/tests are left to collaborators.

Example:
    >>> from dualcontract import Contract, Mode, resolve_contract, regex, value
    >>> builder = Contract.builder()
    >>> _ = builder.request().method("GET").url("/path").header(
    ...     "Accept", value(consumer=regex("text/.*"), producer="text/plain"))
    >>> _ = builder.response().status(200).body({"name": "Jan"})
    >>> contract = builder.build()
    >>> resolve_contract(contract, Mode.PRODUCER).request.headers
    [('Accept', 'text/plain')]
"""

from dualcontract.matchers import (
    AppliesTo,
    BodyMatcher,
    BodyMatchers,
    BodyPath,
    EffectiveAssertions,
    MatcherConflictPolicy,
    MatchingRule,
    MatchingType,
    RuleAssertion,
    apply,
    by_command,
    by_date,
    by_equality,
    by_null,
    by_regex,
    by_time,
    by_timestamp,
    by_type,
)
from dualcontract.model.builder import (
    ContractBuilder,
    InputBuilder,
    OutputMessageBuilder,
    RequestBuilder,
    ResponseBuilder,
)
from dualcontract.model.contract import Contract, HttpInteraction, InteractionKind, MessageInteraction
from dualcontract.model.headers import ACCEPT, CONTENT_TYPE, Header, Headers, MediaType, QueryParameter
from dualcontract.model.http import HttpMethod, Request, Response, Url
from dualcontract.model.messaging import MessageInput, OutputMessage
from dualcontract.model.values import DualValue, FrozenMapping, Mode, value
from dualcontract.patterns import (
    PatternKind,
    PatternMatcher,
    PatternRegistry,
    any_alpha_numeric,
    any_alpha_unicode,
    any_boolean,
    any_date,
    any_date_time,
    any_double,
    any_email,
    any_hex,
    any_hostname,
    any_https_url,
    any_integer,
    any_ip_address,
    any_iso8601_with_offset,
    any_non_blank_string,
    any_non_empty_string,
    any_number,
    any_of,
    any_positive_int,
    any_string,
    any_time,
    any_url,
    any_uuid,
    default_registry,
    regex,
)
from dualcontract.resolution import (
    ConcreteContract,
    ConcreteMessageInput,
    ConcreteOutputMessage,
    ConcreteRequest,
    ConcreteResponse,
    resolve,
    resolve_contract,
    resolve_headers,
)
from dualcontract.shared.domain.exceptions import (
    AmbiguousBodyMatcherError,
    ContractDefinitionError,
    ContractError,
    InvalidPathError,
    InvalidPatternError,
    MissingRequiredFieldError,
    UnknownPatternKindError,
)
from dualcontract.shared.utils.hasher import fingerprint
from dualcontract.validation import validate

__version__ = "0.1.0"

__all__ = [
    # Model
    "Contract",
    "ContractBuilder",
    "RequestBuilder",
    "ResponseBuilder",
    "InputBuilder",
    "OutputMessageBuilder",
    "HttpInteraction",
    "MessageInteraction",
    "InteractionKind",
    "Request",
    "Response",
    "Url",
    "HttpMethod",
    "MessageInput",
    "OutputMessage",
    "Header",
    "Headers",
    "QueryParameter",
    "MediaType",
    "CONTENT_TYPE",
    "ACCEPT",
    "DualValue",
    "FrozenMapping",
    "value",
    # Patterns
    "PatternKind",
    "PatternMatcher",
    "PatternRegistry",
    "default_registry",
    "regex",
    "any_of",
    "any_non_blank_string",
    "any_non_empty_string",
    "any_string",
    "any_boolean",
    "any_number",
    "any_integer",
    "any_positive_int",
    "any_double",
    "any_hex",
    "any_alpha_numeric",
    "any_alpha_unicode",
    "any_url",
    "any_https_url",
    "any_ip_address",
    "any_hostname",
    "any_email",
    "any_uuid",
    "any_date",
    "any_time",
    "any_date_time",
    "any_iso8601_with_offset",
    # Body matchers
    "AppliesTo",
    "BodyMatcher",
    "BodyMatchers",
    "BodyPath",
    "EffectiveAssertions",
    "MatcherConflictPolicy",
    "MatchingRule",
    "MatchingType",
    "RuleAssertion",
    "apply",
    "by_command",
    "by_date",
    "by_equality",
    "by_null",
    "by_regex",
    "by_time",
    "by_timestamp",
    "by_type",
    # Resolution
    "Mode",
    "resolve",
    "resolve_headers",
    "resolve_contract",
    "ConcreteContract",
    "ConcreteRequest",
    "ConcreteResponse",
    "ConcreteMessageInput",
    "ConcreteOutputMessage",
    # Validation & hashing
    "validate",
    "fingerprint",
    # Errors
    "ContractError",
    "ContractDefinitionError",
    "MissingRequiredFieldError",
    "UnknownPatternKindError",
    "InvalidPatternError",
    "InvalidPathError",
    "AmbiguousBodyMatcherError",
]
