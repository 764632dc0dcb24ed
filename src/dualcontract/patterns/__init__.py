"""
Pattern library: named semantic matchers backed by regular expressions.

Exports:
    - PatternKind: Enum of registered kinds
    - PatternMatcher: Immutable matcher (regex + example generator)
    - PatternRegistry / default_registry: Process-wide read-only catalog
    - resolve, regex, any_of and the any_* shorthand constructors
"""

from dualcontract.patterns.models import PatternKind, PatternMatcher
from dualcontract.patterns.registry import (
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
    parse_kind,
    regex,
    resolve,
)

__all__ = [
    "PatternKind",
    "PatternMatcher",
    "PatternRegistry",
    "default_registry",
    "parse_kind",
    "resolve",
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
]
