"""
Tests for the pattern library.

Covers kind resolution, interning, literal regex caching and the guarantee
that every generated example satisfies its own matcher.
"""

import re

import pytest
from hypothesis import given, settings, strategies as st

from dualcontract.patterns import (
    PatternKind,
    PatternMatcher,
    PatternRegistry,
    any_alpha_unicode,
    any_boolean,
    any_date_time,
    any_integer,
    any_non_empty_string,
    any_number,
    any_of,
    any_uuid,
    default_registry,
    regex,
    resolve,
)
from dualcontract.shared.domain.exceptions import InvalidPatternError, UnknownPatternKindError

NAMED_KINDS = [kind for kind in PatternKind if kind is not PatternKind.REGEX]


class TestResolve:
    """Resolving kinds against the process-wide registry."""

    def test_every_named_kind_is_registered(self):
        assert set(default_registry.matchers) == set(NAMED_KINDS)

    @pytest.mark.parametrize("kind", ["any_number", "ANY_NUMBER", " Any_Number ", PatternKind.ANY_NUMBER])
    def test_kind_spellings_resolve_to_same_matcher(self, kind):
        assert resolve(kind) is any_number()

    def test_named_kinds_are_interned(self):
        assert resolve(PatternKind.ANY_UUID) is resolve("any_uuid")
        assert any_uuid() is any_uuid()

    def test_unknown_kind_raises(self):
        with pytest.raises(UnknownPatternKindError) as exc_info:
            resolve("any_phone_number")

        assert exc_info.value.kind == "any_phone_number"
        assert exc_info.value.context == {"kind": "any_phone_number"}

    def test_non_string_kind_raises(self):
        with pytest.raises(UnknownPatternKindError):
            resolve(42)

    def test_regex_kind_requires_pattern(self):
        with pytest.raises(InvalidPatternError):
            resolve(PatternKind.REGEX)

    def test_regex_kind_with_pattern(self):
        matcher = resolve("regex", "[0-9]{3}")

        assert matcher.kind is PatternKind.REGEX
        assert matcher.matches("123")

    def test_contains(self):
        assert "any_email" in default_registry
        assert PatternKind.ANY_HEX in default_registry
        assert "nope" not in default_registry

    def test_registry_view_is_read_only(self):
        with pytest.raises(TypeError):
            default_registry.matchers[PatternKind.ANY_NUMBER] = regex("x")

    def test_custom_registry(self):
        registry = PatternRegistry({PatternKind.ANY_NUMBER: regex("[0-9]")})

        assert registry.resolve("any_number").pattern == "[0-9]"
        with pytest.raises(KeyError):
            registry.resolve("any_uuid")


class TestLiteralRegex:
    """Matchers for literal regular expressions."""

    def test_same_expression_is_cached(self):
        assert regex("text/.*") is regex("text/.*")

    def test_compiled_pattern_is_accepted(self):
        matcher = regex(re.compile("^.*2134.*$"))

        assert matcher == regex("^.*2134.*$")
        assert matcher.matches("121345")

    def test_equality_ignores_generator(self):
        assert PatternMatcher(PatternKind.REGEX, "a+") == regex("a+")
        assert hash(PatternMatcher(PatternKind.REGEX, "a+")) == hash(regex("a+"))

    def test_flags_are_part_of_identity(self):
        assert regex("abc", re.IGNORECASE) != regex("abc")
        assert regex("abc", re.IGNORECASE).matches("ABC")

    def test_invalid_expression_raises(self):
        with pytest.raises(InvalidPatternError) as exc_info:
            regex("[unclosed")

        assert exc_info.value.context["pattern"] == "[unclosed"

    def test_example_matches_expression(self):
        matcher = regex("[0-9]{3}-[a-z]{2}")

        assert matcher.matches(matcher.example(seed=11))

    def test_str_is_pattern(self):
        assert str(regex("text/.*")) == "text/.*"


class TestMatches:
    """Runtime value matching."""

    def test_full_match_required(self):
        assert any_integer().matches("42")
        assert not any_integer().matches("42a")

    def test_numbers_are_matched_by_string_form(self):
        assert any_number().matches(3.5)
        assert any_integer().matches(-7)

    def test_booleans_render_lowercase(self):
        assert any_boolean().matches(True)
        assert any_boolean().matches(False)
        assert not any_integer().matches(True)

    def test_none_never_matches(self):
        assert not resolve("any_string").matches(None)

    def test_non_empty_accepts_non_empty_collections(self):
        assert any_non_empty_string().matches(["x"])
        assert any_non_empty_string().matches({"a": 1})
        assert not any_non_empty_string().matches([])
        assert not any_integer().matches([1])

    def test_unicode_letters(self):
        assert any_alpha_unicode().matches("Zażółć")
        assert not any_alpha_unicode().matches("abc1")

    def test_date_time(self):
        assert any_date_time().matches("2014-02-02T12:23:43")
        assert not any_date_time().matches("2014-02-02 12:23:43")


class TestAnyOf:
    def test_accepts_only_listed_values(self):
        matcher = any_of("GET", "POST")

        assert matcher.matches("GET")
        assert matcher.matches("POST")
        assert not matcher.matches("PUT")

    def test_values_are_escaped(self):
        matcher = any_of("a.b")

        assert matcher.matches("a.b")
        assert not matcher.matches("axb")

    def test_example_is_one_of_the_values(self):
        assert any_of("red", "green").example(seed=3) in {"red", "green"}

    def test_requires_values(self):
        with pytest.raises(InvalidPatternError):
            any_of()


class TestExamples:
    """Example generation."""

    @pytest.mark.parametrize("kind", NAMED_KINDS, ids=lambda kind: kind.value)
    @pytest.mark.parametrize("seed", [0, 1, 42, 2**31 + 5])
    def test_example_matches_own_pattern(self, kind, seed):
        matcher = resolve(kind)

        assert matcher.matches(matcher.example(seed))

    @pytest.mark.parametrize("kind", NAMED_KINDS, ids=lambda kind: kind.value)
    def test_example_is_deterministic(self, kind):
        matcher = resolve(kind)

        assert matcher.example(seed=7) == matcher.example(seed=7)

    @settings(max_examples=50, deadline=None)
    @given(seed=st.integers(min_value=0, max_value=2**32), kind=st.sampled_from(NAMED_KINDS))
    def test_any_seed_yields_matching_example(self, seed, kind):
        matcher = resolve(kind)

        assert matcher.matches(matcher.example(seed))

    def test_to_dict(self):
        assert any_uuid().to_dict() == {"kind": "any_uuid", "regex": any_uuid().pattern}
        assert regex("a", re.IGNORECASE).to_dict() == {"kind": "regex", "regex": "a", "flags": re.IGNORECASE}
