"""
Tests for the dual-value resolution engine.

Covers node resolution, header resolution and rendering whole contracts
for the consumer (stub) and producer (test) sides.
"""

import pytest
from hypothesis import given, settings as hypothesis_settings, strategies as st

from dualcontract import (
    AmbiguousBodyMatcherError,
    Contract,
    ContractDefinitionError,
    DualValue,
    Mode,
    RuleAssertion,
    any_date_time,
    any_integer,
    any_uuid,
    by_null,
    by_regex,
    by_type,
    regex,
    resolve,
    resolve_contract,
    resolve_headers,
    value,
)
from dualcontract.model.headers import Headers
from dualcontract.model.values import freeze
from dualcontract.patterns.generators import derive_seed
from dualcontract.shared.infrastructure.config import settings

json_leaves = st.one_of(st.none(), st.booleans(), st.integers(), st.text(max_size=10))
json_trees = st.recursive(
    json_leaves,
    lambda children: st.one_of(
        st.lists(children, max_size=4),
        st.dictionaries(st.text(max_size=5), children, max_size=4),
    ),
    max_leaves=20,
)


class TestResolveNode:
    def test_literal_is_returned_as_is(self):
        assert resolve("x", Mode.CONSUMER) == "x"
        assert resolve(12, Mode.PRODUCER) == 12

    def test_frozen_structures_become_plain(self):
        resolved = resolve(freeze({"a": [1, {"b": 2}]}), Mode.PRODUCER)

        assert resolved == {"a": [1, {"b": 2}]}
        assert type(resolved) is dict
        assert type(resolved["a"]) is list

    def test_dual_value_selects_side(self):
        cell = value(consumer="c", producer="p")

        assert resolve(cell, Mode.CONSUMER) == "c"
        assert resolve(cell, Mode.PRODUCER) == "p"

    def test_matcher_resolves_to_example_for_consumer(self):
        resolved = resolve(any_uuid(), Mode.CONSUMER, seed=5)

        assert any_uuid().matches(resolved)
        assert resolved == any_uuid().example(derive_seed(5, "$"))

    def test_matcher_resolves_to_itself_for_producer(self):
        assert resolve(any_uuid(), Mode.PRODUCER) is any_uuid()

    def test_matcher_side_of_cell(self):
        cell = value(consumer=regex("text/.*"), producer="text/plain")

        assert regex("text/.*").matches(resolve(cell, Mode.CONSUMER))
        assert resolve(cell, Mode.PRODUCER) == "text/plain"

    def test_nested_matchers_get_location_seeds(self):
        tree = freeze({"a": any_integer(), "b": [any_integer()]})

        resolved = resolve(tree, Mode.CONSUMER, seed=1)

        assert resolved["a"] == any_integer().example(derive_seed(1, "$.a"))
        assert resolved["b"][0] == any_integer().example(derive_seed(1, "$.b[0]"))

    def test_resolution_is_repeatable(self):
        tree = freeze({"id": any_uuid(), "when": any_date_time()})

        assert resolve(tree, Mode.CONSUMER, seed=8) == resolve(tree, Mode.CONSUMER, seed=8)

    def test_mode_may_be_given_as_string(self):
        assert resolve(value(consumer="c", producer="p"), "producer") == "p"
        assert resolve(value(consumer="c", producer="p"), "CONSUMER") == "c"

    def test_unknown_mode_raises(self):
        with pytest.raises(ContractDefinitionError):
            resolve(value("x"), "sideways")

    @hypothesis_settings(max_examples=50, deadline=None)
    @given(tree=json_trees)
    def test_literal_trees_resolve_identically_in_both_modes(self, tree):
        frozen = freeze(tree)

        assert resolve(frozen, Mode.CONSUMER) == tree
        assert resolve(frozen, Mode.PRODUCER) == tree


class TestResolveHeaders:
    def test_order_and_duplicates_are_kept(self):
        headers = Headers().with_header("X-A", "1").with_header("X-B", "2").with_header("X-A", "3")

        assert resolve_headers(headers, Mode.PRODUCER) == [("X-A", "1"), ("X-B", "2"), ("X-A", "3")]

    def test_header_matchers(self):
        headers = Headers().with_header("Accept", value(consumer=regex("text/.*"), producer="text/plain"))

        (name, consumer_value), = resolve_headers(headers, Mode.CONSUMER)

        assert name == "Accept"
        assert regex("text/.*").matches(consumer_value)
        assert resolve_headers(headers, Mode.PRODUCER) == [("Accept", "text/plain")]


class TestResolveContract:
    def test_literal_only_contract_is_symmetric(self, http_contract):
        consumer = resolve_contract(http_contract, Mode.CONSUMER)
        producer = resolve_contract(http_contract, Mode.PRODUCER)

        assert consumer == producer
        assert consumer.mode is Mode.CONSUMER
        assert producer.request.method == "PUT"
        assert producer.request.url == "/foo"
        assert producer.request.headers == [("foo", "bar")]
        assert producer.request.body == {"foo": "bar"}
        assert producer.response.status == 200
        assert producer.response.body == {"foo2": "bar"}

    def test_complex_contract_headers(self, complex_contract_factory):
        contract = complex_contract_factory()

        producer = resolve_contract(contract, Mode.PRODUCER)
        consumer = resolve_contract(contract, Mode.CONSUMER)

        assert producer.request.headers == [("Accept", "text/plain"), ("X-Custom-Header", "121345")]
        assert regex("text/.*").matches(consumer.header("request", "Accept"))
        assert regex("^.*2134.*$").matches(consumer.header("request", "X-Custom-Header"))
        assert consumer.header("response", "Content-Type") == "text/plain"
        assert consumer.header("response", "Missing") is None

    def test_test_matcher_for_producer(self, matchers_contract):
        producer = resolve_contract(matchers_contract, Mode.PRODUCER)

        assert producer.response.body["created"] is any_date_time()
        assert producer.response.body["name"] == "Jan"
        assert len(producer.response.body_matchers) == 1
        assert producer.request.body == {"id": {"value": "132"}}
        assert producer.request.body_matchers == ()

    def test_test_matcher_ignored_for_consumer(self, matchers_contract):
        consumer = resolve_contract(matchers_contract, Mode.CONSUMER)

        assert consumer.response.body["created"] == "2014-02-02 12:23:43"
        assert consumer.response.body_matchers == ()
        assert consumer.request.body == {"id": {"value": "132"}}
        assert len(consumer.request.body_matchers) == 1

    def test_resolution_is_idempotent(self, complex_contract_factory):
        contract = complex_contract_factory()

        for mode in Mode:
            assert resolve_contract(contract, mode, seed=4) == resolve_contract(contract, mode, seed=4)

    def test_configured_seed_is_default(self, complex_contract_factory, monkeypatch):
        contract = complex_contract_factory()
        monkeypatch.setattr(settings, "example_seed", 9)

        assert resolve_contract(contract, Mode.CONSUMER) == resolve_contract(contract, Mode.CONSUMER, seed=9)

    def test_url_and_query_parameters(self):
        contract = (
            Contract.builder()
            .request(
                lambda r: r.method("GET")
                .url(value(consumer=regex("/users/[0-9]+"), producer="/users/1"))
                .query_parameter("limit", value(consumer=any_integer(), producer="10"))
            )
            .build()
        )

        producer = resolve_contract(contract, Mode.PRODUCER)
        consumer = resolve_contract(contract, Mode.CONSUMER)

        assert producer.request.url == "/users/1"
        assert producer.request.query_parameters == [("limit", "10")]
        assert regex("/users/[0-9]+").matches(consumer.request.url)
        assert any_integer().matches(consumer.request.query_parameters[0][1])
        assert consumer.response is None

    def test_body_matcher_in_body(self):
        contract = (
            Contract.builder()
            .request(lambda r: r.method("GET").url("/"))
            .response(lambda r: r.status(200).body({"id": any_uuid(), "name": "Jan"}))
            .build()
        )

        producer = resolve_contract(contract, Mode.PRODUCER)
        consumer = resolve_contract(contract, Mode.CONSUMER)

        assert producer.response.body["id"] is any_uuid()
        assert any_uuid().matches(consumer.response.body["id"])
        assert consumer.response.body["name"] == "Jan"

    def test_messaging_contract(self, messaging_contract):
        consumer = resolve_contract(messaging_contract, Mode.CONSUMER)
        producer = resolve_contract(messaging_contract, Mode.PRODUCER)

        assert consumer == producer
        for concrete in (consumer, producer):
            assert concrete.input.message_from == "input"
            assert concrete.input.body == {"foo": "bar"}
            assert concrete.input.headers == [("foo", "bar")]
            assert concrete.output_message.sent_to == "output"
            assert concrete.output_message.body == {"foo2": "bar"}
            assert concrete.output_message.headers == [("foo2", "bar")]
            assert concrete.request is None
            assert concrete.response is None

    def test_type_matcher_keeps_contract_literal_for_producer(self):
        contract = (
            Contract.builder()
            .request(lambda r: r.method("GET").url("/items/132"))
            .response(lambda r: r.status(200).body({"id": 132}).test_matcher("$.id", by_type()))
            .build()
        )

        producer = resolve_contract(contract, Mode.PRODUCER)
        consumer = resolve_contract(contract, Mode.CONSUMER)

        assert producer.response.body["id"] == RuleAssertion(by_type(), 132)
        assert producer.response.body["id"].expected == 132
        assert producer.response.body["id"].matches(7)
        assert not producer.response.body["id"].matches("7")
        assert consumer.response.body == {"id": 132}

    def test_metadata_is_carried(self):
        contract = Contract.builder().name("n").description("d").label("l").priority(2).ignored().build()

        concrete = resolve_contract(contract, Mode.PRODUCER)

        assert (concrete.name, concrete.description, concrete.label, concrete.priority) == ("n", "d", "l", 2)
        assert concrete.ignored is True
        assert concrete.request is None

    def test_policy_override(self):
        contract = (
            Contract.builder()
            .request(
                lambda r: r.method("POST")
                .url("/")
                .body({"a": "x"})
                .stub_matcher("$.a", by_regex("[a-z]"))
                .stub_matcher("$.a", by_null())
            )
            .build()
        )

        assert resolve_contract(contract, Mode.CONSUMER).request.body == {"a": None}
        with pytest.raises(AmbiguousBodyMatcherError):
            resolve_contract(contract, Mode.CONSUMER, policy="strict")

    def test_cells_in_body_are_resolved_per_side(self):
        contract = (
            Contract.builder()
            .request(
                lambda r: r.method("POST").url("/").body({"token": DualValue(regex("[A-Z]{4}"), "ABCD")})
            )
            .build()
        )

        assert resolve_contract(contract, Mode.PRODUCER).request.body == {"token": "ABCD"}
        assert regex("[A-Z]{4}").matches(resolve_contract(contract, Mode.CONSUMER).request.body["token"])
