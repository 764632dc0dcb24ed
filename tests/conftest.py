"""Shared test fixtures for the dualcontract test suite."""

import pytest

from dualcontract import (
    Contract,
    HttpMethod,
    MediaType,
    by_regex,
    by_timestamp,
    any_integer,
    regex,
    value,
)


@pytest.fixture
def http_contract():
    """A simple PUT /foo contract with headers and bodies on both sides."""
    builder = Contract.builder()
    builder.request().url("/foo").method("PUT").header("foo", "bar").body({"foo": "bar"})
    builder.response().status(200).header("foo2", "bar").body({"foo2": "bar"})
    return builder.build()


@pytest.fixture
def messaging_contract():
    """Message contract: input from 'input', output sent to 'output'."""
    builder = Contract.builder()
    builder.input().message_from("input").body({"foo": "bar"}).header("foo", "bar")
    builder.output_message().sent_to("output").body({"foo2": "bar"}).header("foo2", "bar")
    return builder.build()


@pytest.fixture
def complex_contract_factory():
    """Factory building the same header-regex contract on every call."""

    def make():
        builder = Contract.builder()
        (
            builder.request()
            .method(HttpMethod.GET)
            .url("/path")
            .header("Accept", value(consumer=regex("text/.*"), producer="text/plain"))
            .header("X-Custom-Header", value(consumer=regex("^.*2134.*$"), producer="121345"))
        )
        (
            builder.response()
            .status(200)
            .body(
                {
                    "id": {"value": "132"},
                    "surname": "Kowalsky",
                    "name": "Jan",
                    "created": "2014-02-02 12:23:43",
                }
            )
            .content_type(MediaType.TEXT_PLAIN)
        )
        return builder.build()

    return make


@pytest.fixture
def matchers_contract():
    """Contract with a stub matcher on the request and a test matcher on the response."""
    builder = Contract.builder()
    (
        builder.request()
        .method("GET")
        .url("/path")
        .body({"id": {"value": "132"}})
        .stub_matcher("$.id.value", by_regex(any_integer()))
    )
    (
        builder.response()
        .status(200)
        .body(
            {
                "id": {"value": "132"},
                "surname": "Kowalsky",
                "name": "Jan",
                "created": "2014-02-02 12:23:43",
            }
        )
        .content_type(MediaType.APPLICATION_JSON)
        .test_matcher("$.created", by_timestamp())
    )
    return builder.build()
