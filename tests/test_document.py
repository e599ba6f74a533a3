"""Canonical HAL document shape."""

import json

from fastapi_hal import HALDocumentBuilder, Link, Resource, parse, render


def test_empty_resource() -> None:
    assert render(Resource()) == "{}"


def test_with_self() -> None:
    assert render(Resource.with_self("https://www.example.com")) == (
        '{"_links":{"self":{"href":"https://www.example.com"}}}'
    )


def test_single_link_is_an_object() -> None:
    resource = Resource.with_self("https://www.example.com").add_link(
        "orders", Link("https://www.example.com/orders")
    )
    assert render(resource) == (
        '{"_links":{"orders":{"href":"https://www.example.com/orders"},'
        '"self":{"href":"https://www.example.com"}}}'
    )


def test_two_links_are_an_array_in_insertion_order() -> None:
    resource = (
        Resource.with_self("https://www.example.com")
        .add_link("orders", Link("https://www.example.com/orders/1"))
        .add_link("orders", Link("https://www.example.com/orders/2"))
    )
    assert render(resource) == (
        '{"_links":{"orders":[{"href":"https://www.example.com/orders/1"},'
        '{"href":"https://www.example.com/orders/2"}],'
        '"self":{"href":"https://www.example.com"}}}'
    )


def test_single_curie_is_still_an_array() -> None:
    resource = Resource.with_self("https://www.example.com").add_curie(
        "ea", "http://example.com/docs/rels/{rel}"
    )
    assert render(resource) == (
        '{"_links":{"curies":[{"href":"http://example.com/docs/rels/{rel}",'
        '"name":"ea","templated":true}],"self":{"href":"https://www.example.com"}}}'
    )


def test_state_keys_are_sorted() -> None:
    resource = Resource().add_state("b", 2).add_state("a", 1).add_state("c", 3)
    assert render(resource) == '{"a":1,"b":2,"c":3}'


def test_scalar_state() -> None:
    resource = (
        Resource()
        .add_state("currentlyProcessing", 14)
        .add_state("currency", "USD")
        .add_state("active", True)
        .add_state("errors", None)
    )
    assert render(resource) == (
        '{"active":true,"currency":"USD","currentlyProcessing":14,"errors":null}'
    )


def test_list_and_object_state() -> None:
    resource = (
        Resource.with_self("/user/1")
        .add_state("friends", ["Mary", "Timmy"])
        .add_state("fullname", {"given": "John", "family": "Doe"})
    )
    assert render(resource) == (
        '{"_links":{"self":{"href":"/user/1"}},"friends":["Mary","Timmy"],'
        '"fullname":{"family":"Doe","given":"John"}}'
    )


def test_single_embedded_resource_collapses() -> None:
    resource = Resource().add_resource("item", Resource.with_self("/items/1"))
    assert render(resource) == '{"_embedded":{"item":{"_links":{"self":{"href":"/items/1"}}}}}'


def test_embedded_nesting_matches_golden_document(orders_resource, orders_document) -> None:
    assert render(orders_resource) == orders_document


def test_builder_output_is_generic_json(orders_resource) -> None:
    document = HALDocumentBuilder().build(orders_resource)
    assert list(document) == ["_embedded", "_links", "currentlyProcessing", "shippedToday"]
    assert isinstance(document["_embedded"]["ea:order"], list)
    assert json.loads(json.dumps(document)) == document


def test_render_accepts_to_resource_implementers() -> None:
    class Ping:
        def to_resource(self) -> Resource:
            return Resource().add_state("pong", True)

    assert render(Ping()) == '{"pong":true}'


def test_render_indent() -> None:
    assert render(Resource().add_state("a", 1), indent=2) == '{\n  "a": 1\n}'


def test_parse_render_round_trip(orders_resource, orders_document) -> None:
    assert parse(orders_document) == orders_resource
    assert parse(render(orders_resource)) == orders_resource


def test_non_finite_state_renders_as_null() -> None:
    resource = Resource().add_state("ratio", float("nan")).add_state("limit", float("inf"))
    assert render(resource) == '{"limit":null,"ratio":null}'


def test_reserved_sections_win_over_state_of_the_same_name() -> None:
    resource = (
        Resource.with_self("/a")
        .add_state("_links", 1)
        .add_state("_embedded", "x")
        .add_resource("item", Resource())
    )
    assert render(resource) == '{"_embedded":{"item":{}},"_links":{"self":{"href":"/a"}}}'


def test_state_named_like_an_empty_section_is_kept() -> None:
    assert render(Resource().add_state("_links", 1)) == '{"_links":1}'
