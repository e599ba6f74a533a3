"""Shared fixtures for the HAL test suite."""

import pytest

from fastapi_hal import Link, Resource

ORDERS_DOCUMENT = (
    '{"_embedded":{"ea:order":['
    '{"_links":{"ea:basket":{"href":"/baskets/98712"},"ea:customer":{"href":"/customers/7809"},'
    '"self":{"href":"/orders/123"}},"currency":"USD","status":"shipped","total":30.0},'
    '{"_links":{"ea:basket":{"href":"/baskets/97213"},"ea:customer":{"href":"/customers/12369"},'
    '"self":{"href":"/orders/124"}},"currency":"USD","status":"processing","total":20.0}]},'
    '"_links":{"curies":[{"href":"http://example.com/docs/rels/{rel}","name":"ea","templated":true}],'
    '"ea:admin":[{"href":"/admins/2","title":"Fred"},{"href":"/admins/5","title":"Kate"}],'
    '"ea:find":{"href":"/orders{?id}","templated":true},"next":{"href":"/orders?page=2"},'
    '"self":{"href":"/orders"}},"currentlyProcessing":14,"shippedToday":14}'
)


def make_order(href: str, basket: str, customer: str, total: float, status: str) -> Resource:
    return (
        Resource.with_self(href)
        .add_link("ea:basket", Link(basket))
        .add_link("ea:customer", Link(customer))
        .add_state("total", total)
        .add_state("currency", "USD")
        .add_state("status", status)
    )


@pytest.fixture
def orders_resource() -> Resource:
    """The order list example from the HAL draft."""
    return (
        Resource.with_self("/orders")
        .add_curie("ea", "http://example.com/docs/rels/{rel}")
        .add_link("next", Link("/orders?page=2"))
        .add_link("ea:find", Link("/orders{?id}").with_templated(True))
        .add_link("ea:admin", Link("/admins/2").with_title("Fred"))
        .add_link("ea:admin", Link("/admins/5").with_title("Kate"))
        .add_state("currentlyProcessing", 14)
        .add_state("shippedToday", 14)
        .add_resource(
            "ea:order", make_order("/orders/123", "/baskets/98712", "/customers/7809", 30.0, "shipped")
        )
        .add_resource(
            "ea:order",
            make_order("/orders/124", "/baskets/97213", "/customers/12369", 20.0, "processing"),
        )
    )


@pytest.fixture
def orders_document() -> str:
    return ORDERS_DOCUMENT
