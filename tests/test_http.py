"""HAL responses, router and error middleware."""

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from fastapi_hal import HALJSONResponse, HALRouter, Link, Resource, parse
from fastapi_hal.config import HALSettings
from fastapi_hal.core.errors import HALErrorBuilder
from fastapi_hal.middleware import ErrorHandlerMiddleware

settings = HALSettings(include_error_detail=False)


def get_store() -> dict[int, str]:
    return {1: "shipped", 2: "processing"}


def build_app(error_settings: HALSettings = settings) -> FastAPI:
    router = HALRouter(prefix="/orders", hal_settings=settings)

    @router.resource("/parse/{document}")
    def parse_document(document: str) -> Resource:
        return parse(document)

    @router.resource("/raw")
    def raw() -> HALJSONResponse:
        return HALJSONResponse({"raw": True}, status_code=202)

    @router.resource("/{order_id}")
    def get_order(order_id: int, store: dict[int, str] = Depends(get_store)) -> Resource:
        return Resource.with_self(f"/orders/{order_id}").add_state("status", store[order_id])

    @router.resource("", methods=("POST",), status_code=201)
    async def create_order() -> Resource:
        return Resource.with_self("/orders/3").add_link("collection", Link("/orders"))

    app = FastAPI()
    app.include_router(router)
    app.add_middleware(ErrorHandlerMiddleware, settings=error_settings)
    return app


@pytest.fixture
def client() -> TestClient:
    return TestClient(build_app())


def test_resource_endpoint_renders_hal(client) -> None:
    response = client.get("/orders/1")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/hal+json")
    assert response.text == '{"_links":{"self":{"href":"/orders/1"}},"status":"shipped"}'


def test_async_endpoint_and_status_code(client) -> None:
    response = client.post("/orders")
    assert response.status_code == 201
    assert response.json()["_links"]["collection"] == {"href": "/orders"}


def test_response_objects_pass_through(client) -> None:
    response = client.get("/orders/raw")
    assert response.status_code == 202
    assert response.json() == {"raw": True}


def test_hal_errors_become_bad_requests(client) -> None:
    response = client.get('/orders/parse/{"_links":[]}')
    assert response.status_code == 400
    assert response.headers["content-type"].startswith("application/vnd.error+json")
    body = response.json()
    assert body["logref"] == 400
    assert "_links" in body["message"]


def test_link_without_href_becomes_a_bad_request(client) -> None:
    response = client.get('/orders/parse/{"_links":{"self":{"title":"x"}}}')
    assert response.status_code == 400
    assert "href" in response.json()["message"]


def test_unexpected_errors_hide_detail(client) -> None:
    response = client.get("/orders/9")
    assert response.status_code == 500
    assert response.json()["message"] == "Internal Server Error"


def test_unexpected_errors_show_detail_when_enabled() -> None:
    client = TestClient(build_app(HALSettings(include_error_detail=True)))
    response = client.get("/orders/9")
    assert response.status_code == 500
    assert response.json()["message"] == "9"


def test_response_indent_setting() -> None:
    response = HALJSONResponse(Resource().add_state("a", 1), settings=HALSettings(indent=2))
    assert response.body == b'{\n  "a": 1\n}'


def test_error_builder() -> None:
    builder = HALErrorBuilder()
    document = builder.error_document(
        message="Validation failed", logref=42, path="/username", help_href="/help"
    )
    assert document == {
        "_links": {"help": {"href": "/help"}},
        "logref": 42,
        "message": "Validation failed",
        "path": "/username",
    }
    with pytest.raises(ValueError):
        builder.error_resource(message="")


def test_error_collection() -> None:
    builder = HALErrorBuilder()
    errors = [builder.error_resource(message="a"), builder.error_resource(message="b")]
    document = builder.error_collection(errors).to_generic_json()
    assert document["total"] == 2
    assert [error["message"] for error in document["_embedded"]["errors"]] == ["a", "b"]
