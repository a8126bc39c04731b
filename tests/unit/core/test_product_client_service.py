"""Tests for the typed catalog client."""

import json
from decimal import Decimal

import httpx
import pytest

from tinyshop.core.services import ProductService
from tinyshop.entities.service.product import Product


def _raise_connect_error(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


def _status(code: int):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(code)

    return handler


class TestProductServiceAgainstApi:
    """Exercise the client against the real routes, in-process."""

    @pytest.mark.asyncio
    async def test_full_lifecycle(self, asgi_service):
        async with asgi_service() as service:
            assert await service.get_products() == []

            created = await service.create_product(
                Product(name="Tent", price=Decimal("19.99"), image_url="tent.png")
            )
            assert created is not None
            assert created.id > 0
            assert created.price == Decimal("19.99")

            fetched = await service.get_product_by_id(created.id)
            assert fetched == created

            assert await service.update_product(
                created.id, Product(name="Big Tent", price=Decimal("49.50"))
            )
            updated = await service.get_product_by_id(created.id)
            assert updated is not None
            assert updated.id == created.id
            assert updated.name == "Big Tent"
            assert updated.image_url is None

            assert [p.id for p in await service.get_products()] == [created.id]

            assert await service.delete_product(created.id) is True
            assert await service.get_product_by_id(created.id) is None
            assert await service.delete_product(created.id) is False

    @pytest.mark.asyncio
    async def test_update_missing_is_false(self, asgi_service):
        async with asgi_service() as service:
            assert await service.update_product(999999, Product(name="Ghost")) is False

    @pytest.mark.asyncio
    async def test_price_survives_at_full_column_precision(self, asgi_service):
        async with asgi_service() as service:
            created = await service.create_product(
                Product(name="Exact", price=Decimal("9007199254740993.01"))
            )
            assert created is not None
            assert created.price == Decimal("9007199254740993.01")

            fetched = await service.get_product_by_id(created.id)
            assert fetched is not None
            assert fetched.price == Decimal("9007199254740993.01")


class TestProductServiceFailures:
    """Every failure collapses into the operation's failure value."""

    @pytest.mark.asyncio
    async def test_get_by_id_not_found_and_transport_error_are_equivalent(self, mock_service):
        async with mock_service(_status(404)) as not_found:
            missing = await not_found.get_product_by_id(1)
        async with mock_service(_raise_connect_error) as unreachable:
            broken = await unreachable.get_product_by_id(1)

        assert missing is None
        assert broken is None
        assert missing == broken

    @pytest.mark.asyncio
    @pytest.mark.parametrize("code", [400, 404, 500, 503])
    async def test_get_by_id_any_failure_status(self, mock_service, code: int):
        async with mock_service(_status(code)) as service:
            assert await service.get_product_by_id(1) is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("handler", [_status(500), _raise_connect_error])
    async def test_create_failure_is_none(self, mock_service, handler):
        async with mock_service(handler) as service:
            assert await service.create_product(Product(name="Tent")) is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("handler", [_status(404), _status(500), _raise_connect_error])
    async def test_update_and_delete_failure_is_false(self, mock_service, handler):
        async with mock_service(handler) as service:
            assert await service.update_product(1, Product(name="Tent")) is False
            assert await service.delete_product(1) is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("code", [200, 204])
    async def test_update_and_delete_success_statuses(self, mock_service, code: int):
        async with mock_service(_status(code)) as service:
            assert await service.update_product(1, Product(name="Tent")) is True
            assert await service.delete_product(1) is True

    @pytest.mark.asyncio
    @pytest.mark.parametrize("handler", [_status(500), _raise_connect_error])
    async def test_list_failure_is_empty_list(self, mock_service, handler):
        async with mock_service(handler) as service:
            assert await service.get_products() == []

    @pytest.mark.asyncio
    async def test_malformed_body_is_failure(self, mock_service):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b"<html>oops</html>")

        async with mock_service(handler) as service:
            assert await service.get_product_by_id(1) is None
            assert await service.get_products() == []


class TestProductServiceRequests:
    @pytest.mark.asyncio
    async def test_requests_use_catalog_routes_and_camel_case(self, mock_service):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            if request.method == "POST":
                payload = json.loads(request.content)
                return httpx.Response(201, json={**payload, "id": 5})
            return httpx.Response(204)

        async with mock_service(handler) as service:
            created = await service.create_product(
                Product(name="Tent", price=Decimal("19.99"), image_url="tent.png")
            )
            await service.update_product(5, Product(name="Tent"))
            await service.delete_product(5)

        assert created is not None
        assert created.id == 5
        assert created.image_url == "tent.png"
        assert [(r.method, r.url.path) for r in seen] == [
            ("POST", "/api/Product"),
            ("PUT", "/api/Product/5"),
            ("DELETE", "/api/Product/5"),
        ]
        body = json.loads(seen[0].content)
        assert body["imageUrl"] == "tent.png"
        assert body["price"] == "19.99"

    def test_from_config_uses_client_section(self):
        from tinyshop.runtime.config.config_data import ClientConfig, ConfigData
        from tinyshop.runtime.context import with_context

        override = ConfigData(client=ClientConfig(base_url="http://shop.internal:9000"))
        with with_context(override):
            service = ProductService.from_config()

        assert service._http.base_url.host == "shop.internal"
        assert service._http.base_url.port == 9000

    def test_from_config_base_url_argument_wins(self):
        service = ProductService.from_config("http://elsewhere:1234")

        assert service._http.base_url.host == "elsewhere"
        assert service._http.base_url.port == 1234
