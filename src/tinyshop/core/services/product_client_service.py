"""Typed HTTP client for the product catalog API.

Every remote failure collapses into the operation's failure value: ``None``
for lookups and creation, ``False`` for update/delete, and an empty list for
listing. A 404 and a dropped connection are deliberately indistinguishable
to callers.
"""

from __future__ import annotations

from types import TracebackType

import httpx
from loguru import logger
from pydantic import TypeAdapter, ValidationError

from tinyshop.entities.service.product import Product
from tinyshop.runtime.context import get_config

PRODUCT_PATH = "/api/Product"

_product_list = TypeAdapter(list[Product])


def _is_success(response: httpx.Response) -> bool:
    return response.is_success or response.status_code == httpx.codes.NO_CONTENT


def _to_json(product: Product) -> dict:
    return product.model_dump(mode="json", by_alias=True)


class ProductService:
    """Async client issuing requests against the catalog endpoints.

    The ``http_client`` must carry a ``base_url`` pointing at the API host.
    """

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        self._http = http_client

    @classmethod
    def from_config(cls, base_url: str | None = None) -> ProductService:
        """Build a service from the ``client`` configuration section."""
        client_config = get_config().client
        http_client = httpx.AsyncClient(
            base_url=base_url or client_config.base_url,
            timeout=client_config.timeout,
        )
        return cls(http_client)

    async def __aenter__(self) -> ProductService:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _send(self, method: str, url: str, **kwargs) -> httpx.Response | None:
        try:
            return await self._http.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.warning("{} {} failed: {}", method, url, e)
            return None

    async def get_product_by_id(self, product_id: int) -> Product | None:
        response = await self._send("GET", f"{PRODUCT_PATH}/{product_id}")
        if response is None or not response.is_success:
            return None
        return self._parse_product(response)

    async def create_product(self, product: Product) -> Product | None:
        response = await self._send("POST", PRODUCT_PATH, json=_to_json(product))
        if response is None or not response.is_success:
            return None
        return self._parse_product(response)

    async def update_product(self, product_id: int, product: Product) -> bool:
        response = await self._send(
            "PUT", f"{PRODUCT_PATH}/{product_id}", json=_to_json(product)
        )
        return response is not None and _is_success(response)

    async def delete_product(self, product_id: int) -> bool:
        response = await self._send("DELETE", f"{PRODUCT_PATH}/{product_id}")
        return response is not None and _is_success(response)

    async def get_products(self) -> list[Product]:
        response = await self._send("GET", PRODUCT_PATH)
        if response is None or not response.is_success:
            return []
        try:
            return _product_list.validate_json(response.content)
        except ValidationError as e:
            logger.warning("Malformed product list from {}: {}", response.url, e)
            return []

    @staticmethod
    def _parse_product(response: httpx.Response) -> Product | None:
        try:
            return Product.model_validate_json(response.content)
        except ValidationError as e:
            logger.warning("Malformed product from {}: {}", response.url, e)
            return None
