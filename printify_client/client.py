"""Async client for the Printify REST API."""

import asyncio
import json
import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

import httpx

from .config import ClientConfig
from .exceptions import MissingShopIdError, PrintifyRequestError
from .models.printify_models import (
    CreateOrderRequest,
    OrderCreated,
    OrderToProduction,
    Product,
    ProductPage,
    Shop,
    Webhook,
    WebhookRegistration,
)

logger = logging.getLogger(__name__)

PRODUCTS_PAGE_LIMIT = 100
PUBLISH_FAILED_REASON = "Request timed out"
PLACEHOLDER_HANDLE_URL = "https://example.com/path/to/product/{product_id}"

ShopId = Union[int, str]


class PrintifyClient:
    """
    Thin async wrapper around the Printify API.

    Every method issues a single request (``create_webhooks`` issues one per
    topic) and returns the decoded JSON as a typed record. Nothing is retried
    or cached; a non-2xx answer raises ``PrintifyRequestError``.
    """

    def __init__(
        self,
        config: ClientConfig,
        client: Optional[httpx.AsyncClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            config: Client configuration (API key and optional shop id)
            client: Optional HTTP client, left open on close()
            transport: Optional transport for the owned HTTP client
                (e.g. MockPrintifyTransport); ignored when client is given
        """
        self.config = config

        if client is not None:
            self.client = client
            self._owns_client = False
        else:
            self.client = httpx.AsyncClient(transport=transport)
            self._owns_client = True

    async def close(self):
        """Close HTTP client."""
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json;charset=utf-8",
            "Authorization": f"Bearer {self.config.api_key}",
        }

    def _shop_path(self, operation: str, shop_id: Optional[ShopId]) -> str:
        shop = shop_id if shop_id is not None else self.config.shop_id
        if shop is None or shop == "":
            raise MissingShopIdError(operation)
        return f"/shops/{shop}"

    async def invoke(
        self,
        endpoint: str,
        method: str = "GET",
        body: Optional[str] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Send one request to Printify and return the decoded JSON body.

        Args:
            endpoint: Path appended to the base URL (e.g. "/shops.json")
            method: HTTP method
            body: Pre-serialized JSON request body
            params: Query string parameters

        Returns:
            The parsed JSON response, untouched

        Raises:
            PrintifyRequestError: on any non-2xx status
        """
        url = self.config.base_url + endpoint
        logger.debug("Printify request %s %s", method, url)

        response = await self.client.request(
            method,
            url,
            content=body,
            params=params,
            headers=self._headers(),
        )
        if not response.is_success:
            logger.warning(
                "Printify request %s %s failed: %s %s",
                method, url, response.status_code, response.reason_phrase,
            )
            raise PrintifyRequestError(response.status_code, response.reason_phrase)

        return response.json()

    async def get_shops(self) -> List[Shop]:
        """List the shops the API key has access to."""
        data = await self.invoke("/shops.json")
        return [Shop(**s) for s in data]

    async def create_webhooks(
        self,
        topics: Sequence[Union[WebhookRegistration, Mapping[str, Any]]],
        *,
        shop_id: Optional[ShopId] = None,
    ) -> List[Webhook]:
        """
        Register one webhook per entry, all requests in flight at once.

        Returns once every registration has completed. The first failure is
        raised as soon as it happens; requests still in flight are left
        running.

        Args:
            topics: Registrations (topic, url, secret) to create
            shop_id: Overrides the configured shop id

        Returns:
            The created webhooks, in input order
        """
        endpoint = f"{self._shop_path('create_webhooks', shop_id)}/webhooks.json"
        registrations = [
            t if isinstance(t, WebhookRegistration) else WebhookRegistration(**t)
            for t in topics
        ]
        results = await asyncio.gather(*[
            self.invoke(
                endpoint,
                method="POST",
                body=json.dumps({
                    "topic": registration.topic.value,
                    "url": registration.url,
                    "secret": registration.secret,
                }),
            )
            for registration in registrations
        ])
        return [Webhook(**r) for r in results]

    async def delete_webhook(self, webhook_id: str, *, shop_id: Optional[ShopId] = None) -> Any:
        shop = self._shop_path("delete_webhook", shop_id)
        return await self.invoke(f"{shop}/webhooks/{webhook_id}.json", method="DELETE")

    async def get_webhooks(self, *, shop_id: Optional[ShopId] = None) -> List[Webhook]:
        shop = self._shop_path("get_webhooks", shop_id)
        data = await self.invoke(f"{shop}/webhooks.json")
        return [Webhook(**w) for w in data]

    async def get_products(self, *, shop_id: Optional[ShopId] = None) -> ProductPage:
        """
        Fetch the first page of the shop's products.

        The page size is fixed at 100 and further pages are never requested.
        """
        shop = self._shop_path("get_products", shop_id)
        data = await self.invoke(
            f"{shop}/products.json",
            params={"limit": PRODUCTS_PAGE_LIMIT},
        )
        return ProductPage(**data)

    async def get_product(self, product_id: str, *, shop_id: Optional[ShopId] = None) -> Product:
        shop = self._shop_path("get_product", shop_id)
        data = await self.invoke(f"{shop}/products/{product_id}.json")
        return Product(**data)

    async def create_order(
        self,
        order: Union[CreateOrderRequest, Mapping[str, Any]],
        *,
        shop_id: Optional[ShopId] = None,
    ) -> OrderCreated:
        """
        Submit an order for a single line item.

        Args:
            order: Full order payload, sent as-is
            shop_id: Overrides the configured shop id

        Returns:
            The id Printify assigned to the order
        """
        shop = self._shop_path("create_order", shop_id)
        if not isinstance(order, CreateOrderRequest):
            order = CreateOrderRequest(**order)
        data = await self.invoke(
            f"{shop}/orders.json",
            method="POST",
            body=order.model_dump_json(),
        )
        return OrderCreated(**data)

    async def send_order_to_production(
        self, order_id: str, *, shop_id: Optional[ShopId] = None
    ) -> OrderToProduction:
        shop = self._shop_path("send_order_to_production", shop_id)
        data = await self.invoke(
            f"{shop}/orders/{order_id}/send_to_production.json",
            method="POST",
        )
        return OrderToProduction(**data)

    async def publish(self, product_id: str, *, shop_id: Optional[ShopId] = None) -> Any:
        """Publish every publishable field of the product."""
        shop = self._shop_path("publish", shop_id)
        return await self.invoke(
            f"{shop}/products/{product_id}/publish.json",
            method="POST",
            body=json.dumps({
                "title": True,
                "description": True,
                "images": True,
                "variants": True,
                "tags": True,
            }),
        )

    async def unpublish(self, product_id: str, *, shop_id: Optional[ShopId] = None) -> Any:
        shop = self._shop_path("unpublish", shop_id)
        return await self.invoke(
            f"{shop}/products/{product_id}/unpublish.json",
            method="POST",
        )

    async def set_publish_status_failed(
        self, product_id: str, *, shop_id: Optional[ShopId] = None
    ) -> Any:
        shop = self._shop_path("set_publish_status_failed", shop_id)
        return await self.invoke(
            f"{shop}/products/{product_id}/publishing_failed.json",
            method="POST",
            body=json.dumps({"reason": PUBLISH_FAILED_REASON}),
        )

    async def set_publish_status_succeeded(
        self,
        product_id: str,
        handle: Optional[str] = None,
        *,
        shop_id: Optional[ShopId] = None,
    ) -> Any:
        """
        Report a successful external publish back to Printify.

        Args:
            product_id: Printify product ID, also used as the external id
            handle: Storefront URL of the listing; a placeholder URL embedding
                the product id is sent when omitted
            shop_id: Overrides the configured shop id
        """
        shop = self._shop_path("set_publish_status_succeeded", shop_id)
        if handle is None:
            handle = PLACEHOLDER_HANDLE_URL.format(product_id=product_id)
        return await self.invoke(
            f"{shop}/products/{product_id}/publishing_succeeded.json",
            method="POST",
            body=json.dumps({"external": {"id": product_id, "handle": handle}}),
        )
