"""Mock Printify transport for sandbox mode and tests."""

import copy
import json
from fnmatch import fnmatchcase
from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx

Handler = Callable[[httpx.Request], httpx.Response]

SAMPLE_PRODUCT: Dict[str, Any] = {
    "id": "5d39b159e7c48c000728c89f",
    "title": "Mock Mug 11oz",
    "description": "Ceramic mug with a full wrap print",
    "tags": ["Home & Living", "Mugs"],
    "options": [{"name": "Sizes", "type": "size", "values": [{"id": 1189, "title": "11oz"}]}],
    "variants": [{"id": 33719, "price": 1200, "is_enabled": True}],
    "images": [{"src": "https://images.printify.com/mockup/5d39b159e7c48c000728c89f/33719/145/mug-11oz.jpg"}],
}


class MockPrintifyTransport(httpx.AsyncBaseTransport):
    """
    Transport that answers with canned Printify-like JSON.

    Every request is recorded in ``requests``. Routes are matched on method
    and on the path below ``prefix``, one segment at a time with shell-style
    wildcards (``/shops/*/products/*.json``). Routes added later win, so
    tests can override the defaults; anything unmatched gets a 404.
    """

    def __init__(self, prefix: str = "/v1", defaults: bool = True):
        self.prefix = prefix
        self.requests: List[httpx.Request] = []
        self._routes: List[Tuple[str, str, Handler]] = []
        if defaults:
            self._add_default_routes()

    def add_route(
        self,
        method: str,
        path: str,
        json: Any = None,
        status_code: int = 200,
        handler: Optional[Handler] = None,
    ) -> None:
        if handler is None:
            payload = json

            def handler(_request: httpx.Request) -> httpx.Response:
                return httpx.Response(status_code, json=copy.deepcopy(payload))

        self._routes.append((method.upper(), path, handler))

    def _add_default_routes(self) -> None:
        self.add_route("GET", "/shops.json", json=[
            {"id": 1234567, "title": "Mock Shop", "sales_channel": "custom_integration"},
        ])
        self.add_route("GET", "/shops/*/products.json", json={
            "current_page": 1,
            "data": [SAMPLE_PRODUCT],
        })
        self.add_route("GET", "/shops/*/products/*.json", json=SAMPLE_PRODUCT)
        self.add_route("GET", "/shops/*/webhooks.json", json=[])
        self.add_route("POST", "/shops/*/webhooks.json", handler=_echo_webhook)
        self.add_route("DELETE", "/shops/*/webhooks/*.json", json={})
        self.add_route("POST", "/shops/*/orders.json", json={"id": "5a96f649b2439217d070f507"})
        self.add_route("POST", "/shops/*/orders/*/send_to_production.json", json={
            "id": "5a96f649b2439217d070f507",
            "line_items": [{"product_id": SAMPLE_PRODUCT["id"], "variant_id": 33719, "quantity": 1}],
            "address_to": {"first_name": "John", "last_name": "Smith", "country": "BE"},
        })
        for action in ("publish", "unpublish", "publishing_failed", "publishing_succeeded"):
            self.add_route("POST", f"/shops/*/products/*/{action}.json", json={})

    def _relative_path(self, request: httpx.Request) -> str:
        path = request.url.path
        if self.prefix and path.startswith(self.prefix):
            path = path[len(self.prefix):]
        return path

    def _match(self, method: str, path: str) -> Optional[Handler]:
        segments = path.split("/")
        for route_method, route_path, handler in reversed(self._routes):
            if route_method != method:
                continue
            pattern = route_path.split("/")
            if len(pattern) == len(segments) and all(
                fnmatchcase(seg, pat) for seg, pat in zip(segments, pattern)
            ):
                return handler
        return None

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        await request.aread()
        self.requests.append(request)
        handler = self._match(request.method, self._relative_path(request))
        if handler is None:
            return httpx.Response(404, json={"error": "Not found"})
        return handler(request)


def _echo_webhook(request: httpx.Request) -> httpx.Response:
    payload = json.loads(request.content)
    return httpx.Response(200, json={
        "id": f"mock-webhook-{payload.get('topic', '')}",
        "topic": payload.get("topic"),
        "url": payload.get("url"),
        "shop_id": 1234567,
    })
