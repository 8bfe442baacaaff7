"""
Printify API Client

A minimal typed async client for the Printify print-on-demand REST API:
shops, products, orders, webhooks and the publish lifecycle.
"""

__version__ = "0.1.0"

from .client import PrintifyClient
from .config import ClientConfig
from .exceptions import PrintifyError, PrintifyRequestError, MissingShopIdError
from .mock_client import MockPrintifyTransport

__all__ = [
    "PrintifyClient",
    "ClientConfig",
    "PrintifyError",
    "PrintifyRequestError",
    "MissingShopIdError",
    "MockPrintifyTransport",
]
