import httpx
import pytest

from printify_client.client import PrintifyClient
from printify_client.config import ClientConfig
from printify_client.mock_client import MockPrintifyTransport


def make_config(shop_id=1234567):
    return ClientConfig(api_key="test-token", shop_id=shop_id)


@pytest.fixture
def transport():
    return MockPrintifyTransport()


@pytest.fixture
def client(transport):
    return PrintifyClient(make_config(), client=httpx.AsyncClient(transport=transport))
