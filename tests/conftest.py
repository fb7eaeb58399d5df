import asyncio

import httpx
import pytest

from planty_api.services.dispatcher import RequestDispatcher
from planty_api.services.pricing_client import PricingClient
from tests.payloads import PricingStub

PRICING_URL = "http://pricing.test"


@pytest.fixture
def pricing_stub():
    return PricingStub()


@pytest.fixture
def make_dispatcher():
    """Build dispatchers over a mocked pricing service; their http clients are closed on teardown."""
    http_clients = []

    def _make(handler) -> RequestDispatcher:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        http_clients.append(http_client)
        return RequestDispatcher(PricingClient(http_client, PRICING_URL))

    yield _make

    for http_client in http_clients:
        asyncio.run(http_client.aclose())
