"""Pytest fixtures for the product lookup gateway."""

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from app.api_clients import SearchApiClient
from app.config import GatewaySettings
from app.models import UpstreamResponse

UPSTREAM_PATH = "/api/v1/search"


class FakeSearchApiClient(SearchApiClient):
    """Records every query and answers with a canned response or error."""

    def __init__(self, response=None, error=None):
        super().__init__(GatewaySettings(api_key="test-key"))
        self.response = response or UpstreamResponse(status=200, reason="OK", body={})
        self.error = error
        self.queries = []

    async def fetch(self, query, parse_errors=True):
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def fake_client():
    return FakeSearchApiClient()


class Upstream:
    """Local stand-in for the product search service."""

    def __init__(self):
        self.status = 200
        self.body = {}
        self.raw_text = None
        self.requests = []

    async def handle(self, request):
        self.requests.append({"query": dict(request.query), "content_type": request.headers.get("Content-Type")})
        if self.raw_text is not None:
            return web.Response(text=self.raw_text, status=self.status)
        return web.json_response(self.body, status=self.status)


@pytest_asyncio.fixture
async def upstream():
    stub = Upstream()
    web_app = web.Application()
    web_app.router.add_get(UPSTREAM_PATH, stub.handle)

    server = TestServer(web_app)
    await server.start_server()
    stub.url = str(server.make_url(UPSTREAM_PATH))
    try:
        yield stub
    finally:
        await server.close()


@pytest.fixture
def upstream_settings(upstream):
    return GatewaySettings(api_key="test-key", upstream_url=upstream.url, engine="shein_product")
