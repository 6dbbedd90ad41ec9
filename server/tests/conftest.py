import os

import httpx
import pytest
import pytest_asyncio


def _set_default(key: str, value: str) -> None:
    os.environ.setdefault(key, value)


_set_default("GRAPH_BASE_URL", "https://graph.microsoft.com/v1.0")
_set_default("LOG_LEVEL", "INFO")


class RecordingHandler:
    """MockTransport handler that records requests and replays one response."""

    def __init__(self, respond) -> None:
        self._respond = respond
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._respond(request)


@pytest_asyncio.fixture
async def mock_http():
    clients: list[httpx.AsyncClient] = []

    def factory(respond):
        handler = RecordingHandler(respond)
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client, handler

    yield factory
    for client in clients:
        await client.aclose()
