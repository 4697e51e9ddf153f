"""
Exo client test configuration.

HTTP is faked with httpx.MockTransport; every request the client sends is
recorded on the `server` fixture so tests can assert on the wire call.
"""

import json

import httpx
import pytest

from exoclient import clear_configuration


class FakeServer:
    """Records requests and replies with a canned status and body."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status = 200
        self.body: str = json.dumps({"version": "1", "root": "shop", "rows": []})

    def reply(self, status: int, body) -> None:
        self.status = status
        self.body = body if isinstance(body, str) else json.dumps(body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status, text=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict:
        return json.loads(self.last.content)


@pytest.fixture(autouse=True)
def reset_default_configuration():
    clear_configuration()
    yield
    clear_configuration()


@pytest.fixture
def server():
    return FakeServer()


@pytest.fixture
async def http(server):
    async with httpx.AsyncClient(transport=httpx.MockTransport(server.handler)) as client:
        yield client


def rows_body(*rows, root="shop", tag=None):
    body = {"version": "1.0", "root": root, "rows": list(rows)}
    if tag is not None:
        body["tag"] = tag
    return body
