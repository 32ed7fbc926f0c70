from __future__ import annotations

import json
from typing import Any, Callable, Optional, Union

import httpx
import pytest
from authlib.integrations.httpx_client import AsyncOAuth2Client

from adapters.blizzard_api import BlizzardClient
from domain.models import Region

Route = Union[tuple[int, bytes], Callable[[httpx.Request], Any]]


class FakeBattleNet:
    """In-memory Battle.net: records requests and answers by URL path."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.routes: dict[str, Route] = {}
        self.token_count = 0
        self.expires_in = 86399

    def route(self, path: str, status: int = 200, json_body: Any = None, content: Optional[bytes] = None) -> None:
        if content is None:
            content = json.dumps(json_body).encode()
        self.routes[path] = (status, content)

    def token_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == "/oauth/token"]

    def api_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path != "/oauth/token"]

    def handler(self, request: httpx.Request) -> Any:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None and request.url.path == "/oauth/token":
            self.token_count += 1
            return httpx.Response(
                200,
                json={
                    "access_token": f"token-{self.token_count}",
                    "token_type": "bearer",
                    "expires_in": self.expires_in,
                    "scope": "",
                },
            )
        if route is None:
            return httpx.Response(404, content=b'{"code": 404, "type": "BLZWEBAPI00000404", "detail": "Not Found"}')
        if callable(route):
            return route(request)
        status, content = route
        return httpx.Response(status, content=content)

    def http_client(self) -> AsyncOAuth2Client:
        return AsyncOAuth2Client(
            client_id="client-id",
            client_secret="client-secret",
            token_endpoint_auth_method="client_secret_basic",
            transport=httpx.MockTransport(self.handler),
        )


@pytest.fixture
def battlenet() -> FakeBattleNet:
    return FakeBattleNet()


@pytest.fixture
async def http_client(battlenet):
    client = battlenet.http_client()
    yield client
    await client.aclose()


@pytest.fixture
async def client(http_client):
    async with BlizzardClient("client-id", "client-secret", Region.US, "en_US", http_client=http_client) as client:
        yield client
