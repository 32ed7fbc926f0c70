from __future__ import annotations

import asyncio
import time

import httpx
import pytest

from ports.blizzard_api import DeadlineExceededError, HTTPStatusError


async def test_validate_token_checks_own_token(client, battlenet) -> None:
    battlenet.route(
        "/oauth/check_token",
        json_body={"client_id": "client-id", "exp": 1700000000, "scope": [], "authorities": [{"authority": "IS_AUTHENTICATED_FULLY"}]},
    )

    validation = (await client.validate_token()).data

    assert validation.client_id == "client-id"
    assert validation.exp == 1700000000
    request = battlenet.api_requests()[0]
    assert request.url.host == "us.battle.net"
    assert request.url.params["token"] == "token-1"
    assert "locale" not in request.url.params


async def test_validate_token_with_explicit_token(client, battlenet) -> None:
    battlenet.route("/oauth/check_token", json_body={"client_id": "other", "exp": 1, "user_name": "someone"})

    validation = (await client.validate_token("user-token")).data

    assert validation.user_name == "someone"
    assert battlenet.token_requests() == []


async def test_validate_token_rejected(client, battlenet) -> None:
    body = b'{"error": "invalid_token", "error_description": "Invalid access token"}'
    battlenet.route("/oauth/check_token", status=400, content=body)

    with pytest.raises(HTTPStatusError) as exc_info:
        await client.validate_token("expired")

    assert exc_info.value.status == "400 Bad Request"
    assert exc_info.value.body == body


async def test_user_info_uses_bearer_token(client, battlenet) -> None:
    battlenet.route("/oauth/userinfo", json_body={"sub": "123", "id": 123, "battletag": "Player#1234"})

    info = (await client.user_info("user-token")).data

    assert info.battletag == "Player#1234"
    request = battlenet.api_requests()[0]
    assert request.url.host == "us.battle.net"
    assert request.headers["Authorization"] == "Bearer user-token"


async def test_validate_token_deadline_covers_token_refresh(client, battlenet) -> None:
    async def slow(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(30)
        return httpx.Response(200, json={})

    battlenet.routes["/oauth/token"] = slow

    started = time.monotonic()
    with pytest.raises(DeadlineExceededError):
        await client.validate_token(timeout=0.05)
    assert time.monotonic() - started < 5
    assert battlenet.api_requests() == []
