from __future__ import annotations

import asyncio
import time

import httpx
import pytest

from adapters.blizzard_api import LeagueID, QueueID, TeamType, format_account
from domain.models import Region
from ports.blizzard_api import DeadlineExceededError


async def test_connected_realm_ids_are_parsed_from_links(client, battlenet) -> None:
    battlenet.route(
        "/data/wow/connected-realm/index",
        json_body={
            "connected_realms": [
                {"href": "https://us.api.blizzard.com/data/wow/connected-realm/11?namespace=dynamic-us"},
                {"href": "https://us.api.blizzard.com/data/wow/connected-realm/3678?namespace=dynamic-us"},
                {"href": "https://us.api.blizzard.com/data/wow/connected-realm/index"},
            ]
        },
    )

    assert await client.get_connected_realm_ids() == [11, 3678]
    [request] = battlenet.api_requests()
    assert request.headers["Battlenet-Namespace"] == "dynamic-us"


async def test_connected_realm_details(client, battlenet) -> None:
    battlenet.route(
        "/data/wow/connected-realm/1403",
        json_body={
            "id": 1403,
            "has_queue": False,
            "status": {"type": "UP", "name": "Up"},
            "population": {"type": "HIGH", "name": "High"},
            "realms": [{"id": 1403, "slug": "draenor", "name": "Draenor", "locale": "enGB"}],
        },
    )

    realm = (await client.get_connected_realm(1403)).data

    assert realm.status.type == "UP"
    assert realm.realm_slugs == ("draenor",)


async def test_auctions_are_decoded(client, battlenet) -> None:
    battlenet.route(
        "/data/wow/connected-realm/1403/auctions",
        json_body={
            "connected_realm": {"href": "https://eu.api.blizzard.com/data/wow/connected-realm/1403"},
            "auctions": [
                {
                    "id": 1,
                    "item": {"id": 19019, "modifiers": [{"type": 9, "value": 60}]},
                    "buyout": 5000000,
                    "quantity": 1,
                    "time_left": "LONG",
                }
            ],
        },
    )

    auctions = (await client.get_auctions(1403)).data

    [auction] = auctions.auctions
    assert auction.item.id == 19019
    assert auction.item.modifiers[0].value == 60
    assert auction.buyout == 5000000
    assert auctions.connected_realm.resource_id == 1403


async def test_token_index_is_sent_without_locale(client, battlenet) -> None:
    battlenet.route("/data/wow/token/index", json_body={"last_updated_timestamp": 1700000000000, "price": 2500000000})

    token_index = (await client.get_token_index()).data

    assert token_index.price == 2500000000
    [request] = battlenet.api_requests()
    assert "locale" not in request.url.params
    assert request.headers["Battlenet-Namespace"] == "dynamic-us"


async def test_item_uses_static_namespace(client, battlenet) -> None:
    battlenet.route(
        "/data/wow/item/19019",
        json_body={
            "id": 19019,
            "name": "Thunderfury, Blessed Blade of the Windseeker",
            "quality": {"type": "LEGENDARY", "name": "Legendary"},
            "level": 80,
            "item_class": {"id": 2, "name": "Weapon"},
            "is_equippable": True,
        },
    )

    item = (await client.get_item(19019)).data

    assert item.quality.type == "LEGENDARY"
    assert item.item_class.name == "Weapon"
    assert battlenet.api_requests()[0].headers["Battlenet-Namespace"] == "static-us"


async def test_item_media_icon(client, battlenet) -> None:
    battlenet.route(
        "/data/wow/media/item/19019",
        json_body={"id": 19019, "assets": [{"key": "icon", "value": "https://render.worldofwarcraft.com/icon.jpg"}]},
    )

    media = (await client.get_item_media(19019)).data

    assert media.icon_url == "https://render.worldofwarcraft.com/icon.jpg"


async def test_item_search_uses_locale_for_name_field(client, battlenet) -> None:
    battlenet.route("/data/wow/search/item", json_body={"page": 1, "results": []})

    await client.search_items(name="Thunderfury", page=2)

    params = battlenet.api_requests()[0].url.params
    assert params["name.en_US"] == "Thunderfury"
    assert params["_page"] == "2"
    assert params["orderby"] == "id"


async def test_classic_index_uses_classic_namespace(client, battlenet) -> None:
    battlenet.route("/data/wow/connected-realm/index", json_body={"connected_realms": []})
    client.set_region(Region.EU)

    await client.get_classic_connected_realm_index()

    request = battlenet.api_requests()[0]
    assert request.url.host == "eu.api.blizzard.com"
    assert request.headers["Battlenet-Namespace"] == "dynamic-classic-eu"


async def test_wow_user_profile_uses_delegated_token(client, battlenet) -> None:
    battlenet.route(
        "/profile/user/wow",
        json_body={
            "id": 1,
            "wow_accounts": [{"id": 2, "characters": [{"id": 3, "name": "Thrall", "level": 70}]}],
        },
    )

    profile = (await client.get_wow_user_profile("user-token")).data

    assert profile.wow_accounts[0].characters[0].name == "Thrall"
    assert battlenet.token_requests() == []
    request = battlenet.api_requests()[0]
    assert request.headers["Authorization"] == "Bearer user-token"
    assert request.headers["Battlenet-Namespace"] == "profile-us"


async def test_character_profile_lowercases_name(client, battlenet) -> None:
    battlenet.route("/profile/wow/character/tarren-mill/thrall", json_body={"id": 5, "name": "Thrall", "level": 70})

    character = (await client.get_character_profile("tarren-mill", "Thrall")).data

    assert character.level == 70
    assert battlenet.api_requests()[0].headers["Authorization"] == "Bearer token-1"


@pytest.mark.parametrize(
    ("account", "expected"),
    [("Player#1234", "Player-1234"), ("Player-1234", "Player-1234"), ("A#1#2", "A-1#2")],
)
def test_format_account(account: str, expected: str) -> None:
    assert format_account(account) == expected


async def test_d3_career_profile(client, battlenet) -> None:
    battlenet.route(
        "/d3/profile/Player-1234/",
        json_body={"battleTag": "Player#1234", "paragonLevel": 800, "heroes": [{"id": 1, "name": "Li", "level": 70}]},
    )

    career = (await client.get_d3_career_profile("Player#1234")).data

    assert career.battle_tag == "Player#1234"
    assert career.paragon_level == 800
    request = battlenet.api_requests()[0]
    assert "Battlenet-Namespace" not in request.headers
    assert request.url.params["locale"] == "en_US"


async def test_sc2_league_path(client, battlenet) -> None:
    battlenet.route(
        "/data/sc2/league/37/201/0/6",
        json_body={"key": {"league_id": 6, "season_id": 37}, "tier": [{"id": 0, "division": [{"ladder_id": 9, "member_count": 200}]}]},
    )

    league = (await client.get_league_data(37, QueueID.LOTV_1V1, TeamType.ARRANGED, LeagueID.GRANDMASTER)).data

    assert league.key["season_id"] == 37
    assert league.tier[0].division[0].ladder_id == 9


async def test_sc2_ladder(client, battlenet) -> None:
    battlenet.route("/data/sc2/ladder/9", json_body={"team": [{"id": 1, "rating": 6000, "wins": 10}]})

    ladder = await client.get_ladder_data(9)

    assert ladder.data.team[0].rating == 6000
    assert ladder.body == b'{"team": [{"id": 1, "rating": 6000, "wins": 10}]}'


@pytest.mark.parametrize(
    "path, call",
    [
        ("/data/wow/item/19019", lambda c: c.get_item(19019, timeout=0.05)),
        ("/data/wow/connected-realm/index", lambda c: c.get_connected_realm_ids(timeout=0.05)),
        ("/data/wow/token/index", lambda c: c.get_token_index(timeout=0.05)),
        ("/profile/user/wow", lambda c: c.get_wow_user_profile("user-token", timeout=0.05)),
        ("/data/sc2/ladder/1", lambda c: c.get_ladder_data(1, timeout=0.05)),
    ],
)
async def test_wrappers_accept_a_deadline(client, battlenet, path, call) -> None:
    await client.tokens.ensure_fresh()

    async def slow(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(30)
        return httpx.Response(200, json={})

    battlenet.routes[path] = slow

    started = time.monotonic()
    with pytest.raises(DeadlineExceededError):
        await call(client)
    assert time.monotonic() - started < 5
