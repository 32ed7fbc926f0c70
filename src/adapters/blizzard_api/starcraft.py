"""Blizzard API client for StarCraft II game data."""

from enum import IntEnum
from typing import Optional

from adapters.blizzard_api.base import BlizzardAPIClient
from domain.models import APIResponse, SC2Ladder, SC2League


class QueueID(IntEnum):
    WOL_1V1 = 1
    WOL_2V2 = 2
    WOL_3V3 = 3
    WOL_4V4 = 4
    HOTS_1V1 = 101
    HOTS_2V2 = 102
    HOTS_3V3 = 103
    HOTS_4V4 = 104
    LOTV_1V1 = 201
    LOTV_2V2 = 202
    LOTV_3V3 = 203
    LOTV_4V4 = 204
    LOTV_ARCHON = 206


class TeamType(IntEnum):
    ARRANGED = 0
    RANDOM = 1


class LeagueID(IntEnum):
    BRONZE = 0
    SILVER = 1
    GOLD = 2
    PLATINUM = 3
    DIAMOND = 4
    MASTER = 5
    GRANDMASTER = 6


class StarCraftClient(BlizzardAPIClient):
    """Client for StarCraft II game data. These documents use no namespace.

    Usage:
        async with StarCraftClient(client_id, client_secret) as client:
            league = await client.get_league_data(37, QueueID.LOTV_1V1, TeamType.ARRANGED, LeagueID.GRANDMASTER)
    """

    async def get_league_data(
        self,
        season_id: int,
        queue_id: QueueID,
        team_type: TeamType,
        league_id: LeagueID,
        timeout: Optional[float] = None,
    ) -> APIResponse[SC2League]:
        """Get league data for a season, queue, team type and league."""
        return await self._get(
            f"/data/sc2/league/{season_id}/{int(queue_id)}/{int(team_type)}/{int(league_id)}",
            model=SC2League,
            timeout=timeout,
        )

    async def get_ladder_data(self, ladder_id: int, timeout: Optional[float] = None) -> APIResponse[SC2Ladder]:
        """Get the teams of a single ladder division.

        This endpoint is undocumented by Blizzard and may change.
        """
        return await self._get(f"/data/sc2/ladder/{ladder_id}", model=SC2Ladder, timeout=timeout)
