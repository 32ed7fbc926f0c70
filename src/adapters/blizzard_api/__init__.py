"""Blizzard Battle.net API adapters."""

from adapters.blizzard_api.auctions import AuctionsClient
from adapters.blizzard_api.base import BlizzardAPIClient
from adapters.blizzard_api.client import BlizzardClient
from adapters.blizzard_api.items import ItemsClient
from adapters.blizzard_api.oauth import OAuthClient
from adapters.blizzard_api.profile import ProfileClient, format_account
from adapters.blizzard_api.regions import resolve
from adapters.blizzard_api.starcraft import LeagueID, QueueID, StarCraftClient, TeamType
from adapters.blizzard_api.tokens import REFRESH_SKEW, TokenStore

__all__ = [
    # Core
    "BlizzardAPIClient",
    "TokenStore",
    "REFRESH_SKEW",
    "resolve",
    # Specialized clients
    "AuctionsClient",
    "ItemsClient",
    "OAuthClient",
    "ProfileClient",
    "StarCraftClient",
    # Everything combined
    "BlizzardClient",
    # Helpers
    "format_account",
    "LeagueID",
    "QueueID",
    "TeamType",
]
