"""Blizzard API client for account and character profile data."""

from typing import Optional
from urllib.parse import quote

from adapters.blizzard_api.base import BlizzardAPIClient
from domain.models import (
    APIResponse,
    CharacterProfile,
    D3CareerProfile,
    Namespace,
    WoWUserProfile,
)
from ports.blizzard_api import AuthMode


def format_account(account: str) -> str:
    """Convert a BattleTag to the form used in profile paths (``Name#1234`` -> ``Name-1234``)."""
    return account.replace("#", "-", 1)


class ProfileClient(BlizzardAPIClient):
    """Client for World of Warcraft and Diablo III profile data.

    Account-level profiles need a user token from the authorization code
    flow; public character profiles use the client's own token.

    Usage:
        async with ProfileClient(client_id, client_secret, Region.EU) as client:
            profile = await client.get_wow_user_profile(user_token)
            for account in profile.data.wow_accounts:
                print([c.name for c in account.characters])
    """

    async def get_wow_user_profile(self, token: str, timeout: Optional[float] = None) -> APIResponse[WoWUserProfile]:
        """Get the WoW profile summary of the account owning ``token``.

        Args:
            token: User access token with the ``wow.profile`` scope.
        """
        return await self._get(
            "/profile/user/wow",
            namespace=Namespace.PROFILE,
            model=WoWUserProfile,
            auth=AuthMode.delegated(token),
            timeout=timeout,
        )

    async def get_character_profile(
        self, realm_slug: str, character_name: str, timeout: Optional[float] = None
    ) -> APIResponse[CharacterProfile]:
        """Get a character's profile summary.

        Args:
            realm_slug: Realm slug, e.g. "tarren-mill".
            character_name: Character name; matched case-insensitively.
            timeout: Deadline in seconds.
        """
        return await self._get(
            f"/profile/wow/character/{realm_slug}/{quote(character_name.lower())}",
            namespace=Namespace.PROFILE,
            model=CharacterProfile,
            timeout=timeout,
        )

    async def get_d3_career_profile(self, account: str, timeout: Optional[float] = None) -> APIResponse[D3CareerProfile]:
        """Get a Diablo III career profile.

        Args:
            account: BattleTag, either ``Name#1234`` or ``Name-1234``.
        """
        return await self._get(
            f"/d3/profile/{quote(format_account(account))}/",
            model=D3CareerProfile,
            timeout=timeout,
        )
