"""Blizzard API client for Auction House and realm data."""

from typing import Optional

from adapters.blizzard_api.base import BlizzardAPIClient
from domain.models import (
    APIResponse,
    AuctionData,
    ConnectedRealm,
    ConnectedRealmIndex,
    Namespace,
    TokenIndex,
)
from ports.auction_house import AuctionHousePort


class AuctionsClient(BlizzardAPIClient, AuctionHousePort):
    """Client for fetching World of Warcraft Auction House data from Battle.net API.

    This adapter implements the AuctionHousePort interface, providing access to
    Blizzard's Battle.net API for auction house data.

    Usage:
        async with AuctionsClient(client_id, client_secret) as client:
            realm_ids = await client.get_connected_realm_ids()
            auctions = await client.get_auctions(realm_ids[0])
    """

    async def get_connected_realm_index(self, timeout: Optional[float] = None) -> APIResponse[ConnectedRealmIndex]:
        """Get the index of connected realms for the region."""
        return await self._get(
            "/data/wow/connected-realm/index",
            namespace=Namespace.DYNAMIC,
            model=ConnectedRealmIndex,
            timeout=timeout,
        )

    async def get_connected_realm_ids(self, timeout: Optional[float] = None) -> list[int]:
        """Get list of all connected realm IDs.

        Args:
            timeout: Deadline in seconds.

        Returns:
            List of connected realm IDs.
        """
        index = await self.get_connected_realm_index(timeout=timeout)
        return index.data.realm_ids

    async def get_connected_realm(self, realm_id: int, timeout: Optional[float] = None) -> APIResponse[ConnectedRealm]:
        """Get details for a specific connected realm.

        Args:
            realm_id: The connected realm ID.
            timeout: Deadline in seconds.
        """
        return await self._get(
            f"/data/wow/connected-realm/{realm_id}",
            namespace=Namespace.DYNAMIC,
            model=ConnectedRealm,
            timeout=timeout,
        )

    async def get_auctions(self, realm_id: int, timeout: Optional[float] = None) -> APIResponse[AuctionData]:
        """Get auction data for a specific connected realm.

        Args:
            realm_id: The connected realm ID.
            timeout: Deadline in seconds.

        Returns:
            AuctionData containing all auctions for the realm.
        """
        return await self._get(
            f"/data/wow/connected-realm/{realm_id}/auctions",
            namespace=Namespace.DYNAMIC,
            model=AuctionData,
            timeout=timeout,
        )

    async def get_commodity_auctions(self, timeout: Optional[float] = None) -> APIResponse[AuctionData]:
        """Get region-wide commodity auction data."""
        return await self._get(
            "/data/wow/auctions/commodities",
            namespace=Namespace.DYNAMIC,
            model=AuctionData,
            timeout=timeout,
        )

    async def get_token_index(self, timeout: Optional[float] = None) -> APIResponse[TokenIndex]:
        """Get the current WoW Token price.

        The token index carries no localized strings, so no locale is sent.
        """
        return await self._get(
            "/data/wow/token/index",
            namespace=Namespace.DYNAMIC,
            model=TokenIndex,
            with_locale=False,
            timeout=timeout,
        )

    async def get_classic_connected_realm_index(
        self, timeout: Optional[float] = None
    ) -> APIResponse[ConnectedRealmIndex]:
        """Get the index of WoW Classic connected realms for the region."""
        return await self._get(
            "/data/wow/connected-realm/index",
            namespace=Namespace.DYNAMIC_CLASSIC,
            model=ConnectedRealmIndex,
            timeout=timeout,
        )
