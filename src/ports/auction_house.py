"""Port (interface) for auction house and realm data retrieval."""

from abc import ABC, abstractmethod
from typing import Optional

from domain.models import (
    APIResponse,
    AuctionData,
    ConnectedRealm,
    ConnectedRealmIndex,
    TokenIndex,
)


class AuctionHousePort(ABC):
    """Abstract interface for auction house data retrieval.

    This port defines the contract for fetching auction house data
    from any source (Blizzard API, mock data, cache, etc.).
    """

    @abstractmethod
    async def get_connected_realm_index(self, timeout: Optional[float] = None) -> APIResponse[ConnectedRealmIndex]:
        """Get the index of connected realms for the region.

        Returns:
            ConnectedRealmIndex with links to every connected realm.
        """
        ...

    @abstractmethod
    async def get_connected_realm_ids(self, timeout: Optional[float] = None) -> list[int]:
        """Get list of all connected realm IDs.

        Returns:
            List of connected realm IDs.
        """
        ...

    @abstractmethod
    async def get_connected_realm(self, realm_id: int, timeout: Optional[float] = None) -> APIResponse[ConnectedRealm]:
        """Get details for a specific connected realm.

        Args:
            realm_id: The connected realm ID.
            timeout: Deadline in seconds.

        Returns:
            ConnectedRealm with its member realms.
        """
        ...

    @abstractmethod
    async def get_auctions(self, realm_id: int, timeout: Optional[float] = None) -> APIResponse[AuctionData]:
        """Get auction data for a specific connected realm.

        Args:
            realm_id: The connected realm ID.
            timeout: Deadline in seconds.

        Returns:
            AuctionData containing all auctions for the realm.
        """
        ...

    @abstractmethod
    async def get_commodity_auctions(self, timeout: Optional[float] = None) -> APIResponse[AuctionData]:
        """Get region-wide commodity auction data.

        Returns:
            AuctionData containing all commodity auctions.
        """
        ...

    @abstractmethod
    async def get_token_index(self, timeout: Optional[float] = None) -> APIResponse[TokenIndex]:
        """Get the current WoW Token price.

        Returns:
            TokenIndex with price in copper and update timestamp.
        """
        ...
