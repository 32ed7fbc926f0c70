"""Blizzard API client for Item data."""

from typing import Any, Optional

from adapters.blizzard_api.base import BlizzardAPIClient
from domain.models import APIResponse, Item, ItemClassIndex, ItemMedia, Namespace
from ports.items import ItemsPort


class ItemsClient(BlizzardAPIClient, ItemsPort):
    """Client for fetching World of Warcraft Item data from Battle.net API.

    Usage:
        async with ItemsClient(client_id, client_secret) as client:
            item = (await client.get_item(19019)).data
            print(f"{item.name} - {item.quality.type}")
    """

    async def get_item(self, item_id: int, timeout: Optional[float] = None) -> APIResponse[Item]:
        """Get item data by ID.

        Args:
            item_id: The item ID.
            timeout: Deadline in seconds.

        Returns:
            Item object with item details.
        """
        return await self._get(
            f"/data/wow/item/{item_id}",
            namespace=Namespace.STATIC,
            model=Item,
            timeout=timeout,
        )

    async def get_item_media(self, item_id: int, timeout: Optional[float] = None) -> APIResponse[ItemMedia]:
        """Get item media (icon) by ID.

        Args:
            item_id: The item ID.
            timeout: Deadline in seconds.

        Returns:
            ItemMedia object with icon URL.
        """
        return await self._get(
            f"/data/wow/media/item/{item_id}",
            namespace=Namespace.STATIC,
            model=ItemMedia,
            timeout=timeout,
        )

    async def get_item_class_index(self, timeout: Optional[float] = None) -> APIResponse[ItemClassIndex]:
        """Get index of all item classes."""
        return await self._get(
            "/data/wow/item-class/index",
            namespace=Namespace.STATIC,
            model=ItemClassIndex,
            timeout=timeout,
        )

    async def search_items(
        self,
        name: Optional[str] = None,
        order_by: str = "id",
        page: int = 1,
        timeout: Optional[float] = None,
    ) -> APIResponse[dict[str, Any]]:
        """Search for items.

        Args:
            name: Item name to search for (supports wildcards).
            order_by: Field to order results by.
            page: Page number for the search document.
            timeout: Deadline in seconds.

        Returns:
            Search results with item references.
        """
        params: dict[str, Any] = {
            "orderby": order_by,
            "_page": page,
        }
        if name:
            params[f"name.{self.locale}"] = name

        return await self._get(
            "/data/wow/search/item",
            params=params,
            namespace=Namespace.STATIC,
            model=dict[str, Any],
            timeout=timeout,
        )
