"""Port (interface) for item data retrieval."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from domain.models import APIResponse, Item, ItemClassIndex, ItemMedia


class ItemsPort(ABC):
    """Abstract interface for item data retrieval.

    This port defines the contract for fetching item data
    from any source (Blizzard API, mock data, cache, etc.).
    """

    @abstractmethod
    async def get_item(self, item_id: int, timeout: Optional[float] = None) -> APIResponse[Item]:
        """Get item data by ID.

        Args:
            item_id: The item ID.
            timeout: Deadline in seconds.

        Returns:
            Item object with item details.
        """
        ...

    @abstractmethod
    async def get_item_media(self, item_id: int, timeout: Optional[float] = None) -> APIResponse[ItemMedia]:
        """Get item media (icon) by ID.

        Args:
            item_id: The item ID.
            timeout: Deadline in seconds.

        Returns:
            ItemMedia object with icon URL.
        """
        ...

    @abstractmethod
    async def get_item_class_index(self, timeout: Optional[float] = None) -> APIResponse[ItemClassIndex]:
        """Get index of all item classes.

        Returns:
            ItemClassIndex of item class references.
        """
        ...

    @abstractmethod
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
        ...
