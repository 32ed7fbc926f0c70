"""Combined Battle.net API client exposing every supported endpoint."""

from typing import Optional

from authlib.integrations.httpx_client import AsyncOAuth2Client

from adapters.blizzard_api.auctions import AuctionsClient
from adapters.blizzard_api.items import ItemsClient
from adapters.blizzard_api.oauth import OAuthClient
from adapters.blizzard_api.profile import ProfileClient
from adapters.blizzard_api.starcraft import StarCraftClient
from config.loader import BlizzardConfig


class BlizzardClient(AuctionsClient, ItemsClient, ProfileClient, StarCraftClient, OAuthClient):
    """Client for all supported Battle.net APIs.

    Usage:
        async with BlizzardClient(client_id, client_secret, Region.EU, "en_GB") as client:
            item = await client.get_item(19019)
            client.set_region(Region.US)
            realms = await client.get_connected_realm_ids()
    """

    @classmethod
    def from_config(
        cls, config: BlizzardConfig, http_client: Optional[AsyncOAuth2Client] = None
    ) -> "BlizzardClient":
        """Create a client from loaded configuration.

        Args:
            config: Blizzard section of the application configuration.
            http_client: Preconfigured authlib client, mostly for tests.
        """
        return cls(
            client_id=config.client_id,
            client_secret=config.client_secret.get_secret_value(),
            region=config.region,
            locale=config.locale,
            http_client=http_client,
            timeout=config.request_timeout,
        )
