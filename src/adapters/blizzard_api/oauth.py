"""Blizzard OAuth service endpoints (token introspection and user info)."""

from typing import Optional

from adapters.blizzard_api.base import BlizzardAPIClient
from domain.models import APIResponse, TokenValidation, UserInfo
from ports.blizzard_api import AuthMode


class OAuthClient(BlizzardAPIClient):
    """Client for the Battle.net OAuth service.

    Usage:
        async with OAuthClient(client_id, client_secret) as client:
            validation = await client.validate_token()
            print(validation.data.exp)
    """

    async def validate_token(
        self, token: Optional[str] = None, timeout: Optional[float] = None
    ) -> APIResponse[TokenValidation]:
        """Verify a bearer token and retrieve its metadata.

        Args:
            token: Token to check. Defaults to the client's own access
                token, which is refreshed first if needed.
            timeout: Deadline in seconds, covering the token refresh too.

        Returns:
            TokenValidation with client ID, expiry and granted scopes.
        """
        url = self.oauth_host + "/oauth/check_token"

        async def check() -> APIResponse[TokenValidation]:
            checked = token if token is not None else (await self.tokens.ensure_fresh()).access_token
            return await self._request(
                url,
                namespace="",
                params={"token": checked},
                model=TokenValidation,
                auth=AuthMode.NONE,
                locale=None,
            )

        return await self._run(check(), timeout)

    async def user_info(self, token: str, timeout: Optional[float] = None) -> APIResponse[UserInfo]:
        """Get basic information about the user owning a user token.

        Args:
            token: Access token obtained through the authorization code flow.
            timeout: Deadline in seconds.

        Returns:
            UserInfo with account ID and BattleTag.
        """
        return await self._get_oauth(
            "/oauth/userinfo",
            model=UserInfo,
            auth=AuthMode.delegated(token),
            timeout=timeout,
        )
