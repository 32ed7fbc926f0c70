"""OAuth2 client credentials token lifecycle for the Battle.net API."""

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import httpx
from authlib.integrations.base_client import OAuthError
from authlib.integrations.httpx_client import AsyncOAuth2Client

from domain.models import AccessToken
from ports.blizzard_api import AuthError

logger = logging.getLogger(__name__)

# Tokens expiring within this margin are refreshed before use.
REFRESH_SKEW = timedelta(seconds=60)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(now: Optional[datetime]) -> datetime:
    """Default to the current time; naive values are taken to be UTC."""
    if now is None:
        return utcnow()
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now


def check_token_response(resp: httpx.Response) -> httpx.Response:
    """authlib compliance hook: reject token responses that cannot yield a token.

    Runs before authlib parses the payload, so the raw body is still at hand.
    """
    if not resp.is_success:
        logger.warning("Token request failed: %s %s", resp.status_code, resp.reason_phrase)
        raise AuthError(
            f"Token request failed: {resp.status_code} {resp.reason_phrase}",
            body=resp.content,
            status_code=resp.status_code,
        )
    try:
        payload = resp.json()
    except ValueError as e:
        raise AuthError(f"Malformed token response: {e}", body=resp.content, status_code=resp.status_code) from e
    if not isinstance(payload, dict) or "error" in payload:
        raise AuthError("Token request rejected", body=resp.content, status_code=resp.status_code)
    if "access_token" not in payload or "expires_in" not in payload:
        raise AuthError("Malformed token response: missing access_token or expires_in", body=resp.content, status_code=resp.status_code)
    return resp


class TokenStore:
    """Holds one client credentials access token and refreshes it on demand.

    The token endpoint is looked up on every refresh so that a region switch
    on the owning client takes effect immediately.

    Usage:
        store = TokenStore(oauth_client, lambda: "https://eu.battle.net/oauth/token")
        token = await store.ensure_fresh()
    """

    def __init__(
        self,
        oauth_client: AsyncOAuth2Client,
        token_endpoint: Callable[[], str],
        refresh_skew: timedelta = REFRESH_SKEW,
    ):
        """Initialize the store.

        Args:
            oauth_client: authlib client configured with the client ID and secret.
            token_endpoint: Returns the current token endpoint URL.
            refresh_skew: Margin before expiry at which the token is refreshed.
        """
        self._oauth = oauth_client
        self._token_endpoint = token_endpoint
        self.refresh_skew = refresh_skew

        self._token: Optional[AccessToken] = None
        self._lock = asyncio.Lock()
        # Bumped by invalidate(); a refresh started under an older generation is not stored.
        self._generation = 0

        if check_token_response not in self._oauth.compliance_hook["access_token_response"]:
            self._oauth.register_compliance_hook("access_token_response", check_token_response)

    def current(self) -> Optional[AccessToken]:
        """Return the stored token without checking its expiry."""
        return self._token

    def invalidate(self) -> None:
        """Drop the stored token so the next request acquires a new one."""
        self._token = None
        self._generation += 1

    def needs_refresh(self, now: Optional[datetime] = None) -> bool:
        """Check whether the stored token is missing or about to expire."""
        if self._token is None:
            return True
        return self._token.expires_at - as_utc(now) <= self.refresh_skew

    async def ensure_fresh(self, now: Optional[datetime] = None) -> AccessToken:
        """Return a token valid at ``now``, requesting a new one if necessary.

        Args:
            now: Reference time; defaults to the current UTC time. Naive
                values are taken to be UTC.

        Returns:
            The stored or newly acquired token.

        Raises:
            AuthError: If a new token was needed and could not be acquired.
                The previously stored token is left in place.
        """
        now = as_utc(now)
        if not self.needs_refresh(now):
            return self._token

        async with self._lock:
            # Another caller may have refreshed while we waited.
            if not self.needs_refresh(now):
                return self._token
            logger.debug("Access token missing or expiring, requesting a new one")
            return await self.refresh(now)

    async def refresh(self, now: Optional[datetime] = None) -> AccessToken:
        """Request a new token unconditionally and store it.

        If invalidate() is called while the request is in flight, the new
        token is returned to the caller but not stored.

        Raises:
            AuthError: If the token request fails for any reason.
        """
        now = as_utc(now)
        url = self._token_endpoint()
        generation = self._generation

        try:
            payload = await self._oauth.fetch_token(url, grant_type="client_credentials")
            token = AccessToken.from_api_response(dict(payload), issued_at=now)
        except AuthError:
            raise
        except httpx.TransportError as e:
            raise AuthError(f"Token request to {url} failed: {e}") from e
        except OAuthError as e:
            raise AuthError(f"Token request rejected: {e.error}") from e
        except (KeyError, TypeError, ValueError) as e:
            raise AuthError(f"Malformed token response: {e}") from e

        if generation != self._generation:
            logger.debug("Discarding token from %s, store was invalidated during the request", url)
            return token

        self._token = token
        logger.info("Acquired access token from %s, expires in %s seconds", url, token.expires_in)
        return token

