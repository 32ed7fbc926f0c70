"""Base Blizzard API client with OAuth authentication and the typed GET executor."""

import asyncio
import logging
import threading
from dataclasses import replace
from functools import lru_cache
from typing import Any, Awaitable, Optional, Self, TypeVar, Union

import httpx
from authlib.integrations.httpx_client import AsyncOAuth2Client
from pydantic import TypeAdapter, ValidationError

from adapters.blizzard_api.regions import resolve
from adapters.blizzard_api.tokens import REFRESH_SKEW, TokenStore
from domain.models import APIResponse, ClientConfig, Locale, Namespace, Region
from ports.blizzard_api import (
    AuthMode,
    BlizzardAPIPort,
    DeadlineExceededError,
    DecodeError,
    HTTPStatusError,
    NetworkError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

NAMESPACE_HEADER = "Battlenet-Namespace"


def format_status(response: httpx.Response) -> str:
    """Render a status line such as ``"404 Not Found"``."""
    return f"{response.status_code} {response.reason_phrase}".strip()


@lru_cache(maxsize=256)
def _adapter(model: Any) -> TypeAdapter:
    return TypeAdapter(model)


def decode(body: bytes, model: Any) -> Any:
    """Decode a JSON body into ``model``.

    Raises:
        DecodeError: If the body is not JSON or does not fit ``model``.
    """
    try:
        return _adapter(model).validate_json(body)
    except ValidationError as e:
        raise DecodeError(f"Could not decode response into {getattr(model, '__name__', model)}: {e}", body) from e


class BlizzardAPIClient(BlizzardAPIPort):
    """Base client for Blizzard Battle.net API with OAuth2 authentication.

    This class provides the common functionality needed by all Blizzard API clients:
    - OAuth2 client credentials authentication
    - Token management and auto-refresh
    - Region, namespace and locale configuration
    - HTTP client lifecycle management

    Region and locale live in a single immutable ClientConfig. Setters swap
    it under a lock and every request reads it once, so hosts, namespaces
    and locale of a request always belong together. The client may be
    shared by many concurrent requests.

    Subclasses implement specific API endpoints.

    Usage:
        class MyClient(BlizzardAPIClient):
            async def get_something(self) -> APIResponse[dict]:
                return await self._get("/data/wow/something", namespace=self.namespace_static)
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        region: Union[Region, int] = Region.US,
        locale: str = Locale.EN_US,
        http_client: Optional[AsyncOAuth2Client] = None,
        timeout: Optional[float] = None,
    ):
        """Initialize the client with OAuth credentials.

        Args:
            client_id: Your Battle.net API client ID.
            client_secret: Your Battle.net API client secret.
            region: API region.
            locale: Locale for localized strings, stored as given.
            http_client: Preconfigured authlib client; one is created if omitted.
            timeout: Default deadline in seconds for each call; None waits indefinitely.

        Raises:
            UnknownRegionError: If ``region`` is not a known region.
        """
        self._config = ClientConfig(
            client_id=client_id,
            client_secret=client_secret,
            locale=str(locale),
            endpoints=resolve(region),
        )
        self._config_lock = threading.Lock()
        self.timeout = timeout

        self._owns_client = http_client is None
        self._client = http_client or AsyncOAuth2Client(
            client_id=client_id,
            client_secret=client_secret,
            token_endpoint_auth_method="client_secret_basic",
        )
        self.tokens = TokenStore(self._client, lambda: f"{self.oauth_host}/oauth/token", REFRESH_SKEW)

    async def __aenter__(self) -> Self:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    # =========================================================================
    # Configuration
    # =========================================================================

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def region(self) -> Region:
        return self._config.region

    @property
    def locale(self) -> str:
        return self._config.locale

    def set_region(self, region: Union[Region, int]) -> None:
        """Change the region, recomputing hosts and namespaces.

        The stored access token is dropped since it was issued by the
        previous region's OAuth host.

        Raises:
            UnknownRegionError: If ``region`` is not a known region. The
                current configuration is kept.
        """
        endpoints = resolve(region)
        with self._config_lock:
            self._config = replace(self._config, endpoints=endpoints)
            self.tokens.invalidate()
        logger.debug("Region set to %s", endpoints.region.code)

    def set_locale(self, locale: str) -> None:
        """Change the locale attached to locale-aware requests."""
        with self._config_lock:
            self._config = replace(self._config, locale=str(locale))

    @property
    def oauth_host(self) -> str:
        return self._config.endpoints.oauth_host

    @property
    def api_host(self) -> str:
        return self._config.endpoints.api_host

    @property
    def namespace_dynamic(self) -> str:
        return self._config.endpoints.dynamic_namespace

    @property
    def namespace_dynamic_classic(self) -> str:
        return self._config.endpoints.dynamic_classic_namespace

    @property
    def namespace_profile(self) -> str:
        return self._config.endpoints.profile_namespace

    @property
    def namespace_static(self) -> str:
        return self._config.endpoints.static_namespace

    @property
    def namespace_static_classic(self) -> str:
        return self._config.endpoints.static_classic_namespace

    # =========================================================================
    # Requests
    # =========================================================================

    async def execute(
        self,
        path: str,
        *,
        namespace: Union[Namespace, str] = "",
        params: Optional[dict[str, Any]] = None,
        model: type[T] = dict,  # type: ignore[assignment]
        auth: AuthMode = AuthMode.CLIENT_CREDENTIALS,
        with_locale: bool = True,
        timeout: Optional[float] = None,
    ) -> APIResponse[T]:
        """Make a GET request to the regional API host and decode the response.

        Args:
            path: API path, optionally with a query string (e.g. "/data/wow/item/19019").
            namespace: A Namespace kind resolved against the current region,
                or a literal header value. Omitted when empty.
            params: Additional query parameters.
            model: Destination type for the JSON body.
            auth: Authentication mode.
            with_locale: Attach the configured locale as a query parameter.
            timeout: Deadline in seconds, overriding the client default.

        Returns:
            APIResponse with the decoded value and raw body.
        """
        config = self._config
        if isinstance(namespace, Namespace):
            namespace = config.endpoints.namespace(namespace)

        return await self._run(
            self._request(
                config.endpoints.api_host + path,
                namespace=namespace,
                params=params,
                model=model,
                auth=auth,
                locale=config.locale if with_locale else None,
            ),
            timeout,
        )

    async def _get(
        self,
        endpoint: str,
        params: Optional[dict[str, Any]] = None,
        namespace: Union[Namespace, str] = "",
        model: type[T] = dict,  # type: ignore[assignment]
        auth: AuthMode = AuthMode.CLIENT_CREDENTIALS,
        with_locale: bool = True,
        timeout: Optional[float] = None,
    ) -> APIResponse[T]:
        return await self.execute(
            endpoint,
            namespace=namespace,
            params=params,
            model=model,
            auth=auth,
            with_locale=with_locale,
            timeout=timeout,
        )

    async def _get_oauth(
        self,
        endpoint: str,
        params: Optional[dict[str, Any]] = None,
        model: type[T] = dict,  # type: ignore[assignment]
        auth: AuthMode = AuthMode.NONE,
        timeout: Optional[float] = None,
    ) -> APIResponse[T]:
        """Make a GET request to the regional OAuth host."""
        return await self._run(
            self._request(
                self._config.endpoints.oauth_host + endpoint,
                namespace="",
                params=params,
                model=model,
                auth=auth,
                locale=None,
            ),
            timeout,
        )

    async def _run(self, request: Awaitable[APIResponse[T]], timeout: Optional[float]) -> APIResponse[T]:
        timeout = self.timeout if timeout is None else timeout
        try:
            async with asyncio.timeout(timeout):
                return await request
        except TimeoutError as e:
            raise DeadlineExceededError(f"Request did not complete within {timeout} seconds") from e

    async def _request(
        self,
        url: str,
        *,
        namespace: str,
        params: Optional[dict[str, Any]],
        model: Any,
        auth: AuthMode,
        locale: Optional[str],
    ) -> APIResponse[Any]:
        headers = {"Accept": "application/json"}
        if namespace:
            headers[NAMESPACE_HEADER] = namespace

        if auth.kind == "client_credentials":
            token = await self.tokens.ensure_fresh()
            headers["Authorization"] = f"Bearer {token.access_token}"
        elif auth.kind == "delegated":
            headers["Authorization"] = f"Bearer {auth.token}"

        query: dict[str, Any] = {}
        if locale:
            query["locale"] = locale
        if params:
            query.update(params)

        try:
            response = await self._client.request(
                "GET", url, params=query, headers=headers, withhold_token=True
            )
        except httpx.TransportError as e:
            logger.warning("GET %s failed: %s", url, e)
            raise NetworkError(f"GET {url} failed: {e}") from e

        body = response.content
        if response.status_code != httpx.codes.OK:
            status = format_status(response)
            logger.warning("GET %s returned %s", url, status)
            raise HTTPStatusError(response.status_code, status, body, url=url)

        return APIResponse(data=decode(body, model), body=body, status_code=response.status_code)
