"""
Blizzard API Port - Interface for issuing Battle.net API requests.

This port defines the contract every Battle.net endpoint wrapper is built
on: one typed GET parameterized by path, namespace, authentication mode and
destination type. The adapter implementation handles OAuth2 token
lifecycle, region/locale resolution and decoding of raw responses.

Every failure is raised as a BlizzardAPIError carrying whatever raw bytes
were received, so callers can always inspect the wire payload.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Optional, TypeVar, Union

from domain.models import APIResponse, ClientConfig, Namespace, Region

T = TypeVar("T")


# =========================================================================
# Errors
# =========================================================================


class BlizzardAPIError(Exception):
    """Base exception for Battle.net API failures."""

    def __init__(self, message: str, body: bytes = b""):
        self.message = message
        self.body = body
        super().__init__(message)


class NetworkError(BlizzardAPIError):
    """The request could not be sent or the response could not be read."""


class DeadlineExceededError(NetworkError, TimeoutError):
    """The per-call deadline elapsed before the response arrived."""


class AuthError(BlizzardAPIError):
    """An access token could not be acquired or refreshed."""

    def __init__(self, message: str, body: bytes = b"", status_code: Optional[int] = None):
        super().__init__(message, body)
        self.status_code = status_code


class HTTPStatusError(BlizzardAPIError):
    """The API answered with a status other than 200 OK."""

    def __init__(self, status_code: int, status: str, body: bytes = b"", url: Optional[str] = None):
        super().__init__(status, body)
        self.status_code = status_code
        self.status = status
        self.url = url


class DecodeError(BlizzardAPIError):
    """A 200 OK response did not match the destination type."""


class UnknownRegionError(ValueError):
    """Raised when a region value has no hosts or namespaces."""


# =========================================================================
# Authentication modes
# =========================================================================


@dataclass(frozen=True)
class AuthMode:
    """How a request is authenticated.

    Use the ``NONE`` and ``CLIENT_CREDENTIALS`` singletons, or
    ``AuthMode.delegated(token)`` for a user token obtained elsewhere.
    """

    kind: str
    token: Optional[str] = None

    NONE: ClassVar["AuthMode"]
    CLIENT_CREDENTIALS: ClassVar["AuthMode"]

    @classmethod
    def delegated(cls, token: str) -> "AuthMode":
        if not token:
            raise ValueError("A delegated token must not be empty")
        return cls("delegated", token)

    def __repr__(self) -> str:
        return f"AuthMode({self.kind})"


AuthMode.NONE = AuthMode("none")
AuthMode.CLIENT_CREDENTIALS = AuthMode("client_credentials")


class BlizzardAPIPort(ABC):
    """
    Abstract interface for Battle.net API access.

    All request methods are async. The adapter is responsible for:
    - OAuth2 client credentials authentication and token refresh
    - Region and namespace resolution
    - Decoding responses into the requested destination type
    """

    # =========================================================================
    # Context Manager
    # =========================================================================

    @abstractmethod
    async def __aenter__(self) -> "BlizzardAPIPort":
        """Enter async context - initialize HTTP client."""
        pass

    @abstractmethod
    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context - cleanup HTTP client."""
        pass

    # =========================================================================
    # Configuration
    # =========================================================================

    @property
    @abstractmethod
    def config(self) -> ClientConfig:
        """Current configuration snapshot."""
        pass

    @abstractmethod
    def set_region(self, region: Region) -> None:
        """Switch region, recomputing hosts and namespaces."""
        pass

    @abstractmethod
    def set_locale(self, locale: str) -> None:
        """Switch the locale attached to locale-aware requests."""
        pass

    # =========================================================================
    # Requests
    # =========================================================================

    @abstractmethod
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
        """
        Issue a GET request against the regional API host.

        Args:
            path: Path and optional query, e.g. "/data/wow/token/index".
            namespace: Namespace kind or literal Battlenet-Namespace header
                value; omitted when empty.
            params: Extra query parameters.
            model: Destination type the JSON body is decoded into.
            auth: Authentication mode.
            with_locale: Attach the client's locale as a query parameter.
            timeout: Deadline in seconds for the whole call.

        Returns:
            APIResponse with the decoded value and the raw body.

        Raises:
            NetworkError: Transport failure or deadline exceeded.
            AuthError: Client credentials token could not be acquired.
            HTTPStatusError: Non-200 response.
            DecodeError: 200 response whose body does not fit ``model``.
        """
        pass
