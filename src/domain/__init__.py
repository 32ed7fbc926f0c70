"""Domain models for the Battle.net API client."""

from domain.models import (
    AccessToken,
    APIResponse,
    ClientConfig,
    Locale,
    Namespace,
    Region,
    RegionEndpoints,
    TokenValidation,
    UserInfo,
)

__all__ = [
    "AccessToken",
    "APIResponse",
    "ClientConfig",
    "Locale",
    "Namespace",
    "Region",
    "RegionEndpoints",
    "TokenValidation",
    "UserInfo",
]
