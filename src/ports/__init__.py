"""Ports (interfaces) for the hexagonal architecture."""

from ports.auction_house import AuctionHousePort
from ports.blizzard_api import (
    AuthError,
    AuthMode,
    BlizzardAPIError,
    BlizzardAPIPort,
    DeadlineExceededError,
    DecodeError,
    HTTPStatusError,
    NetworkError,
    UnknownRegionError,
)
from ports.items import ItemsPort

__all__ = [
    "AuctionHousePort",
    "BlizzardAPIPort",
    "ItemsPort",
    "AuthMode",
    "BlizzardAPIError",
    "NetworkError",
    "DeadlineExceededError",
    "AuthError",
    "HTTPStatusError",
    "DecodeError",
    "UnknownRegionError",
]
