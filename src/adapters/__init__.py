"""Adapters (implementations) for the hexagonal architecture."""

from adapters.blizzard_api import BlizzardAPIClient, BlizzardClient

__all__ = [
    "BlizzardAPIClient",
    "BlizzardClient",
]
