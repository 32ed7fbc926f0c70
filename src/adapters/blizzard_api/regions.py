"""Region to host and namespace resolution for the Battle.net API."""

from typing import Union

from domain.models import Region, RegionEndpoints
from ports.blizzard_api import UnknownRegionError

CN_OAUTH_HOST = "https://www.battlenet.com.cn"
CN_API_HOST = "https://gateway.battlenet.com.cn"
CN_NAMESPACE_SUFFIX = "zh"


def resolve(region: Union[Region, int]) -> RegionEndpoints:
    """Resolve the hosts and namespaces for a region.

    Args:
        region: A Region member or its integer value.

    Returns:
        RegionEndpoints for the region.

    Raises:
        UnknownRegionError: If the value is not a known region (including 0).
    """
    try:
        region = Region(region)
    except ValueError:
        raise UnknownRegionError(f"Unknown region: {region!r}") from None

    if region is Region.CN:
        oauth_host = CN_OAUTH_HOST
        api_host = CN_API_HOST
        suffix = CN_NAMESPACE_SUFFIX
    else:
        oauth_host = f"https://{region.code}.battle.net"
        api_host = f"https://{region.code}.api.blizzard.com"
        suffix = region.code

    return RegionEndpoints(
        region=region,
        oauth_host=oauth_host,
        api_host=api_host,
        dynamic_namespace=f"dynamic-{suffix}",
        dynamic_classic_namespace=f"dynamic-classic-{suffix}",
        profile_namespace=f"profile-{suffix}",
        static_namespace=f"static-{suffix}",
        static_classic_namespace=f"static-classic-{suffix}",
    )
