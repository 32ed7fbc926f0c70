"""Domain models representing Battle.net API entities."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum, IntEnum
from typing import Annotated, Any, Generic, Optional, TypeVar

from pydantic import Field

T = TypeVar("T")


class Region(IntEnum):
    """Battle.net API regions.

    The integer values are persisted by callers and must never change.
    """

    US = 1
    EU = 2
    KR = 3
    TW = 4
    CN = 5

    @property
    def code(self) -> str:
        """Lowercase region code used in hosts and namespaces."""
        return self.name.lower()

    @classmethod
    def from_code(cls, code: str) -> "Region":
        """Parse a region code such as ``"eu"``."""
        try:
            return cls[code.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown region code: {code!r}") from None

    def __str__(self) -> str:
        return self.code


class Locale(str, Enum):
    """Locales known to the Battle.net API.

    Clients accept any locale string; these are provided for convenience.
    """

    DE_DE = "de_DE"
    EN_GB = "en_GB"
    EN_US = "en_US"
    ES_ES = "es_ES"
    ES_MX = "es_MX"
    FR_FR = "fr_FR"
    IT_IT = "it_IT"
    JA_JP = "ja_JP"
    KO_KR = "ko_KR"
    PL_PL = "pl_PL"
    PT_BR = "pt_BR"
    RU_RU = "ru_RU"
    TH_TH = "th_TH"
    ZH_CN = "zh_CN"
    ZH_TW = "zh_TW"

    def __str__(self) -> str:
        return self.value


class Namespace(str, Enum):
    """Namespace kinds, resolved against a region when a request is built."""

    DYNAMIC = "dynamic"
    DYNAMIC_CLASSIC = "dynamic-classic"
    PROFILE = "profile"
    STATIC = "static"
    STATIC_CLASSIC = "static-classic"


@dataclass(frozen=True)
class RegionEndpoints:
    """Hosts and namespaces for a single region."""

    region: Region
    oauth_host: str
    api_host: str
    dynamic_namespace: str
    dynamic_classic_namespace: str
    profile_namespace: str
    static_namespace: str
    static_classic_namespace: str

    def namespace(self, kind: Namespace) -> str:
        """Return this region's namespace of the given kind."""
        return getattr(self, f"{Namespace(kind).name.lower()}_namespace")


@dataclass(frozen=True)
class ClientConfig:
    """Immutable snapshot of a client's credentials, region and locale."""

    client_id: str
    client_secret: str = field(repr=False)
    locale: str
    endpoints: RegionEndpoints

    @property
    def region(self) -> Region:
        return self.endpoints.region


@dataclass(frozen=True)
class AccessToken:
    """OAuth2 access token issued by the client credentials grant."""

    access_token: str = field(repr=False)
    token_type: str
    expires_in: int
    issued_at: datetime
    scope: Optional[str] = None

    @property
    def expires_at(self) -> datetime:
        return self.issued_at + timedelta(seconds=self.expires_in)

    @classmethod
    def from_api_response(cls, data: dict[str, Any], issued_at: Optional[datetime] = None) -> "AccessToken":
        """Create an AccessToken from the token endpoint payload."""
        return cls(
            access_token=data["access_token"],
            token_type=data.get("token_type", "bearer"),
            expires_in=int(data["expires_in"]),
            scope=data.get("scope"),
            issued_at=issued_at or datetime.now(timezone.utc),
        )


@dataclass(frozen=True)
class APIResponse(Generic[T]):
    """Decoded payload together with the raw response body."""

    data: T
    body: bytes
    status_code: int = 200


# OAuth models


@dataclass
class TokenValidation:
    """Metadata returned by the token introspection endpoint."""

    client_id: str
    exp: int
    scope: list[str] = field(default_factory=list)
    authorities: list[dict[str, Any]] = field(default_factory=list)
    user_name: Optional[str] = None


@dataclass
class UserInfo:
    """Account owning a user (authorization code) token."""

    sub: str
    id: int
    battletag: Optional[str] = None


# Shared reference models


@dataclass(frozen=True)
class Link:
    """A hypermedia reference to another API document."""

    href: str

    @property
    def resource_id(self) -> Optional[int]:
        """Trailing numeric ID of the referenced document, if any."""
        tail = self.href.split("?")[0].rstrip("/").split("/")[-1]
        return int(tail) if tail.isdigit() else None


@dataclass(frozen=True)
class TypedName:
    """A ``{"type": ..., "name": ...}`` pair as used by WoW documents."""

    type: str
    name: Optional[str] = None


@dataclass(frozen=True)
class KeyedName:
    """A named reference to another document."""

    id: int
    name: Optional[str] = None
    key: Optional[Link] = None


# WoW realm models


@dataclass(frozen=True)
class ConnectedRealmIndex:
    """Index of connected realms for a region."""

    connected_realms: list[Link] = field(default_factory=list)

    @property
    def realm_ids(self) -> list[int]:
        return [link.resource_id for link in self.connected_realms if link.resource_id is not None]


@dataclass(frozen=True)
class Realm:
    """A single realm within a connected realm."""

    id: int
    slug: str
    name: Optional[str] = None
    category: Optional[str] = None
    locale: Optional[str] = None
    timezone: Optional[str] = None


@dataclass(frozen=True)
class ConnectedRealm:
    """Represents a connected realm (group of merged realms)."""

    id: int
    has_queue: bool = False
    status: Optional[TypedName] = None
    population: Optional[TypedName] = None
    realms: list[Realm] = field(default_factory=list)

    @property
    def realm_slugs(self) -> tuple[str, ...]:
        return tuple(realm.slug for realm in self.realms)


# WoW auction models


@dataclass(frozen=True)
class AuctionModifier:
    type: int
    value: int


@dataclass(frozen=True)
class AuctionItem:
    """Represents an item in an auction."""

    id: int
    bonus_lists: Optional[list[int]] = None
    modifiers: Optional[list[AuctionModifier]] = None


@dataclass(frozen=True)
class Auction:
    """Represents a single auction listing."""

    id: int
    item: AuctionItem
    time_left: str
    quantity: int = 1
    unit_price: Optional[int] = None
    buyout: Optional[int] = None
    bid: Optional[int] = None


@dataclass
class AuctionData:
    """Auctions for a connected realm or the region-wide commodity market."""

    auctions: list[Auction] = field(default_factory=list)
    connected_realm: Optional[Link] = None


@dataclass(frozen=True)
class TokenIndex:
    """WoW Token price for a region."""

    last_updated_timestamp: int
    price: int


# WoW item models


@dataclass
class Item:
    """Represents a World of Warcraft item."""

    id: int
    name: Optional[str] = None
    quality: Optional[TypedName] = None
    level: int = 0
    required_level: int = 0
    item_class: Optional[KeyedName] = None
    item_subclass: Optional[KeyedName] = None
    inventory_type: Optional[TypedName] = None
    purchase_price: int = 0
    sell_price: int = 0
    max_count: int = 0
    is_equippable: bool = False
    is_stackable: bool = False
    description: Optional[str] = None


@dataclass(frozen=True)
class MediaAsset:
    key: str
    value: str
    file_data_id: Optional[int] = None


@dataclass
class ItemMedia:
    """Represents media assets for an item."""

    id: int
    assets: list[MediaAsset] = field(default_factory=list)

    @property
    def icon_url(self) -> Optional[str]:
        for asset in self.assets:
            if asset.key == "icon":
                return asset.value
        return None


@dataclass
class ItemClassIndex:
    item_classes: list[KeyedName] = field(default_factory=list)


# WoW profile models


@dataclass(frozen=True)
class CharacterSummary:
    """A character listed on a WoW account."""

    id: int
    name: str
    level: int
    realm: Optional[KeyedName] = None
    playable_class: Optional[KeyedName] = None
    playable_race: Optional[KeyedName] = None
    faction: Optional[TypedName] = None


@dataclass(frozen=True)
class WoWAccount:
    id: int
    characters: list[CharacterSummary] = field(default_factory=list)


@dataclass
class WoWUserProfile:
    """Profile summary for the account owning a user token."""

    id: int
    wow_accounts: list[WoWAccount] = field(default_factory=list)


@dataclass
class CharacterProfile:
    """Character profile summary."""

    id: int
    name: str
    level: int = 0
    experience: int = 0
    achievement_points: int = 0
    faction: Optional[TypedName] = None
    race: Optional[KeyedName] = None
    character_class: Optional[KeyedName] = None
    realm: Optional[KeyedName] = None
    guild: Optional[KeyedName] = None


# Diablo III models


@dataclass(frozen=True)
class D3HeroSummary:
    id: int
    name: str
    level: int
    hardcore: bool = False
    seasonal: bool = False
    dead: bool = False


@dataclass
class D3CareerProfile:
    """Diablo III career profile for a BattleTag."""

    battle_tag: Annotated[str, Field(alias="battleTag")]
    paragon_level: Annotated[int, Field(alias="paragonLevel")] = 0
    heroes: list[D3HeroSummary] = field(default_factory=list)


# StarCraft II models


@dataclass(frozen=True)
class SC2LadderMember:
    id: int
    realm: int = 0
    region: int = 0


@dataclass(frozen=True)
class SC2LadderRef:
    ladder_id: int
    member_count: int = 0


@dataclass(frozen=True)
class SC2LeagueTier:
    id: int
    min_rating: Optional[int] = None
    max_rating: Optional[int] = None
    division: list[SC2LadderRef] = field(default_factory=list)


@dataclass
class SC2League:
    """StarCraft II league data for a season, queue and team type."""

    key: dict[str, int] = field(default_factory=dict)
    tier: list[SC2LeagueTier] = field(default_factory=list)


@dataclass(frozen=True)
class SC2LadderEntry:
    id: int
    rating: int = 0
    wins: int = 0
    losses: int = 0
    ties: int = 0
    points: int = 0
    member: list[SC2LadderMember] = field(default_factory=list)


@dataclass
class SC2Ladder:
    """StarCraft II ladder (a single division's teams)."""

    team: list[SC2LadderEntry] = field(default_factory=list)
