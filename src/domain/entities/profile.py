"""Profile domain entities."""

from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import StrEnum
from uuid import UUID, uuid4

from domain.entities.listing import ListingSummary, ProfileStats

FALLBACK_DISPLAY_NAME = "Utilizator"

EDITABLE_FIELDS: tuple[str, ...] = ("name", "phone", "location", "description", "website")


class SellerType(StrEnum):
    """Kind of seller a profile represents."""

    INDIVIDUAL = "individual"
    DEALER = "dealer"


class LookupField(StrEnum):
    """Profile column used to look a profile up."""

    ID = "id"
    OWNER_ID = "owner_id"


@dataclass(frozen=True, slots=True)
class ProfileKey:
    """Selects a single profile by profile id or by owner identity."""

    by: LookupField
    value: UUID


@dataclass(frozen=True, slots=True)
class ProfileFields:
    """The user-editable subset of a profile. Empty string means not set."""

    name: str = ""
    phone: str = ""
    location: str = ""
    description: str = ""
    website: str = ""

    def as_dict(self) -> dict[str, str]:
        return asdict(self)


@dataclass
class Profile:
    """Domain entity for a marketplace user profile."""

    owner_id: UUID
    name: str
    id: UUID = field(default_factory=uuid4)
    email: str = ""
    phone: str | None = None
    location: str | None = None
    description: str | None = None
    website: str | None = None
    avatar_url: str | None = None
    seller_type: SellerType = SellerType.INDIVIDUAL
    verified: bool = False
    rating: float = 0.0
    review_count: int = 0
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Apply the display fallback for unnamed profiles."""
        if not self.name:
            self.name = FALLBACK_DISPLAY_NAME

    def editable_fields(self) -> ProfileFields:
        """Current values of the editable fields."""
        return ProfileFields(
            name=self.name,
            phone=self.phone or "",
            location=self.location or "",
            description=self.description or "",
            website=self.website or "",
        )


@dataclass(frozen=True, slots=True)
class ProfileResolution:
    """Which profile to load and whether the caller owns it."""

    key: ProfileKey
    is_owner: bool


@dataclass(frozen=True, slots=True)
class ProfileView:
    """A loaded profile together with its listings and derived stats."""

    profile: Profile
    stats: ProfileStats
    listings: list[ListingSummary]
    is_owner: bool
