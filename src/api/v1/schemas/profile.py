"""Pydantic schemas for Profile API."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from domain.entities.listing import ListingSummary, ProfileStats
from domain.entities.profile import Profile, ProfileFields, ProfileView, SellerType

MAX_FIELD_LENGTH = 10_000


class ProfileUpdate(BaseModel):
    """Schema for overwriting the editable profile fields.

    Omitted fields are cleared. Read-only fields such as ``email`` or
    ``verified`` are rejected.
    """

    model_config = ConfigDict(extra="forbid")

    # Payload-size guards only; field rules are enforced by the validator.
    name: str = Field("", max_length=MAX_FIELD_LENGTH)
    phone: str | None = Field(None, max_length=MAX_FIELD_LENGTH)
    location: str | None = Field(None, max_length=MAX_FIELD_LENGTH)
    description: str | None = Field(None, max_length=MAX_FIELD_LENGTH)
    website: str | None = Field(None, max_length=MAX_FIELD_LENGTH)

    def to_fields(self) -> ProfileFields:
        return ProfileFields(
            name=self.name,
            phone=self.phone or "",
            location=self.location or "",
            description=self.description or "",
            website=self.website or "",
        )


class ProfileResponse(BaseModel):
    """Schema for Profile response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "owner_id": "456e4567-e89b-12d3-a456-426614174000",
                "name": "Ana Popescu",
                "email": "ana@example.com",
                "phone": "0790454647",
                "location": "Cluj-Napoca",
                "description": "Vând piese auto originale.",
                "website": "https://example.ro",
                "avatar_url": None,
                "seller_type": "individual",
                "verified": True,
                "rating": 4.8,
                "review_count": 12,
                "created_at": "2026-01-28T10:00:00",
                "updated_at": "2026-02-01T10:00:00",
            }
        },
    )

    id: UUID
    owner_id: UUID
    name: str
    email: str
    phone: str | None = None
    location: str | None = None
    description: str | None = None
    website: str | None = None
    avatar_url: str | None = None
    seller_type: SellerType
    verified: bool
    rating: float
    review_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, profile: Profile) -> "ProfileResponse":
        return cls.model_validate(profile)


class ProfileStatsResponse(BaseModel):
    """Schema for derived profile statistics."""

    model_config = ConfigDict(from_attributes=True)

    active_listings: int
    sold_listings: int
    total_views: int
    total_favorites: int

    @classmethod
    def from_entity(cls, stats: ProfileStats) -> "ProfileStatsResponse":
        return cls.model_validate(stats)


class ListingSummaryResponse(BaseModel):
    """Schema for a listing shown on a profile."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    price: Decimal | None = None
    status: str
    view_count: int = 0
    favorite_count: int = 0
    created_at: datetime

    @classmethod
    def from_entity(cls, listing: ListingSummary) -> "ListingSummaryResponse":
        return cls(
            id=listing.id,
            title=listing.title,
            price=listing.price,
            status=listing.status.value,
            view_count=listing.view_count or 0,
            favorite_count=listing.favorite_count or 0,
            created_at=listing.created_at,
        )


class ProfileViewResponse(BaseModel):
    """Schema for an assembled profile page."""

    profile: ProfileResponse
    stats: ProfileStatsResponse
    listings: list[ListingSummaryResponse]
    is_owner: bool

    @classmethod
    def from_entity(cls, view: ProfileView) -> "ProfileViewResponse":
        return cls(
            profile=ProfileResponse.from_entity(view.profile),
            stats=ProfileStatsResponse.from_entity(view.stats),
            listings=[ListingSummaryResponse.from_entity(item) for item in view.listings],
            is_owner=view.is_owner,
        )


class ProfileViewDetailResponse(BaseModel):
    """Schema for a single profile page."""

    data: ProfileViewResponse


class ProfileDetailResponse(BaseModel):
    """Schema for a single Profile."""

    data: ProfileResponse


class ProfileValidationResponse(BaseModel):
    """Schema for a dry-run validation of profile fields."""

    data: dict[str, str]
    errors: dict[str, str] = Field(default_factory=dict)
    valid: bool
