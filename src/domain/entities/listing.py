"""Listing read projections used for profile statistics."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import StrEnum
from uuid import UUID, uuid4


class ListingStatus(StrEnum):
    """Lifecycle status of a listing, owned by the listing subsystem."""

    ACTIVE = "active"
    SOLD = "sold"
    PENDING = "pending"


@dataclass(frozen=True, slots=True)
class ListingSummary:
    """Read-only snapshot of a listing.

    Counters may be missing on older rows; aggregation treats them as zero.
    """

    seller_id: UUID
    status: ListingStatus
    id: UUID = field(default_factory=uuid4)
    title: str = ""
    price: Decimal | None = None
    view_count: int | None = 0
    favorite_count: int | None = 0
    created_at: datetime = field(default_factory=datetime.utcnow)


@dataclass(frozen=True, slots=True)
class ProfileStats:
    """Counters derived from a seller's listings. Never persisted."""

    active_listings: int = 0
    sold_listings: int = 0
    total_views: int = 0
    total_favorites: int = 0
