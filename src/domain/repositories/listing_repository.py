"""Listing repository protocol (read only)."""

from typing import Protocol
from uuid import UUID

from domain.entities.listing import ListingSummary


class IListingRepository(Protocol):
    """Read access to listings for profile statistics."""

    async def list_by_seller(self, seller_id: UUID) -> list[ListingSummary]:
        """Get all listings of a seller profile, newest first."""
        ...
