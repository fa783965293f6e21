"""Profile repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.profile import Profile, ProfileFields, ProfileKey


class IProfileRepository(Protocol):
    """Repository interface for Profile entities."""

    async def get_by(self, key: ProfileKey) -> Profile | None:
        """Get a profile by profile id or owner id."""
        ...

    async def update_editable(self, owner_id: UUID, fields: ProfileFields) -> Profile | None:
        """Overwrite exactly the editable fields of the owner's profile.

        Returns the stored profile, or None when the owner has no profile.
        Raises StoreError when the write fails.
        """
        ...
