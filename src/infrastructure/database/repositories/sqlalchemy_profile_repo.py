"""SQLAlchemy implementation of Profile repository."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import StoreError
from domain.entities.profile import LookupField, Profile, ProfileFields, ProfileKey, SellerType
from infrastructure.database.models import ProfileModel


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by(self, key: ProfileKey) -> Profile | None:
        """Get a profile by profile id or owner id."""
        column = ProfileModel.id if key.by == LookupField.ID else ProfileModel.owner_id
        stmt = select(ProfileModel).where(column == key.value)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise StoreError(f"Failed to load profile: {exc}") from exc
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def update_editable(self, owner_id: UUID, fields: ProfileFields) -> Profile | None:
        """Overwrite the editable fields of the owner's profile."""
        stmt = select(ProfileModel).where(ProfileModel.owner_id == owner_id)
        try:
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()
            if not model:
                return None

            model.name = fields.name
            model.phone = fields.phone or None
            model.location = fields.location or None
            model.description = fields.description or None
            model.website = fields.website or None
            model.updated_at = datetime.utcnow()

            await self._session.flush()
            await self._session.refresh(model)
        except SQLAlchemyError as exc:
            raise StoreError(f"Failed to update profile: {exc}") from exc
        return self._to_entity(model)

    def _to_entity(self, model: ProfileModel) -> Profile:
        """Convert ORM model to domain entity."""
        return Profile(
            id=model.id,
            owner_id=model.owner_id,
            name=model.name or "",
            email=model.email or "",
            phone=model.phone,
            location=model.location,
            description=model.description,
            website=model.website,
            avatar_url=model.avatar_url,
            seller_type=SellerType(model.seller_type or SellerType.INDIVIDUAL),
            verified=bool(model.verified),
            rating=model.rating or 0.0,
            review_count=model.reviews_count or 0,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
