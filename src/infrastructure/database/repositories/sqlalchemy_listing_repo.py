"""SQLAlchemy implementation of the read-only Listing repository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import StoreError
from domain.entities.listing import ListingStatus, ListingSummary
from infrastructure.database.models import ListingModel


class SQLAlchemyListingRepository:
    """SQLAlchemy implementation of IListingRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_by_seller(self, seller_id: UUID) -> list[ListingSummary]:
        """Get all listings of a seller, newest first."""
        stmt = (
            select(ListingModel)
            .where(ListingModel.seller_id == seller_id)
            .order_by(ListingModel.created_at.desc())
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise StoreError(f"Failed to load listings: {exc}") from exc
        return [self._to_entity(model) for model in result.scalars()]

    def _to_entity(self, model: ListingModel) -> ListingSummary:
        """Convert ORM model to read projection."""
        return ListingSummary(
            id=model.id,
            seller_id=model.seller_id,
            title=model.title,
            price=model.price,
            status=ListingStatus(model.status),
            view_count=model.views_count,
            favorite_count=model.favorites_count,
            created_at=model.created_at,
        )
