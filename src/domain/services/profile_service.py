"""Profile service layer: the load path and the server-side write path."""

from collections.abc import Callable, Mapping
from uuid import UUID

import structlog

from core.exceptions import ProfileNotFoundError, ProfileValidationError, StoreError
from domain.entities.identity import Identity
from domain.entities.listing import ListingSummary
from domain.entities.profile import Profile, ProfileFields, ProfileView
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.profile_resolver import resolve
from domain.services.sanitizer import sanitize
from domain.services.stats_aggregator import aggregate
from domain.services.validator import validate

logger = structlog.get_logger()


class ProfileService:
    """Service layer for loading and updating marketplace profiles."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def load(self, requested_id: UUID | None, caller: Identity | None) -> ProfileView:
        """Load a profile with its listings and statistics.

        Ownership is granted when the resolver says so or when the caller
        is the profile owner, so an owner opening their own shareable link
        still sees the owner view.

        Args:
            requested_id: Explicit profile id from a shareable URL, if any.
            caller: The authenticated caller, if any.

        Returns:
            The assembled ProfileView.

        Raises:
            AuthenticationError: Neither requested_id nor caller was given.
            ProfileNotFoundError: No profile matches the resolved key.
        """
        resolution = resolve(requested_id, caller)

        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by(resolution.key)
            if not profile:
                raise ProfileNotFoundError(str(resolution.key.value))

            listings: list[ListingSummary]
            try:
                listings = await uow.listings.list_by_seller(profile.id)
            except StoreError as exc:
                # The profile is still shown; stats degrade to zero.
                logger.warning(
                    "profile_listings_unavailable",
                    profile_id=str(profile.id),
                    error=exc.message,
                )
                listings = []

        is_owner = resolution.is_owner or (
            caller is not None and caller.id == profile.owner_id
        )
        return ProfileView(
            profile=profile,
            stats=aggregate(listings),
            listings=listings,
            is_owner=is_owner,
        )

    def preview(self, fields: Mapping[str, str | None]) -> tuple[dict[str, str], dict[str, str]]:
        """Sanitize and validate without persisting. Returns (sanitized, errors)."""
        clean = sanitize(fields)
        return clean, validate(clean)

    async def update_profile(self, owner_id: UUID, fields: ProfileFields) -> Profile:
        """Validate and persist the editable fields of the owner's profile.

        Email, verification and rating are never touched.

        Raises:
            ProfileValidationError: The fields fail validation; the store is not called.
            ProfileNotFoundError: The owner has no profile.
            StoreError: The write or commit failed.
        """
        clean, errors = self.preview(fields.as_dict())
        if errors:
            logger.info("profile_update_rejected", owner_id=str(owner_id), fields=sorted(errors))
            raise ProfileValidationError(errors)

        async with self._uow_factory() as uow:
            updated = await uow.profiles.update_editable(owner_id, ProfileFields(**clean))
            if not updated:
                raise ProfileNotFoundError(str(owner_id))
            await uow.commit()

        logger.info("profile_updated", owner_id=str(owner_id), profile_id=str(updated.id))
        return updated
