"""Decides which profile a request targets and whether the caller owns it."""

from uuid import UUID

from core.exceptions import AuthenticationError
from domain.entities.identity import Identity
from domain.entities.profile import LookupField, ProfileKey, ProfileResolution


def resolve(requested_id: UUID | None, caller: Identity | None) -> ProfileResolution:
    """Resolve the target profile key and ownership.

    An explicit ``requested_id`` is a shareable profile id and is looked up
    by profile id. Without one, the caller's own profile is looked up by
    owner id.

    Raises:
        AuthenticationError: If there is neither a requested id nor a caller.
    """
    if requested_id is None:
        if caller is None:
            raise AuthenticationError(message="Sign in to view your profile")
        return ProfileResolution(
            key=ProfileKey(by=LookupField.OWNER_ID, value=caller.id),
            is_owner=True,
        )

    return ProfileResolution(
        key=ProfileKey(by=LookupField.ID, value=requested_id),
        is_owner=caller is not None and caller.id == requested_id,
    )
