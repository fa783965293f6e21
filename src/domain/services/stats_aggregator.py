"""Reduction of a seller's listings into profile statistics."""

from collections.abc import Iterable

from domain.entities.listing import ListingStatus, ListingSummary, ProfileStats


def aggregate(listings: Iterable[ListingSummary]) -> ProfileStats:
    """Count active/sold listings and sum view and favorite counters.

    Pending listings count in neither bucket. Missing counters are zero.
    """
    active = sold = views = favorites = 0
    for listing in listings:
        if listing.status == ListingStatus.ACTIVE:
            active += 1
        elif listing.status == ListingStatus.SOLD:
            sold += 1
        views += listing.view_count or 0
        favorites += listing.favorite_count or 0

    return ProfileStats(
        active_listings=active,
        sold_listings=sold,
        total_views=views,
        total_favorites=favorites,
    )
