"""Partition freshly assigned links against the stored snapshot."""

from collections.abc import Iterable, Mapping

from .AffiliateLink import AffiliateLink
from .SyncPlan import SyncPlan


def reconcile(link_map: Mapping[str, AffiliateLink], existing: Iterable[AffiliateLink]) -> SyncPlan:
    """Split assigned links into new (slug not stored) and updated (slug stored).

    The upsert that follows replaces whole records by slug; new values win.
    """
    existing_slugs = {link.slug for link in existing}
    links = list(link_map.values())
    return SyncPlan(
        links=links,
        new_links=[link for link in links if link.slug not in existing_slugs],
        updated_links=[link for link in links if link.slug in existing_slugs],
        existing_count=len(existing_slugs),
    )
