"""Link record operations shared by the pymongo and mongomock backends."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ...link.AffiliateLink import AffiliateLink

_PROJECTION = {"_id": 0}


def list_links(collection: Any) -> list[AffiliateLink]:
    return [AffiliateLink.from_record(doc) for doc in collection.find({}, _PROJECTION)]


def upsert_links(collection: Any, links: Sequence[AffiliateLink]) -> None:
    for link in links:
        collection.replace_one({"slug": link.slug}, link.to_record(), upsert=True)


def find_link(collection: Any, slug: str) -> AffiliateLink | None:
    doc = collection.find_one({"slug": slug}, _PROJECTION)
    return AffiliateLink.from_record(doc) if doc else None
