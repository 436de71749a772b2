"""Partition of assigned links against a store snapshot."""

from dataclasses import dataclass

from .AffiliateLink import AffiliateLink


@dataclass(frozen=True)
class SyncPlan:
    links: list[AffiliateLink]
    new_links: list[AffiliateLink]
    updated_links: list[AffiliateLink]
    existing_count: int

    @property
    def unchanged_count(self) -> int:
        """Stored records the upsert will not touch."""
        return self.existing_count - len(self.updated_links)
