"""Canonical, deduplicated record for one distinct URL."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class AffiliateLink:
    """Assigned link record.

    ``is_affiliate`` means the URL was recognized as affiliate-shaped;
    ``is_converted`` means an enabled network actually rewrote it into
    ``canonical_url``. Only the first is part of the persisted record.
    """

    slug: str
    display_name: str
    canonical_url: str
    is_affiliate: bool = False
    network_id: str | None = None
    is_converted: bool = False

    def to_record(self) -> dict[str, Any]:
        """Wire/file shape shared by every store backend."""
        return {
            "slug": self.slug,
            "name": self.display_name,
            "url": self.canonical_url,
            "is_affiliate": self.is_affiliate,
            "network": self.network_id,
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "AffiliateLink":
        try:
            slug = record["slug"]
            url = record["url"]
        except KeyError as e:
            raise ValueError(f"Link record is missing field {e.args[0]!r}: {record!r}") from e
        return cls(
            slug=str(slug),
            display_name=str(record.get("name") or url),
            canonical_url=str(url),
            is_affiliate=bool(record.get("is_affiliate", False)),
            network_id=record.get("network") or None,
        )
