"""Abstract base class for store backend implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from ..link.AffiliateLink import AffiliateLink


class _AbstractImpl(ABC):
    @abstractmethod
    def __enter__(self):
        pass

    @abstractmethod
    def __exit__(self, exc_type, exc_val, exc_tb):
        pass

    @abstractmethod
    def list(self) -> list[AffiliateLink]:
        pass

    @abstractmethod
    def upsert(self, links: Sequence[AffiliateLink]) -> None:
        """Insert or replace records keyed by slug. Empty input is a no-op."""
        pass

    @abstractmethod
    def get_by_slug(self, slug: str) -> AffiliateLink | None:
        pass
