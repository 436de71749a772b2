"""Store public API."""

from __future__ import annotations

from collections.abc import Sequence

from ...utils.logger import get_logger
from ..link.AffiliateLink import AffiliateLink
from ._AbstractImpl import _AbstractImpl
from .StoreConfig import StoreConfig

logger = get_logger("store")


class Store:
    """Persistence gateway for affiliate link records.

    Use as a context manager; the backend is chosen by ``store_config.type``.
    """

    def __init__(self, store_config: StoreConfig):
        self.store_config = store_config
        self._impl: _AbstractImpl | None = None

    def __enter__(self):
        backend_type = self.store_config.type

        # Validate backend type using StoreConfig registry (single source of truth)
        from .StoreConfig import _BACKEND_REGISTRY

        if backend_type not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")

        module = __import__(f"afflink.api.store._{backend_type}._Impl", fromlist=[""])
        self._impl = module._Impl(self.store_config)
        self._impl.__enter__()
        logger.debug("Opened %s store", backend_type)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._impl:
            return self._impl.__exit__(exc_type, exc_val, exc_tb)
        return False

    def _require_impl(self) -> _AbstractImpl:
        if not self._impl:
            raise RuntimeError("Store not initialized. Use as context manager first.")
        return self._impl

    def list(self) -> list[AffiliateLink]:
        return self._require_impl().list()

    def upsert(self, links: Sequence[AffiliateLink]) -> None:
        if not links:
            return
        self._require_impl().upsert(links)
        logger.info("Upserted %d links to %s store", len(links), self.store_config.type)

    def get_by_slug(self, slug: str) -> AffiliateLink | None:
        return self._require_impl().get_by_slug(slug)
