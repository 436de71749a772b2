"""In-memory link collection backend using mongomock."""

from __future__ import annotations

from collections.abc import Sequence

from pymongo.collection import Collection

from ...link.AffiliateLink import AffiliateLink
from .._AbstractImpl import _AbstractImpl
from .._mongo._collection_ops import find_link, list_links, upsert_links
from ..StoreConfig import StoreConfig
from ._client import _get_mongomock_client
from ._Data import _Data as _MongomockData


class _Impl(_AbstractImpl):
    def __init__(self, store_config: StoreConfig):
        if not isinstance(store_config.data, _MongomockData):
            raise ValueError("MongoMock config data is required")
        self.database_name = store_config.data.database
        self.collection_name = store_config.data.collection
        self._collection: Collection | None = None

    def __enter__(self):
        self._collection = _get_mongomock_client()[self.database_name][self.collection_name]
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        # Shared client stays open for reuse
        self._collection = None
        return False

    def list(self) -> list[AffiliateLink]:
        return list_links(self._collection)

    def upsert(self, links: Sequence[AffiliateLink]) -> None:
        upsert_links(self._collection, links)

    def get_by_slug(self, slug: str) -> AffiliateLink | None:
        return find_link(self._collection, slug)
