"""MongoDB link collection backend."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from ...link.AffiliateLink import AffiliateLink
from .._AbstractImpl import _AbstractImpl
from ..StoreConfig import StoreConfig
from ..StoreError import StoreError
from ._collection_ops import find_link, list_links, upsert_links
from ._Data import _Data as _MongoData


class _Impl(_AbstractImpl):
    def __init__(self, store_config: StoreConfig):
        if not isinstance(store_config.data, _MongoData):
            raise ValueError("MongoDB config data is required")
        self.uri = store_config.data.uri
        self.database_name = store_config.data.database
        self.collection_name = store_config.data.collection
        self._client: MongoClient[Any] | None = None
        self._collection: Collection | None = None

    def __enter__(self):
        try:
            self._client = MongoClient(self.uri, serverSelectionTimeoutMS=5000)
            self._client.server_info()  # Test connection
        except PyMongoError as e:
            raise StoreError(f"Failed to connect to MongoDB: {e}") from e
        self._collection = self._client[self.database_name][self.collection_name]
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._client:
            self._client.close()
        self._collection = None
        return False

    def list(self) -> list[AffiliateLink]:
        try:
            return list_links(self._collection)
        except PyMongoError as e:
            raise StoreError(f"Failed to fetch links: {e}") from e

    def upsert(self, links: Sequence[AffiliateLink]) -> None:
        try:
            upsert_links(self._collection, links)
        except PyMongoError as e:
            raise StoreError(f"Failed to upsert links: {e}") from e

    def get_by_slug(self, slug: str) -> AffiliateLink | None:
        try:
            return find_link(self._collection, slug)
        except PyMongoError as e:
            raise StoreError(f"Failed to fetch link: {e}") from e
