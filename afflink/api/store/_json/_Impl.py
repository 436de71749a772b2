"""Flat JSON file backend."""

from __future__ import annotations

import json
from collections.abc import Sequence
from contextlib import suppress
from typing import Any

from ...link.AffiliateLink import AffiliateLink
from .._AbstractImpl import _AbstractImpl
from ..StoreConfig import StoreConfig
from ..StoreError import StoreError
from ._Data import _Data as _JsonData


class _Impl(_AbstractImpl):
    def __init__(self, store_config: StoreConfig):
        if not isinstance(store_config.data, _JsonData):
            raise ValueError("JSON store config data is required")
        self.path = store_config.data.file_path

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        return False

    def _read_records(self) -> list[dict[str, Any]]:
        if not self.path.exists():
            return []
        try:
            records = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise StoreError(f"Failed to read {self.path}: {e}") from e
        if not isinstance(records, list) or not all(isinstance(r, dict) and r.get("slug") for r in records):
            raise StoreError(f"{self.path} must contain a JSON array of records with a slug")
        return records

    def list(self) -> list[AffiliateLink]:
        return [AffiliateLink.from_record(record) for record in self._read_records()]

    def upsert(self, links: Sequence[AffiliateLink]) -> None:
        if not links:
            return

        # dict keeps first-seen position; a re-assigned key keeps its slot
        merged: dict[str, dict[str, Any]] = {record["slug"]: record for record in self._read_records()}
        for link in links:
            merged[link.slug] = link.to_record()

        temp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temp_path.write_text(json.dumps(list(merged.values()), indent=2, ensure_ascii=False), encoding="utf-8")
            temp_path.replace(self.path)
        except OSError as e:
            with suppress(OSError):
                temp_path.unlink()
            raise StoreError(f"Failed to write {self.path}: {e}") from e

    def get_by_slug(self, slug: str) -> AffiliateLink | None:
        for record in self._read_records():
            if record.get("slug") == slug:
                return AffiliateLink.from_record(record)
        return None
