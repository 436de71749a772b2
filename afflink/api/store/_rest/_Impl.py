"""PostgREST-style REST table backend."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import requests

from ...link.AffiliateLink import AffiliateLink
from .._AbstractImpl import _AbstractImpl
from ..StoreConfig import StoreConfig
from ..StoreError import StoreError
from ._Data import _Data as _RestData


class _Impl(_AbstractImpl):
    def __init__(self, store_config: StoreConfig):
        if not isinstance(store_config.data, _RestData):
            raise ValueError("REST store config data is required")
        data = store_config.data
        self.table = data.table
        self.timeout = data.timeout
        self.service_key = data.service_key
        self.endpoint = f"{data.url}/rest/v1/{data.table}"
        self._session: requests.Session | None = None

    def __enter__(self):
        self._session = requests.Session()
        self._session.headers.update(
            {
                "apikey": self.service_key,
                "Authorization": f"Bearer {self.service_key}",
            }
        )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._session:
            self._session.close()
            self._session = None
        return False

    def _request(self, method: str, action: str, **kwargs: Any) -> requests.Response:
        session = self._session or requests.Session()
        try:
            response = session.request(method, self.endpoint, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise StoreError(f"Failed to {action}: {e}") from e
        if not response.ok:
            raise StoreError(f"Failed to {action}: {response.status_code} {response.reason} - {response.text}")
        return response

    def _records(self, response: requests.Response, action: str) -> list[dict[str, Any]]:
        try:
            payload = response.json()
        except ValueError as e:
            raise StoreError(f"Failed to {action}: invalid JSON response") from e
        if not isinstance(payload, list):
            raise StoreError(f"Failed to {action}: expected a JSON array, got {type(payload).__name__}")
        return payload

    def list(self) -> list[AffiliateLink]:
        response = self._request("GET", "fetch links", params={"select": "*"})
        return [AffiliateLink.from_record(record) for record in self._records(response, "fetch links")]

    def upsert(self, links: Sequence[AffiliateLink]) -> None:
        if not links:
            return
        self._request(
            "POST",
            "upsert links",
            json=[link.to_record() for link in links],
            headers={"Content-Type": "application/json", "Prefer": "resolution=merge-duplicates"},
        )

    def get_by_slug(self, slug: str) -> AffiliateLink | None:
        response = self._request("GET", "fetch link", params={"slug": f"eq.{slug}", "limit": "1"})
        records = self._records(response, "fetch link")
        return AffiliateLink.from_record(records[0]) if records else None
