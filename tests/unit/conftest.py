"""Unit test fixtures.

Most configuration helpers are in tests/conftest.py.
"""

import uuid

import pytest

# Re-export commonly used helpers from root conftest
from tests.conftest import (
    DOCS_URL,
    SECOND_SKILLET_URL,
    SKILLET_URL,
    minimal_afflink_config,
    minimal_config_dict,
    run_cmd,
)
from afflink.api.link.LinkOccurrence import LinkOccurrence
from afflink.api.store.StoreConfig import StoreConfig

__all__ = [
    "DOCS_URL",
    "SECOND_SKILLET_URL",
    "SKILLET_URL",
    "make_occurrence",
    "minimal_afflink_config",
    "minimal_config_dict",
    "run_cmd",
]


def make_occurrence(
    url: str,
    display_text: str | None = None,
    source_file: str = "post.md",
    line: int = 1,
    column: int = 1,
    is_external: bool = True,
    network_id: str | None = None,
    is_affiliate: bool | None = None,
) -> LinkOccurrence:
    """Build a LinkOccurrence with test-friendly defaults."""
    return LinkOccurrence(
        url=url,
        display_text=url if display_text is None else display_text,
        source_file=source_file,
        line=line,
        column=column,
        is_external=is_external,
        network_id=network_id,
        is_affiliate=(network_id is not None) if is_affiliate is None else is_affiliate,
    )


@pytest.fixture
def mongomock_store_config() -> StoreConfig:
    """Mongomock store on a fresh collection (the mongomock client is shared)."""
    return StoreConfig(
        type="mongomock",
        data={"database": "afflink_test", "collection": f"links_{uuid.uuid4().hex}"},
    )
