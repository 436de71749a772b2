"""Unit tests for the link value types."""

import dataclasses

import pytest

from afflink.api.link.AffiliateLink import AffiliateLink
from afflink.api.link.TransformResult import LinkChange, TransformResult
from tests.unit.conftest import make_occurrence


def test_affiliate_link_record_shape():
    link = AffiliateLink(
        slug="s", display_name="Name", canonical_url="https://a.test", is_affiliate=True, network_id="amazon",
        is_converted=True,
    )
    assert link.to_record() == {
        "slug": "s",
        "name": "Name",
        "url": "https://a.test",
        "is_affiliate": True,
        "network": "amazon",
    }


def test_affiliate_link_from_record():
    link = AffiliateLink.from_record({"slug": "s", "name": "Name", "url": "https://a.test", "network": None})
    assert link == AffiliateLink(slug="s", display_name="Name", canonical_url="https://a.test")
    assert not link.is_converted


def test_affiliate_link_from_record_requires_slug_and_url():
    with pytest.raises(ValueError, match="slug"):
        AffiliateLink.from_record({"url": "https://a.test"})
    with pytest.raises(ValueError, match="url"):
        AffiliateLink.from_record({"slug": "s"})


def test_value_types_are_frozen():
    link = AffiliateLink(slug="s", display_name="n", canonical_url="https://a.test")
    with pytest.raises(dataclasses.FrozenInstanceError):
        link.slug = "t"  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        make_occurrence("https://a.test").url = "x"  # type: ignore[misc]


def test_transform_result_change_count():
    result = TransformResult(
        file="a.md",
        original_content="x",
        rewritten_content="y",
        changes=[LinkChange(original_url="https://a.test", slug="a", tracking_url="/link/a")],
    )
    assert result.change_count == 1
    assert result.to_dict() == {
        "file": "a.md",
        "change_count": 1,
        "changes": [{"original_url": "https://a.test", "slug": "a", "tracking_url": "/link/a"}],
    }
