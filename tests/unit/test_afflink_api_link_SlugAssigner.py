"""Unit tests for afflink.api.link.SlugAssigner."""

import pytest

from afflink.api.config.AfflinkConfig import AfflinkConfig
from afflink.api.link.SlugAssigner import SlugAssigner
from tests.unit.conftest import DOCS_URL, SECOND_SKILLET_URL, SKILLET_URL, make_occurrence, minimal_afflink_config


@pytest.fixture
def assigner() -> SlugAssigner:
    return SlugAssigner(minimal_afflink_config())


def test_one_record_per_distinct_url(assigner):
    occurrences = [
        make_occurrence(SKILLET_URL, "Cast Iron Skillet", network_id="amazon"),
        make_occurrence(DOCS_URL, "the docs"),
        make_occurrence(DOCS_URL, "Python docs again", source_file="other.md"),
    ]
    link_map = assigner.assign(occurrences)
    assert list(link_map) == [SKILLET_URL, DOCS_URL]
    # First occurrence decides the display name
    assert link_map[DOCS_URL].display_name == "the docs"
    assert link_map[DOCS_URL].slug == "the-docs"


def test_slugs_are_unique_and_collisions_follow_order(assigner):
    occurrences = [
        make_occurrence("https://docs.python.org/a", "Docs"),
        make_occurrence("https://docs.python.org/b", "Docs"),
        make_occurrence("https://docs.python.org/c", "Docs"),
        make_occurrence("https://readthedocs.org/d", "Docs"),
    ]
    slugs = [link.slug for link in assigner.assign(occurrences).values()]
    assert slugs == ["docs", "docs-docs", "docs-2", "docs-readthedocs"]
    assert len(set(slugs)) == len(slugs)


def test_numeric_suffix_skips_taken_candidates(assigner):
    occurrences = [
        make_occurrence("https://a.example/1", "Item"),
        make_occurrence("https://a.example/2", "Item 2"),
        make_occurrence("https://a.example/3", "Item"),
        make_occurrence("https://a.example/4", "Item"),
    ]
    slugs = [link.slug for link in assigner.assign(occurrences).values()]
    # "item-2" is taken by the second link's own text
    assert slugs == ["item", "item-2", "item-a", "item-3"]


def test_amazon_link_is_converted(assigner):
    link = assigner.assign([make_occurrence(SKILLET_URL, "Cast Iron Skillet", network_id="amazon")])[SKILLET_URL]
    assert link.slug == "cast-iron-skillet"
    assert link.canonical_url == "https://www.amazon.com/dp/B000A6PPOK?tag=mytag-20"
    assert link.is_affiliate
    assert link.is_converted
    assert link.network_id == "amazon"


def test_same_text_different_amazon_products(assigner):
    link_map = assigner.assign(
        [
            make_occurrence(SKILLET_URL, "Cast Iron Skillet", network_id="amazon"),
            make_occurrence(SECOND_SKILLET_URL, "Cast Iron Skillet", network_id="amazon"),
        ]
    )
    assert [link.slug for link in link_map.values()] == ["cast-iron-skillet", "cast-iron-skillet-amazon"]


def test_disabled_network_keeps_url():
    config = AfflinkConfig(networks={"amazon": {"enabled": False, "tag": "mytag-20"}})
    link = SlugAssigner(config).assign([make_occurrence(SKILLET_URL, "Skillet", network_id="amazon")])[SKILLET_URL]
    assert link.canonical_url == SKILLET_URL
    assert link.is_affiliate
    assert not link.is_converted
    assert link.slug == "skillet"


def test_unconfigured_network_keeps_url():
    config = AfflinkConfig(networks={})
    link = SlugAssigner(config).assign([make_occurrence(SKILLET_URL, "Skillet", network_id="amazon")])[SKILLET_URL]
    assert link.canonical_url == SKILLET_URL
    assert not link.is_converted


def test_non_http_urls_are_ignored(assigner):
    link_map = assigner.assign(
        [
            make_occurrence("mailto:hi@example.com", "mail"),
            make_occurrence("ftp://files.example.com/x", "files"),
            make_occurrence("/about", "about"),
            make_occurrence("HTTPS://Upper.example.com/x", "upper"),
        ]
    )
    assert list(link_map) == ["HTTPS://Upper.example.com/x"]


def test_host_and_path_fallback(assigner):
    url = "https://github.com/psf/requests"
    assert assigner.assign([make_occurrence(url)])[url].slug == "github-psf"
    assert assigner.assign([make_occurrence(url, "!!!")])[url].slug == "github-psf"


def test_malformed_url_uses_clock_fallback(assigner):
    url = "http://[broken"
    link = assigner.assign([make_occurrence(url)])[url]
    assert link.slug.startswith("link-")
    assert link.canonical_url == url


def test_assignment_is_deterministic(assigner):
    occurrences = [
        make_occurrence(SKILLET_URL, "Cast Iron Skillet", network_id="amazon"),
        make_occurrence(DOCS_URL, "the docs"),
        make_occurrence("https://docs.python.org/b", "the docs"),
    ]
    first = assigner.assign(occurrences)
    second = SlugAssigner(minimal_afflink_config()).assign(occurrences)
    assert first == second


def test_resolve_slug_does_not_reserve():
    used = {"docs"}
    assert SlugAssigner.resolve_slug("docs", "https://docs.python.org", used) == "docs-docs"
    assert used == {"docs"}
