"""Unit tests for afflink.api.link.LinkConverter."""

from afflink.api.config.AfflinkConfig import AfflinkConfig
from afflink.api.link.LinkConverter import LinkConverter
from tests.unit.conftest import DOCS_URL, SKILLET_URL, make_occurrence, minimal_afflink_config


def test_converts_enabled_network():
    result = LinkConverter(minimal_afflink_config()).convert(make_occurrence(SKILLET_URL, network_id="amazon"))
    assert result is not None
    assert result.original == SKILLET_URL
    assert result.converted == "https://www.amazon.com/dp/B000A6PPOK?tag=mytag-20"
    assert result.network == "amazon"
    assert result.tag == "mytag-20"
    assert result.to_dict()["converted"] == result.converted


def test_skips_plain_disabled_and_unknown():
    converter = LinkConverter(AfflinkConfig(networks={"amazon": {"enabled": False}}))
    assert converter.convert(make_occurrence(DOCS_URL)) is None
    assert converter.convert(make_occurrence(SKILLET_URL, network_id="amazon")) is None
    assert converter.convert(make_occurrence(SKILLET_URL, network_id="other")) is None


def test_convert_all_drops_none():
    occurrences = [make_occurrence(DOCS_URL), make_occurrence(SKILLET_URL, network_id="amazon")]
    results = LinkConverter(minimal_afflink_config()).convert_all(occurrences)
    assert [result.original for result in results] == [SKILLET_URL]


def test_empty_tag_reports_none():
    result = LinkConverter(AfflinkConfig()).convert(make_occurrence(SKILLET_URL, network_id="amazon"))
    assert result.tag is None
    assert result.converted == "https://www.amazon.com/dp/B000A6PPOK"
