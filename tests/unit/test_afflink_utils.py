"""Unit tests for afflink.utils helpers."""

import logging

from afflink.utils.clock_token import clock_token
from afflink.utils.logger import get_logger
from afflink.utils.normalize_slug import normalize_slug
from afflink.utils.render_template import render_template
from afflink.utils.url_parts import bare_host, first_path_segment, host_label, is_http_url


class TestNormalizeSlug:
    def test_basic(self):
        assert normalize_slug("Cast Iron Skillet") == "cast-iron-skillet"

    def test_accents_and_punctuation(self):
        assert normalize_slug("  Café Crème!  ") == "cafe-creme"

    def test_truncates_without_trailing_dash(self):
        slug = normalize_slug("a" * 49 + " bcdef")
        assert slug == "a" * 49
        assert len(normalize_slug("word " * 30)) <= 50
        assert not normalize_slug("word " * 30).endswith("-")

    def test_ampersand_spelled_out(self):
        assert normalize_slug("Salt & Pepper") == "salt-and-pepper"

    def test_empty(self):
        assert normalize_slug("") == ""
        assert normalize_slug("!!!") == ""


class TestUrlParts:
    def test_is_http_url(self):
        assert is_http_url("https://x.com")
        assert is_http_url("HTTP://x.com")
        assert not is_http_url("ftp://x.com")
        assert not is_http_url("/about")
        assert not is_http_url("")

    def test_bare_host(self):
        assert bare_host("https://WWW.Amazon.co.uk/x") == "amazon.co.uk"
        assert bare_host("/relative") is None
        assert bare_host("http://[invalid") is None

    def test_host_label(self):
        assert host_label("https://www.amazon.co.uk/x") == "amazon"
        assert host_label("https://docs.python.org/3/") == "docs"
        assert host_label("not a url") is None

    def test_first_path_segment(self):
        assert first_path_segment("https://github.com/psf/requests") == "psf"
        assert first_path_segment("https://github.com/") == ""


def test_clock_token_is_base36():
    token = clock_token()
    assert token
    assert set(token) <= set("0123456789abcdefghijklmnopqrstuvwxyz")
    assert int(token, 36) > 0


def test_render_template_trims_blocks():
    out = render_template("{% for x in items %}\n- {{ x }}\n{% endfor %}\n", {"items": [1, 2]})
    assert out == "- 1\n- 2\n"


def test_get_logger_namespacing():
    assert get_logger("link.scanner").name == "afflink.link.scanner"
    assert get_logger("afflink.store").name == "afflink.store"
    assert isinstance(get_logger("x"), logging.Logger)
