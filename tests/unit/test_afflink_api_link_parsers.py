"""Unit tests for afflink.api.link._parsers."""

from pathlib import Path

import pytest

from afflink.api.link._parsers import (
    FallbackParser,
    HTMLParser,
    MarkdownParser,
    RawParser,
    get_parser,
)


def _targets(refs):
    return [ref.raw_target for ref in refs]


class TestMarkdownParser:
    def test_links_with_titles(self):
        refs = list(MarkdownParser().parse('See [A](https://a.test/x "Title") and [B](<https://b.test/y>).'))
        assert _targets(refs) == ["https://a.test/x", "https://b.test/y"]
        assert [ref.alias for ref in refs] == ["A", "B"]

    def test_skips_images_code_and_fences(self):
        text = "\n".join(
            [
                "![img](https://img.test/p.png)",
                "`[code](https://code.test)`",
                "```",
                "[fenced](https://fenced.test)",
                "```",
                "[real](https://real.test)",
            ]
        )
        refs = list(MarkdownParser().parse(text))
        assert _targets(refs) == ["https://real.test"]
        assert refs[0].line_number == 6

    def test_strips_emphasis_from_alias(self):
        (ref,) = MarkdownParser().parse("[**Bold** _pick_](https://a.test)")
        assert ref.alias == "Bold pick"

    def test_linked_image_yields_outer_link(self):
        line = (
            "Get it: [![Skillet](https://m.media-amazon.com/i.jpg)](https://www.amazon.com/dp/B000A6PPOK?tag=x)"
            " or [docs](https://docs.test)"
        )
        refs = list(MarkdownParser().parse(line))
        assert _targets(refs) == ["https://www.amazon.com/dp/B000A6PPOK?tag=x", "https://docs.test"]
        assert refs[0].alias == "Skillet"
        assert refs[0].column_number == 9

    def test_parentheses_in_url(self):
        (ref,) = MarkdownParser().parse("[wiki](https://en.wikipedia.org/wiki/Pan_(cooking))")
        assert ref.raw_target == "https://en.wikipedia.org/wiki/Pan_(cooking)"

    def test_jsx_elements_in_column_order(self):
        line = '<AffiliateLink url={"https://shop.test/p"} /> then [md](https://md.test)'
        refs = list(MarkdownParser().parse(line))
        assert _targets(refs) == ["https://shop.test/p", "https://md.test"]
        assert refs[0].component == "AffiliateLink"
        assert refs[0].column_number == 1


class TestHTMLParser:
    def test_anchor_text_and_fragment_skip(self):
        text = '<p><a class="x" href="https://a.test">A <b>bold</b></a> <a href="#top">top</a></p>'
        refs = list(HTMLParser().parse(text))
        assert _targets(refs) == ["https://a.test"]
        assert refs[0].alias == "A bold"


def test_raw_parser_trims_punctuation():
    refs = list(RawParser().parse("Visit https://a.test/x, then (https://b.test)."))
    assert _targets(refs) == ["https://a.test/x", "https://b.test"]


def test_fallback_parser():
    refs = list(FallbackParser().parse('[a](https://a.test)\nx <a href="https://b.test">b</a>'))
    assert _targets(refs) == ["https://a.test", "https://b.test"]
    assert refs[1].line_number == 2


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("post.md", MarkdownParser),
        ("post.MDX", MarkdownParser),
        ("page.html", HTMLParser),
        ("notes.txt", RawParser),
        ("unknown.rst", MarkdownParser),
    ],
)
def test_get_parser_by_extension(name, expected):
    assert isinstance(get_parser(file_path=Path(name)), expected)


def test_get_parser_unknown_name():
    with pytest.raises(ValueError, match="Unknown parser"):
        get_parser("nope")
