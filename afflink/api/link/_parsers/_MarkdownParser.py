"""Markdown/MDX link parser."""

import re
from collections.abc import Iterator

from ._BaseParser import BaseParser, LinkRef
from ._elements import iter_elements

# Link destination (one level of parentheses allowed inside) and optional title
_DESTINATION = r"\(\s*<?((?:[^()\s<>]|\([^()\s]*\))+)>?(?:\s+(?:\"[^\"]*\"|'[^']*'))?\s*\)"

# [text](url) and [text](url "title")
MARKDOWN_URL_PATTERN = re.compile(r"(!)?\[([^\]]*)\]" + _DESTINATION)
# [![alt](image)](url): the link is the outer target, the image is not a link
LINKED_IMAGE_PATTERN = re.compile(r"\[\s*!\[([^\]]*)\]" + _DESTINATION + r"\s*\]" + _DESTINATION)
FENCE_PATTERN = re.compile(r"^\s*(```|~~~)")
INLINE_CODE_PATTERN = re.compile(r"`[^`]*`")
EMPHASIS_PATTERN = re.compile(r"[*_`]+")


def _blank(match: re.Match) -> str:
    return " " * len(match.group(0))


class MarkdownParser(BaseParser):
    """Parser for Markdown and MDX files.

    Skips fenced code blocks and inline code spans; images are not links,
    and a linked image yields only the outer link.
    """

    def parse(self, text: str) -> Iterator[LinkRef]:
        in_fence: str | None = None
        for line_num, line in enumerate(text.splitlines(), start=1):
            fence = FENCE_PATTERN.match(line)
            if fence:
                marker = fence.group(1)
                if in_fence is None:
                    in_fence = marker
                elif in_fence == marker:
                    in_fence = None
                continue
            if in_fence is not None:
                continue

            # Blank out code spans so offsets stay aligned
            visible = INLINE_CODE_PATTERN.sub(_blank, line)

            refs = list(self._markdown_links(visible, line_num))
            refs.extend(iter_elements(visible, line_num))
            refs.sort(key=lambda ref: ref.column_number)
            yield from refs

    @staticmethod
    def _markdown_links(line: str, line_num: int) -> Iterator[LinkRef]:
        for match in LINKED_IMAGE_PATTERN.finditer(line):
            yield LinkRef(
                line_number=line_num,
                column_number=match.start() + 1,
                raw_target=match.group(3).strip(),
                alias=EMPHASIS_PATTERN.sub("", match.group(1)).strip(),
            )
        remaining = LINKED_IMAGE_PATTERN.sub(_blank, line)

        for match in MARKDOWN_URL_PATTERN.finditer(remaining):
            if match.group(1):
                continue  # image
            alias = EMPHASIS_PATTERN.sub("", match.group(2)).strip()
            yield LinkRef(
                line_number=line_num,
                column_number=match.start() + 1,
                raw_target=match.group(3).strip(),
                alias=alias,
            )
