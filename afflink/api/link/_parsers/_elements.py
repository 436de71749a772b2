"""Anchor-like element matching shared by the Markdown and HTML parsers."""

import re
from collections.abc import Iterator

from .LinkRef import LinkRef

# <a ...>, <AffiliateLink ...> (also self-closing)
ELEMENT_PATTERN = re.compile(r"<(a|AffiliateLink)\b([^>]*?)(/?)>", re.IGNORECASE)
ATTR_PATTERN = re.compile(r"""\b(href|url)\s*=\s*(?:"([^"]*)"|'([^']*)'|\{\s*["']([^"']*)["']\s*\})""")
TAG_PATTERN = re.compile(r"<[^>]+>")


def iter_elements(line: str, line_num: int) -> Iterator[LinkRef]:
    for match in ELEMENT_PATTERN.finditer(line):
        name = match.group(1)
        attr = ATTR_PATTERN.search(match.group(2))
        if not attr:
            continue
        url = next(group for group in attr.groups()[1:] if group is not None).strip()
        if not url:
            continue

        alias = ""
        if not match.group(3):
            close = line.find(f"</{name}>", match.end())
            if close != -1:
                alias = TAG_PATTERN.sub("", line[match.end():close]).strip()

        yield LinkRef(
            line_number=line_num,
            column_number=match.start() + 1,
            raw_target=url,
            alias=alias,
            component=name,
        )
