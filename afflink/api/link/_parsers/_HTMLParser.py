"""HTML link parser."""

from collections.abc import Iterator

from ._BaseParser import BaseParser, LinkRef
from ._elements import iter_elements


class HTMLParser(BaseParser):
    """Parser for HTML files."""

    def parse(self, text: str) -> Iterator[LinkRef]:
        for line_num, line in enumerate(text.splitlines(), start=1):
            for ref in iter_elements(line, line_num):
                if ref.raw_target.startswith("#"):
                    continue
                yield ref
