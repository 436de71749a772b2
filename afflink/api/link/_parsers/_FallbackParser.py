"""Permissive pattern scan used when the primary parser fails."""

import re
from collections.abc import Iterator

from ._BaseParser import BaseParser, LinkRef

MD_LINK_PATTERN = re.compile(r"\[([^\]]*)\]\(([^)]+)\)")
HREF_PATTERN = re.compile(r"""href=["']([^"']+)["']""")


class FallbackParser(BaseParser):
    """Line-by-line ``[text](url)`` and ``href="..."`` matcher."""

    def parse(self, text: str) -> Iterator[LinkRef]:
        for line_num, line in enumerate(text.split("\n"), start=1):
            for match in MD_LINK_PATTERN.finditer(line):
                yield LinkRef(
                    line_number=line_num,
                    column_number=match.start() + 1,
                    raw_target=match.group(2),
                    alias=match.group(1),
                )
            for match in HREF_PATTERN.finditer(line):
                yield LinkRef(
                    line_number=line_num,
                    column_number=match.start() + 1,
                    raw_target=match.group(1),
                )
