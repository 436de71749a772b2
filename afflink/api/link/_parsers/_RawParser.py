"""Raw text link parser."""

import re
from collections.abc import Iterator

from ._BaseParser import BaseParser, LinkRef

# Matches http:// or https:// followed by non-whitespace
URL_PATTERN = re.compile(r"(https?://\S+)")


class RawParser(BaseParser):
    """Parser for raw text files."""

    def parse(self, text: str) -> Iterator[LinkRef]:
        for line_num, line in enumerate(text.splitlines(), start=1):
            for match in URL_PATTERN.finditer(line):
                url = match.group(1).rstrip(",.;:)!]")  # Naive cleanup of trailing punctuation

                yield LinkRef(
                    line_number=line_num,
                    column_number=match.start() + 1,
                    raw_target=url,
                )
