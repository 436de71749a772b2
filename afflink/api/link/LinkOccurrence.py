"""One observed reference to a URL inside a document."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class LinkOccurrence:
    url: str
    display_text: str
    source_file: str
    line: int
    column: int
    is_external: bool = False
    network_id: str | None = None
    is_affiliate: bool = False

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
