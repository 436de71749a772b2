"""Per-document outcome of the rewrite pass."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class LinkChange:
    original_url: str
    slug: str
    tracking_url: str


@dataclass
class TransformResult:
    file: str
    original_content: str
    rewritten_content: str
    changes: list[LinkChange] = field(default_factory=list)

    @property
    def change_count(self) -> int:
        return len(self.changes)

    def to_dict(self) -> dict[str, Any]:
        """Summary without the document bodies."""
        return {
            "file": self.file,
            "change_count": self.change_count,
            "changes": [
                {"original_url": c.original_url, "slug": c.slug, "tracking_url": c.tracking_url}
                for c in self.changes
            ],
        }
