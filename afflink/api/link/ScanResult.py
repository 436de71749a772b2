"""Result of scanning a content corpus."""

from dataclasses import dataclass, field

from .LinkOccurrence import LinkOccurrence


@dataclass
class ScanResult:
    files: int
    links: list[LinkOccurrence] = field(default_factory=list)

    @property
    def external_links(self) -> list[LinkOccurrence]:
        return [link for link in self.links if link.is_external]

    @property
    def affiliate_links(self) -> list[LinkOccurrence]:
        return [link for link in self.links if link.is_external and link.is_affiliate]

    def by_file(self, links: list[LinkOccurrence] | None = None) -> dict[str, list[LinkOccurrence]]:
        """Group occurrences by source file, preserving encounter order."""
        grouped: dict[str, list[LinkOccurrence]] = {}
        for link in self.links if links is None else links:
            grouped.setdefault(link.source_file, []).append(link)
        return grouped
