"""Content rewrite engine.

Replaces ``](<url>)`` link targets with tracking URLs, working from the end
of the document toward the start so unprocessed occurrences keep their
positions. Computing a rewrite never touches the filesystem; ``apply`` is
the only write step.
"""

from collections.abc import Iterable, Mapping
from pathlib import Path

from ...utils.logger import get_logger
from ...utils.url_parts import is_http_url
from ..config.TrackingConfig import TrackingConfig
from .AffiliateLink import AffiliateLink
from .LinkOccurrence import LinkOccurrence
from .SlugAssigner import SlugAssigner
from .TransformResult import LinkChange, TransformResult

logger = get_logger("link.rewrite")


class ContentRewriter:
    def __init__(self, tracking: TrackingConfig, assigner: SlugAssigner):
        self.tracking = tracking
        self.assigner = assigner

    def rewrite(
        self,
        file: str,
        content: str,
        occurrences: Iterable[LinkOccurrence],
        link_map: Mapping[str, AffiliateLink],
    ) -> TransformResult:
        """Rewrite one document's external links to tracking URLs.

        Every ``](<url>)`` of a rewritten URL is replaced across the whole
        document, including image targets and fenced code examples that the
        parser does not report as links.
        """
        ordered = sorted(occurrences, key=lambda o: (o.line, o.column), reverse=True)

        used_slugs = {link.slug for link in link_map.values()}
        ad_hoc: dict[str, str] = {}
        rewritten = content
        changes: list[LinkChange] = []

        for occurrence in ordered:
            url = occurrence.url
            if not occurrence.is_external or not is_http_url(url):
                continue

            slug = self._slug_for(occurrence, link_map, used_slugs, ad_hoc)
            tracking_url = self.tracking.tracking_url(slug)

            needle = f"]({url})"
            if needle not in rewritten:
                # Already replaced, or not in ](url) form (e.g. an HTML attribute)
                continue
            rewritten = rewritten.replace(needle, f"]({tracking_url})")
            changes.append(LinkChange(original_url=url, slug=slug, tracking_url=tracking_url))

        return TransformResult(file=file, original_content=content, rewritten_content=rewritten, changes=changes)

    def _slug_for(
        self,
        occurrence: LinkOccurrence,
        link_map: Mapping[str, AffiliateLink],
        used_slugs: set[str],
        ad_hoc: dict[str, str],
    ) -> str:
        existing = link_map.get(occurrence.url)
        if existing is not None:
            return existing.slug
        if occurrence.url in ad_hoc:
            return ad_hoc[occurrence.url]

        # Not part of the corpus-wide assignment; keep it clear of assigned slugs
        slug = self.assigner.resolve_slug(self.assigner.base_slug(occurrence), occurrence.url, used_slugs)
        used_slugs.add(slug)
        ad_hoc[occurrence.url] = slug
        logger.debug("Ad-hoc slug %s for unmapped URL %s", slug, occurrence.url)
        return slug

    def transform_file(
        self,
        file_path: str | Path,
        occurrences: Iterable[LinkOccurrence],
        link_map: Mapping[str, AffiliateLink],
    ) -> TransformResult:
        # newline="" keeps CRLF documents intact; surrogateescape carries stray non-UTF-8 bytes through
        with open(file_path, encoding="utf-8", errors="surrogateescape", newline="") as fh:
            content = fh.read()
        return self.rewrite(str(file_path), content, occurrences, link_map)

    def transform_files(
        self,
        file_occurrences: Mapping[str, list[LinkOccurrence]],
        link_map: Mapping[str, AffiliateLink],
    ) -> list[TransformResult]:
        """Rewrite every file; files without changes are left out of the result."""
        results: list[TransformResult] = []
        for file_path, occurrences in file_occurrences.items():
            result = self.transform_file(file_path, occurrences, link_map)
            if result.change_count > 0:
                results.append(result)
        return results

    @staticmethod
    def apply(results: Iterable[TransformResult]) -> int:
        """Write rewritten content to disk.

        The first failing write propagates; files written before it stay written.

        Returns:
            Number of files written
        """
        written = 0
        for result in results:
            with open(result.file, "w", encoding="utf-8", errors="surrogateescape", newline="") as fh:
                fh.write(result.rewritten_content)
            written += 1
            logger.info("Rewrote %s (%d links)", result.file, result.change_count)
        return written
