"""Extraction adapter: finds content files and the links inside them."""

from pathlib import Path, PurePosixPath

from ...utils.logger import get_logger
from ..config.AfflinkConfig import AfflinkConfig
from ..network.NetworkRegistry import NetworkRegistry, default_registry
from ._parsers import FallbackParser, LinkRef, get_parser
from .is_external import is_external
from .LinkOccurrence import LinkOccurrence
from .matches_glob import matches_glob
from .ScanResult import ScanResult

logger = get_logger("link.scanner")

AFFILIATE_COMPONENT = "affiliatelink"


class LinkScanner:
    """Produce ordered LinkOccurrence lists for the configured corpus."""

    def __init__(self, config: AfflinkConfig, networks: NetworkRegistry | None = None):
        self.config = config
        self.networks = networks if networks is not None else default_registry()
        self._site_host = config.site_host

    def find_files(self) -> list[Path]:
        """Files under the content root matching an include glob and no exclude glob."""
        root = self.config.content.root_path
        found: set[Path] = set()
        for pattern in self.config.content.include:
            for candidate in root.glob(pattern):
                if not candidate.is_file():
                    continue
                rel_path = PurePosixPath(candidate.relative_to(root).as_posix())
                if matches_glob(self.config.content.exclude, rel_path):
                    continue
                found.add(candidate)
        return sorted(found)

    def scan(self) -> ScanResult:
        files = self.find_files()
        links: list[LinkOccurrence] = []
        for file_path in files:
            links.extend(self.scan_file(file_path))
        logger.info("Scanned %d files, found %d links", len(files), len(links))
        return ScanResult(files=len(files), links=links)

    def scan_file(self, file_path: Path) -> list[LinkOccurrence]:
        """Extract link occurrences from one document.

        Never raises for a malformed document: if the primary parser fails,
        a permissive pattern scan is used instead.
        """
        text = file_path.read_text(encoding="utf-8", errors="replace")
        try:
            refs = list(get_parser(file_path=file_path).parse(text))
        except Exception as e:
            logger.warning("Parser failed for %s, falling back to pattern scan: %s", file_path, e)
            refs = list(FallbackParser().parse(text))
        return [self._to_occurrence(ref, str(file_path)) for ref in refs]

    def _to_occurrence(self, ref: LinkRef, source_file: str) -> LinkOccurrence:
        url = ref.raw_target
        network_id = self.networks.detect(url)
        return LinkOccurrence(
            url=url,
            display_text=ref.alias or url,
            source_file=source_file,
            line=ref.line_number,
            column=ref.column_number,
            is_external=is_external(url, self._site_host),
            network_id=network_id,
            is_affiliate=network_id is not None or ref.component.lower() == AFFILIATE_COMPONENT,
        )
