"""Scan content files for links."""

from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.link import LinkScanOutput
from ..StageResult import StageResult
from ._load_config import _load_config


def cmd_scan(
    config_path: str | Path | None = None,
    pattern: str | None = None,
    affiliate_only: bool = False,
) -> StageResult:
    """Scan the content corpus and report the links found.

    Args:
        config_path: Explicit config file (default: lookup order)
        pattern: Glob replacing the configured include patterns
        affiliate_only: List only affiliate links instead of all external links

    Returns:
        StageResult with counts and the selected occurrences
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
        """
        from .LinkScanner import LinkScanner

        yield (0.1, "Loading configuration...")
        try:
            config = _load_config(config_path, pattern)
            yield (0.3, "Scanning files for links...")
            scan = LinkScanner(config).scan()
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Scan failed: {e}"
            result_obj.output = LinkScanOutput(
                errors=[str(e)],
                warnings=[],
                files=0,
                total_links=0,
                external_links=0,
                affiliate_links=0,
                links=[],
            ).model_dump(mode="python")
            result_obj.success = False
            return

        selected = scan.affiliate_links if affiliate_only else scan.external_links

        yield (1.0, "Complete")
        result_obj.result = (
            f"Scanned {scan.files} file(s): {len(scan.links)} link(s), "
            f"{len(scan.external_links)} external, {len(scan.affiliate_links)} affiliate"
        )
        result_obj.output = LinkScanOutput(
            errors=[],
            warnings=[] if scan.files else ["No content files matched the include patterns"],
            files=scan.files,
            total_links=len(scan.links),
            external_links=len(scan.external_links),
            affiliate_links=len(scan.affiliate_links),
            links=[link.to_dict() for link in selected],
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Scanning content for links...",
        progress_callback=do_work,
    )
