"""Generate a link report."""

from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.link import LinkReportOutput
from ..StageResult import StageResult
from ._load_config import _load_config


def cmd_report(
    config_path: str | Path | None = None,
    pattern: str | None = None,
    format: str = "json",
    output: str | Path | None = None,
    table: str = "affiliate_links",
    affiliate_only: bool = False,
) -> StageResult:
    """Render the assigned links of the corpus as json, csv, sql or markdown.

    Args:
        config_path: Explicit config file (default: lookup order)
        pattern: Glob replacing the configured include patterns
        format: Report format
        output: File to write the report to (default: return it in the output)
        table: Table name for the SQL format
        affiliate_only: Report only affiliate links instead of all external links
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
        """
        from .LinkScanner import LinkScanner
        from .render_report import render_report
        from .SlugAssigner import SlugAssigner

        def fail(message: str, error: str) -> None:
            result_obj.result = message
            result_obj.output = LinkReportOutput(
                errors=[error],
                warnings=[],
                format=format,
                links=0,
                output_path=str(output) if output else None,
                report="",
            ).model_dump(mode="python")
            result_obj.success = False

        yield (0.1, "Loading configuration...")
        try:
            config = _load_config(config_path, pattern)
            yield (0.3, "Scanning files for links...")
            scan = LinkScanner(config).scan()
            occurrences = scan.affiliate_links if affiliate_only else scan.external_links
            yield (0.6, "Generating report...")
            links = list(SlugAssigner(config).assign(occurrences).values())
            report = render_report(format, links, occurrences, table_name=table)
        except Exception as e:
            yield (1.0, "Complete")
            fail(f"Report failed: {e}", str(e))
            return

        output_path = None
        if output:
            yield (0.9, "Writing report...")
            output_path = Path(output).expanduser()
            try:
                output_path.write_text(report + "\n", encoding="utf-8")
            except OSError as e:
                yield (1.0, "Complete")
                fail(f"Failed to write report: {e}", str(e))
                return

        yield (1.0, "Complete")
        result_obj.result = (
            f"Report written to {output_path}" if output_path else f"Generated {format} report ({len(links)} link(s))"
        )
        result_obj.output = LinkReportOutput(
            errors=[],
            warnings=[],
            format=format,
            links=len(links),
            output_path=str(output_path) if output_path else None,
            report="" if output_path else report,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Generating {format} report...",
        progress_callback=do_work,
    )
