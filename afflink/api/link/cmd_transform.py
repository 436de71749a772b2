"""Rewrite external links in content files to tracking URLs."""

from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.link import LinkTransformOutput
from ..StageResult import StageResult
from ._load_config import _load_config


def cmd_transform(
    config_path: str | Path | None = None,
    pattern: str | None = None,
    dry_run: bool = False,
) -> StageResult:
    """Assign slugs across the corpus and rewrite every file that changes.

    Args:
        config_path: Explicit config file (default: lookup order)
        pattern: Glob replacing the configured include patterns
        dry_run: Compute the changes without writing any file

    Returns:
        StageResult whose output lists per-file changes. When a write fails,
        files written before it are counted in ``files_written``.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
        """
        from .ContentRewriter import ContentRewriter
        from .LinkScanner import LinkScanner
        from .SlugAssigner import SlugAssigner

        yield (0.1, "Loading configuration...")
        try:
            config = _load_config(config_path, pattern)
            yield (0.2, "Scanning files for links...")
            scan = LinkScanner(config).scan()
            yield (0.4, "Generating link map...")
            assigner = SlugAssigner(config)
            link_map = assigner.assign(scan.external_links)
            yield (0.6, "Transforming content files...")
            rewriter = ContentRewriter(config.tracking, assigner)
            results = rewriter.transform_files(scan.by_file(scan.external_links), link_map)
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Transform failed: {e}"
            result_obj.output = LinkTransformOutput(
                errors=[str(e)],
                warnings=[],
                dry_run=dry_run,
                files_transformed=0,
                files_written=0,
                total_changes=0,
                results=[],
            ).model_dump(mode="python")
            result_obj.success = False
            return

        total_changes = sum(result.change_count for result in results)
        errors: list[str] = []
        files_written = 0
        if not dry_run:
            for index, result in enumerate(results):
                yield (0.6 + 0.4 * index / max(len(results), 1), f"Writing {result.file}...")
                try:
                    files_written += ContentRewriter.apply([result])
                except OSError as e:
                    errors.append(f"Failed to write {result.file}: {e}")
                    break

        yield (1.0, "Complete")
        if errors:
            result_obj.result = f"Transform stopped after writing {files_written} of {len(results)} file(s)"
        elif dry_run:
            result_obj.result = f"Would transform {len(results)} file(s), {total_changes} link(s) (dry run)"
        else:
            result_obj.result = f"Transformed {files_written} file(s), {total_changes} link(s)"
        result_obj.output = LinkTransformOutput(
            errors=errors,
            warnings=[],
            dry_run=dry_run,
            files_transformed=len(results),
            files_written=files_written,
            total_changes=total_changes,
            results=[result.to_dict() for result in results],
        ).model_dump(mode="python")
        result_obj.success = not errors

    return StageResult(
        announce="Transforming links..." + (" (dry run)" if dry_run else ""),
        progress_callback=do_work,
    )
