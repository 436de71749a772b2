"""Sync assigned links to the configured store."""

from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.link import LinkSyncOutput
from ..StageResult import StageResult
from ._load_config import _load_config


def cmd_sync(
    config_path: str | Path | None = None,
    pattern: str | None = None,
    dry_run: bool = False,
) -> StageResult:
    """Assign slugs across the corpus and upsert every record to the store.

    Args:
        config_path: Explicit config file (default: lookup order)
        pattern: Glob replacing the configured include patterns
        dry_run: Compare against the store without writing to it
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
        """
        from ..store.Store import Store
        from .LinkScanner import LinkScanner
        from .reconcile import reconcile
        from .SlugAssigner import SlugAssigner

        store_type = ""

        def fail(message: str, error: str) -> None:
            result_obj.result = message
            result_obj.output = LinkSyncOutput(
                errors=[error],
                warnings=[],
                store=store_type,
                dry_run=dry_run,
                total_links=0,
                new_links=0,
                updated_links=0,
                existing_links=0,
                new_slugs=[],
                links=[],
            ).model_dump(mode="python")
            result_obj.success = False

        yield (0.1, "Loading configuration...")
        try:
            config = _load_config(config_path, pattern)
        except Exception as e:
            yield (1.0, "Complete")
            fail(f"Sync failed: {e}", str(e))
            return

        if config.store is None:
            yield (1.0, "Complete")
            fail("Sync failed: no store configured", "No store configured. Set store.type in the config file")
            return
        store_type = config.store.type

        try:
            yield (0.2, "Scanning files for links...")
            scan = LinkScanner(config).scan()
            yield (0.4, "Generating link map...")
            link_map = SlugAssigner(config).assign(scan.external_links)
            with Store(config.store) as store:
                yield (0.6, f"Fetching existing links from {store_type}...")
                plan = reconcile(link_map, store.list())
                if not dry_run:
                    yield (0.8, f"Syncing {len(plan.links)} link(s) to {store_type}...")
                    store.upsert(plan.links)
        except Exception as e:
            yield (1.0, "Complete")
            fail(f"Sync failed: {e}", str(e))
            return

        yield (1.0, "Complete")
        if dry_run:
            result_obj.result = (
                f"Would sync {len(plan.links)} link(s) to {store_type}: "
                f"{len(plan.new_links)} new, {len(plan.updated_links)} updated (dry run)"
            )
        else:
            result_obj.result = (
                f"Synced {len(plan.links)} link(s) to {store_type}: "
                f"{len(plan.new_links)} new, {len(plan.updated_links)} updated"
            )
        result_obj.output = LinkSyncOutput(
            errors=[],
            warnings=[],
            store=store_type,
            dry_run=dry_run,
            total_links=len(plan.links),
            new_links=len(plan.new_links),
            updated_links=len(plan.updated_links),
            existing_links=plan.existing_count,
            new_slugs=[link.slug for link in plan.new_links],
            links=[link.to_record() for link in plan.links] if dry_run else [],
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Syncing links..." + (" (dry run)" if dry_run else ""),
        progress_callback=do_work,
    )
