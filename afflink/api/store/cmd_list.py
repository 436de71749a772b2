"""List stored link records."""

from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.store import StoreListOutput
from ..StageResult import StageResult
from ._load_store_config import _load_store_config


def cmd_list(config_path: str | Path | None = None) -> StageResult:
    """List every record in the configured store.

    Returns:
        StageResult with the stored records (displayed as table)
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
        """
        from .Store import Store

        yield (0.2, "Loading configuration...")
        try:
            store_config = _load_store_config(config_path)
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = str(e)
            result_obj.output = StoreListOutput(
                errors=[str(e)],
                warnings=[],
                store="",
                count=0,
                links=[],
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.5, f"Querying {store_config.type} store...")
        try:
            with Store(store_config) as store:
                links = store.list()
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to list links: {e}"
            result_obj.output = StoreListOutput(
                errors=[str(e)],
                warnings=[],
                store=store_config.type,
                count=0,
                links=[],
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(links)} link(s) in {store_config.type} store"
        result_obj.output = StoreListOutput(
            errors=[],
            warnings=[],
            store=store_config.type,
            count=len(links),
            links=[link.to_record() for link in links],
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Listing stored links...",
        progress_callback=do_work,
    )
