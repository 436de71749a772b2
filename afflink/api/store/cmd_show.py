"""Show one stored link record."""

from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.store import StoreShowOutput
from ..StageResult import StageResult
from ._load_store_config import _load_store_config


def cmd_show(slug: str, config_path: str | Path | None = None) -> StageResult:
    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from .Store import Store

        store_type = ""
        yield (0.2, "Loading configuration...")
        try:
            store_config = _load_store_config(config_path)
            store_type = store_config.type
            yield (0.6, f"Looking up {slug}...")
            with Store(store_config) as store:
                link = store.get_by_slug(slug)
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Lookup failed: {e}"
            result_obj.output = StoreShowOutput(
                errors=[str(e)],
                warnings=[],
                store=store_type,
                slug=slug,
                found=False,
                link={},
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        if link is None:
            result_obj.result = f"No link stored for slug {slug!r}"
            result_obj.output = StoreShowOutput(
                errors=[f"Slug not found: {slug}"],
                warnings=[],
                store=store_type,
                slug=slug,
                found=False,
                link={},
            ).model_dump(mode="python")
            result_obj.success = False
            return

        result_obj.result = f"{slug} -> {link.canonical_url}"
        result_obj.output = StoreShowOutput(
            errors=[],
            warnings=[],
            store=store_type,
            slug=slug,
            found=True,
            link=link.to_record(),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Looking up {slug}...",
        progress_callback=do_work,
    )
