"""Convert affiliate links to their canonical tagged form."""

from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.link import LinkConvertOutput
from ..StageResult import StageResult
from ._load_config import _load_config


def cmd_convert(
    config_path: str | Path | None = None,
    pattern: str | None = None,
    network: str | None = None,
) -> StageResult:
    """Preview conversions of detected affiliate links; no file is changed.

    Args:
        config_path: Explicit config file (default: lookup order)
        pattern: Glob replacing the configured include patterns
        network: Only convert links detected as this network
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from .LinkConverter import LinkConverter
        from .LinkScanner import LinkScanner

        yield (0.1, "Loading configuration...")
        try:
            config = _load_config(config_path, pattern)
            yield (0.3, "Scanning for affiliate links...")
            scan = LinkScanner(config).scan()
            candidates = scan.affiliate_links
            if network:
                candidates = [link for link in candidates if link.network_id == network]
            yield (0.7, "Converting links...")
            conversions = LinkConverter(config).convert_all(candidates)
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Convert failed: {e}"
            result_obj.output = LinkConvertOutput(
                errors=[str(e)],
                warnings=[],
                converted=0,
                conversions=[],
            ).model_dump(mode="python")
            result_obj.success = False
            return

        warnings: list[str] = []
        if network and network not in config.networks:
            warnings.append(f"Network {network!r} is not configured")

        yield (1.0, "Complete")
        result_obj.result = f"Converted {len(conversions)} link(s)"
        result_obj.output = LinkConvertOutput(
            errors=[],
            warnings=warnings,
            converted=len(conversions),
            conversions=[conversion.to_dict() for conversion in conversions],
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Converting affiliate links...",
        progress_callback=do_work,
    )
