"""Write a default configuration file."""

from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.config import ConfigInitOutput
from ..StageResult import StageResult
from .AfflinkConfig import CONFIG_FILENAME, AfflinkConfig


def cmd_init(force: bool = False, path: str | Path | None = None) -> StageResult:
    """Write the built-in defaults to ``./afflink.json`` (or ``path``).

    An existing file is left alone unless ``force`` is set.
    """
    target = Path(path).expanduser() if path else Path.cwd() / CONFIG_FILENAME

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Checking for existing config...")
        if target.exists() and not force:
            yield (1.0, "Complete")
            result_obj.result = f"Config already exists at {target} (use --force to overwrite)"
            result_obj.output = ConfigInitOutput(
                errors=[f"Config file already exists: {target}"],
                warnings=[],
                config_path=str(target),
                created=False,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.6, "Writing default config...")
        try:
            AfflinkConfig().save(target)
        except RuntimeError as e:
            yield (1.0, "Complete")
            result_obj.result = str(e)
            result_obj.output = ConfigInitOutput(
                errors=[str(e)],
                warnings=[],
                config_path=str(target),
                created=False,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Created config file: {target}"
        result_obj.output = ConfigInitOutput(
            errors=[],
            warnings=[],
            config_path=str(target),
            created=True,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Initializing configuration...", progress_callback=do_work)
