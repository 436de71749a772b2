"""Config loading shared by link commands."""

from pathlib import Path

from ..config.AfflinkConfig import AfflinkConfig


def _load_config(config_path: str | Path | None = None, pattern: str | None = None) -> AfflinkConfig:
    """Load config, replacing the include globs with ``pattern`` when given.

    Raises:
        ValueError: If the config is missing, malformed or unusable
    """
    config = AfflinkConfig.load(config_path)
    if pattern:
        config = config.with_include([pattern])
    problems = config.validate_semantics()
    if problems:
        raise ValueError("Invalid configuration: " + "; ".join(problems))
    return config
