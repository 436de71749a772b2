"""Resolve the store configuration for store commands."""

from pathlib import Path

from ..config.AfflinkConfig import AfflinkConfig
from .StoreConfig import StoreConfig


def _load_store_config(config_path: str | Path | None = None) -> StoreConfig:
    """Raises ValueError when the config cannot be loaded or has no store section."""
    config = AfflinkConfig.load(config_path)
    if config.store is None:
        raise ValueError("No store configured. Set store.type in the config file")
    return config.store
