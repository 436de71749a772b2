"""Top-level afflink configuration."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError

from ...utils.logger import get_logger
from ..store.StoreConfig import StoreConfig
from .ContentConfig import ContentConfig
from .get_home_dir import get_home_dir
from .NetworkConfig import NetworkConfig
from .TrackingConfig import TrackingConfig

CONFIG_FILENAME = "afflink.json"

logger = get_logger("config")


class AfflinkConfig(BaseModel):
    """Immutable configuration handed to the scanner, assigner, rewriter and store."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    content: ContentConfig = Field(default_factory=ContentConfig)
    site_url: str = Field(default="http://localhost:3000", description="Origin used to tell internal from external links")
    tracking: TrackingConfig = Field(default_factory=TrackingConfig)
    networks: dict[str, NetworkConfig] = Field(default_factory=lambda: {"amazon": NetworkConfig()})
    store: StoreConfig | None = None

    _path: Path | None = PrivateAttr(default=None)

    @property
    def path(self) -> Path | None:
        """Config file this instance was loaded from, None for built-in defaults."""
        return self._path

    @property
    def site_host(self) -> str:
        try:
            return (urlsplit(self.site_url).hostname or "").lower()
        except ValueError:
            return ""

    def network(self, network_id: str) -> NetworkConfig | None:
        return self.networks.get(network_id)

    def is_network_enabled(self, network_id: str) -> bool:
        settings = self.networks.get(network_id)
        return settings is not None and settings.enabled

    def with_include(self, patterns: list[str]) -> "AfflinkConfig":
        """Copy of this config with the content include patterns replaced."""
        return self.model_copy(update={"content": self.content.model_copy(update={"include": list(patterns)})})

    def validate_semantics(self) -> list[str]:
        """Return problems that make the config unusable (empty list when valid)."""
        errors: list[str] = []
        if not self.content.include:
            errors.append("content.include must have at least one pattern")
        if not self.site_url:
            errors.append("site_url is required")
        if not self.tracking.base_path:
            errors.append("tracking.base_path is required")
        return errors

    @classmethod
    def find_config_path(cls, path: str | Path | None = None) -> Path | None:
        """Locate the config file.

        Order: explicit path, ./afflink.json, $AFFLINK_HOME/config.json.

        Raises:
            ValueError: If an explicit path was given but does not exist
        """
        if path is not None:
            explicit = Path(path).expanduser().resolve()
            if not explicit.exists():
                raise ValueError(f"Config file not found: {explicit}")
            return explicit

        for candidate in (Path.cwd() / CONFIG_FILENAME, get_home_dir("config.json")):
            if candidate.exists():
                return candidate
        return None

    @classmethod
    def load(cls, path: str | Path | None = None) -> "AfflinkConfig":
        """Load and validate config from file, or return defaults when none exists.

        Raises:
            ValueError: If config file not found (explicit path), invalid JSON, or validation error
        """
        config_path = cls.find_config_path(path)
        if config_path is None:
            logger.warning("No config file found, using defaults")
            return cls()

        try:
            with config_path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {config_path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {config_path} must contain a JSON object")

        try:
            config = cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

        config._path = config_path
        logger.info("Loaded configuration from %s", config_path)
        return config

    def to_dict(self) -> dict[str, Any]:
        """Convert the config to a dictionary for serialization."""
        return {
            "content": self.content.model_dump(),
            "site_url": self.site_url,
            "tracking": self.tracking.model_dump(),
            "networks": {name: settings.model_dump() for name, settings in self.networks.items()},
            "store": self.store.model_dump() if self.store else None,
        }

    def save(self, path: str | Path) -> Path:
        """Save the configuration to a JSON file.

        Uses atomic write (write to temp file, then rename) to prevent corruption.
        """
        target = Path(path).expanduser()
        temp_path = target.with_suffix(target.suffix + ".tmp")
        try:
            with temp_path.open("w", encoding="utf-8") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(target)
        except Exception as e:
            with suppress(Exception):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
        return target
