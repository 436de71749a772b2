import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(afflink_home: Path | None = None, level: int = logging.INFO) -> None:
    """Configure unified afflink logging.

    Args:
        afflink_home: Path to the afflink home directory. If None, derived from environment.
        level: Level for the ``afflink`` logger.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if afflink_home is None:
        env_home = os.environ.get("AFFLINK_HOME")
        afflink_home = Path(env_home).expanduser().resolve() if env_home else Path.home() / ".afflink"

    root_logger = logging.getLogger("afflink")
    root_logger.setLevel(level)
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    try:
        afflink_home.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            afflink_home / "afflink.log",
            maxBytes=5 * 1024 * 1024,
            backupCount=3,  # 5MB * 3
        )
    except OSError:
        # Read-only home: keep warnings visible on stderr instead
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(logging.WARNING)
        stream_handler.setFormatter(formatter)
        root_logger.addHandler(stream_handler)
    else:
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Ensures logging is configured (lazy init if needed, though explicit config preferred at app entry).
    """
    if not _CONFIGURED:
        configure_logging()

    if name.startswith("afflink."):
        return logging.getLogger(name)
    return logging.getLogger(f"afflink.{name}")
