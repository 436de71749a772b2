"""Output schemas for API commands.

Importing this package registers every command schema.
"""

from . import config, link, store  # noqa: F401
from ._registry import get_output_schema

__all__ = ["get_output_schema"]
