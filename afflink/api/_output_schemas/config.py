"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command."""
    section: str = Field(..., description="Requested section, empty string lists sections")
    content: dict[str, Any] = Field(..., description="Section content or list of section names")
    config_path: str = Field(..., description="Config file in use, empty when defaults are used")


class ConfigInitOutput(BaseOutputSchema):
    """Output schema for config init command."""
    config_path: str = Field(..., description="Path of the written config file")
    created: bool = Field(..., description="True if the file was written")


register_output_schema("config", "show", ConfigShowOutput)
register_output_schema("config", "init", ConfigInitOutput)
