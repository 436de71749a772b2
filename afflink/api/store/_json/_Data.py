"""Flat JSON file store configuration data."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class _Data(BaseModel):
    path: str = Field(default="links.json", description="JSON file holding an array of link records")

    model_config = ConfigDict(extra="forbid", frozen=True)

    @property
    def file_path(self) -> Path:
        return Path(self.path).expanduser()
