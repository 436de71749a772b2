"""REST table store configuration data."""

import os

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Data(BaseModel):
    url: str = Field(..., description="Base URL of the REST service, e.g. https://project.supabase.co")
    service_key: str = Field(..., description="Service key sent as apikey and bearer token")
    table: str = Field(default="affiliate_links", description="Table holding the link records")
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("url", "service_key")
    @classmethod
    def expand_env(cls, v: str) -> str:
        expanded = os.path.expandvars(v).strip()
        if not expanded or expanded.startswith("$"):
            raise ValueError(f"value is empty or references an unset environment variable: {v!r}")
        return expanded

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not (v.startswith("http://") or v.startswith("https://")):
            raise ValueError(f"store.data.url must start with 'http://' or 'https://' (found: {v!r})")
        return v.rstrip("/")
