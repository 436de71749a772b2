"""Tracking URL configuration."""

from pydantic import BaseModel, ConfigDict, Field


class TrackingConfig(BaseModel):
    """Tracking redirect settings."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    base_path: str = Field(default="/link/", description="Prefix joined with a slug to form a tracking URL")

    def tracking_url(self, slug: str) -> str:
        return f"{self.base_path}{slug}"
