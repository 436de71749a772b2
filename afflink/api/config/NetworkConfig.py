"""Per-network affiliate settings."""

from pydantic import BaseModel, ConfigDict, Field


class NetworkConfig(BaseModel):
    """Settings for one affiliate network."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    enabled: bool = Field(default=True, description="Convert detected links to the canonical tagged form")
    tag: str = Field(default="", description="Affiliate tag written into converted URLs")
    clean_params: bool = Field(default=True, description="Strip known tracking parameters when converting")
