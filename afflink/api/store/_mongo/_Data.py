"""MongoDB store configuration data."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Data(BaseModel):
    uri: str = Field(..., description="MongoDB connection URI (required).")
    database: str = Field(default="afflink", description="Database name")
    collection: str = Field(default="affiliate_links", description="Collection holding the link records")

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("uri")
    @classmethod
    def validate_uri(cls, v: str) -> str:
        if not (v.startswith("mongodb://") or v.startswith("mongodb+srv://")):
            raise ValueError(f"store.data.uri must start with 'mongodb://' (found: {v!r})")
        return v
