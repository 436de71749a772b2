"""Mock MongoDB store configuration data for testing."""

from pydantic import BaseModel, ConfigDict, Field


class _Data(BaseModel):
    """MongoMock configuration data.

    MongoMock doesn't require a URI since it's an in-memory database.
    """

    database: str = Field(default="afflink", description="Database name")
    collection: str = Field(default="affiliate_links", description="Collection holding the link records")

    model_config = ConfigDict(extra="forbid", frozen=True)
