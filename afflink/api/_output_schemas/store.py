"""Output schemas for store commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class StoreListOutput(BaseOutputSchema):
    """Output schema for store list command."""
    store: str = Field(..., description="Store backend type")
    count: int = Field(..., description="Number of stored records")
    links: list[dict[str, Any]] = Field(..., description="Stored records")


class StoreShowOutput(BaseOutputSchema):
    """Output schema for store show command."""
    store: str = Field(..., description="Store backend type")
    slug: str = Field(..., description="Requested slug")
    found: bool = Field(..., description="True if a record exists for the slug")
    link: dict[str, Any] = Field(..., description="Stored record, empty dict if not found")


register_output_schema("store", "list", StoreListOutput)
register_output_schema("store", "show", StoreShowOutput)
