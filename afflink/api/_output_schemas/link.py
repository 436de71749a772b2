"""Output schemas for link commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LinkScanOutput(BaseOutputSchema):
    """Output schema for link scan command."""
    files: int = Field(..., description="Number of content files scanned")
    total_links: int = Field(..., description="Number of link occurrences found")
    external_links: int = Field(..., description="Number of external link occurrences")
    affiliate_links: int = Field(..., description="Number of affiliate link occurrences")
    links: list[dict[str, Any]] = Field(..., description="Occurrences selected for display")


class LinkConvertOutput(BaseOutputSchema):
    """Output schema for link convert command."""
    converted: int = Field(..., description="Number of converted links")
    conversions: list[dict[str, Any]] = Field(..., description="Original/converted URL pairs")


class LinkReportOutput(BaseOutputSchema):
    """Output schema for link report command."""
    format: str = Field(..., description="Report format")
    links: int = Field(..., description="Number of distinct links in the report")
    output_path: str | None = Field(..., description="File the report was written to, null for stdout")
    report: str = Field(..., description="Rendered report, empty when written to a file")


class LinkTransformOutput(BaseOutputSchema):
    """Output schema for link transform command."""
    dry_run: bool = Field(..., description="True if no files were written")
    files_transformed: int = Field(..., description="Number of files with at least one change")
    files_written: int = Field(..., description="Number of files written to disk")
    total_changes: int = Field(..., description="Number of rewritten links across all files")
    results: list[dict[str, Any]] = Field(..., description="Per-file change lists")


class LinkSyncOutput(BaseOutputSchema):
    """Output schema for link sync command."""
    store: str = Field(..., description="Store backend type")
    dry_run: bool = Field(..., description="True if nothing was written to the store")
    total_links: int = Field(..., description="Number of assigned links")
    new_links: int = Field(..., description="Links whose slug is not yet stored")
    updated_links: int = Field(..., description="Links whose slug is already stored")
    existing_links: int = Field(..., description="Records in the store before syncing")
    new_slugs: list[str] = Field(..., description="Slugs of new links")
    links: list[dict[str, Any]] = Field(..., description="Assigned records, populated on dry run")


register_output_schema("link", "scan", LinkScanOutput)
register_output_schema("link", "convert", LinkConvertOutput)
register_output_schema("link", "report", LinkReportOutput)
register_output_schema("link", "transform", LinkTransformOutput)
register_output_schema("link", "sync", LinkSyncOutput)
