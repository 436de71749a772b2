"""Content selection configuration."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class ContentConfig(BaseModel):
    """Which documents are scanned for links."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    root: str = Field(default=".", description="Directory the glob patterns are relative to")
    include: list[str] = Field(
        default_factory=lambda: ["**/*.md", "**/*.mdx"],
        description="Glob patterns of documents to scan",
    )
    exclude: list[str] = Field(
        default_factory=lambda: ["**/node_modules/**", "**/dist/**", "**/.git/**"],
        description="Glob patterns of documents to skip",
    )

    @property
    def root_path(self) -> Path:
        return Path(self.root).expanduser().resolve()
