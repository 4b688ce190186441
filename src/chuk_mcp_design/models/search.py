"""
Search result models - immutable projections of index rows.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class SearchResult(BaseModel):
    """A documentation page matching a search."""

    title: str
    path: str
    snippet: str = Field(default="", description="Highlighted excerpt")
    category: str | None = Field(default=None)

    model_config = {"frozen": True}


class Documentation(BaseModel):
    """A documentation page as stored in the index."""

    title: str
    path: str
    content: str
    category: str | None = Field(default=None)
    keywords: tuple[str, ...] = Field(default=())

    model_config = {"frozen": True}


class IconMatch(BaseModel):
    """A single icon at a single size."""

    name: str = Field(description="Export name including size (e.g. 'Cart24')")
    icon_name: str = Field(description="Base icon name without size (e.g. 'Cart')")
    type: str = Field(default="unknown", description="Icon family (navigation, media...)")
    size: int = Field(default=16, description="Size in pixels")
    view_box: str = Field(default="0 0 16 16")
    paths: str = Field(default="[]", description="Serialized path elements")

    model_config = {"frozen": True}


class IconGroup(BaseModel):
    """Matching icons collapsed by base name."""

    icon_name: str
    type: str
    available_sizes: tuple[int, ...] = Field(
        default=(),
        description="Distinct sizes, ascending",
    )

    model_config = {"frozen": True}

    @property
    def smallest_name(self) -> str:
        """Export name of the smallest available size."""
        return f"{self.icon_name}{self.available_sizes[0]}" if self.available_sizes else self.icon_name
