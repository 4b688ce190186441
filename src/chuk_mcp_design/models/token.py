"""
Token models - the normalized unit of design data.

A token is a flat, typed record addressed by a dot-delimited path.
Its CSS and SCSS variable names are derived from (category, path) and
are never stored independently.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, computed_field

from chuk_mcp_design.constants import TokenCategory
from chuk_mcp_design.core import path_to_css_variable, path_to_scss_variable


class TokenProperty(BaseModel):
    """A named sub-value of a composite token (e.g. a shadow's blur)."""

    property: str = Field(description="Sub-property name")
    value: str = Field(description="Raw sub-property value")
    value_number: float | None = Field(default=None)
    value_unit: str | None = Field(default=None)

    model_config = {"frozen": True}


class Token(BaseModel):
    """A normalized design token."""

    category: TokenCategory = Field(description="Token category")
    subcategory: str | None = Field(
        default=None,
        description="Free-form grouping (e.g. 'gutter', 'font-size')",
    )
    name: str = Field(description="Hyphenated identifier")
    path: str = Field(
        min_length=1,
        description="Dot-delimited canonical address (e.g. 'color.primary-01.500')",
    )
    value_raw: str = Field(description="Original textual value, verbatim")
    value_number: float | None = Field(default=None)
    value_unit: str | None = Field(default=None)
    value_computed: str | None = Field(
        default=None,
        description="Derived representation (e.g. magic units in pixels)",
    )
    description: str | None = Field(default=None)
    platform: str = Field(default="all")
    source_file: str | None = Field(default=None)
    properties: tuple[TokenProperty, ...] = Field(
        default=(),
        description="Ordered sub-values for composite tokens",
    )

    model_config = {"frozen": True}

    @computed_field  # type: ignore[prop-decorator]
    @property
    def css_variable(self) -> str:
        """CSS custom property name."""
        return path_to_css_variable(self.category.value, self.path)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def scss_variable(self) -> str:
        """SCSS variable name."""
        return path_to_scss_variable(self.category.value, self.path)
