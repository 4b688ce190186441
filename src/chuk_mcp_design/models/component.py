"""
Component and CSS utility models.

Records arrive from JSON/YAML files written by the component docs
extractor, so camelCase keys (defaultValue, cssClasses) are accepted as
aliases. The slug defaults to one derived from the name.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

from chuk_mcp_design.core import component_slug


def _with_slug(data: Any) -> Any:
    if isinstance(data, dict) and not data.get("slug") and isinstance(data.get("name"), str):
        return {**data, "slug": component_slug(data["name"])}
    return data


class ComponentProp(BaseModel):
    """A component property."""

    name: str
    type: str | None = Field(default=None)
    default_value: str | None = Field(default=None, alias="defaultValue")
    required: bool = Field(default=False)
    options: tuple[str, ...] = Field(default=(), description="Allowed values, if enumerated")
    description: str | None = Field(default=None)

    model_config = {"frozen": True, "populate_by_name": True}


class ComponentSlot(BaseModel):
    """A named content slot."""

    name: str
    description: str | None = Field(default=None)

    model_config = {"frozen": True}


class ComponentEvent(BaseModel):
    """An event a component emits."""

    name: str
    payload: str | None = Field(default=None)
    description: str | None = Field(default=None)

    model_config = {"frozen": True}


class CodeExample(BaseModel):
    """A usage example, optionally tied to one framework."""

    code: str
    title: str | None = Field(default=None)
    framework: str | None = Field(default=None, description="vue, react or html")
    description: str | None = Field(default=None)

    model_config = {"frozen": True}


class Component(BaseModel):
    """A Vue/React component with its API surface."""

    name: str = Field(min_length=1, description="Component name (e.g. 'MButton')")
    slug: str = Field(min_length=1, description="Lookup key (e.g. 'button', 'text-input')")
    category: str | None = Field(default=None, description="form, navigation, feedback...")
    description: str | None = Field(default=None)
    frameworks: tuple[str, ...] = Field(default=())
    props: tuple[ComponentProp, ...] = Field(default=())
    slots: tuple[ComponentSlot, ...] = Field(default=())
    events: tuple[ComponentEvent, ...] = Field(default=())
    examples: tuple[CodeExample, ...] = Field(default=())
    css_classes: tuple[str, ...] = Field(default=(), alias="cssClasses")

    model_config = {"frozen": True, "populate_by_name": True}

    @model_validator(mode="before")
    @classmethod
    def default_slug(cls, data: Any) -> Any:
        return _with_slug(data)


class CssUtility(BaseModel):
    """A CSS-only utility (Flexy, Margin...) and its class names."""

    name: str = Field(min_length=1)
    slug: str = Field(min_length=1)
    category: str = Field(default="utility", description="'layout' or 'utility'")
    description: str | None = Field(default=None)
    classes: tuple[str, ...] = Field(default=())
    examples: tuple[CodeExample, ...] = Field(default=())

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def default_slug(cls, data: Any) -> Any:
        return _with_slug(data)
