"""
Component tools - MCP tools for components, CSS utilities and installation.

Components are the Vue/React building blocks; CSS utilities (Flexy,
Margin, Padding...) are class-only and need no framework package.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_design.constants import (
    DEFAULT_SUGGESTIONS_LIMIT,
    EXAMPLE_FRAMEWORKS,
    FRAMEWORK_PACKAGES,
    PACKAGE_MANAGERS,
    ErrorMessages,
    NotFoundMessages,
)
from chuk_mcp_design.formatters import component_to_dict, install_info, utility_to_dict
from chuk_mcp_design.store import DesignStore

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)

ALL = "all"


def _unknown(message: str, **fields: str) -> str:
    return json.dumps({"status": "error", "message": message.format(**fields)})


def register_component_tools(mcp: ChukMCPServer, store: DesignStore) -> dict[str, Any]:
    """
    Register component, CSS utility and install tools with the MCP server.

    Args:
        mcp: The MCP server instance
        store: The design index

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def design_list_components(category: str = ALL) -> str:
        """
        List Vue/React components, optionally in one category.

        CSS-only utilities (Flexy, Container, Margin, Padding) are not
        components; use design_list_css_utilities for those.

        Args:
            category: 'form', 'navigation', 'feedback', 'layout',
                'data-display', 'action' or 'all'

        Returns:
            JSON string with components, grouped by category for 'all'

        Example:
            design_list_components(category="form")
        """
        try:
            components = store.list_components(None if category == ALL else category)
            if not components:
                message = (
                    NotFoundMessages.NO_COMPONENTS
                    if category == ALL
                    else NotFoundMessages.NO_COMPONENTS_IN_CATEGORY.format(category=category)
                )
                return json.dumps(
                    {
                        "status": "success",
                        "category": category,
                        "total": 0,
                        "components": [],
                        "message": message,
                    }
                )

            grouped: dict[str, list[dict[str, Any]]] = {}
            for c in components:
                grouped.setdefault(c.category or "other", []).append(
                    {"name": c.name, "slug": c.slug, "description": c.description}
                )

            return json.dumps(
                {
                    "status": "success",
                    "category": category,
                    "total": len(components),
                    "categories": list(grouped),
                    "components": grouped,
                }
            )
        except Exception as e:
            logger.exception("Failed to list components")
            return json.dumps({"status": "error", "message": str(e)})

    tools["design_list_components"] = design_list_components

    @mcp.tool  # type: ignore[arg-type]
    async def design_get_component(component: str, framework: str = "vue") -> str:
        """
        Get a component's props, slots, events and code examples.

        Args:
            component: Component name or slug (e.g., 'button', 'MButton', 'text-input')
            framework: Framework for the examples: 'vue', 'react' or 'html'

        Returns:
            JSON string with the component API

        Example:
            design_get_component(component="MButton", framework="react")
        """
        try:
            if not component or not component.strip():
                return json.dumps({"status": "error", "message": ErrorMessages.EMPTY_COMPONENT})
            if framework not in EXAMPLE_FRAMEWORKS:
                return _unknown(
                    ErrorMessages.UNKNOWN_FRAMEWORK,
                    framework=framework,
                    expected=", ".join(EXAMPLE_FRAMEWORKS),
                )

            found = store.get_component(component)
            if found is None:
                similar = store.find_components_like(component, DEFAULT_SUGGESTIONS_LIMIT)
                return json.dumps(
                    {
                        "status": "success",
                        "component": None,
                        "message": NotFoundMessages.NO_COMPONENT.format(name=component),
                        "suggestions": [c.slug for c in similar],
                    }
                )

            return json.dumps(
                {"status": "success", "component": component_to_dict(found, framework)}
            )
        except Exception as e:
            logger.exception("Failed to get component")
            return json.dumps({"status": "error", "message": str(e)})

    tools["design_get_component"] = design_get_component

    @mcp.tool  # type: ignore[arg-type]
    async def design_list_css_utilities(category: str = ALL) -> str:
        """
        List CSS-only utilities, optionally in one category.

        Args:
            category: 'layout' (Flexy, Container), 'utility' (Margin, Padding...) or 'all'

        Returns:
            JSON string with utility names and class counts

        Example:
            design_list_css_utilities(category="layout")
        """
        try:
            utilities = store.list_css_utilities(None if category == ALL else category)
            if not utilities:
                message = (
                    NotFoundMessages.NO_UTILITIES
                    if category == ALL
                    else NotFoundMessages.NO_UTILITIES_IN_CATEGORY.format(category=category)
                )
                return json.dumps(
                    {
                        "status": "success",
                        "category": category,
                        "total": 0,
                        "utilities": [],
                        "message": message,
                    }
                )

            return json.dumps(
                {
                    "status": "success",
                    "category": category,
                    "total": len(utilities),
                    "utilities": [
                        {
                            "name": u.name,
                            "slug": u.slug,
                            "category": u.category,
                            "description": u.description,
                            "classCount": len(u.classes),
                        }
                        for u in utilities
                    ],
                }
            )
        except Exception as e:
            logger.exception("Failed to list CSS utilities")
            return json.dumps({"status": "error", "message": str(e)})

    tools["design_list_css_utilities"] = design_list_css_utilities

    @mcp.tool  # type: ignore[arg-type]
    async def design_get_css_utility(name: str, include_classes: bool = True) -> str:
        """
        Get the class names and examples of a CSS utility.

        Args:
            name: Utility name (e.g., 'flexy', 'margin', 'container')
            include_classes: Include every class name in the response

        Returns:
            JSON string with the utility's classes and examples

        Example:
            design_get_css_utility(name="flexy")
        """
        try:
            if not name or not name.strip():
                return json.dumps({"status": "error", "message": ErrorMessages.EMPTY_UTILITY_NAME})

            utility = store.get_css_utility(name)
            if utility is None:
                return json.dumps(
                    {
                        "status": "success",
                        "utility": None,
                        "message": NotFoundMessages.NO_UTILITY.format(name=name),
                        "available": [u.name for u in store.list_css_utilities()],
                    }
                )

            return json.dumps(
                {"status": "success", "utility": utility_to_dict(utility, include_classes)}
            )
        except Exception as e:
            logger.exception("Failed to get CSS utility")
            return json.dumps({"status": "error", "message": str(e)})

    tools["design_get_css_utility"] = design_get_css_utility

    @mcp.tool  # type: ignore[arg-type]
    async def design_get_install_info(
        component: str, framework: str = "vue", package_manager: str = "npm"
    ) -> str:
        """
        Get install commands, imports and quick start code for a component.

        Args:
            component: Component name or slug (e.g., 'button', 'text-input')
            framework: 'vue' or 'react'
            package_manager: 'npm', 'yarn' or 'pnpm'

        Returns:
            JSON string with package, install command, imports, peer
            dependencies and quick start snippets

        Example:
            design_get_install_info(component="button", framework="react", package_manager="pnpm")
        """
        try:
            if not component or not component.strip():
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.EMPTY_COMPONENT,
                        "availableComponents": [
                            c.slug for c in store.list_components()[:10]
                        ],
                    }
                )
            if framework not in FRAMEWORK_PACKAGES:
                return _unknown(
                    ErrorMessages.UNKNOWN_FRAMEWORK,
                    framework=framework,
                    expected=", ".join(FRAMEWORK_PACKAGES),
                )
            if package_manager not in PACKAGE_MANAGERS:
                return _unknown(
                    ErrorMessages.UNKNOWN_PACKAGE_MANAGER,
                    manager=package_manager,
                    expected=", ".join(PACKAGE_MANAGERS),
                )

            found = store.get_component(component)
            if found is None:
                similar = store.find_components_like(component, DEFAULT_SUGGESTIONS_LIMIT)
                return json.dumps(
                    {
                        "status": "success",
                        "install": None,
                        "message": NotFoundMessages.NO_COMPONENT.format(name=component),
                        "suggestions": [c.slug for c in similar],
                    }
                )

            return json.dumps(
                {"status": "success", "install": install_info(found, framework, package_manager)}
            )
        except Exception as e:
            logger.exception("Failed to get install info")
            return json.dumps({"status": "error", "message": str(e)})

    tools["design_get_install_info"] = design_get_install_info

    return tools
