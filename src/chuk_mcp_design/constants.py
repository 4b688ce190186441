"""
Constants and enums for the design system index.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Literal


class TokenCategory(str, Enum):
    """Normalized token categories."""

    COLOR = "color"
    SPACING = "spacing"
    SHADOW = "shadow"
    BORDER = "border"
    RADIUS = "radius"
    SCREEN = "screen"
    TYPOGRAPHY = "typography"
    GRID = "grid"


# Base spacing unit: 1 magic unit = 1rem = 16px
MAGIC_UNIT_PX = 16

# Magic unit spacing series (name, multiplier)
SPACING_MULTIPLIERS: tuple[tuple[str, float], ...] = (
    ("mu025", 0.25),
    ("mu050", 0.5),
    ("mu075", 0.75),
    ("mu100", 1),
    ("mu125", 1.25),
    ("mu150", 1.5),
    ("mu175", 1.75),
    ("mu200", 2),
    ("mu250", 2.5),
    ("mu300", 3),
    ("mu350", 3.5),
    ("mu400", 4),
    ("mu500", 5),
    ("mu600", 6),
    ("mu700", 7),
    ("mu800", 8),
    ("mu900", 9),
    ("mu1000", 10),
)

# Shadow sub-properties, in output order
SHADOW_PROPERTIES: tuple[str, ...] = ("x", "y", "blur", "spread", "opacity")

# Icon sizes tried when an icon name is given without a size suffix
ICON_SIZES: tuple[int, ...] = (16, 24, 32, 48, 64)

# Maximum cleaned snippet length before the ellipsis
SNIPPET_MAX_LENGTH = 200

DEFAULT_DOCS_LIMIT = 5
DEFAULT_ICONS_LIMIT = 20
DEFAULT_TOKENS_LIMIT = 20

# Public category names accepted by the token tools
CATEGORY_ALIASES: dict[str, tuple[TokenCategory, ...]] = {
    "colors": (TokenCategory.COLOR,),
    "typography": (TokenCategory.TYPOGRAPHY,),
    "spacing": (TokenCategory.SPACING,),
    "shadows": (TokenCategory.SHADOW,),
    "borders": (TokenCategory.BORDER, TokenCategory.RADIUS),
    "screens": (TokenCategory.SCREEN,),
    "grid": (TokenCategory.GRID,),
}

TokenFormat = Literal["json", "css", "scss", "js"]


class ErrorMessages:
    """Standardized error messages."""

    EMPTY_QUERY = "Please provide a search query."
    EMPTY_ICON_NAME = "Please provide an icon name."
    UNKNOWN_CATEGORY = "Unknown token category: '{category}'. Expected one of: {expected}."
    UNKNOWN_FORMAT = "Unknown format: '{format}'. Expected one of: {expected}."
    STORE_NOT_FOUND = "Design index not found at {path}. Run 'chuk-mcp-design-index' first."
    EMPTY_COMPONENT = "Please provide a component name."
    EMPTY_UTILITY_NAME = "Please provide a CSS utility name."
    UNKNOWN_FRAMEWORK = "Unknown framework: '{framework}'. Expected one of: {expected}."
    UNKNOWN_PACKAGE_MANAGER = (
        "Unknown package manager: '{manager}'. Expected one of: {expected}."
    )


class NotFoundMessages:
    """Standardized messages for lookups that matched nothing."""

    NO_TOKENS = "No tokens found for category: {category}"
    NO_TOKEN = "No token found at path: {path}"
    NO_DOCS = (
        'No documentation found for: "{query}". Try different keywords '
        "or a shorter query."
    )
    NO_ICONS = 'No icons found for "{query}". Try a different search term.'
    NO_ICON = 'Icon "{name}" not found.'
    NO_TOKEN_MATCHES = 'No tokens matched "{query}".'
    NO_COMPONENTS = "No components found."
    NO_COMPONENTS_IN_CATEGORY = "No components found in category: {category}"
    NO_COMPONENT = (
        'Component "{name}" not found. Use design_list_components to see available components.'
    )
    NO_UTILITIES = "No CSS utilities found."
    NO_UTILITIES_IN_CATEGORY = "No CSS utilities found for category: {category}"
    NO_UTILITY = (
        'CSS utility "{name}" not found. '
        "Use design_list_css_utilities to see available utilities."
    )


# Published design system packages and site, used in generated snippets
DOCS_BASE_URL = "https://mozaic.adeo.cloud"
ICONS_PACKAGE = "@mozaic-ds/icons/js/icons"
REACT_PACKAGE = "@mozaic-ds/react"
VUE_PACKAGE = "@mozaic-ds/vue-3"
STYLES_PACKAGE = "@mozaic-ds/styles"
ICONS_ROOT_PACKAGE = "@mozaic-ds/icons"

# Frameworks with their component package and peer dependencies
FRAMEWORK_PACKAGES: dict[str, tuple[str, tuple[str, ...]]] = {
    "vue": (VUE_PACKAGE, ("vue@^3.0",)),
    "react": (REACT_PACKAGE, ("react@^17 || ^18", "react-dom@^17 || ^18")),
}

# Frameworks component examples can be requested for
EXAMPLE_FRAMEWORKS: tuple[str, ...] = ("vue", "react", "html")

# Package manager -> add command
PACKAGE_MANAGERS: dict[str, str] = {
    "npm": "npm install",
    "yarn": "yarn add",
    "pnpm": "pnpm add",
}

DEFAULT_SUGGESTIONS_LIMIT = 5
