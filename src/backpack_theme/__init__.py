"""
backpack-theme - semantic design tokens and component style variants.

Usage:
    from backpack_theme import ColorMode, get_site_theme

    theme = get_site_theme()
    theme.resolve("t_text", ColorMode.DARK)
    theme.compose("Button", variant="outline", size="xl")
"""

from ._version import get_version
from .errors import (
    ConfigError,
    DuplicateComponent,
    DuplicateToken,
    ThemeError,
    ThemeFileError,
    UnknownComponent,
    UnknownToken,
    UnknownVariant,
)
from .loader import load_theme, theme_from_data
from .site import build_site_theme, get_site_theme
from .theme import Foundations, Theme, describe_theme
from .tokens import ColorMode, SemanticToken, TokenTable, describe, resolve_token
from .variants import (
    ComponentRegistry,
    ComponentStyle,
    TokenRef,
    compose_style,
    merge_fragments,
    mode_value,
    token,
)

__version__ = get_version()

__all__ = [
    "__version__",
    # Tokens
    "ColorMode",
    "SemanticToken",
    "TokenTable",
    "resolve_token",
    "describe",
    # Variants
    "ComponentStyle",
    "ComponentRegistry",
    "TokenRef",
    "token",
    "mode_value",
    "merge_fragments",
    "compose_style",
    # Theme
    "Theme",
    "Foundations",
    "describe_theme",
    "build_site_theme",
    "get_site_theme",
    "load_theme",
    "theme_from_data",
    # Errors
    "ThemeError",
    "DuplicateToken",
    "UnknownToken",
    "UnknownVariant",
    "UnknownComponent",
    "DuplicateComponent",
    "ThemeFileError",
    "ConfigError",
]
