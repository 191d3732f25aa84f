"""
The backpack documentation site theme.

Token defaults and dark overrides name palette colors (``text``,
``whiteAlpha.800``); those names are passed through to the renderer as-is.
"""

from __future__ import annotations

from functools import lru_cache

from .theme import Foundations, Theme
from .tokens import ColorMode, TokenTable
from .variants import ComponentRegistry, ComponentStyle, StyleFragment, mode_value, token

# (name, default, dark)
SITE_TOKENS: list[tuple[str, str, str]] = [
    ("t_border_color", "blackAlpha.50", "whiteAlpha.300"),
    ("t_strong", "textDarker", "whiteAlpha.900"),
    ("t_text_docs", "textDocs", "whiteAlpha.800"),
    ("t_text", "text", "whiteAlpha.800"),
    ("t_weak", "textLighter", "whiteAlpha.800"),
    ("t_weakest", "textLightest", "whiteAlpha.800"),
    ("t_background", "canvas", "transparent"),
    ("t_background_docs", "canvas", "charcoal"),
    ("t_background_article", "white", "charcoal"),
    ("ink", "text", "canvas"),
    ("inverseInk", "canvas", "text"),
]

SITE_FOUNDATIONS = Foundations(
    fonts={
        "heading": "'Jost', sans-serif",
        "body": "'Inter var', sans-serif",
    },
    colors={
        "brand": {
            "50": "#FFF0F0",
            "100": "#FBB1D8",
            "200": "#FA99CC",
            "300": "#F87CBD",
            "400": "#F655A9",
            "500": "#F545A1",
            "600": "#F3208E",
            "700": "#DF0C7A",
            "800": "#C20A6A",
            "900": "#A5095A",
        },
        "charcoal": "#111",
        "canvas": "#ffffff",
        "outline": "blue",
        "text": "#444",
        "textLighter": "#555",
        "textLightest": "#666",
        "textDarker": "#222",
        "textDocs": "#555",
    },
    sizes={
        "max": "100%",
        "container": {"xl2": "1440px"},
    },
    shadows={
        "outline": "0 0 0 3px #FB309Aca",
    },
)

SITE_GLOBAL_STYLES: dict[str, StyleFragment] = {
    "body": {
        "fontFeatureSettings": '"cv02", "cv03", "cv04", "cv11"',
        "background": token("t_background"),
        "color": token("t_text"),
    },
    "h1": {"letterSpacing": "-0.03em", "color": token("t_text")},
    "h2": {"letterSpacing": "-0.03em", "color": token("t_text")},
    "h3": {"letterSpacing": "-0.02em", "color": token("t_text")},
    "svg": {"display": "inline"},
}


def _code_installer(mode: ColorMode, color_scheme: str | None) -> StyleFragment:
    return {
        "border": "none",
        "background": "none",
        "color": mode_value("black", "white")(mode),
        "fontSize": 16,
    }


def _button_clipboard_copy(mode: ColorMode, color_scheme: str | None) -> StyleFragment:
    return {
        "bg": token("ink"),
        "color": token("inverseInk"),
        "_focus": {"shadow": "none"},
        "_hover": {"bg": mode_value("blackAlpha.700", "whiteAlpha.900")(mode)},
        "_active": {"bg": mode_value("blackAlpha.800", "whiteAlpha.800")(mode)},
    }


SITE_COMPONENTS: list[ComponentStyle] = [
    ComponentStyle(
        name="Link",
        base_style={
            "color": "brand.500",
            "transition": "color 200ms",
            "_hover": {"color": "brand.500"},
            "_focus": {"boxShadow": "none"},
        },
    ),
    ComponentStyle(
        name="Code",
        variants={"installer": _code_installer},
    ),
    ComponentStyle(
        name="Button",
        sizes={
            "xl": {"h": "60px", "minW": 16, "fontSize": "md", "px": 7},
        },
        variants={
            "outline": {
                "borderWidth": "2px",
                "_hover": {"textDecoration": "none"},
            },
            "clipboard-copy": _button_clipboard_copy,
        },
    ),
]


def build_site_theme() -> Theme:
    """Build a fresh copy of the site theme."""
    return Theme(
        name="backpack",
        tokens=TokenTable.build(SITE_TOKENS),
        components=ComponentRegistry.build(SITE_COMPONENTS),
        foundations=SITE_FOUNDATIONS,
        global_styles=SITE_GLOBAL_STYLES,
    )


@lru_cache(maxsize=1)
def get_site_theme() -> Theme:
    """Return the process-wide site theme, building it on first use."""
    return build_site_theme()
