"""Tests for the backpack site theme."""

from __future__ import annotations

import pytest

from backpack_theme import (
    ColorMode,
    Theme,
    UnknownVariant,
    describe_theme,
    get_site_theme,
)
from backpack_theme.site import SITE_TOKENS


class TestSiteTokens:
    """Tests for the site's semantic tokens."""

    @pytest.mark.parametrize(("name", "default", "dark"), SITE_TOKENS)
    def test_mode_values(self, site_theme: Theme, name, default, dark):
        assert site_theme.resolve(name, ColorMode.LIGHT) == default
        assert site_theme.resolve(name, ColorMode.DARK) == dark

    def test_ink_inverts(self, site_theme: Theme):
        assert site_theme.resolve("ink", "light") == site_theme.resolve("inverseInk", "dark")
        assert site_theme.resolve("ink", "dark") == site_theme.resolve("inverseInk", "light")

    def test_singleton(self):
        assert get_site_theme() is get_site_theme()


class TestSiteComponents:
    """Tests for the site's component styles."""

    def test_button_outline_xl(self, site_theme: Theme):
        style = site_theme.compose("Button", variant="outline", size="xl", mode="light")
        assert style == {
            "h": "60px",
            "minW": 16,
            "fontSize": "md",
            "px": 7,
            "borderWidth": "2px",
            "_hover": {"textDecoration": "none"},
        }

    def test_code_installer_dark(self, site_theme: Theme):
        style = site_theme.compose("Code", variant="installer", mode=ColorMode.DARK)
        assert style["color"] == "white"
        assert style["fontSize"] == 16

    def test_code_installer_light(self, site_theme: Theme):
        style = site_theme.compose("Code", variant="installer", mode=ColorMode.LIGHT)
        assert style["color"] == "black"

    def test_unknown_button_variant(self, site_theme: Theme):
        with pytest.raises(UnknownVariant):
            site_theme.compose("Button", variant="does-not-exist", mode="light")

    def test_clipboard_copy_light(self, site_theme: Theme):
        style = site_theme.compose(
            "Button", variant="clipboard-copy", size="sm", color_scheme="blackAlpha", mode="light"
        )
        assert style == {
            "bg": "text",
            "color": "canvas",
            "_focus": {"shadow": "none"},
            "_hover": {"bg": "blackAlpha.700"},
            "_active": {"bg": "blackAlpha.800"},
        }

    def test_clipboard_copy_dark(self, site_theme: Theme):
        style = site_theme.compose("Button", variant="clipboard-copy", mode="dark")
        assert style["bg"] == "canvas"
        assert style["color"] == "text"
        assert style["_hover"] == {"bg": "whiteAlpha.900"}
        assert style["_active"] == {"bg": "whiteAlpha.800"}

    def test_link_base_style(self, site_theme: Theme):
        style = site_theme.compose("Link")
        assert style["color"] == "brand.500"
        assert style["_focus"] == {"boxShadow": "none"}


class TestGlobalStyles:
    """Tests for global element styles."""

    def test_body_light(self, site_theme: Theme):
        body = site_theme.global_style(ColorMode.LIGHT)["body"]
        assert body["background"] == "canvas"
        assert body["color"] == "text"

    def test_body_dark(self, site_theme: Theme):
        styles = site_theme.global_style(ColorMode.DARK)
        assert styles["body"]["background"] == "transparent"
        assert styles["h1"] == {"letterSpacing": "-0.03em", "color": "whiteAlpha.800"}
        assert styles["svg"] == {"display": "inline"}


class TestDescribeTheme:
    """Tests for describe_theme."""

    def test_summary(self, site_theme: Theme):
        info = describe_theme(site_theme)
        assert info["name"] == "backpack"
        assert info["components"]["Button"] == {
            "sizes": ["xl"],
            "variants": ["clipboard-copy", "outline"],
        }
        assert info["tokens"]["t_text"] == {"default": "text", "dark": "whiteAlpha.800"}
        assert info["foundations"]["colors"]["brand"]["500"] == "#F545A1"
        assert info["global_styles"] == ["body", "h1", "h2", "h3", "svg"]
