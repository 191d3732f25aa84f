"""Shared fixtures for theme tests."""

from __future__ import annotations

from typing import Any

import pytest

from backpack_theme import (
    ColorMode,
    ComponentRegistry,
    ComponentStyle,
    Theme,
    TokenTable,
    build_site_theme,
    mode_value,
    token,
)


@pytest.fixture
def site_theme() -> Theme:
    """Return a freshly built site theme."""
    return build_site_theme()


@pytest.fixture
def table() -> TokenTable:
    """Return a small token table with and without dark overrides."""
    return TokenTable.build(
        [
            ("fg", "#111", "#eee"),
            ("bg", "#fff", "#000"),
            ("accent", "pink"),
        ]
    )


@pytest.fixture
def registry() -> ComponentRegistry:
    """Return a registry whose fragments all set the same keys."""

    def scheme_variant(mode: ColorMode, color_scheme: str | None) -> dict[str, Any]:
        return {
            "color": f"{color_scheme or 'gray'}.500",
            "bg": mode_value(token("bg"), token("fg"))(mode),
        }

    return ComponentRegistry.build(
        [
            ComponentStyle(
                name="Box",
                base_style={
                    "color": "base",
                    "padding": 1,
                    "bg": token("bg"),
                    "_hover": {"color": "base-hover", "cursor": "pointer"},
                },
                sizes={
                    "lg": {"color": "size", "padding": 4, "_hover": {"color": "size-hover"}},
                },
                variants={
                    "filled": {"color": "variant", "padding": 8, "bg": token("accent")},
                    "schemed": scheme_variant,
                },
            ),
        ]
    )
