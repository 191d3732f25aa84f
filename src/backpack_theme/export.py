"""
Theme export: CSS custom properties and W3C DTCG tokens.json.

See: https://design-tokens.github.io/community-group/format/
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any

from .theme import Theme
from .tokens import ColorMode, ConcreteValue

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def css_variable_name(token_name: str) -> str:
    """Map a token name to a CSS custom property (``inverseInk`` -> ``--inverse-ink``)."""
    kebab = _CAMEL_BOUNDARY.sub("-", token_name).replace("_", "-").lower()
    return f"--{kebab}"


def generate_css_variables(theme: Theme) -> str:
    """
    Render semantic tokens as CSS custom properties.

    Light values go in ``:root``; tokens with a dark override are repeated
    in a ``[data-theme="dark"]`` block. Tokens without an override inherit
    the ``:root`` value in dark mode. Values naming a palette color are
    written as that color (``text`` -> ``#444``); other values are kept.

    Two token names that map to the same property (``t_text`` and
    ``tText``) are logged as a warning and only the first is written.
    """
    palette = theme.foundations.flat_colors()
    light_lines = []
    dark_lines = []
    seen: dict[str, str] = {}
    for name in theme.tokens.names():
        semantic = theme.tokens.get(name)
        variable = css_variable_name(name)
        if variable in seen:
            logger.warning(
                "Tokens %r and %r both map to %s, skipping %r",
                seen[variable],
                name,
                variable,
                name,
            )
            continue
        seen[variable] = name
        light = semantic.value_for(ColorMode.LIGHT)
        light_lines.append(f"  {variable}: {_css_value(light, palette)};")
        if semantic.dark is not None:
            dark_lines.append(f"  {variable}: {_css_value(semantic.dark, palette)};")

    blocks = [f"/* {theme.name} semantic tokens */", ":root {", *light_lines, "}"]
    if dark_lines:
        blocks.extend(["", '[data-theme="dark"] {', *dark_lines, "}"])
    return "\n".join(blocks) + "\n"


def _css_value(value: ConcreteValue, palette: dict[str, str]) -> ConcreteValue:
    if isinstance(value, str):
        return palette.get(value, value)
    return value


def _dtcg_value(value: ConcreteValue, palette: dict[str, str]) -> ConcreteValue:
    # DTCG alias syntax: {group.token}
    if isinstance(value, str) and value in palette:
        return f"{{palette.{value}}}"
    return value


def generate_dtcg_tokens(theme: Theme) -> dict[str, Any]:
    """Generate W3C DTCG format design tokens from a Theme.

    Groups tokens into: color (semantic tokens, with the dark value under
    ``$extensions.mode.dark``), palette, fontFamily, shadow. Semantic values
    naming a palette color become aliases (``{palette.text}``).

    Args:
        theme: Theme to export.

    Returns:
        DTCG-formatted dict suitable for writing as tokens.json.
    """
    dtcg: dict[str, Any] = {}

    palette = theme.foundations.flat_colors()
    color_group: dict[str, Any] = {}
    for name in theme.tokens.names():
        semantic = theme.tokens.get(name)
        entry: dict[str, Any] = {"$type": "color", "$value": _dtcg_value(semantic.default, palette)}
        if semantic.dark is not None:
            entry["$extensions"] = {"mode": {"dark": _dtcg_value(semantic.dark, palette)}}
        color_group[name] = entry
    dtcg["color"] = color_group

    foundations = theme.foundations
    if foundations.colors:
        palette_group: dict[str, Any] = {}
        for name, value in foundations.colors.items():
            if isinstance(value, dict):
                palette_group[name] = {
                    step: {"$type": "color", "$value": step_value}
                    for step, step_value in value.items()
                }
            else:
                palette_group[name] = {"$type": "color", "$value": value}
        dtcg["palette"] = palette_group

    if foundations.fonts:
        dtcg["fontFamily"] = {
            role: {"$type": "fontFamily", "$value": stack}
            for role, stack in foundations.fonts.items()
        }

    if foundations.shadows:
        dtcg["shadow"] = {
            name: {"$type": "shadow", "$value": value}
            for name, value in foundations.shadows.items()
        }

    return dtcg


def export_dtcg_file(theme: Theme, output_path: Path) -> Path:
    """Generate DTCG tokens and write to a JSON file.

    Args:
        theme: Theme to export.
        output_path: Path to write tokens.json.

    Returns:
        Path to the written file.
    """
    tokens = generate_dtcg_tokens(theme)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(tokens, indent=2),
        encoding="utf-8",
    )

    return output_path


def export_css_file(theme: Theme, output_path: Path) -> Path:
    """Write the CSS custom properties for a theme and return the path."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(generate_css_variables(theme), encoding="utf-8")
    return output_path
