"""
YAML theme files.

Builds a :class:`Theme` from a YAML document:

    name: docs
    foundations:
      colors: {canvas: "#fff"}
    tokens:
      t_text: {default: text, dark: whiteAlpha.800}
    global_styles:
      body: {color: {token: t_text}}
    components:
      Button:
        sizes:
          xl: {h: 60px}
        variants:
          outline: {borderWidth: 2px}
          solid:
            bg: {mode: {light: black, dark: white}}

``{token: NAME}`` is a semantic-token reference. ``{mode: {light, dark}}``
is a mode-dependent value and is only allowed inside variants; a variant
that contains one becomes a variant function. Any other mapping is a nested
pseudo-state block.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ThemeFileError
from .theme import Foundations, Theme
from .tokens import ColorMode, ConcreteValue, SemanticToken, TokenTable
from .variants import (
    ComponentRegistry,
    ComponentStyle,
    StyleFragment,
    TokenRef,
    VariantFn,
    mode_value,
)

logger = logging.getLogger(__name__)


# =============================================================================
# File schema
# =============================================================================


class TokenValues(BaseModel):
    """Token entry in mapping form (name is the key)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    default: ConcreteValue
    dark: ConcreteValue | None = None


class ComponentFile(BaseModel):
    """Component entry of a theme file."""

    model_config = ConfigDict(extra="forbid")

    base_style: dict[str, Any] = Field(default_factory=dict)
    sizes: dict[str, dict[str, Any]] = Field(default_factory=dict)
    variants: dict[str, dict[str, Any]] = Field(default_factory=dict)


class ThemeFile(BaseModel):
    """Top-level structure of a theme file."""

    model_config = ConfigDict(extra="forbid")

    name: str = "custom"
    foundations: Foundations = Field(default_factory=Foundations)
    tokens: dict[str, TokenValues] | list[SemanticToken] = Field(default_factory=dict)
    global_styles: dict[str, dict[str, Any]] = Field(default_factory=dict)
    components: dict[str, ComponentFile] = Field(default_factory=dict)


# =============================================================================
# Value conversion
# =============================================================================


@dataclass(frozen=True)
class _ModeSwitch:
    light: Any
    dark: Any


def _convert(value: Any, where: str, in_mode: bool = False) -> Any:
    if not isinstance(value, Mapping):
        return value
    if set(value) == {"token"}:
        return TokenRef(str(value["token"]))
    if set(value) == {"mode"}:
        if in_mode:
            raise ThemeFileError(f"{where}: 'mode' cannot be nested")
        branches = value["mode"]
        if not isinstance(branches, Mapping) or set(branches) != {"light", "dark"}:
            raise ThemeFileError(f"{where}: 'mode' needs exactly 'light' and 'dark' keys")
        return _ModeSwitch(
            _convert(branches["light"], f"{where}.light", in_mode=True),
            _convert(branches["dark"], f"{where}.dark", in_mode=True),
        )
    return {str(key): _convert(item, f"{where}.{key}", in_mode) for key, item in value.items()}


def _has_switch(fragment: Mapping[str, Any]) -> bool:
    for value in fragment.values():
        if isinstance(value, _ModeSwitch):
            return True
        if isinstance(value, Mapping) and _has_switch(value):
            return True
    return False


def _static_fragment(raw: Mapping[str, Any], where: str) -> StyleFragment:
    fragment = _convert(raw, where)
    if _has_switch(fragment):
        raise ThemeFileError(f"{where}: mode-dependent values are only allowed in variants")
    return fragment


def _apply_switches(fragment: Mapping[str, Any], mode: ColorMode) -> dict[str, Any]:
    applied: dict[str, Any] = {}
    for key, value in fragment.items():
        if isinstance(value, _ModeSwitch):
            applied[key] = mode_value(value.light, value.dark)(mode)
        elif isinstance(value, Mapping):
            applied[key] = _apply_switches(value, mode)
        else:
            applied[key] = value
    return applied


def _variant(raw: Mapping[str, Any], where: str) -> StyleFragment | VariantFn:
    fragment = _convert(raw, where)
    if not _has_switch(fragment):
        return fragment

    def variant_fn(mode: ColorMode, color_scheme: str | None) -> StyleFragment:
        return _apply_switches(fragment, mode)

    return variant_fn


def _stringify_keys(value: Any) -> Any:
    # YAML turns keys like 500 into ints
    if isinstance(value, Mapping):
        return {str(key): _stringify_keys(item) for key, item in value.items()}
    return value


# =============================================================================
# Loading
# =============================================================================


def theme_from_data(data: Mapping[str, Any]) -> Theme:
    """
    Build a Theme from already-parsed theme data.

    Raises:
        ThemeFileError: If the data does not match the theme file schema.
        DuplicateToken: If the token list repeats a name.
    """
    data = _stringify_keys(data)
    try:
        parsed = ThemeFile.model_validate(data)
    except ValidationError as e:
        raise ThemeFileError(f"Invalid theme definition: {e}") from e

    if isinstance(parsed.tokens, list):
        tokens = TokenTable.build(parsed.tokens)
    else:
        tokens = TokenTable.build(
            SemanticToken(name=name, default=values.default, dark=values.dark)
            for name, values in parsed.tokens.items()
        )

    styles = []
    for name, component in parsed.components.items():
        where = f"components.{name}"
        styles.append(
            ComponentStyle(
                name=name,
                base_style=_static_fragment(component.base_style, f"{where}.base_style"),
                sizes={
                    size: _static_fragment(raw, f"{where}.sizes.{size}")
                    for size, raw in component.sizes.items()
                },
                variants={
                    variant: _variant(raw, f"{where}.variants.{variant}")
                    for variant, raw in component.variants.items()
                },
            )
        )

    global_styles = {
        selector: _static_fragment(rule, f"global_styles.{selector}")
        for selector, rule in parsed.global_styles.items()
    }

    return Theme(
        name=parsed.name,
        tokens=tokens,
        components=ComponentRegistry.build(styles),
        foundations=parsed.foundations,
        global_styles=global_styles,
    )


def load_theme(path: Path) -> Theme:
    """
    Load a Theme from a YAML file.

    Raises:
        ThemeFileError: If the file is missing, is not valid YAML, or does
            not match the theme file schema.
    """
    if not path.exists():
        raise ThemeFileError(f"Theme file not found: {path}")

    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except (OSError, yaml.YAMLError) as e:
        raise ThemeFileError(f"Could not read theme file {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ThemeFileError(f"Theme file {path} must contain a mapping at the top level")

    logger.debug("Loading theme from %s", path)
    return theme_from_data(data)
