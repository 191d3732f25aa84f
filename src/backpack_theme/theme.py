"""
Theme aggregate.

A Theme bundles everything the site builds once at startup: the semantic
token table, the component registry, foundation scales (fonts, palette
colors, sizes, shadows) and global element styles.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .tokens import ColorMode, ConcreteValue, TokenTable, describe, resolve_token
from .variants import (
    ComponentRegistry,
    ResolvedStyle,
    StyleFragment,
    compose_style,
    freeze_fragment,
    resolve_refs,
)

logger = logging.getLogger(__name__)


class Foundations(BaseModel):
    """
    Foundation scales referenced by token and style values.

    Values are opaque to resolution. Colors may be flat (``"canvas"``) or
    scales (``"brand": {"500": "#F545A1"}``).

    Example:
        Foundations(
            fonts={"heading": "'Jost', sans-serif"},
            colors={"charcoal": "#111", "brand": {"500": "#F545A1"}},
            sizes={"max": "100%", "container": {"xl2": "1440px"}},
            shadows={"outline": "0 0 0 3px #FB309Aca"},
        )
    """

    model_config = ConfigDict(frozen=True)

    fonts: dict[str, str] = Field(default_factory=dict, description="Font stacks by role")
    colors: dict[str, str | dict[str, str]] = Field(
        default_factory=dict, description="Palette colors (name -> value or scale)"
    )
    sizes: dict[str, str | dict[str, str]] = Field(
        default_factory=dict, description="Size tokens (name -> value or group)"
    )
    shadows: dict[str, str] = Field(default_factory=dict, description="Box shadows")

    def flat_colors(self) -> dict[str, str]:
        """Flatten color scales to dotted names (``brand.500``)."""
        flat: dict[str, str] = {}
        for name, value in self.colors.items():
            if isinstance(value, dict):
                for step, step_value in value.items():
                    flat[f"{name}.{step}"] = step_value
            else:
                flat[name] = value
        return flat


@dataclass(frozen=True)
class Theme:
    """Read-only theme built once per process."""

    name: str
    tokens: TokenTable
    components: ComponentRegistry
    foundations: Foundations = field(default_factory=Foundations)
    global_styles: Mapping[str, StyleFragment] = field(default_factory=dict)

    def __post_init__(self) -> None:
        styles = {selector: freeze_fragment(rule) for selector, rule in self.global_styles.items()}
        object.__setattr__(self, "global_styles", MappingProxyType(styles))
        logger.debug(
            "Built theme %s: %d tokens, %d components",
            self.name,
            len(self.tokens),
            len(self.components),
        )

    def resolve(self, name: str, mode: ColorMode | str = ColorMode.LIGHT) -> ConcreteValue:
        """Resolve a semantic token against this theme's table."""
        return resolve_token(self.tokens, name, mode)

    def compose(
        self,
        component: str,
        variant: str | None = None,
        size: str | None = None,
        color_scheme: str | None = None,
        mode: ColorMode | str = ColorMode.LIGHT,
    ) -> ResolvedStyle:
        """Compose a component style; see :func:`compose_style`."""
        return compose_style(
            self.components,
            self.tokens,
            component,
            variant=variant,
            size=size,
            color_scheme=color_scheme,
            mode=mode,
        )

    def global_style(self, mode: ColorMode | str = ColorMode.LIGHT) -> dict[str, ResolvedStyle]:
        """Resolve the global element styles (``body``, ``h1``, ...) for a mode."""
        return {
            selector: resolve_refs(rule, self.tokens, mode)
            for selector, rule in self.global_styles.items()
        }


def describe_theme(theme: Theme) -> dict[str, Any]:
    """Summarize a theme for diagnostics and tests."""
    return {
        "name": theme.name,
        "tokens": describe(theme.tokens),
        "components": {
            name: {
                "sizes": sorted(theme.components.get(name).sizes),
                "variants": sorted(theme.components.get(name).variants),
            }
            for name in theme.components.names()
        },
        "global_styles": sorted(theme.global_styles),
        "foundations": theme.foundations.model_dump(),
    }
