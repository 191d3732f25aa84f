"""
Component style variants.

A component style has a base style, optional size fragments and named
variants. A variant is either a static fragment or a function of
``(mode, color_scheme)`` returning a fragment, for values that depend on the
color mode or on the caller's accent palette.

Composition merges base -> size -> variant (last applied wins) and only then
replaces every ``TokenRef`` with its concrete value for the requested mode.
Merging goes two levels deep: top-level properties, then the keys of nested
pseudo-state blocks such as ``_hover``. Anything deeper is replaced whole.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, TypeVar

from .errors import DuplicateComponent, UnknownComponent, UnknownVariant
from .tokens import ColorMode, TokenTable, resolve_token

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class TokenRef:
    """Reference to a semantic token inside a style rule."""

    name: str

    def __str__(self) -> str:
        return f"token({self.name})"


def token(name: str) -> TokenRef:
    """Shorthand for ``TokenRef(name)``."""
    return TokenRef(name)


StyleFragment = Mapping[str, Any]
ResolvedStyle = dict[str, Any]
VariantFn = Callable[[ColorMode, str | None], StyleFragment]


def freeze_fragment(fragment: StyleFragment) -> StyleFragment:
    """Read-only copy of a fragment, pseudo-state blocks included."""
    return MappingProxyType(
        {
            key: MappingProxyType(dict(value)) if isinstance(value, Mapping) else value
            for key, value in fragment.items()
        }
    )


def mode_value(light: T, dark: T) -> Callable[[ColorMode | str], T]:
    """
    Pick a value by color mode.

    Example:
        def installer(mode, color_scheme):
            return {"color": mode_value("black", "white")(mode)}
    """

    def pick(mode: ColorMode | str) -> T:
        return dark if ColorMode(mode) is ColorMode.DARK else light

    return pick


@dataclass(frozen=True)
class ComponentStyle:
    """
    Style definition for one component.

    Example:
        ComponentStyle(
            name="Button",
            sizes={"xl": {"h": "60px"}},
            variants={
                "outline": {"borderWidth": "2px"},
                "ghost": lambda mode, scheme: {"bg": mode_value("white", "black")(mode)},
            },
        )
    """

    name: str
    base_style: StyleFragment = field(default_factory=dict)
    sizes: Mapping[str, StyleFragment] = field(default_factory=dict)
    variants: Mapping[str, StyleFragment | VariantFn] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_style", freeze_fragment(self.base_style))
        sizes = {size: freeze_fragment(fragment) for size, fragment in self.sizes.items()}
        object.__setattr__(self, "sizes", MappingProxyType(sizes))
        variants = {
            variant: spec if callable(spec) else freeze_fragment(spec)
            for variant, spec in self.variants.items()
        }
        object.__setattr__(self, "variants", MappingProxyType(variants))

    def size_fragment(self, size: str) -> StyleFragment | None:
        return self.sizes.get(size)

    def variant_fragment(
        self,
        variant: str,
        mode: ColorMode,
        color_scheme: str | None = None,
    ) -> StyleFragment:
        """
        Return the fragment for a variant, calling it if it is a function.

        Raises:
            UnknownVariant: If the variant is not registered.
        """
        try:
            spec = self.variants[variant]
        except KeyError:
            raise UnknownVariant(self.name, variant) from None
        if callable(spec):
            fragment = spec(mode, color_scheme)
            if not isinstance(fragment, Mapping):
                raise TypeError(
                    f"Variant {variant!r} of {self.name!r} returned "
                    f"{type(fragment).__name__}, expected a mapping"
                )
            return fragment
        return spec


class ComponentRegistry:
    """Immutable set of component styles keyed by component name."""

    __slots__ = ("_components",)

    def __init__(self, components: Mapping[str, ComponentStyle]):
        self._components: Mapping[str, ComponentStyle] = MappingProxyType(dict(components))

    @classmethod
    def build(cls, styles: Iterable[ComponentStyle]) -> ComponentRegistry:
        """
        Build a registry from component styles.

        Raises:
            DuplicateComponent: If two styles share a name.
        """
        components: dict[str, ComponentStyle] = {}
        for style in styles:
            if style.name in components:
                raise DuplicateComponent(style.name)
            components[style.name] = style
        return cls(components)

    def get(self, component: str) -> ComponentStyle:
        try:
            return self._components[component]
        except KeyError:
            raise UnknownComponent(component) from None

    def names(self) -> list[str]:
        return sorted(self._components)

    def __contains__(self, component: object) -> bool:
        return component in self._components

    def __iter__(self) -> Iterator[str]:
        return iter(self._components)

    def __len__(self) -> int:
        return len(self._components)


def merge_fragments(*fragments: StyleFragment) -> dict[str, Any]:
    """
    Merge style fragments left to right; later keys win.

    When both the current and the incoming value of a key are mappings
    (pseudo-state blocks), their keys are merged with the same rule.
    """
    merged: dict[str, Any] = {}
    for fragment in fragments:
        for key, value in fragment.items():
            current = merged.get(key)
            if isinstance(current, Mapping) and isinstance(value, Mapping):
                block = dict(current)
                block.update(value)
                merged[key] = block
            elif isinstance(value, Mapping):
                merged[key] = dict(value)
            else:
                merged[key] = value
    return merged


def resolve_refs(
    fragment: StyleFragment, table: TokenTable, mode: ColorMode | str
) -> ResolvedStyle:
    """Return a copy of ``fragment`` with every TokenRef replaced by its value."""
    resolved: ResolvedStyle = {}
    for key, value in fragment.items():
        if isinstance(value, TokenRef):
            resolved[key] = resolve_token(table, value.name, mode)
        elif isinstance(value, Mapping):
            resolved[key] = resolve_refs(value, table, mode)
        else:
            resolved[key] = value
    return resolved


def compose_style(
    registry: ComponentRegistry,
    table: TokenTable,
    component: str,
    variant: str | None = None,
    size: str | None = None,
    color_scheme: str | None = None,
    mode: ColorMode | str = ColorMode.LIGHT,
) -> ResolvedStyle:
    """
    Compose the final style for one render request.

    Args:
        registry: Component styles.
        table: Semantic tokens used for substitution.
        component: Component name (e.g. ``"Button"``).
        variant: Optional variant name.
        size: Optional size name; ignored if the component has no such size.
        color_scheme: Accent palette passed through to variant functions.
        mode: Current color mode.

    Returns:
        A new dict with no token references left.

    Raises:
        UnknownComponent: If the component is not registered.
        UnknownVariant: If the variant is not registered for the component.
        UnknownToken: If a referenced token is not in the table.
    """
    mode = ColorMode(mode)
    style = registry.get(component)
    fragments: list[StyleFragment] = [style.base_style]

    if size is not None:
        size_fragment = style.size_fragment(size)
        if size_fragment is None:
            logger.debug("Component %s has no size %r, skipping", component, size)
        else:
            fragments.append(size_fragment)

    if variant is not None:
        fragments.append(style.variant_fragment(variant, mode, color_scheme))

    return resolve_refs(merge_fragments(*fragments), table, mode)
