"""
Property-based tests using Hypothesis.

These tests verify the resolution and merge invariants across generated
token tables and style fragments.
"""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from backpack_theme import (
    ColorMode,
    ComponentRegistry,
    ComponentStyle,
    TokenTable,
    compose_style,
    resolve_token,
)

names = st.text(alphabet="abcdefghijklmnopqrstuvwxyz_", min_size=1, max_size=12)
values = st.one_of(st.text(max_size=12), st.integers(-1000, 1000))

token_tables = st.dictionaries(
    keys=names,
    values=st.tuples(values, st.one_of(st.none(), values)),
    min_size=1,
    max_size=10,
)

fragments = st.dictionaries(keys=names, values=values, max_size=6)


def _build(entries: dict) -> TokenTable:
    return TokenTable.build((name, default, dark) for name, (default, dark) in entries.items())


class TestResolutionProperties:
    @given(token_tables)
    @settings(max_examples=100)
    def test_fallback_without_dark(self, entries: dict) -> None:
        """Invariant: tokens without a dark value resolve the same in both modes."""
        table = _build(entries)
        for name, (default, dark) in entries.items():
            if dark is None:
                assert resolve_token(table, name, ColorMode.DARK) == resolve_token(
                    table, name, ColorMode.LIGHT
                )

    @given(token_tables)
    @settings(max_examples=100)
    def test_dark_override(self, entries: dict) -> None:
        """Invariant: tokens with a dark value resolve to it only in dark mode."""
        table = _build(entries)
        for name, (default, dark) in entries.items():
            assert resolve_token(table, name, ColorMode.LIGHT) == default
            if dark is not None:
                assert resolve_token(table, name, ColorMode.DARK) == dark

    @given(token_tables, st.sampled_from(list(ColorMode)))
    @settings(max_examples=50)
    def test_idempotent(self, entries: dict, mode: ColorMode) -> None:
        """Invariant: resolving twice yields the same value."""
        table = _build(entries)
        for name in entries:
            assert resolve_token(table, name, mode) == resolve_token(table, name, mode)


class TestMergeProperties:
    @given(fragments, fragments, fragments)
    @settings(max_examples=100)
    def test_variant_wins_over_size_and_base(self, base: dict, size: dict, variant: dict) -> None:
        """Invariant: overlapping keys take the last applied fragment's value."""
        registry = ComponentRegistry.build(
            [
                ComponentStyle(
                    name="C", base_style=base, sizes={"s": size}, variants={"v": variant}
                )
            ]
        )
        table = TokenTable.build([])
        style = compose_style(registry, table, "C", variant="v", size="s")

        for key, value in variant.items():
            assert style[key] == value
        for key, value in size.items():
            if key not in variant:
                assert style[key] == value
        for key, value in base.items():
            if key not in variant and key not in size:
                assert style[key] == value
        assert set(style) == set(base) | set(size) | set(variant)
