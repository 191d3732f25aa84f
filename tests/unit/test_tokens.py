"""Tests for the semantic token table and mode resolver."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from backpack_theme import (
    ColorMode,
    DuplicateToken,
    SemanticToken,
    TokenTable,
    UnknownToken,
    describe,
    resolve_token,
)


class TestColorMode:
    """Tests for ColorMode coercion."""

    def test_values(self):
        assert [m.value for m in ColorMode] == ["light", "dark"]

    def test_case_insensitive(self):
        assert ColorMode("DARK") is ColorMode.DARK
        assert ColorMode(" Light ") is ColorMode.LIGHT

    def test_invalid_mode(self):
        with pytest.raises(ValueError):
            ColorMode("sepia")


class TestTokenTableBuild:
    """Tests for TokenTable.build."""

    def test_accepts_tuples_mappings_and_models(self):
        table = TokenTable.build(
            [
                ("a", "1", "2"),
                ("b", "3"),
                {"name": "c", "default": "4", "dark": "5"},
                SemanticToken(name="d", default=6),
            ]
        )
        assert len(table) == 4
        assert table.names() == ["a", "b", "c", "d"]
        assert table.get("b").dark is None
        assert table.get("d").default == 6

    def test_duplicate_names_fail(self):
        with pytest.raises(DuplicateToken) as exc_info:
            TokenTable.build([{"name": "x", "default": "1"}, {"name": "x", "default": "2"}])
        assert exc_info.value.name == "x"
        assert "'x'" in str(exc_info.value)

    def test_empty_table(self):
        table = TokenTable.build([])
        assert len(table) == 0
        assert "anything" not in table

    def test_bad_tuple_length(self):
        with pytest.raises(ValueError):
            TokenTable.build([("only-name",)])

    def test_missing_default_fails_validation(self):
        with pytest.raises(ValidationError):
            TokenTable.build([{"name": "x"}])

    def test_tokens_are_frozen(self):
        token = SemanticToken(name="x", default="1")
        with pytest.raises(ValidationError):
            token.default = "2"  # type: ignore[misc]

    def test_table_is_read_only(self):
        table = TokenTable.build([("x", "1")])
        with pytest.raises(TypeError):
            table._tokens["y"] = SemanticToken(name="y", default="2")  # type: ignore[index]

    def test_get_unknown(self):
        table = TokenTable.build([("x", "1")])
        with pytest.raises(UnknownToken) as exc_info:
            table.get("y")
        assert exc_info.value.name == "y"


class TestResolveToken:
    """Tests for resolve_token."""

    def test_light_uses_default(self, table):
        assert resolve_token(table, "fg", ColorMode.LIGHT) == "#111"

    def test_dark_uses_override(self, table):
        assert resolve_token(table, "fg", ColorMode.DARK) == "#eee"

    def test_dark_without_override_inherits_default(self, table):
        assert resolve_token(table, "accent", ColorMode.DARK) == "pink"
        assert resolve_token(table, "accent", ColorMode.LIGHT) == "pink"

    def test_string_mode(self, table):
        assert resolve_token(table, "bg", "dark") == "#000"

    def test_unknown_token(self, table):
        with pytest.raises(UnknownToken):
            resolve_token(table, "missing", ColorMode.LIGHT)

    def test_repeated_calls_agree(self, table):
        first = resolve_token(table, "bg", ColorMode.DARK)
        assert all(resolve_token(table, "bg", ColorMode.DARK) == first for _ in range(5))


class TestDescribe:
    """Tests for the describe accessor."""

    def test_describe(self, table):
        assert describe(table) == {
            "accent": {"default": "pink", "dark": None},
            "bg": {"default": "#fff", "dark": "#000"},
            "fg": {"default": "#111", "dark": "#eee"},
        }

    def test_describe_returns_copy(self, table):
        info = describe(table)
        info["fg"]["default"] = "changed"
        assert resolve_token(table, "fg", ColorMode.LIGHT) == "#111"
