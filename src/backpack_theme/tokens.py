"""
Semantic tokens and color-mode resolution.

A semantic token maps a symbolic name (``t_text``, ``t_background``) to a
``default`` value and an optional ``dark`` override. Tokens are flat: a
token value is a terminal value and never names another token.

Usage:
    table = TokenTable.build([
        ("t_text", "text", "whiteAlpha.800"),
        {"name": "t_plain", "default": "#000"},
    ])
    resolve_token(table, "t_text", ColorMode.DARK)   # "whiteAlpha.800"
    resolve_token(table, "t_plain", ColorMode.DARK)  # "#000"
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from enum import StrEnum
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .errors import DuplicateToken, UnknownToken

# Terminal style value; never interpreted by the resolver.
ConcreteValue = str | int | float


class ColorMode(StrEnum):
    """Color mode supplied by the rendering host."""

    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def _missing_(cls, value: object) -> ColorMode | None:
        # Accept "Dark", "LIGHT", ...
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None


class SemanticToken(BaseModel):
    """
    A named, mode-dependent style value.

    Example:
        SemanticToken(name="t_text", default="text", dark="whiteAlpha.800")
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Token name")
    default: ConcreteValue = Field(description="Value in light mode and dark-mode fallback")
    dark: ConcreteValue | None = Field(default=None, description="Dark mode override")

    def value_for(self, mode: ColorMode | str) -> ConcreteValue:
        """Return the concrete value for a color mode."""
        if ColorMode(mode) is ColorMode.DARK and self.dark is not None:
            return self.dark
        return self.default


TokenDefinition = SemanticToken | Mapping[str, Any] | tuple[Any, ...] | list[Any]


def _to_token(definition: TokenDefinition) -> SemanticToken:
    if isinstance(definition, SemanticToken):
        return definition
    if isinstance(definition, Mapping):
        return SemanticToken.model_validate(dict(definition))
    if isinstance(definition, (tuple, list)):
        if len(definition) not in (2, 3):
            raise ValueError(
                f"Token tuple must be (name, default[, dark]), got {len(definition)} items"
            )
        name, default, *rest = definition
        return SemanticToken(name=name, default=default, dark=rest[0] if rest else None)
    raise TypeError(f"Unsupported token definition: {definition!r}")


class TokenTable:
    """
    Immutable table of semantic tokens keyed by name.

    Built once with :meth:`build`; entries cannot be added or removed
    afterwards.
    """

    __slots__ = ("_tokens",)

    def __init__(self, tokens: Mapping[str, SemanticToken]):
        self._tokens: Mapping[str, SemanticToken] = MappingProxyType(dict(tokens))

    @classmethod
    def build(cls, definitions: Iterable[TokenDefinition]) -> TokenTable:
        """
        Build a table from token definitions.

        Args:
            definitions: ``SemanticToken`` instances, ``{name, default, dark?}``
                mappings or ``(name, default[, dark])`` tuples.

        Returns:
            A new TokenTable.

        Raises:
            DuplicateToken: If two definitions share a name. Nothing is
                built in that case.
        """
        tokens: dict[str, SemanticToken] = {}
        for definition in definitions:
            token = _to_token(definition)
            if token.name in tokens:
                raise DuplicateToken(token.name)
            tokens[token.name] = token
        return cls(tokens)

    def get(self, name: str) -> SemanticToken:
        """Look up a token, raising UnknownToken if it is not defined."""
        try:
            return self._tokens[name]
        except KeyError:
            raise UnknownToken(name) from None

    def names(self) -> list[str]:
        return sorted(self._tokens)

    def __contains__(self, name: object) -> bool:
        return name in self._tokens

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        return f"TokenTable({len(self._tokens)} tokens)"


def resolve_token(table: TokenTable, name: str, mode: ColorMode | str) -> ConcreteValue:
    """
    Resolve a semantic token to its concrete value for a color mode.

    Dark mode returns the token's ``dark`` value when one is defined and
    otherwise inherits ``default``; light mode always returns ``default``.

    Raises:
        UnknownToken: If ``name`` is not in the table.
    """
    return table.get(name).value_for(mode)


def describe(table: TokenTable) -> dict[str, dict[str, ConcreteValue | None]]:
    """Return ``{name: {"default": ..., "dark": ...}}`` for diagnostics."""
    return {
        name: {"default": token.default, "dark": token.dark}
        for name, token in sorted(table._tokens.items())
    }
