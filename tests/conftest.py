"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from poglang.lexer import tokenize
from poglang.tokens import Token, TokenType


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns the token sequence."""

    def _lex(source: str, strict: bool = False) -> tuple[Token, ...]:
        return tokenize(source, strict=strict)

    return _lex


def assert_types(tokens: tuple[Token, ...], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_values(tokens: tuple[Token, ...], expected: list[str]) -> None:
    """Assert that the token values match the expected list."""
    actual = [t.value for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def find_tokens(tokens: tuple[Token, ...], tt: TokenType) -> list[Token]:
    """Return all tokens of the given type."""
    return [t for t in tokens if t.type == tt]
