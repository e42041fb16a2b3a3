"""Token types, data structures, fixed lexical tables, and character classification."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    # Words
    IDENTIFIER = auto()  # alphanumeric run: names and literal values alike
    TYPE = auto()  # String | Int | Bool | Char

    # Symbols (single-character)
    TYPE_INDICATOR = auto()  # :
    LEFT_BRACE = auto()  # {
    RIGHT_BRACE = auto()  # }
    SEMICOLON = auto()  # ;
    EQUAL = auto()  # =

    # Keywords
    LET = auto()  # let
    FN = auto()  # fn


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based character offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start to end position."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token with its source text and location."""

    type: TokenType
    value: str
    span: Span


SYMBOLS: dict[str, TokenType] = {
    "=": TokenType.EQUAL,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ":": TokenType.TYPE_INDICATOR,
    ";": TokenType.SEMICOLON,
}

KEYWORDS: dict[str, TokenType] = {
    "fn": TokenType.FN,
    "let": TokenType.LET,
}

# Case-sensitive; anything else is an ordinary identifier
TYPE_NAMES = frozenset({"String", "Int", "Bool", "Char"})


def is_symbol(ch: str) -> bool:
    """Return True if ch is one of the fixed single-character symbols."""
    return ch in SYMBOLS


def is_word_char(ch: str) -> bool:
    """Return True if ch may appear in an identifier (letter or digit)."""
    return ch.isalnum()
