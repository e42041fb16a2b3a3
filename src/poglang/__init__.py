"""poglang lexer: source text to typed tokens."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from poglang.tokens import Token

__version__ = "0.1.0"


def tokenize(source: str, filename: str = "input.pog", *, strict: bool = False) -> tuple[Token, ...]:
    """Tokenize poglang source text."""
    from poglang.lexer import tokenize as _tokenize

    return _tokenize(source, filename, strict=strict)
