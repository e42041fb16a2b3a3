"""--debug token dump to stderr."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from poglang.tokens import Span, Token, TokenType

# Tokens whose value carries information beyond their type
_PAYLOAD_TYPES = frozenset({TokenType.IDENTIFIER, TokenType.TYPE})


def format_span(span: Span) -> str:
    start, end = span.start, span.end
    return f"{start.line}:{start.column}-{end.line}:{end.column}"


def format_token(tok: Token) -> str:
    """Render a token as ``TYPE`` or ``TYPE(value)``."""
    if tok.type in _PAYLOAD_TYPES:
        return f"{tok.type.name}({tok.value!r})"
    return tok.type.name


def dump_tokens(tokens: Sequence[Token], *, file: TextIO = sys.stderr) -> None:
    """Print one token per line with its source span to *file*."""
    file.write(f"Tokens ({len(tokens)})\n")
    for tok in tokens:
        file.write(f"  {format_span(tok.span):<12} {format_token(tok)}\n")
