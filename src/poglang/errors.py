"""Lexer error type with formatted source context."""

from __future__ import annotations

from enum import Enum

from poglang.tokens import Position


class LexErrorKind(Enum):
    INVALID_TOKEN = "invalid token"
    UNRECOGNIZED_WORD = "unrecognized word"


class LexError(Exception):
    """Raised on the first lexing error, with kind, position and source context."""

    def __init__(
        self,
        kind: LexErrorKind,
        position: Position,
        source: str,
        length: int = 1,
        detail: str | None = None,
        filename: str = "input.pog",
    ) -> None:
        self.kind = kind
        self.position = position
        self.source = source
        self.length = length
        self.filename = filename
        self.message = kind.value if detail is None else f"{kind.value} {detail}"
        super().__init__(self.format())

    def format(self, filename: str | None = None) -> str:
        if filename is None:
            filename = self.filename
        lines = self.source.splitlines(keepends=True)
        line_idx = self.position.line - 1
        col = self.position.column

        # Build the source line (strip trailing newline for display)
        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\n").rstrip("\r")
        else:
            source_line = ""

        # Underline the offending word, at least 1 char, but stay within line
        underline_len = max(1, min(self.length, len(source_line) - col + 1))

        pad = " " * (col - 1)
        carets = "^" * underline_len

        line_num = str(self.position.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.position.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )
