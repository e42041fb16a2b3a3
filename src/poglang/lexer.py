"""poglang lexer: converts source text into an immutable token sequence."""

from __future__ import annotations

from poglang.errors import LexError, LexErrorKind
from poglang.tokens import (
    KEYWORDS,
    SYMBOLS,
    TYPE_NAMES,
    Position,
    Span,
    Token,
    TokenType,
    is_word_char,
)


def classify(word: str) -> TokenType | None:
    """Map a complete word to its token type, or None when it yields no token.

    Keywords and built-in type names win over identifiers. Empty words and
    words holding anything other than letters and digits are dropped.
    """
    if word in KEYWORDS:
        return KEYWORDS[word]
    if word in TYPE_NAMES:
        return TokenType.TYPE
    if not word:
        return None
    if not all(is_word_char(ch) for ch in word):
        return None
    return TokenType.IDENTIFIER


class Lexer:
    """Tokenize poglang source text in a single left-to-right pass.

    Symbols and spaces end the current word. Every other character is
    accumulated and the word is classified when it ends. With ``strict``
    set, words that classify to nothing raise instead of being dropped.
    """

    def __init__(self, source: str, filename: str = "input.pog", *, strict: bool = False) -> None:
        self._source = source
        self._filename = filename
        self._strict = strict
        self._pos = 0
        self._line = 1
        self._col = 1
        self._tokens: list[Token] = []
        self._word: list[tuple[str, Position]] = []

    def tokenize(self) -> tuple[Token, ...]:
        """Tokenize the full source and return the token sequence."""
        while self._pos < len(self._source):
            start = self._current_pos()
            ch = self._advance()

            if ch in SYMBOLS:
                self._flush_word()
                self._emit(SYMBOLS[ch], ch, start)
            elif ch == " ":
                self._flush_word()
            else:
                self._word.append((ch, start))

        # End of input is a word boundary
        self._flush_word()
        return tuple(self._tokens)

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _current_pos(self) -> Position:
        return Position(self._line, self._col, self._pos)

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch

    def _emit(self, tt: TokenType, value: str, start: Position, end: Position | None = None) -> Token:
        if end is None:
            end = self._current_pos()
        tok = Token(tt, value, Span(start, end))
        self._tokens.append(tok)
        return tok

    def _error(
        self,
        kind: LexErrorKind,
        pos: Position,
        length: int = 1,
        detail: str | None = None,
    ) -> LexError:
        return LexError(kind, pos, self._source, length, detail, self._filename)

    # ------------------------------------------------------------------
    # Word accumulator
    # ------------------------------------------------------------------

    def _flush_word(self) -> None:
        """Classify the pending word, emit its token if any, and reset it."""
        pending = self._word
        self._word = []

        # Tabs and newlines stay in the word but never count toward it
        first = 0
        last = len(pending)
        while first < last and pending[first][0].isspace():
            first += 1
        while last > first and pending[last - 1][0].isspace():
            last -= 1
        if first == last:
            return

        word = "".join(ch for ch, _ in pending[first:last])
        start = pending[first][1]
        tail = pending[last - 1][1]
        end = Position(tail.line, tail.column + 1, tail.offset + 1)

        tt = classify(word)
        if tt is None:
            if self._strict:
                raise self._error(LexErrorKind.UNRECOGNIZED_WORD, start, len(word), f"'{word}'")
            return

        if tt == TokenType.IDENTIFIER and not self._tokens:
            raise self._error(LexErrorKind.INVALID_TOKEN, start, len(word))

        self._emit(tt, word, start, end)


def tokenize(source: str, filename: str = "input.pog", *, strict: bool = False) -> tuple[Token, ...]:
    """Convenience function: tokenize source text and return the token sequence."""
    return Lexer(source, filename, strict=strict).tokenize()
