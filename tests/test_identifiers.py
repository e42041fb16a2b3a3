"""Test word classification, identifier lexing, and dropped words."""

import pytest

from poglang.errors import LexError, LexErrorKind
from poglang.lexer import classify
from poglang.tokens import TokenType, is_word_char

from .conftest import assert_types, assert_values


class TestIsWordChar:
    def test_letters(self):
        assert is_word_char("a")
        assert is_word_char("Z")

    def test_digits(self):
        assert is_word_char("0")
        assert is_word_char("9")

    def test_non_letters(self):
        for ch in "_-$.!? \t\n=;":
            assert not is_word_char(ch), f"Expected '{ch}' to NOT be a word char"


class TestClassify:
    def test_keywords(self):
        assert classify("fn") == TokenType.FN
        assert classify("let") == TokenType.LET

    def test_type_names(self):
        for name in ("String", "Int", "Bool", "Char"):
            assert classify(name) == TokenType.TYPE

    def test_identifier(self):
        assert classify("poggers") == TokenType.IDENTIFIER

    def test_numbers_are_identifiers(self):
        assert classify("15") == TokenType.IDENTIFIER

    def test_mixed_digits_and_letters(self):
        assert classify("123pogg") == TokenType.IDENTIFIER

    def test_empty_word(self):
        assert classify("") is None

    def test_punctuation_dropped(self):
        assert classify("a_b") is None
        assert classify("x+y") is None

    @pytest.mark.parametrize("word", ["a", "Z9", "007", "letter", "fnord", "Integer", "ünïcode"])
    def test_alphanumeric_words_always_classify(self, word):
        assert classify(word) is not None


class TestIdentifierLexing:
    def test_after_keyword(self, lex):
        tokens = lex("let hello")
        assert_types(tokens, [TokenType.LET, TokenType.IDENTIFIER])
        assert_values(tokens, ["let", "hello"])

    def test_keyword_prefix_is_identifier(self, lex):
        tokens = lex("let letter")
        assert_types(tokens, [TokenType.LET, TokenType.IDENTIFIER])
        assert tokens[1].value == "letter"

    def test_no_empty_values(self, lex):
        tokens = lex("fn   a  { b ; }")
        assert all(t.value for t in tokens)


class TestDroppedWords:
    def test_punctuated_word_dropped(self, lex):
        tokens = lex("let a_b = 1;")
        assert_types(tokens, [TokenType.LET, TokenType.EQUAL, TokenType.IDENTIFIER, TokenType.SEMICOLON])

    def test_drop_does_not_swallow_next_word(self, lex):
        tokens = lex("let a$ b;")
        assert_types(tokens, [TokenType.LET, TokenType.IDENTIFIER, TokenType.SEMICOLON])
        assert tokens[1].value == "b"

    def test_dropped_leading_word_is_not_an_error(self, lex):
        tokens = lex("x+y let")
        assert_types(tokens, [TokenType.LET])

    def test_unknown_symbols_dropped_with_word(self, lex):
        tokens = lex("fn ( )")
        assert_types(tokens, [TokenType.FN])


class TestStrictMode:
    def test_punctuated_word_rejected(self, lex):
        with pytest.raises(LexError) as exc_info:
            lex("let a_b = 1;", strict=True)
        err = exc_info.value
        assert err.kind == LexErrorKind.UNRECOGNIZED_WORD
        assert "a_b" in err.message
        assert err.position.column == 5

    def test_valid_program_unchanged(self, lex):
        source = "let poggers: Int = 15;"
        assert lex(source, strict=True) == lex(source)

    def test_leading_identifier_still_invalid(self, lex):
        with pytest.raises(LexError) as exc_info:
            lex("poggers", strict=True)
        assert exc_info.value.kind == LexErrorKind.INVALID_TOKEN
