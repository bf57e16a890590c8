"""Test identifier lexing, keyword resolution, and character classes."""

import pytest

from loxlex.tokens import KEYWORDS, TokenType, is_alpha, is_alphanum, is_digit, is_whitespace

from tests.conftest import assert_types, assert_values


class TestCharacterClasses:
    def test_letters(self):
        assert is_alpha("a")
        assert is_alpha("Z")
        assert is_alpha("_")

    def test_digits(self):
        for ch in "0123456789":
            assert is_digit(ch)
            assert not is_alpha(ch)
            assert is_alphanum(ch)

    def test_non_ascii_letters_rejected(self):
        assert not is_alpha("é")
        assert not is_alpha("λ")

    def test_empty_is_nothing(self):
        assert not is_alpha("")
        assert not is_digit("")
        assert not is_whitespace("")

    def test_whitespace(self):
        assert is_whitespace(" ")
        assert is_whitespace("\t")
        assert is_whitespace("\r")
        assert not is_whitespace("\n")


class TestIdentifierLexing:
    def test_simple_word(self, lex):
        tokens = lex("hello")
        assert_types(tokens, [TokenType.IDENTIFIER])
        assert_values(tokens, ["hello"])

    def test_underscore_start(self, lex):
        tokens = lex("_private")
        assert_values(tokens, ["_private"])

    def test_digits_inside(self, lex):
        tokens = lex("abc123_x")
        assert_types(tokens, [TokenType.IDENTIFIER])
        assert_values(tokens, ["abc123_x"])

    def test_digit_start_is_number(self, lex):
        tokens = lex("1abc")
        assert_types(tokens, [TokenType.NUMBER, TokenType.IDENTIFIER])

    def test_dot_splits(self, lex):
        tokens = lex("obj.field")
        assert_types(tokens, [TokenType.IDENTIFIER, TokenType.DOT, TokenType.IDENTIFIER])
        assert_values(tokens, ["obj", None, "field"])

    def test_span(self, lex):
        tokens = lex("  name")
        assert tokens[1].span.start_col == 2
        assert tokens[1].span.end_col == 6


class TestKeywords:
    @pytest.mark.parametrize("word", sorted(KEYWORDS))
    def test_exact_match(self, lex, word):
        tokens = lex(word)
        assert_types(tokens, [KEYWORDS[word]])
        assert tokens[0].value is None

    @pytest.mark.parametrize("word", sorted(KEYWORDS))
    def test_suffix_makes_identifier(self, lex, word):
        tokens = lex(word + "_")
        assert_types(tokens, [TokenType.IDENTIFIER])
        assert_values(tokens, [word + "_"])

    @pytest.mark.parametrize("word", sorted(KEYWORDS))
    def test_case_sensitive(self, lex, word):
        tokens = lex(word.upper())
        assert_types(tokens, [TokenType.IDENTIFIER])

    def test_keyword_set(self):
        assert set(KEYWORDS) == {
            "and", "class", "else", "false", "fun", "for", "if", "nil",
            "or", "print", "return", "super", "this", "true", "var", "while",
        }  # fmt: skip

    def test_prefix_of_keyword(self, lex):
        tokens = lex("whi")
        assert_types(tokens, [TokenType.IDENTIFIER])

    def test_class_declaration(self, lex_significant):
        tokens = lex_significant("class Foo < Bar { init() { this.x = nil; } }")
        types = [t.type for t in tokens]
        assert types[:4] == [
            TokenType.CLASS,
            TokenType.IDENTIFIER,
            TokenType.LESS,
            TokenType.IDENTIFIER,
        ]
        assert TokenType.THIS in types
        assert TokenType.NIL in types
