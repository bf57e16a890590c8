"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from loxlex.lexer import tokenize
from loxlex.tokens import Token, TokenType


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns tokens (excluding EOF)."""

    def _lex(source: str) -> list[Token]:
        tokens = tokenize(source)
        # Strip trailing EOF for convenience
        return [t for t in tokens if t.type != TokenType.EOF]

    return _lex


@pytest.fixture
def lex_significant():
    """Return a helper that tokenizes source and drops trivia and EOF."""

    def _lex(source: str) -> list[Token]:
        return [t for t in tokenize(source) if not t.type.is_trivia and t.type != TokenType.EOF]

    return _lex


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_values(tokens: list[Token], expected: list[str | float | None]) -> None:
    """Assert that the token values match the expected list."""
    actual = [t.value for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def span_tuple(token: Token) -> tuple[int, int, int, int]:
    """Return (start_line, start_col, end_line, end_col) for a token."""
    s = token.span
    return (s.start_line, s.start_col, s.end_line, s.end_col)
