"""Lexical analysis for the Lox language."""

from __future__ import annotations

from loxlex.errors import LexError, LexErrorKind
from loxlex.lexer import Lexer, TokenStream, lex, tokenize
from loxlex.tokens import KEYWORDS, Lexeme, Position, Span, Token, TokenType

__version__ = "0.1.0"

__all__ = [
    "KEYWORDS",
    "LexError",
    "LexErrorKind",
    "Lexeme",
    "Lexer",
    "Position",
    "Span",
    "Token",
    "TokenStream",
    "TokenType",
    "lex",
    "tokenize",
]
