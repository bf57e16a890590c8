"""Lox lexer: converts source text into a lossless, lazily produced token stream."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from loxlex.errors import LexError, LexErrorKind
from loxlex.tokens import (
    KEYWORDS,
    OPERATORS,
    PUNCTUATION,
    Lexeme,
    Position,
    Span,
    Token,
    TokenType,
    is_alpha,
    is_alphanum,
    is_digit,
    is_whitespace,
)

logger = logging.getLogger(__name__)


class _ScanContext:
    """Cursor state for one scanning session, and the scan-one-token algorithm."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._col = 0
        self._start = Position(1, 0, 0)
        self.exhausted = False

    @property
    def source(self) -> str:
        return self._source

    def scan(self) -> Token | None:
        """Scan and return the next token, or None once EOF has been produced."""
        if self.exhausted:
            return None

        self._start = self._current_pos()

        if self._at_end():
            self.exhausted = True
            return self._emit(TokenType.EOF)

        ch = self._advance()

        if ch == "\n":
            return self._emit(TokenType.NEWLINE)

        if is_whitespace(ch):
            return self._lex_whitespace()

        if ch == "/":
            if self._peek() == "/":
                return self._lex_comment()
            return self._emit(TokenType.SLASH)

        if ch in PUNCTUATION:
            return self._emit(PUNCTUATION[ch])

        if ch in OPERATORS:
            single, double = OPERATORS[ch]
            if self._match("="):
                return self._emit(double)
            return self._emit(single)

        if ch == '"':
            return self._lex_string()

        if is_digit(ch):
            return self._lex_number()

        if is_alpha(ch):
            return self._lex_identifier()

        return self._emit(TokenType.UNEXPECTED_CHARACTER, ch)

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _current_pos(self) -> Position:
        return Position(self._line, self._col, self._pos)

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    def _peek(self, offset: int = 0) -> str:
        idx = self._pos + offset
        if idx < len(self._source):
            return self._source[idx]
        return ""

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._col = 0
        else:
            self._col += 1
        return ch

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it equals *expected*."""
        if self._peek() != expected:
            return False
        self._advance()
        return True

    def _lexeme_text(self) -> str:
        return self._source[self._start.offset : self._pos]

    def _emit(self, tt: TokenType, value: str | float | None = None) -> Token:
        span = Span(self._start, self._current_pos())
        return Token(Lexeme(tt, value), span)

    # ------------------------------------------------------------------
    # Multi-character lexemes
    # ------------------------------------------------------------------

    def _lex_whitespace(self) -> Token:
        while is_whitespace(self._peek()):
            self._advance()
        return self._emit(TokenType.WHITESPACE, self._lexeme_text())

    def _lex_comment(self) -> Token:
        while not self._at_end() and self._peek() != "\n":
            self._advance()
        return self._emit(TokenType.COMMENT, self._lexeme_text())

    def _lex_string(self) -> Token:
        while not self._at_end() and self._peek() != '"':
            self._advance()

        if self._at_end():
            return self._emit(TokenType.UNTERMINATED_STRING, self._lexeme_text())

        self._advance()  # closing quote
        return self._emit(TokenType.STRING, self._source[self._start.offset + 1 : self._pos - 1])

    def _lex_number(self) -> Token:
        while is_digit(self._peek()):
            self._advance()

        # A trailing '.' without a digit after it belongs to the next token
        if self._peek() == "." and is_digit(self._peek(1)):
            self._advance()
            while is_digit(self._peek()):
                self._advance()

        return self._emit(TokenType.NUMBER, float(self._lexeme_text()))

    def _lex_identifier(self) -> Token:
        while is_alphanum(self._peek()):
            self._advance()
        text = self._lexeme_text()
        keyword = KEYWORDS.get(text)
        if keyword is not None:
            return self._emit(keyword)
        return self._emit(TokenType.IDENTIFIER, text)


_ERROR_KINDS = {
    TokenType.UNTERMINATED_STRING: LexErrorKind.UNTERMINATED_STRING,
    TokenType.UNEXPECTED_CHARACTER: LexErrorKind.UNEXPECTED_CHARACTER,
}


class TokenStream:
    """Forward-only iterator of tokens over one source text.

    Each ``next()`` scans exactly one token. The stream ends after the EOF
    token; malformed tokens are yielded in place and recorded in ``errors``.
    """

    def __init__(self, source: str, filename: str = "<input>") -> None:
        self._context = _ScanContext(source)
        self._filename = filename
        self._count = 0
        self.errors: list[LexError] = []

    @property
    def filename(self) -> str:
        return self._filename

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self._context.scan()
        if token is None:
            raise StopIteration

        self._count += 1
        if token.type.is_error:
            self._record_error(token)
        elif token.type == TokenType.EOF:
            logger.debug(
                "%s: lexed %d tokens, %d errors", self._filename, self._count, len(self.errors)
            )
        return token

    def _record_error(self, token: Token) -> None:
        error = LexError(
            _ERROR_KINDS[token.type], token.span, self._context.source, self._filename
        )
        logger.debug("%s:%s: %s", self._filename, token.span, error.message)
        self.errors.append(error)


class Lexer:
    """Wrap Lox source text; each iteration starts an independent scanning session."""

    def __init__(self, source: str, filename: str = "<input>") -> None:
        self._source = source
        self._filename = filename

    @property
    def source(self) -> str:
        return self._source

    def tokens(self) -> TokenStream:
        """Return a fresh token stream over the source."""
        return TokenStream(self._source, self._filename)

    def __iter__(self) -> Iterator[Token]:
        return self.tokens()


def lex(source: str, filename: str = "<input>") -> TokenStream:
    """Convenience function: return a lazy token stream over source text."""
    return Lexer(source, filename).tokens()


def tokenize(source: str, filename: str = "<input>", *, strict: bool = False) -> list[Token]:
    """Convenience function: tokenize source text and return the token list.

    With ``strict=True`` the first malformed token raises its LexError.
    """
    stream = lex(source, filename)
    tokens = []
    for token in stream:
        if strict and stream.errors:
            raise stream.errors[0]
        tokens.append(token)
    return tokens
