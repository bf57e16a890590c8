"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    # Single-character punctuation
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )
    LEFT_BRACE = auto()  # {
    RIGHT_BRACE = auto()  # }
    COMMA = auto()  # ,
    DOT = auto()  # .
    MINUS = auto()  # -
    PLUS = auto()  # +
    SEMICOLON = auto()  # ;
    SLASH = auto()  # /
    STAR = auto()  # *

    # One or two characters
    BANG = auto()  # !
    BANG_EQUAL = auto()  # !=
    EQUAL = auto()  # =
    EQUAL_EQUAL = auto()  # ==
    GREATER = auto()  # >
    GREATER_EQUAL = auto()  # >=
    LESS = auto()  # <
    LESS_EQUAL = auto()  # <=

    # Literals
    IDENTIFIER = auto()
    STRING = auto()  # value excludes the quotes
    NUMBER = auto()  # value is a float

    # Trivia
    COMMENT = auto()  # // through end of line, newline excluded
    WHITESPACE = auto()  # spaces, tabs, carriage returns
    NEWLINE = auto()  # \n

    # Keywords
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # Malformed tokens; value is the offending source text
    UNTERMINATED_STRING = auto()
    UNEXPECTED_CHARACTER = auto()

    EOF = auto()

    @property
    def is_keyword(self) -> bool:
        return self in _KEYWORD_TYPES

    @property
    def is_trivia(self) -> bool:
        return self in _TRIVIA_TYPES

    @property
    def is_error(self) -> bool:
        return self in _ERROR_TYPES


KEYWORDS: dict[str, TokenType] = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

_KEYWORD_TYPES = frozenset(KEYWORDS.values())
_TRIVIA_TYPES = frozenset({TokenType.COMMENT, TokenType.WHITESPACE, TokenType.NEWLINE})
_ERROR_TYPES = frozenset({TokenType.UNTERMINATED_STRING, TokenType.UNEXPECTED_CHARACTER})

# Debug names for types whose enum name differs from the printed form
_DISPLAY_NAMES = {
    TokenType.LEFT_PAREN: "L_PAREN",
    TokenType.RIGHT_PAREN: "R_PAREN",
    TokenType.LEFT_BRACE: "L_BRACE",
    TokenType.RIGHT_BRACE: "R_BRACE",
}


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line, 0-based column and character offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open source range from start to end position."""

    start: Position
    end: Position

    @property
    def start_line(self) -> int:
        return self.start.line

    @property
    def start_col(self) -> int:
        return self.start.column

    @property
    def end_line(self) -> int:
        return self.end.line

    @property
    def end_col(self) -> int:
        return self.end.column

    def is_single_line(self) -> bool:
        return self.start.line == self.end.line

    def extract(self, source: str) -> str:
        """Return the slice of *source* this span covers."""
        return source[self.start.offset : self.end.offset]

    def __str__(self) -> str:
        return f"{self.start.line}:{self.start.column}-{self.end.line}:{self.end.column}"


@dataclass(frozen=True, slots=True)
class Lexeme:
    """A token kind plus its payload.

    ``value`` is a ``str`` for identifiers, strings, comments, whitespace and
    malformed tokens, a ``float`` for numbers, and ``None`` otherwise.
    """

    type: TokenType
    value: str | float | None = None

    def __str__(self) -> str:
        name = _DISPLAY_NAMES.get(self.type, self.type.name)
        if self.value is None:
            return name
        if isinstance(self.value, float):
            # 12.0 prints as 12, matching the source form of integral literals
            text = str(int(self.value)) if self.value.is_integer() else repr(self.value)
            return f"{name}({text})"
        return f"{name}({self.value!r})"


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token: the lexeme and the span it was scanned from."""

    lexeme: Lexeme
    span: Span

    @property
    def type(self) -> TokenType:
        return self.lexeme.type

    @property
    def value(self) -> str | float | None:
        return self.lexeme.value


PUNCTUATION: dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# Operator char -> (one-char type, type when followed by '=')
OPERATORS: dict[str, tuple[TokenType, TokenType]] = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}


def is_whitespace(ch: str) -> bool:
    """Return True for horizontal whitespace (newline excluded)."""
    return ch in (" ", "\t", "\r")


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return len(ch) == 1 and "0" <= ch <= "9"


def is_alpha(ch: str) -> bool:
    """Return True if ch can start an identifier (ASCII letter or underscore)."""
    return len(ch) == 1 and ("a" <= ch <= "z" or "A" <= ch <= "Z" or ch == "_")


def is_alphanum(ch: str) -> bool:
    return is_alpha(ch) or is_digit(ch)
