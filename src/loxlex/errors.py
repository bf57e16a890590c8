"""Error types with formatted source context."""

from __future__ import annotations

from enum import Enum

from loxlex.tokens import Span


class LexErrorKind(Enum):
    UNTERMINATED_STRING = "unterminated string"
    UNEXPECTED_CHARACTER = "unexpected character"


class LexError(Exception):
    """A malformed token, with its span and source context.

    The lexer records these instead of raising them; only
    ``tokenize(..., strict=True)`` raises.
    """

    def __init__(
        self, kind: LexErrorKind, span: Span, source: str, filename: str = "<input>"
    ) -> None:
        self.kind = kind
        self.span = span
        self.source = source
        self.filename = filename
        self.message = kind.value
        if kind is LexErrorKind.UNEXPECTED_CHARACTER:
            self.message += f" {span.extract(source)!r}"
        super().__init__(self.format())

    def source_line(self) -> str:
        """Return the full line the error starts on, without its newline."""
        offset = self.span.start.offset
        begin = self.source.rfind("\n", 0, offset) + 1
        end = self.source.find("\n", offset)
        if end == -1:
            end = len(self.source)
        return self.source[begin:end].rstrip("\r")

    def format(self, filename: str | None = None) -> str:
        if filename is None:
            filename = self.filename
        start = self.span.start
        line = self.source_line()

        # Underline the token itself, or up to end of line when it continues past it
        text = self.span.extract(self.source).split("\n", 1)[0].rstrip("\r")
        carets = "^" * max(1, len(text))

        gutter = " " * (len(str(start.line)) + 1)
        return (
            f"error: {self.message}\n"
            f"{gutter}--> {filename}:{start.line}:{start.column}\n"
            f"{gutter}|\n"
            f"{start.line} | {line}\n"
            f"{gutter}| {' ' * start.column}{carets}"
        )
