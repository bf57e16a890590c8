"""Human-readable token dumps."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from loxlex.tokens import Token


def format_token(token: Token) -> str:
    """Render a token as ``LEXEME @ line:col-line:col``."""
    return f"{token.lexeme} @ {token.span}"


def dump_tokens(tokens: Iterable[Token], *, file: TextIO = sys.stderr) -> None:
    """Print one line per token to *file*."""
    for token in tokens:
        file.write(format_token(token) + "\n")


def reconstruct(tokens: Iterable[Token], source: str) -> str:
    """Rebuild source text from the spans of *tokens*."""
    return "".join(token.span.extract(source) for token in tokens)
