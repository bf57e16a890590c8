"""Minimal LSP server for Lox: publishes lexical errors as diagnostics."""

from __future__ import annotations

import logging

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from loxlex import __version__
from loxlex.errors import LexError
from loxlex.lexer import lex

logger = logging.getLogger(__name__)

SERVER_NAME = "loxlex-lsp"

server = LanguageServer(SERVER_NAME, __version__, text_document_sync_kind=TextDocumentSyncKind.Full)


def to_diagnostic(error: LexError) -> Diagnostic:
    """Convert a LexError to an LSP diagnostic (0-based lines, 0-based columns)."""
    span = error.span
    return Diagnostic(
        range=Range(
            start=Position(line=span.start.line - 1, character=span.start.column),
            end=Position(line=span.end.line - 1, character=span.end.column),
        ),
        message=error.message,
        severity=DiagnosticSeverity.Error,
        source="loxlex",
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Lex the document and publish one diagnostic per malformed token."""
    doc = ls.workspace.get_text_document(uri)
    filename = uri.rsplit("/", 1)[-1] if "/" in uri else uri

    stream = lex(doc.source, filename)
    for _ in stream:
        pass
    diagnostics = [to_diagnostic(err) for err in stream.errors]
    logger.debug("%s: publishing %d diagnostics", filename, len(diagnostics))

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
