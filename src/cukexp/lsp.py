"""Minimal LSP server for Cucumber Expression lists — diagnostics only."""

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

from cukexp import __version__
from cukexp.errors import ExpressionError
from cukexp.lexer import tokenize

logger = logging.getLogger(__name__)

server = LanguageServer("cukexp-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)


def utf16_column(line: str, index: int) -> int:
    """Convert a codepoint offset in line to an LSP (UTF-16) character offset."""
    return len(line[:index].encode("utf-16-le")) // 2


def diagnose(source: str) -> list[Diagnostic]:
    """Tokenize each expression line of source and collect errors."""
    diagnostics: list[Diagnostic] = []
    for line, expression in enumerate(source.splitlines()):
        if not expression.strip() or expression.lstrip().startswith("#"):
            continue
        try:
            tokenize(expression)
        except ExpressionError as exc:
            start = utf16_column(expression, exc.index)
            end = utf16_column(expression, exc.index + 1)
            diagnostics.append(
                Diagnostic(
                    range=Range(
                        start=Position(line=line, character=start),
                        end=Position(line=line, character=end),
                    ),
                    message=exc.message,
                    severity=DiagnosticSeverity.Error,
                    source="cukexp",
                )
            )
    return diagnostics


def _validate(ls: LanguageServer, uri: str) -> None:
    """Tokenize the document's expressions and publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    diagnostics = diagnose(doc.source)
    logger.debug("%s: %d diagnostic(s)", uri, len(diagnostics))
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
