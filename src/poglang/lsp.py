"""Minimal LSP server for poglang: lex diagnostics only."""

from __future__ import annotations

import tomllib
from pathlib import Path

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
from pygls.uris import to_fs_path

from poglang import __version__
from poglang.cli import config_strict, load_config
from poglang.errors import LexError
from poglang.lexer import tokenize

server = LanguageServer(
    "poglang-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def _document_range(line: int, start: int, end: int) -> Range:
    return Range(
        start=Position(line=line, character=start),
        end=Position(line=line, character=end),
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Lex the document with its directory's poglang.toml settings and publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    filename = uri.rsplit("/", 1)[-1] if "/" in uri else uri
    diagnostics: list[Diagnostic] = []

    strict = False
    fs_path = to_fs_path(uri)
    if fs_path is not None:
        try:
            strict = config_strict(load_config(None, Path(fs_path).parent))
        except tomllib.TOMLDecodeError as exc:
            # Lex with defaults, but tell the user why their settings were ignored
            diagnostics.append(
                Diagnostic(
                    range=_document_range(0, 0, 0),
                    message=f"invalid poglang.toml: {exc}",
                    severity=DiagnosticSeverity.Warning,
                    source="poglang",
                )
            )

    try:
        tokenize(doc.source, filename, strict=strict)
    except LexError as exc:
        line = exc.position.line - 1
        col = exc.position.column - 1
        diagnostics.append(
            Diagnostic(
                range=_document_range(line, col, col + exc.length),
                message=exc.message,
                severity=DiagnosticSeverity.Error,
                source="poglang",
            )
        )

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
