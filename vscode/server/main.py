"""
minirb Language Server entry point.

This server provides basic language features for minirb source files using
`pygls`. It reuses the minirb lexer and parser to report syntax errors as
diagnostics and to build a simple symbol index supporting definition lookup,
hover information, and document symbols.

Tokens carry no source positions, so symbol lines are recovered by scanning
the document text for the first assignment of each name.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_DEFINITION,
    TEXT_DOCUMENT_HOVER,
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DID_CHANGE,
    DefinitionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidOpenTextDocumentParams,
    DidChangeTextDocumentParams,
    DocumentSymbol,
    DocumentSymbolParams,
    Hover,
    HoverParams,
    Location,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
    SymbolKind,
)

from minirb.lexer import tokenize
from minirb.nodes import Assign, If, Statement
from minirb.parser import Parser


@dataclass
class MrbSymbol:
    """Represents an assigned variable in a minirb file."""

    name: str
    kind: SymbolKind
    uri: str
    line: int
    detail: str


def assigned_names(statements: Iterable[Statement]) -> List[str]:
    """Return assigned names in first-assignment order, including inside branches."""
    names: List[str] = []
    for stmt in statements:
        if isinstance(stmt, Assign):
            if stmt.name not in names:
                names.append(stmt.name)
        elif isinstance(stmt, If):
            for name in assigned_names(stmt.then_branch + stmt.else_branch):
                if name not in names:
                    names.append(name)
    return names


def find_assignment(text: str, name: str) -> Optional[tuple[int, str]]:
    """Return ``(line_index, line_text)`` of the first ``name =`` in ``text``."""
    pattern = re.compile(rf"(?<![^\W\d_]){re.escape(name)}\s*=")
    for index, line in enumerate(text.splitlines()):
        if pattern.search(line):
            return index, line.strip()
    return None


class MrbLanguageServer(LanguageServer):
    """Language server for minirb source files."""

    def __init__(self) -> None:
        super().__init__("mrb-ls", "v0.1")
        self.symbols_by_uri: Dict[str, List[MrbSymbol]] = {}

    def update_index(self, uri: str, text: str) -> List[Diagnostic]:
        """Parse ``text``, update the symbol index for ``uri`` and return diagnostics.

        A document that fails to parse keeps its previous symbols.
        """
        try:
            ast = Parser(tokenize(text), uri).parse()
        except SyntaxError as e:
            rng = Range(Position(0, 0), Position(0, 0))
            return [
                Diagnostic(
                    range=rng,
                    message=str(e),
                    severity=DiagnosticSeverity.Error,
                    source="mrb-ls",
                )
            ]
        self.symbols_by_uri[uri] = self._parse_symbols(uri, text, ast)
        return []

    @staticmethod
    def _parse_symbols(uri: str, text: str, ast: List[Statement]) -> List[MrbSymbol]:
        """Extract variable symbols from a parsed document."""
        symbols: List[MrbSymbol] = []
        for name in assigned_names(ast):
            found = find_assignment(text, name)
            line, detail = found if found is not None else (0, f"{name} = ...")
            symbols.append(MrbSymbol(name, SymbolKind.Variable, uri, line, detail))
        return symbols

    def lookup(self, uri: str, word: str) -> Optional[MrbSymbol]:
        """Return the symbol named ``word`` in ``uri``, if it is assigned there."""
        for sym in self.symbols_by_uri.get(uri, []):
            if sym.name == word:
                return sym
        return None

    def refresh(self, uri: str, text: str) -> None:
        """Re-index a document and publish its diagnostics."""
        diagnostics = self.update_index(uri, text)
        if diagnostics:
            self.show_message_log(f"[mrb-ls] {uri}: {diagnostics[0].message}")
        self.publish_diagnostics(uri, diagnostics)


lang_server = MrbLanguageServer()


@lang_server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: MrbLanguageServer, params: DidOpenTextDocumentParams) -> None:
    """Index a document when it is opened."""
    ls.refresh(params.text_document.uri, params.text_document.text)


@lang_server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: MrbLanguageServer, params: DidChangeTextDocumentParams) -> None:
    """Re-index a document when it changes."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    ls.refresh(doc.uri, doc.source)


@lang_server.feature(TEXT_DOCUMENT_DEFINITION)
def definition(ls: MrbLanguageServer, params: DefinitionParams):
    """Return the first assignment of the variable under the cursor."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    word = doc.word_at_position(params.position)
    if not word:
        return None
    sym = ls.lookup(doc.uri, word)
    if sym is None:
        return None
    rng = Range(Position(sym.line, 0), Position(sym.line, len(sym.detail)))
    return Location(uri=sym.uri, range=rng)


@lang_server.feature(TEXT_DOCUMENT_HOVER)
def hover(ls: MrbLanguageServer, params: HoverParams) -> Optional[Hover]:
    """Return hover information for the variable under the cursor."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    word = doc.word_at_position(params.position)
    if not word:
        return None
    sym = ls.lookup(doc.uri, word)
    if sym is None:
        return None
    contents = MarkupContent(kind=MarkupKind.PlainText, value=sym.detail)
    return Hover(contents=contents)


@lang_server.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def document_symbols(ls: MrbLanguageServer, params: DocumentSymbolParams):
    """Return variable symbols for the given document."""
    symbols = ls.symbols_by_uri.get(params.text_document.uri, [])
    result: List[DocumentSymbol] = []
    for sym in symbols:
        rng = Range(Position(sym.line, 0), Position(sym.line, len(sym.detail)))
        result.append(
            DocumentSymbol(
                name=sym.name,
                kind=sym.kind,
                range=rng,
                selection_range=rng,
                detail=sym.detail,
            )
        )
    return result


def main() -> None:
    """Start the language server."""
    lang_server.start_io()


if __name__ == "__main__":
    main()
