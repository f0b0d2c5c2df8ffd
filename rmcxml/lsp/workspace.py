"""Open-document registry and request dispatch for the RMC XML language server."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from lsprotocol.types import (
    CompletionItem,
    CompletionList,
    CompletionParams,
    Diagnostic,
    Hover,
    Position,
    TextDocumentContentChangeEvent,
    TextDocumentItem,
)
from pygls.uris import to_fs_path

from rmcxml.config import ServerConfig
from rmcxml.errors import DocumentNotOpenError
from rmcxml.schema import RMC_SCHEMA, SchemaRegistry

from .completion import CompletionEngine
from .hover import HoverEngine
from .protocol import ErrorKind, ValidationError, make_range
from .state import ChangeLike, DocumentState
from .validation import SchemaValidator


class WorkspaceIndex:
    """Owns one buffer per open document and answers requests against it.

    Every request reads a snapshot of the current text; nothing is cached
    between requests, so results never lag behind the last accepted edit.
    """

    def __init__(
        self,
        root_uri: Optional[str] = None,
        *,
        config: Optional[ServerConfig] = None,
        registry: SchemaRegistry = RMC_SCHEMA,
    ) -> None:
        self.logger = logging.getLogger("rmcxml.lsp.workspace")
        self.root_uri = root_uri
        self.root_path = self._resolve_root(root_uri)
        self.registry = registry
        self.completion_engine = CompletionEngine(registry)
        self.hover_engine = HoverEngine(registry)
        self._open_documents: Dict[str, DocumentState] = {}
        self.configure(config or ServerConfig())

    def set_root(self, root_uri: Optional[str]) -> None:
        self.root_uri = root_uri
        self.root_path = self._resolve_root(root_uri)

    def configure(self, config: ServerConfig) -> None:
        self.config = config
        self.validator = SchemaValidator(
            self.registry,
            check_structure=config.check_structure,
            require_xml_declaration=config.require_xml_declaration,
        )

    # ------------------------------------------------------------------
    # Document lifecycle
    # ------------------------------------------------------------------
    def open_document(self, uri: str, text: str, version: int) -> List[ValidationError]:
        self._open_documents[uri] = DocumentState(uri=uri, text=text, version=version)
        self.logger.debug("Opened %s at version %s", uri, version)
        return self.validate(uri)

    def apply_edit(
        self,
        uri: str,
        changes: Sequence[ChangeLike],
        version: int,
    ) -> List[ValidationError]:
        document = self._open_documents.get(uri)
        if document is None:
            self.logger.warning("Dropping edit for %s: document is not open", uri)
            return []
        document.apply_changes(changes, version)
        return self.validate(uri)

    def close_document(self, uri: str) -> None:
        if self._open_documents.pop(uri, None) is not None:
            self.logger.debug("Closed %s", uri)

    def document(self, uri: str) -> Optional[DocumentState]:
        return self._open_documents.get(uri)

    def require(self, uri: str) -> DocumentState:
        document = self._open_documents.get(uri)
        if document is None:
            raise DocumentNotOpenError(f"No open document for {uri}", uri=uri)
        return document

    def open_uris(self) -> List[str]:
        return list(self._open_documents)

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------
    def complete(self, uri: str, position: Position) -> List[CompletionItem]:
        try:
            document = self.require(uri)
        except DocumentNotOpenError as exc:
            self.logger.debug("Completion skipped: %s", exc.message)
            return []
        return self.completion_engine.complete(document.text_before(position))

    def hover(self, uri: str, position: Position) -> Optional[Hover]:
        try:
            document = self.require(uri)
        except DocumentNotOpenError as exc:
            self.logger.debug("Hover skipped: %s", exc.message)
            return None
        line = document.line_at(position.line)
        return self.hover_engine.hover(line, position.line, position.character)

    def validate(self, uri: str) -> List[ValidationError]:
        try:
            document = self.require(uri)
        except DocumentNotOpenError as exc:
            self.logger.debug("Validation skipped: %s", exc.message)
            return []
        try:
            return self.validator.validate(document.text)
        except Exception as exc:  # noqa: BLE001 - validate must always return a list
            self.logger.exception("Validation failed for %s", uri)
            return [
                ValidationError(
                    range=make_range(0, 0, 0, 10),
                    message=f"XML validation error: {exc}",
                    code="internal-error",
                    kind=ErrorKind.INTERNAL,
                )
            ]

    # ------------------------------------------------------------------
    # LSP adapters
    # ------------------------------------------------------------------
    def did_open(self, item: TextDocumentItem) -> List[Diagnostic]:
        return self._to_diagnostics(self.open_document(item.uri, item.text, item.version))

    def did_change(
        self,
        uri: str,
        version: int,
        changes: Sequence[TextDocumentContentChangeEvent],
    ) -> List[Diagnostic]:
        return self._to_diagnostics(self.apply_edit(uri, changes, version))

    def did_close(self, uri: str) -> None:
        self.close_document(uri)

    def diagnostics(self, uri: str) -> List[Diagnostic]:
        return self._to_diagnostics(self.validate(uri))

    def completion(self, params: CompletionParams) -> CompletionList:
        items = self.complete(params.text_document.uri, params.position)
        return CompletionList(is_incomplete=False, items=items)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _to_diagnostics(self, errors: Sequence[ValidationError]) -> List[Diagnostic]:
        return [error.to_diagnostic(self.config.diagnostic_source) for error in errors]

    def _resolve_root(self, root_uri: Optional[str]) -> Path:
        if root_uri:
            try:
                return Path(to_fs_path(root_uri))
            except (TypeError, ValueError):
                return Path(root_uri)
        return Path.cwd()


__all__ = ["WorkspaceIndex"]
