"""Document synchronisation handlers.

Every accepted open or change republishes the full diagnostic set for the
document; closing a document clears it.
"""

from __future__ import annotations

import logging
from typing import List

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
)

from ..workspace import WorkspaceIndex

logger = logging.getLogger(__name__)


def register(server) -> None:
    workspace: WorkspaceIndex = server.workspace_index

    def publish(ls, uri: str, diagnostics: List[Diagnostic]) -> None:
        logger.debug("Publishing %d diagnostic(s) for %s", len(diagnostics), uri)
        ls.publish_diagnostics(uri, diagnostics)

    @server.feature(TEXT_DOCUMENT_DID_OPEN)
    async def did_open(ls, params: DidOpenTextDocumentParams) -> None:
        publish(ls, params.text_document.uri, workspace.did_open(params.text_document))

    @server.feature(TEXT_DOCUMENT_DID_CHANGE)
    async def did_change(ls, params: DidChangeTextDocumentParams) -> None:
        document = params.text_document
        if not params.content_changes:
            return
        publish(ls, document.uri, workspace.did_change(document.uri, document.version, params.content_changes))

    @server.feature(TEXT_DOCUMENT_DID_CLOSE)
    async def did_close(ls, params: DidCloseTextDocumentParams) -> None:
        workspace.did_close(params.text_document.uri)
        publish(ls, params.text_document.uri, [])
