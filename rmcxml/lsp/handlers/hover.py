"""Hover handler; documentation for the element or attribute name under the cursor."""

from __future__ import annotations

from typing import Optional

from lsprotocol.types import TEXT_DOCUMENT_HOVER, Hover, HoverParams


def register(server) -> None:
    workspace = server.workspace_index

    @server.feature(TEXT_DOCUMENT_HOVER)
    async def hover(ls, params: HoverParams) -> Optional[Hover]:
        return workspace.hover(params.text_document.uri, params.position)
