"""Completion handler."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_COMPLETION,
    CompletionList,
    CompletionOptions,
    CompletionParams,
)

# Characters after which the context can change: a new tag, a closing
# tag, an attribute slot or the start of a value.
TRIGGER_CHARACTERS = ["<", "/", " ", "=", '"']


def register(server) -> None:
    workspace = server.workspace_index

    @server.feature(
        TEXT_DOCUMENT_COMPLETION,
        CompletionOptions(trigger_characters=TRIGGER_CHARACTERS, resolve_provider=False),
    )
    async def completion(ls, params: CompletionParams) -> CompletionList:
        return workspace.completion(params)
