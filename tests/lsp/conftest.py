from __future__ import annotations

from pathlib import Path
from typing import Tuple

import pytest
from lsprotocol.types import TextDocumentItem

from rmcxml.lsp.workspace import WorkspaceIndex
from rmcxml.schema import ROOT, ElementDocumentation, SchemaRegistry

DATA_DIR = Path(__file__).parent / "data"


def _make_uri(path: Path) -> str:
    return path.resolve().as_uri()


@pytest.fixture()
def workspace() -> WorkspaceIndex:
    root_uri = _make_uri(DATA_DIR)
    ws = WorkspaceIndex(root_uri)
    ws.set_root(root_uri)
    return ws


@pytest.fixture()
def small_schema() -> SchemaRegistry:
    return make_small_schema()


def make_small_schema() -> SchemaRegistry:
    """A compact dialect: Root > Child/Entry, with an enumerated ``status``."""

    return SchemaRegistry(
        hierarchy={ROOT: ("Root",), "Root": ("Child", "Entry"), "Child": ("Entry",)},
        attributes={"Child": ("a", "status"), "Entry": ("key", "status", "note")},
        required={"Entry": ("key",)},
        enums={"status": ("open", "closed")},
        documentation={
            "Entry": ElementDocumentation(
                description="A keyed entry",
                attributes={"key": "Unique entry key", "status": "Lifecycle state"},
            ),
        },
    )


def open_document(workspace: WorkspaceIndex, filename: str, *, version: int = 1) -> TextDocumentItem:
    path = DATA_DIR / filename
    text = path.read_text(encoding="utf-8")
    item = TextDocumentItem(
        uri=_make_uri(path),
        language_id="rmcxml",
        version=version,
        text=text,
    )
    workspace.did_open(item)
    return item


def position_of(snippet: str, text: str) -> Tuple[int, int]:
    """Line and character just after the first occurrence of *snippet*."""

    for idx, line in enumerate(text.split("\n")):
        col = line.find(snippet)
        if col != -1:
            return idx, col + len(snippet)
    raise AssertionError(f"Snippet '{snippet}' not found in document")


__all__ = ["workspace", "small_schema", "make_small_schema", "open_document", "position_of", "DATA_DIR"]
