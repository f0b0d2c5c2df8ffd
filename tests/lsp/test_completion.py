from __future__ import annotations

from lsprotocol.types import (
    CompletionItemKind,
    InsertTextFormat,
    Position,
    TextDocumentIdentifier,
    TextDocumentPositionParams,
)

from rmcxml.lsp.completion import CompletionEngine
from rmcxml.lsp.workspace import WorkspaceIndex
from rmcxml.schema import SchemaRegistry

from tests.lsp.conftest import open_document, position_of


def test_value_completions_follow_domain_order(small_schema: SchemaRegistry) -> None:
    items = CompletionEngine(small_schema).complete('<Root><Child status="')
    assert [item.label for item in items] == ["open", "closed"]
    assert all(item.kind == CompletionItemKind.EnumMember for item in items)
    assert items[0].detail == "Valid value for status"


def test_free_form_attribute_has_no_value_completions(small_schema: SchemaRegistry) -> None:
    assert CompletionEngine(small_schema).complete('<Root><Child a="') == []


def test_closing_tag_completions_are_innermost_first(small_schema: SchemaRegistry) -> None:
    items = CompletionEngine(small_schema).complete('<Root><Child a="1"></')
    assert [item.label for item in items] == ["Child", "Root"]
    assert items[0].insert_text == "Child>"
    assert items[0].detail == "Close Child element"


def test_closing_tag_stack_spans_previous_lines(small_schema: SchemaRegistry) -> None:
    text = "<Root>\n  <Child\n     a=\"1\">\n    <Entry key=\"k\"></Entry>\n  </"
    items = CompletionEngine(small_schema).complete(text)
    assert [item.label for item in items] == ["Child", "Root"]


def test_closing_tag_completions_deduplicate_names(small_schema: SchemaRegistry) -> None:
    items = CompletionEngine(small_schema).complete("<Root><Child><Child></")
    assert [item.label for item in items] == ["Child", "Root"]


def test_element_completions_expand_required_attributes(small_schema: SchemaRegistry) -> None:
    items = CompletionEngine(small_schema).complete("<Root><")
    assert [item.label for item in items] == ["Child", "Entry"]
    by_label = {item.label: item for item in items}
    assert by_label["Entry"].insert_text == 'Entry key="$1">$2</Entry>'
    assert by_label["Child"].insert_text == "Child>$1</Child>"
    assert by_label["Entry"].insert_text_format == InsertTextFormat.Snippet
    assert by_label["Entry"].kind == CompletionItemKind.Class


def test_top_level_completion_offers_root_element(small_schema: SchemaRegistry) -> None:
    items = CompletionEngine(small_schema).complete("<")
    assert [item.label for item in items] == ["Root"]


def test_leaf_element_offers_no_children(small_schema: SchemaRegistry) -> None:
    assert CompletionEngine(small_schema).complete("<Root><Entry key=\"k\"><") == []


def test_attribute_completions_exclude_existing_and_mark_required(small_schema: SchemaRegistry) -> None:
    engine = CompletionEngine(small_schema)
    items = engine.complete("<Root><Entry ")
    assert [item.label for item in items] == ["key", "status", "note"]
    assert items[0].detail == "key attribute (required)"
    assert items[1].detail == "status attribute"
    assert items[0].insert_text == 'key="$1"'

    remaining = engine.complete('<Root><Entry key="k" ')
    assert [item.label for item in remaining] == ["status", "note"]


def test_sort_text_preserves_declaration_order(small_schema: SchemaRegistry) -> None:
    items = CompletionEngine(small_schema).complete("<Root><Entry ")
    assert [item.sort_text for item in items] == sorted(item.sort_text for item in items)


def test_no_completions_outside_tags(small_schema: SchemaRegistry) -> None:
    assert CompletionEngine(small_schema).complete("<Root>some text") == []


def test_workspace_completion_for_rmc_document(workspace: WorkspaceIndex) -> None:
    document = open_document(workspace, "partial.rmc.xml")
    line, character = position_of('XiContext="', document.text)
    params = TextDocumentPositionParams(
        text_document=TextDocumentIdentifier(uri=document.uri),
        position=Position(line=line, character=character),
    )
    completions = workspace.completion(params)
    labels = [item.label for item in completions.items]
    assert labels == ["error", "warning", "diagnostic", "textstring", "paramobject"]
    assert completions.is_incomplete is False


def test_rmc_entry_skeleton_includes_required_key(workspace: WorkspaceIndex) -> None:
    uri = "file:///tmp/skeleton.rmc.xml"
    workspace.open_document(uri, "<EtaRsccat>\n  <ZetaMessage>\n    <", 1)
    items = workspace.complete(uri, Position(line=2, character=5))
    assert [item.label for item in items] == ["BetaEntry"]
    assert items[0].insert_text == 'BetaEntry PsiKey="$1">$2</BetaEntry>'


def test_rmc_sigma_diag_attributes_mark_both_required(workspace: WorkspaceIndex) -> None:
    uri = "file:///tmp/attrs.rmc.xml"
    workspace.open_document(uri, "<SigmaDiag ", 1)
    items = workspace.complete(uri, Position(line=0, character=11))
    details = {item.label: item.detail for item in items}
    assert details == {
        "PhiObjP": "PhiObjP attribute (required)",
        "ChiObjU": "ChiObjU attribute (required)",
        "PsiObjN": "PsiObjN attribute",
    }


def test_completion_for_unknown_document_is_empty(workspace: WorkspaceIndex) -> None:
    assert workspace.complete("file:///nowhere.rmc.xml", Position(line=0, character=0)) == []
