from __future__ import annotations

from rmcxml.lsp.scanner import iter_tag_tokens, open_elements, scan_tags

from tests.lsp.conftest import DATA_DIR


def test_nested_open_tags_are_stacked_outermost_first() -> None:
    assert open_elements("<Root><Child a=\"1\"><Entry>") == ["Root", "Child", "Entry"]


def test_closing_tag_pops_matching_entry() -> None:
    assert open_elements("<Root><Child></Child>") == ["Root"]


def test_closing_tag_removes_rightmost_entry_with_that_name() -> None:
    # </A> closes the innermost A even though B was pushed after it
    assert open_elements("<A><B><A><C></A>") == ["A", "B", "C"]


def test_mismatched_close_removes_by_name_not_position() -> None:
    assert open_elements("<Root><Child><Entry></Child>") == ["Root", "Entry"]


def test_self_closing_tags_are_ignored() -> None:
    assert open_elements("<Root><SigmaDiag PhiObjP=\"p\" ChiObjU=\"u\"/>") == ["Root"]


def test_unmatched_closer_is_recorded_and_skipped() -> None:
    result = scan_tags("<Root></Missing>")
    assert result.names() == ["Root"]
    assert [token.name for token in result.unmatched_closers] == ["Missing"]
    token = result.unmatched_closers[0]
    assert (token.start, token.end) == (6, 16)


def test_tags_may_span_lines() -> None:
    text = "<Root>\n  <Child\n     a=\"1\">\n"
    assert open_elements(text) == ["Root", "Child"]


def test_unterminated_tag_is_not_a_token() -> None:
    assert open_elements("<Root><Chi") == ["Root"]


def test_processing_instruction_and_comments_are_not_elements() -> None:
    text = "<?xml version=\"1.0\"?><!-- note --><Root>"
    assert [token.name for token in iter_tag_tokens(text)] == ["Root"]


def test_top_is_none_for_empty_stack() -> None:
    assert scan_tags("plain text").top() is None
    assert scan_tags("<Root><Child>").top() == "Child"


def _strict_stack(text: str) -> list:
    stack = []
    for token in iter_tag_tokens(text):
        if token.self_closing:
            continue
        if token.closing:
            assert stack and stack[-1] == token.name
            stack.pop()
        else:
            stack.append(token.name)
    return stack


def test_stack_matches_strict_nesting_on_well_formed_documents() -> None:
    text = (DATA_DIR / "valid.rmc.xml").read_text(encoding="utf-8")
    for offset in range(len(text) + 1):
        assert open_elements(text[:offset]) == _strict_stack(text[:offset]), offset
