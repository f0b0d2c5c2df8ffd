"""Cursor context resolution from the text preceding the cursor."""

from __future__ import annotations

import re
from typing import Optional, Tuple

from rmcxml.schema import ROOT

from .protocol import ContextKind, CursorContext
from .scanner import NAME_PATTERN, scan_tags

_WHITESPACE = re.compile(r"\s")
_TAG_HEAD = re.compile(rf"^<({NAME_PATTERN})")
_ATTRIBUTE_ASSIGNMENT = re.compile(rf"({NAME_PATTERN})\s*=")
_OPEN_VALUE = re.compile(rf"""({NAME_PATTERN})\s*=\s*(?:"[^"]*|'[^']*)$""")
_QUOTED = re.compile(r""""[^"]*"|'[^']*'""")


def unterminated_tag(before_cursor: str) -> Optional[str]:
    """Return the tag text from the most recent unmatched ``<``, if any."""

    last_open = before_cursor.rfind("<")
    if last_open == -1 or last_open < before_cursor.rfind(">"):
        return None
    return before_cursor[last_open:]


def is_in_attribute_value(before_cursor: str) -> bool:
    tag = unterminated_tag(before_cursor)
    if tag is None:
        return False
    return tag.count('"') % 2 == 1 or tag.count("'") % 2 == 1


def is_in_closing_tag(before_cursor: str) -> bool:
    return before_cursor.endswith("</")


def is_in_attribute_name(before_cursor: str) -> bool:
    tag = unterminated_tag(before_cursor)
    if tag is None or tag.startswith("</"):
        return False
    if not _WHITESPACE.search(tag):
        return False
    return not is_in_attribute_value(before_cursor) and not tag.endswith("=")


def is_in_element_name(before_cursor: str) -> bool:
    tag = unterminated_tag(before_cursor)
    if tag is None:
        return False
    return not _WHITESPACE.search(tag) and not tag.startswith("</")


def classify(before_cursor: str) -> ContextKind:
    # Checked in this order because the conditions overlap.
    if is_in_attribute_value(before_cursor):
        return ContextKind.ATTRIBUTE_VALUE
    if is_in_closing_tag(before_cursor):
        return ContextKind.CLOSING_TAG
    if is_in_attribute_name(before_cursor):
        return ContextKind.ATTRIBUTE_NAME
    if is_in_element_name(before_cursor):
        return ContextKind.ELEMENT_NAME
    return ContextKind.NONE


def enclosing_element(before_cursor: str) -> str:
    return scan_tags(before_cursor).top() or ROOT


def existing_attributes(tag: str) -> Tuple[str, ...]:
    """Attribute names already assigned inside an unterminated tag."""

    unquoted = _QUOTED.sub("", tag)
    seen = dict.fromkeys(match.group(1) for match in _ATTRIBUTE_ASSIGNMENT.finditer(unquoted))
    return tuple(seen)


def resolve_context(before_cursor: str) -> CursorContext:
    kind = classify(before_cursor)
    if kind is ContextKind.NONE:
        return CursorContext(kind=kind, enclosing_element=enclosing_element(before_cursor))

    tag = unterminated_tag(before_cursor) or ""
    head = _TAG_HEAD.match(tag)
    context = CursorContext(
        kind=kind,
        enclosing_element=enclosing_element(before_cursor),
        tag_element=head.group(1) if head else None,
    )
    if kind is ContextKind.ATTRIBUTE_VALUE:
        value = _OPEN_VALUE.search(tag)
        context.attribute_name = value.group(1) if value else None
    elif kind in (ContextKind.ATTRIBUTE_NAME, ContextKind.ELEMENT_NAME):
        context.existing_attributes = existing_attributes(tag)
    return context


__all__ = [
    "unterminated_tag",
    "is_in_attribute_value",
    "is_in_closing_tag",
    "is_in_attribute_name",
    "is_in_element_name",
    "classify",
    "enclosing_element",
    "existing_attributes",
    "resolve_context",
]
