"""Schema-driven completion for the cursor context."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from lsprotocol.types import CompletionItem, CompletionItemKind, InsertTextFormat

from rmcxml.schema import RMC_SCHEMA, SchemaRegistry

from .context import resolve_context
from .protocol import ContextKind, CursorContext
from .scanner import open_elements

logger = logging.getLogger(__name__)


def _unique(names: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(names))


def _sort_key(index: int) -> str:
    # Clients sort by label unless told otherwise; keep declaration order.
    return f"{index:04d}"


class CompletionEngine:
    """Turns a resolved cursor context into completion items."""

    def __init__(self, registry: SchemaRegistry = RMC_SCHEMA) -> None:
        self.registry = registry

    def complete(self, before_cursor: str) -> List[CompletionItem]:
        context = resolve_context(before_cursor)
        logger.debug("Completion context %s for %r", context.kind.name, before_cursor[-50:])
        return self.for_context(context, before_cursor)

    def for_context(self, context: CursorContext, before_cursor: str) -> List[CompletionItem]:
        if context.kind is ContextKind.ATTRIBUTE_VALUE:
            return self.value_completions(context.attribute_name)
        if context.kind is ContextKind.CLOSING_TAG:
            return self.closing_tag_completions(before_cursor)
        if context.kind is ContextKind.ATTRIBUTE_NAME:
            return self.attribute_completions(context.tag_element, context.existing_attributes)
        if context.kind is ContextKind.ELEMENT_NAME:
            return self.element_completions(context.enclosing_element)
        return []

    # ------------------------------------------------------------------
    # Per-context suggestions
    # ------------------------------------------------------------------
    def element_completions(self, parent: str) -> List[CompletionItem]:
        return [
            CompletionItem(
                label=element,
                kind=CompletionItemKind.Class,
                detail=f"{element} element",
                insert_text=self.element_insert_text(element),
                insert_text_format=InsertTextFormat.Snippet,
                sort_text=_sort_key(index),
            )
            for index, element in enumerate(_unique(self.registry.children_of(parent)))
        ]

    def element_insert_text(self, element: str) -> str:
        required = self.registry.required_attributes_of(element)
        if not required:
            return f"{element}>$1</{element}>"
        slots = " ".join(f'{attr}="${index}"' for index, attr in enumerate(required, start=1))
        return f"{element} {slots}>${len(required) + 1}</{element}>"

    def attribute_completions(self, element: Optional[str], existing: Sequence[str]) -> List[CompletionItem]:
        if not element:
            return []
        required = set(self.registry.required_attributes_of(element))
        present = set(existing)
        candidates = [attr for attr in _unique(self.registry.attributes_of(element)) if attr not in present]
        return [
            CompletionItem(
                label=attr,
                kind=CompletionItemKind.Property,
                detail=f"{attr} attribute (required)" if attr in required else f"{attr} attribute",
                insert_text=f'{attr}="$1"',
                insert_text_format=InsertTextFormat.Snippet,
                sort_text=_sort_key(index),
            )
            for index, attr in enumerate(candidates)
        ]

    def value_completions(self, attribute: Optional[str]) -> List[CompletionItem]:
        if not attribute:
            return []
        domain = self.registry.enum_domain_of(attribute)
        if not domain:
            return []
        return [
            CompletionItem(
                label=value,
                kind=CompletionItemKind.EnumMember,
                detail=f"Valid value for {attribute}",
                insert_text=value,
                sort_text=_sort_key(index),
            )
            for index, value in enumerate(_unique(domain))
        ]

    def closing_tag_completions(self, before_cursor: str) -> List[CompletionItem]:
        innermost_first = _unique(reversed(open_elements(before_cursor)))
        return [
            CompletionItem(
                label=tag,
                kind=CompletionItemKind.Class,
                detail=f"Close {tag} element",
                insert_text=f"{tag}>",
                sort_text=_sort_key(index),
            )
            for index, tag in enumerate(innermost_first)
        ]


__all__ = ["CompletionEngine"]
