"""Hover documentation for element and attribute names."""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from lsprotocol.types import Hover, MarkupContent, MarkupKind

from rmcxml.schema import RMC_SCHEMA, ElementDocumentation, SchemaRegistry

from .protocol import make_range
from .scanner import NAME_PATTERN

_ELEMENT_TOKEN = re.compile(rf"</?({NAME_PATTERN})")
_OPENING_TOKEN = re.compile(rf"<({NAME_PATTERN})")
_ATTRIBUTE_TOKEN = re.compile(rf"""({NAME_PATTERN})\s*=\s*(?:"[^"]*"|'[^']*')?""")


class HoverEngine:
    def __init__(self, registry: SchemaRegistry = RMC_SCHEMA) -> None:
        self.registry = registry

    def hover(self, line: str, line_index: int, character: int) -> Optional[Hover]:
        element = self.element_at(line, character)
        if element is not None:
            name, start, end = element
            doc = self.registry.documentation_for(name)
            if doc is not None:
                return self._markdown(self.format_element_documentation(name, doc), line_index, start, end)

        attribute = self.attribute_at(line, character)
        if attribute is not None:
            owner, name, start, end = attribute
            doc = self.registry.documentation_for(owner)
            description = doc.attribute_description(name) if doc else None
            if description:
                return self._markdown(f"**{name}** ({owner})\n\n{description}", line_index, start, end)
        return None

    def element_at(self, line: str, character: int) -> Optional[Tuple[str, int, int]]:
        for match in _ELEMENT_TOKEN.finditer(line):
            start, end = match.span(1)
            if start <= character <= end:
                return match.group(1), start, end
        return None

    def attribute_at(self, line: str, character: int) -> Optional[Tuple[str, str, int, int]]:
        owner = None
        for match in _OPENING_TOKEN.finditer(line[:character]):
            owner = match
        if owner is None:
            return None
        tag_end = line.find(">", owner.end())
        if tag_end == -1:
            tag_end = len(line)
        for match in _ATTRIBUTE_TOKEN.finditer(line, owner.end(), tag_end):
            start, end = match.span(1)
            if start <= character <= end:
                return owner.group(1), match.group(1), start, end
        return None

    def format_element_documentation(self, name: str, doc: ElementDocumentation) -> str:
        parts: List[str] = [f"## {name}", doc.description]
        if doc.details:
            parts.append(doc.details)
        attributes = list(dict.fromkeys([*self.registry.attributes_of(name), *doc.attributes]))
        if attributes:
            required = set(self.registry.required_attributes_of(name))
            rows = ["| Attribute | Required | Description |", "| --- | --- | --- |"]
            for attr in attributes:
                flag = "yes" if attr in required else ""
                rows.append(f"| `{attr}` | {flag} | {self._describe_attribute(doc, attr)} |")
            parts.append("### Attributes\n\n" + "\n".join(rows))
        return "\n\n".join(parts) + "\n"

    def _describe_attribute(self, doc: ElementDocumentation, attribute: str) -> str:
        text = doc.attribute_description(attribute) or ""
        domain = self.registry.enum_domain_of(attribute)
        if domain:
            values = ", ".join(f"`{value}`" for value in domain)
            text = f"{text} Values: {values}" if text else f"Values: {values}"
        return text

    def _markdown(self, value: str, line_index: int, start: int, end: int) -> Hover:
        return Hover(
            contents=MarkupContent(kind=MarkupKind.Markdown, value=value),
            range=make_range(line_index, start, line_index, end),
        )


__all__ = ["HoverEngine"]
