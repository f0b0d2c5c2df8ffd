"""Whole-document schema and structure validation.

Every pass scans the raw text; nothing is parsed into a tree and all
passes run even when an earlier one already found problems.  The
attribute checks are deliberately line scoped: a required attribute
written on a continuation line of a multi-line tag is not seen.
"""

from __future__ import annotations

import re
from typing import Dict, List, Pattern

from lsprotocol.types import DiagnosticSeverity, Position, Range

from rmcxml.schema import RMC_SCHEMA, SchemaRegistry

from .protocol import ErrorKind, ValidationError, make_range
from .scanner import NAME_PATTERN, scan_tags

_NAME_END = r"(?![\w.:-])"
_OPENING_NAME = re.compile(rf"<({NAME_PATTERN})")
_ASSIGNED_VALUE = re.compile(rf"""({NAME_PATTERN})=(?:"([^"]+)"|'([^']+)')""")
_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_BOOLEAN_VALUES = ("true", "false")


def _document_start() -> Range:
    return make_range(0, 0, 0, 10)


def _position_for(text: str, offset: int) -> Position:
    line = text.count("\n", 0, offset)
    line_start = text.rfind("\n", 0, offset) + 1
    return Position(line=line, character=offset - line_start)


class SchemaValidator:
    """Produces a fresh list of findings for a document on every call."""

    def __init__(
        self,
        registry: SchemaRegistry = RMC_SCHEMA,
        *,
        check_structure: bool = True,
        require_xml_declaration: bool = False,
    ) -> None:
        self.registry = registry
        self.include_structure = check_structure
        self.require_xml_declaration = require_xml_declaration
        self._root_token = re.compile(rf"<{re.escape(registry.root_element)}{_NAME_END}")
        self._required_tokens: Dict[str, Pattern[str]] = {
            element: re.compile(rf"<{re.escape(element)}{_NAME_END}")
            for element in registry.elements_with_required_attributes()
        }

    def validate(self, text: str) -> List[ValidationError]:
        errors: List[ValidationError] = []
        errors.extend(self.check_root(text))
        errors.extend(self.check_lines(text))
        if self.include_structure:
            errors.extend(self.check_structure(text))
        if self.require_xml_declaration:
            errors.extend(self.check_xml_declaration(text))
        return errors

    # ------------------------------------------------------------------
    # Root and per-line schema checks
    # ------------------------------------------------------------------
    def check_root(self, text: str) -> List[ValidationError]:
        if self._root_token.search(text):
            return []
        return [
            ValidationError(
                range=_document_start(),
                message=f'Root element must be "{self.registry.root_element}"',
                code="missing-root",
            )
        ]

    def check_lines(self, text: str) -> List[ValidationError]:
        errors: List[ValidationError] = []
        for line_index, line in enumerate(text.split("\n")):
            errors.extend(self.check_line(line, line_index))
        return errors

    def check_line(self, line: str, line_index: int) -> List[ValidationError]:
        errors: List[ValidationError] = []
        for match in _OPENING_NAME.finditer(line):
            name = match.group(1)
            if not self.registry.is_known_element(name):
                errors.append(
                    ValidationError(
                        range=make_range(line_index, match.start(), line_index, match.end()),
                        message=f"Unknown element: {name}",
                        code="unknown-element",
                    )
                )
        errors.extend(self.check_required_attributes(line, line_index))
        for match in _ASSIGNED_VALUE.finditer(line):
            value = match.group(2) if match.group(2) is not None else match.group(3)
            errors.extend(
                self.check_attribute_value(
                    match.group(1),
                    value,
                    make_range(line_index, match.start(), line_index, match.end()),
                )
            )
        return errors

    def check_required_attributes(self, line: str, line_index: int) -> List[ValidationError]:
        errors: List[ValidationError] = []
        whole_line = make_range(line_index, 0, line_index, len(line))
        for element, token in self._required_tokens.items():
            if not token.search(line):
                continue
            for attribute in self.registry.required_attributes_of(element):
                if f"{attribute}=" in line:
                    continue
                errors.append(
                    ValidationError(
                        range=whole_line,
                        message=f"{element} element requires {attribute} attribute",
                        code="missing-required-attribute",
                    )
                )
        return errors

    def check_attribute_value(self, attribute: str, value: str, span: Range) -> List[ValidationError]:
        errors: List[ValidationError] = []
        domain = self.registry.enum_domain_of(attribute)
        if domain is not None and value not in domain:
            errors.append(
                ValidationError(
                    range=span,
                    message=f'Invalid value "{value}" for attribute {attribute}. Valid values: {", ".join(domain)}',
                    code="invalid-enum-value",
                )
            )
        if self.registry.is_pattern_attribute(attribute) and not _IDENTIFIER.match(value):
            errors.append(
                ValidationError(
                    range=span,
                    message=f"Invalid {attribute} format. Must match pattern: [a-zA-Z_][a-zA-Z0-9_]*",
                    code="invalid-identifier",
                )
            )
        if self.registry.is_boolean_attribute(attribute) and value.lower() not in _BOOLEAN_VALUES:
            errors.append(
                ValidationError(
                    range=span,
                    message=f'Invalid boolean value "{value}" for attribute {attribute}. Must be "true" or "false"',
                    code="invalid-boolean",
                )
            )
        return errors

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------
    def check_structure(self, text: str) -> List[ValidationError]:
        result = scan_tags(text)
        errors: List[ValidationError] = []
        for token in result.unmatched_closers:
            errors.append(
                ValidationError(
                    range=Range(start=_position_for(text, token.start), end=_position_for(text, token.end)),
                    message=f"Closing tag </{token.name}> has no matching opening tag",
                    code="unmatched-closing-tag",
                    kind=ErrorKind.STRUCTURAL_IMBALANCE,
                )
            )
        for frame in result.stack:
            errors.append(
                ValidationError(
                    range=_document_start(),
                    message=f"Unclosed tag: {frame.element_name}",
                    code="unclosed-tag",
                    kind=ErrorKind.STRUCTURAL_IMBALANCE,
                )
            )
        return errors

    def check_xml_declaration(self, text: str) -> List[ValidationError]:
        if text.strip().startswith("<?xml"):
            return []
        return [
            ValidationError(
                range=make_range(0, 0, 0, 5),
                message="XML document should start with XML declaration",
                severity=DiagnosticSeverity.Warning,
                code="missing-xml-declaration",
                kind=ErrorKind.STRUCTURAL_IMBALANCE,
            )
        ]


__all__ = ["SchemaValidator"]
