"""Shared protocol helpers for the RMC XML language server."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple

from lsprotocol.types import Diagnostic, DiagnosticSeverity, Position, Range

from rmcxml.schema import ROOT


class ContextKind(Enum):
    """Lexical position of the cursor inside the document."""

    ELEMENT_NAME = auto()
    ATTRIBUTE_NAME = auto()
    ATTRIBUTE_VALUE = auto()
    CLOSING_TAG = auto()
    NONE = auto()


class ErrorKind(Enum):
    """Diagnostic families reported by validation."""

    SCHEMA_VIOLATION = auto()
    STRUCTURAL_IMBALANCE = auto()
    INTERNAL = auto()


@dataclass(slots=True)
class TagStackFrame:
    """One open element seen by the tag scanner."""

    element_name: str
    offset: int = 0


@dataclass(slots=True)
class CursorContext:
    """What the cursor is positioned on and which element encloses it."""

    kind: ContextKind
    enclosing_element: str = ROOT
    tag_element: Optional[str] = None
    attribute_name: Optional[str] = None
    existing_attributes: Tuple[str, ...] = ()

    @property
    def is_none(self) -> bool:
        return self.kind is ContextKind.NONE


@dataclass(slots=True)
class ContentChange:
    """An edit pushed by the host; no range means full replacement."""

    text: str
    range: Optional[Range] = None


@dataclass(slots=True)
class ValidationError:
    """A single finding of a validation pass."""

    range: Range
    message: str
    severity: DiagnosticSeverity = DiagnosticSeverity.Error
    code: Optional[str] = None
    kind: ErrorKind = ErrorKind.SCHEMA_VIOLATION

    def to_diagnostic(self, source: str) -> Diagnostic:
        return Diagnostic(
            range=self.range,
            message=self.message,
            severity=self.severity,
            source=source,
            code=self.code,
        )


def make_range(start_line: int, start_character: int, end_line: int, end_character: int) -> Range:
    return Range(
        start=Position(line=start_line, character=start_character),
        end=Position(line=end_line, character=end_character),
    )


__all__ = [
    "ContextKind",
    "ErrorKind",
    "TagStackFrame",
    "CursorContext",
    "ContentChange",
    "ValidationError",
    "make_range",
    "Position",
    "Range",
]
