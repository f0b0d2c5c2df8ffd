"""Exceptions raised by the RMC XML tooling.

Problems found *in* a document are reported as
:class:`rmcxml.lsp.protocol.ValidationError` values, never raised.  The
classes here cover everything else: inconsistent schema tables, requests
for buffers that are not open, and unreadable settings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ErrorLocation:
    """Where an error points; ``uri`` may be a file path for settings files."""

    uri: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None

    @property
    def known(self) -> bool:
        return self.uri is not None

    def __str__(self) -> str:
        parts = [self.uri or "<unknown>"]
        if self.line is not None:
            parts.append(str(self.line))
            if self.column is not None:
                parts.append(str(self.column))
        return ":".join(parts)


class RmcError(Exception):
    """Base class; subclasses fix ``code`` so callers can branch on it."""

    code: str = "rmc-error"
    hint: Optional[str] = None

    def __init__(
        self,
        message: str,
        *,
        uri: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
        code: Optional[str] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.location = ErrorLocation(uri=uri, line=line, column=column)
        if code is not None:
            self.code = code
        if hint is not None:
            self.hint = hint

    @property
    def uri(self) -> Optional[str]:
        return self.location.uri

    def format(self) -> str:
        text = f"[{self.code}] {self.message}"
        if self.location.known:
            text = f"{self.location}: {text}"
        if self.hint:
            text = f"{text} (hint: {self.hint})"
        return text


class SchemaError(RmcError):
    """Schema tables contradict each other."""

    code = "schema-error"


class DocumentNotOpenError(RmcError):
    """A request named a document that has no open buffer."""

    code = "document-not-open"


class ConfigError(RmcError):
    """Settings could not be read or hold a value of the wrong type."""

    code = "config-error"


__all__ = [
    "RmcError",
    "SchemaError",
    "DocumentNotOpenError",
    "ConfigError",
    "ErrorLocation",
]
