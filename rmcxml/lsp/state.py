"""Document level state tracking for the RMC XML language server."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence

from lsprotocol.types import Position, Range

from .context import resolve_context
from .protocol import CursorContext

logger = logging.getLogger(__name__)


class ChangeLike(Protocol):
    text: str


@dataclass
class DocumentState:
    """Text and version of one open document.

    Lines are split on ``\\n`` only; a ``\\r`` stays part of its line and
    counts as a column.
    """

    uri: str
    text: str
    version: int
    lines: List[str] = field(init=False)
    _line_offsets: List[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        self._set_text(self.text)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def update(self, text: str, version: int) -> None:
        self._set_text(text)
        self.version = version

    def apply_changes(self, changes: Sequence[ChangeLike], version: int) -> bool:
        """Apply *changes* in order and move to *version*.

        Returns False, leaving the buffer untouched, when *version* does not
        advance past the current one.
        """

        if version <= self.version:
            logger.warning(
                "Ignoring stale edit for %s (version %s, current %s)", self.uri, version, self.version
            )
            return False
        for change in changes:
            change_range: Optional[Range] = getattr(change, "range", None)
            if change_range is None:
                self._set_text(change.text)
                continue
            start = self.offset_at(change_range.start)
            end = self.offset_at(change_range.end)
            if end < start:
                start, end = end, start
            self._set_text(self.text[:start] + change.text + self.text[end:])
        self.version = version
        return True

    def offset_at(self, position: Position) -> int:
        if position.line >= len(self.lines):
            return len(self.text)
        line_index = max(position.line, 0)
        column = min(max(position.character, 0), len(self.lines[line_index]))
        return self._line_offsets[line_index] + column

    def position_at(self, offset: int) -> Position:
        offset = min(max(offset, 0), len(self.text))
        line = self.text.count("\n", 0, offset)
        return Position(line=line, character=offset - self._line_offsets[line])

    def text_before(self, position: Position) -> str:
        return self.text[: self.offset_at(position)]

    def line_at(self, line: int) -> str:
        if 0 <= line < len(self.lines):
            return self.lines[line]
        return ""

    def cursor_context(self, position: Position) -> CursorContext:
        return resolve_context(self.text_before(position))

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _set_text(self, text: str) -> None:
        self.text = text
        self.lines = text.split("\n")
        self._recompute_line_offsets()

    def _recompute_line_offsets(self) -> None:
        offsets: List[int] = [0]
        for line in self.lines[:-1]:
            offsets.append(offsets[-1] + len(line) + 1)
        self._line_offsets = offsets


__all__ = ["ChangeLike", "DocumentState"]
