"""Tolerant tag scanner shared by context resolution and validation.

The scanner never builds a tree.  It walks ``<name ...>`` tokens left to
right and keeps a list of open element names:

* ``</name ...>`` removes the *rightmost* open entry called ``name``, which
  is not necessarily the last one pushed.  A closer with no such entry is
  reported as unmatched and otherwise ignored.
* ``<name .../>`` is seen but neither pushed nor popped.
* any other ``<name ...>`` is pushed.

Malformed, half-typed documents therefore still produce a useful stack.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from .protocol import TagStackFrame

NAME_PATTERN = r"[A-Za-z_][\w.:-]*"

_TAG_TOKEN = re.compile(rf"<(/?)({NAME_PATTERN})[^>]*>")


@dataclass(slots=True)
class TagToken:
    name: str
    start: int
    end: int
    closing: bool
    self_closing: bool


@dataclass
class ScanResult:
    """Open elements left after a scan plus the closers that matched nothing."""

    stack: List[TagStackFrame] = field(default_factory=list)
    unmatched_closers: List[TagToken] = field(default_factory=list)

    def names(self) -> List[str]:
        return [frame.element_name for frame in self.stack]

    def top(self) -> Optional[str]:
        return self.stack[-1].element_name if self.stack else None


def iter_tag_tokens(text: str) -> Iterator[TagToken]:
    for match in _TAG_TOKEN.finditer(text):
        token = match.group(0)
        yield TagToken(
            name=match.group(2),
            start=match.start(),
            end=match.end(),
            closing=bool(match.group(1)),
            self_closing=token.endswith("/>"),
        )


def scan_tags(text: str) -> ScanResult:
    result = ScanResult()
    stack = result.stack
    for token in iter_tag_tokens(text):
        if token.closing:
            index = _last_index_of(stack, token.name)
            if index is None:
                result.unmatched_closers.append(token)
            else:
                del stack[index]
        elif not token.self_closing:
            stack.append(TagStackFrame(element_name=token.name, offset=token.start))
    return result


def open_elements(text: str) -> List[str]:
    """Names still open at the end of *text*, outermost first."""

    return scan_tags(text).names()


def _last_index_of(stack: List[TagStackFrame], name: str) -> Optional[int]:
    for index in range(len(stack) - 1, -1, -1):
        if stack[index].element_name == name:
            return index
    return None


__all__ = ["NAME_PATTERN", "TagToken", "ScanResult", "iter_tag_tokens", "scan_tags", "open_elements"]
