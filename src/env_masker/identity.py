"""Span identities — the keys the reveal store tracks.

An identity is built from line/column bounds rather than raw offsets, so an
edit on some other line leaves it unchanged:

    file:///app/.env::3:8-24
    └── document ──┘  │ │  └ end column
                      │ └── start column
                      └── start line

A value whose line or columns move gets a new identity and is hidden again.
"""

from __future__ import annotations
import bisect
import re
from typing import Callable

from .types import Position, Span

# \r\n counts as a single break
_LINE_BREAK = re.compile(r"\r\n|\r|\n")

_IDENTITY_FMT = "{document}::{line}:{start}-{end}"
_SEPARATOR = "::"


class LineIndex:
    """Offset ↔ (line, column) mapping for one text snapshot."""

    __slots__ = ("_line_starts", "_line_ends", "_length")

    def __init__(self, text: str) -> None:
        breaks = list(_LINE_BREAK.finditer(text))
        self._line_starts = [0] + [m.end() for m in breaks]
        # Where each line's content stops, before its terminator
        self._line_ends = [m.start() for m in breaks] + [len(text)]
        self._length = len(text)

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def offset_to_position(self, offset: int) -> Position:
        offset = min(max(offset, 0), self._length)
        line = bisect.bisect_right(self._line_starts, offset) - 1
        column = min(offset, self._line_ends[line]) - self._line_starts[line]
        return Position(line, column)

    def position_to_offset(self, line: int, column: int) -> int:
        if line < 0:
            return 0
        if line >= len(self._line_starts):
            return self._length
        start = self._line_starts[line]
        return min(start + max(column, 0), self._line_ends[line])


def identify(
    document_id: str,
    span: Span,
    offset_to_position: Callable[[int], Position],
) -> str:
    """Build the reveal-tracking key for a span."""
    start = offset_to_position(span.start)
    end = offset_to_position(span.end)
    return _IDENTITY_FMT.format(
        document=document_id,
        line=start.line,
        start=start.column,
        end=end.column,
    )


def document_of(identity: str) -> str:
    """Recover the document part of an identity."""
    # The position suffix never contains the separator, the document might
    return identity.rsplit(_SEPARATOR, 1)[0]
