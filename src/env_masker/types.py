"""Core types."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class FileKind(str, Enum):
    """Grammar used to pull values out of a document."""
    ENV = "env"
    JSON = "json"


class SelectionChangeKind(str, Enum):
    """What caused a selection change, as reported by the editor."""
    UNDEFINED = "undefined"    # session restore, file reopen, API calls
    KEYBOARD = "keyboard"
    MOUSE = "mouse"
    COMMAND = "command"


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open [start, end) offset range into a text snapshot."""
    start: int
    end: int

    def contains(self, offset: int) -> bool:
        """Inclusive on both ends, like an editor range containing a position."""
        return self.start <= offset <= self.end

    def intersects(self, start: int, end: int) -> bool:
        """True when [start, end] overlaps or touches this span."""
        return max(self.start, start) <= min(self.end, end)


@dataclass(frozen=True, slots=True)
class Candidate:
    """A value span that may need masking."""
    span: Span
    value: str             # raw text between the span bounds
    kind: FileKind


@dataclass(frozen=True, slots=True)
class Position:
    line: int
    column: int


@dataclass(frozen=True, slots=True)
class Selection:
    """An editor selection as offsets; ``active`` is where the cursor sits."""
    anchor: int
    active: int

    @classmethod
    def caret(cls, offset: int) -> "Selection":
        return cls(anchor=offset, active=offset)

    @property
    def start(self) -> int:
        return min(self.anchor, self.active)

    @property
    def end(self) -> int:
        return max(self.anchor, self.active)

    @property
    def is_empty(self) -> bool:
        return self.anchor == self.active
