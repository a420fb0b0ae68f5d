"""Decide which value spans a user interaction uncovers."""

from __future__ import annotations
from typing import Iterable

from .types import SelectionChangeKind, Selection, Span

# Selection changes the user actually caused.  UNDEFINED covers file
# reopen and session restore, which must never reveal anything.
_USER_KINDS = frozenset({
    SelectionChangeKind.MOUSE,
    SelectionChangeKind.KEYBOARD,
    SelectionChangeKind.COMMAND,
})


def reveal_allowed(kind: SelectionChangeKind | None) -> bool:
    """Whether a selection change with this causation may reveal values."""
    return kind in _USER_KINDS


def touches(span: Span, selection: Selection) -> bool:
    """Whether one selection lands on a span.

    A highlighted range counts if the cursor is inside the span or the
    range overlaps it at all, edges included.  A bare caret counts only
    strictly before the span's end: clicking the blank space right of a
    value parks the caret at ``span.end``.
    """
    if not selection.is_empty:
        return (
            span.contains(selection.active)
            or span.intersects(selection.start, selection.end)
        )
    return span.contains(selection.active) and selection.active != span.end


def classify(
    candidates: Iterable[tuple[Span, str]],
    selections: Iterable[Selection],
    allow_reveal: bool,
) -> set[str]:
    """Return identities of the candidates the selections land on.

    Args:
        candidates: ``(span, identity)`` pairs from the current scan.
        selections: Current editor selections.
        allow_reveal: False for anything the user didn't do directly
            (typing, tab switches, initial load); nothing is revealed then.
    """
    if not allow_reveal:
        return set()
    selections = list(selections)
    return {
        identity
        for span, identity in candidates
        if any(touches(span, sel) for sel in selections)
    }
