"""Tests for the interaction classifier."""

import pytest

from env_masker.classifier import classify, reveal_allowed, touches
from env_masker.types import Selection, SelectionChangeKind, Span

SECRET = Span(10, 16)       # "secret"
CANDIDATES = [(SECRET, "doc::0:10-16")]


# ── Carets ───────────────────────────────────────────────────────────

def test_caret_inside_reveals():
    assert classify(CANDIDATES, [Selection.caret(12)], True) == {"doc::0:10-16"}


def test_caret_at_start_reveals():
    assert touches(SECRET, Selection.caret(10))


def test_caret_at_end_does_not_reveal():
    assert classify(CANDIDATES, [Selection.caret(16)], True) == set()


def test_caret_outside_does_not_reveal():
    assert not touches(SECRET, Selection.caret(9))
    assert not touches(SECRET, Selection.caret(20))


# ── Ranges ───────────────────────────────────────────────────────────

def test_range_inside_reveals():
    assert classify(CANDIDATES, [Selection(11, 13)], True) == {"doc::0:10-16"}


def test_range_overlapping_reveals():
    assert touches(SECRET, Selection(5, 12))
    assert touches(SECRET, Selection(14, 30))


def test_range_touching_edges_reveals():
    assert touches(SECRET, Selection(16, 20))
    assert touches(SECRET, Selection(3, 10))


def test_backwards_range_reveals():
    assert touches(SECRET, Selection(anchor=20, active=12))


def test_range_elsewhere_does_not_reveal():
    assert not touches(SECRET, Selection(0, 9))


# ── Gating ───────────────────────────────────────────────────────────

def test_nothing_revealed_without_permission():
    assert classify(CANDIDATES, [Selection.caret(12)], False) == set()


def test_any_selection_counts():
    other = (Span(30, 35), "doc::1:2-7")
    found = classify([*CANDIDATES, other], [Selection.caret(0), Selection.caret(31)], True)
    assert found == {"doc::1:2-7"}


@pytest.mark.parametrize("kind, allowed", [
    (SelectionChangeKind.MOUSE, True),
    (SelectionChangeKind.KEYBOARD, True),
    (SelectionChangeKind.COMMAND, True),
    (SelectionChangeKind.UNDEFINED, False),
    (None, False),
])
def test_reveal_allowed(kind, allowed):
    assert reveal_allowed(kind) is allowed
