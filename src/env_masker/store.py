"""Reveal store — which value spans the user has uncovered this session.

Design goals:
  - Session-scoped: lives as long as the engine, never written to disk
  - Fast: set lookups only, bucketed per document so closing one is O(1)
  - Total: no operation raises
"""

from __future__ import annotations
from collections import defaultdict

from .identity import document_of


class RevealStore:
    """Set of revealed span identities, grouped by document."""

    __slots__ = ("_by_document",)

    def __init__(self) -> None:
        self._by_document: dict[str, set[str]] = defaultdict(set)

    # ------------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------------

    def reveal(self, identity: str) -> None:
        self._by_document[document_of(identity)].add(identity)

    def is_revealed(self, identity: str) -> bool:
        bucket = self._by_document.get(document_of(identity))
        return bucket is not None and identity in bucket

    def clear_all(self) -> None:
        self._by_document.clear()

    def clear_for_document(self, document_id: str) -> int:
        """Forget every identity of one document.  Returns how many went."""
        return len(self._by_document.pop(document_id, ()))

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def size(self) -> int:
        return sum(len(bucket) for bucket in self._by_document.values())

    def dump(self) -> dict[str, list[str]]:
        """Return a sorted copy of the store (for debugging)."""
        return {
            doc: sorted(bucket)
            for doc, bucket in self._by_document.items()
            if bucket
        }

    def __contains__(self, identity: str) -> bool:
        return self.is_revealed(identity)

    def __len__(self) -> int:
        return self.size
