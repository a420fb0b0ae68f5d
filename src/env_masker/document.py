"""In-process document and editor — what an editor host would hand the engine.

Usage:
    doc = TextDocument.open(".env")
    editor = Editor(doc)
    editor.select(Selection.caret(12))
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path

from .identity import LineIndex
from .types import Position, Selection

_LANGUAGES = {
    ".json": "json",
    ".jsonc": "jsonc",
    ".properties": "properties",
    ".env": "dotenv",
}


class TextDocument:
    """A mutable text buffer with a stable URI."""

    __slots__ = ("uri", "file_name", "language_id", "_text", "_index", "version")

    def __init__(
        self,
        uri: str,
        text: str = "",
        *,
        file_name: str | None = None,
        language_id: str = "plaintext",
    ) -> None:
        self.uri = uri
        self.file_name = file_name if file_name is not None else uri
        self.language_id = language_id
        self._text = text
        self._index = LineIndex(text)
        self.version = 1

    @classmethod
    def open(cls, path: str | Path, *, language_id: str | None = None) -> "TextDocument":
        """Read a file from disk, guessing the language id from its suffix."""
        path = Path(path).expanduser().resolve()
        if language_id is None:
            language_id = _LANGUAGES.get(path.suffix.lower(), "plaintext")
        # Keep \r\n and lone \r as they are on disk
        with open(path, encoding="utf-8", newline="") as f:
            text = f.read()
        return cls(
            path.as_uri(),
            text,
            file_name=str(path),
            language_id=language_id,
        )

    def get_text(self) -> str:
        return self._text

    def offset_to_position(self, offset: int) -> Position:
        return self._index.offset_to_position(offset)

    def position_to_offset(self, line: int, column: int) -> int:
        return self._index.position_to_offset(line, column)

    @property
    def line_count(self) -> int:
        return self._index.line_count

    def replace(self, start: int, end: int, new_text: str) -> None:
        """Replace ``text[start:end]`` and bump the version."""
        self.set_text(self._text[:start] + new_text + self._text[end:])

    def set_text(self, text: str) -> None:
        self._text = text
        self._index = LineIndex(text)
        self.version += 1

    def __repr__(self) -> str:
        return f"TextDocument({self.uri!r}, version={self.version})"


@dataclass(eq=False)
class Editor:
    """A view onto a document plus the user's current selections."""

    document: TextDocument
    selections: list[Selection] = field(default_factory=lambda: [Selection.caret(0)])

    def select(self, *selections: Selection) -> None:
        self.selections = list(selections)

    def click(self, line: int, column: int) -> Selection:
        """Put a bare caret at a line/column and return it."""
        caret = Selection.caret(self.document.position_to_offset(line, column))
        self.selections = [caret]
        return caret
