"""Value grammars — pull maskable value spans out of document text.

Two scanners, one per file kind:

    env   KEY=VALUE lines (optionally prefixed with ``export``)
    json  flat "key": "value" string pairs

Both are pure and return candidates in left-to-right order.  Lines that
don't fit the grammar are skipped; empty or whitespace-only values are
never candidates.
"""

from __future__ import annotations
import re
from typing import Callable

from .types import Candidate, FileKind, Span

# Editor line terminators.  ``.`` and ``^``/``$`` in Python only know about
# "\n", so the patterns below spell the line boundaries out.
_EOL = r"\n\r\u2028\u2029"
_LINE_START = rf"(?<![^{_EOL}])"
_LINE_END = rf"(?![^{_EOL}])"

_ENV_LINE = re.compile(
    rf"{_LINE_START}\s*(?:export\s+)?"
    r"(?P<key>[A-Za-z0-9_.\-]+)\s*="
    rf"(?P<value>[^{_EOL}]*){_LINE_END}"
)

# Escapes (backslash + any char) belong to the value, so \" does not end it
_JSON_PAIR = re.compile(
    r'"(?P<key>[^"]+)"\s*:\s*'
    rf'"(?P<value>(?:[^"\\]|\\[^{_EOL}])*)"'
)

# Language ids the editor may assign to dotenv-style files
_ENV_LANGUAGES = frozenset({"properties", "plaintext", "dotenv"})


def _is_blank(value: str) -> bool:
    return not value or not value.strip()


def scan_env(text: str) -> list[Candidate]:
    """Find KEY=VALUE values.  The value is everything after the first '='."""
    candidates: list[Candidate] = []
    for m in _ENV_LINE.finditer(text):
        value = m.group("value")
        if _is_blank(value):
            continue
        end = m.end()
        candidates.append(Candidate(
            span=Span(end - len(value), end),
            value=value,
            kind=FileKind.ENV,
        ))
    return candidates


def scan_json(text: str) -> list[Candidate]:
    """Find string values of "key": "value" pairs, escapes kept verbatim."""
    candidates: list[Candidate] = []
    for m in _JSON_PAIR.finditer(text):
        value = m.group("value")
        if _is_blank(value):
            continue
        # Walk past the key, then the colon, to the value's opening quote
        matched = m.group(0)
        key = m.group("key")
        key_end = matched.find(key) + len(key)
        after_key = matched[key_end:]
        colon = after_key.find(":")
        quote = after_key.find('"', colon + 1)
        start = m.start() + key_end + quote + 1
        candidates.append(Candidate(
            span=Span(start, start + len(value)),
            value=value,
            kind=FileKind.JSON,
        ))
    return candidates


_SCANNERS: dict[FileKind, Callable[[str], list[Candidate]]] = {
    FileKind.ENV: scan_env,
    FileKind.JSON: scan_json,
}


def extract(text: str, kind: FileKind | None) -> list[Candidate]:
    """Run the scanner for ``kind``.  Unknown kinds yield no candidates."""
    scanner = _SCANNERS.get(kind) if kind is not None else None
    if scanner is None:
        return []
    return scanner(text)


def detect_kind(file_name: str, language_id: str = "") -> FileKind | None:
    """Pick a grammar from the file name and the editor's language id."""
    name = file_name.lower()
    if (
        name.endswith(".env")
        or ".env." in name
        or language_id in _ENV_LANGUAGES
    ):
        return FileKind.ENV
    if name.endswith(".json"):
        return FileKind.JSON
    return None
