"""Env Masker — keep secret values in .env and JSON files hidden until clicked."""

from . import events
from .engine import MaskingEngine
from .store import RevealStore
from .host import MaskerHost, RecordingSink, Sink
from .document import Editor, TextDocument
from .config import (
    ConfigError, DecorationStyle, MaskingConfig, ThemeColor,
    decoration_style, load_config, load_from_yaml,
)
from .grammar import detect_kind, extract
from .identity import LineIndex, identify
from .classifier import classify, reveal_allowed
from .types import Candidate, FileKind, Position, Selection, SelectionChangeKind, Span

__all__ = [
    "events",
    "MaskingEngine",
    "RevealStore",
    "MaskerHost", "RecordingSink", "Sink",
    "Editor", "TextDocument",
    "ConfigError", "DecorationStyle", "MaskingConfig", "ThemeColor",
    "decoration_style", "load_config", "load_from_yaml",
    "detect_kind", "extract",
    "LineIndex", "identify",
    "classify", "reveal_allowed",
    "Candidate", "FileKind", "Position", "Selection", "SelectionChangeKind", "Span",
]
__version__ = "0.1.0"
