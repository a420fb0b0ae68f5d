"""Events the engine consumes and the instruction it answers with."""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from .types import SelectionChangeKind, Span

if TYPE_CHECKING:
    from .config import DecorationStyle, MaskingConfig
    from .document import Editor, TextDocument


@dataclass(frozen=True, slots=True)
class Activated:
    """Extension start-up; ``editor`` is whatever was already open."""
    editor: Editor | None = None


@dataclass(frozen=True, slots=True)
class ActiveEditorChanged:
    editor: Editor | None


@dataclass(frozen=True, slots=True)
class TextChanged:
    document: TextDocument


@dataclass(frozen=True, slots=True)
class SelectionChanged:
    editor: Editor
    kind: SelectionChangeKind = SelectionChangeKind.UNDEFINED


@dataclass(frozen=True, slots=True)
class DocumentClosed:
    document: TextDocument


@dataclass(frozen=True, slots=True)
class ConfigurationChanged:
    config: MaskingConfig


@dataclass(frozen=True, slots=True)
class ToggleMasking:
    pass


@dataclass(frozen=True, slots=True)
class HideAll:
    pass


Event = Union[
    Activated,
    ActiveEditorChanged,
    TextChanged,
    SelectionChanged,
    DocumentClosed,
    ConfigurationChanged,
    ToggleMasking,
    HideAll,
]


@dataclass(frozen=True, slots=True)
class RenderInstruction:
    """What the rendering side should do after an event.

    ``masks`` is the complete set of spans to hide in the active editor,
    or None to leave the current decorations alone.  ``decoration`` is set
    when the decoration resource must be (re)created before applying them.
    """
    masks: tuple[Span, ...] | None = None
    decoration: DecorationStyle | None = None
    status: str | None = None
