"""Host binding — feeds editor events to the engine and applies the result.

Usage:
    sink = RecordingSink()
    host = MaskerHost.create(sink, config=load_from_yaml("masker.yaml"))

    host.dispatch(Activated(editor))
    host.dispatch(SelectionChanged(editor, SelectionChangeKind.MOUSE))
    sink.current_mask()          # spans still hidden

The engine decides; the host is the only place that talks to the sink.
"""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Sequence

from .config import DecorationStyle, MaskingConfig, decoration_style
from .engine import MaskingEngine
from .events import Event, RenderInstruction
from .types import Span

logger = logging.getLogger(__name__)


class Sink(ABC):
    """Rendering side: owns decorations and shows status messages."""

    @abstractmethod
    def create_decoration(self, style: DecorationStyle) -> Any:
        """Create a decoration resource and return its handle."""
        ...

    @abstractmethod
    def dispose_decoration(self, handle: Any) -> None:
        ...

    @abstractmethod
    def set_mask(self, handle: Any, spans: Sequence[Span]) -> None:
        """Replace the masked spans shown in the active editor."""
        ...

    def show_status(self, message: str) -> None:
        """Show a short informational message."""


class RecordingSink(Sink):
    """In-memory sink: remembers decorations, masks and messages."""

    def __init__(self) -> None:
        self.styles: dict[int, DecorationStyle] = {}
        self.masks: dict[int, tuple[Span, ...]] = {}
        self.messages: list[str] = []
        self.disposed: list[int] = []
        self._next_handle = 0

    def create_decoration(self, style: DecorationStyle) -> int:
        self._next_handle += 1
        self.styles[self._next_handle] = style
        return self._next_handle

    def dispose_decoration(self, handle: int) -> None:
        self.styles.pop(handle, None)
        self.masks.pop(handle, None)
        self.disposed.append(handle)

    def set_mask(self, handle: int, spans: Sequence[Span]) -> None:
        self.masks[handle] = tuple(spans)

    def show_status(self, message: str) -> None:
        self.messages.append(message)

    def current_mask(self) -> tuple[Span, ...]:
        """Spans hidden by the newest live decoration."""
        if not self.styles:
            return ()
        return self.masks.get(max(self.styles), ())


@dataclass
class MaskerHost:
    """Glue between an event source, the engine and a sink."""

    engine: MaskingEngine
    sink: Sink
    handle: Any = field(default=None, init=False)

    @classmethod
    def create(cls, sink: Sink, *, config: MaskingConfig | None = None) -> "MaskerHost":
        """Factory — a fresh engine with its own reveal store."""
        return cls(engine=MaskingEngine(config), sink=sink)

    def dispatch(self, event: Event) -> RenderInstruction:
        instruction = self.engine.handle(event)
        self.apply(instruction)
        return instruction

    def apply(self, instruction: RenderInstruction) -> None:
        if instruction.decoration is not None or self.handle is None:
            self._recreate_decoration(instruction.decoration)
        if instruction.masks is not None:
            self.sink.set_mask(self.handle, instruction.masks)
        if instruction.status:
            self.sink.show_status(instruction.status)

    def _recreate_decoration(self, style: DecorationStyle | None) -> None:
        if style is None:
            style = decoration_style(self.engine.config)
        if self.handle is not None:
            self.sink.dispose_decoration(self.handle)
        self.handle = self.sink.create_decoration(style)
        logger.debug("decoration created background=%r", style.background)
