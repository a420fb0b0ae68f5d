"""MaskingEngine — the main API.  Scan, classify, reconcile.

Usage:
    from env_masker import MaskingEngine, TextDocument, Editor, events

    engine = MaskingEngine()           # one per editing session
    editor = Editor(TextDocument("file:///app/.env", "API_KEY=abc123\\n"))

    engine.handle(events.Activated(editor)).masks
    # (Span(start=8, end=14),)

    editor.click(0, 10)
    engine.handle(events.SelectionChanged(editor, SelectionChangeKind.MOUSE)).masks
    # ()

Every ``handle`` call runs one full pass to completion and returns a
RenderInstruction; nothing here touches the screen.
"""

from __future__ import annotations
import logging
from typing import Callable

from . import events
from .classifier import classify, reveal_allowed
from .config import MaskingConfig, decoration_style
from .document import Editor, TextDocument
from .grammar import detect_kind, extract
from .identity import identify
from .store import RevealStore
from .types import Candidate, FileKind, Span

logger = logging.getLogger(__name__)

ACTIVATED_MESSAGE = "Env Masker activated"


class MaskingEngine:
    """Tracks the active editor and keeps its value spans masked.

    Revealed spans live in ``store`` until hide-all or until their document
    closes.  Only user-caused selection changes ever reveal anything.
    """

    def __init__(
        self,
        config: MaskingConfig | None = None,
        store: RevealStore | None = None,
        *,
        kind: FileKind | None = None,
    ) -> None:
        self.config = config or MaskingConfig()
        self.store = store if store is not None else RevealStore()
        self.enabled = self.config.enabled
        self.active_editor: Editor | None = None
        # Force one grammar instead of detecting it per document
        self._kind = kind
        self._handlers: dict[type, Callable[..., events.RenderInstruction]] = {
            events.Activated: self._on_activated,
            events.ActiveEditorChanged: self._on_active_editor_changed,
            events.TextChanged: self._on_text_changed,
            events.SelectionChanged: self._on_selection_changed,
            events.DocumentClosed: self._on_document_closed,
            events.ConfigurationChanged: self._on_configuration_changed,
            events.ToggleMasking: self._on_toggle,
            events.HideAll: self._on_hide_all,
        }

    # ------------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------------

    def handle(self, event: events.Event) -> events.RenderInstruction:
        """Dispatch one event and return what should be rendered."""
        handler = self._handlers.get(type(event))
        if handler is None:
            logger.debug("ignoring unknown event %r", event)
            return events.RenderInstruction()
        return handler(event)

    def file_kind(self, document: TextDocument) -> FileKind | None:
        if self._kind is not None:
            return self._kind
        return detect_kind(document.file_name, document.language_id)

    def scan(self, document: TextDocument) -> list[tuple[Candidate, str]]:
        """Candidates of a document paired with their identities."""
        candidates = extract(document.get_text(), self.file_kind(document))
        return [
            (c, identify(document.uri, c.span, document.offset_to_position))
            for c in candidates
        ]

    def reconcile(self, allow_reveal: bool = False) -> tuple[Span, ...] | None:
        """Run one pass over the active editor and return the spans to mask.

        Returns None when there is no active editor.
        """
        editor = self.active_editor
        if editor is None:
            return None
        if not self.enabled:
            return ()

        document = editor.document
        scanned = self.scan(document)
        keyed = [(c.span, identity) for c, identity in scanned]

        for identity in classify(keyed, editor.selections, allow_reveal):
            if not self.store.is_revealed(identity):
                logger.debug("revealing %s", identity)
            self.store.reveal(identity)

        masks = tuple(
            span for span, identity in keyed
            if not self.store.is_revealed(identity)
        )
        logger.debug(
            "pass uri=%s candidates=%d masked=%d reveal=%s",
            document.uri, len(keyed), len(masks), allow_reveal,
        )
        return masks

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def _is_active(self, document: TextDocument) -> bool:
        return self.active_editor is not None and self.active_editor.document is document

    def _on_activated(self, event: events.Activated) -> events.RenderInstruction:
        self.active_editor = event.editor
        return events.RenderInstruction(
            masks=self.reconcile(False),
            decoration=decoration_style(self.config),
            status=ACTIVATED_MESSAGE,
        )

    def _on_active_editor_changed(
        self, event: events.ActiveEditorChanged,
    ) -> events.RenderInstruction:
        self.active_editor = event.editor
        return events.RenderInstruction(masks=self.reconcile(False))

    def _on_text_changed(self, event: events.TextChanged) -> events.RenderInstruction:
        if not self._is_active(event.document):
            return events.RenderInstruction()
        # Typing never reveals; the selection change that follows decides
        return events.RenderInstruction(masks=self.reconcile(False))

    def _on_selection_changed(
        self, event: events.SelectionChanged,
    ) -> events.RenderInstruction:
        if event.editor is not self.active_editor:
            return events.RenderInstruction()
        return events.RenderInstruction(masks=self.reconcile(reveal_allowed(event.kind)))

    def _on_document_closed(self, event: events.DocumentClosed) -> events.RenderInstruction:
        dropped = self.store.clear_for_document(event.document.uri)
        if dropped:
            logger.debug("forgot %d revealed spans of %s", dropped, event.document.uri)
        return events.RenderInstruction()

    def _on_configuration_changed(
        self, event: events.ConfigurationChanged,
    ) -> events.RenderInstruction:
        old, new = self.config, event.config
        if old == new:
            return events.RenderInstruction()
        self.config = new
        if new.enabled != old.enabled:
            self.enabled = new.enabled
        decoration = None
        if new.mask_color != old.mask_color:
            logger.info("mask color changed to %s", new.mask_color)
            decoration = decoration_style(new)
        return events.RenderInstruction(
            masks=self.reconcile(False),
            decoration=decoration,
        )

    def _on_toggle(self, event: events.ToggleMasking) -> events.RenderInstruction:
        self.enabled = not self.enabled
        status = f"Env Masker: {'Enabled' if self.enabled else 'Disabled'}"
        logger.info(status)
        return events.RenderInstruction(masks=self.reconcile(False), status=status)

    def _on_hide_all(self, event: events.HideAll) -> events.RenderInstruction:
        logger.debug("hiding %d revealed spans", self.store.size)
        self.store.clear_all()
        return events.RenderInstruction(masks=self.reconcile(False))
