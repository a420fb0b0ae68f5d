"""Tests for the host binding and the recording sink."""

from conftest import masked_values

from env_masker import MaskerHost, MaskingConfig, RecordingSink, ThemeColor
from env_masker.events import (
    Activated,
    ConfigurationChanged,
    DocumentClosed,
    HideAll,
    SelectionChanged,
    ToggleMasking,
)
from env_masker.types import SelectionChangeKind


def test_activation_creates_decoration(editor, env_document):
    sink = RecordingSink()
    host = MaskerHost.create(sink)
    host.dispatch(Activated(editor))

    assert list(sink.styles) == [host.handle]
    style = sink.styles[host.handle]
    assert style.background == ThemeColor("badge.background")
    assert style.color == "transparent"
    assert style.cursor == "pointer"
    assert len(masked_values(env_document, sink.current_mask())) == 5
    assert sink.messages == ["Env Masker activated"]


def test_click_updates_sink(editor, env_document):
    sink = RecordingSink()
    host = MaskerHost.create(sink)
    host.dispatch(Activated(editor))
    editor.click(4, 10)
    host.dispatch(SelectionChanged(editor, SelectionChangeKind.MOUSE))
    assert "abc123" not in masked_values(env_document, sink.current_mask())


def test_color_change_swaps_decoration(editor, env_document):
    sink = RecordingSink()
    host = MaskerHost.create(sink)
    host.dispatch(Activated(editor))
    first = host.handle

    host.dispatch(ConfigurationChanged(MaskingConfig(mask_color="#123456")))

    assert host.handle != first
    assert sink.disposed == [first]
    assert sink.styles[host.handle].background == "#123456"
    assert len(masked_values(env_document, sink.current_mask())) == 5


def test_toggle_posts_status(editor):
    sink = RecordingSink()
    host = MaskerHost.create(sink)
    host.dispatch(Activated(editor))
    host.dispatch(ToggleMasking())
    assert sink.messages[-1] == "Env Masker: Disabled"
    assert sink.current_mask() == ()


def test_close_leaves_decorations_alone(editor, env_document):
    sink = RecordingSink()
    host = MaskerHost.create(sink)
    host.dispatch(Activated(editor))
    before = sink.current_mask()
    host.dispatch(DocumentClosed(env_document))
    assert sink.current_mask() == before


def test_first_instruction_without_activation(editor):
    sink = RecordingSink()
    host = MaskerHost.create(sink, config=MaskingConfig(mask_color="#abcdef"))
    host.dispatch(HideAll())
    assert sink.styles[host.handle].background == "#abcdef"
    assert sink.current_mask() == ()
