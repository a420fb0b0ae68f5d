"""Tests for config loading and decoration styles."""

import logging

import pytest

from env_masker.config import (
    DEFAULT_MASK_COLOR,
    ConfigError,
    DecorationStyle,
    MaskingConfig,
    ThemeColor,
    decoration_style,
    load_config,
    load_from_yaml,
    resolve_color,
)


# ── load_config ──────────────────────────────────────────────────────

def test_defaults():
    config = load_config({})
    assert config == MaskingConfig(enabled=True, mask_color="badge.background")


def test_not_a_mapping():
    assert load_config(None) == MaskingConfig()
    assert load_config(["enable"]) == MaskingConfig()


def test_flat():
    config = load_config({"enable": False, "mask_color": "#112233"})
    assert config == MaskingConfig(enabled=False, mask_color="#112233")


def test_nested_section():
    config = load_config({"env_masker": {"enabled": False}, "other": 1})
    assert config.enabled is False
    assert config.mask_color == DEFAULT_MASK_COLOR


def test_editor_spelling():
    config = load_config({"envMasker": {"enable": True, "maskColor": "editor.background"}})
    assert config.mask_color == "editor.background"


def test_bad_enable_falls_back(caplog):
    with caplog.at_level(logging.WARNING):
        config = load_config({"enable": "yes"})
    assert config.enabled is True
    assert "non-boolean" in caplog.text


@pytest.mark.parametrize("color", ["", "   ", 42, ["#fff"]])
def test_bad_color_falls_back(color):
    assert load_config({"mask_color": color}).mask_color == DEFAULT_MASK_COLOR


# ── Colors ───────────────────────────────────────────────────────────

def test_hex_color_is_literal():
    assert resolve_color("#44475aff") == "#44475aff"


def test_theme_color():
    assert resolve_color("badge.background") == ThemeColor("badge.background")


@pytest.mark.parametrize("color", ["", "   "])
def test_blank_color_resolves_to_default(color):
    assert resolve_color(color) == ThemeColor(DEFAULT_MASK_COLOR)
    style = decoration_style(MaskingConfig(mask_color=color))
    assert style.background == ThemeColor(DEFAULT_MASK_COLOR)


def test_decoration_style():
    style = decoration_style(MaskingConfig(mask_color="#000000"))
    assert style == DecorationStyle(background="#000000", color="transparent", cursor="pointer")


# ── YAML ─────────────────────────────────────────────────────────────

def test_load_from_yaml(tmp_path):
    f = tmp_path / "masker.yaml"
    f.write_text("env_masker:\n  enable: false\n  mask_color: '#ff0000'\n")
    assert load_from_yaml(f) == MaskingConfig(enabled=False, mask_color="#ff0000")


def test_empty_yaml_gives_defaults(tmp_path):
    f = tmp_path / "masker.yaml"
    f.write_text("")
    assert load_from_yaml(str(f)) == MaskingConfig()


def test_yaml_not_found(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_from_yaml(tmp_path / "missing.yaml")


def test_invalid_yaml(tmp_path):
    f = tmp_path / "masker.yaml"
    f.write_text("env_masker: [unclosed\n")
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_from_yaml(f)

