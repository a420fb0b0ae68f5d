"""YAML/dict config loader for env-masker.

Supports loading from a YAML file or a plain dict (for embedding in a
larger settings file, or for passing editor settings straight through).

Example YAML:

    env_masker:
      enable: true
      mask_color: "#44475aff"     # or a theme color id, e.g. badge.background

The editor-style spellings ``envMasker`` / ``maskColor`` / ``enabled`` are
accepted too.  Values of the wrong shape fall back to the defaults.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

logger = logging.getLogger(__name__)

DEFAULT_ENABLED = True
DEFAULT_MASK_COLOR = "badge.background"

_SECTIONS = ("env_masker", "envMasker")


class ConfigError(Exception):
    """Raised when a config file can't be read."""


@dataclass(frozen=True, slots=True)
class MaskingConfig:
    """Resolved masking settings.  Read-only to the engine."""
    enabled: bool = DEFAULT_ENABLED
    mask_color: str = DEFAULT_MASK_COLOR


@dataclass(frozen=True, slots=True)
class ThemeColor:
    """A color looked up by id in the editor theme."""
    id: str


ColorSpec = Union[ThemeColor, str]     # str is a literal "#RRGGBB[AA]"


@dataclass(frozen=True, slots=True)
class DecorationStyle:
    """Parameters for the decoration that hides masked text."""
    background: ColorSpec
    color: str = "transparent"
    cursor: str = "pointer"


def resolve_color(mask_color: str) -> ColorSpec:
    """Hex literals pass through; anything else is a theme color id."""
    if not mask_color or not mask_color.strip():
        return ThemeColor(DEFAULT_MASK_COLOR)
    mask_color = mask_color.strip()
    if mask_color.startswith("#"):
        return mask_color
    return ThemeColor(mask_color)


def decoration_style(config: MaskingConfig) -> DecorationStyle:
    return DecorationStyle(background=resolve_color(config.mask_color))


def _first(data: dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return None


def load_config(data: dict[str, Any] | None) -> MaskingConfig:
    """Normalize a config dict (from YAML or inline)."""
    if not isinstance(data, dict):
        return MaskingConfig()

    # Support nested under a section key or flat
    for section in _SECTIONS:
        if isinstance(data.get(section), dict):
            data = data[section]
            break

    enabled = _first(data, "enable", "enabled")
    if enabled is None:
        enabled = DEFAULT_ENABLED
    elif not isinstance(enabled, bool):
        logger.warning("ignoring non-boolean enable=%r", enabled)
        enabled = DEFAULT_ENABLED

    color = _first(data, "mask_color", "maskColor")
    if color is None:
        color = DEFAULT_MASK_COLOR
    elif not isinstance(color, str) or not color.strip():
        logger.warning("ignoring unusable mask color %r", color)
        color = DEFAULT_MASK_COLOR

    return MaskingConfig(enabled=enabled, mask_color=color.strip())


def load_from_yaml(path: str | Path) -> MaskingConfig:
    """Load config from a YAML file."""
    import yaml

    path = Path(path).expanduser()
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")
    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    return load_config(data)
