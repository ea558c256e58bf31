from __future__ import annotations

import json
from dataclasses import dataclass
import logging
import os
from pathlib import Path

import regex

from lrc2ass.style import (
    DEFAULT_LONG_TEXT_SECONDARY_COLOR,
    DEFAULT_PRIMARY_COLOR,
    DEFAULT_SECONDARY_COLOR,
    SubtitleStyle,
)

logger = logging.getLogger(__name__)

# [AA]RRGGBB; \p{ASCII_Hex_Digit} keeps fullwidth digits and letters out
_COLOR_RE = regex.compile(r"#?(\p{ASCII_Hex_Digit}{2})?\p{ASCII_Hex_Digit}{6}")

_COLOR_KEYS = ("primary_color", "secondary_color", "long_text_secondary_color")


def _config_dir() -> Path:
    xdg = os.getenv("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "lrc2ass"
    return Path.home() / ".config" / "lrc2ass"


def _config_file() -> Path:
    return _config_dir() / "config.json"


def validate_color(value: str) -> str:
    """Return the color as upper-case [AA]RRGGBB without '#', or raise ValueError."""
    v = value.strip()
    if not _COLOR_RE.fullmatch(v):
        raise ValueError(f"Color must be RRGGBB or AARRGGBB hex: {value!r}")
    return v.lstrip("#").upper()


@dataclass(frozen=True)
class AppConfig:
    config_dir: Path

    # Colors, [AA]RRGGBB
    primary_color: str
    secondary_color: str
    long_text_secondary_color: str

    @property
    def style(self) -> SubtitleStyle:
        return SubtitleStyle(
            primary_color=self.primary_color,
            secondary_color=self.secondary_color,
            long_text_secondary_color=self.long_text_secondary_color,
        )


def _read_config_file(cfg_path: Path) -> dict[str, str]:
    if not cfg_path.exists():
        return {}
    try:
        data = json.loads(cfg_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable config %s: %s", cfg_path, e)
        return {}
    if not isinstance(data, dict):
        return {}
    return {k: str(v) for k, v in data.items()}


def _pick_color(key: str, file_values: dict[str, str], default: str) -> str:
    # Priority: LRC2ASS_<KEY> → config.json → built-in default
    env_value = os.getenv(f"LRC2ASS_{key.upper()}")
    for source, raw in (("env", env_value), ("config", file_values.get(key))):
        if not raw:
            continue
        try:
            return validate_color(raw)
        except ValueError as e:
            logger.warning("Ignoring %s %s: %s", source, key, e)
    return default


def load_config() -> AppConfig:
    config_dir = _config_dir()
    file_values = _read_config_file(config_dir / "config.json")
    return AppConfig(
        config_dir=config_dir,
        primary_color=_pick_color("primary_color", file_values, DEFAULT_PRIMARY_COLOR),
        secondary_color=_pick_color("secondary_color", file_values, DEFAULT_SECONDARY_COLOR),
        long_text_secondary_color=_pick_color(
            "long_text_secondary_color", file_values, DEFAULT_LONG_TEXT_SECONDARY_COLOR
        ),
    )


def save_config_colors(**colors: str | None) -> Path:
    cfg_path = _config_file()
    cfg_path.parent.mkdir(parents=True, exist_ok=True)
    data = _read_config_file(cfg_path)
    for key, value in colors.items():
        if key not in _COLOR_KEYS:
            raise ValueError(f"Unknown color setting: {key}")
        if value is not None:
            data[key] = validate_color(value)
    cfg_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    return cfg_path
