"""Persistence of the window's size and position, and parsing of '<w>x<h>'."""

from __future__ import annotations

import json
import logging
import os
import re
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Union

logger = logging.getLogger(__name__)

SETTINGS_FILE = "glyphgrid-settings.json"

_U64_MAX = 2**64 - 1
_UNSIGNED_PATTERN = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class GridSize:
    """A window size in grid cells."""

    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class Position:
    """A window position in physical pixels."""

    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class MaximizedWindow:
    """The window was maximized."""


@dataclass(frozen=True)
class WindowedWindow:
    """The window had a regular size and position."""

    position: Position = field(default_factory=Position)
    size: GridSize = field(default_factory=GridSize)


PersistentWindowSettings = Union[MaximizedWindow, WindowedWindow]

DEFAULT_WINDOW_GEOMETRY = GridSize(width=100, height=50)


def _neovim_data_dir() -> Path:
    if sys.platform == "win32":
        return Path.home() / "AppData" / "local" / "nvim-data"
    base = os.environ.get("XDG_DATA_HOME", "")
    data_home = Path(base) if base and Path(base).is_absolute() else Path.home() / ".local" / "share"
    return data_home / "nvim"


def settings_path() -> Path:
    """Location of the persisted window settings file."""
    return _neovim_data_dir() / SETTINGS_FILE


def parse_window_geometry(input_text: str) -> GridSize:
    """Parse '<width>x<height>' with both dimensions greater than zero."""
    invalid = f"Invalid geometry: {input_text}\nValid format: <width>x<height>"
    dimensions = []
    for part in input_text.split("x"):
        if _UNSIGNED_PATTERN.fullmatch(part) is None or int(part) > _U64_MAX:
            raise ValueError(invalid)
        dimension = int(part)
        if dimension == 0:
            raise ValueError(
                "Invalid geometry: Window dimensions should be greater than 0."
            )
        dimensions.append(dimension)
    if len(dimensions) != 2:
        raise ValueError(invalid)
    width, height = dimensions
    return GridSize(width=width, height=height)


def _require_int(data: dict, key: str, minimum: int | None) -> int:
    if key not in data:
        raise ValueError(f"missing field `{key}`")
    value = data[key]
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"field `{key}` must be an integer, got {value!r}")
    if minimum is not None and value < minimum:
        raise ValueError(f"field `{key}` must be at least {minimum}, got {value}")
    return value


def _position_from_json(data: Any) -> Position:
    if not isinstance(data, dict):
        raise ValueError(f"invalid position: {data!r}")
    return Position(x=_require_int(data, "x", None), y=_require_int(data, "y", None))


def _size_from_json(data: Any) -> GridSize:
    if not isinstance(data, dict):
        raise ValueError(f"invalid size: {data!r}")
    return GridSize(
        width=_require_int(data, "width", 0), height=_require_int(data, "height", 0)
    )


def _window_from_json(data: Any) -> PersistentWindowSettings:
    if not isinstance(data, dict) or "window" not in data:
        raise ValueError("missing field `window`")
    window = data["window"]
    if window == "Maximized":
        return MaximizedWindow()
    if isinstance(window, dict) and list(window) == ["Windowed"]:
        body = window["Windowed"]
        if not isinstance(body, dict):
            raise ValueError(f"invalid windowed settings: {body!r}")
        position = _position_from_json(body["position"]) if "position" in body else Position()
        size = _size_from_json(body["size"]) if "size" in body else GridSize()
        return WindowedWindow(position=position, size=size)
    raise ValueError(f"unknown window variant: {window!r}")


def _window_to_json(window: PersistentWindowSettings) -> dict:
    if isinstance(window, MaximizedWindow):
        return {"window": "Maximized"}
    return {
        "window": {
            "Windowed": {
                "position": {"x": window.position.x, "y": window.position.y},
                "size": {"width": window.size.width, "height": window.size.height},
            }
        }
    }


def load_last_window_settings(path: Path | str | None = None) -> PersistentWindowSettings:
    """Read the saved window settings; raises OSError or ValueError on failure."""
    settings_file = Path(path) if path is not None else settings_path()
    text = settings_file.read_text(encoding="utf-8")
    loaded = _window_from_json(json.loads(text))
    logger.debug("Loaded window settings: %r", loaded)
    if isinstance(loaded, WindowedWindow) and (
        loaded.size.width == 0 or loaded.size.height == 0
    ):
        loaded = WindowedWindow(position=loaded.position, size=DEFAULT_WINDOW_GEOMETRY)
    return loaded


def last_window_geometry(path: Path | str | None = None) -> GridSize:
    """The saved windowed size, or the default if none is usable."""
    try:
        window = load_last_window_settings(path)
    except (OSError, ValueError):
        return DEFAULT_WINDOW_GEOMETRY
    if isinstance(window, WindowedWindow):
        return window.size
    return DEFAULT_WINDOW_GEOMETRY


def save_window_geometry(
    path: Path | str | None,
    maximized: bool,
    grid_size: GridSize | None,
    position: Position | None,
    remember_window_size: bool,
    remember_window_position: bool,
) -> None:
    """Write the window state, honouring which parts should be remembered."""
    window: PersistentWindowSettings
    if maximized and remember_window_size:
        window = MaximizedWindow()
    else:
        size = grid_size if remember_window_size and grid_size is not None else None
        saved_position = (
            position if remember_window_position and position is not None else None
        )
        window = WindowedWindow(
            position=saved_position or Position(),
            size=size or DEFAULT_WINDOW_GEOMETRY,
        )

    settings_file = Path(path) if path is not None else settings_path()
    settings_file.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(_window_to_json(window), separators=(",", ":"))
    logger.debug("Saved Window Settings: %s", text)
    settings_file.write_text(text, encoding="utf-8")