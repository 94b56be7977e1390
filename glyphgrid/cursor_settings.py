"""Cursor animation and visual-effect settings."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

SETTING_PREFIX = "cursor"


class VfxMode(enum.Enum):
    """Visual effect drawn around the cursor; the value is its setting name."""

    SONICBOOM = "sonicboom"
    RIPPLE = "ripple"
    WIREFRAME = "wireframe"
    RAILGUN = "railgun"
    TORPEDO = "torpedo"
    PIXIEDUST = "pixiedust"
    DISABLED = ""

    @property
    def is_highlight(self) -> bool:
        return self in _HIGHLIGHT_MODES

    @property
    def is_trail(self) -> bool:
        return self in _TRAIL_MODES


_HIGHLIGHT_MODES = frozenset({VfxMode.SONICBOOM, VfxMode.RIPPLE, VfxMode.WIREFRAME})
_TRAIL_MODES = frozenset({VfxMode.RAILGUN, VfxMode.TORPEDO, VfxMode.PIXIEDUST})


def parse_vfx_mode(value: Any, current: VfxMode) -> VfxMode:
    """Return the mode named by ``value``; keep ``current`` if it names none."""
    if not isinstance(value, str):
        logger.error("Expected a VfxMode string, but received %r", value)
        return current
    try:
        return VfxMode(value)
    except ValueError:
        logger.error("Expected a VfxMode name, but received %r", value)
        return current


def vfx_mode_to_value(mode: VfxMode) -> str:
    """The setting value that names ``mode``."""
    return mode.value


@dataclass
class CursorSettings:
    """How the cursor moves and which effect accompanies it."""

    antialiasing: bool = True
    animation_length: float = 0.06
    distance_length_adjust: bool = True
    animate_in_insert_mode: bool = True
    animate_command_line: bool = True
    trail_size: float = 0.7
    unfocused_outline_width: float = 1.0 / 8.0

    vfx_mode: VfxMode = VfxMode.DISABLED
    vfx_opacity: float = 200.0
    vfx_particle_lifetime: float = 1.2
    vfx_particle_density: float = 7.0
    vfx_particle_speed: float = 10.0
    vfx_particle_phase: float = 1.5
    vfx_particle_curl: float = 1.0