"""Parsing of the 'guifont' setting into font options."""

from __future__ import annotations

import enum
import re
import sys
from dataclasses import dataclass, field

DEFAULT_FONT_SIZE = 14.0
_F32_EPSILON = 2.0**-23

_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.IGNORECASE,
)


def points_to_pixels(value: float) -> float:
    """Convert a size in points to pixels at the standard 96 dpi."""
    if sys.platform == "darwin":
        return value
    pixels_per_inch = 96.0
    points_per_inch = 72.0
    return value * (pixels_per_inch / points_per_inch)


def parse_font_name(font_name: str) -> str:
    """Unescape a font name: '_' becomes a space and '\\' escapes the next character."""
    chars = iter(font_name)
    result = []
    for ch in chars:
        if ch == "\\":
            escaped = next(chars, None)
            if escaped is None:
                break
            result.append(escaped)
        elif ch == "_":
            result.append(" ")
        else:
            result.append(ch)
    return "".join(result)


class FontEdging(enum.Enum):
    ANTI_ALIAS = "antialias"
    SUBPIXEL_ANTI_ALIAS = "subpixelantialias"
    ALIAS = "alias"

    @classmethod
    def parse(cls, value: str) -> FontEdging:
        if value == "antialias":
            return cls.ANTI_ALIAS
        if value == "subpixelantialias":
            return cls.SUBPIXEL_ANTI_ALIAS
        return cls.ALIAS


class FontHinting(enum.Enum):
    FULL = "full"
    NORMAL = "normal"
    SLIGHT = "slight"
    NONE = "none"

    @classmethod
    def parse(cls, value: str) -> FontHinting:
        if value in ("full", "normal", "slight"):
            return cls(value)
        return cls.NONE


def _parse_size(text: str) -> float | None:
    if _FLOAT_PATTERN.fullmatch(text) is None:
        return None
    return float(text)


@dataclass(eq=False)
class FontOptions:
    """Font family list, size and style flags derived from 'guifont'."""

    font_list: list[str] = field(default_factory=list)
    size: float = field(default_factory=lambda: points_to_pixels(DEFAULT_FONT_SIZE))
    bold: bool = False
    italic: bool = False
    allow_float_size: bool = False
    hinting: FontHinting = FontHinting.FULL
    edging: FontEdging = FontEdging.ANTI_ALIAS

    @classmethod
    def parse(cls, guifont_setting: str) -> FontOptions:
        options = cls()
        parts = [part for part in guifont_setting.split(":") if part]
        if not parts:
            return options

        font_list = [parse_font_name(name) for name in parts[0].split(",") if name]
        if font_list:
            options.font_list = font_list

        for part in parts[1:]:
            if part.startswith("#h-"):
                options.hinting = FontHinting.parse(part[3:])
            elif part.startswith("#e-"):
                options.edging = FontEdging.parse(part[3:])
            elif part.startswith("h") and len(part) > 1:
                if "." in part:
                    options.allow_float_size = True
                size = _parse_size(part[1:])
                if size is not None:
                    options.size = points_to_pixels(size)
            elif part == "b":
                options.bold = True
            elif part == "i":
                options.italic = True

        return options

    def primary_font(self) -> str | None:
        return self.font_list[0] if self.font_list else None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FontOptions):
            return NotImplemented
        return (
            self.font_list == other.font_list
            and abs(self.size - other.size) < _F32_EPSILON
            and self.bold == other.bold
            and self.italic == other.italic
            and self.edging == other.edging
            and self.hinting == other.hinting
        )