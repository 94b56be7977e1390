"""Conversion of msgpack-style setting values to plain Python types.

Each parser takes the incoming value and the setting's current value and
returns the new value. A value of the wrong kind is logged and the current
value is kept.
"""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)

_U64_MAX = 2**64 - 1
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_u64(value: Any) -> bool:
    return _is_int(value) and 0 <= value <= _U64_MAX


def _is_i64(value: Any) -> bool:
    return _is_int(value) and _I64_MIN <= value <= _I64_MAX


def _wrap_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def parse_float(value: Any, current: float) -> float:
    if isinstance(value, float) or _is_i64(value) or _is_u64(value):
        return float(value)
    logger.error("Setting expected an f32, but received %r", value)
    return current


def parse_u64(value: Any, current: int) -> int:
    if _is_u64(value):
        return value
    logger.error("Setting expected a u64, but received %r", value)
    return current


def parse_u32(value: Any, current: int) -> int:
    if _is_u64(value):
        return value & 0xFFFFFFFF
    logger.error("Setting expected a u32, but received %r", value)
    return current


def parse_i32(value: Any, current: int) -> int:
    if _is_i64(value):
        return _wrap_signed(value, 32)
    logger.error("Setting expected an i32, but received %r", value)
    return current


def parse_str(value: Any, current: str) -> str:
    if isinstance(value, str):
        return value
    logger.error("Setting expected a string, but received %r", value)
    return current


def parse_bool(value: Any, current: bool) -> bool:
    if isinstance(value, bool):
        return value
    if _is_u64(value):
        return value != 0
    logger.error("Setting expected a bool or 0/1, but received %r", value)
    return current