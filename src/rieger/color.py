"""Packed 0xAARRGGBB colors to and from RGBA channels."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

U8_MAX = 0xFF
U32_MAX = 0xFFFFFFFF

T = TypeVar("T", int, float)


@dataclass(frozen=True)
class RGBA(Generic[T]):
    """One color as red, green, blue and alpha channels."""

    r: T
    g: T
    b: T
    a: T

    def as_tuple(self) -> tuple[T, T, T, T]:
        return (self.r, self.g, self.b, self.a)


def _check_packed(value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Packed color must be an int, got {type(value).__name__}")
    if not 0 <= value <= U32_MAX:
        raise ValueError(f"Packed color out of range: {value:#x}")


def _unpack(value: int) -> tuple[int, int, int, int]:
    """Split into (r, g, b, a) bytes."""
    _check_packed(value)
    alpha = (value >> 24) & U8_MAX
    red = (value >> 16) & U8_MAX
    green = (value >> 8) & U8_MAX
    blue = value & U8_MAX
    return red, green, blue, alpha


def hex_to_rgba(value: int) -> RGBA[float]:
    """Unpack 0xAARRGGBB into normalized float channels (byte / 255)."""
    r, g, b, a = _unpack(value)
    return RGBA(r / 255.0, g / 255.0, b / 255.0, a / 255.0)


def hex_to_rgba_bytes(value: int) -> RGBA[int]:
    """Unpack 0xAARRGGBB into integer channels 0..255."""
    return RGBA(*_unpack(value))


def _to_byte(channel: float) -> int:
    """Scale to 0..255, truncating toward zero. NaN maps to 0, infinities to the bounds."""
    if math.isnan(channel):
        return 0
    scaled = channel * 255.0
    if scaled >= U8_MAX:
        return U8_MAX
    if scaled <= 0:
        return 0
    return int(scaled)


def rgba_to_hex(r: float, g: float, b: float, a: float) -> int:
    """Pack normalized float channels into 0xAARRGGBB."""
    return (_to_byte(a) << 24) | (_to_byte(r) << 16) | (_to_byte(g) << 8) | _to_byte(b)
