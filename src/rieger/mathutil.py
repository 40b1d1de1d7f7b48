"""Numeric helpers: linear interpolation and infinity constants."""

from __future__ import annotations

import math
import numbers

INF32 = math.inf
INF64 = math.inf


def _require_float(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real) or isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be a floating-point value, got {type(value).__name__}")


def lerp(a: float, b: float, t: float) -> float:
    """
    Linear interpolation between a and b. t is not clamped, so values outside
    [0, 1] extrapolate. Equal endpoints are returned unchanged.
    """
    _require_float("a", a)
    _require_float("b", b)
    if a == b:
        return a
    return a * (1.0 - t) + b * t
