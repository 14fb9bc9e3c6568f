"""Angle normalisation helpers."""

from __future__ import annotations

import math
import struct

__all__ = ["ranorm"]

_PACK = struct.Struct("<f")


def _f32(value: float) -> float:
    """Round a float to single precision."""
    return _PACK.unpack(_PACK.pack(value))[0]


def ranorm(angle: float) -> float:
    """Reduce an angle (radians) to the range [0, 2*pi) in single precision."""
    reduced = _f32(math.fmod(_f32(angle), _f32(2.0 * math.pi)))
    if reduced < 0.0:
        reduced = _f32(reduced + 2.0 * math.pi)
    return reduced