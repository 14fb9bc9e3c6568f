"""Conversion from supergalactic to galactic coordinates."""

from __future__ import annotations

import math

__all__ = ["supgal"]

_TWO_PI = 2.0 * math.pi

# Galactic to supergalactic rotation matrix (de Vaucouleurs system).
_GAL_TO_SUPERGAL = (
    (-0.735742574804, +0.677261296414, +0.000000000000),
    (-0.074553778365, -0.080991471307, +0.993922590400),
    (+0.673145302109, +0.731271165817, +0.110081262225),
)


def _spherical_to_cartesian(a: float, b: float) -> tuple[float, float, float]:
    cb = math.cos(b)
    return math.cos(a) * cb, math.sin(a) * cb, math.sin(b)


def _cartesian_to_spherical(x: float, y: float, z: float) -> tuple[float, float]:
    d2 = x * x + y * y
    theta = 0.0 if d2 == 0.0 else math.atan2(y, x)
    phi = 0.0 if z == 0.0 else math.atan2(z, math.sqrt(d2))
    return theta, phi


def _anp(a: float) -> float:
    w = math.fmod(a, _TWO_PI)
    return w + _TWO_PI if w < 0.0 else w


def _anpm(a: float) -> float:
    w = math.fmod(a, _TWO_PI)
    if abs(w) >= math.pi:
        w -= math.copysign(_TWO_PI, a)
    return w


def supgal(dsl: float, dsb: float) -> tuple[float, float]:
    """Convert supergalactic longitude and latitude to IAU 1958 galactic.

    Angles are in radians.  Returns ``(dl, db)`` with ``dl`` in [0, 2pi)
    and ``db`` in [-pi, pi).
    """
    v1 = _spherical_to_cartesian(dsl, dsb)
    # Supergalactic to galactic: apply the transpose of the matrix.
    v2 = tuple(sum(row[i] * comp for row, comp in zip(_GAL_TO_SUPERGAL, v1)) for i in range(3))
    dl, db = _cartesian_to_spherical(*v2)
    return _anp(dl), _anpm(db)