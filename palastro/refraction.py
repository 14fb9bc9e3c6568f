"""Adjust unrefracted positions for atmospheric refraction (A tan Z + B tan^3 Z model)."""

from __future__ import annotations

import math
from collections.abc import Sequence

__all__ = ["refv", "refz"]

# Largest usable zenith distance (degrees).
_D93 = 93.0

# Zenith distance at which one model hands over to the other (radians).
_Z83 = math.radians(83.0)

# Coefficients of the empirical high-ZD model used beyond ZD 83 deg.
_C1 = +0.55445
_C2 = -0.01133
_C3 = +0.00202
_C4 = +0.28385
_C5 = +0.02390

# High-ZD model prediction (degrees) at the hand-over point.
_REF83 = (_C1 + _C2 * 7.0 + _C3 * 49.0) / (1.0 + _C4 * 7.0 + _C5 * 49.0)

# Below about 3 deg elevation the Cartesian correction is held constant.
_ZMIN = 0.05


def refv(vu: Sequence[float], refa: float, refb: float) -> tuple[float, float, float]:
    """Apply refraction to an unrefracted Az/El Cartesian 3-vector.

    ``refa`` and ``refb`` are the tan Z and tan^3 Z coefficients (radians).
    Returns the refracted vector.  One Newton-Raphson iteration is used,
    and the correction is held back below about 3 degrees elevation.
    """
    x, y, z1 = vu

    z = max(z1, _ZMIN)

    zsq = z * z
    rsq = x * x + y * y
    r = math.sqrt(rsq)
    wb = refb * rsq / zsq
    wt = (refa + wb) / (1.0 + (refa + 3.0 * wb) * (zsq + rsq) / zsq)
    d = wt * r / z
    cd = 1.0 - d * d / 2.0
    f = cd * (1.0 - wt)

    return x * f, y * f, cd * (z + d * r) + (z1 - z)


def _refraction_step(zu: float, zl: float, refa: float, refb: float) -> float:
    """One Newton-Raphson correction of the refracted ZD ``zl``."""
    s = math.sin(zl)
    c = math.cos(zl)
    t = s / c
    tsq = t * t
    tcu = t * tsq
    return (zl - zu + refa * t + refb * tcu) / (1.0 + (refa + 3.0 * refb * tsq) / (c * c))


def refz(zu: float, refa: float, refb: float) -> float:
    """Refracted zenith distance for an unrefracted one (radians).

    Uses the A tan Z + B tan^3 Z model with two Newton-Raphson
    iterations up to ZD 83 deg, then a scaled empirical formula.
    Beyond 93 deg the refraction is held at its 93 deg value.
    """
    zu1 = min(zu, _Z83)

    zl = zu1 - _refraction_step(zu1, zu1, refa, refb)
    ref = zu1 - zl + _refraction_step(zu1, zl, refa, refb)

    if zu > zu1:
        e = 90.0 - min(_D93, math.degrees(zu))
        e2 = e * e
        ref = (ref / _REF83) * (_C1 + _C2 * e + _C3 * e2) / (1.0 + _C4 * e + _C5 * e2)

    return zu - ref