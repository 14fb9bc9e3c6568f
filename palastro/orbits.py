"""Orbital elements from heliocentric position and velocity."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

__all__ = ["OrbitError", "OrbitalElements", "UniversalElements", "pv2el", "pv2ue"]

# Seconds per day.
_SPD = 86400.0

# Gaussian gravitational constant.
_GCON = 0.01720209895

# Sin and cos of the J2000 mean obliquity (IAU 1976).
_SE = 0.3977771559319137
_CE = 0.9174820620691818

# How close to unity the eccentricity must be to count as a parabola.
_PARAB = 1.0e-8

_TWO_PI = 2.0 * math.pi


class OrbitError(ValueError):
    """Raised when elements cannot be formed; ``status`` carries the reason code."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status


@dataclass(frozen=True)
class OrbitalElements:
    """Heliocentric osculating elements, J2000 ecliptic and equinox.

    ``jform`` is the element set actually returned: 1 (major planet),
    2 (minor planet) or 3 (comet).  ``aorl`` is ``None`` for ``jform`` 3
    and ``dm`` is ``None`` unless ``jform`` is 1.
    """

    jform: int
    epoch: float
    orbinc: float
    anode: float
    perih: float
    aorq: float
    e: float
    aorl: float | None = None
    dm: float | None = None


@dataclass(frozen=True)
class UniversalElements:
    """Universal orbital elements for the method of universal variables.

    Velocities are in AU per canonical day.
    """

    cm: float
    alpha: float
    t0: float
    r0: tuple[float, float, float]
    v0: tuple[float, float, float]
    r: float
    rdv: float
    t: float
    psi: float = 0.0


def _anp(angle: float) -> float:
    w = math.fmod(angle, _TWO_PI)
    return w + _TWO_PI if w < 0.0 else w


def pv2el(pv: Sequence[float], date: float, pmass: float, jformr: int) -> OrbitalElements:
    """Osculating elements from heliocentric position and velocity.

    ``pv`` is x, y, z, xdot, ydot, zdot (AU, AU/s) with respect to the J2000
    mean equator and equinox; ``date`` is a TT MJD; ``pmass`` the planet
    mass (Sun = 1); ``jformr`` the requested element set (1-3).

    Raises OrbitError with status -1 (illegal pmass), -2 (illegal jformr)
    or -3 (position/velocity out of range).
    """
    rmin = 1e-3
    vmin = 1e-8

    if pmass < 0.0:
        raise OrbitError(-1, "illegal planet mass")
    if jformr not in (1, 2, 3):
        raise OrbitError(-2, "illegal requested element set")

    jf = jformr
    px, py, pz, vx, vy, vz = pv

    # Rotate from equatorial to ecliptic; velocity to AU/day.
    x = px
    y = py * _CE + pz * _SE
    z = -py * _SE + pz * _CE
    xd = _SPD * vx
    yd = _SPD * (vy * _CE + vz * _SE)
    zd = _SPD * (-vy * _SE + vz * _CE)

    r = math.sqrt(x * x + y * y + z * z)
    v2 = xd * xd + yd * yd + zd * zd
    v = math.sqrt(v2)
    if r < rmin or v < vmin:
        raise OrbitError(-3, "position or velocity out of range")

    rdv = x * xd + y * yd + z * zd
    gmu = (1.0 + pmass) * _GCON * _GCON

    # Angular momentum per unit reduced mass.
    hx = y * zd - z * yd
    hy = z * xd - x * zd
    hz = x * yd - y * xd
    hx2py2 = hx * hx + hy * hy
    h2 = hx2py2 + hz * hz
    h = math.sqrt(h2)

    oi = math.atan2(math.sqrt(hx2py2), hz)
    bigom = math.atan2(hx, -hy) if (hx != 0.0 or hy != 0.0) else 0.0

    ar = 2.0 / r - v2 / gmu
    ecc = math.sqrt(max(1.0 - ar * h2 / gmu, 0.0))

    # True anomaly.
    s = h * rdv
    c = h2 - r * gmu
    at = math.atan2(s, c) if (s != 0.0 or c != 0.0) else 0.0

    # Argument of latitude and of perihelion.
    s = math.sin(bigom)
    c = math.cos(bigom)
    u = math.atan2((-x * s + y * c) * math.cos(oi) + z * math.sin(oi), x * c + y * s)
    om = u - at

    if abs(ecc - 1.0) < _PARAB:
        ecc = 1.0
    if ecc > 1.0:
        jf = 3

    gar3 = gmu * ar * ar * ar
    em1 = ecc - 1.0
    ep1 = ecc + 1.0
    hat = at / 2.0
    shat = math.sin(hat)
    chat = math.cos(hat)

    am = 0.0
    dn = 0.0
    pl = 0.0
    el = 0.0
    q = 0.0
    tp = 0.0

    if ecc < 1.0:
        ae = 2.0 * math.atan2(math.sqrt(-em1) * shat, math.sqrt(ep1) * chat)
        am = ae - ecc * math.sin(ae)
        dn = math.sqrt(gar3)

    if jf == 1:
        pl = bigom + om
        el = pl + am

    if jf == 3:
        q = h2 / (gmu * ep1)
        if ecc < 1.0:
            tp = date - am / dn
        else:
            that = shat / chat
            if ecc == 1.0:
                tp = date - that * (1.0 + that * that / 3.0) * h * h2 / (2.0 * gmu * gmu)
            else:
                thhf = math.sqrt(em1 / ep1) * that
                f = math.log(1.0 + thhf) - math.log(1.0 - thhf)
                tp = date - (ecc * math.sinh(f) - f) / math.sqrt(-gar3)

    anode = _anp(bigom)
    if jf == 1:
        return OrbitalElements(
            jform=1, epoch=date, orbinc=oi, anode=anode, perih=_anp(pl),
            aorq=1.0 / ar, e=ecc, aorl=_anp(el), dm=dn,
        )
    if jf == 2:
        return OrbitalElements(
            jform=2, epoch=date, orbinc=oi, anode=anode, perih=_anp(om),
            aorq=1.0 / ar, e=ecc, aorl=_anp(am),
        )
    return OrbitalElements(
        jform=3, epoch=tp, orbinc=oi, anode=anode, perih=_anp(om), aorq=q, e=ecc,
    )


def pv2ue(pv: Sequence[float], date: float, pmass: float) -> UniversalElements:
    """Universal elements from heliocentric position and velocity.

    ``pv`` is x, y, z, xdot, ydot, zdot (AU, AU/s) in any inertial frame;
    the elements are in the same frame.  Raises OrbitError with status
    -1 (illegal pmass), -2 (too close to Sun) or -3 (too slow).
    """
    cd2s = _GCON / _SPD
    rmin = 1e-3
    vmin = 1e-3

    if pmass < 0.0:
        raise OrbitError(-1, "illegal planet mass")
    cm = 1.0 + pmass

    x, y, z, vx, vy, vz = pv
    xd = vx / cd2s
    yd = vy / cd2s
    zd = vz / cd2s

    r = math.sqrt(x * x + y * y + z * z)
    v2 = xd * xd + yd * yd + zd * zd
    v = math.sqrt(v2)

    if r < rmin:
        raise OrbitError(-2, "too close to the Sun")
    if v < vmin:
        raise OrbitError(-3, "too slow")

    alpha = v2 - 2.0 * cm / r
    rdv = x * xd + y * yd + z * zd

    return UniversalElements(
        cm=cm, alpha=alpha, t0=date, r0=(x, y, z), v0=(xd, yd, zd),
        r=r, rdv=rdv, t=date, psi=0.0,
    )