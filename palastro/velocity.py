"""Radial-velocity corrections: Earth rotation, Galactic rotation and solar motion."""

from __future__ import annotations

import math

__all__ = ["rverot", "rvgalc", "rvlg", "rvlsrd", "rvlsrk"]

# Nominal mean sidereal speed of the Earth's equator (km/s); the actual
# value is about 0.4651.
_EARTH_EQUATOR_SPEED = 0.4655

# LSR motion due to Galactic rotation: 220 km/s towards
# L2,B2 = 90,0 deg (RA,Dec 21 12 01.1 +48 19 47 J2000).
_GALACTIC_ROTATION = (-108.70408, +97.86251, -164.33610)

# Solar motion due to Galactic rotation and translation: 300 km/s
# towards the same apex.
_LOCAL_GROUP = (-148.23284, +133.44888, -224.09467)

# Peculiar solar motion (Delhaye 1965): about 16.6 km/s towards
# RA,Dec 17 49 58.7 +28 07 04 J2000.
_DYNAMICAL_LSR = (+0.63823, +14.58542, -7.80116)

# Standard solar motion: 20 km/s towards RA 18h Dec +30d (1900).
_KINEMATICAL_LSR = (-0.29000, +17.31726, -10.00141)


def _unit_vector(ra: float, dec: float) -> tuple[float, float, float]:
    cd = math.cos(dec)
    return math.cos(ra) * cd, math.sin(ra) * cd, math.sin(dec)


def _component(motion: tuple[float, float, float], ra: float, dec: float) -> float:
    return sum(m * u for m, u in zip(motion, _unit_vector(ra, dec)))


def rverot(phi: float, ra: float, da: float, st: float) -> float:
    """Component of Earth rotation in the direction ``ra``, ``da`` (km/s).

    ``phi`` is the geodetic latitude of the station, ``ra`` and ``da`` the
    apparent RA and Dec and ``st`` the local apparent sidereal time, all in
    radians.  Positive when the observatory recedes from the sky position.
    """
    return _EARTH_EQUATOR_SPEED * math.cos(phi) * math.sin(st - ra) * math.cos(da)


def rvgalc(r2000: float, d2000: float) -> float:
    """Component of dynamical LSR motion due to Galactic rotation (km/s).

    Positive when the dynamical LSR recedes from the J2000 position given.
    """
    return _component(_GALACTIC_ROTATION, r2000, d2000)


def rvlg(r2000: float, d2000: float) -> float:
    """Component of solar motion from Galactic rotation and Local Group motion (km/s).

    Positive when the Sun recedes from the J2000 position given.
    """
    return _component(_LOCAL_GROUP, r2000, d2000)


def rvlsrd(r2000: float, d2000: float) -> float:
    """Component of the Sun's motion relative to the dynamical LSR (km/s).

    Positive when the Sun recedes from the J2000 position given.
    """
    return _component(_DYNAMICAL_LSR, r2000, d2000)


def rvlsrk(r2000: float, d2000: float) -> float:
    """Component of the Sun's motion relative to the kinematical LSR (km/s).

    Positive when the Sun recedes from the J2000 position given.
    """
    return _component(_KINEMATICAL_LSR, r2000, d2000)