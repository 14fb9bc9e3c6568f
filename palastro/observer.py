"""Observer location: polar-motion correction and station position/velocity."""

from __future__ import annotations

import math

__all__ = ["polmo", "pvobs"]

# WGS84 reference ellipsoid: equatorial radius (metres) and flattening.
_WGS84_A = 6378137.0
_WGS84_F = 1.0 / 298.257223563

# Astronomical unit in metres.
_AU_METRES = 149597870.7e3

# Mean sidereal rate: rotation rate of the Earth relative to the stars (rad/s).
_SIDEREAL_RATE = 7.2921150e-5


def polmo(elongm: float, phim: float, xp: float, yp: float) -> tuple[float, float, float]:
    """Correct site longitude and latitude for polar motion.

    Takes the mean east longitude and mean geodetic latitude of the site
    and the polar-motion coordinates (all radians).  Returns
    ``(elong, phi, daz)``: the true east longitude, the true geodetic
    latitude and the azimuth correction (terrestrial minus celestial).
    """
    sel = math.sin(elongm)
    cel = math.cos(elongm)
    sph = math.sin(phim)
    cph = math.cos(phim)

    # Site mean position as a Cartesian vector.
    xm = cel * cph
    ym = sel * cph
    zm = sph

    # Rotate the site vector by polar motion, Y-component then X-component.
    sxp = math.sin(xp)
    cxp = math.cos(xp)
    syp = math.sin(yp)
    cyp = math.cos(yp)

    zw = -ym * syp + zm * cyp

    xt = xm * cxp - zw * sxp
    yt = ym * cyp + zm * syp
    zt = xm * sxp + zw * cxp

    # Rotate the geocentric direction of the terrestrial pole (0,0,1).
    xnm = -sxp * cyp
    ynm = syp
    znm = cxp * cyp

    cph = math.hypot(xt, yt)
    if cph == 0.0:
        # Site exactly at the pole: longitude is indeterminate and the
        # azimuth of the terrestrial pole is undefined.
        return 0.0, math.atan2(zt, cph), math.nan

    sel = yt / cph
    cel = xt / cph

    elong = math.atan2(yt, xt) if (xt != 0.0 or yt != 0.0) else 0.0
    phi = math.atan2(zt, cph)

    # Current azimuth of the terrestrial pole seen from the site.
    xnt = (xnm * cel + ynm * sel) * zt - znm * cph
    ynt = -xnm * sel + ynm * cel
    daz = math.atan2(-ynt, -xnt) if (xnt != 0.0 or ynt != 0.0) else 0.0

    return elong, phi, daz


def _geodetic_to_geocentric(elong: float, phi: float, height: float) -> tuple[float, float, float]:
    """Geocentric x, y, z (metres) of a point on the WGS84 ellipsoid."""
    sp = math.sin(phi)
    cp = math.cos(phi)
    w = (1.0 - _WGS84_F) ** 2
    d = cp * cp + w * sp * sp
    if d <= 0.0:
        raise ValueError("illegal ellipsoid parameters")
    ac = _WGS84_A / math.sqrt(d)
    as_ = w * ac
    r = (ac + height) * cp
    return r * math.cos(elong), r * math.sin(elong), (as_ + height) * sp


def pvobs(p: float, h: float, stl: float) -> tuple[float, float, float, float, float, float]:
    """Position and velocity of an observing station.

    ``p`` is the geodetic latitude (radians), ``h`` the height above the
    WGS84 ellipsoid (metres) and ``stl`` the local apparent sidereal time
    (radians).  Returns ``(x, y, z, xdot, ydot, zdot)`` in AU and AU/s,
    true equator and equinox of date.
    """
    x, _, z = _geodetic_to_geocentric(0.0, p, h)
    r = x / _AU_METRES
    z = z / _AU_METRES

    s = math.sin(stl)
    c = math.cos(stl)
    v = _SIDEREAL_RATE * r

    return r * c, r * s, z, -v * s, v * c, 0.0