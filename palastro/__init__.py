"""Positional astronomy: polar motion, station position, refraction, supergalactic coordinates, radial velocity corrections, linear fits and orbital elements."""

__version__ = "0.9.10"

__all__ = [
    "angles",
    "fitting",
    "observer",
    "orbits",
    "refraction",
    "supergalactic",
    "velocity",
]