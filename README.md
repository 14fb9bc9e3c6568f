# palastro

Positional astronomy routines in plain Python, with no dependencies
beyond the standard library. All angles are in radians.

## Installation

    pip install palastro

To run the test suite from a checkout:

    pip install ".[test]"
    pytest

## What it provides

| Module | Names | Purpose |
| --- | --- | --- |
| `palastro.observer` | `polmo`, `pvobs` | Polar-motion correction of a site; position and velocity of an observing station on the WGS84 ellipsoid |
| `palastro.angles` | `ranorm` | Reduce an angle to the range [0, 2π) in single precision |
| `palastro.refraction` | `refv`, `refz` | Apply the A tan Z + B tan³ Z refraction model to an Az/El Cartesian vector or to a zenith distance |
| `palastro.supergalactic` | `supgal` | Supergalactic to IAU 1958 galactic coordinates |
| `palastro.velocity` | `rverot`, `rvgalc`, `rvlg`, `rvlsrd`, `rvlsrk` | Radial velocity components (km/s) from Earth rotation, Galactic rotation, Local Group motion and the dynamical and kinematical Local Standards of Rest |
| `palastro.fitting` | `xy2xy`, `pxy`, `FitResiduals` | Apply a six-coefficient linear model to [x, y] samples and compute RMS residuals |
| `palastro.orbits` | `pv2el`, `pv2ue`, `OrbitalElements`, `UniversalElements`, `OrbitError` | Heliocentric osculating and universal elements from a position/velocity 6-vector |

## Examples

Correct a site for polar motion; the result is the true east longitude,
the true geodetic latitude and the azimuth correction (for a site exactly
at the pole the longitude is 0 and the azimuth correction is NaN):

```python
from palastro.observer import polmo

elong, phi, daz = polmo(0.7, -0.5, 1e-6, -2e-6)
```

Position and velocity of an observer on the equator at sidereal time zero,
as a 6-tuple in AU and AU/s:

```python
from palastro.observer import pvobs

x, y, z, xdot, ydot, zdot = pvobs(0.0, 0.0, 0.0)
```

Refract a zenith distance of 80°, given the A and B coefficients:

```python
import math
from palastro.refraction import refz

zr = refz(math.radians(80.0), 2.9e-4, -3.3e-7)
```

Above 83° an empirical formula takes over from the tan Z model, and
beyond 93° the refraction is held at its 93° value. `refv` does the same
job on a Cartesian Az/El vector with one Newton-Raphson step, holding the
correction back below about 3° elevation.

Supergalactic to galactic coordinates:

```python
from palastro.supergalactic import supgal

dl, db = supgal(0.5, 0.2)   # dl in [0, 2π), db in [-π, π)
```

Radial velocity correction for the kinematical LSR:

```python
from palastro.velocity import rvlsrk

v = rvlsrk(1.0, -0.5)   # km/s, positive when the Sun recedes from the direction
```

Apply a linear plate model and get residuals. With
`coeffs = (A, B, C, D, E, F)` each measured point becomes
`(A + B*x + C*y, D + E*x + F*y)`:

```python
from palastro.fitting import pxy

result = pxy(
    [(1.0, 2.0), (3.0, 4.0)],
    [(1.1, 2.1), (3.1, 4.1)],
    (0.0, 1.0, 0.0, 0.0, 0.0, 1.0),
)
print(result.predicted, result.xrms, result.yrms, result.rrms)
```

`pxy` raises `ValueError` if the two lists differ in length; with no
samples it returns no predictions and zero RMS values.

Orbital elements from a heliocentric state vector (AU, AU/s, J2000 mean
equator and equinox):

```python
from palastro.orbits import OrbitError, pv2el, pv2ue

pv = (1.0, 0.2, 0.1, -2.0e-9, 1.9e-7, 8.0e-8)
try:
    elements = pv2el(pv, 55000.0, 0.0, 2)
    universal = pv2ue(pv, 55000.0, 0.0)
except OrbitError as exc:
    print("cannot compute elements:", exc, exc.status)
```

`pv2el` returns an `OrbitalElements` record whose `jform` tells which
element set was produced: 1 (major planet), 2 (minor planet) or 3 (comet).
An orbit that is not elliptical is always given in the comet form.
`aorl` is `None` for form 3 and `dm` is `None` except for form 1.
`pv2ue` returns a `UniversalElements` record with velocities in AU per
canonical day. Both raise `OrbitError` (a `ValueError`) whose `status` is
-1 for a negative planet mass; `pv2el` uses -2 for an illegal element-set
choice and -3 for a position or velocity too small, while `pv2ue` uses
-2 for too close to the Sun and -3 for too slow.

## What it does not do

- There is no command-line program; the package is a library only.
- It does not compute the refraction coefficients A and B; `refv` and
  `refz` take them as arguments.
- It does not propagate orbits: elements can be formed from a state
  vector, but there is no function that turns elements back into a
  position and velocity at another date.
- It has no planetary or lunar ephemerides and no precession, nutation
  or sidereal-time models; sidereal time must be supplied by the caller.