import math

import pytest

from palastro.orbits import OrbitError, OrbitalElements, UniversalElements, pv2el, pv2ue

SE = 0.3977771559319137
CE = 0.9174820620691818
GCON = 0.01720209895
SPD = 86400.0
CIRC = GCON / SPD  # circular speed at 1 AU, AU/s


def ecliptic_pv(speed_factor, sign=1.0):
    """Body at 1 AU on the ecliptic x axis moving along ecliptic +y."""
    v = sign * speed_factor * CIRC
    return (1.0, 0.0, 0.0, 0.0, v * CE, v * SE)


DATE = 55000.0


def test_circular_orbit_major_planet_form():
    el = pv2el(ecliptic_pv(1.0), DATE, 0.0, 1)
    assert isinstance(el, OrbitalElements)
    assert el.jform == 1
    assert el.epoch == DATE
    assert el.e == pytest.approx(0.0, abs=1e-6)
    assert el.aorq == pytest.approx(1.0, rel=1e-9)
    assert el.orbinc == pytest.approx(0.0, abs=1e-12)
    assert el.dm == pytest.approx(GCON, rel=1e-9)
    assert 0.0 <= el.aorl < 2.0 * math.pi


def test_minor_planet_form_has_no_daily_motion():
    el = pv2el(ecliptic_pv(1.2), DATE, 0.0, 2)
    assert el.jform == 2
    assert el.dm is None
    assert el.aorl is not None
    # At perihelion the mean anomaly is zero (mod 2pi).
    assert min(el.aorl, 2.0 * math.pi - el.aorl) == pytest.approx(0.0, abs=1e-9)


def test_comet_form_at_perihelion():
    el = pv2el(ecliptic_pv(1.2), DATE, 0.0, 3)
    assert el.jform == 3
    assert el.aorl is None and el.dm is None
    assert el.epoch == pytest.approx(DATE, abs=1e-6)
    assert el.aorq == pytest.approx(1.0, rel=1e-9)


def test_perihelion_distance_consistent_with_mean_distance():
    pv = ecliptic_pv(1.2)
    ell = pv2el(pv, DATE, 0.0, 2)
    comet = pv2el(pv, DATE, 0.0, 3)
    assert comet.e == pytest.approx(ell.e, rel=1e-12)
    assert comet.aorq == pytest.approx(ell.aorq * (1.0 - ell.e), rel=1e-9)


def test_hyperbolic_orbit_forces_comet_form():
    el = pv2el(ecliptic_pv(2.0), DATE, 0.0, 1)
    assert el.jform == 3
    assert el.e > 1.0
    assert el.aorl is None
    assert el.epoch == pytest.approx(DATE, abs=1e-6)


def test_retrograde_orbit_inclination():
    el = pv2el(ecliptic_pv(1.0, sign=-1.0), DATE, 0.0, 1)
    assert el.orbinc == pytest.approx(math.pi, abs=1e-9)


def test_angles_in_range():
    pv = (0.3, -1.1, 0.4, 1.5e-7, 1.0e-7, -2.0e-8)
    el = pv2el(pv, DATE, 0.0, 1)
    for angle in (el.anode, el.perih, el.aorl):
        assert 0.0 <= angle < 2.0 * math.pi


@pytest.mark.parametrize(
    "pmass, jformr, pv, status",
    [
        (-0.1, 1, (1.0, 0.0, 0.0, 0.0, CIRC, 0.0), -1),
        (0.0, 0, (1.0, 0.0, 0.0, 0.0, CIRC, 0.0), -2),
        (0.0, 4, (1.0, 0.0, 0.0, 0.0, CIRC, 0.0), -2),
        (0.0, 1, (1e-4, 0.0, 0.0, 0.0, CIRC, 0.0), -3),
        (0.0, 1, (1.0, 0.0, 0.0, 0.0, 0.0, 0.0), -3),
    ],
)
def test_pv2el_errors(pmass, jformr, pv, status):
    with pytest.raises(OrbitError) as excinfo:
        pv2el(pv, DATE, pmass, jformr)
    assert excinfo.value.status == status


def test_pv2ue_fields():
    pv = (0.5, -0.8, 0.2, 1.0e-7, 2.0e-7, -3.0e-8)
    u = pv2ue(pv, DATE, 0.001)
    assert isinstance(u, UniversalElements)
    assert u.cm == pytest.approx(1.001)
    assert u.t0 == DATE and u.t == DATE
    assert u.psi == 0.0
    assert u.r0 == (0.5, -0.8, 0.2)
    assert u.r == pytest.approx(math.sqrt(sum(c * c for c in u.r0)))
    assert u.rdv == pytest.approx(sum(a * b for a, b in zip(u.r0, u.v0)))
    v2 = sum(c * c for c in u.v0)
    assert u.alpha == pytest.approx(v2 - 2.0 * u.cm / u.r)


def test_pv2ue_velocity_in_canonical_units():
    u = pv2ue(ecliptic_pv(1.0), DATE, 0.0)
    speed = math.sqrt(sum(c * c for c in u.v0))
    assert speed == pytest.approx(1.0, rel=1e-12)
    assert u.alpha == pytest.approx(-1.0, rel=1e-9)


def test_pv2ue_energy_matches_mean_distance():
    pv = ecliptic_pv(1.2)
    u = pv2ue(pv, DATE, 0.0)
    el = pv2el(pv, DATE, 0.0, 2)
    assert u.alpha == pytest.approx(-1.0 / el.aorq, rel=1e-9)


def test_pv2ue_hyperbolic_energy_positive():
    u = pv2ue(ecliptic_pv(2.0), DATE, 0.0)
    assert u.alpha > 0.0


@pytest.mark.parametrize(
    "pmass, pv, status",
    [
        (-1.0, (1.0, 0.0, 0.0, 0.0, CIRC, 0.0), -1),
        (0.0, (1e-4, 0.0, 0.0, 0.0, CIRC, 0.0), -2),
        (0.0, (1.0, 0.0, 0.0, 0.0, 1e-4 * CIRC, 0.0), -3),
    ],
)
def test_pv2ue_errors(pmass, pv, status):
    with pytest.raises(OrbitError) as excinfo:
        pv2ue(pv, DATE, pmass)
    assert excinfo.value.status == status


def test_orbit_error_is_value_error():
    with pytest.raises(ValueError):
        pv2ue((0.0, 0.0, 0.0, 0.0, 0.0, 0.0), DATE, 0.0)