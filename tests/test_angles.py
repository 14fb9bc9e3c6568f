import math
import struct

import pytest

from palastro.angles import ranorm


def _is_single(value):
    return struct.unpack("<f", struct.pack("<f", value))[0] == value


def test_zero_stays_zero():
    assert ranorm(0.0) == 0.0


def test_small_positive_unchanged():
    assert ranorm(1.0) == pytest.approx(1.0, abs=1e-6)


def test_negative_wraps_up():
    assert ranorm(-1.0) == pytest.approx(2 * math.pi - 1.0, abs=1e-5)


@pytest.mark.parametrize("angle", [-20.0, -6.0, -0.1, 0.5, 3.0, 7.0, 13.0, 100.0])
def test_result_in_range_and_single_precision(angle):
    result = ranorm(angle)
    assert 0.0 <= result < 2 * math.pi + 1e-6
    assert _is_single(result)


@pytest.mark.parametrize("angle", [-2.0, 0.3, 1.7, 4.0])
def test_periodic(angle):
    assert ranorm(angle + 2 * math.pi) == pytest.approx(ranorm(angle), abs=1e-5)


def test_idempotent():
    once = ranorm(-3.3)
    assert ranorm(once) == pytest.approx(once, abs=1e-6)