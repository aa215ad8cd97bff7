"""Test the shared modular normalization primitive."""

import math

import numpy as np
import pytest

from tidelunar.core.constants import TWO_PI
from tidelunar.core.phase import exact, forward_angle, normalize_angle, normalize_mod


def test_negative_integers_wrap_up():
    assert normalize_mod(-1, 60) == 59
    assert normalize_mod(-60, 60) == 0
    assert normalize_mod(-61, 60) == 59
    assert normalize_mod(119, 60) == 59


def test_integer_in_integer_out():
    result = normalize_mod(-947182440, 44700)
    assert isinstance(result, int)
    assert 0 <= result < 44700


def test_negative_floats_wrap_up():
    assert normalize_mod(-0.5, 2.0) == pytest.approx(1.5)
    assert normalize_angle(-math.pi / 2) == pytest.approx(3 * math.pi / 2)


def test_tiny_negative_never_returns_modulus():
    """A remainder of -1e-20 plus 2pi rounds to 2pi; it must map to 0."""
    result = normalize_angle(-1e-20)
    assert 0.0 <= result < TWO_PI
    assert result == 0.0


def test_exact_multiple_is_zero():
    assert normalize_angle(TWO_PI) == 0.0
    assert normalize_mod(3 * 44700, 44700) == 0


def test_integer_sweep_full_range():
    """Random 64-bit epochs, including negative, land in [0, m) and keep congruence."""
    rng = np.random.default_rng(42)
    values = rng.integers(-(2**62), 2**62, size=500)

    for x in values.tolist():
        r = normalize_mod(x, 44700)
        assert 0 <= r < 44700
        assert (x - r) % 44700 == 0


def test_float_sweep_angles():
    rng = np.random.default_rng(7)
    values = rng.uniform(-1e12, 1e12, size=500)

    for x in values.tolist():
        r = normalize_angle(x)
        assert 0.0 <= r < TWO_PI


def test_array_matches_scalar():
    rng = np.random.default_rng(3)
    values = rng.uniform(-100.0, 100.0, size=200)

    arr = normalize_angle(values)
    assert arr.shape == values.shape
    assert np.all(arr >= 0.0)
    assert np.all(arr < TWO_PI)
    np.testing.assert_allclose(arr, [normalize_angle(v) for v in values.tolist()])


def test_integer_array_stays_exact():
    values = np.array([-1, -44700, -44701, 0, 44699, 2**60], dtype=np.int64)
    result = normalize_mod(values, 44700)
    assert result.dtype.kind == "i"
    assert result.tolist() == [v % 44700 for v in values.tolist()]


@pytest.mark.parametrize("m", [0, -1, -0.5])
def test_non_positive_modulus_rejected(m):
    with pytest.raises(ValueError):
        normalize_mod(5, m)


def test_exact_converts_integral_floats():
    assert exact(44700.0) == 44700
    assert isinstance(exact(44700.0), int)
    assert exact(2551442.88) == 2551442.88


def test_forward_angle_snaps_near_full_turn():
    # Phase a hair past the target would otherwise be a full turn away
    phase = math.pi / 2 + 1e-15
    assert forward_angle(math.pi / 2, phase, epsilon=1e-9) == 0.0
    assert forward_angle(math.pi / 2, phase) > 6.0


def test_forward_angle_is_non_negative():
    rng = np.random.default_rng(11)
    phases = rng.uniform(0.0, TWO_PI, size=300)
    d = forward_angle(3 * math.pi / 2, phases, epsilon=1e-9)
    assert np.all(d >= 0.0)
    assert np.all(d < TWO_PI)
