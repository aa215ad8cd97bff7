"""Test lunar month position and spring/neap classification."""

import math

import numpy as np
import pytest

from tidelunar.core.types import LunarConstants, RangeClass
from tidelunar.lunar.model import (
    classify_range,
    moon_age_seconds,
    moon_angle,
    moon_illumination,
    moon_phase_name,
)

from conftest import REFERENCE_NEW_MOON, SYNODIC_MONTH


def test_reference_scenario_at_epoch_zero(lunar):
    angle = moon_angle(0, lunar)

    assert angle == pytest.approx(4.81, abs=0.01)
    assert abs(math.cos(angle)) == pytest.approx(0.10, abs=0.01)
    assert classify_range(0, lunar) is RangeClass.NEAP


def test_new_moon_is_spring(lunar):
    assert moon_angle(REFERENCE_NEW_MOON, lunar) == 0.0
    assert classify_range(REFERENCE_NEW_MOON, lunar) is RangeClass.SPRING


def test_full_moon_is_spring(lunar):
    full = REFERENCE_NEW_MOON + round(SYNODIC_MONTH / 2)
    assert moon_angle(full, lunar) == pytest.approx(math.pi, abs=1e-5)
    assert classify_range(full, lunar) is RangeClass.SPRING


@pytest.mark.parametrize("quarter", [1, 3])
def test_quarter_moons_are_neap(lunar, quarter):
    epoch = REFERENCE_NEW_MOON + round(quarter * SYNODIC_MONTH / 4)
    assert classify_range(epoch, lunar) is RangeClass.NEAP


def test_threshold_at_45_degrees(lunar):
    boundary = REFERENCE_NEW_MOON + round(SYNODIC_MONTH / 8)
    assert classify_range(boundary - 3600, lunar) is RangeClass.SPRING
    assert classify_range(boundary + 3600, lunar) is RangeClass.NEAP


def test_flips_every_quarter_month(lunar):
    """Four transitions per month, roughly a quarter month apart."""
    step = 3600
    epochs = range(REFERENCE_NEW_MOON, REFERENCE_NEW_MOON + int(SYNODIC_MONTH), step)
    classes = [classify_range(e, lunar) for e in epochs]

    flips = [
        REFERENCE_NEW_MOON + i * step
        for i in range(1, len(classes))
        if classes[i] is not classes[i - 1]
    ]
    assert len(flips) == 4

    gaps = np.diff(flips)
    np.testing.assert_allclose(gaps, SYNODIC_MONTH / 4, atol=2 * step)


def test_periodic_with_synodic_month():
    constants = LunarConstants(reference_new_moon_epoch=REFERENCE_NEW_MOON, synodic_month_seconds=2551443)
    rng = np.random.default_rng(42)

    for epoch in rng.integers(-(2**40), 2**40, size=300).tolist():
        assert classify_range(epoch, constants) is classify_range(epoch + 2551443, constants)
        assert moon_angle(epoch, constants) == moon_angle(epoch + 2551443, constants)


def test_age_in_range_before_reference(lunar):
    rng = np.random.default_rng(8)
    for epoch in rng.integers(-(2**45), REFERENCE_NEW_MOON, size=300).tolist():
        age = moon_age_seconds(epoch, lunar)
        assert 0.0 <= age < SYNODIC_MONTH
        assert 0.0 <= moon_angle(epoch, lunar) < 2 * math.pi


def test_custom_threshold_widens_spring(lunar):
    wide = LunarConstants(
        reference_new_moon_epoch=REFERENCE_NEW_MOON,
        synodic_month_seconds=SYNODIC_MONTH,
        spring_threshold=0.05,
    )
    assert classify_range(0, lunar) is RangeClass.NEAP
    assert classify_range(0, wide) is RangeClass.SPRING


def test_phase_names_and_illumination(lunar):
    full = REFERENCE_NEW_MOON + round(SYNODIC_MONTH / 2)
    first_quarter = REFERENCE_NEW_MOON + round(SYNODIC_MONTH / 4)

    assert moon_phase_name(REFERENCE_NEW_MOON, lunar) == "New Moon"
    assert moon_phase_name(first_quarter, lunar) == "First Quarter"
    assert moon_phase_name(full, lunar) == "Full Moon"
    assert moon_phase_name(REFERENCE_NEW_MOON - 3600, lunar) == "New Moon"

    assert moon_illumination(REFERENCE_NEW_MOON, lunar) == pytest.approx(0.0)
    assert moon_illumination(full, lunar) == pytest.approx(1.0)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"synodic_month_seconds": 0},
        {"synodic_month_seconds": -1.0},
        {"spring_threshold": 0.0},
        {"spring_threshold": 1.0},
    ],
)
def test_invalid_constants_fail_fast(kwargs):
    with pytest.raises(ValueError):
        LunarConstants(**kwargs)
