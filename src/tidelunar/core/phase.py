"""Modular normalization shared by the tide and lunar models.

Both models reduce values onto a circle: time onto a period (seconds) and
angles onto [0, 2pi). A language-level remainder may return negative values
or, through rounding, the modulus itself; everything here guarantees the
half-open range [0, m).

Integer inputs with an integer modulus stay exact. Scalars and numpy arrays
are both accepted.
"""

from __future__ import annotations

import math
from typing import Union

import numpy as np

from .constants import TWO_PI

Number = Union[int, float]
ArrayOrScalar = Union[Number, np.ndarray]


def exact(value: Number) -> Number:
    """Return an int for integral floats so modular arithmetic stays exact."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def normalize_mod(x: ArrayOrScalar, m: Number) -> ArrayOrScalar:
    """Reduce ``x`` into ``[0, m)`` regardless of the sign of ``x``.

    Args:
        x: Value or array of values.
        m: Positive modulus.

    Returns:
        Same shape as ``x``. Integer in, integer out when ``m`` is an int.

    Raises:
        ValueError: If ``m`` is not positive.
    """
    if not m > 0:
        raise ValueError(f"modulus must be positive, got {m}")

    if isinstance(x, np.ndarray):
        if np.issubdtype(x.dtype, np.integer) and isinstance(m, (int, np.integer)):
            return np.mod(x, m)
        y = np.fmod(np.asarray(x, dtype=np.float64), m)
        y = np.where(y < 0, y + m, y)
        return np.where(y >= m, 0.0, y)

    if isinstance(x, int) and isinstance(m, int):
        return x % m

    y = math.fmod(x, m)
    if y < 0:
        y += m
    # A tiny negative remainder plus m can round up to m itself
    if y >= m:
        y = 0.0
    return y


def normalize_angle(x: ArrayOrScalar) -> ArrayOrScalar:
    """Wrap an angle in radians into ``[0, 2pi)``."""
    return normalize_mod(x, TWO_PI)


def forward_angle(target: float, phase: ArrayOrScalar, epsilon: float = 0.0) -> ArrayOrScalar:
    """Angle to travel forward from ``phase`` until ``target`` is reached.

    Distances within ``epsilon`` of a full turn collapse to zero so that an
    event at the current instant is not pushed a whole cycle into the future.
    """
    d = normalize_angle(target - phase)
    if isinstance(d, np.ndarray):
        return np.where(TWO_PI - d < epsilon, 0.0, d)
    if TWO_PI - d < epsilon:
        return 0.0
    return d
