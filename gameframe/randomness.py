"""Uniform random numbers and vectors."""

from __future__ import annotations

import random
from typing import Optional

from gameframe.vector import Vector2, Vector3, Vector4


def _uniform(low: float, high: float, rng: random.Random) -> float:
    if low > high:
        raise ValueError(f"invalid range: low {low} is greater than high {high}")
    return low + (high - low) * rng.random()


def _rng(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else random.Random()


def random_float(low: float, high: float, rng: Optional[random.Random] = None) -> float:
    """Uniform value in ``[low, high)``."""
    return _uniform(low, high, _rng(rng))


def random_vector2(low: Vector2, high: Vector2, rng: Optional[random.Random] = None) -> Vector2:
    """Vector with each component uniform between the matching bounds."""
    r = _rng(rng)
    return Vector2(*(_uniform(a, b, r) for a, b in zip(low, high)))


def random_vector3(low: Vector3, high: Vector3, rng: Optional[random.Random] = None) -> Vector3:
    """Vector with each component uniform between the matching bounds."""
    r = _rng(rng)
    return Vector3(*(_uniform(a, b, r) for a, b in zip(low, high)))


def random_vector4(low: Vector4, high: Vector4, rng: Optional[random.Random] = None) -> Vector4:
    """Vector with each component uniform between the matching bounds."""
    r = _rng(rng)
    return Vector4(*(_uniform(a, b, r) for a, b in zip(low, high)))


def random_range_float(num: float, spread: float, rng: Optional[random.Random] = None) -> float:
    """Uniform value in ``[num - spread, num + spread)``."""
    return _uniform(num - spread, num + spread, _rng(rng))


def random_range_vector2(
    num: Vector2, spread: Vector2, rng: Optional[random.Random] = None
) -> Vector2:
    """Each component uniform within ``spread`` of the matching component of ``num``."""
    r = _rng(rng)
    return Vector2(*(_uniform(n - s, n + s, r) for n, s in zip(num, spread)))


def random_range_vector3(
    num: Vector3, spread: Vector3, rng: Optional[random.Random] = None
) -> Vector3:
    """Each component uniform within ``spread`` of the matching component of ``num``."""
    r = _rng(rng)
    return Vector3(*(_uniform(n - s, n + s, r) for n, s in zip(num, spread)))


def random_range_vector4(
    num: Vector4, spread: Vector4, rng: Optional[random.Random] = None
) -> Vector4:
    """Each component uniform within ``spread`` of the matching component of ``num``."""
    r = _rng(rng)
    return Vector4(*(_uniform(n - s, n + s, r) for n, s in zip(num, spread)))