from __future__ import annotations

import math
from math import atan2, cos, hypot, sin

from .tolerances import near_zero

Vec2 = tuple[float, float]
Vec2Int = tuple[int, int]
Vec3Int = tuple[int, int, int]

RAD2DEG = 180.0 / math.pi
DEG2RAD = math.pi / 180.0


def _check2(*vs) -> None:
    for v in vs:
        if len(v) != 2:
            raise ValueError(f"expected a 2-component vector, got {v!r}")


def to_precision_string(v: Vec2) -> str:
    _check2(v)
    return f"({v[0]}, {v[1]})"


def to_float(v: Vec2Int) -> Vec2:
    _check2(v)
    return (float(v[0]), float(v[1]))


def to_vector3(v: Vec2Int, z: int = 0) -> Vec3Int:
    _check2(v)
    return (v[0], v[1], z)


def to_vector2(v: Vec3Int) -> Vec2Int:
    if len(v) != 3:
        raise ValueError(f"expected a 3-component vector, got {v!r}")
    return (v[0], v[1])


def multiply(a: Vec2, b: Vec2) -> Vec2:
    _check2(a, b)
    return (a[0] * b[0], a[1] * b[1])


def minimum(a: Vec2, b: Vec2) -> Vec2:
    """Smallest x and smallest y of the two vectors."""
    _check2(a, b)
    return (min(a[0], b[0]), min(a[1], b[1]))


def maximum(a: Vec2, b: Vec2) -> Vec2:
    """Largest x and largest y of the two vectors."""
    _check2(a, b)
    return (max(a[0], b[0]), max(a[1], b[1]))


def floor_to_int(v: Vec2) -> Vec2Int:
    _check2(v)
    return (math.floor(v[0]), math.floor(v[1]))


def floored(v: Vec2) -> Vec2:
    return to_float(floor_to_int(v))


def ceil_to_int(v: Vec2) -> Vec2Int:
    _check2(v)
    return (math.ceil(v[0]), math.ceil(v[1]))


def ceiled(v: Vec2) -> Vec2:
    return to_float(ceil_to_int(v))


def round_to_int(v: Vec2) -> Vec2Int:
    # half-to-even, like the built-in round
    _check2(v)
    return (round(v[0]), round(v[1]))


def rounded(v: Vec2) -> Vec2:
    return to_float(round_to_int(v))


def _clamp1(value: float, lo: float, hi: float) -> float:
    # lo wins over hi when the bounds are inverted
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def clamp(v: Vec2, lo: float, hi: float) -> Vec2:
    _check2(v)
    return (_clamp1(v[0], lo, hi), _clamp1(v[1], lo, hi))


def absolute(v: Vec2) -> Vec2:
    _check2(v)
    return (abs(v[0]), abs(v[1]))


def length(v: Vec2) -> float:
    _check2(v)
    return hypot(v[0], v[1])


def normalized(v: Vec2) -> Vec2:
    """Unit vector pointing along ``v``.

    Raises ``ValueError`` when ``v`` has (near) zero length.
    """
    n = length(v)
    if near_zero(n):
        raise ValueError(f"cannot normalize zero-length vector {v!r}")
    return (v[0] / n, v[1] / n)


def rad_to_vector2(rad: float) -> Vec2:
    return (cos(rad), sin(rad))


def deg_to_vector2(deg: float) -> Vec2:
    return rad_to_vector2(deg * DEG2RAD)


def angle(v: Vec2) -> float:
    """Angle of ``v`` in radians, in ``(-pi, pi]``."""
    _check2(v)
    return atan2(v[1], v[0])


def angle_degree(v: Vec2) -> float:
    return angle(v) * RAD2DEG
