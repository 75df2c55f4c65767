"""Small-vector arithmetic on plain tuples of floats.

Every function accepts any sequence of numbers and returns a new tuple.
Vectors may have any dimension, but both operands of a binary operation
must have the same one.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

Vector = tuple[float, ...]


def _check_same_size(a: Sequence[float], b: Sequence[float]) -> None:
    if len(a) != len(b):
        raise ValueError(f"vector sizes differ: {len(a)} and {len(b)}")


def diff(a: Sequence[float], b: Sequence[float]) -> Vector:
    """Return ``a - b``."""
    _check_same_size(a, b)
    return tuple(x - y for x, y in zip(a, b))


def add(a: Sequence[float], b: Sequence[float]) -> Vector:
    """Return ``a + b``."""
    _check_same_size(a, b)
    return tuple(x + y for x, y in zip(a, b))


def scale(s: float, v: Sequence[float]) -> Vector:
    """Return the scalar product ``s * v``."""
    return tuple(s * x for x in v)


def accumulate(acc: Sequence[float], s: float, v: Sequence[float]) -> Vector:
    """Return ``acc + s * v``."""
    _check_same_size(acc, v)
    return tuple(a + s * x for a, x in zip(acc, v))


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the dot product of ``a`` and ``b``."""
    _check_same_size(a, b)
    return sum(x * y for x, y in zip(a, b))


def length(v: Sequence[float]) -> float:
    """Return the Euclidean length of ``v``."""
    return math.sqrt(dot(v, v))


def distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the Euclidean distance between points ``a`` and ``b``."""
    return length(diff(b, a))


def renormalize(v: Sequence[float], new_length: float) -> Vector:
    """Return ``v`` rescaled to ``new_length``; a zero vector is returned unchanged."""
    current = length(v)
    if current == 0.0:
        return tuple(v)
    return scale(new_length / current, v)


def normalize(v: Sequence[float]) -> Vector:
    """Return ``v`` scaled to unit length; a zero vector is returned unchanged."""
    return renormalize(v, 1.0)


def cross(a: Sequence[float], b: Sequence[float]) -> Vector:
    """Return the cross product of two 3D vectors."""
    if len(a) != 3 or len(b) != 3:
        raise ValueError("cross product needs two 3D vectors")
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def perpendicular(v: Sequence[float], n: Sequence[float]) -> Vector:
    """Remove from ``v`` its component along the unit vector ``n``."""
    return accumulate(v, -dot(v, n), n)


def parallel(v: Sequence[float], n: Sequence[float]) -> Vector:
    """Return the component of ``v`` along the unit vector ``n``."""
    return scale(dot(v, n), n)


def reflect(v: Sequence[float], n: Sequence[float]) -> Vector:
    """Reflect ``v`` against the plane whose unit normal is ``n``."""
    return accumulate(v, -2.0 * dot(v, n), n)


def blend(sa: float, a: Sequence[float], sb: float, b: Sequence[float]) -> Vector:
    """Return the linear combination ``sa * a + sb * b``."""
    _check_same_size(a, b)
    return tuple(sa * x + sb * y for x, y in zip(a, b))


def impact_squared(direction: Sequence[float], position: Sequence[float]) -> float:
    """Squared distance from ``position`` to the line through the origin along unit ``direction``."""
    along = dot(direction, position)
    return dot(position, position) - along * along


def impact(direction: Sequence[float], position: Sequence[float]) -> float:
    """Distance from ``position`` to the line through the origin along unit ``direction``."""
    return math.sqrt(impact_squared(direction, position))


def conjugate_length(v: Sequence[float]) -> float:
    """Return ``sqrt(1 - |v|^2)``, e.g. the scalar part of a unit quaternion.

    Raises ValueError when ``v`` is longer than one.
    """
    return math.sqrt(1.0 - dot(v, v))


def describe(v: Sequence[float]) -> str:
    """Return a one-line text description of ``v`` and its length."""
    components = " ".join(f"{x:f}" for x in v)
    return f"a is {components} length of a is {length(v):f}"