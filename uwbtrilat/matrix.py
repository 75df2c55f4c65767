"""Dense matrix arithmetic on nested tuples of floats.

A matrix is any sequence of equal-length rows; results are returned as
tuples of tuples. Shapes are checked and a mismatch raises ValueError.
"""

from __future__ import annotations

from collections.abc import Sequence

from uwbtrilat.vector import Vector, dot

Matrix = tuple[tuple[float, ...], ...]


def _shape(m: Sequence[Sequence[float]]) -> tuple[int, int]:
    rows = len(m)
    if rows == 0:
        raise ValueError("matrix has no rows")
    cols = len(m[0])
    if any(len(row) != cols for row in m):
        raise ValueError("matrix rows differ in length")
    return rows, cols


def identity(n: int) -> Matrix:
    """Return the ``n`` by ``n`` identity matrix."""
    if n < 1:
        raise ValueError("identity size must be positive")
    return tuple(tuple(1.0 if i == j else 0.0 for j in range(n)) for i in range(n))


def transpose(m: Sequence[Sequence[float]]) -> Matrix:
    """Return the transpose of ``m``."""
    _shape(m)
    return tuple(tuple(column) for column in zip(*m))


def scale_matrix(s: float, m: Sequence[Sequence[float]]) -> Matrix:
    """Return ``s * m``."""
    _shape(m)
    return tuple(tuple(s * x for x in row) for row in m)


def accumulate_scaled(
    b: Sequence[Sequence[float]], s: float, a: Sequence[Sequence[float]]
) -> Matrix:
    """Return ``b + s * a``."""
    if _shape(a) != _shape(b):
        raise ValueError("matrix shapes differ")
    return tuple(
        tuple(y + s * x for y, x in zip(row_b, row_a)) for row_b, row_a in zip(b, a)
    )


def matmul(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Return the matrix product ``a b``."""
    _, inner = _shape(a)
    rows_b, _ = _shape(b)
    if inner != rows_b:
        raise ValueError(f"cannot multiply: {inner} columns against {rows_b} rows")
    columns = transpose(b)
    return tuple(tuple(dot(row, col) for col in columns) for row in a)


def mat_vec(m: Sequence[Sequence[float]], v: Sequence[float]) -> Vector:
    """Return the matrix-vector product ``m v``."""
    _, cols = _shape(m)
    if cols != len(v):
        raise ValueError(f"vector of size {len(v)} does not fit {cols} columns")
    return tuple(dot(row, v) for row in m)


def vec_mat(v: Sequence[float], m: Sequence[Sequence[float]]) -> Vector:
    """Return the row-vector product ``v^T m``."""
    rows, _ = _shape(m)
    if rows != len(v):
        raise ValueError(f"vector of size {len(v)} does not fit {rows} rows")
    return tuple(dot(v, col) for col in transpose(m))


def affine_mat_vec(m: Sequence[Sequence[float]], v: Sequence[float]) -> Vector:
    """Apply an affine matrix whose last column is a translation to ``v``."""
    _, cols = _shape(m)
    if cols != len(v) + 1:
        raise ValueError(
            f"affine matrix needs {len(v) + 1} columns for a vector of size {len(v)}"
        )
    return tuple(dot(row[:-1], v) + row[-1] for row in m)


def outer(v: Sequence[float], t: Sequence[float]) -> Matrix:
    """Return the outer product ``v t^T``."""
    if not v or not t:
        raise ValueError("outer product needs non-empty vectors")
    return tuple(tuple(x * y for y in t) for x in v)


def format_matrix(m: Sequence[Sequence[float]]) -> str:
    """Return ``m`` as text, one row per line, six decimals per entry."""
    _shape(m)
    return "\n".join(" ".join(f"{x:f}" for x in row) for row in m)