"""Determinants, cofactors, adjoints and inverses of square matrices.

Matrices are sequences of equal-length rows; results are tuples of tuples.
The cofactor expansion works for any size, though it is meant for the
small 2x2 to 4x4 systems met in trilateration.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from uwbtrilat.matrix import Matrix, transpose
from uwbtrilat.vector import Vector


class SingularMatrixError(ValueError):
    """Raised when a matrix with zero determinant has to be inverted."""


def _order(m: Sequence[Sequence[float]]) -> int:
    n = len(m)
    if n == 0:
        raise ValueError("matrix has no rows")
    if any(len(row) != n for row in m):
        raise ValueError("matrix is not square")
    return n


def _minor(m: Sequence[Sequence[float]], i: int, j: int) -> Matrix:
    return tuple(
        tuple(x for c, x in enumerate(row) if c != j)
        for r, row in enumerate(m)
        if r != i
    )


def determinant(m: Sequence[Sequence[float]]) -> float:
    """Return the determinant of the square matrix ``m``."""
    n = _order(m)
    if n == 1:
        return float(m[0][0])
    if n == 2:
        return m[0][0] * m[1][1] - m[0][1] * m[1][0]
    return sum(m[0][j] * cofactor(m, 0, j) for j in range(n))


def cofactor(m: Sequence[Sequence[float]], i: int, j: int) -> float:
    """Return the signed ``(i, j)`` cofactor of ``m``."""
    n = _order(m)
    if not (0 <= i < n and 0 <= j < n):
        raise IndexError(f"cofactor ({i}, {j}) outside a {n}x{n} matrix")
    if n == 1:
        return 1.0
    sign = -1.0 if (i + j) % 2 else 1.0
    return sign * determinant(_minor(m, i, j))


def cofactor_matrix(m: Sequence[Sequence[float]]) -> Matrix:
    """Return the matrix of cofactors of ``m``."""
    n = _order(m)
    return tuple(tuple(cofactor(m, i, j) for j in range(n)) for i in range(n))


def adjoint(m: Sequence[Sequence[float]]) -> Matrix:
    """Return the adjoint (adjugate) of ``m``: the transposed cofactor matrix."""
    return transpose(cofactor_matrix(m))


def scale_adjoint(s: float, m: Sequence[Sequence[float]]) -> Matrix:
    """Return the adjoint of ``m`` multiplied by ``s``."""
    return tuple(tuple(s * x for x in row) for row in adjoint(m))


def invert(m: Sequence[Sequence[float]]) -> Matrix:
    """Return the inverse of ``m``.

    Raises SingularMatrixError when the determinant is zero.
    """
    det = determinant(m)
    if det == 0.0:
        raise SingularMatrixError("matrix is singular")
    return scale_adjoint(1.0 / det, m)


def _check_2x2(m: Sequence[Sequence[float]], v: Sequence[float]) -> None:
    if _order(m) != 2 or len(v) != 2:
        raise ValueError("a 2x2 matrix and a 2D vector are required")


def _adjoint_transpose_product(
    m: Sequence[Sequence[float]], v: Sequence[float]
) -> Vector:
    return (
        m[1][1] * v[0] - m[1][0] * v[1],
        -m[0][1] * v[0] + m[0][0] * v[1],
    )


def inverse_transpose_mat_vec(
    m: Sequence[Sequence[float]], v: Sequence[float]
) -> Vector:
    """Multiply ``v`` by the inverse transpose of the 2x2 matrix ``m``.

    When ``m`` is singular the product with the transposed adjoint is
    returned unscaled. Not suitable for normals, which it leaves at the
    wrong length; use normal_transform for those.
    """
    _check_2x2(m, v)
    p = _adjoint_transpose_product(m, v)
    det = determinant(m)
    if det not in (0.0, 1.0):
        p = (p[0] / det, p[1] / det)
    return p


def normal_transform(m: Sequence[Sequence[float]], v: Sequence[float]) -> Vector:
    """Transform the normal ``v`` by the inverse transpose of 2x2 ``m`` and renormalise.

    A uniform scaling matrix leaves ``v`` unchanged. Raises
    SingularMatrixError when the transformed normal vanishes.
    """
    _check_2x2(m, v)
    if m[0][1] == 0.0 and m[1][0] == 0.0 and m[0][0] == m[1][1]:
        return tuple(v)
    p = _adjoint_transpose_product(m, v)
    size = math.hypot(p[0], p[1])
    if size == 0.0:
        raise SingularMatrixError("normal vanishes under a singular matrix")
    return (p[0] / size, p[1] / size)