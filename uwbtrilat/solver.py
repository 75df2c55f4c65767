"""Least-squares position solvers for range measurements to fixed anchors.

Subtracting the range equation of the first anchor from those of the
others gives the linear system ``2 A r = b``. Here ``A`` holds the anchor
offsets from the first anchor, and ``b_i = d_0^2 - d_i^2 + k_i - k_0``
with ``k_i = |anchor_i|^2``. The system is solved through the normal
equations ``(A^T A) r = A^T b / 2``. The inverse of ``A^T A`` depends only
on the anchors, so it is computed once when the solver is built. With
exactly ``dims + 1`` anchors this gives the direct solution. With more
anchors the system is overdetermined and this gives the least-squares
solution.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from uwbtrilat.inversion import SingularMatrixError, determinant, invert
from uwbtrilat.matrix import Matrix, mat_vec, matmul, transpose
from uwbtrilat.vector import Vector, diff, distance, dot, scale

__all__ = [
    "PlanarSolver",
    "SpatialSolver",
    "ranges",
    "rms_residual",
]


class _LeastSquaresSolver:
    """Shared machinery for solvers working in a fixed number of dimensions."""

    _dims: int = 0

    def __init__(self, anchors: Sequence[Sequence[float]]) -> None:
        points = tuple(tuple(float(c) for c in anchor) for anchor in anchors)
        needed = self._dims + 1
        if len(points) < needed:
            raise ValueError(
                f"at least {needed} anchors are needed, got {len(points)}"
            )
        if any(len(p) < self._dims for p in points):
            raise ValueError(f"every anchor needs {self._dims} coordinates")
        coords = tuple(p[: self._dims] for p in points)
        origin = coords[0]
        self.anchors: tuple[tuple[float, ...], ...] = points
        self._k: Vector = tuple(dot(c, c) for c in coords)
        a = tuple(diff(c, origin) for c in coords[1:])
        self._a_t: Matrix = transpose(a)
        ata = matmul(self._a_t, a)
        self.determinant: float = determinant(ata)
        try:
            self._ata_inv: Matrix = invert(ata)
        except SingularMatrixError:
            raise SingularMatrixError(
                "anchor geometry is degenerate; no unique position exists"
            ) from None

    def solve(self, distances: Sequence[float]) -> Vector:
        """Return the position estimated from one range per anchor."""
        if len(distances) != len(self.anchors):
            raise ValueError(
                f"expected {len(self.anchors)} distances, got {len(distances)}"
            )
        d0 = float(distances[0])
        k0 = self._k[0]
        b = tuple(
            d0 * d0 - float(d) * float(d) + k - k0
            for d, k in zip(distances[1:], self._k[1:])
        )
        atb = mat_vec(self._a_t, b)
        return scale(0.5, mat_vec(self._ata_inv, atb))


class PlanarSolver(_LeastSquaresSolver):
    """Solves for an (x, y) position from three or more anchors.

    Anchor Z coordinates are ignored, so any height difference between
    the anchors and the target shows up as an error in (x, y).
    """

    _dims = 2

    def __init__(self, anchors: Sequence[Sequence[float]]) -> None:
        super().__init__(anchors)

    def solve(self, distances: Sequence[float]) -> Vector:
        """Return the (x, y) position estimated from one range per anchor."""
        return super().solve(distances)


class SpatialSolver(_LeastSquaresSolver):
    """Solves for an (x, y, z) position from four or more anchors."""

    _dims = 3

    def __init__(self, anchors: Sequence[Sequence[float]]) -> None:
        super().__init__(anchors)

    def solve(self, distances: Sequence[float]) -> Vector:
        """Return the (x, y, z) position estimated from one range per anchor."""
        return super().solve(distances)


def ranges(
    anchors: Sequence[Sequence[float]], position: Sequence[float]
) -> Vector:
    """Return the Euclidean distance from each anchor to ``position``."""
    return tuple(distance(anchor, position) for anchor in anchors)


def rms_residual(
    anchors: Sequence[Sequence[float]],
    position: Sequence[float],
    distances: Sequence[float],
) -> float:
    """Return the RMS difference between ``distances`` and the anchor ranges to ``position``.

    Only as many anchor coordinates as ``position`` has are used, so a
    planar position is compared with the anchors' (x, y) coordinates.
    """
    if len(anchors) != len(distances):
        raise ValueError(
            f"expected {len(anchors)} distances, got {len(distances)}"
        )
    if not anchors:
        raise ValueError("no anchors given")
    dims = len(position)
    total = sum(
        (float(d) - distance(anchor[:dims], position)) ** 2
        for anchor, d in zip(anchors, distances)
    )
    return math.sqrt(total / len(anchors))