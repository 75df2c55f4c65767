# uwbtrilat

Position estimation from ultra-wideband (UWB) range measurements.

You give `uwbtrilat` the coordinates of a set of fixed anchors and the
measured distances from a tag to each of them. It linearises the range
equations against the first anchor and solves the resulting system by least
squares, through the normal equations. With exactly one anchor more than the
number of unknowns this gives the direct solution. With more anchors the
system is overdetermined and this gives the least-squares fit.

The package contains:

- `uwbtrilat.solver`: the `PlanarSolver` and `SpatialSolver` position solvers,
  plus `ranges` and `rms_residual`;
- `uwbtrilat.vector`: vector arithmetic on plain tuples (`diff`, `add`,
  `scale`, `dot`, `length`, `distance`, `normalize`, `cross`, `reflect`, ...);
- `uwbtrilat.matrix`: dense matrix arithmetic on nested tuples (`identity`,
  `transpose`, `matmul`, `mat_vec`, `vec_mat`, `outer`, `format_matrix`, ...);
- `uwbtrilat.inversion`: `determinant`, `cofactor`, `adjoint`, `invert` and
  `SingularMatrixError` for square matrices of any size;
- `uwbtrilat.registers`: register identifiers, lengths and status bits of the
  DW1000 UWB transceiver.

## Installation

```
pip install .
```

The package has no runtime dependencies. To run the tests:

```
pip install ".[test]"
pytest
```

## Solving for a position

```python
from uwbtrilat.solver import PlanarSolver, SpatialSolver, ranges, rms_residual

anchors = [
    (0.0, 0.0, 0.0),
    (10.0, 0.0, 1.0),
    (0.0, 10.0, 2.0),
    (10.0, 10.0, 0.0),
]

# Exact ranges from a known position.
true_position = (2.0, 3.0, 1.0)
distances = ranges(anchors, true_position)

# 2D (x, y) solution; anchor heights are ignored.
planar = PlanarSolver(anchors)
xy = planar.solve(distances)

# Root-mean-square disagreement between the given ranges and those
# recomputed from the estimate (in the plane, for a 2D estimate).
print(xy, rms_residual(anchors, xy, distances))

# Full (x, y, z) solution.
spatial = SpatialSolver(anchors)
print(spatial.solve(distances))
```

`PlanarSolver` needs at least three anchors and `SpatialSolver` at least four.
The planar solver ignores anchor heights, so any height difference between the
anchors and the tag shows up as an error in (x, y). Both solvers raise
`ValueError` when `solve` gets the wrong number of distances. They raise
`uwbtrilat.inversion.SingularMatrixError` when the anchor layout is degenerate,
for example collinear anchors in 2D or coplanar anchors in 3D. The determinant
of the normal matrix is kept in the solver's `determinant` attribute. A value
near zero warns of a poorly conditioned layout.

The anchor geometry enters only the matrix part of the problem. That part is
inverted once, when the solver is built. Build one solver for each anchor
layout and reuse it for every set of distances.

## Vectors and matrices

```python
from uwbtrilat.vector import cross, normalize, distance
from uwbtrilat.matrix import matmul, transpose, format_matrix
from uwbtrilat.inversion import invert, determinant

print(cross((1, 0, 0), (0, 1, 0)))        # (0, 0, 1)
print(normalize((3.0, 4.0)))              # (0.6, 0.8)
print(distance((0, 0, 0), (1, 2, 2)))     # 3.0

m = ((2.0, 0.0), (0.0, 4.0))
print(determinant(m))                     # 8.0
print(format_matrix(invert(m)))
```

Operands of different sizes raise `ValueError`. `invert` raises
`SingularMatrixError`, a subclass of `ValueError`, for a zero determinant.

## DW1000 registers

```python
from uwbtrilat.registers import Register, StatusBit, register_length, bit_mask

register_length(Register.SYS_STATUS)   # 5 bytes
bit_mask(StatusBit.RXFCG)              # 1 << 14
```

`register_length` raises `ValueError` for a register that is only reached
through sub-addresses, such as `Register.AGC_TUNE`. The sub-address offsets
and bit positions are module-level constants, for example `AGC_TUNE1_SUB` and
`LEN_AGC_TUNE1`.

## What the package does not do

`uwbtrilat` is a library only. It installs no command-line program. It has no
random-number generator and no noise simulation; to study noise, perturb the
values from `ranges` yourself before passing them to a solver. It does not
talk to UWB hardware: `uwbtrilat.registers` only describes the register map.
It has no logging facility of its own.