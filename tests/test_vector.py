import math

import pytest

from uwbtrilat import vector


def test_diff_and_add_round_trip():
    a = (1.5, -2.0, 7.25)
    b = (0.5, 4.0, -1.0)
    assert vector.add(vector.diff(a, b), b) == pytest.approx(a)


def test_diff_of_self_is_zero():
    a = (3.0, 4.0)
    assert vector.diff(a, a) == (0.0, 0.0)


def test_size_mismatch_raises():
    with pytest.raises(ValueError):
        vector.add((1.0, 2.0), (1.0, 2.0, 3.0))
    with pytest.raises(ValueError):
        vector.dot((1.0,), (1.0, 2.0))


def test_scale_matches_repeated_add():
    v = (1.0, -2.0, 3.0, 0.5)
    assert vector.scale(2.0, v) == pytest.approx(vector.add(v, v))


def test_accumulate_equals_add_of_scaled():
    acc = (1.0, 1.0, 1.0)
    v = (2.0, -3.0, 4.0)
    assert vector.accumulate(acc, 0.5, v) == pytest.approx(
        vector.add(acc, vector.scale(0.5, v))
    )


def test_length_of_three_four_five():
    assert vector.length((3.0, 4.0)) == pytest.approx(5.0)


def test_length_squared_equals_dot():
    v = (1.2, -3.4, 5.6, 0.7)
    assert vector.length(v) ** 2 == pytest.approx(vector.dot(v, v))


def test_distance_is_symmetric_and_zero_on_self():
    a = (2.0, 3.0, 1.0)
    b = (10.0, 0.0, 1.0)
    assert vector.distance(a, b) == pytest.approx(vector.distance(b, a))
    assert vector.distance(a, a) == 0.0
    assert vector.distance(a, b) == pytest.approx(vector.length(vector.diff(a, b)))


def test_normalize_gives_unit_length_same_direction():
    v = (3.0, -1.0, 2.0)
    n = vector.normalize(v)
    assert vector.length(n) == pytest.approx(1.0)
    assert vector.length(vector.cross(v, n)) == pytest.approx(0.0, abs=1e-12)
    assert vector.dot(v, n) > 0


def test_normalize_zero_vector_unchanged():
    assert vector.normalize((0.0, 0.0, 0.0)) == (0.0, 0.0, 0.0)


def test_renormalize_sets_length():
    v = (1.0, 2.0, 2.0)
    assert vector.length(vector.renormalize(v, 7.5)) == pytest.approx(7.5)


def test_cross_of_axes():
    x = (1.0, 0.0, 0.0)
    y = (0.0, 1.0, 0.0)
    z = (0.0, 0.0, 1.0)
    assert vector.cross(x, y) == z
    assert vector.cross(y, x) == vector.scale(-1.0, z)


def test_cross_is_orthogonal_to_operands():
    a = (1.0, 2.0, 3.0)
    b = (-4.0, 0.5, 2.0)
    c = vector.cross(a, b)
    assert vector.dot(c, a) == pytest.approx(0.0, abs=1e-12)
    assert vector.dot(c, b) == pytest.approx(0.0, abs=1e-12)


def test_cross_requires_3d():
    with pytest.raises(ValueError):
        vector.cross((1.0, 2.0), (3.0, 4.0))


def test_perpendicular_plus_parallel_rebuilds_vector():
    v = (2.0, -1.0, 4.0)
    n = vector.normalize((1.0, 1.0, 0.0))
    perp = vector.perpendicular(v, n)
    par = vector.parallel(v, n)
    assert vector.add(perp, par) == pytest.approx(v)
    assert vector.dot(perp, n) == pytest.approx(0.0, abs=1e-12)


def test_reflect_preserves_length_and_flips_normal_component():
    v = (1.0, 2.0, -3.0)
    n = vector.normalize((0.0, 1.0, 1.0))
    r = vector.reflect(v, n)
    assert vector.length(r) == pytest.approx(vector.length(v))
    assert vector.dot(r, n) == pytest.approx(-vector.dot(v, n))
    assert vector.reflect(r, n) == pytest.approx(v)


def test_blend_matches_scaled_sum():
    a = (1.0, 2.0, 3.0)
    b = (4.0, 5.0, 6.0)
    assert vector.blend(0.25, a, 0.75, b) == pytest.approx(
        vector.add(vector.scale(0.25, a), vector.scale(0.75, b))
    )


def test_impact_matches_perpendicular_length():
    direction = vector.normalize((1.0, 2.0, 2.0))
    position = (3.0, -1.0, 5.0)
    expected = vector.length(vector.perpendicular(position, direction))
    assert vector.impact(direction, position) == pytest.approx(expected)
    assert vector.impact_squared(direction, position) == pytest.approx(expected**2)


def test_impact_on_line_is_zero():
    direction = (0.0, 0.0, 1.0)
    assert vector.impact_squared(direction, (0.0, 0.0, 9.0)) == pytest.approx(0.0)


def test_conjugate_length_completes_unit_quaternion():
    v = (0.1, 0.2, 0.3)
    w = vector.conjugate_length(v)
    assert w * w + vector.dot(v, v) == pytest.approx(1.0)


def test_conjugate_length_rejects_long_vector():
    with pytest.raises(ValueError):
        vector.conjugate_length((1.0, 1.0, 1.0))


def test_describe_lists_components_and_length():
    text = vector.describe((3.0, 4.0))
    assert text == "a is 3.000000 4.000000 length of a is 5.000000"
    assert math.isclose(float(text.split()[-1]), vector.length((3.0, 4.0)))