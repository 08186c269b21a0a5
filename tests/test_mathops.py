import math

import numpy as np
import pytest

from mapo.mathops import (
    bit,
    clamp,
    cross,
    decompose_transform,
    degrees,
    dot,
    is_power_of_two,
    length,
    normalize,
    radians,
)


def _translation(t):
    m = np.eye(4)
    m[:3, 3] = t
    return m


def _scaling(s):
    return np.diag([s[0], s[1], s[2], 1.0])


def _rot_x(a):
    c, s = math.cos(a), math.sin(a)
    return np.array([[1, 0, 0, 0], [0, c, -s, 0], [0, s, c, 0], [0, 0, 0, 1.0]])


def _rot_y(a):
    c, s = math.cos(a), math.sin(a)
    return np.array([[c, 0, s, 0], [0, 1, 0, 0], [-s, 0, c, 0], [0, 0, 0, 1.0]])


def _rot_z(a):
    c, s = math.cos(a), math.sin(a)
    return np.array([[c, -s, 0, 0], [s, c, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1.0]])


def test_bit_and_power_of_two():
    for n in range(12):
        assert is_power_of_two(bit(n))
    assert bit(0) == 1


@pytest.mark.parametrize("value", [3, 6, 12, 100])
def test_not_power_of_two(value):
    assert not is_power_of_two(value)


def test_zero_counts_as_power_of_two():
    assert is_power_of_two(0)


def test_angle_conversions():
    assert radians(180.0) == pytest.approx(math.pi)
    assert degrees(math.pi) == pytest.approx(180.0)
    assert degrees(radians(37.5)) == pytest.approx(37.5)


def test_clamp_scalars():
    assert clamp(5, 0, 3) == 3
    assert clamp(-2, 0, 3) == 0
    assert clamp(1.5, 0.0, 3.0) == 1.5


def test_clamp_arrays():
    result = clamp(np.array([-1.0, 0.5, 2.0]), 0.0, 1.0)
    np.testing.assert_allclose(result, [0.0, 0.5, 1.0])


def test_normalize_has_unit_length():
    v = normalize([3.0, -2.0, 7.0])
    assert length(v) == pytest.approx(1.0)


def test_normalize_zero_vector_raises():
    with pytest.raises(ValueError):
        normalize([0.0, 0.0, 0.0])


def test_length_matches_dot():
    v = [1.0, 2.0, 2.0]
    assert length(v) ** 2 == pytest.approx(dot(v, v))


def test_cross_is_orthogonal():
    a = [1.0, 2.0, 3.0]
    b = [-4.0, 0.5, 2.0]
    c = cross(a, b)
    assert dot(c, a) == pytest.approx(0.0)
    assert dot(c, b) == pytest.approx(0.0)


def test_cross_of_axes():
    np.testing.assert_allclose(cross([1, 0, 0], [0, 1, 0]), [0, 0, 1])


def test_cross_rejects_wrong_shape():
    with pytest.raises(ValueError):
        cross([1, 0], [0, 1])


def test_decompose_identity():
    translation, rotation, scale = decompose_transform(np.eye(4))
    np.testing.assert_allclose(translation, np.zeros(3))
    np.testing.assert_allclose(rotation, np.zeros(3), atol=1e-12)
    np.testing.assert_allclose(scale, np.ones(3))


@pytest.mark.parametrize(
    "rotation_builder, axis",
    [(_rot_x, 0), (_rot_y, 1), (_rot_z, 2)],
)
def test_decompose_round_trip_single_axis(rotation_builder, axis):
    t = [1.5, -2.0, 0.25]
    s = [2.0, 0.5, 3.0]
    angle = 0.6
    m = _translation(t) @ rotation_builder(angle) @ _scaling(s)
    translation, rotation, scale = decompose_transform(m)
    np.testing.assert_allclose(translation, t)
    np.testing.assert_allclose(scale, s)
    expected = np.zeros(3)
    expected[axis] = angle
    np.testing.assert_allclose(rotation, expected, atol=1e-9)


def test_decompose_ignores_perspective_row():
    t = [4.0, 5.0, 6.0]
    m = _translation(t) @ _scaling([2.0, 2.0, 2.0])
    m[3, :3] = [0.1, 0.2, 0.3]
    translation, _, scale = decompose_transform(m)
    np.testing.assert_allclose(translation, t)
    np.testing.assert_allclose(scale, [2.0, 2.0, 2.0])


def test_decompose_zero_homogeneous_component_raises():
    m = np.eye(4)
    m[3, 3] = 0.0
    with pytest.raises(ValueError):
        decompose_transform(m)


def test_decompose_rejects_wrong_shape():
    with pytest.raises(ValueError):
        decompose_transform(np.eye(3))