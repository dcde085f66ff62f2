import math

import numpy as np
import pytest

from core.ray import Ray
from core.transform import (IDENTITY, SingularTransformError, rotation_x, rotation_y,
                            rotation_z, scaling, shearing, translation, view_transform)
from core.vector import Vector3

HALF_SQRT2 = math.sqrt(2) / 2


def test_translation_moves_points_but_not_vectors():
    t = translation(5, -3, 2)
    assert t.apply_point(Vector3(-3, 4, 5)).approx_eq(Vector3(2, 1, 7))
    assert t.inverse().apply_point(Vector3(-3, 4, 5)).approx_eq(Vector3(-8, 7, 3))
    assert t.apply_vector(Vector3(-3, 4, 5)).approx_eq(Vector3(-3, 4, 5))


def test_scaling_and_its_inverse():
    s = scaling(2, 3, 4)
    assert s.apply_point(Vector3(-4, 6, 8)).approx_eq(Vector3(-8, 18, 32))
    assert s.inverse().apply_vector(Vector3(-4, 6, 8)).approx_eq(Vector3(-2, 2, 2))


def test_rotations():
    assert rotation_x(math.pi / 4).apply_point(Vector3(0, 1, 0)).approx_eq(
        Vector3(0, HALF_SQRT2, HALF_SQRT2))
    assert rotation_x(math.pi / 2).apply_point(Vector3(0, 1, 0)).approx_eq(Vector3(0, 0, 1))
    assert rotation_y(math.pi / 2).apply_point(Vector3(0, 0, 1)).approx_eq(Vector3(1, 0, 0))
    assert rotation_z(math.pi / 2).apply_point(Vector3(0, 1, 0)).approx_eq(Vector3(-1, 0, 0))


def test_shearing_moves_x_in_proportion_to_y():
    s = shearing(1, 0, 0, 0, 0, 0)
    assert s.apply_point(Vector3(2, 3, 4)).approx_eq(Vector3(5, 3, 4))


def test_chained_transformations_apply_in_reverse_order():
    t = translation(10, 5, 7) * scaling(5, 5, 5) * rotation_x(math.pi / 2)
    assert t.apply_point(Vector3(1, 0, 1)).approx_eq(Vector3(15, 0, 7))


def test_transpose_of_linear_part_ignores_translation():
    t = translation(3, 4, 5) * shearing(1, 0, 0, 0, 0, 0)
    # transpose of [[1,1,0],[0,1,0],[0,0,1]] maps (1,0,0) to (1,1,0)
    assert t.apply_normal(Vector3(1, 0, 0)).approx_eq(Vector3(1, 1, 0))


def test_inverting_a_singular_transform_fails():
    with pytest.raises(SingularTransformError):
        scaling(0, 1, 1).inverse()
    assert issubclass(SingularTransformError, ValueError)


def test_composition_with_inverse_is_identity():
    t = rotation_y(0.3) * translation(1, -2, 3) * scaling(2, 0.5, 4)
    assert (t * t.inverse()).approx_eq(IDENTITY)


def test_view_transform_default_orientation():
    t = view_transform(Vector3(0, 0, 0), Vector3(0, 0, -1), Vector3(0, 1, 0))
    assert t.approx_eq(IDENTITY)


def test_view_transform_looking_in_positive_z():
    t = view_transform(Vector3(0, 0, 0), Vector3(0, 0, 1), Vector3(0, 1, 0))
    assert t.approx_eq(scaling(-1, 1, -1))


def test_view_transform_moves_the_world():
    t = view_transform(Vector3(0, 0, 8), Vector3(0, 0, 0), Vector3(0, 1, 0))
    assert t.approx_eq(translation(0, 0, -8))


def test_arbitrary_view_transform():
    t = view_transform(Vector3(1, 3, 2), Vector3(4, -2, 8), Vector3(1, 1, 0))
    expected = np.array([[-0.50709, 0.50709, 0.67612],
                         [0.76772, 0.60609, 0.12122],
                         [-0.35857, 0.59761, -0.71714]])
    assert np.allclose(t.linear, expected, atol=1e-5)
    assert np.allclose(t.translate, [-2.36643, -2.82843, 0.0], atol=1e-5)


def test_translating_and_scaling_a_ray():
    r = Ray(Vector3(1, 2, 3), Vector3(0, 1, 0))
    moved = r.transform(translation(3, 4, 5))
    assert moved.origin.approx_eq(Vector3(4, 6, 8))
    assert moved.direction.approx_eq(Vector3(0, 1, 0))

    scaled = r.transform(scaling(2, 3, 4))
    assert scaled.origin.approx_eq(Vector3(2, 6, 12))
    assert scaled.direction.approx_eq(Vector3(0, 3, 0))


def test_ray_position():
    r = Ray(Vector3(2, 3, 4), Vector3(1, 0, 0))
    assert r.at(0).approx_eq(Vector3(2, 3, 4))
    assert r.at(-1).approx_eq(Vector3(1, 3, 4))
    assert r.at(2.5).approx_eq(Vector3(4.5, 3, 4))


def test_vector_basics():
    a = Vector3(1, 2, 3)
    b = Vector3(2, 3, 4)
    assert a.dot(b) == 20
    assert a.cross(b).approx_eq(Vector3(-1, 2, -1))
    assert (-a).approx_eq(Vector3(-1, -2, -3))
    assert Vector3(4, 0, 0).normalize().approx_eq(Vector3(1, 0, 0))
    assert Vector3(0, 0, 0).normalize().approx_eq(Vector3(0, 0, 0))
    assert (Vector3(1, 0.2, 0.4) * Vector3(0.9, 1, 0.1)).approx_eq(Vector3(0.9, 0.2, 0.04))
