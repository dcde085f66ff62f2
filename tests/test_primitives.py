import math
import random

import pytest

from core.ray import Ray
from core.vector import Vector3
from geometry import Cube, Cylinder, Plane, Sphere

SQRT3_3 = math.sqrt(3) / 3


def ts(primitive, origin, direction):
    return sorted(primitive.local_intersect(Ray(origin, direction)))


class TestSphere:
    def test_ray_intersects_at_two_points(self):
        assert ts(Sphere(), Vector3(0, 0, -5), Vector3(0, 0, 1)) == pytest.approx([4.0, 6.0])

    def test_ray_intersects_at_a_tangent(self):
        assert ts(Sphere(), Vector3(0, 1, -5), Vector3(0, 0, 1)) == pytest.approx([5.0, 5.0])

    def test_ray_misses(self):
        assert ts(Sphere(), Vector3(0, 2, -5), Vector3(0, 0, 1)) == []

    def test_ray_originates_inside(self):
        assert ts(Sphere(), Vector3(0, 0, 0), Vector3(0, 0, 1)) == pytest.approx([-1.0, 1.0])

    def test_sphere_behind_ray(self):
        assert ts(Sphere(), Vector3(0, 0, 5), Vector3(0, 0, 1)) == pytest.approx([-6.0, -4.0])

    def test_zero_length_direction_misses(self):
        assert ts(Sphere(), Vector3(0, 0, 0), Vector3(0, 0, 0)) == []

    @pytest.mark.parametrize("point", [
        Vector3(1, 0, 0), Vector3(0, 1, 0), Vector3(0, 0, 1),
        Vector3(SQRT3_3, SQRT3_3, SQRT3_3),
    ])
    def test_normal_is_the_radius_direction(self, point):
        assert Sphere().local_normal_at(point).approx_eq(point)


class TestPlane:
    def test_parallel_ray_misses(self):
        assert ts(Plane(), Vector3(0, 10, 0), Vector3(0, 0, 1)) == []

    def test_coplanar_ray_misses(self):
        assert ts(Plane(), Vector3(0, 0, 0), Vector3(0, 0, 1)) == []

    def test_ray_from_above(self):
        assert ts(Plane(), Vector3(0, 1, 0), Vector3(0, -1, 0)) == pytest.approx([1.0])

    def test_ray_from_below(self):
        assert ts(Plane(), Vector3(0, -1, 0), Vector3(0, 1, 0)) == pytest.approx([1.0])

    def test_normal_is_constant(self):
        for p in (Vector3(0, 0, 0), Vector3(10, 0, -10), Vector3(-5, 0, 150)):
            assert Plane().local_normal_at(p).approx_eq(Vector3(0, 1, 0))


class TestCube:
    @pytest.mark.parametrize("origin, direction, expected", [
        (Vector3(5, 0.5, 0), Vector3(-1, 0, 0), [4, 6]),
        (Vector3(-5, 0.5, 0), Vector3(1, 0, 0), [4, 6]),
        (Vector3(0.5, 5, 0), Vector3(0, -1, 0), [4, 6]),
        (Vector3(0.5, -5, 0), Vector3(0, 1, 0), [4, 6]),
        (Vector3(0.5, 0, 5), Vector3(0, 0, -1), [4, 6]),
        (Vector3(0.5, 0, -5), Vector3(0, 0, 1), [4, 6]),
        (Vector3(0, 0.5, 0), Vector3(0, 0, 1), [-1, 1]),
        # grazing the x = 1 face, parallel to it
        (Vector3(1, 0, -5), Vector3(0, 0, 1), [4, 6]),
    ])
    def test_ray_intersects_each_face(self, origin, direction, expected):
        assert ts(Cube(), origin, direction) == pytest.approx(expected)

    @pytest.mark.parametrize("origin, direction", [
        (Vector3(-2, 0, 0), Vector3(0.2673, 0.5345, 0.8018)),
        (Vector3(0, -2, 0), Vector3(0.8018, 0.2673, 0.5345)),
        (Vector3(0, 0, -2), Vector3(0.5345, 0.8018, 0.2673)),
        (Vector3(2, 0, 2), Vector3(0, 0, -1)),
        (Vector3(0, 2, 2), Vector3(0, -1, 0)),
        (Vector3(2, 2, 0), Vector3(-1, 0, 0)),
    ])
    def test_ray_misses(self, origin, direction):
        assert ts(Cube(), origin, direction) == []

    @pytest.mark.parametrize("point, normal", [
        (Vector3(1, 0.5, -0.8), Vector3(1, 0, 0)),
        (Vector3(-1, -0.2, 0.9), Vector3(-1, 0, 0)),
        (Vector3(-0.4, 1, -0.1), Vector3(0, 1, 0)),
        (Vector3(0.3, -1, -0.7), Vector3(0, -1, 0)),
        (Vector3(-0.6, 0.3, 1), Vector3(0, 0, 1)),
        (Vector3(0.4, 0.4, -1), Vector3(0, 0, -1)),
        (Vector3(1, 1, 1), Vector3(1, 0, 0)),
        (Vector3(-1, -1, -1), Vector3(-1, 0, 0)),
        (Vector3(0.5, -1, 1), Vector3(0, -1, 0)),
    ])
    def test_normal_uses_largest_component(self, point, normal):
        assert Cube().local_normal_at(point).approx_eq(normal)


class TestCylinder:
    @pytest.mark.parametrize("origin, direction", [
        (Vector3(1, 0, 0), Vector3(0, 1, 0)),
        (Vector3(0, 0, 0), Vector3(0, 1, 0)),
        (Vector3(0, 0, -5), Vector3(1, 1, 1)),
    ])
    def test_ray_misses(self, origin, direction):
        assert ts(Cylinder(), origin, direction.normalize()) == []

    @pytest.mark.parametrize("origin, direction, expected", [
        (Vector3(1, 0, -5), Vector3(0, 0, 1), [5, 5]),
        (Vector3(0, 0, -5), Vector3(0, 0, 1), [4, 6]),
        (Vector3(0.5, 0, -5), Vector3(0.1, 1, 1), [6.80798, 7.08872]),
    ])
    def test_ray_strikes(self, origin, direction, expected):
        result = ts(Cylinder(), origin, direction.normalize())
        assert result == pytest.approx(expected, abs=1e-4)

    @pytest.mark.parametrize("point, normal", [
        (Vector3(1, 0, 0), Vector3(1, 0, 0)),
        (Vector3(0, 5, -1), Vector3(0, 0, -1)),
        (Vector3(0, -2, 1), Vector3(0, 0, 1)),
        (Vector3(-1, 1, 0), Vector3(-1, 0, 0)),
    ])
    def test_normal(self, point, normal):
        assert Cylinder().local_normal_at(point).approx_eq(normal)


AXES = [Vector3(1, 0, 0), Vector3(-1, 0, 0), Vector3(0, 1, 0),
        Vector3(0, -1, 0), Vector3(0, 0, 1), Vector3(0, 0, -1)]


def random_rays(count=200, seed=7):
    rng = random.Random(seed)
    for _ in range(count):
        origin = Vector3(rng.uniform(-4, 4), rng.uniform(-4, 4), rng.uniform(-4, 4))
        target = Vector3(rng.uniform(-0.9, 0.9), rng.uniform(-0.9, 0.9), rng.uniform(-0.9, 0.9))
        yield Ray(origin, (target - origin).normalize())


@pytest.mark.parametrize("primitive", [Sphere(), Cylinder()])
def test_normals_at_hits_have_unit_length(primitive):
    hits = 0
    for ray in random_rays():
        for t in primitive.local_intersect(ray):
            hits += 1
            assert primitive.local_normal_at(ray.at(t)).length() == pytest.approx(1.0, abs=1e-5)
    assert hits > 0


@pytest.mark.parametrize("primitive", [Cube(), Plane()])
def test_normals_at_hits_are_axis_directions(primitive):
    hits = 0
    for ray in random_rays():
        for t in primitive.local_intersect(ray):
            hits += 1
            normal = primitive.local_normal_at(ray.at(t))
            assert any(normal.approx_eq(axis) for axis in AXES)
    assert hits > 0
