# geometry/plane.py
from typing import List
from core.vector import Vector3
from core.ray import Ray
from core.utils import EPSILON
from geometry.hittable import Hittable


class Plane(Hittable):
    """
    The object-space xz plane, facing +y.
    """
    def local_intersect(self, ray: Ray) -> List[float]:
        # A parallel ray misses, and so does a ray lying inside the plane.
        if abs(ray.direction.y) < EPSILON:
            return []
        return [-ray.origin.y / ray.direction.y]

    def local_normal_at(self, point: Vector3) -> Vector3:
        return Vector3(0.0, 1.0, 0.0)
