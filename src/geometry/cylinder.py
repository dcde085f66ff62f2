# geometry/cylinder.py
import math
from typing import List
from core.vector import Vector3
from core.ray import Ray
from core.utils import EPSILON
from geometry.hittable import Hittable


class Cylinder(Hittable):
    """
    Infinite, open cylinder of radius 1 around the object-space y axis.
    """
    def local_intersect(self, ray: Ray) -> List[float]:
        d, o = ray.direction, ray.origin
        a = d.x * d.x + d.z * d.z

        # Ray runs parallel to the axis
        if a < EPSILON:
            return []

        b = 2.0 * (o.x * d.x + o.z * d.z)
        c = o.x * o.x + o.z * o.z - 1.0
        disc = b * b - 4.0 * a * c

        if disc < 0:
            return []

        sqrt_disc = math.sqrt(disc)
        return [(-b - sqrt_disc) / (2.0 * a), (-b + sqrt_disc) / (2.0 * a)]

    def local_normal_at(self, point: Vector3) -> Vector3:
        return Vector3(point.x, 0.0, point.z)
