# geometry/sphere.py
import math
from typing import List
from core.vector import Vector3, ORIGIN
from core.ray import Ray
from geometry.hittable import Hittable


class Sphere(Hittable):
    """
    Unit sphere centered at the object-space origin.
    """
    def local_intersect(self, ray: Ray) -> List[float]:
        sphere_to_ray = ray.origin - ORIGIN
        a = ray.direction.dot(ray.direction)
        # Zero-length direction
        if a == 0:
            return []

        b = 2.0 * ray.direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1.0
        discriminant = b * b - 4.0 * a * c

        if discriminant < 0:
            return []

        sqrt_disc = math.sqrt(discriminant)
        return [(-b - sqrt_disc) / (2.0 * a), (-b + sqrt_disc) / (2.0 * a)]

    def local_normal_at(self, point: Vector3) -> Vector3:
        return point - ORIGIN
