# geometry/cube.py
import math
from typing import List, Tuple
from core.vector import Vector3
from core.ray import Ray
from core.utils import EPSILON
from geometry.hittable import Hittable


def check_axis(origin: float, direction: float) -> Tuple[float, float]:
    """
    Returns the (near, far) ray parameters of the two slabs at -1 and +1 on
    one axis.
    """
    tmin_numerator = -1.0 - origin
    tmax_numerator = 1.0 - origin

    if abs(direction) >= EPSILON:
        tmin = tmin_numerator / direction
        tmax = tmax_numerator / direction
    else:
        # Parallel to this axis
        tmin = math.copysign(math.inf, tmin_numerator)
        tmax = math.copysign(math.inf, tmax_numerator)

    if tmin > tmax:
        tmin, tmax = tmax, tmin
    return tmin, tmax


class Cube(Hittable):
    """
    Axis-aligned cube spanning [-1, 1] on every object-space axis.
    """
    def local_intersect(self, ray: Ray) -> List[float]:
        xtmin, xtmax = check_axis(ray.origin.x, ray.direction.x)
        ytmin, ytmax = check_axis(ray.origin.y, ray.direction.y)
        ztmin, ztmax = check_axis(ray.origin.z, ray.direction.z)

        tmin = max(xtmin, ytmin, ztmin)
        tmax = min(xtmax, ytmax, ztmax)

        if tmin > tmax:
            return []
        return [tmin, tmax]

    def local_normal_at(self, point: Vector3) -> Vector3:
        ax, ay, az = abs(point.x), abs(point.y), abs(point.z)
        maxc = max(ax, ay, az)

        # Ties resolve to x, then y
        if maxc == ax:
            return Vector3(math.copysign(1.0, point.x), 0.0, 0.0)
        if maxc == ay:
            return Vector3(0.0, math.copysign(1.0, point.y), 0.0)
        return Vector3(0.0, 0.0, math.copysign(1.0, point.z))
