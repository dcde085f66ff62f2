# geometry/hittable.py
from typing import List
from core.vector import Vector3
from core.ray import Ray


class Hittable:
    """
    Abstract geometry primitive. Both operations work in the primitive's own
    object space; geometry.shape.Shape handles the mapping from world space.
    """
    def local_intersect(self, ray: Ray) -> List[float]:
        """
        Returns the ray parameters t at which the ray crosses the surface.
        At most two values, in no particular order.
        """
        raise NotImplementedError("local_intersect() must be implemented by subclasses.")

    def local_normal_at(self, point: Vector3) -> Vector3:
        raise NotImplementedError("local_normal_at() must be implemented by subclasses.")

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Computations:
    """
    Precomputed state for shading one intersection.
    """
    def __init__(self, t: float, object_id: int, point: Vector3, eyev: Vector3):
        self.t = t
        self.object_id = object_id
        self.point = point
        self.eyev = eyev
        self.normalv = None
        self.inside = False
        self.reflectv = None
        self.over_point = None    # Nudged along +normal, origin of shadow/reflection rays
        self.under_point = None   # Nudged along -normal, origin of refraction rays
        self.n1 = 1.0             # Medium the ray is leaving
        self.n2 = 1.0             # Medium the ray is entering

    def set_face_normal(self, outward_normal: Vector3):
        """
        Ensures that the normal always points toward the eye, flagging hits
        from inside the surface.
        """
        self.inside = outward_normal.dot(self.eyev) < 0
        self.normalv = outward_normal * -1 if self.inside else outward_normal
