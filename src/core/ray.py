# core/ray.py
from core.vector import Vector3


class Ray:
    """
    Represents a ray in 3D space with an origin and direction.
    """
    __slots__ = ("origin", "direction")

    def __init__(self, origin: Vector3, direction: Vector3):
        self.origin = origin
        self.direction = direction

    def at(self, t: float) -> Vector3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def transform(self, affine) -> "Ray":
        """
        Returns this ray mapped through an affine transform. The direction is
        not renormalized, so t values stay comparable across the mapping.
        """
        return Ray(affine.apply_point(self.origin), affine.apply_vector(self.direction))

    def __repr__(self) -> str:
        return f"Ray({self.origin}, {self.direction})"
