# geometry/shape.py
import copy
from typing import List, Optional
from core.vector import Vector3
from core.ray import Ray
from core.transform import Affine
from geometry.hittable import Hittable
from materials.material import Material, DEFAULT_MATERIAL


class Shape:
    """
    Places a geometry primitive in the world with an affine transform and
    gives it a material.

    Only the inverse transform is stored. Shapes are immutable values:
    set_transform and set_material return new shapes.
    """
    def __init__(self, primitive: Hittable, transform: Optional[Affine] = None,
                 material: Optional[Material] = None):
        self.primitive = primitive
        # Raises SingularTransformError for a degenerate transform
        self.inverse_transform = transform.inverse() if transform is not None else Affine()
        self.material = material if material is not None else DEFAULT_MATERIAL

    def set_transform(self, transform: Affine) -> "Shape":
        shape = copy.copy(self)
        shape.inverse_transform = transform.inverse()
        return shape

    def set_material(self, material: Material) -> "Shape":
        shape = copy.copy(self)
        shape.material = material
        return shape

    def intersect(self, ray: Ray) -> List[float]:
        """
        World-space ray against the primitive. The t values are valid for the
        original ray, since the local ray direction is not renormalized.
        """
        return self.primitive.local_intersect(ray.transform(self.inverse_transform))

    def normal_at(self, point: Vector3) -> Vector3:
        local_point = self.inverse_transform.apply_point(point)
        local_normal = self.primitive.local_normal_at(local_point)
        world_normal = self.inverse_transform.apply_normal(local_normal)
        return world_normal.normalize()

    def __repr__(self) -> str:
        return f"Shape({self.primitive!r}, {self.material!r})"
