from geometry.hittable import Hittable, Computations
from geometry.sphere import Sphere
from geometry.plane import Plane
from geometry.cube import Cube
from geometry.cylinder import Cylinder
from geometry.shape import Shape
from geometry.intersection import Intersection, Intersections
from geometry.world import World

__all__ = [
    "Hittable", "Computations",
    "Sphere", "Plane", "Cube", "Cylinder",
    "Shape", "Intersection", "Intersections", "World",
]
