# src/geometry/world.py
from typing import List
from core.color import BLACK
from core.ray import Ray
from core.utils import EPSILON, reflect
from core.vector import Vector3
from geometry.hittable import Computations
from geometry.intersection import Intersection, Intersections
from geometry.shape import Shape
from materials.dielectric import refract, schlick
from materials.light import PointLight

# Refractive index of the space between shapes
VACUUM_INDEX = 1.0


class World:
    """
    All shapes and lights of a scene, plus the recursive Whitted shading.

    Shapes are referred to by their index in self.shapes everywhere else
    (intersections, refraction bookkeeping), so the list is append-only:
    replace_shape swaps a value in place but never reorders.
    """
    def __init__(self):
        self.shapes: List[Shape] = []
        self.lights: List[PointLight] = []

    def add_light(self, light: PointLight):
        self.lights.append(light)

    def add_shape(self, shape: Shape) -> int:
        self.shapes.append(shape)
        return len(self.shapes) - 1

    def replace_shape(self, index: int, shape: Shape):
        self.shapes[index] = shape

    def intersect(self, ray: Ray) -> Intersections:
        # Linear scan over every shape
        xs = []
        for object_id, shape in enumerate(self.shapes):
            for t in shape.intersect(ray):
                xs.append(Intersection(t, object_id))
        return Intersections(xs)

    def prepare_computations(self, intersections: Intersections, hit_index: int,
                             ray: Ray) -> Computations:
        """
        Shading state for intersections[hit_index]. The whole sorted list is
        needed to find which refractive media the ray is leaving and entering.
        """
        hit = intersections[hit_index]
        point = ray.at(hit.t)
        comps = Computations(hit.t, hit.object_id, point, -ray.direction)
        comps.set_face_normal(self.shapes[hit.object_id].normal_at(point))
        comps.reflectv = reflect(ray.direction, comps.normalv)
        offset = comps.normalv * EPSILON
        comps.over_point = point + offset
        comps.under_point = point - offset

        # Shapes the ray has entered but not yet left, innermost last
        containers: List[int] = []
        for index, i in enumerate(intersections):
            if index == hit_index:
                comps.n1 = self._current_index(containers)
            if i.object_id in containers:
                containers.remove(i.object_id)
            else:
                containers.append(i.object_id)
            if index == hit_index:
                comps.n2 = self._current_index(containers)
                break
        return comps

    def _current_index(self, containers: List[int]) -> float:
        if not containers:
            return VACUUM_INDEX
        return self.shapes[containers[-1]].material.refractive_index

    def shade_hit(self, comps: Computations, remaining: int) -> Vector3:
        shape = self.shapes[comps.object_id]
        material = shape.material

        surface = BLACK
        for light in self.lights:
            shadowed = self.is_shadowed(light, comps.over_point)
            surface = surface + material.lighting(
                light, shape.inverse_transform, comps.over_point,
                comps.eyev, comps.normalv, shadowed)

        reflected = self.reflected_color(comps, remaining)
        refracted = self.refracted_color(comps, remaining)

        if material.reflective > 0 and material.transparency > 0:
            reflectance = schlick(comps)
            return surface + reflected * reflectance + refracted * (1.0 - reflectance)
        return surface + reflected + refracted

    def reflected_color(self, comps: Computations, remaining: int) -> Vector3:
        reflective = self.shapes[comps.object_id].material.reflective
        if reflective == 0 or remaining <= 0:
            return BLACK
        reflect_ray = Ray(comps.over_point, comps.reflectv)
        return self.color_at(reflect_ray, remaining - 1) * reflective

    def refracted_color(self, comps: Computations, remaining: int) -> Vector3:
        transparency = self.shapes[comps.object_id].material.transparency
        if transparency == 0 or remaining <= 0:
            return BLACK
        direction = refract(comps.eyev, comps.normalv, comps.n1, comps.n2)
        if direction is None:
            # Total internal reflection
            return BLACK
        refract_ray = Ray(comps.under_point, direction)
        return self.color_at(refract_ray, remaining - 1) * transparency

    def color_at(self, ray: Ray, remaining: int) -> Vector3:
        intersections = self.intersect(ray)
        hit_index = intersections.hit_index()
        if hit_index is None:
            return BLACK
        comps = self.prepare_computations(intersections, hit_index, ray)
        return self.shade_hit(comps, remaining)

    def is_shadowed(self, light: PointLight, point: Vector3) -> bool:
        v = light.vector_from(point)
        distance = v.length()
        # A light sitting on the point has nothing in between
        if distance < EPSILON:
            return False
        shadow_ray = Ray(point, v.normalize())
        h = self.intersect(shadow_ray).hit()
        return h is not None and h.t < distance
