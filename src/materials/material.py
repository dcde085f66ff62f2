# materials/material.py
import copy
from typing import Optional
from core.vector import Vector3
from core.color import BLACK, WHITE
from core.transform import Affine
from core.utils import reflect
from materials.light import PointLight
from materials.patterns import Pattern, SolidPattern


class Material:
    """
    Phong surface description plus the optical coefficients used for
    reflection and refraction.

    Materials are immutable: every set_* method returns a modified copy, so a
    material can be shared between shapes and read from several render
    workers at once.
    """

    def __init__(self):
        self.pattern: Pattern = SolidPattern(WHITE)
        # None for solid colors, which need no point mapping
        self.pattern_inverse: Optional[Affine] = None
        self.ambient = 0.1
        self.diffuse = 0.9
        self.specular = 0.9
        self.shininess = 200.0
        self.reflective = 0.0
        self.transparency = 0.0
        self.refractive_index = 1.0

    def _replace(self, **changes) -> "Material":
        material = copy.copy(self)
        for name, value in changes.items():
            setattr(material, name, value)
        return material

    def set_color(self, color: Vector3) -> "Material":
        return self._replace(pattern=SolidPattern(color), pattern_inverse=None)

    def set_pattern(self, pattern: Pattern, transform: Optional[Affine] = None) -> "Material":
        """
        Uses a procedural pattern placed by its own transform, applied on top
        of the owning shape's transform. Raises SingularTransformError for a
        non-invertible transform.
        """
        inverse = transform.inverse() if transform is not None else Affine()
        return self._replace(pattern=pattern, pattern_inverse=inverse)

    def set_ambient(self, ambient: float) -> "Material":
        return self._replace(ambient=ambient)

    def set_diffuse(self, diffuse: float) -> "Material":
        return self._replace(diffuse=diffuse)

    def set_specular(self, specular: float) -> "Material":
        return self._replace(specular=specular)

    def set_shininess(self, shininess: float) -> "Material":
        return self._replace(shininess=shininess)

    def set_reflective(self, reflective: float) -> "Material":
        return self._replace(reflective=reflective)

    def set_transparency(self, transparency: float) -> "Material":
        return self._replace(transparency=transparency)

    def set_refractive_index(self, refractive_index: float) -> "Material":
        return self._replace(refractive_index=refractive_index)

    def color_at(self, shape_inverse: Affine, point: Vector3) -> Vector3:
        """
        Surface color at a world-space point on a shape with the given
        inverse transform.
        """
        if self.pattern_inverse is None:
            return self.pattern.sample(point)
        pattern_point = self.pattern_inverse.apply_point(shape_inverse.apply_point(point))
        return self.pattern.sample(pattern_point)

    def lighting(self, light: PointLight, shape_inverse: Affine, point: Vector3,
                 eyev: Vector3, normalv: Vector3, in_shadow: bool) -> Vector3:
        """
        Local Phong illumination of a point by one light. No recursion.
        """
        color = self.color_at(shape_inverse, point)
        # combine the surface color with the light's color/intensity
        effective_color = light.intensity * color
        ambient = effective_color * self.ambient
        if in_shadow:
            return ambient

        lightv = light.vector_from(point).normalize()
        # Negative means the light is on the other side of the surface
        light_dot_normal = lightv.dot(normalv)
        if light_dot_normal < 0:
            return ambient

        diffuse = effective_color * (self.diffuse * light_dot_normal)

        reflectv = reflect(-lightv, normalv)
        reflect_dot_eye = reflectv.dot(eyev)
        if reflect_dot_eye <= 0:
            specular = BLACK
        else:
            factor = reflect_dot_eye ** self.shininess
            specular = light.intensity * (self.specular * factor)

        return ambient + diffuse + specular

    def __repr__(self) -> str:
        return (f"Material(pattern={type(self.pattern).__name__}, ambient={self.ambient}, "
                f"diffuse={self.diffuse}, specular={self.specular}, shininess={self.shininess}, "
                f"reflective={self.reflective}, transparency={self.transparency}, "
                f"refractive_index={self.refractive_index})")


DEFAULT_MATERIAL = Material()
