# scenes.py
import math
from typing import Callable, Dict, Tuple
from core.vector import Vector3
from core.color import WHITE, color
from core.transform import (Affine, rotation_x, scaling, translation,
                            view_transform)
from geometry import Cube, Cylinder, Plane, Shape, Sphere, World
from materials.light import PointLight
from materials.material import Material
from materials.patterns import CheckersPattern
from materials.presets import (ColorPresets, LightPresets, MaterialPresets,
                               PatternPresets)

Scene = Tuple[World, Affine]


def checkered_cube() -> Scene:
    """
    A reflective glass cube standing on a checkered floor.
    """
    world = World()
    world.add_light(PointLight(Vector3(-10, 10, -10), WHITE))

    floor = Material().set_pattern(
        CheckersPattern(color(1.0, 0.9, 0.9), color(0.5, 0.45, 0.45))).set_specular(0.0)
    world.add_shape(Shape(Plane(), material=floor))

    cube = (Material()
            .set_color(color(0.1, 1.0, 0.5))
            .set_diffuse(0.7)
            .set_specular(0.0)
            .set_transparency(1.0)
            .set_refractive_index(1.5)
            .set_reflective(0.9))
    world.add_shape(Shape(Cube(), translation(0, 1, 0.5), cube))

    view = view_transform(Vector3(2, 4, -6), Vector3(0, 1, -1), Vector3(0, 1, 0))
    return world, view


def nested_glass() -> Scene:
    """
    A glass sphere holding an air bubble, over a striped floor.
    """
    world = World()
    world.add_light(LightPresets.daylight(Vector3(-5, 10, -10)))

    floor = Material().set_pattern(PatternPresets.stripes(), scaling(0.5, 0.5, 0.5))
    world.add_shape(Shape(Plane(), translation(0, -1, 0), floor.set_reflective(0.2)))

    world.add_shape(Shape(Sphere(), material=MaterialPresets.glass()))
    world.add_shape(Shape(Sphere(), scaling(0.5, 0.5, 0.5), MaterialPresets.air()))

    view = view_transform(Vector3(0, 1.5, -5), Vector3(0, 0, 0), Vector3(0, 1, 0))
    return world, view


def reflective_room() -> Scene:
    """
    Mirror back wall, ringed floor, a matte cylinder, a cube and two spheres.
    """
    world = World()
    world.add_light(LightPresets.warm_light(Vector3(-4, 6, -8)))
    world.add_light(LightPresets.cool_light(Vector3(6, 4, -6), 0.4))

    floor = Material().set_pattern(PatternPresets.rings(), scaling(0.5, 0.5, 0.5)).set_specular(0.1)
    world.add_shape(Shape(Plane(), material=floor))
    world.add_shape(Shape(Plane(), translation(0, 0, 6) * rotation_x(math.pi / 2),
                          MaterialPresets.mirror()))

    world.add_shape(Shape(Cylinder(), translation(-2.5, 0, 1) * scaling(0.5, 1, 0.5),
                          MaterialPresets.matte(ColorPresets.BLUE)))
    world.add_shape(Shape(Cube(), translation(2.5, 0.75, 1.5) * scaling(0.75, 0.75, 0.75),
                          MaterialPresets.matte(ColorPresets.GREEN).set_reflective(0.1)))
    world.add_shape(Shape(Sphere(), translation(0, 1, 0),
                          MaterialPresets.matte(ColorPresets.RED).set_specular(0.6)))
    world.add_shape(Shape(Sphere(), translation(1, 0.5, -1.5) * scaling(0.5, 0.5, 0.5),
                          MaterialPresets.glass()))

    view = view_transform(Vector3(0, 3, -8), Vector3(0, 1, 0), Vector3(0, 1, 0))
    return world, view


SCENES: Dict[str, Callable[[], Scene]] = {
    "checkered_cube": checkered_cube,
    "nested_glass": nested_glass,
    "reflective_room": reflective_room,
}
