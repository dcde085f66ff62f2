import pytest
from core.color import WHITE
from core.transform import scaling
from core.vector import Vector3
from geometry import Shape, Sphere, World
from materials.light import PointLight
from materials.material import Material


@pytest.fixture
def default_light():
    return PointLight(Vector3(-10, 10, -10), WHITE)


@pytest.fixture
def default_world(default_light):
    """
    Two concentric spheres: a colored outer unit sphere and a default inner
    sphere of radius 0.5, lit from the upper left.
    """
    world = World()
    world.add_light(default_light)
    outer = Material().set_color(Vector3(0.8, 1.0, 0.6)).set_diffuse(0.7).set_specular(0.2)
    world.add_shape(Shape(Sphere(), material=outer))
    world.add_shape(Shape(Sphere(), scaling(0.5, 0.5, 0.5)))
    return world
