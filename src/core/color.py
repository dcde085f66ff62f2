# core/color.py
from core.vector import Vector3

# Colors are Vector3 values holding (r, g, b) in x, y, z.
BLACK = Vector3(0.0, 0.0, 0.0)
WHITE = Vector3(1.0, 1.0, 1.0)


def color(r: float, g: float, b: float) -> Vector3:
    return Vector3(r, g, b)
