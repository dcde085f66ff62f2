# materials/patterns.py
import math
from core.vector import Vector3


class Pattern:
    """Base class for all procedural patterns."""
    def sample(self, point: Vector3) -> Vector3:
        """Sample the pattern color at a point in pattern space."""
        raise NotImplementedError("sample() must be implemented by pattern subclasses.")


class SolidPattern(Pattern):
    """A single solid color."""
    def __init__(self, color: Vector3):
        self.color = color

    def sample(self, point: Vector3) -> Vector3:
        return self.color


class TwoColorPattern(Pattern):
    """Base for patterns alternating between two colors."""
    def __init__(self, color1: Vector3, color2: Vector3):
        self.color1 = color1
        self.color2 = color2

    def pick(self, value: float) -> Vector3:
        return self.color1 if math.floor(value) % 2 == 0 else self.color2


class StripePattern(TwoColorPattern):
    """Stripes of unit width alternating along x."""
    def sample(self, point: Vector3) -> Vector3:
        return self.pick(point.x)


class RingPattern(TwoColorPattern):
    """Concentric rings in the xz plane."""
    def sample(self, point: Vector3) -> Vector3:
        return self.pick(point.x * point.x + point.z * point.z)


class CheckersPattern(TwoColorPattern):
    """A 3D checker pattern of unit cubes."""
    def sample(self, point: Vector3) -> Vector3:
        return self.pick(math.floor(point.x) + math.floor(point.y) + math.floor(point.z))
