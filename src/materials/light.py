# materials/light.py
from core.vector import Vector3


class PointLight:
    """
    A light with no size, emitting from a single point.
    """
    def __init__(self, position: Vector3, intensity: Vector3):
        self.position = position
        self.intensity = intensity

    def vector_from(self, point: Vector3) -> Vector3:
        """Unnormalized vector from point to the light."""
        return self.position - point

    def __repr__(self) -> str:
        return f"PointLight({self.position}, {self.intensity})"
