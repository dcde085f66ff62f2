# src/materials/dielectric.py
import math
from typing import Optional
from core.vector import Vector3


def refract(eyev: Vector3, normalv: Vector3, n1: float, n2: float) -> Optional[Vector3]:
    """
    Direction of the transmitted ray by Snell's law, for an eye vector and a
    normal that both point away from the surface. Returns None on total
    internal reflection.
    """
    n_ratio = n1 / n2
    cos_i = eyev.dot(normalv)
    sin2_t = n_ratio * n_ratio * (1.0 - cos_i * cos_i)
    if sin2_t > 1.0:
        return None
    cos_t = math.sqrt(1.0 - sin2_t)
    return normalv * (n_ratio * cos_i - cos_t) - eyev * n_ratio


def schlick(comps) -> float:
    """
    Schlick approximation of the Fresnel reflectance at a hit, from the
    precomputed eye vector, normal and refractive indices.
    """
    cos = comps.eyev.dot(comps.normalv)

    # Total internal reflection can only occur when leaving the denser medium
    if comps.n1 > comps.n2:
        n = comps.n1 / comps.n2
        sin2_t = n * n * (1.0 - cos * cos)
        if sin2_t > 1.0:
            return 1.0
        cos = math.sqrt(1.0 - sin2_t)

    r0 = (comps.n1 - comps.n2) / (comps.n1 + comps.n2)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cos), 5)
