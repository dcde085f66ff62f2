# core/transform.py
import math
from typing import Optional

import numpy as np

from core.utils import EPSILON
from core.vector import Vector3

# Determinants below this are treated as singular.
SINGULAR_EPSILON = 1e-12


class SingularTransformError(ValueError):
    """Raised when a transform with a non-invertible linear part is inverted."""


class Affine:
    """
    A 3x3 linear map followed by a translation.

    The linear part is kept as a numpy array for composition and inversion, and
    mirrored as plain tuples so that applying the transform to a single point
    or vector inside the per-ray hot path avoids numpy call overhead.
    """

    def __init__(self, linear: Optional[np.ndarray] = None, translate: Optional[np.ndarray] = None):
        self.linear = np.identity(3) if linear is None else np.asarray(linear, dtype=np.float64)
        self.translate = np.zeros(3) if translate is None else np.asarray(translate, dtype=np.float64)
        if self.linear.shape != (3, 3) or self.translate.shape != (3,):
            raise ValueError("Affine expects a 3x3 linear part and a 3-vector translation")
        self._rows = tuple(tuple(float(v) for v in row) for row in self.linear)
        self._offset = tuple(float(v) for v in self.translate)

    def __mul__(self, other: "Affine") -> "Affine":
        """
        Composes two transforms: (self * other) applies other first.
        """
        return Affine(self.linear @ other.linear, self.linear @ other.translate + self.translate)

    def inverse(self) -> "Affine":
        det = np.linalg.det(self.linear)
        if abs(det) < SINGULAR_EPSILON:
            raise SingularTransformError(f"Transform is not invertible (determinant {det:g})")
        inv = np.linalg.inv(self.linear)
        return Affine(inv, -(inv @ self.translate))

    def apply_vector(self, v: Vector3) -> Vector3:
        (a, b, c), (d, e, f), (g, h, i) = self._rows
        return Vector3(a * v.x + b * v.y + c * v.z,
                       d * v.x + e * v.y + f * v.z,
                       g * v.x + h * v.y + i * v.z)

    def apply_point(self, p: Vector3) -> Vector3:
        tx, ty, tz = self._offset
        v = self.apply_vector(p)
        return Vector3(v.x + tx, v.y + ty, v.z + tz)

    def apply_normal(self, n: Vector3) -> Vector3:
        """
        Multiplies by the transpose of the linear part only. Called on an
        inverse transform this maps an object-space normal to world space.
        """
        (a, b, c), (d, e, f), (g, h, i) = self._rows
        return Vector3(a * n.x + d * n.y + g * n.z,
                       b * n.x + e * n.y + h * n.z,
                       c * n.x + f * n.y + i * n.z)

    def approx_eq(self, other: "Affine", eps: float = EPSILON) -> bool:
        return (np.allclose(self.linear, other.linear, rtol=0.0, atol=eps) and
                np.allclose(self.translate, other.translate, rtol=0.0, atol=eps))

    def __repr__(self) -> str:
        return f"Affine(linear={self.linear.tolist()}, translate={self.translate.tolist()})"


IDENTITY = Affine()


def translation(x: float, y: float, z: float) -> Affine:
    return Affine(np.identity(3), np.array([x, y, z], dtype=np.float64))


def scaling(x: float, y: float, z: float) -> Affine:
    return Affine(np.diag([x, y, z]).astype(np.float64))


def rotation_x(r: float) -> Affine:
    c, s = math.cos(r), math.sin(r)
    return Affine(np.array([[1.0, 0.0, 0.0],
                            [0.0, c, -s],
                            [0.0, s, c]]))


def rotation_y(r: float) -> Affine:
    c, s = math.cos(r), math.sin(r)
    return Affine(np.array([[c, 0.0, s],
                            [0.0, 1.0, 0.0],
                            [-s, 0.0, c]]))


def rotation_z(r: float) -> Affine:
    c, s = math.cos(r), math.sin(r)
    return Affine(np.array([[c, -s, 0.0],
                            [s, c, 0.0],
                            [0.0, 0.0, 1.0]]))


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Affine:
    return Affine(np.array([[1.0, xy, xz],
                            [yx, 1.0, yz],
                            [zx, zy, 1.0]]))


def view_transform(from_point: Vector3, to: Vector3, up: Vector3) -> Affine:
    """
    Orients the world relative to an eye at from_point looking at to.
    """
    forward = (to - from_point).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)
    orientation = Affine(np.array([list(left), list(true_up), list(-forward)]))
    return orientation * translation(-from_point.x, -from_point.y, -from_point.z)
