# camera/camera.py
import copy
import math
from core.vector import Vector3, ORIGIN
from core.ray import Ray
from core.transform import Affine


class Camera:
    """
    Pinhole camera looking down -z in its own space, with the image plane
    one unit in front of the eye. Place it with set_transform(view_transform(...)).
    """
    def __init__(self, hsize: int, vsize: int, field_of_view: float):
        if hsize <= 0 or vsize <= 0:
            raise ValueError(f"Camera size must be positive, got {hsize}x{vsize}")
        self.hsize = hsize
        self.vsize = vsize
        self.field_of_view = field_of_view
        self.inverse_transform = Affine()

        half_view = math.tan(field_of_view / 2)
        aspect = hsize / vsize
        if aspect >= 1:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view
        self.pixel_size = (self.half_width * 2) / hsize

    def set_transform(self, transform: Affine) -> "Camera":
        """Returns a copy of the camera placed by the given view transform."""
        camera = copy.copy(self)
        camera.inverse_transform = transform.inverse()
        return camera

    def ray_for_pixel(self, px: int, py: int) -> Ray:
        """Generates the ray through the center of pixel (px, py)."""
        xoffset = (px + 0.5) * self.pixel_size
        yoffset = (py + 0.5) * self.pixel_size

        # The camera looks toward -z, so +x is to the left
        world_x = self.half_width - xoffset
        world_y = self.half_height - yoffset

        pixel = self.inverse_transform.apply_point(Vector3(world_x, world_y, -1.0))
        origin = self.inverse_transform.apply_point(ORIGIN)
        direction = (pixel - origin).normalize()
        return Ray(origin, direction)
