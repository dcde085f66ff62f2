# renderer/canvas.py
import os
from typing import List
import numpy as np
from PIL import Image
from core.vector import Vector3
from renderer.tone_mapping import TONE_MAPPERS, clamp_tone_mapping

MAX_COLOR = 255
PPM_LINE_LIMIT = 70


class Canvas:
    """
    A linear-color framebuffer, stored as a (height, width, 3) float array.
    """
    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.float64)

    def write_pixel(self, x: int, y: int, color: Vector3):
        self.pixels[y, x] = (color.x, color.y, color.z)

    def write_row(self, y: int, colors: List[Vector3]):
        self.pixels[y] = [(c.x, c.y, c.z) for c in colors]

    def pixel_at(self, x: int, y: int) -> Vector3:
        r, g, b = self.pixels[y, x]
        return Vector3(float(r), float(g), float(b))

    def to_ppm(self) -> str:
        """
        Plain (P3) PPM text. Lines are wrapped to at most 70 characters and
        the file ends with a newline.
        """
        data = clamp_tone_mapping(self.pixels)
        lines = ["P3", f"{self.width} {self.height}", str(MAX_COLOR)]
        for row in data:
            line = ""
            for value in row.reshape(-1):
                s = str(int(value))
                if len(line) + 1 + len(s) > PPM_LINE_LIMIT:
                    lines.append(line)
                    line = ""
                line = s if not line else f"{line} {s}"
            lines.append(line)
        return "\n".join(lines) + "\n"

    def to_array(self, tone_map: str = "clamp", **params) -> np.ndarray:
        """8-bit (height, width, 3) image after tone mapping."""
        if tone_map not in TONE_MAPPERS:
            raise ValueError(f"Unknown tone mapping '{tone_map}', expected one of {sorted(TONE_MAPPERS)}")
        return TONE_MAPPERS[tone_map](self.pixels, **params)

    def to_image(self, tone_map: str = "clamp", **params) -> Image.Image:
        return Image.fromarray(self.to_array(tone_map, **params))

    def save(self, path: str, tone_map: str = "clamp", **params):
        """
        Writes .ppm files as plain text; any other extension goes through
        Pillow after tone mapping.
        """
        ext = os.path.splitext(path)[1].lower()
        if ext == ".ppm":
            if tone_map != "clamp":
                raise ValueError("PPM output only supports clamp tone mapping")
            with open(path, "w") as f:
                f.write(self.to_ppm())
        else:
            self.to_image(tone_map, **params).save(path)
