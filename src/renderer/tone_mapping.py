# renderer/tone_mapping.py
import numpy as np


def clamp_tone_mapping(linear):
    """
    Clamp a linear color image to [0, 1] and quantize to 8 bits, rounding
    halves up.
    """
    clamped = np.clip(linear, 0.0, 1.0)
    return np.floor(clamped * 255 + 0.5).astype("uint8")


def reinhard_tone_mapping(linear, exposure=1.0, white_point=1.0, gamma=2.2):
    """
    Apply Reinhard tone mapping to a linear radiance image.
    """
    scaled = np.maximum(linear, 0.0) * exposure
    mapped = scaled / (1.0 + scaled / white_point)
    mapped = mapped ** (1.0 / gamma)
    output = (mapped * 255).clip(0, 255).astype("uint8")
    return output


TONE_MAPPERS = {
    "clamp": clamp_tone_mapping,
    "reinhard": reinhard_tone_mapping,
}
