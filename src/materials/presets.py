# materials/presets.py
from core.vector import Vector3
from materials.material import Material
from materials.light import PointLight
from materials.patterns import CheckersPattern, RingPattern, StripePattern


class ColorPresets:
    """Named surface colors. Kept below 1.0 so lit surfaces do not clip."""

    RED = Vector3(0.85, 0.15, 0.1)
    ORANGE = Vector3(0.95, 0.55, 0.1)
    YELLOW = Vector3(0.95, 0.85, 0.2)
    BLUE = Vector3(0.1, 0.25, 0.85)
    GREEN = Vector3(0.15, 0.7, 0.3)
    PURPLE = Vector3(0.5, 0.15, 0.7)

    # Greys for floors and backdrops
    WHITE = Vector3(0.95, 0.95, 0.95)
    GRAY = Vector3(0.45, 0.45, 0.45)
    BLACK = Vector3(0.05, 0.05, 0.05)


class MaterialPresets:
    """Predefined materials with realistic refractive indices."""

    @staticmethod
    def matte(color: Vector3) -> Material:
        """Diffuse only, no highlight."""
        return Material().set_color(color).set_specular(0.0)

    @staticmethod
    def mirror(reflective: float = 0.9) -> Material:
        return (Material()
                .set_color(Vector3(0.05, 0.05, 0.05))
                .set_diffuse(0.1)
                .set_specular(1.0)
                .set_shininess(300.0)
                .set_reflective(reflective))

    @staticmethod
    def dielectric(refractive_index: float) -> Material:
        # Clear, fully transparent and slightly reflective
        return (Material()
                .set_color(Vector3(0.0, 0.0, 0.0))
                .set_ambient(0.0)
                .set_diffuse(0.1)
                .set_specular(1.0)
                .set_shininess(300.0)
                .set_reflective(0.9)
                .set_transparency(0.9)
                .set_refractive_index(refractive_index))

    @staticmethod
    def glass() -> Material:
        return MaterialPresets.dielectric(1.52)  # Common glass

    @staticmethod
    def water() -> Material:
        return MaterialPresets.dielectric(1.33)

    @staticmethod
    def diamond() -> Material:
        return MaterialPresets.dielectric(2.42)

    @staticmethod
    def air() -> Material:
        return MaterialPresets.dielectric(1.00029)


class LightPresets:
    """Predefined point lights with different colors and intensities."""

    @staticmethod
    def warm_light(position: Vector3, intensity: float = 1.0) -> PointLight:
        return PointLight(position, Vector3(1.0, 0.95, 0.9) * intensity)

    @staticmethod
    def cool_light(position: Vector3, intensity: float = 1.0) -> PointLight:
        return PointLight(position, Vector3(0.9, 0.95, 1.0) * intensity)

    @staticmethod
    def daylight(position: Vector3, intensity: float = 1.0) -> PointLight:
        return PointLight(position, Vector3(1.0, 1.0, 1.0) * intensity)


class PatternPresets:
    """Predefined procedural patterns."""

    @staticmethod
    def checkerboard(color1: Vector3 = None, color2: Vector3 = None) -> CheckersPattern:
        return CheckersPattern(color1 or ColorPresets.WHITE, color2 or ColorPresets.BLACK)

    @staticmethod
    def stripes(color1: Vector3 = None, color2: Vector3 = None) -> StripePattern:
        return StripePattern(color1 or ColorPresets.WHITE, color2 or ColorPresets.GRAY)

    @staticmethod
    def rings(color1: Vector3 = None, color2: Vector3 = None) -> RingPattern:
        return RingPattern(color1 or ColorPresets.ORANGE, color2 or ColorPresets.PURPLE)
