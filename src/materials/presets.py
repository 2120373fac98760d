# materials/presets.py
from core.vector import Vector3
from materials.metal import Metal
from materials.lambertian import Lambertian
from materials.dielectric import Dielectric

class MetalPresets:
    """Predefined metal materials."""

    @staticmethod
    def gold() -> Metal:
        return Metal(Vector3(0.8, 0.6, 0.2), fuzz=0.0)

    @staticmethod
    def silver() -> Metal:
        return Metal(Vector3(0.8, 0.8, 0.8), fuzz=0.0)

    @staticmethod
    def copper() -> Metal:
        return Metal(Vector3(0.95, 0.64, 0.54), fuzz=0.1)

    @staticmethod
    def chrome() -> Metal:
        return Metal(Vector3(0.9, 0.9, 0.9), fuzz=0.05)

    @staticmethod
    def brushed_metal() -> Metal:
        return Metal(Vector3(0.8, 0.8, 0.8), fuzz=0.3)

class DielectricPresets:
    """Predefined dielectric materials with realistic refractive indices."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

    @staticmethod
    def water() -> Dielectric:
        return Dielectric(1.33)

    @staticmethod
    def diamond() -> Dielectric:
        return Dielectric(2.42)

class DiffusePresets:
    """Matte colors used by the built-in scenes."""

    @staticmethod
    def ground() -> Lambertian:
        return Lambertian(Vector3(0.8, 0.8, 0.0))

    @staticmethod
    def red() -> Lambertian:
        return Lambertian(Vector3(0.8, 0.3, 0.3))

    @staticmethod
    def blue() -> Lambertian:
        return Lambertian(Vector3(0.1, 0.2, 0.5))

    @staticmethod
    def gray() -> Lambertian:
        return Lambertian(Vector3(0.5, 0.5, 0.5))
