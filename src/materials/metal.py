# materials/metal.py
from typing import Optional, Tuple
import numpy as np
from core.ray import Ray
from core.vector import Vector3
from core.utils import reflect, random_in_unit_sphere
from geometry.hittable import HitRecord
from materials.material import Material, check_albedo

class Metal(Material):
    """
    Metal material with reflective properties. Fuzz perturbs the mirror
    direction; 0 is a perfect mirror, values above 1 are clamped.
    """
    def __init__(self, albedo: Vector3, fuzz: float = 0.0):
        if fuzz < 0:
            raise ValueError(f"Fuzz must be in [0, 1], got {fuzz}")
        self.albedo = check_albedo(albedo)
        self.fuzz = min(float(fuzz), 1.0)

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: np.random.Generator) -> Optional[Tuple[Vector3, Ray]]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        scattered = Ray(rec.p, reflected + random_in_unit_sphere(rng) * self.fuzz)

        if scattered.direction.dot(rec.normal) > 0:
            return self.albedo, scattered

        return None  # Absorb the ray if it does not scatter forward

    def __repr__(self) -> str:
        return f"Metal({self.albedo!r}, fuzz={self.fuzz})"
