# materials/lambertian.py
from typing import Tuple
import numpy as np
from core.ray import Ray
from core.vector import Vector3
from core.utils import random_in_unit_sphere
from geometry.hittable import HitRecord
from materials.material import Material, check_albedo

class Lambertian(Material):
    """
    Diffuse material. Bounces toward a random point in the unit sphere
    tangent to the hit point, which always scatters.
    """

    def __init__(self, albedo: Vector3):
        self.albedo = check_albedo(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: np.random.Generator) -> Tuple[Vector3, Ray]:
        scatter_direction = rec.normal + random_in_unit_sphere(rng)
        return self.albedo, Ray(rec.p, scatter_direction)

    def __repr__(self) -> str:
        return f"Lambertian({self.albedo!r})"
