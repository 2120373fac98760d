# materials/dielectric.py
from typing import Tuple
import numpy as np
from core.ray import Ray
from core.vector import Vector3
from core.utils import reflect, refract, schlick
from geometry.hittable import HitRecord
from materials.material import Material

class Dielectric(Material):
    """
    Clear refractive material (glass, water). Splits between reflection and
    refraction stochastically using Schlick's approximation.
    """
    def __init__(self, ref_idx: float):
        if not ref_idx > 0:
            raise ValueError(f"Refractive index must be positive, got {ref_idx}")
        self.ref_idx = float(ref_idx)

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: np.random.Generator) -> Tuple[Vector3, Ray]:
        attenuation = Vector3(1.0, 1.0, 1.0)  # Glass doesn't absorb light
        direction = ray_in.direction
        d_dot_n = direction.dot(rec.normal)

        # Hit normals point outward, so a positive dot means we are leaving the medium
        if d_dot_n > 0:
            outward_normal = -rec.normal
            ni_over_nt = self.ref_idx
            cosine = self.ref_idx * d_dot_n / direction.length()
        else:
            outward_normal = rec.normal
            ni_over_nt = 1.0 / self.ref_idx
            cosine = -d_dot_n / direction.length()

        refracted = refract(direction, outward_normal, ni_over_nt)
        if refracted is None:
            # Total internal reflection
            return attenuation, Ray(rec.p, reflect(direction, rec.normal))

        if rng.random() < schlick(cosine, self.ref_idx):
            return attenuation, Ray(rec.p, reflect(direction, rec.normal))
        return attenuation, Ray(rec.p, refracted)

    def __repr__(self) -> str:
        return f"Dielectric({self.ref_idx})"
