# geometry/sphere.py
import math
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material):
        if not radius > 0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        self.center = center
        self.radius = float(radius)
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        half_b = oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        # Tangent rays count as misses
        if discriminant <= 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Nearer root first, then the far one; both bounds are exclusive
        root = (-half_b - sqrt_disc) / a
        if not t_min < root < t_max:
            root = (-half_b + sqrt_disc) / a
            if not t_min < root < t_max:
                return None

        p = ray.at(root)
        normal = (p - self.center) / self.radius
        return HitRecord(root, p, normal, self.material)

    def __repr__(self) -> str:
        return f"Sphere(center={self.center!r}, radius={self.radius})"
