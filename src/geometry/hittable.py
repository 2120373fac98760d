# geometry/hittable.py
from typing import Optional
from core.vector import Vector3
from core.ray import Ray

class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    __slots__ = ("t", "p", "normal", "material")

    def __init__(self, t: float, p: Vector3, normal: Vector3, material=None):
        self.t = t                  # Ray parameter at intersection
        self.p = p                  # Intersection point
        self.normal = normal        # Outward unit normal
        self.material = material

    @property
    def point(self) -> Vector3:
        return self.p

    def __repr__(self) -> str:
        return f"HitRecord(t={self.t}, p={self.p!r}, normal={self.normal!r})"

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")
