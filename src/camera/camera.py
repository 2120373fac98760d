# camera/camera.py
import math
from typing import Optional

import numpy as np

from core.vector import Vector3
from core.ray import Ray
from core.utils import random_in_unit_disk

class Camera:
    """
    Thin-lens camera built from a look-at frame. Objects at focus_dist are
    sharp; everything else blurs in proportion to the aperture.
    """
    def __init__(self, look_from: Vector3, look_at: Vector3, vup: Vector3,
                 vfov: float, aspect_ratio: float,
                 aperture: float = 0.0, focus_dist: float = 1.0):
        if not 0.0 < vfov < 180.0:
            raise ValueError(f"Vertical field of view must be in (0, 180) degrees, got {vfov}")
        if not aspect_ratio > 0:
            raise ValueError(f"Aspect ratio must be positive, got {aspect_ratio}")
        if not focus_dist > 0:
            raise ValueError(f"Focus distance must be positive, got {focus_dist}")
        if aperture < 0:
            raise ValueError(f"Aperture must be non-negative, got {aperture}")
        if (look_from - look_at).near_zero():
            raise ValueError("look_from and look_at must be distinct points")

        self.look_from = look_from
        self.look_at = look_at
        self.vup = vup
        self.vfov = vfov
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture
        self.focus_dist = focus_dist
        self.lens_radius = aperture / 2.0
        self.update_camera()

    def update_camera(self):
        """Recomputes the basis vectors and viewport from the look-at parameters."""
        theta = math.radians(self.vfov)
        half_height = math.tan(theta / 2)
        half_width = self.aspect_ratio * half_height

        self.w = (self.look_from - self.look_at).normalize()
        self.u = self.vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        self.origin = self.look_from
        self.horizontal = self.u * (2.0 * half_width * self.focus_dist)
        self.vertical = self.v * (2.0 * half_height * self.focus_dist)
        self.lower_left_corner = (self.origin -
                                  self.u * (half_width * self.focus_dist) -
                                  self.v * (half_height * self.focus_dist) -
                                  self.w * self.focus_dist)

    @classmethod
    def from_viewport(cls, origin: Vector3, lower_left_corner: Vector3,
                      horizontal: Vector3, vertical: Vector3) -> "Camera":
        """Builds a pinhole camera directly from a viewport frame."""
        camera = cls.__new__(cls)
        camera.origin = origin
        camera.lower_left_corner = lower_left_corner
        camera.horizontal = horizontal
        camera.vertical = vertical
        camera.u = horizontal.normalize()
        camera.v = vertical.normalize()
        camera.w = camera.u.cross(camera.v)
        camera.aperture = 0.0
        camera.lens_radius = 0.0
        camera.focus_dist = 1.0
        return camera

    @classmethod
    def default(cls) -> "Camera":
        """The fixed 2:1 viewport one unit in front of the origin."""
        return cls.from_viewport(
            origin=Vector3(0.0, 0.0, 0.0),
            lower_left_corner=Vector3(-2.0, -1.0, -1.0),
            horizontal=Vector3(4.0, 0.0, 0.0),
            vertical=Vector3(0.0, 2.0, 0.0),
        )

    def get_ray(self, u: float, v: float, rng: Optional[np.random.Generator] = None) -> Ray:
        """Generates a ray through (u, v), with depth of field when the aperture is open."""
        target = self.lower_left_corner + self.horizontal * u + self.vertical * v
        if self.lens_radius <= 0:
            return Ray(self.origin, target - self.origin)

        if rng is None:
            raise ValueError("A random generator is required when the aperture is open")
        rd = random_in_unit_disk(rng) * self.lens_radius
        offset = self.u * rd.x + self.v * rd.y

        ray_origin = self.origin + offset
        return Ray(ray_origin, target - ray_origin)
