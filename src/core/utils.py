# core/utils.py
import math
from typing import Optional

import numpy as np

from core.vector import Vector3

# Rejection sampling accepts with probability ~0.52 per draw (~0.79 for the
# disk), so running out of attempts means the generator is broken.
MAX_REJECTION_ATTEMPTS = 64


def random_in_unit_sphere(rng: np.random.Generator,
                          max_attempts: int = MAX_REJECTION_ATTEMPTS) -> Vector3:
    """
    Returns a random point inside a unit sphere by rejection sampling the
    enclosing cube. Falls back to the origin once max_attempts draws have
    been rejected, so callers degrade to their unperturbed direction.
    """
    for _ in range(max_attempts):
        p = Vector3(rng.uniform(-1.0, 1.0),
                    rng.uniform(-1.0, 1.0),
                    rng.uniform(-1.0, 1.0))
        if p.length_squared() < 1.0:
            return p
    return Vector3(0.0, 0.0, 0.0)


def random_in_unit_disk(rng: np.random.Generator,
                        max_attempts: int = MAX_REJECTION_ATTEMPTS) -> Vector3:
    """
    Returns a random point inside the unit disk on the z = 0 plane.
    """
    for _ in range(max_attempts):
        p = Vector3(rng.uniform(-1.0, 1.0), rng.uniform(-1.0, 1.0), 0.0)
        if p.length_squared() < 1.0:
            return p
    return Vector3(0.0, 0.0, 0.0)


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)


def refract(v: Vector3, n: Vector3, ni_over_nt: float) -> Optional[Vector3]:
    """
    Refracts v through a surface with normal n using Snell's law.
    Returns None on total internal reflection.
    """
    uv = v.normalize()
    dt = uv.dot(n)
    discriminant = 1.0 - ni_over_nt * ni_over_nt * (1.0 - dt * dt)
    if discriminant <= 0:
        return None
    return (uv - n * dt) * ni_over_nt - n * math.sqrt(discriminant)


def schlick(cosine: float, ref_idx: float) -> float:
    """
    Schlick's approximation of the Fresnel reflectance.
    """
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cosine), 5)
