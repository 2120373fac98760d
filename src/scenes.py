# scenes.py
from typing import Callable, Dict, Optional

import numpy as np

from camera.camera import Camera
from core.vector import Vector3
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.dielectric import Dielectric
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.presets import DielectricPresets, DiffusePresets, MetalPresets


def three_spheres(rng: Optional[np.random.Generator] = None) -> HittableList:
    """
    Ground plane with a matte sphere between two metal ones.
    """
    world = HittableList()
    world.add(Sphere(Vector3(0.0, -100.5, -1.0), 100.0, DiffusePresets.ground()))
    world.add(Sphere(Vector3(0.0, 0.0, -1.0), 0.5, DiffusePresets.red()))
    world.add(Sphere(Vector3(1.0, 0.0, -1.0), 0.5, MetalPresets.gold()))
    world.add(Sphere(Vector3(-1.0, 0.0, -1.0), 0.5, MetalPresets.silver()))
    return world


def glass_and_metal(rng: Optional[np.random.Generator] = None) -> HittableList:
    """
    Same layout as three_spheres with a glass sphere on the left and fuzzy metal on the right.
    """
    world = HittableList()
    world.add(Sphere(Vector3(0.0, -100.5, -1.0), 100.0, DiffusePresets.ground()))
    world.add(Sphere(Vector3(0.0, 0.0, -1.0), 0.5, DiffusePresets.blue()))
    world.add(Sphere(Vector3(1.0, 0.0, -1.0), 0.5, Metal(Vector3(0.8, 0.6, 0.2), fuzz=0.3)))
    world.add(Sphere(Vector3(-1.0, 0.0, -1.0), 0.5, DielectricPresets.glass()))
    return world


def random_spheres(rng: Optional[np.random.Generator] = None) -> HittableList:
    """
    A large ground sphere covered with a grid of small random spheres and
    three large feature spheres (glass, matte, metal).
    """
    if rng is None:
        rng = np.random.default_rng()

    world = HittableList()
    world.add(Sphere(Vector3(0.0, -1000.0, 0.0), 1000.0, DiffusePresets.gray()))

    clearance = Vector3(4.0, 0.2, 0.0)
    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - clearance).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                albedo = Vector3(rng.random() * rng.random(),
                                 rng.random() * rng.random(),
                                 rng.random() * rng.random())
                material = Lambertian(albedo)
            elif choose_mat < 0.95:
                albedo = Vector3(0.5 * (1 + rng.random()),
                                 0.5 * (1 + rng.random()),
                                 0.5 * (1 + rng.random()))
                material = Metal(albedo, fuzz=0.5 * rng.random())
            else:
                material = DielectricPresets.glass()
            world.add(Sphere(center, 0.2, material))

    world.add(Sphere(Vector3(0.0, 1.0, 0.0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Vector3(-4.0, 1.0, 0.0), 1.0, Lambertian(Vector3(0.4, 0.2, 0.1))))
    world.add(Sphere(Vector3(4.0, 1.0, 0.0), 1.0, Metal(Vector3(0.7, 0.6, 0.5), fuzz=0.0)))
    return world


SCENES: Dict[str, Callable[[Optional[np.random.Generator]], HittableList]] = {
    "three_spheres": three_spheres,
    "glass_and_metal": glass_and_metal,
    "random_spheres": random_spheres,
}

# look_from, look_at, vfov, aperture, focus_dist
CAMERA_DEFAULTS = {
    "three_spheres": (Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0), 90.0, 0.0, 1.0),
    "glass_and_metal": (Vector3(-2.0, 2.0, 1.0), Vector3(0.0, 0.0, -1.0), 30.0, 0.0, 1.0),
    "random_spheres": (Vector3(13.0, 2.0, 3.0), Vector3(0.0, 0.0, 0.0), 20.0, 0.1, 10.0),
}


def build_scene(name: str, rng: Optional[np.random.Generator] = None) -> HittableList:
    try:
        builder = SCENES[name]
    except KeyError:
        raise KeyError(f"Unknown scene {name!r}; available: {', '.join(sorted(SCENES))}") from None
    return builder(rng)


def default_camera(name: str, aspect_ratio: float,
                   look_from: Optional[Vector3] = None,
                   look_at: Optional[Vector3] = None,
                   vup: Optional[Vector3] = None,
                   vfov: Optional[float] = None,
                   aperture: Optional[float] = None,
                   focus_dist: Optional[float] = None) -> Camera:
    """
    Camera for a named scene; any parameter given explicitly overrides the scene default.
    """
    if name not in CAMERA_DEFAULTS:
        raise KeyError(f"Unknown scene {name!r}; available: {', '.join(sorted(SCENES))}")
    d_from, d_at, d_vfov, d_aperture, d_focus = CAMERA_DEFAULTS[name]
    return Camera(
        look_from=look_from if look_from is not None else d_from,
        look_at=look_at if look_at is not None else d_at,
        vup=vup if vup is not None else Vector3(0.0, 1.0, 0.0),
        vfov=vfov if vfov is not None else d_vfov,
        aspect_ratio=aspect_ratio,
        aperture=aperture if aperture is not None else d_aperture,
        focus_dist=focus_dist if focus_dist is not None else d_focus,
    )
