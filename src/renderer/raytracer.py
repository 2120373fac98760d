# renderer/raytracer.py
import math
import os
from concurrent.futures import ProcessPoolExecutor
from typing import Optional

import numpy as np
from tqdm import tqdm

from core.ray import Ray
from core.vector import Vector3, lerp
from geometry.hittable import Hittable

# Path tracing constants
MAX_DEPTH = 50
T_MIN = 0.001  # Keeps scattered rays from re-hitting their own surface
T_MAX = math.inf

HORIZON_COLOR = Vector3(1.0, 1.0, 1.0)
ZENITH_COLOR = Vector3(0.5, 0.7, 1.0)
BLACK = Vector3(0.0, 0.0, 0.0)

SHADERS = ("path", "normals")


def sky_color(ray: Ray) -> Vector3:
    """
    Background gradient keyed on the vertical component of the ray direction.
    """
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return lerp(HORIZON_COLOR, ZENITH_COLOR, t)


def color(ray: Ray, world: Hittable, depth: int, rng: np.random.Generator,
          max_depth: int = MAX_DEPTH) -> Vector3:
    """
    Estimates the radiance carried back along ray.

    Follows one scattered ray per bounce and multiplies in the attenuation of
    every surface it meets. Paths end when a material absorbs the ray, when
    depth reaches max_depth (black), or when the ray escapes to the sky.
    The function keeps no state between calls; all randomness comes from rng.
    """
    rec = world.hit(ray, T_MIN, T_MAX)
    if rec is None:
        return sky_color(ray)
    if depth >= max_depth:
        return BLACK

    scattered = rec.material.scatter(ray, rec, rng)
    if scattered is None:
        return BLACK
    attenuation, scattered_ray = scattered
    return attenuation * color(scattered_ray, world, depth + 1, rng, max_depth)


def normal_color(ray: Ray, world: Hittable) -> Vector3:
    """
    Maps the unit normal at the nearest hit into [0, 1] RGB.
    Useful for checking geometry without any sampling noise.
    """
    rec = world.hit(ray, T_MIN, T_MAX)
    if rec is None:
        return sky_color(ray)
    return (rec.normal + Vector3(1.0, 1.0, 1.0)) * 0.5


def sample_pixel(i: int, j: int, width: int, height: int, camera, world: Hittable,
                 samples: int, rng: np.random.Generator,
                 max_depth: int = MAX_DEPTH, shader: str = "path") -> Vector3:
    """
    Averages samples jittered estimates for pixel (i, j), with j counted
    from the bottom of the image. The result is in linear color space.
    """
    total = Vector3(0.0, 0.0, 0.0)
    for _ in range(samples):
        u = (i + rng.random()) / width
        v = (j + rng.random()) / height
        ray = camera.get_ray(u, v, rng)
        if shader == "normals":
            total = total + normal_color(ray, world)
        else:
            total = total + color(ray, world, 0, rng, max_depth)
    return total / samples


def render_row(row: int, width: int, height: int, camera, world: Hittable,
               samples: int, max_depth: int, shader: str,
               seed_seq: np.random.SeedSequence) -> np.ndarray:
    """
    Renders one image row (row 0 is the top) with its own random stream.
    """
    rng = np.random.default_rng(seed_seq)
    j = height - 1 - row
    pixels = np.empty((width, 3), dtype=np.float32)
    for i in range(width):
        pixels[i] = tuple(sample_pixel(i, j, width, height, camera, world,
                                       samples, rng, max_depth, shader))
    return pixels


# Per-process scene state for the worker pool, set once by _init_worker
_worker_data = {}


def _init_worker(width, height, camera, world, samples, max_depth, shader):
    _worker_data.update(width=width, height=height, camera=camera, world=world,
                        samples=samples, max_depth=max_depth, shader=shader)


def _render_row_task(task):
    row, seed_seq = task
    return row, render_row(row, seed_seq=seed_seq, **_worker_data)


class Renderer:
    """
    Per-pixel driver: renders a world through a camera into a linear
    float32 image of shape (height, width, 3).

    Rows are independent tasks and each owns a child of one SeedSequence,
    so a fixed seed gives the same image for any number of workers.
    """
    def __init__(self, width: int, height: int, samples: int = 100,
                 max_depth: int = MAX_DEPTH, shader: str = "path",
                 workers: Optional[int] = 1, seed: Optional[int] = None,
                 progress: bool = True):
        if width <= 0 or height <= 0:
            raise ValueError(f"Image dimensions must be positive, got {width}x{height}")
        if samples <= 0:
            raise ValueError(f"Samples per pixel must be positive, got {samples}")
        if max_depth <= 0:
            raise ValueError(f"Maximum depth must be positive, got {max_depth}")
        if shader not in SHADERS:
            raise ValueError(f"Unknown shader {shader!r}, expected one of {SHADERS}")

        self.width = width
        self.height = height
        self.samples = samples
        self.max_depth = max_depth
        self.shader = shader
        self.workers = workers if workers else (os.cpu_count() or 1)
        self.seed = seed
        self.progress = progress

    def render(self, world: Hittable, camera) -> np.ndarray:
        seed_seqs = np.random.SeedSequence(self.seed).spawn(self.height)
        image = np.zeros((self.height, self.width, 3), dtype=np.float32)
        rows = tqdm(total=self.height, desc="Rendering", unit="row",
                    disable=not self.progress)

        if self.workers == 1:
            for row in range(self.height):
                image[row] = render_row(row, self.width, self.height, camera, world,
                                        self.samples, self.max_depth, self.shader,
                                        seed_seqs[row])
                rows.update(1)
        else:
            init_args = (self.width, self.height, camera, world,
                         self.samples, self.max_depth, self.shader)
            with ProcessPoolExecutor(max_workers=self.workers,
                                     initializer=_init_worker,
                                     initargs=init_args) as pool:
                tasks = list(enumerate(seed_seqs))
                for row, pixels in pool.map(_render_row_task, tasks):
                    image[row] = pixels
                    rows.update(1)

        rows.close()
        return image
