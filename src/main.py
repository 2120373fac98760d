# main.py
"""Render a built-in scene to an image file.

Usage:
    pathtracer [options]

Example:
    pathtracer --scene random_spheres --width 400 --height 225 --samples 50 --workers 0
"""
import argparse
import sys
import time
from dataclasses import replace
from typing import Optional, Sequence

import numpy as np

from config import QUALITY_LEVELS, RenderSettings, apply_quality, load_settings, setting_names
from core.vector import Vector3
from renderer.image_writer import save_image
from renderer.raytracer import SHADERS, Renderer
from renderer.tone_mapping import to_8bit
from scenes import SCENES, build_scene, default_camera


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Render spheres with a Monte Carlo path tracer.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--config", type=str, help="TOML file with [render] and [camera] tables")
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS),
                        help="Quality preset applied before explicit flags")
    parser.add_argument("--width", type=int, help="Image width in pixels (default: 200)")
    parser.add_argument("--height", type=int, help="Image height in pixels (default: 100)")
    parser.add_argument("--samples", type=int, help="Samples per pixel (default: 100)")
    parser.add_argument("--max-depth", type=int, help="Maximum number of bounces (default: 50)")
    parser.add_argument("--scene", choices=sorted(SCENES), help="Scene to render")
    parser.add_argument("--shader", choices=SHADERS, help="path (default) or normals")
    parser.add_argument("--output", type=str, help="Output file, .png or .ppm (default: output.png)")
    parser.add_argument("--seed", type=int, help="Seed for a reproducible image")
    parser.add_argument("--workers", type=int,
                        help="Worker processes; 0 uses every core (default: 1)")
    parser.add_argument("--quiet", action="store_true", help="Suppress progress output")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> RenderSettings:
    """
    Layers the config file, then the quality preset, then explicit flags.
    """
    settings = RenderSettings()
    if args.config:
        settings = load_settings(args.config, settings)
    if args.quality:
        settings = apply_quality(settings, args.quality)

    overrides = {name: getattr(args, name) for name in setting_names()
                 if getattr(args, name, None) is not None}
    return replace(settings, **overrides).validate()


def _vector(value) -> Optional[Vector3]:
    return Vector3(*value) if value is not None else None


def render(settings: RenderSettings, quiet: bool = False) -> np.ndarray:
    """
    Builds the scene and camera from settings and returns the 8-bit image.
    """
    scene_rng = np.random.default_rng(settings.seed)
    world = build_scene(settings.scene, scene_rng)
    camera = default_camera(
        settings.scene,
        settings.aspect_ratio,
        look_from=_vector(settings.look_from),
        look_at=_vector(settings.look_at),
        vup=_vector(settings.vup),
        vfov=settings.vfov,
        aperture=settings.aperture,
        focus_dist=settings.focus_dist,
    )

    if not quiet:
        print(f"Scene: {settings.scene} ({len(world)} spheres)")
        print(f"Resolution: {settings.width}x{settings.height}, "
              f"samples: {settings.samples}, max depth: {settings.max_depth}")

    renderer = Renderer(
        settings.width,
        settings.height,
        samples=settings.samples,
        max_depth=settings.max_depth,
        shader=settings.shader,
        workers=settings.workers,
        seed=settings.seed,
        progress=not quiet,
    )
    return to_8bit(renderer.render(world, camera))


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    try:
        settings = build_settings(args)
        start_time = time.time()
        pixels = render(settings, quiet=args.quiet)
        output_file = save_image(settings.output, pixels)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not args.quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {time.time() - start_time:.2f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
