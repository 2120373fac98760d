# config.py
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Optional, Tuple, Union

from renderer.raytracer import MAX_DEPTH, SHADERS

Triple = Tuple[float, float, float]

# Samples per pixel, path length and resolution scale per quality level
QUALITY_LEVELS = {
    "preview": {"samples": 4, "max_depth": 8, "scale": 0.5},
    "balanced": {"samples": 32, "max_depth": 25, "scale": 1.0},
    "high_quality": {"samples": 100, "max_depth": MAX_DEPTH, "scale": 1.0},
}

RENDER_KEYS = {"width", "height", "samples", "max_depth", "scene", "shader",
               "output", "seed", "workers"}
CAMERA_KEYS = {"look_from", "look_at", "vup", "vfov", "aperture", "focus_dist"}


@dataclass
class RenderSettings:
    """Everything needed to render one image. Camera fields left as None use the scene default."""
    width: int = 200
    height: int = 100
    samples: int = 100
    max_depth: int = MAX_DEPTH
    scene: str = "three_spheres"
    shader: str = "path"
    output: str = "output.png"
    seed: Optional[int] = None
    workers: int = 1

    look_from: Optional[Triple] = None
    look_at: Optional[Triple] = None
    vup: Optional[Triple] = None
    vfov: Optional[float] = None
    aperture: Optional[float] = None
    focus_dist: Optional[float] = None

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    def validate(self) -> "RenderSettings":
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image dimensions must be positive, got {self.width}x{self.height}")
        if self.samples <= 0:
            raise ValueError(f"Samples per pixel must be positive, got {self.samples}")
        if self.max_depth <= 0:
            raise ValueError(f"Maximum depth must be positive, got {self.max_depth}")
        if self.workers < 0:
            raise ValueError(f"Worker count must be non-negative, got {self.workers}")
        if self.shader not in SHADERS:
            raise ValueError(f"Unknown shader {self.shader!r}, expected one of {SHADERS}")
        for name in ("look_from", "look_at", "vup"):
            value = getattr(self, name)
            if value is not None and len(value) != 3:
                raise ValueError(f"{name} must have three components, got {value!r}")
        return self


def apply_quality(settings: RenderSettings, level: str) -> RenderSettings:
    """
    Returns a copy of settings with the samples, depth and resolution of a quality level.
    """
    if level not in QUALITY_LEVELS:
        raise ValueError(f"Unknown quality level {level!r}, expected one of {sorted(QUALITY_LEVELS)}")
    quality = QUALITY_LEVELS[level]
    return replace(
        settings,
        samples=quality["samples"],
        max_depth=quality["max_depth"],
        width=max(1, int(settings.width * quality["scale"])),
        height=max(1, int(settings.height * quality["scale"])),
    )


def load_settings(path: Union[str, Path], base: Optional[RenderSettings] = None) -> RenderSettings:
    """
    Reads a TOML file with optional [render] and [camera] tables on top of base.

    Example:
        [render]
        width = 400
        samples = 50
        scene = "random_spheres"

        [camera]
        look_from = [13.0, 2.0, 3.0]
        vfov = 20.0
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("rb") as f:
        data = tomllib.load(f)

    unknown_tables = set(data) - {"render", "camera"}
    if unknown_tables:
        raise ValueError(f"Unknown config tables: {', '.join(sorted(unknown_tables))}")

    overrides = {}
    for table, allowed in (("render", RENDER_KEYS), ("camera", CAMERA_KEYS)):
        values = data.get(table, {})
        unknown = set(values) - allowed
        if unknown:
            raise ValueError(f"Unknown keys in [{table}]: {', '.join(sorted(unknown))}")
        for key, value in values.items():
            overrides[key] = tuple(float(c) for c in value) if isinstance(value, list) else value

    settings = replace(base or RenderSettings(), **overrides)
    return settings.validate()


def setting_names():
    return [f.name for f in fields(RenderSettings)]
