# renderer/image_writer.py
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

PathLike = Union[str, Path]


def _check_pixels(pixels: np.ndarray) -> None:
    if pixels.dtype != np.uint8 or pixels.ndim != 3 or pixels.shape[2] != 3:
        raise ValueError(
            f"Expected (H, W, 3) uint8 pixels, got {pixels.dtype} array of shape {pixels.shape}"
        )


def write_ppm(path: PathLike, pixels: np.ndarray) -> Path:
    """
    Writes a plain-text P3 image, one "r g b" triplet per line, top row first.
    """
    _check_pixels(pixels)
    height, width, _ = pixels.shape
    path = Path(path)
    with path.open("w", encoding="ascii") as f:
        f.write(f"P3\n{width} {height}\n255\n")
        for r, g, b in pixels.reshape(-1, 3):
            f.write(f"{r} {g} {b}\n")
    return path


def save_png(path: PathLike, pixels: np.ndarray) -> Path:
    """
    Saves pixels through Pillow; the format follows the file suffix.
    """
    _check_pixels(pixels)
    path = Path(path)
    Image.fromarray(pixels).save(path)
    return path


WRITERS = {
    ".ppm": write_ppm,
    ".png": save_png,
    ".jpg": save_png,
    ".jpeg": save_png,
    ".bmp": save_png,
}


def save_image(path: PathLike, pixels: np.ndarray) -> Path:
    """
    Saves pixels to path, choosing the writer from the file suffix.
    """
    path = Path(path)
    writer = WRITERS.get(path.suffix.lower())
    if writer is None:
        raise ValueError(
            f"Unsupported image format {path.suffix!r}; expected one of {sorted(WRITERS)}"
        )
    if path.parent and not path.parent.exists():
        raise FileNotFoundError(f"Output directory does not exist: {path.parent}")
    return writer(path, pixels)
