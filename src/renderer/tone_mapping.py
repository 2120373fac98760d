# renderer/tone_mapping.py
import numpy as np
from numba import njit


def gamma_correct(image: np.ndarray) -> np.ndarray:
    """
    Gamma 2 correction: square root of every channel of a linear image.
    """
    return np.sqrt(np.clip(image, 0.0, None))


def quantize(image: np.ndarray) -> np.ndarray:
    """
    Maps [0, 1] channels to 8-bit, scaling by 255.99 so 1.0 lands on 255.
    """
    return (image * 255.99).clip(0, 255).astype("uint8")


@njit
def gamma_quantize_kernel(linear_image, output_image):
    height, width, channels = linear_image.shape
    for y in range(height):
        for x in range(width):
            for c in range(channels):
                value = linear_image[y, x, c]
                if not value > 0.0:
                    output_image[y, x, c] = 0
                else:
                    output_image[y, x, c] = min(255, int(255.99 * np.sqrt(value)))


def to_8bit(image: np.ndarray) -> np.ndarray:
    """
    Converts a linear (H, W, 3) radiance image to gamma-corrected uint8 pixels.
    """
    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError(f"Expected an (H, W, 3) image, got shape {image.shape}")
    linear = np.ascontiguousarray(image, dtype=np.float64)
    output = np.empty(linear.shape, dtype=np.uint8)
    gamma_quantize_kernel(linear, output)
    return output
