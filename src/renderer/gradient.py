# renderer/gradient.py
import logging

import numpy as np
from numba import njit, prange

from core.vector import Vec3
from renderer.config import GradientConfiguration

logger = logging.getLogger(__name__)


def gradient_color(px: int, py: int, width: int, height: int,
                   blue: float = 0.25, intensity: float = 1.0) -> Vec3:
    """
    The color vector for pixel (px, py): x runs 0..1 left to right,
    y runs 0..1 top to bottom, z is the constant blue channel.
    """
    return Vec3(px / (width - 1), py / (height - 1), blue) * intensity


def generate_gradient(width: int, height: int, blue: float = 0.25, intensity: float = 1.0) -> np.ndarray:
    """
    Build the gradient image one pixel at a time through Vec3.

    Args:
        width (int): Image width, at least 2.
        height (int): Image height, at least 2.
        blue (float): Constant z component of every pixel vector.
        intensity (float): Scale applied to each pixel vector before conversion.

    Returns:
        np.ndarray: A (height x width x 3) array in uint8, indexed [py, px].
    """
    image = np.zeros((height, width, 3), dtype=np.uint8)
    for py in range(height):
        for px in range(width):
            image[py, px] = gradient_color(px, py, width, height, blue, intensity).to_rgb()
    return image


@njit(parallel=True)
def gradient_kernel(output_image, blue, intensity):
    height = output_image.shape[0]
    width = output_image.shape[1]
    b = blue * intensity
    b = min(255.0, max(0.0, b))
    for py in prange(height):
        g = (py / (height - 1)) * intensity
        g = min(255.0, max(0.0, g))
        for px in range(width):
            r = (px / (width - 1)) * intensity
            r = min(255.0, max(0.0, r))
            output_image[py, px, 0] = int(r)
            output_image[py, px, 1] = int(g)
            output_image[py, px, 2] = int(b)


def generate_gradient_fast(width: int, height: int, blue: float = 0.25, intensity: float = 1.0) -> np.ndarray:
    """
    Same image as generate_gradient(), computed by a compiled kernel with
    rows spread over threads.
    """
    image = np.zeros((height, width, 3), dtype=np.uint8)
    gradient_kernel(image, float(blue), float(intensity))
    return image


def render(configuration: GradientConfiguration) -> np.ndarray:
    logger.info(
        f"Rendering {configuration.width}x{configuration.height} gradient "
        f"({'kernel' if configuration.use_kernel else 'Vec3'} path)")
    if configuration.use_kernel:
        return generate_gradient_fast(
            configuration.width, configuration.height, configuration.blue, configuration.intensity)
    return generate_gradient(
        configuration.width, configuration.height, configuration.blue, configuration.intensity)
