# renderer/image_writer.py
import logging
from typing import Sequence, Tuple, Union

import numpy as np
from PIL import Image

from renderer.exceptions import ImageWriteError

logger = logging.getLogger(__name__)

PixelGrid = Union[np.ndarray, Sequence[Sequence[Tuple[int, int, int]]]]


def write_image(pixels: PixelGrid, path: str) -> None:
    """
    Save an RGB pixel grid to disk. The file format follows the extension.

    Args:
        pixels: A (height x width x 3) uint8 array, or rows of (r, g, b) tuples
        path: Destination file

    Raises:
        ImageWriteError: If the grid is not (height x width x 3) or the file cannot be written
    """
    try:
        data = np.asarray(pixels, dtype=np.uint8)
    except (OverflowError, TypeError, ValueError) as e:
        raise ImageWriteError(path, f"pixel grid is not a grid of byte triples: {e}") from e

    if data.ndim != 3 or data.shape[2] != 3 or data.shape[0] == 0 or data.shape[1] == 0:
        raise ImageWriteError(path, f"expected a (height, width, 3) pixel grid, got shape {data.shape}")

    try:
        Image.fromarray(data).save(path)
    except (OSError, ValueError) as e:
        raise ImageWriteError(path, str(e)) from e

    logger.info(f"Wrote {data.shape[1]}x{data.shape[0]} image to {path}")
