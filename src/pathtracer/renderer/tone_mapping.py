# renderer/tone_mapping.py
import logging
import os
import numpy as np
from numba import njit, prange
from PIL import Image
from pathtracer.core.errors import InvalidInputError

logger = logging.getLogger(__name__)

DEFAULT_GAMMA = 2.0

@njit(parallel=True)
def _gamma_kernel(linear_image, inv_gamma, output_image):
    height, width, channels = linear_image.shape
    for y in prange(height):
        for x in range(width):
            for c in range(channels):
                value = linear_image[y, x, c]
                # NaN and negative samples go to black, overexposure clips.
                if not value > 0.0:
                    value = 0.0
                elif value > 1.0:
                    value = 1.0
                output_image[y, x, c] = int(255.99 * value ** inv_gamma)

def gamma_correct(linear_image: np.ndarray, gamma: float = DEFAULT_GAMMA) -> np.ndarray:
    """
    Gamma-correct a linear radiance image and quantize it to 8 bits.

    Args:
        linear_image: (height, width, 3) float array of mean radiance.
        gamma: Display gamma; 2.0 is a per-channel square root.

    Returns:
        (height, width, 3) uint8 array.
    """
    if linear_image.ndim != 3:
        raise ValueError(f"expected a (height, width, channels) image, got shape {linear_image.shape}")
    linear = np.ascontiguousarray(linear_image, dtype=np.float64)
    output = np.empty(linear.shape, dtype=np.uint8)
    _gamma_kernel(linear, 1.0 / gamma, output)
    return output

def check_output_path(filepath: str) -> None:
    """
    Fail before rendering if Pillow cannot write the format named by the
    file extension.
    """
    extension = os.path.splitext(filepath)[1].lower()
    image_format = Image.registered_extensions().get(extension)
    if image_format is None or image_format not in Image.SAVE:
        raise InvalidInputError(f"cannot write images with extension '{extension}': {filepath}")

def save_image(linear_image: np.ndarray, filepath: str, gamma: float = DEFAULT_GAMMA) -> None:
    """
    Gamma-correct a linear image and write it with Pillow; the format
    follows the file extension.
    """
    image_8bit = gamma_correct(linear_image, gamma)
    Image.fromarray(image_8bit).save(filepath)
    logger.info("Saved %dx%d image to %s", image_8bit.shape[1], image_8bit.shape[0], filepath)
