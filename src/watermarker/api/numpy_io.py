import logging

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)


def get_array(image: Image.Image) -> np.ndarray:
    """
    Return RGBA pixels as a float32 array of shape (height, width, 4) in
    [0, 1].
    """
    if image.mode != "RGBA":
        image = image.convert("RGBA")
    return _parse_array(np.asarray(image, dtype=np.uint8))


def get_key_mask(image: Image.Image, color) -> np.ndarray:
    """
    Return a boolean (height, width) mask of pixels whose RGB equals
    ``color`` exactly.
    """
    if image.mode != "RGBA":
        image = image.convert("RGBA")
    rgb = np.asarray(image, dtype=np.uint8)[:, :, :3]
    return np.all(rgb == np.asarray(color[:3], dtype=np.uint8), axis=2)


def get_image(array: np.ndarray, mode: str = "RGBA") -> Image.Image:
    """Convert a float RGBA array in [0, 1] to a PIL image of ``mode``."""
    if array.ndim != 3 or array.shape[2] != 4:
        raise ValueError("Expected RGBA array, got shape %s" % (array.shape,))
    data = np.rint(np.clip(array, 0.0, 1.0) * 255.0).astype(np.uint8)
    image = Image.fromarray(data)
    if mode != "RGBA":
        image = image.convert(mode)
    return image


def _parse_array(data: np.ndarray) -> np.ndarray:
    return data.astype(np.float32) / 255.0
