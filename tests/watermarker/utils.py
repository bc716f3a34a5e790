import logging
from typing import Tuple

import numpy as np
import pytest
from PIL import Image, features

logging.basicConfig(level=logging.DEBUG)

HAS_FREETYPE = features.check_module("freetype2")

# Marker to skip tests that need scalable fonts
skip_without_freetype = pytest.mark.skipif(
    not HAS_FREETYPE, reason="Requires Pillow built with FreeType"
)


def pattern(size: Tuple[int, int], alpha: int = 255) -> Image.Image:
    """RGBA image whose pixels differ by position."""
    width, height = size
    y, x = np.mgrid[0:height, 0:width]
    data = np.zeros((height, width, 4), dtype=np.uint8)
    data[:, :, 0] = (x * 37) % 256
    data[:, :, 1] = (y * 53) % 256
    data[:, :, 2] = (x * 11 + y * 7) % 256
    data[:, :, 3] = alpha
    return Image.fromarray(data)


def split(size: Tuple[int, int], left, right) -> Image.Image:
    """RGBA image with ``left`` color on the left half, ``right`` on the other."""
    image = Image.new("RGBA", size, right)
    image.paste(Image.new("RGBA", (size[0] // 2, size[1]), left), (0, 0))
    return image


def pixels(image: Image.Image) -> np.ndarray:
    """Integer RGBA pixels."""
    return np.asarray(image.convert("RGBA"), dtype=np.int32)


def assert_same(a: Image.Image, b: Image.Image) -> None:
    assert a.mode == b.mode, "%s vs %s" % (a.mode, b.mode)
    assert a.size == b.size, "%s vs %s" % (a.size, b.size)
    assert np.array_equal(np.asarray(a), np.asarray(b))
