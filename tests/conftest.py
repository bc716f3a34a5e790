"""Pytest configuration for watermarker tests."""

from typing import Any

import pytest
from PIL import Image


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "freetype: mark test as requiring Pillow built with FreeType",
    )


@pytest.fixture
def base() -> Image.Image:
    """Opaque 100x100 RGB image."""
    return Image.new("RGB", (100, 100), (200, 100, 50))


@pytest.fixture
def red_mark() -> Image.Image:
    """Opaque 20x20 red mark."""
    return Image.new("RGBA", (20, 20), (255, 0, 0, 255))
