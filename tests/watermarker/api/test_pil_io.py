import io

import pytest
from PIL import Image

from watermarker.api import pil_io


@pytest.mark.parametrize(
    "value, alpha, expected",
    [
        (None, False, None),
        ("red", False, (255, 0, 0)),
        ("#00ff0080", False, (0, 255, 0)),
        ("#00ff0080", True, (0, 255, 0, 128)),
        ((1, 2, 3), True, (1, 2, 3, 255)),
        ([1.0, 2.0, 3.0, 4.0], False, (1, 2, 3)),
    ],
)
def test_get_color(value, alpha, expected):
    assert pil_io.get_color(value, alpha) == expected


@pytest.mark.parametrize("value", ["nope", (1, 2), (1, 2, 3, 4, 5)])
def test_get_color_invalid(value):
    with pytest.raises(ValueError):
        pil_io.get_color(value)


@pytest.mark.parametrize("mode", ["RGB", "RGBA", "L", "LA"])
def test_normalize_mode_keeps(mode):
    image = Image.new(mode, (4, 4))
    assert pil_io.normalize_mode(image) is image


@pytest.mark.parametrize("mode", ["P", "CMYK", "1"])
def test_normalize_mode_converts(mode):
    image = Image.new(mode, (4, 4))
    image.info["dpi"] = (72, 144)
    result = pil_io.normalize_mode(image)
    assert result.mode == "RGBA"
    assert pil_io.get_dpi(result) == (72.0, 144.0)


def test_get_dpi_default():
    assert pil_io.get_dpi(Image.new("RGB", (1, 1))) == (96.0, 96.0)


def test_open_image(tmp_path):
    image = Image.new("RGBA", (3, 2), (1, 2, 3, 4))
    assert pil_io.open_image(image) is image

    path = tmp_path / "image.png"
    image.save(path)
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")

    sources = [path, str(path), buffer.getvalue(), io.BytesIO(buffer.getvalue())]
    for source in sources:
        decoded = pil_io.open_image(source)
        assert decoded.size == (3, 2)
        assert decoded.getpixel((0, 0)) == (1, 2, 3, 4)


def test_open_image_invalid():
    with pytest.raises(OSError):
        pil_io.open_image(b"not an image")


def test_save_image_keeps_dpi(tmp_path):
    image = Image.new("RGB", (2, 2))
    pil_io.set_dpi(image, (150, 150))
    path = tmp_path / "image.png"
    pil_io.save_image(image, path)
    with Image.open(path) as saved:
        assert saved.info["dpi"] == pytest.approx((150, 150), rel=1e-3)
