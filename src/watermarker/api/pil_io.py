"""
PIL IO module.
"""
import io
import logging
import os

from PIL import Image, ImageColor

from watermarker.constants import BLENDABLE_MODES, DEFAULT_DPI

logger = logging.getLogger(__name__)


def open_image(fp):
    """
    Decode an image.

    :param fp: :py:class:`PIL.Image.Image`, filename, :py:class:`os.PathLike`,
        `bytes` or a binary file object.
    :return: fully loaded :py:class:`PIL.Image.Image`.
    """
    if isinstance(fp, Image.Image):
        return fp
    if isinstance(fp, (bytes, bytearray)):
        fp = io.BytesIO(fp)
    elif isinstance(fp, os.PathLike):
        fp = os.fspath(fp)
    image = Image.open(fp)
    image.load()
    logger.debug("Decoded %s image %dx%d" % (image.mode, image.width, image.height))
    return image


def save_image(image, fp, format=None, **kwargs):
    """Encode an image, keeping its resolution unless ``dpi`` is given."""
    kwargs.setdefault("dpi", get_dpi(image))
    image.save(fp, format=format, **kwargs)


def normalize_mode(image):
    """
    Return ``image`` if the compositor can write into its mode, otherwise an
    RGBA conversion that keeps the resolution.
    """
    if image.mode in BLENDABLE_MODES:
        return image
    logger.debug("Converting %s image to RGBA" % image.mode)
    converted = image.convert("RGBA")
    return set_dpi(converted, get_dpi(image))


def get_dpi(image):
    """Horizontal and vertical resolution of the image as floats."""
    dpi = image.info.get("dpi")
    if not dpi:
        return DEFAULT_DPI
    return (float(dpi[0]), float(dpi[1]))


def set_dpi(image, dpi):
    """Set the resolution of ``image`` in place and return it."""
    image.info["dpi"] = (float(dpi[0]), float(dpi[1]))
    return image


def get_color(value, alpha=False):
    """
    Convert a color value into an integer tuple.

    Accepts RGB(A) tuples or any string understood by
    :py:func:`PIL.ImageColor.getrgb`. Returns RGB, or RGBA when ``alpha`` is
    set (opaque unless given).
    """
    if value is None:
        return None
    if isinstance(value, str):
        color = ImageColor.getrgb(value)
    else:
        color = tuple(int(c) for c in value)
    if len(color) not in (3, 4):
        raise ValueError("Invalid color: %r" % (value,))
    if alpha:
        return color if len(color) == 4 else color + (255,)
    return color[:3]
