"""
Text marks.

Text is rendered into a transparent RGBA image and then drawn like any other
mark, so opacity, margins, scaling and orientation apply to it as well.
"""
import logging

from PIL import Image, ImageDraw, ImageFont, features

from watermarker.api import pil_io

logger = logging.getLogger(__name__)


def get_font(font, dpi):
    """
    Load a :py:class:`~watermarker.api.params.Font` at the pixel size it has
    on an image of resolution ``dpi``.

    Falls back to Pillow's default font when the family cannot be loaded.
    """
    if not features.check_module("freetype2"):
        logger.warning("FreeType is not available, font size is ignored")
        return ImageFont.load_default()

    size = font.pixel_size(dpi)
    if font.family is not None:
        try:
            return ImageFont.truetype(font.family, size, index=font.index)
        except OSError as e:
            logger.warning("Failed to load font %r: %s" % (font.family, e))
    return ImageFont.load_default(size=size)


def measure_text(text, font, context):
    """
    Measure ``text`` drawn from the origin on ``context``.

    :param text: `str`.
    :param font: loaded Pillow font.
    :param context: :py:class:`PIL.Image.Image` the text is measured against.
    :return: (width, height) tuple.
    """
    if not text:
        return (0, 0)
    bbox = ImageDraw.Draw(context).textbbox((0, 0), text, font=font)
    return (max(0, int(bbox[2])), max(0, int(bbox[3])))


def text_to_mark(text, font, color, context):
    """
    Render text into a mark.

    The mark is sized to the text measured against ``context`` (the working
    image), carries the resolution of ``context`` and has a transparent
    background.

    :param text: `str`.
    :param font: :py:class:`~watermarker.api.params.Font`.
    :param color: RGBA tuple.
    :param context: :py:class:`PIL.Image.Image`.
    :return: RGBA :py:class:`PIL.Image.Image`, possibly of zero size.
    """
    dpi = pil_io.get_dpi(context)
    loaded = get_font(font, dpi[1])
    size = measure_text(text, loaded, context)
    mark = Image.new("RGBA", size, (0, 0, 0, 0))
    pil_io.set_dpi(mark, dpi)
    if size[0] > 0 and size[1] > 0:
        ImageDraw.Draw(mark).text((0, 0), text, font=loaded, fill=tuple(color))
    logger.debug("Rendered text %r into %dx%d mark" % ((text,) + size))
    return mark
