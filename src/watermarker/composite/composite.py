"""Composite implementation for mark blending."""

import logging
from typing import Optional, Sequence, Tuple

from PIL import Image

from watermarker.api import numpy_io
from watermarker.composite import utils
from watermarker.composite.blend import blend

logger = logging.getLogger(__name__)


def composite(
    backdrop: Image.Image,
    mark: Image.Image,
    offset: Tuple[int, int],
    opacity: float = 1.0,
    transparent_color: Optional[Sequence[int]] = None,
) -> Optional[Tuple[int, int, int, int]]:
    """
    Blend ``mark`` into ``backdrop`` in place.

    Only the part of the mark rectangle that overlaps the backdrop is
    processed; the rest is clipped silently.

    Args:
        backdrop: Image to draw on. Must be in a mode of
            :py:data:`~watermarker.constants.BLENDABLE_MODES`.
        mark: Image to draw.
        offset: (x, y) of the mark's top-left corner on the backdrop. May be
            negative or outside of the backdrop.
        opacity: Multiplier of the mark alpha (0.0-1.0)
        transparent_color: RGB color of mark pixels to leave out entirely

    Returns:
        Bounding box (left, top, right, bottom) of the modified region, or
        None when nothing overlaps.
    """
    left, top = int(offset[0]), int(offset[1])
    bbox = (left, top, left + mark.width, top + mark.height)
    viewport = utils.intersect(bbox, (0, 0, backdrop.width, backdrop.height))
    if utils.is_empty(viewport):
        logger.debug("Mark %r does not overlap the image" % (bbox,))
        return None

    source = mark.crop(utils.offset_bbox(viewport, -left, -top))
    region = backdrop.crop(viewport)

    skip = None
    if transparent_color is not None:
        skip = numpy_io.get_key_mask(source, transparent_color)

    result = blend(
        numpy_io.get_array(region), numpy_io.get_array(source), opacity, skip
    )
    backdrop.paste(numpy_io.get_image(result, backdrop.mode), viewport[:2])
    logger.debug("Composited region %r" % (viewport,))
    return viewport
