"""
Composite module for mark rendering and blending.

This subpackage holds the pixel pipeline behind
:py:class:`~watermarker.api.watermarker.Watermarker`:

- :py:mod:`watermarker.composite.mark`: Margins, scaling and orientation
- :py:mod:`watermarker.composite.placement`: Anchor and absolute placement
- :py:mod:`watermarker.composite.blend`: Alpha blending of RGBA arrays
- :py:mod:`watermarker.composite.composite`: Clipped in-place compositing

Example usage::

    from PIL import Image
    from watermarker.composite import composite, resolve_position
    from watermarker.constants import Position

    base = Image.open('photo.jpg')
    logo = Image.open('logo.png')
    offset = resolve_position(base.size, logo.size, Position.BOTTOM_RIGHT)
    composite(base, logo, offset, opacity=0.5)

The blending works on float32 NumPy arrays and only touches the region of
the image covered by the mark.
"""

from watermarker.composite.composite import composite
from watermarker.composite.mark import apply_orientation, prepare_mark
from watermarker.composite.placement import resolve_position

__all__ = [
    "composite",
    "apply_orientation",
    "prepare_mark",
    "resolve_position",
]
