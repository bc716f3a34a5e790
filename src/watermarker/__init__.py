"""
watermarker: Python package for stamping image and text marks onto images.

Given a base image and a mark (an image or rendered text), it scales, pads,
rotates and fades the mark and alpha-composites it onto the base at an
anchored or absolute position, optionally cutting out a key color.

Basic usage::

    from watermarker import Watermarker, Position

    marker = Watermarker.open('photo.jpg')
    marker.draw_image('logo.png', opacity=0.5, position=Position.BOTTOM_RIGHT)
    marker.save('photo-marked.jpg')

Architecture:

- :py:mod:`watermarker.api`: High-level user-facing API (primary interface)
- :py:mod:`watermarker.composite`: Mark preparation, placement and blending

For most users, the :py:class:`Watermarker` class provides all necessary
functionality.
"""

from watermarker.api.params import DrawParams, Font, Margin
from watermarker.api.watermarker import Watermarker
from watermarker.constants import Orientation, Position, ScaleMode
from watermarker.exceptions import (
    MissingMarkError,
    OpacityError,
    OutOfRangeError,
    ScaleRatioError,
)
from watermarker.version import __version__

__all__ = [
    "Watermarker",
    "DrawParams",
    "Font",
    "Margin",
    "Orientation",
    "Position",
    "ScaleMode",
    "OutOfRangeError",
    "MissingMarkError",
    "OpacityError",
    "ScaleRatioError",
    "__version__",
]
