"""
Draw parameters.

Parameters are immutable values passed to every draw call::

    from watermarker.api.params import DrawParams, Margin
    from watermarker.constants import Position

    params = DrawParams(opacity=0.5, position=Position.BOTTOM_RIGHT,
                        margin=Margin.uniform(20))
    faded = params.evolve(opacity=0.25)

Range checks that belong to drawing (opacity and scale ratio) are deferred
until :py:meth:`DrawParams.validate`, so a parameter object can be built
with any value and the draw call reports the problem.
"""

from typing import Any, Optional, Tuple

import attrs
from attrs import define, field
from PIL import Image

from watermarker.api.pil_io import get_color
from watermarker.constants import Orientation, Position, ScaleMode
from watermarker.exceptions import OpacityError, ScaleRatioError
from watermarker.validators import check, deferred, greater_than, range_


@define(frozen=True)
class Margin(object):
    """
    Empty border reserved around a mark, in pixels.

    .. py:attribute:: left
    .. py:attribute:: top
    .. py:attribute:: right
    .. py:attribute:: bottom
    """

    left: int = field(default=0, converter=int, validator=range_(0, None))
    top: int = field(default=0, converter=int, validator=range_(0, None))
    right: int = field(default=0, converter=int, validator=range_(0, None))
    bottom: int = field(default=0, converter=int, validator=range_(0, None))

    @classmethod
    def uniform(cls, value: int) -> "Margin":
        """Same inset on all four sides."""
        return cls(value, value, value, value)

    @classmethod
    def convert(cls, value: Any) -> "Margin":
        """
        Build a margin from ``None``, an int, a ``(horizontal, vertical)``
        pair or a ``(left, top, right, bottom)`` tuple.
        """
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls.uniform(value)
        value = tuple(value)
        if len(value) == 2:
            return cls(value[0], value[1], value[0], value[1])
        if len(value) == 4:
            return cls(*value)
        raise ValueError("Invalid margin: %r" % (value,))

    @property
    def is_zero(self) -> bool:
        return self.left == self.top == self.right == self.bottom == 0

    @property
    def horizontal(self) -> int:
        return self.left + self.right

    @property
    def vertical(self) -> int:
        return self.top + self.bottom


@define(frozen=True)
class Font(object):
    """
    Font descriptor for text marks.

    .. py:attribute:: family

        Font file or name passed to :py:func:`PIL.ImageFont.truetype`. When
        None, Pillow's default font is used.

    .. py:attribute:: size

        Size in points. Converted to pixels with the resolution of the image
        the text is drawn on.

    .. py:attribute:: index

        Face index within a font collection.
    """

    family: Optional[str] = None
    size: float = field(default=10.0, converter=float, validator=greater_than(0.0))
    index: int = field(default=0, converter=int)

    def pixel_size(self, dpi: float) -> int:
        return max(1, int(round(self.size * dpi / 72.0)))


def _optional_color(value: Any) -> Optional[Tuple[int, ...]]:
    return get_color(value)


def _font_color(value: Any) -> Tuple[int, ...]:
    return get_color(value, alpha=True)


def _resampling(value: Any) -> Image.Resampling:
    if isinstance(value, str):
        try:
            return Image.Resampling[value.upper()]
        except KeyError:
            raise ValueError("Unknown resampling filter: %r" % value) from None
    return Image.Resampling(value)


@define(frozen=True)
class DrawParams(object):
    """
    Parameters of a single draw call.

    .. py:attribute:: opacity

        Global opacity multiplier in [0.0, 1.0].

    .. py:attribute:: scale_ratio

        Mark scaling ratio, greater than 0.

    .. py:attribute:: transparent_color

        RGB color treated as a hard cutout, or None.

    .. py:attribute:: orientation

        :py:class:`~watermarker.constants.Orientation` applied to the mark.

    .. py:attribute:: margin

        :py:class:`Margin` around the mark.

    .. py:attribute:: position

        :py:class:`~watermarker.constants.Position` policy. ``x`` and ``y``
        are used when it is ``ABSOLUTE``.

    .. py:attribute:: font

        :py:class:`Font` for text marks.

    .. py:attribute:: font_color

        RGBA color for text marks.

    .. py:attribute:: scale_mode

        :py:class:`~watermarker.constants.ScaleMode` for mark preparation.

    .. py:attribute:: resample

        Resampling filter used when scaling the mark.
    """

    opacity: float = field(
        default=1.0,
        converter=float,
        metadata=deferred(range_(0.0, 1.0, OpacityError)),
    )
    scale_ratio: float = field(
        default=1.0,
        converter=float,
        metadata=deferred(greater_than(0.0, ScaleRatioError)),
    )
    transparent_color: Optional[Tuple[int, ...]] = field(
        default=None, converter=_optional_color
    )
    orientation: Orientation = field(
        default=Orientation.ROTATE_NONE_FLIP_NONE, converter=Orientation.from_name
    )
    margin: Margin = field(factory=Margin, converter=Margin.convert)
    position: Position = field(default=Position.ABSOLUTE, converter=Position.from_name)
    x: int = field(default=0, converter=int)
    y: int = field(default=0, converter=int)
    font: Font = field(factory=Font)
    font_color: Tuple[int, ...] = field(default="black", converter=_font_color)
    scale_mode: ScaleMode = field(
        default=ScaleMode.RESAMPLE, converter=ScaleMode.from_name
    )
    resample: Image.Resampling = field(
        default=Image.Resampling.BILINEAR, converter=_resampling
    )

    @property
    def offset(self) -> Tuple[int, int]:
        """Absolute (x, y) coordinate."""
        return (self.x, self.y)

    def evolve(self, **changes: Any) -> "DrawParams":
        """Return a copy with ``changes`` applied."""
        if not changes:
            return self
        return attrs.evolve(self, **changes)

    def validate(self) -> None:
        """
        Check the draw-time ranges.

        :raise OpacityError: opacity is outside [0.0, 1.0].
        :raise ScaleRatioError: scale ratio is not greater than 0.
        """
        check(self)
