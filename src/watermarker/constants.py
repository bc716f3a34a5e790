"""
Various constants for watermarker
"""

from enum import Enum, IntEnum
from typing import Any, Optional

from PIL import Image


class _NamedMixin(object):
    @classmethod
    def from_name(cls, value: Any) -> Any:
        """
        Look up a member by member, name or value.

        Names are case insensitive and ``-`` is accepted for ``_``, so that
        ``"bottom-right"`` resolves to ``BOTTOM_RIGHT``.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper().replace("-", "_").replace(" ", "_")
            try:
                return cls[key]  # type: ignore[index]
            except KeyError:
                raise ValueError("Unknown %s: %r" % (cls.__name__, value)) from None
        return cls(value)  # type: ignore[call-arg]


class Position(_NamedMixin, Enum):
    """
    Placement policy of a mark relative to the working image.

    :py:attr:`ABSOLUTE` uses the explicit ``x`` and ``y`` coordinates of the
    draw parameters, every other member is an anchor computed from the image
    and mark sizes.
    """

    ABSOLUTE = 0
    TOP_LEFT = 1
    TOP_RIGHT = 2
    TOP_MIDDLE = 3
    BOTTOM_LEFT = 4
    BOTTOM_RIGHT = 5
    BOTTOM_MIDDLE = 6
    MIDDLE_LEFT = 7
    MIDDLE_RIGHT = 8
    CENTER = 9


class Orientation(_NamedMixin, IntEnum):
    """
    Rotation and flipping applied to a mark.

    Rotation is clockwise and happens before the horizontal flip. Flip-Y and
    flip-XY names are aliases of the equivalent rotate/flip-X state.
    """

    ROTATE_NONE_FLIP_NONE = 0
    ROTATE_90_FLIP_NONE = 1
    ROTATE_180_FLIP_NONE = 2
    ROTATE_270_FLIP_NONE = 3
    ROTATE_NONE_FLIP_X = 4
    ROTATE_90_FLIP_X = 5
    ROTATE_180_FLIP_X = 6
    ROTATE_270_FLIP_X = 7

    # Aliases.
    ROTATE_NONE_FLIP_Y = 6
    ROTATE_90_FLIP_Y = 7
    ROTATE_180_FLIP_Y = 4
    ROTATE_270_FLIP_Y = 5
    ROTATE_NONE_FLIP_XY = 2
    ROTATE_90_FLIP_XY = 3
    ROTATE_180_FLIP_XY = 0
    ROTATE_270_FLIP_XY = 1

    @property
    def transpose(self) -> Optional[Image.Transpose]:
        """Equivalent :py:class:`PIL.Image.Transpose`, None for identity."""
        return _TRANSPOSE[self]

    @property
    def inverse(self) -> "Orientation":
        """Orientation that undoes this one."""
        return {
            Orientation.ROTATE_90_FLIP_NONE: Orientation.ROTATE_270_FLIP_NONE,
            Orientation.ROTATE_270_FLIP_NONE: Orientation.ROTATE_90_FLIP_NONE,
        }.get(self, self)


# PIL rotates counter-clockwise.
_TRANSPOSE = {
    Orientation.ROTATE_NONE_FLIP_NONE: None,
    Orientation.ROTATE_90_FLIP_NONE: Image.Transpose.ROTATE_270,
    Orientation.ROTATE_180_FLIP_NONE: Image.Transpose.ROTATE_180,
    Orientation.ROTATE_270_FLIP_NONE: Image.Transpose.ROTATE_90,
    Orientation.ROTATE_NONE_FLIP_X: Image.Transpose.FLIP_LEFT_RIGHT,
    Orientation.ROTATE_90_FLIP_X: Image.Transpose.TRANSPOSE,
    Orientation.ROTATE_180_FLIP_X: Image.Transpose.FLIP_TOP_BOTTOM,
    Orientation.ROTATE_270_FLIP_X: Image.Transpose.TRANSVERSE,
}


class ScaleMode(_NamedMixin, Enum):
    """
    How mark preparation applies the scale ratio.

    :py:attr:`RESAMPLE` resamples the mark to the scaled size.
    :py:attr:`CANVAS` only sizes the canvas by the scale ratio and pastes the
    mark at its original pixel size, clipped to the scaled rectangle.
    """

    RESAMPLE = 0
    CANVAS = 1


#: Resolution assumed for images that carry no DPI information.
DEFAULT_DPI = (96.0, 96.0)

#: Image modes the compositor writes back into without normalization.
BLENDABLE_MODES = ("RGB", "RGBA", "L", "LA")
