"""
Watermarker module.

This module provides the main :py:class:`Watermarker` class, the entry point
for stamping image and text marks onto an image.

A :py:class:`Watermarker` owns two images: the *original*, set once at
construction and never modified, and the working :py:attr:`~Watermarker.image`
that every draw call mutates. :py:meth:`~Watermarker.reset` discards all
drawn marks by copying the original again.

Example usage::

    from watermarker import DrawParams, Position, Watermarker

    marker = Watermarker.open('photo.jpg')

    # Logo in the bottom-right corner, half transparent, white cut out
    marker.draw_image('logo.png', opacity=0.5, transparent_color='white',
                      position=Position.BOTTOM_RIGHT, margin=20)

    # Reuse parameters
    params = DrawParams(position=Position.TOP_LEFT, font_color='red')
    marker.draw_text('(c) 2024', params)

    marker.save('photo-marked.jpg')

A single instance must not be drawn on from several threads at once; use one
instance per image, or serialize the calls.
"""

import logging
import os
from typing import Any, BinaryIO, Optional, Tuple, Union

import numpy as np
from PIL import Image

from watermarker.api import numpy_io, pil_io
from watermarker.api.params import DrawParams
from watermarker.api.text import text_to_mark
from watermarker.exceptions import MissingMarkError

logger = logging.getLogger(__name__)

MarkSource = Union[Image.Image, str, bytes, os.PathLike, BinaryIO]


class Watermarker(object):
    """
    Image with drawn marks.

    :param image: :py:class:`PIL.Image.Image` to draw on. Images in modes
        other than RGB, RGBA, L or LA are converted to RGBA.
    """

    def __init__(self, image: Image.Image):
        if not isinstance(image, Image.Image):
            raise TypeError(f"Expected PIL Image, got {type(image).__name__}")
        original = pil_io.normalize_mode(image)
        if original is image:
            original = image.copy()
        self._original = original
        self.reset()

    @classmethod
    def open(cls, fp: MarkSource) -> "Watermarker":
        """
        Open an image file.

        :param fp: filename, path-like, `bytes` or binary file object.
        :return: A :py:class:`Watermarker` object.
        """
        return cls(pil_io.open_image(fp))

    @property
    def original(self) -> Image.Image:
        """Image without marks. Do not modify."""
        return self._original

    @property
    def image(self) -> Image.Image:
        """Working image with the drawn marks."""
        return self._image

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    @property
    def size(self) -> Tuple[int, int]:
        return self._image.size

    @property
    def dpi(self) -> Tuple[float, float]:
        """Horizontal and vertical resolution."""
        return pil_io.get_dpi(self._image)

    def reset(self) -> None:
        """Reset the image, clearing all drawn marks."""
        self._image = self._original.copy()

    def draw_image(
        self,
        mark: Optional[MarkSource],
        params: Optional[DrawParams] = None,
        **kwargs: Any,
    ) -> None:
        """
        Draw an image mark.

        :param mark: :py:class:`PIL.Image.Image`, or a filename, path-like,
            `bytes` or binary file object to decode.
        :param params: :py:class:`~watermarker.api.params.DrawParams`. Defaults
            are used when omitted.
        :param kwargs: :py:class:`~watermarker.api.params.DrawParams` fields
            overriding ``params`` for this call.
        :raise MissingMarkError: ``mark`` is None.
        :raise OpacityError: opacity is outside [0.0, 1.0].
        :raise ScaleRatioError: scale ratio is not greater than 0.
        """
        params = self._check(mark, params, **kwargs)
        self._draw(pil_io.open_image(mark), params)

    def draw_text(
        self,
        text: str,
        params: Optional[DrawParams] = None,
        **kwargs: Any,
    ) -> None:
        """
        Draw a text mark.

        The text is rendered with ``params.font`` and ``params.font_color``
        and then drawn as an image mark.

        :param text: `str` to draw.
        :param params: :py:class:`~watermarker.api.params.DrawParams`.
        :param kwargs: :py:class:`~watermarker.api.params.DrawParams` fields
            overriding ``params`` for this call.
        """
        params = self._check(text, params, **kwargs)
        mark = text_to_mark(text, params.font, params.font_color, self._image)
        self._draw(mark, params)

    def topil(self) -> Image.Image:
        """
        Get a copy of the working image.

        :return: :py:class:`PIL.Image.Image`
        """
        return self._image.copy()

    def numpy(self) -> np.ndarray:
        """
        Get the working image as a float32 RGBA array in [0, 1].

        :return: :py:class:`numpy.ndarray` of shape (height, width, 4)
        """
        return numpy_io.get_array(self._image)

    def save(
        self,
        fp: Union[str, os.PathLike, BinaryIO],
        format: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        """
        Save the working image.

        :param fp: filename or file-like object.
        :param format: image format, guessed from the filename when omitted.
        :param kwargs: encoder options passed to :py:meth:`PIL.Image.Image.save`.
        """
        pil_io.save_image(self._image, fp, format, **kwargs)

    def _check(
        self, mark: Any, params: Optional[DrawParams], **kwargs: Any
    ) -> DrawParams:
        if mark is None:
            raise MissingMarkError()
        params = (params or DrawParams()).evolve(**kwargs)
        params.validate()
        return params

    def _draw(self, mark: Image.Image, params: DrawParams) -> None:
        from watermarker.composite import (
            apply_orientation,
            composite,
            prepare_mark,
            resolve_position,
        )

        prepared = prepare_mark(
            mark, params.margin, params.scale_ratio, params.scale_mode, params.resample
        )
        oriented = apply_orientation(prepared, params.orientation)
        offset = resolve_position(
            self._image.size, oriented.size, params.position, params.offset
        )
        logger.debug(
            "Drawing %dx%d mark at %r (%s)"
            % (oriented.width, oriented.height, offset, params.position.name)
        )
        composite(
            self._image, oriented, offset, params.opacity, params.transparent_color
        )

    def __repr__(self) -> str:
        return "%s(mode=%s size=%dx%d)" % (
            self.__class__.__name__,
            self._image.mode,
            self.width,
            self.height,
        )
