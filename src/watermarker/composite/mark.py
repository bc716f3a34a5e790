"""
Mark preparation: margins, scaling and orientation.
"""
import logging

from PIL import Image

from watermarker.constants import Orientation, ScaleMode

logger = logging.getLogger(__name__)

_AXES_SWAPPED = (
    Image.Transpose.ROTATE_90,
    Image.Transpose.ROTATE_270,
    Image.Transpose.TRANSPOSE,
    Image.Transpose.TRANSVERSE,
)


def prepare_mark(
    mark,
    margin,
    scale_ratio,
    scale_mode=ScaleMode.RESAMPLE,
    resample=Image.Resampling.BILINEAR,
):
    """
    Pad and scale a mark.

    Returns ``mark`` itself when the margin is empty and ``scale_ratio`` is
    1. Otherwise a new transparent RGBA canvas of the scaled size plus the
    margins is allocated and the mark is drawn at ``(margin.left,
    margin.top)``. The resolution of ``mark`` is kept.

    :param mark: :py:class:`PIL.Image.Image`.
    :param margin: :py:class:`~watermarker.api.params.Margin`.
    :param scale_ratio: scale ratio, greater than 0.
    :param scale_mode: :py:class:`~watermarker.constants.ScaleMode`.
    :param resample: resampling filter for :py:attr:`ScaleMode.RESAMPLE`.
    :return: :py:class:`PIL.Image.Image`.
    """
    if margin.is_zero and scale_ratio == 1.0:
        return mark

    # Round half to even.
    width = int(round(mark.width * scale_ratio))
    height = int(round(mark.height * scale_ratio))
    canvas = Image.new(
        "RGBA", (width + margin.horizontal, height + margin.vertical), (0, 0, 0, 0)
    )
    if "dpi" in mark.info:
        canvas.info["dpi"] = mark.info["dpi"]

    if width > 0 and height > 0 and mark.width > 0 and mark.height > 0:
        source = mark if mark.mode == "RGBA" else mark.convert("RGBA")
        if ScaleMode.from_name(scale_mode) == ScaleMode.CANVAS:
            # Out-of-bounds crop pads with transparent pixels.
            source = source.crop((0, 0, width, height))
        elif source.size != (width, height):
            source = source.resize((width, height), resample)
        canvas.paste(source, (margin.left, margin.top))

    logger.debug(
        "Prepared mark %dx%d -> %dx%d"
        % (mark.width, mark.height, canvas.width, canvas.height)
    )
    return canvas


def apply_orientation(mark, orientation):
    """
    Rotate and/or flip a mark.

    :param mark: :py:class:`PIL.Image.Image`.
    :param orientation: :py:class:`~watermarker.constants.Orientation`.
    :return: ``mark`` itself for the identity, a new image otherwise.
    """
    method = Orientation.from_name(orientation).transpose
    if method is None:
        return mark
    result = mark.transpose(method)
    if method in _AXES_SWAPPED and "dpi" in mark.info:
        dpi = mark.info["dpi"]
        result.info["dpi"] = (dpi[1], dpi[0])
    return result
