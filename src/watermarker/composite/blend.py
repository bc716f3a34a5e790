"""
Alpha blending of RGBA arrays.
"""
import logging
from typing import Optional, Tuple

import numpy as np

from watermarker.composite.utils import clip, divide, union

logger = logging.getLogger(__name__)


def normal(Cb, Cs):
    return Cs


def over(
    Cb: np.ndarray, Ab: np.ndarray, Cs: np.ndarray, As: np.ndarray
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Porter-Duff source-over.

    :param Cb: backdrop color, (h, w, 3).
    :param Ab: backdrop alpha, (h, w, 1).
    :param Cs: source color, (h, w, 3).
    :param As: source alpha, (h, w, 1).
    :return: tuple of un-premultiplied color and alpha.
    """
    Ao = union(Ab, As)
    Co = divide(Cs * As + Cb * Ab * (1.0 - As), Ao)
    return clip(Co), clip(Ao)


def blend(
    backdrop: np.ndarray,
    source: np.ndarray,
    opacity: float = 1.0,
    skip: Optional[np.ndarray] = None,
) -> np.ndarray:
    """
    Blend an RGBA source onto an RGBA backdrop of the same shape.

    The source alpha is multiplied by ``opacity``. Backdrop pixels where the
    resulting alpha is zero, or where ``skip`` is True, are returned as is.

    :param backdrop: float32 array (h, w, 4) in [0, 1].
    :param source: float32 array (h, w, 4) in [0, 1].
    :param opacity: global opacity in [0, 1].
    :param skip: optional boolean mask (h, w) of source pixels to ignore.
    :return: float32 array (h, w, 4).
    """
    assert backdrop.shape == source.shape, "%s vs %s" % (backdrop.shape, source.shape)
    Cb, Ab = backdrop[:, :, :3], backdrop[:, :, 3:4]
    Cs, As = source[:, :, :3], source[:, :, 3:4] * np.float32(opacity)

    color, alpha = over(Cb, Ab, normal(Cb, Cs), As)
    result = np.concatenate((color, alpha), axis=2).astype(np.float32)

    untouched = As[:, :, 0] <= 0.0
    if skip is not None:
        logger.debug("Skipping %d key color pixels" % np.count_nonzero(skip))
        untouched |= skip
    result[untouched] = backdrop[untouched]
    return result
