import logging

import numpy as np
import pytest

from watermarker.composite.blend import blend, over

logger = logging.getLogger(__name__)


def _solid(color, shape=(4, 5)):
    return np.tile(np.asarray(color, dtype=np.float32), shape + (1,))


@pytest.mark.parametrize("opacity", [0.0, 0.1, 0.25, 0.5, 0.75, 1.0])
def test_blend_opacity(opacity):
    backdrop = _solid((0.8, 0.4, 0.2, 1.0))
    source = _solid((0.0, 0.6, 1.0, 1.0))
    result = blend(backdrop, source, opacity)
    expected = backdrop[:, :, :3] * (1 - opacity) + source[:, :, :3] * opacity
    assert np.allclose(result[:, :, :3], expected, atol=1e-6)
    assert np.allclose(result[:, :, 3], 1.0)


def test_blend_transparent_source():
    backdrop = _solid((0.3, 0.2, 0.1, 0.7))
    source = _solid((1.0, 1.0, 1.0, 0.0))
    assert np.array_equal(blend(backdrop, source, 1.0), backdrop)


def test_blend_skip():
    backdrop = _solid((0.3, 0.2, 0.1, 1.0))
    source = _solid((1.0, 1.0, 1.0, 1.0))
    skip = np.zeros((4, 5), dtype=bool)
    skip[1:3, 2:4] = True
    result = blend(backdrop, source, 1.0, skip)
    assert np.array_equal(result[skip], backdrop[skip])
    assert np.allclose(result[~skip], source[~skip])


def test_blend_onto_transparent_backdrop():
    backdrop = _solid((0.0, 0.0, 0.0, 0.0))
    source = _solid((0.2, 0.4, 0.6, 1.0))
    result = blend(backdrop, source, 0.5)
    assert np.allclose(result[:, :, :3], source[:, :, :3])
    assert np.allclose(result[:, :, 3], 0.5)


def test_over():
    Cb = np.full((1, 1, 3), 1.0, dtype=np.float32)
    Ab = np.full((1, 1, 1), 0.5, dtype=np.float32)
    Cs = np.zeros((1, 1, 3), dtype=np.float32)
    As = np.full((1, 1, 1), 0.5, dtype=np.float32)
    color, alpha = over(Cb, Ab, Cs, As)
    assert np.allclose(alpha, 0.75)
    assert np.allclose(color, 0.25 / 0.75)


def test_blend_shape_mismatch():
    with pytest.raises(AssertionError):
        blend(_solid((0, 0, 0, 1), (2, 2)), _solid((0, 0, 0, 1), (3, 3)))
