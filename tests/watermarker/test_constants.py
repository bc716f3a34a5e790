import pytest
from PIL import Image

from watermarker.constants import Orientation, Position, ScaleMode


@pytest.mark.parametrize(
    "value, expected",
    [
        (Position.CENTER, Position.CENTER),
        ("center", Position.CENTER),
        ("Bottom-Right", Position.BOTTOM_RIGHT),
        ("middle left", Position.MIDDLE_LEFT),
        ("TOP_MIDDLE", Position.TOP_MIDDLE),
        (0, Position.ABSOLUTE),
    ],
)
def test_position_from_name(value, expected):
    assert Position.from_name(value) == expected


@pytest.mark.parametrize("value", ["upper-left", "", 10])
def test_from_name_unknown(value):
    with pytest.raises(ValueError):
        Position.from_name(value)


def test_scale_mode_from_name():
    assert ScaleMode.from_name("canvas") == ScaleMode.CANVAS
    assert ScaleMode.from_name(0) == ScaleMode.RESAMPLE


@pytest.mark.parametrize(
    "alias, expected",
    [
        ("rotate-none-flip-y", Orientation.ROTATE_180_FLIP_X),
        ("rotate-90-flip-y", Orientation.ROTATE_270_FLIP_X),
        ("rotate-180-flip-y", Orientation.ROTATE_NONE_FLIP_X),
        ("rotate-270-flip-y", Orientation.ROTATE_90_FLIP_X),
        ("rotate-none-flip-xy", Orientation.ROTATE_180_FLIP_NONE),
        ("rotate-90-flip-xy", Orientation.ROTATE_270_FLIP_NONE),
        ("rotate-180-flip-xy", Orientation.ROTATE_NONE_FLIP_NONE),
        ("rotate-270-flip-xy", Orientation.ROTATE_90_FLIP_NONE),
    ],
)
def test_orientation_aliases(alias, expected):
    assert Orientation.from_name(alias) is expected


def test_orientation_values():
    assert [int(o) for o in Orientation] == list(range(8))
    assert Orientation.from_name(5) == Orientation.ROTATE_90_FLIP_X


@pytest.mark.parametrize(
    "orientation, expected",
    [
        (Orientation.ROTATE_90_FLIP_NONE, Orientation.ROTATE_270_FLIP_NONE),
        (Orientation.ROTATE_270_FLIP_NONE, Orientation.ROTATE_90_FLIP_NONE),
        (Orientation.ROTATE_180_FLIP_NONE, Orientation.ROTATE_180_FLIP_NONE),
        (Orientation.ROTATE_90_FLIP_X, Orientation.ROTATE_90_FLIP_X),
        (Orientation.ROTATE_NONE_FLIP_NONE, Orientation.ROTATE_NONE_FLIP_NONE),
    ],
)
def test_orientation_inverse(orientation, expected):
    assert orientation.inverse == expected


def test_orientation_transpose():
    assert Orientation.ROTATE_NONE_FLIP_NONE.transpose is None
    assert Orientation.ROTATE_90_FLIP_NONE.transpose == Image.Transpose.ROTATE_270
    assert Orientation.ROTATE_90_FLIP_X.transpose == Image.Transpose.TRANSPOSE
    assert all(
        o.transpose is not None for o in Orientation if o != 0
    )
