import attrs
import pytest

from watermarker.exceptions import OpacityError
from watermarker.validators import check, deferred, greater_than, in_, range_


@attrs.define
class Sample:
    ratio: float = attrs.field(default=1.0, validator=range_(0, 1))
    size: int = attrs.field(default=1, validator=range_(0, None))
    scale: float = attrs.field(default=1.0, metadata=deferred(greater_than(0)))
    alpha: float = attrs.field(
        default=0.5, metadata=deferred(range_(0.0, 1.0, OpacityError))
    )
    kind: str = attrs.field(default="a", validator=in_(("a", "b")))


def test_range():
    Sample(ratio=0, size=1000)
    with pytest.raises(ValueError, match="'ratio' must be in range"):
        Sample(ratio=1.5)
    with pytest.raises(ValueError):
        Sample(size=-1)
    with pytest.raises(ValueError):
        Sample(kind="c")


def test_range_rejects_nan_and_none():
    with pytest.raises(ValueError):
        Sample(ratio=float("nan"))
    with pytest.raises(ValueError):
        Sample(ratio=None)  # type: ignore[arg-type]


def test_deferred():
    sample = Sample(scale=0, alpha=2.0)
    assert sample.scale == 0
    with pytest.raises(ValueError, match="'scale' must be greater than 0"):
        check(sample)

    sample = Sample(alpha=2.0)
    with pytest.raises(OpacityError):
        check(sample)

    check(Sample())


def test_deferred_keeps_metadata():
    metadata = deferred(greater_than(0), {"doc": "scale"})
    assert metadata["doc"] == "scale"
    assert len(metadata) == 2


def test_repr():
    assert repr(range_(0, 1)) == "<range_ validator with [0, 1]>"
    assert repr(greater_than(0.0)) == "<greater_than validator with 0.0>"
