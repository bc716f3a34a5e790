"""
Mark placement.
"""
from typing import Callable, Dict, Tuple

from watermarker.constants import Position

Size = Tuple[int, int]


def _half(value: int) -> int:
    """Integer division by 2, truncating toward zero."""
    return -(-value // 2) if value < 0 else value // 2


def _start(base: int, mark: int) -> int:
    return 0


def _middle(base: int, mark: int) -> int:
    return _half(base - mark)


def _end(base: int, mark: int) -> int:
    return base - mark


"""Anchor table: position -> (horizontal, vertical) placement functions."""
ANCHORS: Dict[Position, Tuple[Callable[[int, int], int], Callable[[int, int], int]]] = {
    Position.TOP_LEFT: (_start, _start),
    Position.TOP_RIGHT: (_end, _start),
    Position.TOP_MIDDLE: (_middle, _start),
    Position.BOTTOM_LEFT: (_start, _end),
    Position.BOTTOM_RIGHT: (_end, _end),
    Position.BOTTOM_MIDDLE: (_middle, _end),
    Position.MIDDLE_LEFT: (_start, _middle),
    Position.MIDDLE_RIGHT: (_end, _middle),
    Position.CENTER: (_middle, _middle),
}


def resolve_position(
    base_size: Size,
    mark_size: Size,
    position: Position,
    offset: Tuple[int, int] = (0, 0),
) -> Tuple[int, int]:
    """
    Compute the top-left coordinate of a mark on the base image.

    The result is never clamped: a mark larger than the base, or an absolute
    offset outside of it, yields coordinates outside of the base bounds.

    :param base_size: (width, height) of the base image.
    :param mark_size: (width, height) of the mark.
    :param position: :py:class:`~watermarker.constants.Position` policy.
    :param offset: (x, y) used when ``position`` is ``ABSOLUTE``.
    :return: (x, y) tuple.
    """
    position = Position.from_name(position)
    if position == Position.ABSOLUTE:
        return (int(offset[0]), int(offset[1]))
    horizontal, vertical = ANCHORS[position]
    return (
        horizontal(base_size[0], mark_size[0]),
        vertical(base_size[1], mark_size[1]),
    )
