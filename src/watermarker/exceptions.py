"""
Exceptions raised by watermarker.
"""


class OutOfRangeError(ValueError):
    """
    A draw parameter is missing or outside of its valid domain.

    .. py:attribute:: name

        Name of the offending parameter.
    """

    def __init__(self, name: str, message: str) -> None:
        super(OutOfRangeError, self).__init__(message)
        self.name = name


class MissingMarkError(OutOfRangeError):
    """No mark was given to draw."""

    def __init__(self, message: str = "'mark' must not be None") -> None:
        super(MissingMarkError, self).__init__("mark", message)


class OpacityError(OutOfRangeError):
    """Opacity is outside of [0.0, 1.0]."""

    def __init__(self, message: str) -> None:
        super(OpacityError, self).__init__("opacity", message)


class ScaleRatioError(OutOfRangeError):
    """Scale ratio is not greater than 0."""

    def __init__(self, message: str) -> None:
        super(ScaleRatioError, self).__init__("scale_ratio", message)
