"""
Validation functions for attrs.

Besides the usual attrs validators, a field may carry a *deferred* check in
its metadata. Deferred checks do not run at construction; :py:func:`check`
runs them on demand, which lets a parameter object hold out-of-range values
until the moment it is used.
"""

from typing import Any, Optional, Type

import attrs
from attrs.validators import in_

__all__ = ["in_", "range_", "greater_than", "deferred", "check"]

_DEFERRED = "watermarker.deferred"


@attrs.define(repr=False, frozen=True, slots=True)
class _RangeValidator(object):
    minimum: Any
    maximum: Any
    error: Type[Exception] = ValueError

    def __call__(self, inst: Any, attr: "attrs.Attribute", value: Any) -> None:
        try:
            in_range = (self.minimum is None or self.minimum <= value) and (
                self.maximum is None or value <= self.maximum
            )
        except TypeError:
            in_range = False

        if not in_range:
            raise self.error(
                "'{name}' must be in range [{minimum!r}, {maximum!r}], got {value!r}".format(
                    name=attr.name,
                    minimum=self.minimum,
                    maximum=self.maximum,
                    value=value,
                )
            )

    def __repr__(self) -> str:
        return "<range_ validator with [{minimum!r}, {maximum!r}]>".format(
            minimum=self.minimum, maximum=self.maximum
        )


@attrs.define(repr=False, frozen=True, slots=True)
class _GreaterThanValidator(object):
    bound: Any
    error: Type[Exception] = ValueError

    def __call__(self, inst: Any, attr: "attrs.Attribute", value: Any) -> None:
        try:
            valid = value > self.bound
        except TypeError:
            valid = False

        if not valid:
            raise self.error(
                "'{name}' must be greater than {bound!r}, got {value!r}".format(
                    name=attr.name, bound=self.bound, value=value
                )
            )

    def __repr__(self) -> str:
        return "<greater_than validator with {bound!r}>".format(bound=self.bound)


def range_(
    minimum: Any, maximum: Any, error: Type[Exception] = ValueError
) -> _RangeValidator:
    """
    A validator that raises ``error`` (:exc:`ValueError` by default) if the
    value does not belong in the [minimum, maximum] range. ``None`` leaves
    that side unbounded. The check is performed using
    ``minimum <= value and value <= maximum``
    """
    return _RangeValidator(minimum, maximum, error)


def greater_than(bound: Any, error: Type[Exception] = ValueError) -> _GreaterThanValidator:
    """
    A validator that raises ``error`` unless ``value > bound``.
    """
    return _GreaterThanValidator(bound, error)


def deferred(validator: Any, metadata: Optional[dict] = None) -> dict:
    """Field metadata registering ``validator`` as a deferred check."""
    result = dict(metadata or {})
    result[_DEFERRED] = validator
    return result


def check(inst: Any) -> None:
    """Run the deferred checks of an attrs instance in field order."""
    for field in attrs.fields(type(inst)):
        validator = field.metadata.get(_DEFERRED)
        if validator is not None:
            validator(inst, field, getattr(inst, field.name))
