"""Coercion of scalar arguments to Python integers."""

import numbers

import numpy as np

from ...errors import InvalidArgument


def as_integral_scalar(value, name: str) -> int:
    """Return ``value`` as an ``int`` if it is a single integral-valued number.

    Any real ``numbers.Number`` with an exact integral value is accepted:
    ints, numpy scalars, ``4.0``, ``Decimal("4")``, ``Fraction(8, 2)``.
    """

    if isinstance(value, np.ndarray) and value.ndim == 0:
        value = value.item()
    if isinstance(value, (bool, np.bool_)):
        raise InvalidArgument(f"{name} must be numeric, got bool")
    if isinstance(value, numbers.Integral):
        return int(value)
    if not isinstance(value, numbers.Number) or (
        isinstance(value, numbers.Complex) and not isinstance(value, numbers.Real)
    ):
        raise InvalidArgument(f"{name} must be a numeric scalar, got {type(value).__name__}")

    # NaN raises ValueError, infinities raise OverflowError
    try:
        as_int = int(value)
    except (ValueError, OverflowError):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}") from None
    if as_int != value:
        raise InvalidArgument(f"{name} must be an integer, got {value!r}")
    return as_int
