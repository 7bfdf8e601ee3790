"""Euclidean algorithm for the greatest common divisor."""

import logging

from .common.scalars import as_integral_scalar

logger = logging.getLogger(__name__)


def euclidean(a, b) -> int:
    """
    Greatest common divisor of ``a`` and ``b``.

    Both arguments must be integral-valued numbers (``1000.0`` is accepted).
    Signs are dropped before the remainder loop, so the result is always
    non-negative and ``euclidean(0, 0) == 0``.

    Raises:
        InvalidArgument: if either argument is not an integral number.
    """

    a = abs(as_integral_scalar(a, "a"))
    b = abs(as_integral_scalar(b, "b"))
    logger.debug("Computing gcd(%d, %d)", a, b)

    while b != 0:
        a, b = b, a % b

    return a
