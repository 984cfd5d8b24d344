"""
Tolerance-based equality.

:func:`kinda_eq` dispatches on the type of its first argument. The default
implementation handles scalars; :mod:`vecto.vector2` registers the vector
implementation, which requires both components to match with the same
tolerance.
"""

from __future__ import annotations

from functools import singledispatch
from typing import Any

DEFAULT_TOLERANCE = 0.00001


@singledispatch
def kinda_eq(a: Any, b: Any, tolerance: float) -> bool:
    """
    Checks whether ``a`` and ``b`` are equal within ``tolerance``.

    Args:
        a: First value.
        b: Second value.
        tolerance: Exclusive upper bound on ``abs(a - b)``.

    Returns:
        ``True`` if the values are exactly equal or closer than ``tolerance``.
    """
    if a == b:
        return True
    return bool(abs(a - b) < tolerance)


def approx_eq(a: Any, b: Any) -> bool:
    """
    :func:`kinda_eq` with :data:`DEFAULT_TOLERANCE`.
    """
    return kinda_eq(a, b, DEFAULT_TOLERANCE)
