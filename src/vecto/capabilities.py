"""
Capability sets for vector components.

Most of :class:`vecto.Vector2` only needs the arithmetic operators of its
component type. Geometry that needs trigonometry or square roots asks for the
*float* capability, and ``ceil``/``floor`` ask for the *rounding* capability.
Each is resolved from the component value with :func:`float_ops` or
:func:`rounding_ops`, so integer vectors keep their arithmetic without having
to provide either.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from functools import singledispatch
from typing import Any, Callable

import numpy as np

from vecto.logging import LOGGER_ID, CapabilityError

module_logger = logging.getLogger(f"{LOGGER_ID}.capabilities")


@dataclass(frozen=True)
class FloatOps:
    """
    The operations a component type must provide for floating-point geometry.

    Args:
        name: Human-readable name of the backend.
        cos: Cosine of an angle in radians.
        sin: Sine of an angle in radians.
        atan2: Two-argument arctangent, called as ``atan2(y, x)``.
        sqrt: Square root.
        abs: Absolute value.
        zero: Returns the zero value of the given component's type.
    """

    name: str
    cos: Callable[[Any], Any]
    sin: Callable[[Any], Any]
    atan2: Callable[[Any, Any], Any]
    sqrt: Callable[[Any], Any]
    abs: Callable[[Any], Any]
    zero: Callable[[Any], Any]


@dataclass(frozen=True)
class RoundingOps:
    """
    The operations a component type must provide for ``ceil`` and ``floor``.
    """

    name: str
    ceil: Callable[[Any], Any]
    floor: Callable[[Any], Any]


PYTHON_FLOAT_OPS = FloatOps(
    name="math",
    cos=math.cos,
    sin=math.sin,
    atan2=math.atan2,
    sqrt=math.sqrt,
    abs=abs,
    zero=lambda value: 0.0,
)

NUMPY_FLOAT_OPS = FloatOps(
    name="numpy",
    cos=np.cos,
    sin=np.sin,
    atan2=np.arctan2,
    sqrt=np.sqrt,
    abs=np.abs,
    zero=lambda value: type(value)(0),
)

# math.ceil and math.floor return int, keep the component a float
PYTHON_FLOAT_ROUNDING = RoundingOps(
    name="math",
    ceil=lambda value: float(math.ceil(value)),
    floor=lambda value: float(math.floor(value)),
)

NUMPY_ROUNDING = RoundingOps(name="numpy", ceil=np.ceil, floor=np.floor)


def _missing(capability: str, value: Any) -> CapabilityError:
    module_logger.debug(
        f"No {capability} capability registered for {type(value).__name__}."
    )
    return CapabilityError(
        f"component type '{type(value).__name__}' does not support {capability} operations"
    )


@singledispatch
def float_ops(value: Any) -> FloatOps:
    """
    Resolves the float capability for a component value.

    Args:
        value: A vector component.

    Returns:
        The :class:`FloatOps` matching the component's type.

    Raises:
        CapabilityError: If the type has no float capability registered.
    """
    raise _missing("floating-point", value)


@float_ops.register(float)
def _(value: float) -> FloatOps:
    return PYTHON_FLOAT_OPS


@float_ops.register(np.floating)
def _(value: np.floating) -> FloatOps:
    return NUMPY_FLOAT_OPS


@singledispatch
def rounding_ops(value: Any) -> RoundingOps:
    """
    Resolves the rounding capability for a component value.

    Raises:
        CapabilityError: If the type has no rounding capability registered.
    """
    raise _missing("rounding", value)


@rounding_ops.register(float)
def _(value: float) -> RoundingOps:
    return PYTHON_FLOAT_ROUNDING


@rounding_ops.register(np.floating)
def _(value: np.floating) -> RoundingOps:
    return NUMPY_ROUNDING
