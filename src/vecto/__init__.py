import os

from vecto.capabilities import FloatOps, RoundingOps, float_ops, rounding_ops
from vecto.kinda import DEFAULT_TOLERANCE, approx_eq, kinda_eq
from vecto.logging import (CapabilityError, InvalidLengthError, VectoError,
                           VectoValueError, config_logging,
                           set_up_simple_logging)
from vecto.vector2 import Vec2, Vector2


def read(fil):
    fil = os.path.join(os.path.dirname(__file__), fil)
    with open(fil, encoding="utf-8") as f:
        return f.read()


__version__ = read("version.txt")

__all__ = [
    "Vector2",
    "Vec2",
    "kinda_eq",
    "approx_eq",
    "DEFAULT_TOLERANCE",
    "float_ops",
    "rounding_ops",
    "FloatOps",
    "RoundingOps",
    "VectoError",
    "VectoValueError",
    "InvalidLengthError",
    "CapabilityError",
    "config_logging",
    "set_up_simple_logging",
    "__version__",
]
