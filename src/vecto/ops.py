"""
Operator factory for :class:`vecto.Vector2`.

Every arithmetic operator of the vector is produced here from the matching
function of the :mod:`operator` module, so ``+ - * / // %`` share one code
path and accept the same operand shapes:

* vector ⊕ vector, applied componentwise,
* vector ⊕ scalar, the scalar broadcast to both components,
* scalar ⊕ vector (the reflected form), operand order preserved,
* the in-place forms of the first two, which mutate the receiver.
"""

from __future__ import annotations

import operator
from typing import Any, Callable, Tuple

from vecto.types import SCALAR_TYPES

BinaryOp = Callable[[Any, Any], Any]


def is_scalar(value: Any) -> bool:
    """
    Whether ``value`` may be broadcast to both components of a vector.

    Python numbers and NumPy scalars qualify; sequences and arrays do not.
    """
    return isinstance(value, SCALAR_TYPES)


def _operands(vec: Any, other: Any) -> Tuple[Any, Any] | None:
    if isinstance(other, type(vec)):
        return other.x, other.y
    if is_scalar(other):
        return other, other
    return None


def binary(op: BinaryOp) -> Callable[[Any, Any], Any]:
    """
    Builds ``vec ⊕ other`` for the scalar operator ``op``.
    """

    def method(self, other):
        rhs = _operands(self, other)
        if rhs is None:
            return NotImplemented
        return type(self)(op(self.x, rhs[0]), op(self.y, rhs[1]))

    method.__name__ = f"__{op.__name__}__"
    method.__doc__ = f"Componentwise ``{op.__name__}`` with a vector or a scalar."
    return method


def reflected(op: BinaryOp) -> Callable[[Any, Any], Any]:
    """
    Builds ``scalar ⊕ vec`` for the scalar operator ``op``.
    """

    def method(self, other):
        if not is_scalar(other):
            return NotImplemented
        return type(self)(op(other, self.x), op(other, self.y))

    method.__name__ = f"__r{op.__name__}__"
    method.__doc__ = f"Componentwise ``{op.__name__}`` with a scalar on the left."
    return method


def inplace(iop: BinaryOp) -> Callable[[Any, Any], Any]:
    """
    Builds ``vec ⊕= other`` for the in-place operator ``iop``, e.g.
    :func:`operator.iadd`. Both components are updated and the receiver is
    returned.
    """

    def method(self, other):
        rhs = _operands(self, other)
        if rhs is None:
            return NotImplemented
        self.x = iop(self.x, rhs[0])
        self.y = iop(self.y, rhs[1])
        return self

    method.__name__ = f"__{iop.__name__}__"
    method.__doc__ = f"In-place componentwise ``{iop.__name__}``."
    return method


def negate(self):
    """Negates both components."""
    return type(self)(-self.x, -self.y)


ARITHMETIC = {
    "add": (operator.add, operator.iadd),
    "sub": (operator.sub, operator.isub),
    "mul": (operator.mul, operator.imul),
    "truediv": (operator.truediv, operator.itruediv),
    "floordiv": (operator.floordiv, operator.ifloordiv),
    "mod": (operator.mod, operator.imod),
}
"""
Scalar operator functions keyed by the name used in their dunder methods.
"""


def with_arithmetic(cls):
    """
    Class decorator installing ``__<name>__``, ``__r<name>__`` and
    ``__i<name>__`` for every entry of :data:`ARITHMETIC`, plus ``__neg__``.
    """
    for name, (op, iop) in ARITHMETIC.items():
        setattr(cls, f"__{name}__", binary(op))
        setattr(cls, f"__r{name}__", reflected(op))
        setattr(cls, f"__i{name}__", inplace(iop))
    cls.__neg__ = negate
    return cls
