from __future__ import annotations

import logging
from numbers import Real
from typing import Any, Generic, Iterator, Sequence, Tuple, Type

import numpy as np

from vecto import kinda
from vecto.capabilities import (PYTHON_FLOAT_OPS, FloatOps, RoundingOps,
                                float_ops, rounding_ops)
from vecto.logging import LOGGER_ID, InvalidLengthError, create_warning
from vecto.ops import with_arithmetic
from vecto.types import T

module_logger = logging.getLogger(f"{LOGGER_ID}.vector2")


class _Constant:
    """
    A named vector constant. Every access builds a new vector, so in-place
    operators on the result never change the constant.
    """

    def __init__(self, x: float, y: float):
        self.components = (x, y)

    def __get__(self, instance, owner):
        return owner(*self.components)


@with_arithmetic
class Vector2(Generic[T]):
    """
    A class for storing vectors in :math:`R^2` over any numeric component type.

    The arithmetic operators ``+ - * / // %`` work componentwise with another
    vector or broadcast a scalar to both components; their in-place forms
    mutate the vector. Methods that need trigonometry or square roots are only
    available for floating-point components (Python ``float`` and NumPy
    floating scalars). The Y axis points down, so :attr:`UP` is ``(0, -1)``.
    """

    __slots__ = ("x", "y")

    # NumPy arrays and scalars defer to the reflected operators
    __array_ufunc__ = None

    ZERO = _Constant(0.0, 0.0)
    """Zero vector. ``(0, 0)``"""
    RIGHT = _Constant(1.0, 0.0)
    """Right unit vector. ``(1, 0)``"""
    LEFT = _Constant(-1.0, 0.0)
    """Left unit vector. ``(-1, 0)``"""
    UP = _Constant(0.0, -1.0)
    """Up unit vector. Y points down, so this is ``(0, -1)``."""
    DOWN = _Constant(0.0, 1.0)
    """Down unit vector. Y points down, so this is ``(0, 1)``."""

    def __init__(self, x: T, y: T):
        """
        Creates a Vector2 instance.

        Args:
            x: The x component.
            y: The y component.
        """
        self.x = x
        self.y = y

    @classmethod
    def new(cls, x: T, y: T) -> Vector2[T]:
        """
        Constructs a new vector. Same as calling the class.
        """
        return cls(x, y)

    @classmethod
    def splat(cls, value: T) -> Vector2[T]:
        """
        Constructs a new vector with x and y set to the given value.
        """
        return cls(value, value)

    @classmethod
    def default(cls, component: Type = float) -> Vector2:
        """
        The default vector of a component type, i.e. ``(component(), component())``.

        Args:
            component: The component type, for example ``int`` or ``numpy.float32``.
        """
        return cls(component(), component())

    @classmethod
    def from_tuple(cls, value: Tuple[T, T]) -> Vector2[T]:
        x, y = value
        return cls(x, y)

    @classmethod
    def from_value(cls, value: T) -> Vector2[T]:
        """
        Single-argument conversion, splats the value.
        """
        return cls.splat(value)

    @classmethod
    def from_array(cls, array: Any) -> Vector2:
        """
        Converts a 1-D array of two elements. The components keep the NumPy
        scalar type of the array.

        Args:
            array: Anything ``numpy.asarray`` accepts.

        Raises:
            InvalidLengthError: If the array does not have the shape ``(2,)``.
        """
        array = np.asarray(array)
        if array.shape != (2,):
            module_logger.debug(f"Cannot build a vector from an array of shape {array.shape}.")
            raise InvalidLengthError()
        return cls(array[0], array[1])

    @classmethod
    def try_from(cls, values: Sequence[T]) -> Vector2[T]:
        """
        Converts a sequence, if it has exactly two elements.

        Args:
            values: The sequence to convert.

        Returns:
            ``Vector2(values[0], values[1])``.

        Raises:
            InvalidLengthError: If ``len(values) != 2``.
        """
        if len(values) != 2:
            module_logger.debug(f"Cannot build a vector from {len(values)} elements.")
            raise InvalidLengthError()
        return cls(values[0], values[1])

    @staticmethod
    def layout(component: Any = np.float64) -> np.dtype:
        """
        The memory layout of a vector as a NumPy structured dtype: ``x`` at
        offset 0 followed directly by ``y``, without padding.

        Args:
            component: The component dtype. Defaults to ``numpy.float64``.
        """
        return np.dtype([("x", component), ("y", component)])

    def to_tuple(self) -> Tuple[T, T]:
        return (self.x, self.y)

    def to_array(self, dtype: Any = None) -> np.ndarray:
        """
        Returns a new contiguous array ``[x, y]``.

        Args:
            dtype: The array dtype. Inferred from the components if omitted.
        """
        return np.array([self.x, self.y], dtype=dtype)

    def __array__(self, dtype=None, copy=None):
        if copy is False:
            raise ValueError("A Vector2 cannot be viewed as an array without a copy.")
        return self.to_array(dtype)

    def copy(self) -> Vector2[T]:
        return type(self)(self.x, self.y)

    def __iter__(self) -> Iterator[T]:
        yield self.x
        yield self.y

    def __len__(self) -> int:
        return 2

    def __getitem__(self, n: int) -> T:
        """
        Returns the n-th component of the vector, starting by zero.
        Negative indices count from the end.
        """
        if n == 0 or n == -2:
            return self.x
        if n == 1 or n == -1:
            return self.y
        raise IndexError(f"Vector2 does not have an element at index {n}.")

    def __repr__(self) -> str:
        return f"Vector2({self.x!r}, {self.y!r})"

    def __str__(self) -> str:
        return f"({self.x!r}, {self.y!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    # ordering is lexicographic on (x, y)
    def __lt__(self, other: Vector2) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return (self.x, self.y) < (other.x, other.y)

    def __le__(self, other: Vector2) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return (self.x, self.y) <= (other.x, other.y)

    def __gt__(self, other: Vector2) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return (self.x, self.y) > (other.x, other.y)

    def __ge__(self, other: Vector2) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return (self.x, self.y) >= (other.x, other.y)

    def kinda_eq(self, other: Vector2, tolerance: float) -> bool:
        """
        Whether both components are equal within ``tolerance``.
        """
        return kinda.kinda_eq(self, other, tolerance)

    def approx_eq(self, other: Vector2) -> bool:
        return kinda.approx_eq(self, other)

    def _float_ops(self) -> FloatOps:
        ops = float_ops(self.x)
        float_ops(self.y)
        return ops

    def _rounding_ops(self) -> RoundingOps:
        ops = rounding_ops(self.x)
        rounding_ops(self.y)
        return ops

    @classmethod
    def from_angle(cls, angle: T) -> Vector2[T]:
        """
        Creates a unit vector rotated to the given angle.
        This is equivalent to ``Vector2(cos(angle), sin(angle))``.

        Args:
            angle: The angle in radians.
        """
        if isinstance(angle, Real) and not isinstance(angle, (float, np.floating)):
            # int and Fraction angles go through math and give float components
            ops = PYTHON_FLOAT_OPS
        else:
            ops = float_ops(angle)
        return cls(ops.cos(angle), ops.sin(angle))

    def abs(self) -> Vector2[T]:
        """
        Returns a new vector with all components in absolute values.
        """
        ops = self._float_ops()
        return type(self)(ops.abs(self.x), ops.abs(self.y))

    def angle(self) -> T:
        """
        Computes the angle of this vector with respect to the positive X axis,
        in radians, in range [-pi, pi].
        """
        return self._float_ops().atan2(self.y, self.x)

    def cross(self, other: Vector2[T]) -> T:
        """
        Computes the cross product between this vector and a given vector.

        Return:
            The scalar valued cross product (cross products are scalar in R^2).
        """
        return self.x * other.y - self.y * other.x

    def dot(self, other: Vector2[T]) -> T:
        """
        Computes the dot product between this vector and a given vector.
        """
        return self.x * other.x + self.y * other.y

    def distance_to(self, other: Vector2[T]) -> T:
        """
        Computes the Euclidean distance between this vector and a given vector.
        """
        dx = self.x - other.x
        dy = self.y - other.y
        return self._float_ops().sqrt(dx * dx + dy * dy)

    def length(self) -> T:
        """
        The length (magnitude) of this vector.
        """
        return self._float_ops().sqrt(self.length_squared())

    def length_squared(self) -> T:
        """
        The squared length of this vector. Cheaper than :meth:`length`.
        """
        return self.x * self.x + self.y * self.y

    def orthogonal(self) -> Vector2[T]:
        """
        Returns a perpendicular vector of the same length, rotated 90 degrees
        counter-clockwise. Only needs the components to support negation.
        """
        return type(self)(self.y, -self.x)

    def limit_length(self, max_length: T) -> Vector2[T]:
        """
        Scales this vector down to ``max_length`` if it is longer, keeping its
        direction. Zero vectors are returned unchanged.

        Args:
            max_length: The maximum length of the result.

        Returns:
            A new vector.
        """
        ops = self._float_ops()
        length = self.length()
        if length > ops.zero(length) and max_length < length:
            return (self / length) * max_length
        return self.copy()

    def normalized(self) -> Vector2[T]:
        """
        Scales this vector to unit length. Vectors whose squared length is zero
        are returned unchanged instead of producing NaN.

        Note: components so small that their squares underflow to zero cannot
        be normalized this way; a ``RuntimeWarning`` is issued for them.

        Returns:
            A new vector.
        """
        ops = self._float_ops()
        length_sq = self.length_squared()
        zero = ops.zero(length_sq)
        if length_sq != zero:
            return self / ops.sqrt(length_sq)
        if self.x != zero or self.y != zero:
            module_logger.debug(f"Squared length of {self!r} underflows to zero.")
            create_warning(
                f"Cannot normalize {self!r}, its squared length underflows to zero.",
                RuntimeWarning,
            )
        return self.copy()

    def rotated(self, angle: T) -> Vector2[T]:
        """
        Rotates this vector by ``angle`` radians.
        """
        ops = self._float_ops()
        cos = ops.cos(angle)
        sin = ops.sin(angle)
        return type(self)(self.x * cos - self.y * sin, self.x * sin + self.y * cos)

    def ceil(self) -> Vector2[T]:
        """
        Returns a new vector with all components rounded up (towards positive infinity).
        """
        ops = self._rounding_ops()
        return type(self)(ops.ceil(self.x), ops.ceil(self.y))

    def floor(self) -> Vector2[T]:
        """
        Returns a new vector with all components rounded down (towards negative infinity).
        """
        ops = self._rounding_ops()
        return type(self)(ops.floor(self.x), ops.floor(self.y))


Vec2 = Vector2[float]
"""
Alias for ``Vector2[float]``, for annotations.
"""


@kinda.kinda_eq.register(Vector2)
def _(a: Vector2, b: Vector2, tolerance: float) -> bool:
    return kinda.kinda_eq(a.x, b.x, tolerance) and kinda.kinda_eq(a.y, b.y, tolerance)
