from __future__ import annotations

import math
import warnings

import numpy as np
import pytest

from vecto import CapabilityError, Vector2, approx_eq


def test_from_angle():
    assert Vector2.from_angle(0.0) == Vector2.RIGHT
    assert Vector2.from_angle(0.0) == Vector2(1.0, 0.0)
    assert Vector2.from_angle(0) == Vector2.RIGHT
    assert Vector2.from_angle(math.pi / 2.0).approx_eq(Vector2(0.0, 1.0))
    assert Vector2.from_angle(math.pi).approx_eq(Vector2.LEFT)


def test_angle():
    assert Vector2.RIGHT.angle() == 0.0
    assert Vector2.DOWN.angle() == math.pi / 2.0
    assert Vector2.UP.angle() == -math.pi / 2.0
    assert Vector2(1.0, -1.0).angle() == -math.pi / 4.0


def test_abs():
    assert Vector2(-1.5, 2.0).abs() == Vector2(1.5, 2.0)
    assert Vector2(-0.0, -3.0).abs() == Vector2(0.0, 3.0)


def test_cross_and_dot():
    a = Vector2(1.0, 2.0)
    b = Vector2(3.0, 4.0)
    assert a.cross(b) == -2.0
    assert b.cross(a) == 2.0
    assert a.dot(b) == 11.0
    assert Vector2.RIGHT.dot(Vector2.DOWN) == 0.0
    assert Vector2.RIGHT.cross(Vector2.DOWN) == 1.0


def test_distance_to():
    assert Vector2(1.0, 1.0).distance_to(Vector2(4.0, 5.0)) == 5.0
    assert Vector2(4.0, 5.0).distance_to(Vector2(1.0, 1.0)) == 5.0
    assert Vector2.ZERO.distance_to(Vector2.ZERO) == 0.0


def test_length():
    assert Vector2.splat(10.0).length() == pytest.approx(10.0 * math.sqrt(2.0))
    assert Vector2.splat(10.0).length_squared() == 200.0
    assert Vector2(3.0, 4.0).length() == 5.0


def test_orthogonal(int_vec):
    assert Vector2(1.0, 0.0).orthogonal() == Vector2(0.0, -1.0)
    assert int_vec.orthogonal() == Vector2(-3, -7)
    assert int_vec.orthogonal().dot(int_vec) == 0


def test_limit_length():
    expected = Vector2.splat(1.0 / math.sqrt(2.0))
    assert Vector2.splat(10.0).limit_length(1.0).approx_eq(expected)
    assert Vector2.splat(10.0).limit_length(5.0).approx_eq(expected * 5.0)
    assert Vector2(3.0, 4.0).limit_length(10.0) == Vector2(3.0, 4.0)
    assert Vector2(3.0, 4.0).limit_length(5.0) == Vector2(3.0, 4.0)


@pytest.mark.parametrize("max_length", [0.0, 1.0, -1.0, 1e9])
def test_limit_length_zero_vector(max_length):
    assert Vector2.ZERO.limit_length(max_length) == Vector2.ZERO


def test_limit_length_returns_new_vector():
    v = Vector2(3.0, 4.0)
    limited = v.limit_length(10.0)
    limited += 1.0
    assert v == Vector2(3.0, 4.0)


def test_normalized():
    assert Vector2.RIGHT.normalized().approx_eq(Vector2.RIGHT)
    assert Vector2.splat(1.0).normalized().approx_eq(Vector2.splat(math.sqrt(0.5)))
    assert approx_eq(Vector2(-3.0, 4.0).normalized().length(), 1.0)


def test_normalized_zero_vector():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        result = Vector2.ZERO.normalized()
    assert result == Vector2.ZERO
    assert not math.isnan(result.x) and not math.isnan(result.y)


def test_normalized_underflow_warns():
    tiny = Vector2(1e-200, 0.0)
    with pytest.warns(RuntimeWarning):
        result = tiny.normalized()
    assert result == tiny


def test_rotated(vec):
    tau = 2.0 * math.pi
    assert vec.rotated(tau).approx_eq(Vector2(1.2, 3.4))
    assert vec.rotated(tau / 4.0).approx_eq(Vector2(-3.4, 1.2))
    assert vec.rotated(tau / 3.0).kinda_eq(Vector2(-3.5444863, -0.6607695), 1e-6)
    assert vec.rotated(tau / 2.0).approx_eq(vec.rotated(tau / -2.0))


def test_from_angle_integer_angle_gives_floats():
    v = Vector2.from_angle(1)
    assert isinstance(v.x, float) and isinstance(v.y, float)
    assert v.approx_eq(Vector2(math.cos(1.0), math.sin(1.0)))
    assert v.approx_eq(Vector2.RIGHT.rotated(1))


def test_ceil_and_floor():
    v = Vector2(1.2, -1.2)
    assert v.ceil() == Vector2(2.0, -1.0)
    assert v.floor() == Vector2(1.0, -2.0)
    assert isinstance(v.ceil().x, float)


@pytest.mark.parametrize("v", [Vector2(1, 1.5), Vector2(1.5, 2)])
def test_rounding_needs_both_components(v):
    with pytest.raises(CapabilityError):
        v.ceil()
    with pytest.raises(CapabilityError):
        v.floor()


def test_float32_components_are_preserved(vec32):
    angle = np.float32(0.5)
    results = [
        vec32.length(),
        vec32.length_squared(),
        vec32.angle(),
        vec32.dot(vec32),
        vec32.distance_to(Vector2.splat(np.float32(0.0))),
    ]
    for value in results:
        assert isinstance(value, np.float32)
    for v in (
        vec32.normalized(),
        vec32.limit_length(np.float32(1.0)),
        vec32.rotated(angle),
        vec32.abs(),
        vec32.ceil(),
        vec32.floor(),
        Vector2.from_angle(angle),
    ):
        assert isinstance(v.x, np.float32) and isinstance(v.y, np.float32)
    assert vec32.length() == np.float32(5.0)
    assert vec32.normalized().approx_eq(Vector2(0.6, 0.8))


def test_float32_zero_vector():
    zero = Vector2.default(np.float32)
    assert zero.normalized() == zero
    assert zero.limit_length(np.float32(1.0)) == zero


@pytest.mark.parametrize(
    "method, args",
    [
        ("length", ()),
        ("normalized", ()),
        ("angle", ()),
        ("abs", ()),
        ("limit_length", (1,)),
        ("rotated", (1.0,)),
        ("distance_to", (Vector2(0, 0),)),
        ("ceil", ()),
        ("floor", ()),
    ],
)
def test_integer_vectors_lack_float_capability(int_vec, method, args):
    with pytest.raises(CapabilityError):
        getattr(int_vec, method)(*args)


def test_integer_vectors_keep_arithmetic_geometry(int_vec):
    assert int_vec.length_squared() == 58
    assert int_vec.dot(Vector2(1, 1)) == 4
    assert int_vec.cross(Vector2(1, 1)) == 10
