"""EulerAngle construction, arithmetic and conversion."""

import math

import numpy as np
import pytest

from armath import EulerAngle, Quaternion


def test_defaults_and_sequence():
    assert EulerAngle().equals(0, 0, 0)
    assert EulerAngle([10, 20, 30]).equals(10, 20, 30)
    assert EulerAngle(EulerAngle(1, 2, 3)).equals(1, 2, 3)


def test_construct_from_quaternion_converts():
    q = EulerAngle(10, 20, 30).to_quaternion()
    e = EulerAngle(q)
    assert isinstance(e, EulerAngle)
    assert np.allclose(e.v, [10, 20, 30])


def test_from_radians_stores_degrees():
    e = EulerAngle()
    assert e.from_radians(math.pi, math.pi / 2, 0) is e
    assert np.allclose(e.v, [180, 90, 0])
    assert np.allclose(EulerAngle().from_radians([0, 0, -math.pi / 4]).v, [0, 0, -45])


def test_yaw_quarter_turn_to_quaternion():
    q = EulerAngle(0, 0, 90).to_quaternion()
    half = math.sqrt(0.5)
    assert np.allclose(q.v, [half, 0, 0, half])


@pytest.mark.parametrize("op, expected", [
    ("add", [15, 25, 35]),
    ("sub", [5, 15, 25]),
    ("mul", [50, 100, 150]),
    ("div", [2, 4, 6]),
])
def test_scalar_arithmetic(op, expected):
    e = EulerAngle(10, 20, 30)
    assert getattr(e, op)(5) is e
    assert e.equals(expected)


def test_arithmetic_with_quaternion_operand():
    q = EulerAngle(1, 2, 3).to_quaternion()
    e = EulerAngle(10, 20, 30).add(q)
    assert np.allclose(e.v, [11, 22, 33])
    e.sub(q)
    assert np.allclose(e.v, [10, 20, 30])


def test_div_by_zero_reports_and_keeps_value(messages):
    e = EulerAngle(10, 20, 30)
    assert e.div([1, 0, 1]) is e
    assert e.equals(10, 20, 30)
    assert messages == ["EulerAngle.div() aborted. Error: divide by 0"]


def test_unsupported_operand(messages):
    e = EulerAngle(1, 2, 3)
    e.mul(object)
    assert e.equals(1, 2, 3)
    assert len(messages) == 1
    assert messages[0].startswith("EulerAngle.mul() aborted. Error: Data type not supported")


def test_angles_are_not_wrapped():
    assert EulerAngle(170, 0, 0).add([30, 0, 0]).equals(200, 0, 0)


def test_str():
    assert str(EulerAngle(1, 2, 3)) == "EulerAngle: [1.0, 2.0, 3.0]"


def test_quaternion_round_trip_keeps_type():
    e = EulerAngle(-30, 45, 120)
    back = Quaternion(e).to_euler_angles()
    assert isinstance(back, EulerAngle)
    assert np.allclose(back.v, e.v)


def test_div_by_non_finite_reports_and_keeps_value(messages):
    e = EulerAngle(10, 20, 30)
    assert e.div([1, float("nan"), 1]) is e
    assert e.div(float("inf")) is e
    assert e.equals(10, 20, 30)
    assert messages == ["EulerAngle.div() aborted. Error: values are either undefined or not finite"] * 2


def test_missing_sequence_items_become_zero():
    assert EulerAngle([1]).equals(1, 0, 0)
    assert np.allclose(EulerAngle().from_radians([math.pi]).v, [180, 0, 0])


def test_from_radians_rejects_non_numeric_sequence():
    e = EulerAngle(1, 2, 3)
    with pytest.raises(TypeError, match="numeric radians"):
        e.from_radians(["a", 1, 2])
    assert e.equals(1, 2, 3)
