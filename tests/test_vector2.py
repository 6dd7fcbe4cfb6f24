import math

import numpy as np
import pytest

from fabrik2d import Vector2


def test_arithmetic():
    a = Vector2(1.0, 2.0)
    b = Vector2(3.0, -4.0)
    assert a + b == Vector2(4.0, -2.0)
    assert a - b == Vector2(-2.0, 6.0)
    assert a * 2.0 == Vector2(2.0, 4.0)
    assert 2.0 * a == Vector2(2.0, 4.0)
    assert -a == Vector2(-1.0, -2.0)
    assert a.dot(b) == pytest.approx(-5.0)


def test_in_place_forms_rebind_without_mutating():
    a = Vector2(1.0, 1.0)
    original = a
    a += Vector2(2.0, 3.0)
    a -= Vector2(1.0, 1.0)
    a *= 2.0
    assert a == Vector2(4.0, 6.0)
    assert original == Vector2(1.0, 1.0)


def test_lengths_and_distances():
    v = Vector2(3.0, 4.0)
    assert v.length_squared() == 25.0
    assert v.length() == 5.0
    assert Vector2(1.0, 1.0).distance_squared(Vector2(4.0, 5.0)) == 25.0
    assert Vector2(1.0, 1.0).distance(Vector2(4.0, 5.0)) == 5.0


def test_normalize():
    n = Vector2(0.0, -20.0).normalize()
    assert n == Vector2(0.0, -1.0)
    n = Vector2(3.0, 4.0).normalize()
    assert n.length() == pytest.approx(1.0)
    assert n.x == pytest.approx(0.6)


def test_normalize_zero_vector_is_zero():
    n = Vector2(0.0, 0.0).normalize()
    assert n == Vector2.ZERO
    assert not math.isnan(n.x) and not math.isnan(n.y)


def test_value_semantics():
    assert Vector2(1, 2) == Vector2(1.0, 2.0)
    assert len({Vector2(1.0, 2.0), Vector2(1.0, 2.0)}) == 1
    with pytest.raises(AttributeError):
        Vector2(1.0, 2.0).x = 5.0
    assert tuple(Vector2(1.5, -2.5)) == (1.5, -2.5)


def test_to_array():
    arr = Vector2(1.5, -2.5).to_array()
    assert arr.shape == (2,)
    np.testing.assert_array_equal(arr, [1.5, -2.5])


@pytest.mark.parametrize('value', [
    Vector2(1.0, 2.0),
    (1, 2),
    [1.0, 2.0],
    np.array([1.0, 2.0]),
])
def test_from_any_accepts_points(value):
    assert Vector2.from_any(value) == Vector2(1.0, 2.0)


@pytest.mark.parametrize('value', [
    (1.0, 2.0, 3.0),
    np.zeros((2, 2)),
    'xy',
    None,
    5.0,
])
def test_from_any_rejects_non_points(value):
    with pytest.raises(ValueError):
        Vector2.from_any(value)
