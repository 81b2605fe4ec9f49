import math

import pytest

from n8lang import vectormath


def test_size_mismatch_raises():
    with pytest.raises(ValueError, match="same size"):
        vectormath.add([1, 2], [1])
    with pytest.raises(ValueError, match="same size"):
        vectormath.sub([1, 2], [1])
    with pytest.raises(ValueError, match="same size"):
        vectormath.mul([1, 2], [1])
    with pytest.raises(ValueError, match="same size"):
        vectormath.div([1, 2], [1])
    with pytest.raises(ValueError, match="same size"):
        vectormath.rem([1, 2], [1])
    with pytest.raises(ValueError, match="same size"):
        vectormath.bitwise_and([1, 2], [1])
    with pytest.raises(ValueError, match="same size"):
        vectormath.bitwise_or([1, 2], [1])
    with pytest.raises(ValueError, match="same size"):
        vectormath.bitwise_xor([1, 2], [1])
    with pytest.raises(ValueError, match="same size"):
        vectormath.shift_left([1, 2], [1])
    with pytest.raises(ValueError, match="same size"):
        vectormath.shift_right([1, 2], [1])


def test_empty_vectors_give_empty_result():
    assert vectormath.add([], []) == []
    assert vectormath.sub([], []) == []
    assert vectormath.mul([], []) == []
    assert vectormath.div([], []) == []
    assert vectormath.rem([], []) == []
    assert vectormath.bitwise_and([], []) == []
    assert vectormath.bitwise_or([], []) == []
    assert vectormath.bitwise_xor([], []) == []
    assert vectormath.shift_left([], []) == []
    assert vectormath.shift_right([], []) == []


def test_add_then_sub_round_trips():
    left = [1.5, -2.0, 10.0]
    right = [0.5, 4.0, -3.0]
    assert vectormath.sub(vectormath.add(left, right), right) == left


def test_mul_by_ones_is_identity():
    values = [3.0, -7.5, 0.0]
    assert vectormath.mul(values, [1, 1, 1]) == values


def test_div_by_self_is_one():
    values = [2.0, -9.0, 0.25]
    assert vectormath.div(values, values) == [1.0, 1.0, 1.0]


def test_div_by_zero_follows_floating_point():
    result = vectormath.div([1.0, -1.0, 0.0], [0.0, 0.0, 0.0])
    assert result[0] == math.inf
    assert result[1] == -math.inf
    assert math.isnan(result[2])


def test_rem_truncates_toward_zero():
    assert vectormath.rem([-7], [2]) == [-1.0]


def test_rem_result_is_smaller_than_divisor():
    left = [17, 23, 100]
    right = [5, 7, 9]
    result = vectormath.rem(left, right)
    assert all(0 <= r < d for r, d in zip(result, right))


def test_rem_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        vectormath.rem([1], [0])


def test_xor_twice_restores_value():
    values = [5, 12, 255]
    mask = [3, 9, 170]
    once = vectormath.bitwise_xor(values, mask)
    assert vectormath.bitwise_xor(once, mask) == [float(v) for v in values]


def test_and_or_with_self_is_identity():
    values = [6, 13, 1024]
    expected = [float(v) for v in values]
    assert vectormath.bitwise_and(values, values) == expected
    assert vectormath.bitwise_or(values, values) == expected


def test_or_with_zero_and_and_with_zero():
    values = [6, 13, 1024]
    assert vectormath.bitwise_or(values, [0, 0, 0]) == [float(v) for v in values]
    assert vectormath.bitwise_and(values, [0, 0, 0]) == [0.0, 0.0, 0.0]


def test_shift_left_then_right_round_trips():
    values = [1, 7, 300]
    amounts = [4, 2, 10]
    shifted = vectormath.shift_left(values, amounts)
    assert vectormath.shift_right(shifted, amounts) == [float(v) for v in values]


def test_shift_left_wraps_at_64_bits():
    assert vectormath.shift_left([1], [63]) == [float(-(2**63))]


def test_results_are_floats():
    result = vectormath.bitwise_and([3], [1])
    assert result == [1.0] and isinstance(result[0], float)