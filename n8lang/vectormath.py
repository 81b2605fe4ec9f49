"""Element-wise arithmetic on equal-length number sequences."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence

_LONG_BITS = 64
_LONG_MASK = (1 << _LONG_BITS) - 1
_LONG_SIGN = 1 << (_LONG_BITS - 1)


def _to_long(value: int) -> int:
    value &= _LONG_MASK
    return value - (1 << _LONG_BITS) if value & _LONG_SIGN else value


def _zip(left: Sequence[float], right: Sequence[float]):
    if len(left) != len(right):
        raise ValueError("Vectors must be of the same size.")
    return zip(left, right)


def _apply(
    left: Sequence[float],
    right: Sequence[float],
    op: Callable[[float, float], float],
) -> list[float]:
    return [float(op(a, b)) for a, b in _zip(left, right)]


def _integral(
    left: Sequence[float],
    right: Sequence[float],
    op: Callable[[int, int], int],
) -> list[float]:
    return _apply(left, right, lambda a, b: _to_long(op(int(a), int(b))))


def _divide(a: float, b: float) -> float:
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _truncated_rem(a: int, b: int) -> int:
    if b == 0:
        raise ZeroDivisionError("integer remainder by zero")
    result = abs(a) % abs(b)
    return -result if a < 0 else result


def add(left: Sequence[float], right: Sequence[float]) -> list[float]:
    """Element-wise sum."""
    return _apply(left, right, lambda a, b: a + b)


def sub(left: Sequence[float], right: Sequence[float]) -> list[float]:
    """Element-wise difference."""
    return _apply(left, right, lambda a, b: a - b)


def mul(left: Sequence[float], right: Sequence[float]) -> list[float]:
    """Element-wise product."""
    return _apply(left, right, lambda a, b: a * b)


def div(left: Sequence[float], right: Sequence[float]) -> list[float]:
    """Element-wise quotient; division by zero gives infinity or NaN."""
    return _apply(left, right, _divide)


def rem(left: Sequence[float], right: Sequence[float]) -> list[float]:
    """Element-wise integer remainder, with the sign of the dividend."""
    return _integral(left, right, _truncated_rem)


def bitwise_and(left: Sequence[float], right: Sequence[float]) -> list[float]:
    """Element-wise bitwise AND of the integer parts."""
    return _integral(left, right, lambda a, b: a & b)


def bitwise_or(left: Sequence[float], right: Sequence[float]) -> list[float]:
    """Element-wise bitwise OR of the integer parts."""
    return _integral(left, right, lambda a, b: a | b)


def bitwise_xor(left: Sequence[float], right: Sequence[float]) -> list[float]:
    """Element-wise bitwise XOR of the integer parts."""
    return _integral(left, right, lambda a, b: a ^ b)


def shift_left(left: Sequence[float], right: Sequence[float]) -> list[float]:
    """Element-wise left shift of the integer parts, within 64 bits."""
    return _integral(left, right, lambda a, b: a << b)


def shift_right(left: Sequence[float], right: Sequence[float]) -> list[float]:
    """Element-wise arithmetic right shift of the integer parts."""
    return _integral(left, right, lambda a, b: a >> b)