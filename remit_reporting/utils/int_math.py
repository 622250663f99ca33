"""Fixed-width integer helpers for report arithmetic"""

from typing import Iterable
from remit_reporting.domain.exceptions import ArithmeticOverflowError

I128_MIN = -(2**127)
I128_MAX = 2**127 - 1
I32_MIN = -(2**31)
I32_MAX = 2**31 - 1
U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1


def check_i128(value: int, what: str = "value") -> int:
    """Return value unchanged, or raise if it does not fit a signed 128-bit integer"""
    if value < I128_MIN or value > I128_MAX:
        raise ArithmeticOverflowError(f"{what} overflows i128: {value}")
    return value


def sum_i128(values: Iterable[int], what: str = "sum") -> int:
    """Accumulate values, failing as soon as a partial sum leaves the i128 range"""
    total = 0
    for value in values:
        total = check_i128(total + value, what)
    return total


def trunc_div(numerator: int, denominator: int) -> int:
    """
    Integer division truncating toward zero.

    Python's // floors, so -7 // 2 == -4; ledger arithmetic expects -3.
    """
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def to_u32(value: int, what: str = "value") -> int:
    if value < 0 or value > U32_MAX:
        raise ArithmeticOverflowError(f"{what} out of range for u32: {value}")
    return value


def to_i32(value: int, what: str = "value") -> int:
    if value < I32_MIN or value > I32_MAX:
        raise ArithmeticOverflowError(f"{what} out of range for i32: {value}")
    return value


def percentage_of(part: int, whole: int, what: str = "percentage") -> int:
    """trunc(part * 100 / whole) computed in i128; caller guarantees whole != 0"""
    return trunc_div(check_i128(part * 100, what), whole)
