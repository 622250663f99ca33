"""Unit tests for fixed-width integer helpers"""

import pytest
from remit_reporting.domain.exceptions import ArithmeticOverflowError
from remit_reporting.utils.int_math import (
    I128_MAX,
    I128_MIN,
    check_i128,
    percentage_of,
    sum_i128,
    to_i32,
    to_u32,
    trunc_div,
)


def test_trunc_div_rounds_toward_zero():
    """Negative quotients truncate, unlike Python's floor division"""
    assert trunc_div(7, 2) == 3
    assert trunc_div(-7, 2) == -3
    assert trunc_div(7, -2) == -3
    assert trunc_div(-7, -2) == 3
    assert trunc_div(0, 5) == 0


def test_percentage_of():
    assert percentage_of(50, 200) == 25
    assert percentage_of(1, 3) == 33
    assert percentage_of(-50, 100) == -50
    assert percentage_of(-1, 3) == -33
    assert percentage_of(-1, 300) == 0


def test_sum_i128_detects_overflow():
    assert sum_i128([I128_MAX, -1, 1]) == I128_MAX
    with pytest.raises(ArithmeticOverflowError):
        sum_i128([I128_MAX, 1])
    with pytest.raises(ArithmeticOverflowError):
        sum_i128([I128_MIN, -1])


def test_check_i128_bounds():
    assert check_i128(I128_MIN) == I128_MIN
    with pytest.raises(ArithmeticOverflowError):
        check_i128(I128_MAX + 1)


def test_narrowing_casts():
    assert to_u32(0) == 0
    assert to_u32(2**32 - 1) == 2**32 - 1
    with pytest.raises(ArithmeticOverflowError):
        to_u32(-1)
    with pytest.raises(ArithmeticOverflowError):
        to_u32(2**32)

    assert to_i32(-(2**31)) == -(2**31)
    with pytest.raises(ArithmeticOverflowError):
        to_i32(2**31)
