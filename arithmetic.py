"""
Basic arithmetic on plain numbers (or their text).

Every argument goes through ``parse_num`` first, so ``add(2, '3')`` is 5.
Results are always floats.
"""
from __future__ import annotations

import math
from functools import reduce
from typing import List

from number_errors import DivisionByZeroError, UnsupportedOperationError
from number_helpers import is_float, is_negative, parse_num, requires, type_of_number
from number_types import MathValue


def _parse_all(values) -> List[float]:
    return [parse_num(v) for v in values]


def add(*numbers: MathValue) -> float:
    """
    Adds two or more numbers
    add(2, '3')  -> 5
    """
    requires(numbers, 2)
    return sum(_parse_all(numbers))


def minus(*numbers: MathValue) -> float:
    """
    Subtracts the rest from the first number, left to right
    minus(3, '45') -> -42
    """
    requires(numbers, 2)
    return reduce(lambda previous, current: previous - current, _parse_all(numbers))


def multiply(*numbers: MathValue) -> float:
    requires(numbers, 2)
    return reduce(lambda previous, current: previous * current, _parse_all(numbers))


def divide(x: MathValue, y: MathValue) -> float:
    """x / y; raises DivisionByZeroError when y is 0."""
    requires([x, y], 2)
    a, b = parse_num(x), parse_num(y)
    if b == 0:
        raise DivisionByZeroError()
    return a / b


def power(base: MathValue, exponent: MathValue) -> float:
    """
    base ** exponent.

    A negative base with a fractional exponent has no real result and
    raises UnsupportedOperationError. Exponents 1/2 and 1/3 use the
    square and (real) cube root. Results too large for a float come
    back as +/-Infinity.
    """
    requires([base, exponent], 2)
    a, b = parse_num(base), parse_num(exponent)

    if is_negative(a) and math.isfinite(b) and not b.is_integer():
        raise UnsupportedOperationError("Complex numbers are not supported at pow")
    if a == 0 and b < 0:
        raise DivisionByZeroError("Zero cannot be raised to a negative power")
    if b == 1 / 2:
        return math.sqrt(a)
    if b == 1 / 3:
        return math.copysign(abs(a) ** (1 / 3), a)
    try:
        return a ** b
    except OverflowError:
        # only an odd integer power keeps a negative base's sign
        negative = a < 0 and b % 2 == 1
        return -math.inf if negative else math.inf


def average(*data: MathValue) -> float:
    requires(data)
    return sum(_parse_all(data)) / len(data)


def median(*data: MathValue) -> float:
    """
    Middle value of the sorted data; mean of the two middle values when
    the count is even.
    """
    requires(data)
    arr = sorted(_parse_all(data))
    mid = len(arr) // 2
    if type_of_number(len(arr)) == 'even':
        return (arr[mid - 1] + arr[mid]) / 2
    return arr[mid]


def factorial(number: MathValue) -> float:
    requires([number])
    n = parse_num(number)
    if n < 0 or math.isnan(n) or is_float(n):
        raise UnsupportedOperationError("Factorial is only defined for non-negative integers")
    result = 1.0
    for i in range(2, int(n) + 1):
        result *= i
    return result


def _gcd_pair(a: float, b: float) -> float:
    while b != 0:
        a, b = b, a % b
    return a


def gcd(*nums: MathValue) -> float:
    """Greatest common divisor: gcd(2, 4) -> 2"""
    requires(nums, 2)
    return reduce(_gcd_pair, [abs(x) for x in _parse_all(nums)])


def lcm(*nums: MathValue) -> float:
    """Least common multiple: lcm(2, 3, 4) -> 12"""
    requires(nums, 2)

    def _lcm_pair(a: float, b: float) -> float:
        divisor = _gcd_pair(abs(a), abs(b))
        return 0.0 if divisor == 0 else abs(a * b) / divisor

    return reduce(_lcm_pair, _parse_all(nums))


def absolute(real: MathValue, imaginary: MathValue = None) -> float:
    """
    Distance to zero
    absolute(-2)   -> 2
    absolute(2, 3) -> |2+3i| = 3.60555...
    """
    requires([real])
    return math.hypot(parse_num(real), parse_num(imaginary))


def clamp(value: MathValue, minimum: MathValue, maximum: MathValue) -> float:
    """Limit value into [minimum, maximum]."""
    a, b, v = parse_num(minimum), parse_num(maximum), parse_num(value)
    return min(max(v, a), b)
