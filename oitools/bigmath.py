"""Mathematical functions on ``BigInt`` values: powers, roots, gcd, lcm, random."""

from __future__ import annotations

import math
import random
from typing import Union

from oitools.bigint import BigInt

MAX_RANDOM_LENGTH = 1000

Operand = Union[BigInt, int, str]

_rng = random.SystemRandom()


def _big(value: Operand) -> BigInt:
    return value if isinstance(value, BigInt) else BigInt(value)


def big_abs(num: Operand) -> BigInt:
    """Absolute value of ``num``."""
    value = _big(num)
    return -value if value < 0 else value


def big_pow10(exp: int) -> BigInt:
    """``10 ** exp`` as a ``BigInt``."""
    if exp < 0:
        raise ValueError("exponent must be non-negative")
    return BigInt("1" + "0" * exp)


def big_pow(base: Operand, exp: int) -> BigInt:
    """``base`` raised to the integer power ``exp``.

    Negative exponents give the integer part of the reciprocal: ``base`` itself
    when its magnitude is one, otherwise zero.
    """
    value = _big(base)
    if exp < 0:
        if value == 0:
            raise ZeroDivisionError("Cannot divide by zero")
        return value if big_abs(value) == 1 else BigInt(0)
    if exp == 0:
        if value == 0:
            raise ValueError("Zero cannot be raised to zero")
        return BigInt(1)
    result = value
    result_odd = BigInt(1)
    while exp > 1:
        if exp % 2:
            result_odd = result_odd * result
        result = result * result
        exp //= 2
    return result * result_odd


def big_sqrt(num: Operand) -> BigInt:
    """Floor of the square root of a non-negative ``num``."""
    value = _big(num)
    if value < 0:
        raise ValueError("Cannot compute square root of a negative integer")
    return BigInt(math.isqrt(int(value)))


def big_gcd(a: Operand, b: Operand) -> BigInt:
    """Greatest common divisor of the magnitudes of ``a`` and ``b``."""
    x = big_abs(a)
    y = big_abs(b)
    if y == 0:
        return x
    if x == 0:
        return y
    while y != 0:
        x, y = y, x % y
    return x


def big_lcm(a: Operand, b: Operand) -> BigInt:
    """Least common multiple of ``a`` and ``b`` (zero when either is zero)."""
    x = _big(a)
    y = _big(b)
    if x == 0 or y == 0:
        return BigInt(0)
    return big_abs(x * y) // big_gcd(x, y)


def big_random(num_digits: int = 0) -> BigInt:
    """A random positive number with ``num_digits`` digits.

    With ``num_digits`` zero the length is chosen at random between 1 and
    ``MAX_RANDOM_LENGTH``.
    """
    if num_digits < 0:
        raise ValueError("num_digits must be non-negative")
    if num_digits == 0:
        num_digits = 1 + _rng.randrange(MAX_RANDOM_LENGTH)
    first = str(1 + _rng.randrange(9))
    rest = "".join(str(_rng.randrange(10)) for _ in range(num_digits - 1))
    return BigInt(first + rest)