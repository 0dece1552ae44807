"""Arbitrary-precision signed integer held as a sign and a decimal digit string."""

from __future__ import annotations

from typing import Union

from oitools.bigutil import is_valid_number, strip_leading_zeroes

_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1

Operand = Union["BigInt", int, str]


class BigInt:
    """Signed integer of any size.

    It can be built from an ``int``, a decimal string with an optional ``+``
    or ``-`` sign, or another ``BigInt``. Division and remainder truncate
    toward zero: the quotient is rounded toward zero and the remainder takes
    the sign of the dividend.
    """

    __slots__ = ("_n",)

    def __init__(self, num: Operand = 0) -> None:
        if isinstance(num, BigInt):
            self._n = num._n
        elif isinstance(num, bool):
            self._n = int(num)
        elif isinstance(num, int):
            self._n = num
        elif isinstance(num, str):
            self._n = self._parse(num)
        else:
            raise TypeError(f"cannot build a BigInt from {type(num).__name__}")

    @staticmethod
    def _parse(text: str) -> int:
        sign, magnitude = "+", text
        if text[:1] in ("+", "-"):
            sign, magnitude = text[0], text[1:]
        if not is_valid_number(magnitude):
            raise ValueError(f"Expected an integer, got '{text}'")
        value = int(strip_leading_zeroes(magnitude))
        return -value if sign == "-" else value

    @property
    def value(self) -> str:
        """Decimal digits of the magnitude."""
        return str(abs(self._n))

    @property
    def sign(self) -> str:
        """``'-'`` for negative numbers, ``'+'`` otherwise."""
        return "-" if self._n < 0 else "+"

    def to_string(self) -> str:
        """Decimal representation with a leading ``-`` when negative."""
        return str(self._n)

    def to_int(self) -> int:
        """The value as an int; raise ``OverflowError`` outside the 32-bit signed range."""
        if not _INT32_MIN <= self._n <= _INT32_MAX:
            raise OverflowError(f"{self._n} does not fit in a 32-bit signed integer")
        return self._n

    @staticmethod
    def _coerce(other: object) -> "BigInt | None":
        if isinstance(other, BigInt):
            return other
        if isinstance(other, (int, str)):
            return BigInt(other)
        return None

    def __add__(self, other: Operand) -> "BigInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return BigInt(self._n + rhs._n)

    def __radd__(self, other: Operand) -> "BigInt":
        return self.__add__(other)

    def __sub__(self, other: Operand) -> "BigInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return BigInt(self._n - rhs._n)

    def __rsub__(self, other: Operand) -> "BigInt":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: Operand) -> "BigInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return BigInt(self._n * rhs._n)

    def __rmul__(self, other: Operand) -> "BigInt":
        return self.__mul__(other)

    @staticmethod
    def _truncdivmod(a: int, b: int) -> tuple[int, int]:
        if b == 0:
            raise ZeroDivisionError("Attempted division by zero")
        q, r = divmod(abs(a), abs(b))
        if (a < 0) != (b < 0):
            q = -q
        if a < 0:
            r = -r
        return q, r

    def __floordiv__(self, other: Operand) -> "BigInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return BigInt(self._truncdivmod(self._n, rhs._n)[0])

    def __rfloordiv__(self, other: Operand) -> "BigInt":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs // self

    def __mod__(self, other: Operand) -> "BigInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return BigInt(self._truncdivmod(self._n, rhs._n)[1])

    def __rmod__(self, other: Operand) -> "BigInt":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs % self

    def __divmod__(self, other: Operand) -> tuple["BigInt", "BigInt"]:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        q, r = self._truncdivmod(self._n, rhs._n)
        return BigInt(q), BigInt(r)

    def __neg__(self) -> "BigInt":
        return BigInt(-self._n)

    def __pos__(self) -> "BigInt":
        return BigInt(self._n)

    def __abs__(self) -> "BigInt":
        return BigInt(abs(self._n))

    def __bool__(self) -> bool:
        return self._n != 0

    def __int__(self) -> int:
        return self._n

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._n == rhs._n

    def __lt__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._n < rhs._n

    def __le__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._n <= rhs._n

    def __gt__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._n > rhs._n

    def __ge__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._n >= rhs._n

    def __hash__(self) -> int:
        return hash(self._n)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigInt('{self.to_string()}')"