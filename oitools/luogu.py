"""Solutions to several olympiad practice problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional

_SYMBOLS = "0123456789ABCDEF"
_MAX_PALINDROME_STEPS = 31


def _add_digits(a: Sequence[int], b: Sequence[int], base: int) -> list[int]:
    result: list[int] = []
    carry = 0
    for i in range(max(len(a), len(b))):
        carry += (a[i] if i < len(a) else 0) + (b[i] if i < len(b) else 0)
        result.append(carry % base)
        carry //= base
    if carry:
        result.append(carry)
    return result


@dataclass(frozen=True)
class RadixNumber:
    """Non-negative number in a base from 2 to 16, digits least significant first."""

    digits: tuple[int, ...]
    base: int = 10

    def __post_init__(self) -> None:
        if not 2 <= self.base <= 16:
            raise ValueError("base must be between 2 and 16")
        if any(not 0 <= d < self.base for d in self.digits):
            raise ValueError(f"digit out of range for base {self.base}")

    @classmethod
    def from_string(cls, text: str, base: int = 10) -> "RadixNumber":
        """Read the first run of digits in ``text``.

        Base 16 accepts ``0-9`` and ``A-F``; other bases accept ``0-9``.
        """
        allowed = _SYMBOLS if base == 16 else _SYMBOLS[:10]
        start = next((i for i, ch in enumerate(text) if ch in allowed), None)
        if start is None:
            raise ValueError(f"no digits in {text!r}")
        end = start
        while end < len(text) and text[end] in allowed:
            end += 1
        digits = tuple(_SYMBOLS.index(ch) for ch in reversed(text[start:end]))
        return cls(digits, base)

    def is_palindrome(self) -> bool:
        return is_palindrome_digits(self.digits)

    def reversed(self) -> "RadixNumber":
        """The number whose digits are these in reverse order."""
        return RadixNumber(self.digits[::-1], self.base)

    def __add__(self, other: "RadixNumber") -> "RadixNumber":
        if not isinstance(other, RadixNumber):
            return NotImplemented
        if other.base != self.base:
            raise ValueError("cannot add numbers of different bases")
        return RadixNumber(tuple(_add_digits(self.digits, other.digits, self.base)), self.base)

    def __str__(self) -> str:
        return "".join(_SYMBOLS[d] for d in reversed(self.digits))


def palindrome_steps(base: int, text: str) -> Optional[int]:
    """Reverse-and-add steps until a palindrome appears, or ``None`` after 31 steps."""
    number = RadixNumber.from_string(text, base)
    for step in range(1, _MAX_PALINDROME_STEPS + 1):
        number = number + number.reversed()
        if number.is_palindrome():
            return step
    return None


def add_digit_lists(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Sum of two decimal numbers given as digit lists, least significant first."""
    return _add_digits(a, b, 10)


def add_reverse(digits: Sequence[int]) -> list[int]:
    """Add a decimal digit list to its own reversal."""
    return add_digit_lists(digits, list(reversed(digits)))


def is_palindrome_digits(digits: Sequence[int]) -> bool:
    return list(digits) == list(reversed(digits))


def count_pairs_with_difference(nums: Iterable[int], c: int) -> int:
    """Number of ordered index pairs ``(i, j)`` with ``nums[i] - nums[j] == c``."""
    counts = Counter(nums)
    return sum(n * counts[v - c] for v, n in counts.items() if v - c in counts)


def longest_balanced(bits: Iterable) -> int:
    """Length of the longest stretch with as many true as false entries."""
    first: dict[int, int] = {0: 0}
    best = 0
    balance = 0
    for i, bit in enumerate(bits, start=1):
        balance += 1 if bit else -1
        if balance in first:
            best = max(best, i - first[balance])
        else:
            first[balance] = i
    return best


def smallest_separating_modulus(nums: Sequence[int]) -> int:
    """Smallest ``k >= len(nums)`` for which the distinct values have distinct residues."""
    values = list(nums)
    diffs = {abs(a - b) for i, a in enumerate(values) for b in values[:i]}
    diffs.discard(0)
    limit = max(diffs, default=0)
    present = bytearray(limit + 1)
    for d in diffs:
        present[d] = 1
    k = max(len(values), 1)
    while any(present[j] for j in range(k, limit + 1, k)):
        k += 1
    return k