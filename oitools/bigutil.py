"""Helpers on decimal digit strings used by the big-integer arithmetic."""

from __future__ import annotations


def is_valid_number(num: str) -> bool:
    """True when every character of ``num`` is an ASCII decimal digit."""
    return all("0" <= ch <= "9" for ch in num)


def strip_leading_zeroes(num: str) -> str:
    """``num`` without leading zeros; all zeros (or empty) becomes ``"0"``."""
    return num.lstrip("0") or "0"


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError("count must be non-negative")


def add_leading_zeroes(num: str, count: int) -> str:
    """``num`` with ``count`` zeros in front."""
    _check_count(count)
    return "0" * count + num


def add_trailing_zeroes(num: str, count: int) -> str:
    """``num`` with ``count`` zeros appended."""
    _check_count(count)
    return num + "0" * count


def larger_and_smaller(a: str, b: str) -> tuple[str, str]:
    """Return ``(larger, smaller)`` of two digit strings, the smaller zero-padded.

    Strings are compared by length, then lexicographically; the smaller is
    padded on the left to the length of the larger.
    """
    if len(a) > len(b) or (len(a) == len(b) and a > b):
        larger, smaller = a, b
    else:
        larger, smaller = b, a
    return larger, add_leading_zeroes(smaller, len(larger) - len(smaller))


def is_power_of_10(num: str) -> bool:
    """True when ``num`` is a ``1`` followed only by zeros."""
    return num[:1] == "1" and all(ch == "0" for ch in num[1:])