"""String matching (KMP), signed-number scanning and Roman numerals."""

from __future__ import annotations

from collections.abc import Sequence

_SEPARATOR = object()

_ROMAN_STEPS: tuple[tuple[int, str], ...] = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

_ONES = ("", "I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX")
_TENS = ("", "X", "XX", "XXX", "XL", "L", "LX", "LXX", "LXXX", "XC")
_HUNDREDS = ("", "C", "CC", "CCC", "CD", "D", "DC", "DCC", "DCCC", "CM")
_THOUSANDS = ("", "M", "MM", "MMM")

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def prefix_function(s: Sequence) -> list[int]:
    """Return the KMP prefix function of ``s``.

    Entry ``i`` is the length of the longest proper prefix of ``s[:i + 1]``
    that is also a suffix of it.
    """
    pi = [0] * len(s)
    for i in range(1, len(s)):
        j = pi[i - 1]
        while j > 0 and s[i] != s[j]:
            j = pi[j - 1]
        if s[i] == s[j]:
            j += 1
        pi[i] = j
    return pi


def find_occurrences(text: Sequence, pattern: Sequence) -> list[int]:
    """Start positions of every (possibly overlapping) match of ``pattern`` in ``text``.

    Works on the prefix function of ``pattern + separator + text``.
    """
    if not pattern:
        raise ValueError("pattern must not be empty")
    m = len(pattern)
    pi = prefix_function([*pattern, _SEPARATOR, *text])
    return [i - 2 * m for i, value in enumerate(pi) if i > m and value == m]


def kmp_search(text: Sequence, pattern: Sequence) -> list[int]:
    """Start positions of every (possibly overlapping) match, by the KMP automaton."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    m = len(pattern)
    table = prefix_function(pattern)
    matches: list[int] = []
    j = 0
    for i, item in enumerate(text):
        while j > 0 and item != pattern[j]:
            j = table[j - 1]
        if item == pattern[j]:
            j += 1
        if j == m:
            matches.append(i - m + 1)
            j = table[j - 1]
    return matches


def read_signed(s: str, pos: int = 0) -> tuple[int, int]:
    """Read an optionally signed decimal integer from ``s`` starting at ``pos``.

    Returns ``(value, next_pos)`` where ``next_pos`` is the index just past
    the digits consumed. With no digits the value is zero.
    """
    negative = False
    if pos < len(s) and s[pos] in "+-":
        negative = s[pos] == "-"
        pos += 1
    value = 0
    while pos < len(s) and "0" <= s[pos] <= "9":
        value = value * 10 + ord(s[pos]) - ord("0")
        pos += 1
    return (-value if negative else value), pos


def int_to_roman(num: int) -> str:
    """Roman numeral for ``num`` built greedily from the largest symbols."""
    parts: list[str] = []
    for value, symbol in _ROMAN_STEPS:
        count, num = divmod(num, value) if num >= value else (0, num)
        parts.append(symbol * count)
    return "".join(parts)


def int_to_roman_by_digits(num: int) -> str:
    """Roman numeral for ``num`` assembled digit by digit from lookup tables.

    Thousands above three and negative numbers have no symbol and give an
    empty part.
    """
    if num < 0:
        return ""
    thousands = num // 1000
    return (
        (_THOUSANDS[thousands] if thousands < len(_THOUSANDS) else "")
        + _HUNDREDS[num // 100 % 10]
        + _TENS[num // 10 % 10]
        + _ONES[num % 10]
    )


def roman_to_int(s: str) -> int:
    """Value of the Roman numeral ``s``; a smaller symbol before a larger one subtracts."""
    total = 0
    previous = 0
    for ch in s:
        try:
            value = _ROMAN_VALUES[ch]
        except KeyError:
            raise ValueError(f"not a Roman numeral symbol: {ch!r}") from None
        total += -previous if previous < value else previous
        previous = value
    return total + previous