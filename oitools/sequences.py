"""Arithmetic progressions, factorials, LIS lengths and sliding-window extremes."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


@dataclass(frozen=True)
class ArithmeticSequence:
    """``length`` terms running evenly from ``start`` to ``end``.

    The common difference is ``(end - start) / (length - 1)`` rounded toward zero.
    """

    length: int
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.length < 1:
            raise ValueError("length must be at least 1")

    @property
    def step(self) -> int:
        if self.length == 1:
            return 0
        return _trunc_div(self.end - self.start, self.length - 1)

    def __len__(self) -> int:
        return self.length

    def __getitem__(self, index: int) -> int:
        if index < 0:
            index += self.length
        if not 0 <= index < self.length:
            raise IndexError("sequence index out of range")
        return self.start + index * self.step

    def __iter__(self) -> Iterator[int]:
        step = self.step
        for i in range(self.length):
            yield self.start + i * step


class ArithmeticRun:
    """An arithmetic progression laid over positions ``left..right`` inclusive."""

    def __init__(self, left: int, right: int, first: int, last: int) -> None:
        if right < left:
            raise ValueError("right must not be before left")
        self.left = left
        self.right = right
        self.first = first
        self.last = last
        self.step = ArithmeticSequence(right - left + 1, first, last).step
        self.position = left

    def current(self) -> int:
        """The term at the current position."""
        return (self.position - self.left) * self.step + self.first

    def advance(self) -> None:
        self.position += 1

    def is_end(self) -> bool:
        return self.position > self.right


class ProgressionSum:
    """Sums overlapping arithmetic runs position by position, starting at 1."""

    def __init__(self) -> None:
        self._runs: list[ArithmeticRun] = []
        self.position = 1

    def insert(self, left: int, right: int, first: int, last: int) -> None:
        self._runs.append(ArithmeticRun(left, right, first, last))

    def init(self) -> None:
        """Order the runs by start position and rewind to position 1."""
        self._runs.sort(key=lambda run: run.left)
        self.position = 1

    def update(self) -> int:
        """Total of all run terms at the current position, then move one step on."""
        total = 0
        remaining: list[ArithmeticRun] = []
        for idx, run in enumerate(self._runs):
            if run.position != self.position:
                remaining.extend(self._runs[idx:])
                break
            total += run.current()
            run.advance()
            if not run.is_end():
                remaining.append(run)
        self._runs = remaining
        self.position += 1
        return total

    def empty(self) -> bool:
        return not self._runs


def product_range(start: int, stop: int) -> int:
    """Product of the integers ``start..stop`` inclusive (1 when the range is empty)."""
    result = 1
    for i in range(start, stop + 1):
        result *= i
    return result


def factorial(n: int) -> int:
    """``n!`` for non-negative ``n``."""
    if n < 0:
        raise ValueError("factorial of a negative number")
    return product_range(2, n)


def lis_lengths(values: Iterable) -> list[int]:
    """Length of the longest strictly increasing subsequence ending at each position."""
    vals = list(values)
    lengths: list[int] = []
    for i, v in enumerate(vals):
        lengths.append(
            max((n + 1 for pv, n in zip(vals[:i], lengths) if pv < v), default=1)
        )
    return lengths


def sliding_window_extremes(values: Iterable, k: int) -> list[tuple]:
    """``(minimum, maximum)`` of every window of ``k`` consecutive values."""
    if k < 1:
        raise ValueError("window size must be at least 1")
    vals = list(values)
    lows: deque[int] = deque()
    highs: deque[int] = deque()
    result: list[tuple] = []
    for i, v in enumerate(vals):
        if lows and lows[0] == i - k:
            lows.popleft()
        while lows and v < vals[lows[-1]]:
            lows.pop()
        lows.append(i)
        if highs and highs[0] == i - k:
            highs.popleft()
        while highs and v > vals[highs[-1]]:
            highs.pop()
        highs.append(i)
        if i >= k - 1:
            result.append((vals[lows[0]], vals[highs[0]]))
    return result