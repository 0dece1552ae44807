"""Array-backed binary heap with a configurable ordering."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class BinaryHeap(Generic[T]):
    """Binary heap kept in a flat list.

    ``compare(a, b)`` returns True when ``b`` must sit above ``a``. The
    default, ``operator.lt``, gives a max-heap; ``operator.gt`` gives a
    min-heap.
    """

    def __init__(
        self,
        values: Iterable[T] = (),
        compare: Callable[[Any, Any], bool] = operator.lt,
    ) -> None:
        self._data: list[T] = []
        self._compare = compare
        for value in values:
            self.push(value)

    def push(self, x: T) -> None:
        """Insert ``x`` and sift it up to its place."""
        data = self._data
        data.append(x)
        cur = len(data) - 1
        while cur > 0:
            parent = (cur - 1) // 2
            if not self._compare(data[parent], data[cur]):
                break
            data[parent], data[cur] = data[cur], data[parent]
            cur = parent

    def pop(self) -> T:
        """Remove and return the top element; raise ``IndexError`` when empty."""
        data = self._data
        if not data:
            raise IndexError("Heap is empty")
        data[0], data[-1] = data[-1], data[0]
        top = data.pop()
        length = len(data)
        cur = 0
        while True:
            child = 2 * cur + 1
            if child >= length:
                break
            if child + 1 < length and self._compare(data[child], data[child + 1]):
                child += 1
            if self._compare(data[cur], data[child]):
                data[cur], data[child] = data[child], data[cur]
                cur = child
            else:
                break
        return top

    def top(self) -> T:
        """The top element without removing it; raise ``IndexError`` when empty."""
        if not self._data:
            raise IndexError("Heap is empty")
        return self._data[0]

    def merge(self, other: "BinaryHeap[T]") -> None:
        """Push every element of ``other`` into this heap and empty ``other``."""
        if other is self:
            return
        for value in other._data:
            self.push(value)
        other._data.clear()

    def empty(self) -> bool:
        return not self._data

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __iter__(self) -> Iterator[T]:
        """Elements in storage (level) order, the top first."""
        return iter(list(self._data))

    def __repr__(self) -> str:
        return f"BinaryHeap({self._data!r})"