"""Solutions to a handful of classic interview problems."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Optional

_EMPTY = object()


def three_sum_closest(nums: Sequence[int], target: int) -> int:
    """Sum of three elements of ``nums`` closest to ``target``."""
    if len(nums) < 3:
        raise ValueError("need at least three numbers")
    values = sorted(nums)
    n = len(values)
    closest: Optional[int] = None

    def hopeless(total: int) -> bool:
        return (
            closest is not None
            and total > target
            and abs(total - target) > abs(closest - target)
        )

    for i in range(n - 2):
        if hopeless(values[i] + values[i + 1] + values[i + 2]):
            break
        for j in range(i + 1, n - 1):
            if hopeless(values[i] + values[j] + values[j + 1]):
                break
            for k in range(j + 1, n):
                total = values[i] + values[j] + values[k]
                if closest is None or abs(total - target) < abs(closest - target):
                    closest = total
                    if closest == target:
                        return target
    assert closest is not None
    return closest


@dataclass(eq=False)
class TreeNode:
    """Binary tree node."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def _inorder(root: Optional[TreeNode]) -> Iterator[int]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.val
        node = node.right


class BSTIterator:
    """Iterates the values of a binary search tree in ascending (in-order) order."""

    def __init__(self, root: Optional[TreeNode]) -> None:
        self._values = list(_inorder(root))
        self._pos = 0

    def next(self) -> int:
        if self._pos >= len(self._values):
            raise StopIteration
        value = self._values[self._pos]
        self._pos += 1
        return value

    def has_next(self) -> bool:
        return self._pos < len(self._values)

    def __iter__(self) -> "BSTIterator":
        return self

    __next__ = next


class ATM:
    """Cash machine holding 20, 50, 100, 200 and 500 notes."""

    DENOMINATIONS: tuple[int, ...] = (20, 50, 100, 200, 500)

    def __init__(self) -> None:
        self._counts = [0] * len(self.DENOMINATIONS)

    @property
    def counts(self) -> tuple[int, ...]:
        """Notes held, one count per denomination."""
        return tuple(self._counts)

    def deposit(self, counts: Iterable[int]) -> None:
        """Add notes, one count per denomination in ascending order."""
        added = list(counts)
        if len(added) != len(self.DENOMINATIONS):
            raise ValueError(f"expected {len(self.DENOMINATIONS)} counts, got {len(added)}")
        self._counts = [have + more for have, more in zip(self._counts, added)]

    def withdraw(self, amount: int) -> list[int]:
        """Pay ``amount`` greedily from the largest notes and return the notes used.

        Raises ``ValueError`` (leaving the machine untouched) when the amount
        cannot be paid that way.
        """
        if (amount < 50 and amount != 20) or amount % 10:
            raise ValueError(f"cannot withdraw {amount}")
        taken = [0] * len(self.DENOMINATIONS)
        remaining = amount
        for idx in reversed(range(len(self.DENOMINATIONS))):
            note = self.DENOMINATIONS[idx]
            take = min(self._counts[idx], remaining // note)
            taken[idx] = take
            remaining -= take * note
        if remaining:
            raise ValueError(f"cannot withdraw {amount}")
        self._counts = [have - used for have, used in zip(self._counts, taken)]
        return taken


def _flatten(items: Iterable[Any]) -> Iterator[int]:
    for item in items:
        if isinstance(item, int):
            yield item
        else:
            yield from _flatten(item)


class NestedIterator:
    """Iterates the integers of an arbitrarily nested list, depth first."""

    def __init__(self, nested: Iterable[Any]) -> None:
        self._values = list(_flatten(nested))
        self._pos = 0

    def next(self) -> int:
        if self._pos >= len(self._values):
            raise StopIteration
        value = self._values[self._pos]
        self._pos += 1
        return value

    def has_next(self) -> bool:
        return self._pos < len(self._values)

    def __iter__(self) -> "NestedIterator":
        return self

    __next__ = next


class PeekingIterator:
    """Iterator wrapper that can look at the next element without consuming it."""

    def __init__(self, iterable: Iterable[Any]) -> None:
        self._it = iter(iterable)
        self._ahead = next(self._it, _EMPTY)

    def peek(self) -> Any:
        if self._ahead is _EMPTY:
            raise StopIteration
        return self._ahead

    def next(self) -> Any:
        value = self.peek()
        self._ahead = next(self._it, _EMPTY)
        return value

    def has_next(self) -> bool:
        return self._ahead is not _EMPTY

    def __iter__(self) -> "PeekingIterator":
        return self

    __next__ = next


class RLEIterator:
    """Walks a run-length encoding given as ``[count, value, count, value, ...]``."""

    def __init__(self, encoding: Sequence[int]) -> None:
        if len(encoding) % 2:
            raise ValueError("encoding must hold count/value pairs")
        self._runs = list(encoding)
        self._pos = 0

    def next(self, n: int) -> Optional[int]:
        """Consume ``n`` elements and return the last one, or ``None`` if too few remain."""
        last: Optional[int] = None
        while n and self._pos < len(self._runs):
            count = self._runs[self._pos]
            last = self._runs[self._pos + 1]
            if n >= count:
                n -= count
                self._runs[self._pos] = 0
                self._pos += 2
            else:
                self._runs[self._pos] -= n
                n = 0
        return None if n else last


def lowest_common_ancestor(root: TreeNode, p: TreeNode, q: TreeNode) -> TreeNode:
    """Lowest common ancestor of ``p`` and ``q`` in a binary search tree."""
    if p.val > q.val:
        p, q = q, p
    node: Optional[TreeNode] = root
    while node is not None:
        if node.val < p.val:
            node = node.right
        elif node.val > q.val:
            node = node.left
        else:
            return node
    raise ValueError("nodes are not in the tree")


def min_time_to_type(word: str) -> int:
    """Seconds to type ``word`` on a circular a-z typewriter starting at 'a'.

    Moving one letter either way and typing a letter each take one second.
    """
    total = len(word)
    position = "a"
    for ch in word:
        distance = abs(ord(ch) - ord(position))
        total += min(distance, 26 - distance)
        position = ch
    return total