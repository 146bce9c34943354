"""A point-update, range-query segment tree over an associative combine."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class SegmentTree(Generic[T]):
    """Fixed-size array supporting point merges and inclusive range folds.

    ``combine`` must be associative and ``identity`` its neutral element.
    Every position starts out as ``identity``.
    """

    def __init__(self, size: int, combine: Callable[[T, T], T], identity: T) -> None:
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        capacity = 1
        while capacity < size:
            capacity *= 2
        self._size = size
        self._capacity = capacity
        self._combine = combine
        self._identity = identity
        self._tree: list[T] = [identity] * (2 * capacity)

    def __len__(self) -> int:
        return self._size

    def _check(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range for size {self._size}")

    def update(self, index: int, value: T) -> None:
        """Merge ``value`` into the element at ``index`` using ``combine``."""
        self._check(index)
        tree = self._tree
        pos = index + self._capacity
        tree[pos] = self._combine(tree[pos], value)
        pos //= 2
        while pos:
            tree[pos] = self._combine(tree[2 * pos], tree[2 * pos + 1])
            pos //= 2

    def query(self, low: int, high: int) -> T:
        """Fold the elements in ``[low, high]``; an empty range gives ``identity``."""
        if low > high:
            return self._identity
        self._check(low)
        self._check(high)
        tree = self._tree
        combine = self._combine
        left_acc = self._identity
        right_acc = self._identity
        lo = low + self._capacity
        hi = high + self._capacity + 1
        while lo < hi:
            if lo & 1:
                left_acc = combine(left_acc, tree[lo])
                lo += 1
            if hi & 1:
                hi -= 1
                right_acc = combine(tree[hi], right_acc)
            lo //= 2
            hi //= 2
        return combine(left_acc, right_acc)