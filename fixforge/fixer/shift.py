# fixforge/fixer/shift.py
from __future__ import annotations

from typing import List

__all__ = ["ShiftTracker"]

_NIL = -1


class ShiftTracker:
    """
    Prefix sums of length deltas, keyed by offsets into the *original* text.

    After an edit has been spliced into the working copy, ``insert(point, delta)``
    records that every original position at or after ``point`` moved by
    ``delta`` characters. ``lookup(point)`` returns the total shift of all
    recorded points ``<= point``, i.e. how much the text before ``point`` has
    grown or shrunk so far.

    Storage is a binary search tree kept in parallel arrays (node ids are list
    indices, node 0 is a fixed root at pivot 0). Each node's ``sum_left`` holds
    the deltas recorded at its own pivot plus everything in its left subtree,
    so both operations are a single walk from the root. Nodes are never
    removed; ``reset`` drops the whole tree.
    """

    def __init__(self) -> None:
        self._pivot: List[int] = []
        self._sum_left: List[int] = []
        self._left: List[int] = []
        self._right: List[int] = []
        self.reset()

    def reset(self) -> None:
        self._pivot[:] = [0]
        self._sum_left[:] = [0]
        self._left[:] = [_NIL]
        self._right[:] = [_NIL]

    def __len__(self) -> int:
        return len(self._pivot)

    def _new_node(self, pivot: int, value: int) -> int:
        self._pivot.append(pivot)
        self._sum_left.append(value)
        self._left.append(_NIL)
        self._right.append(_NIL)
        return len(self._pivot) - 1

    def insert(self, point: int, delta: int) -> None:
        node = 0
        while True:
            pivot = self._pivot[node]
            if point < pivot:
                self._sum_left[node] += delta
                child = self._left[node]
                if child == _NIL:
                    self._left[node] = self._new_node(point, delta)
                    return
                node = child
            elif point > pivot:
                child = self._right[node]
                if child == _NIL:
                    self._right[node] = self._new_node(point, delta)
                    return
                node = child
            else:
                self._sum_left[node] += delta
                return

    def lookup(self, point: int) -> int:
        total = 0
        node = 0
        while node != _NIL:
            pivot = self._pivot[node]
            if point < pivot:
                node = self._left[node]
            else:
                total += self._sum_left[node]
                if point == pivot:
                    break
                node = self._right[node]
        return total

    def translate(self, point: int) -> int:
        """Map an original-text offset to its offset in the current working text."""
        return point + self.lookup(point)
