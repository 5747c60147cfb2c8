#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
indexed_binary_heap_min_pq.py
-----------------------------

A ``MinPQ`` backed by an *indexed* binary min‑heap.

Features
~~~~~~~~
* O(log n) ``add``, ``remove_min``, ``change_priority`` and ``remove``.
* O(1) ``peek_min``, ``contains`` and ``get_priority``.
* Priorities can go up or down; the heap repairs itself in either direction.
* O(n) bulk construction (bottom‑up heapify) when filling an empty queue.
* ``validate()`` checks both internal invariants – useful while debugging.

Layout
~~~~~~
The heap is a complete binary tree stored in a list, 1‑indexed: slot 0 is
unused, the root lives in slot 1, and slot ``i`` has children ``2i`` and
``2i + 1`` and parent ``i // 2``.  Alongside it, ``_index`` maps each element
to the slot that currently holds it, so locating an element never needs a
scan.  ``_swap`` is the only place slots are exchanged, and it rewrites both
index entries before returning.

Typical usage
~~~~~~~~~~~~~
>>> from indexed_binary_heap_min_pq import IndexedBinaryHeapMinPQ
>>> pq = IndexedBinaryHeapMinPQ()
>>> pq.add('task1', 5)
>>> pq.add('task2', 2)
>>> pq.add('task3', 7)
>>> pq.remove_min()
'task2'
>>> pq.change_priority('task1', 9)
>>> pq.peek_min()
'task3'
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional

from min_pq import Items, MinPQ, T, as_priority, iter_items
from priority_node import PriorityNode

logger = logging.getLogger(__name__)

ROOT = 1


class IndexedBinaryHeapMinPQ(MinPQ[T]):
    """
    Binary min‑heap with a reverse index from element to heap slot.

    Invariants, holding whenever no public method is running:

    * every element ``e`` in the queue sits at ``self._heap[self._index[e]]``
    * for every slot ``i > 1``: ``priority(i // 2) <= priority(i)``
    """

    __slots__ = ("_heap", "_index")

    def __init__(self, items: Optional[Items] = None) -> None:
        # Slot 0 is a placeholder so the root is at slot 1.
        self._heap: List[Optional[PriorityNode[T]]] = [None]

        # Mapping element -> current slot in `_heap`.
        self._index: Dict[T, int] = {}

        if items is not None:
            self.add_all(items)

    # ------------------------------------------------------------------
    #   Core public API
    # ------------------------------------------------------------------
    def add(self, element: T, priority: float) -> None:
        if element in self._index:
            raise self._duplicate(element)
        node = PriorityNode(element, as_priority(priority))
        self._heap.append(node)
        slot = len(self._heap) - 1
        self._index[element] = slot
        self._swim(slot)

    def contains(self, element: T) -> bool:
        return element in self._index

    def get_priority(self, element: T) -> float:
        if element not in self._index:
            raise self._not_found(element)
        return self._node(self._index[element]).priority

    def peek_min(self) -> T:
        if self.size() == 0:
            raise self._empty("peek")
        return self._node(ROOT).element

    def remove_min(self) -> T:
        if self.size() == 0:
            raise self._empty("remove_min")
        # Move the root to the end, cut it off, then repair from the top.
        self._swap(ROOT, self.size())
        node = self._pop_last()
        self._sink(ROOT)
        return node.element

    def change_priority(self, element: T, priority: float) -> None:
        if element not in self._index:
            raise self._not_found(element)
        new_priority = as_priority(priority)
        slot = self._index[element]
        self._node(slot).priority = new_priority
        # Only one direction can be out of order; the other call does nothing.
        self._sink(slot)
        self._swim(slot)

    def remove(self, element: T) -> None:
        if element not in self._index:
            raise self._not_found(element)
        slot = self._index[element]
        self._swap(slot, self.size())
        self._pop_last()

        # The node moved into `slot` may belong higher or lower.
        if slot <= self.size():
            self._sink(slot)
            self._swim(slot)

    def size(self) -> int:
        return len(self._heap) - 1

    def __iter__(self) -> Iterator[T]:
        """
        Iterate over the elements in heap order (i.e. not sorted).
        Use ``remove_min`` repeatedly for sorted output.
        """
        return (self._node(slot).element for slot in range(ROOT, len(self._heap)))

    # ------------------------------------------------------------------
    #   Bulk construction
    # ------------------------------------------------------------------
    def add_all(self, items: Items) -> None:
        """
        Add every ``(element, priority)`` pair.

        Filling an empty queue builds the heap bottom‑up in O(n); the whole
        batch is checked first, so a duplicate leaves the queue empty.
        Otherwise each pair is added in turn and the first duplicate stops
        the loop.
        """
        if self.size() > 0:
            super().add_all(items)
            return

        nodes: List[PriorityNode[T]] = []
        index: Dict[T, int] = {}
        for element, priority in iter_items(items):
            if element in index:
                raise self._duplicate(element)
            nodes.append(PriorityNode(element, as_priority(priority)))
            index[element] = len(nodes)

        self._heap.extend(nodes)
        self._index.update(index)
        for slot in range(self.size() // 2, ROOT - 1, -1):
            self._sink(slot)
        logger.debug("heapified %d elements", self.size())

    # ------------------------------------------------------------------
    #   Internal heap‑maintenance helpers
    # ------------------------------------------------------------------
    def _node(self, slot: int) -> PriorityNode[T]:
        node = self._heap[slot]
        assert node is not None
        return node

    def _less(self, i: int, j: int) -> bool:
        return self._node(i).priority < self._node(j).priority

    def _swap(self, i: int, j: int) -> None:
        """Swap the nodes at slots i and j and keep `_index` in sync."""
        self._heap[i], self._heap[j] = self._heap[j], self._heap[i]
        self._index[self._node(i).element] = i
        self._index[self._node(j).element] = j

    def _pop_last(self) -> PriorityNode[T]:
        """Cut the last slot off the heap and forget its element."""
        node = self._heap.pop()
        assert node is not None
        del self._index[node.element]
        return node

    def _swim(self, slot: int) -> None:
        """Move the node at *slot* up until its parent is no larger."""
        while slot > ROOT and self._less(slot, slot // 2):
            self._swap(slot, slot // 2)
            slot //= 2

    def _sink(self, slot: int) -> None:
        """Move the node at *slot* down until no child is smaller."""
        n = self.size()
        while 2 * slot <= n:
            child = 2 * slot
            # Right child only wins when strictly smaller.
            if child < n and self._less(child + 1, child):
                child += 1
            if not self._less(child, slot):
                break
            self._swap(slot, child)
            slot = child

    # ------------------------------------------------------------------
    #   Validation/checking utilities – useful for debugging
    # ------------------------------------------------------------------
    def validate(self) -> None:
        """
        Verify both heap invariants.
        Raises ``AssertionError`` with a descriptive message on the first
        violation found.
        """
        assert self._heap[0] is None, "Slot 0 is occupied"
        assert len(self._index) == self.size(), (
            f"Index holds {len(self._index)} elements, heap holds {self.size()}"
        )
        for slot in range(ROOT, len(self._heap)):
            node = self._heap[slot]
            assert node is not None, f"Slot {slot} is empty"
            assert self._index.get(node.element) == slot, (
                f"Index maps {node.element!r} to {self._index.get(node.element)}, "
                f"but it sits in slot {slot}"
            )
            if slot > ROOT:
                assert not self._less(slot, slot // 2), (
                    f"Heap order violated between slot {slot // 2} and {slot}"
                )
