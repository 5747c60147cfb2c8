#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
unsorted_array_min_pq.py
------------------------

Baseline ``MinPQ`` backed by a plain, unordered list.

``add`` appends; ``peek_min``, ``remove_min``, ``change_priority`` and
``remove`` all scan the list.  Slow, but simple enough to be obviously
correct, which makes it the reference the heap backing is tested against.
Among equal minimum priorities the node found first in storage order wins.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

from min_pq import Items, MinPQ, T, as_priority
from priority_node import PriorityNode


class UnsortedArrayMinPQ(MinPQ[T]):

    __slots__ = ("_nodes",)

    def __init__(self, items: Optional[Items] = None) -> None:
        # Insertion order minus removals; no other invariant.
        self._nodes: List[PriorityNode[T]] = []
        if items is not None:
            self.add_all(items)

    # ------------------------------------------------------------------
    #   Linear‑scan helpers
    # ------------------------------------------------------------------
    def _index_of(self, element: T) -> int:
        """Return the list index holding *element*, or -1."""
        for i, node in enumerate(self._nodes):
            if node.element == element:
                return i
        return -1

    def _index_of_min(self) -> int:
        best = 0
        for i in range(1, len(self._nodes)):
            if self._nodes[i].priority < self._nodes[best].priority:
                best = i
        return best

    # ------------------------------------------------------------------
    #   MinPQ
    # ------------------------------------------------------------------
    def add(self, element: T, priority: float) -> None:
        if self.contains(element):
            raise self._duplicate(element)
        self._nodes.append(PriorityNode(element, as_priority(priority)))

    def contains(self, element: T) -> bool:
        return self._index_of(element) >= 0

    def get_priority(self, element: T) -> float:
        i = self._index_of(element)
        if i < 0:
            raise self._not_found(element)
        return self._nodes[i].priority

    def peek_min(self) -> T:
        if not self._nodes:
            raise self._empty("peek")
        return self._nodes[self._index_of_min()].element

    def remove_min(self) -> T:
        if not self._nodes:
            raise self._empty("remove_min")
        return self._nodes.pop(self._index_of_min()).element

    def change_priority(self, element: T, priority: float) -> None:
        i = self._index_of(element)
        if i < 0:
            raise self._not_found(element)
        self._nodes[i].priority = as_priority(priority)

    def remove(self, element: T) -> None:
        i = self._index_of(element)
        if i < 0:
            raise self._not_found(element)
        del self._nodes[i]

    def size(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[T]:
        return (node.element for node in self._nodes)
