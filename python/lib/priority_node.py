#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
priority_node.py
----------------

The ``(element, priority)`` pair stored inside every min‑priority queue.
The element is fixed for the node's lifetime; the priority may change.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

T = TypeVar('T')


class PriorityNode(Generic[T]):
    """Internal node object – queues create these and never hand them out."""

    __slots__ = ("_element", "priority")

    def __init__(self, element: T, priority: float) -> None:
        self._element = element
        self.priority = priority

    @property
    def element(self) -> T:
        return self._element

    def __eq__(self, other: Any) -> bool:
        # Nodes are the same node when they hold the same element.
        if not isinstance(other, PriorityNode):
            return NotImplemented
        return self._element == other._element

    def __hash__(self) -> int:
        return hash(self._element)

    def __repr__(self) -> str:
        return f"PriorityNode({self._element!r}, {self.priority!r})"
