#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
min_pq.py
---------

The contract shared by every mutable‑priority min‑queue in this package,
plus the exceptions those queues raise.

A ``MinPQ`` stores *unique* elements, each with a float priority, and
always knows which element currently has the smallest priority.  Priorities
may be changed in place with ``change_priority``; adding an element that is
already present is an error, never an update.

Backings
~~~~~~~~
* ``UnsortedArrayMinPQ``      – plain list, O(n) min/lookup.  Simple oracle.
* ``IndexedBinaryHeapMinPQ``  – binary heap + reverse index, O(log n).

Both are interchangeable: code written against ``MinPQ`` works with either.

Typical usage
~~~~~~~~~~~~~
>>> from indexed_binary_heap_min_pq import IndexedBinaryHeapMinPQ
>>> pq = IndexedBinaryHeapMinPQ({'a': 5.0, 'b': 1.0})
>>> pq.change_priority('a', 0.0)
>>> pq.remove_min()
'a'
>>> pq.get_priority('b')
1.0
"""

from __future__ import annotations

import abc
import logging
import math
from typing import (
    Any,
    Generic,
    Iterable,
    Iterator,
    List,
    Mapping,
    Tuple,
    TypeVar,
    Union,
)

logger = logging.getLogger(__name__)

T = TypeVar('T')

# Anything ``add_all`` accepts: {element: priority} or [(element, priority)].
Items = Union[Mapping[T, float], Iterable[Tuple[T, float]]]


# ----------------------------------------------------------------------
#  Exceptions
# ----------------------------------------------------------------------
class MinPQError(Exception):
    """Base class for every error raised by a min‑priority queue."""


class DuplicateElementError(MinPQError, ValueError):
    """``add`` was called with an element that is already present."""


class NotFoundError(MinPQError, KeyError):
    """The element is not present in the queue."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""


class EmptyQueueError(MinPQError, IndexError):
    """``peek_min`` / ``remove_min`` on a queue with no elements."""


class InvalidPriorityError(MinPQError, ValueError):
    """The priority is NaN or not a real number."""


def as_priority(priority: Any) -> float:
    """
    Convert *priority* to ``float`` and reject NaN.
    Raises ``InvalidPriorityError`` otherwise.
    """
    try:
        value = float(priority)
    except (TypeError, ValueError) as exc:
        raise InvalidPriorityError(f"Priority {priority!r} is not a number") from exc
    if math.isnan(value):
        raise InvalidPriorityError("Priority must not be NaN")
    return value


def iter_items(items: Items) -> Iterator[Tuple[T, float]]:
    """Yield ``(element, priority)`` pairs from a mapping or an iterable of pairs."""
    if isinstance(items, Mapping):
        return iter(items.items())
    return iter(items)


# ----------------------------------------------------------------------
#  Contract
# ----------------------------------------------------------------------
class MinPQ(abc.ABC, Generic[T]):
    """
    Abstract min‑priority queue with mutable priorities.

    Subclasses implement the storage‑specific operations; everything else
    (``is_empty``, bulk helpers, the Python container protocol) is written
    here in terms of them.  Every mutating method validates its arguments
    before touching storage, so a rejected call leaves the queue unchanged.
    """

    __slots__ = ()

    # ------------------------------------------------------------------
    #   Storage‑specific operations
    # ------------------------------------------------------------------
    @abc.abstractmethod
    def add(self, element: T, priority: float) -> None:
        """
        Insert *element* with the given *priority*.
        Raises ``DuplicateElementError`` if the element is already present.
        """

    @abc.abstractmethod
    def contains(self, element: T) -> bool:
        """Return whether *element* is present."""

    @abc.abstractmethod
    def get_priority(self, element: T) -> float:
        """
        Return the priority currently stored for *element*.
        Raises ``NotFoundError`` if the element is absent.
        """

    @abc.abstractmethod
    def peek_min(self) -> T:
        """
        Return, without removing, an element with the minimum priority.
        Raises ``EmptyQueueError`` if the queue is empty.
        """

    @abc.abstractmethod
    def remove_min(self) -> T:
        """
        Remove and return an element with the minimum priority.
        Raises ``EmptyQueueError`` if the queue is empty.
        """

    @abc.abstractmethod
    def change_priority(self, element: T, priority: float) -> None:
        """
        Replace the priority of *element*.
        Raises ``NotFoundError`` if the element is absent.
        """

    @abc.abstractmethod
    def remove(self, element: T) -> None:
        """
        Delete *element* regardless of its priority.
        Raises ``NotFoundError`` if the element is absent.
        """

    @abc.abstractmethod
    def size(self) -> int:
        """Return the number of elements in the queue."""

    @abc.abstractmethod
    def __iter__(self) -> Iterator[T]:
        """Iterate over the elements in storage order (not sorted)."""

    # ------------------------------------------------------------------
    #   Derived operations
    # ------------------------------------------------------------------
    def is_empty(self) -> bool:
        return self.size() == 0

    def add_all(self, items: Items) -> None:
        """
        Add every ``(element, priority)`` pair from a mapping or iterable.
        Stops at the first duplicate; earlier pairs stay added.
        """
        for element, priority in iter_items(items):
            self.add(element, priority)

    def add_or_change_priority(self, element: T, priority: float) -> None:
        """Add *element* if absent, otherwise change its priority."""
        if self.contains(element):
            self.change_priority(element, priority)
        else:
            self.add(element, priority)

    def remove_min_many(self, count: int) -> List[T]:
        """
        Remove up to *count* minimum elements and return them in the order
        they were removed.
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        removed: List[T] = []
        while len(removed) < count and not self.is_empty():
            removed.append(self.remove_min())
        return removed

    # ------------------------------------------------------------------
    #   Python protocol support
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return self.size()

    def __contains__(self, element: Any) -> bool:
        return self.contains(element)

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __repr__(self) -> str:
        pairs = ", ".join(f"{e!r}: {self.get_priority(e)!r}" for e in self)
        return f"{type(self).__name__}({{{pairs}}})"

    # ------------------------------------------------------------------
    #   Error helpers shared by the backings
    # ------------------------------------------------------------------
    def _duplicate(self, element: T) -> DuplicateElementError:
        logger.debug("rejecting duplicate element %r", element)
        return DuplicateElementError(f"Item {element!r} already present in queue")

    def _not_found(self, element: T) -> NotFoundError:
        logger.debug("element %r not in queue", element)
        return NotFoundError(f"Item {element!r} not found in queue")

    def _empty(self, operation: str) -> EmptyQueueError:
        logger.debug("%s on an empty queue", operation)
        return EmptyQueueError(f"{operation} from an empty priority queue")


__all__ = [
    "MinPQ",
    "MinPQError",
    "DuplicateElementError",
    "NotFoundError",
    "EmptyQueueError",
    "InvalidPriorityError",
    "as_priority",
    "iter_items",
]
