#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
test_indexed_binary_heap_min_pq.py
----------------------------------
Structure‑level tests for ``IndexedBinaryHeapMinPQ``: the things the
contract suite in ``test_min_pq.py`` cannot see.

* heap order and index consistency after random operations
* the reverse index stays in sync through every swap
* deterministic tie‑breaking
* bottom‑up heapify on bulk construction
* ``validate`` catches hand‑made corruption
"""

import random
import unittest

from indexed_binary_heap_min_pq import IndexedBinaryHeapMinPQ
from min_pq import DuplicateElementError


class TestIndexedBinaryHeapMinPQ(unittest.TestCase):

    # ------------------------------------------------------------------
    #  Helpers
    # ------------------------------------------------------------------
    def assertIndexConsistent(self, pq):
        for element, slot in pq._index.items():
            self.assertEqual(pq._heap[slot].element, element)
            self.assertEqual(pq._heap[slot].priority, pq.get_priority(element))
        self.assertEqual(len(pq._index), pq.size())

    def assertHeapOrdered(self, pq):
        for slot in range(2, pq.size() + 1):
            self.assertLessEqual(
                pq._heap[slot // 2].priority, pq._heap[slot].priority
            )

    # ------------------------------------------------------------------
    #  Layout
    # ------------------------------------------------------------------
    def test_root_lives_in_slot_one(self):
        pq = IndexedBinaryHeapMinPQ[str]()
        pq.add("b", 2.0)
        pq.add("a", 1.0)
        self.assertIsNone(pq._heap[0])
        self.assertEqual(pq._heap[1].element, "a")
        self.assertEqual(pq._index, {"a": 1, "b": 2})

    def test_swim_updates_index_on_every_swap(self):
        pq = IndexedBinaryHeapMinPQ[str]()
        for item, prio in [("a", 1), ("b", 2), ("c", 3), ("d", 4)]:
            pq.add(item, prio)
        # "e" lands in slot 5 and swims past "b" (slot 2) and "a" (slot 1).
        pq.add("e", 0)
        self.assertEqual(pq._index["e"], 1)
        self.assertEqual(pq._index["a"], 2)
        self.assertEqual(pq._index["b"], 5)
        self.assertIndexConsistent(pq)

    def test_sink_prefers_left_child_on_tie(self):
        pq = IndexedBinaryHeapMinPQ({"root": 1, "left": 2, "right": 2})
        pq.change_priority("root", 10)
        self.assertEqual(pq.peek_min(), "left")
        self.assertEqual(pq._index["root"], 2)
        pq.validate()

    def test_equal_priorities_are_not_swapped(self):
        pq = IndexedBinaryHeapMinPQ[str]()
        pq.add("first", 5)
        pq.add("second", 5)
        self.assertEqual(pq.peek_min(), "first")
        self.assertEqual(pq._index["second"], 2)

    def test_tie_break_is_deterministic(self):
        def run():
            pq = IndexedBinaryHeapMinPQ[int]()
            for i in range(20):
                pq.add(i, i % 3)
            pq.change_priority(19, 0)
            return [pq.remove_min() for _ in range(20)]

        self.assertEqual(run(), run())

    # ------------------------------------------------------------------
    #  Removal
    # ------------------------------------------------------------------
    def test_remove_last_slot(self):
        pq = IndexedBinaryHeapMinPQ({"a": 1, "b": 2, "c": 3})
        last = pq._heap[-1].element
        pq.remove(last)
        self.assertNotIn(last, pq)
        self.assertEqual(pq.size(), 2)
        pq.validate()

    def test_remove_interior_node_can_swim(self):
        # Removing 'x1' moves the last node ('low', 3) into slot 4, under
        # 'x' (10), so it has to swim back up.
        pq = IndexedBinaryHeapMinPQ[str]()
        for item, prio in [("root", 0), ("x", 10), ("y", 1), ("x1", 11),
                           ("x2", 12), ("y1", 2), ("low", 3)]:
            pq.add(item, prio)
        pq.remove("x1")
        pq.validate()
        self.assertEqual(pq.remove_min_many(6), ["root", "y", "y1", "low", "x", "x2"])

    def test_remove_only_element(self):
        pq = IndexedBinaryHeapMinPQ({"solo": 1.0})
        pq.remove("solo")
        self.assertTrue(pq.is_empty())
        self.assertEqual(pq._heap, [None])
        self.assertEqual(pq._index, {})

    # ------------------------------------------------------------------
    #  Bulk construction
    # ------------------------------------------------------------------
    def test_heapify_from_mapping(self):
        data = {i: float(100 - i) for i in range(100)}
        pq = IndexedBinaryHeapMinPQ(data)
        pq.validate()
        self.assertEqual(pq.size(), 100)
        self.assertEqual(pq.peek_min(), 99)
        self.assertEqual(pq.remove_min_many(100), list(range(99, -1, -1)))

    def test_heapify_duplicate_leaves_queue_empty(self):
        pq = IndexedBinaryHeapMinPQ[str]()
        with self.assertRaises(DuplicateElementError):
            pq.add_all([("a", 1), ("b", 2), ("a", 3)])
        self.assertTrue(pq.is_empty())
        self.assertEqual(pq._index, {})

    def test_add_all_on_non_empty_queue(self):
        pq = IndexedBinaryHeapMinPQ({"a": 5})
        pq.add_all({"b": 1, "c": 7})
        pq.validate()
        with self.assertRaises(DuplicateElementError):
            pq.add_all([("d", 0), ("a", 1)])
        # Pairs before the duplicate were added one by one.
        self.assertIn("d", pq)
        self.assertEqual(pq.get_priority("a"), 5.0)

    # ------------------------------------------------------------------
    #  Validation
    # ------------------------------------------------------------------
    def test_validate_detects_corruption(self):
        pq = IndexedBinaryHeapMinPQ({k: v for v, k in enumerate("abcdefg")})
        pq.validate()

        # Break heap order behind the queue's back.
        pq._heap[1].priority = 100.0
        with self.assertRaises(AssertionError):
            pq.validate()
        pq._heap[1].priority = 0.0
        pq.validate()

        # Break the reverse index.
        pq._index["a"], pq._index["b"] = pq._index["b"], pq._index["a"]
        with self.assertRaises(AssertionError):
            pq.validate()

    # ------------------------------------------------------------------
    #  Random operations
    # ------------------------------------------------------------------
    def test_random_operations_and_internal_validation(self):
        rng = random.Random(0)
        pq = IndexedBinaryHeapMinPQ[int]()
        reference = {}  # item -> priority

        for _ in range(5_000):
            size_before = pq.size()
            op_type = rng.choices(
                ["add", "remove_min", "change", "remove"],
                weights=[0.4, 0.3, 0.2, 0.1],
            )[0]

            if op_type == "add" or not reference:
                while True:
                    candidate = rng.randrange(500)
                    if candidate not in reference:
                        break
                prio = rng.uniform(-1000, 1000)
                pq.add(candidate, prio)
                reference[candidate] = prio
                self.assertEqual(pq.size(), size_before + 1)

            elif op_type == "remove_min":
                popped = pq.remove_min()
                self.assertEqual(reference[popped], min(reference.values()))
                del reference[popped]
                self.assertEqual(pq.size(), size_before - 1)

            elif op_type == "change":
                item = rng.choice(list(reference))
                prio = rng.uniform(-1000, 1000)
                pq.change_priority(item, prio)
                reference[item] = prio
                self.assertEqual(pq.size(), size_before)

            else:
                item = rng.choice(list(reference))
                pq.remove(item)
                del reference[item]

            self.assertHeapOrdered(pq)
            self.assertIndexConsistent(pq)

        self.assertEqual(set(pq), set(reference))
        remaining = sorted(reference.values())
        drained = []
        while pq:
            drained.append(pq.get_priority(pq.peek_min()))
            pq.remove_min()
        self.assertEqual(drained, remaining)


if __name__ == "__main__":
    unittest.main(verbosity=2)
