"""
Trace tests for the four sort generators.

Exact snapshot sequences are checked on small inputs; larger random
inputs only check that the result is a sorted permutation.
"""

import random
import unittest

from sorts import REGISTRY, get_algorithm, list_algorithms
from sorts.step import StepKind
from tests.helpers import capture_run


def trace(rec):
    """(kind, primary, secondary) for every stepped snapshot."""
    return [(s.kind, s.primary, s.secondary) for s in rec.steps]


class TestRegistry(unittest.TestCase):

    def test_four_sorts_in_menu_order(self):
        self.assertEqual([a.key for a in list_algorithms()], ["bubble", "selection", "insertion", "quick"])

    def test_unknown_key(self):
        self.assertIsNone(get_algorithm("bogo"))


class TestAllSortsSortCorrectly(unittest.TestCase):

    def test_random_inputs(self):
        rng = random.Random(1234)
        for key in REGISTRY:
            for n in (0, 1, 2, 5, 13, 50):
                values = [rng.randint(-5, 20) for _ in range(n)]
                with self.subTest(key=key, values=values):
                    model, rec = capture_run(key, values)
                    self.assertEqual(model.values, sorted(values))
                    self.assertTrue(rec.final.is_final)
                    self.assertEqual(list(rec.final.values), sorted(values))

    def test_all_equal_values(self):
        for key in REGISTRY:
            with self.subTest(key=key):
                model, _ = capture_run(key, [4, 4, 4, 4, 4])
                self.assertEqual(model.values, [4, 4, 4, 4, 4])

    def test_step_numbers_are_consecutive(self):
        for key in REGISTRY:
            with self.subTest(key=key):
                _, rec = capture_run(key, [9, 2, 7, 1, 8, 3, 3, 5])
                self.assertEqual([s.step_number for s in rec.steps], list(range(len(rec.steps))))

    def test_trace_is_deterministic(self):
        values = [6, 1, 5, 2, 4, 3]
        for key in REGISTRY:
            with self.subTest(key=key):
                _, first = capture_run(key, values)
                _, second = capture_run(key, values)
                self.assertEqual(first.snapshots, second.snapshots)


class TestBubbleSort(unittest.TestCase):

    def test_three_descending(self):
        model, rec = capture_run("bubble", [3, 2, 1])
        self.assertEqual(model.values, [1, 2, 3])
        self.assertEqual(trace(rec), [
            (StepKind.COMPARE, 0, 1), (StepKind.SWAP, 0, 1),
            (StepKind.COMPARE, 1, 2), (StepKind.SWAP, 1, 2),
            (StepKind.COMPARE, 0, 1), (StepKind.SWAP, 0, 1),
        ])
        self.assertEqual(len(rec.snapshots), 7)

    def test_compare_frame_precedes_swap(self):
        _, rec = capture_run("bubble", [3, 2, 1])
        self.assertEqual(rec.snapshots[0].values, (3, 2, 1))
        self.assertEqual(rec.snapshots[1].values, (2, 3, 1))

    def test_descending_emits_two_frames_per_comparison(self):
        for n in (5, 10):
            with self.subTest(n=n):
                _, rec = capture_run("bubble", list(range(n, 0, -1)))
                self.assertEqual(len(rec.steps), n * (n - 1))

    def test_sorted_input_only_compares(self):
        _, rec = capture_run("bubble", [1, 2, 3, 4, 5])
        self.assertEqual(rec.count(StepKind.SWAP), 0)
        self.assertEqual(len(rec.steps), 10)


class TestSelectionSort(unittest.TestCase):

    def test_first_pass_shows_pre_update_minimum(self):
        _, rec = capture_run("selection", [5, 3, 4, 1, 2])
        self.assertEqual(trace(rec)[:6], [
            (StepKind.SELECT, 0, 0),
            (StepKind.COMPARE, 1, 0),
            (StepKind.COMPARE, 2, 1),
            (StepKind.COMPARE, 3, 1),
            (StepKind.COMPARE, 4, 3),
            (StepKind.SWAP, 0, 3),
        ])

    def test_swaps_match_moved_minimums(self):
        model, rec = capture_run("selection", [5, 3, 4, 1, 2])
        self.assertEqual(model.values, [1, 2, 3, 4, 5])
        self.assertEqual(rec.count(StepKind.SWAP), 4)
        self.assertEqual(len(rec.steps), 18)

    def test_sorted_input_never_swaps(self):
        _, rec = capture_run("selection", [1, 2, 3])
        self.assertEqual(rec.count(StepKind.SWAP), 0)
        self.assertEqual(len(rec.steps), 5)


class TestInsertionSort(unittest.TestCase):

    def test_sorted_input_never_shifts(self):
        _, rec = capture_run("insertion", [1, 2, 3, 4, 5])
        self.assertEqual(rec.count(StepKind.SHIFT), 0)
        self.assertEqual(rec.count(StepKind.PICK), 4)
        self.assertEqual(len(rec.snapshots), 9)

    def test_shift_then_write(self):
        model, rec = capture_run("insertion", [2, 1])
        self.assertEqual(model.values, [1, 2])
        self.assertEqual(trace(rec), [
            (StepKind.PICK, 1, None),
            (StepKind.SHIFT, 0, 1),
            (StepKind.WRITE, 0, None),
        ])
        self.assertEqual(rec.steps[1].values, (2, 2))


class TestQuickSort(unittest.TestCase):

    def test_trivial_inputs_skip_partitioning(self):
        for values in ([], [7]):
            with self.subTest(values=values):
                _, rec = capture_run("quick", values)
                self.assertEqual(rec.steps, [])
                self.assertEqual(len(rec.snapshots), 1)
                self.assertTrue(rec.snapshots[0].is_final)

    def test_lomuto_partition(self):
        model, rec = capture_run("quick", [3, 1, 2])
        self.assertEqual(model.values, [1, 2, 3])
        self.assertEqual(trace(rec), [
            (StepKind.COMPARE, 0, 2),
            (StepKind.COMPARE, 1, 2),
            (StepKind.SWAP, 0, 1),
            (StepKind.PIVOT, 1, 2),
        ])

    def test_counter_shared_across_recursion(self):
        _, rec = capture_run("quick", [8, 3, 9, 1, 7, 2, 6, 4, 5])
        self.assertGreater(rec.count(StepKind.PIVOT), 1)
        self.assertEqual(rec.steps[-1].step_number, len(rec.steps) - 1)


if __name__ == "__main__":
    unittest.main()
