"""
Tests for the bounded task runner.
"""

import threading
import time
import unittest

from iconbuild.utils.thread_manager import BoundedTaskRunner


class TestBoundedTaskRunner(unittest.TestCase):
    """Test ordered concurrent execution."""

    def test_results_in_input_order(self):
        """Test that late finishers do not reorder results."""
        runner = BoundedTaskRunner(max_workers=4)

        def task(i):
            time.sleep(0.01 * (5 - i % 5))
            return i * 2

        self.assertEqual(runner.map_ordered(task, list(range(12))), [i * 2 for i in range(12)])

    def test_concurrency_bounded(self):
        """Test that no more than max_workers tasks run at once."""
        runner = BoundedTaskRunner(max_workers=2)
        lock = threading.Lock()
        state = {"active": 0, "peak": 0}

        def task(_):
            with lock:
                state["active"] += 1
                state["peak"] = max(state["peak"], state["active"])
            time.sleep(0.02)
            with lock:
                state["active"] -= 1

        runner.map_ordered(task, list(range(8)))
        self.assertLessEqual(state["peak"], 2)

    def test_first_error_propagates(self):
        """Test that a failing task fails the whole map."""
        runner = BoundedTaskRunner(max_workers=2)

        def task(i):
            if i == 3:
                raise RuntimeError("task 3 failed")
            return i

        with self.assertRaises(RuntimeError) as ctx:
            runner.map_ordered(task, list(range(6)))
        self.assertIn("task 3", str(ctx.exception))

    def test_pending_tasks_cancelled_after_error(self):
        """Test that tasks not yet started are dropped after a failure."""
        runner = BoundedTaskRunner(max_workers=1)
        started = []

        def task(i):
            started.append(i)
            if i == 0:
                raise ValueError("boom")
            time.sleep(0.01)
            return i

        with self.assertRaises(ValueError):
            runner.map_ordered(task, list(range(50)))
        self.assertLess(len(started), 50)

    def test_empty_input(self):
        """Test that no tasks means no pool."""
        self.assertEqual(BoundedTaskRunner().map_ordered(lambda x: x, []), [])

    def test_invalid_pool_size(self):
        """Test that a zero-sized pool is rejected."""
        with self.assertRaises(ValueError):
            BoundedTaskRunner(max_workers=0)
