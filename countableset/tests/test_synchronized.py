import threading
from unittest import TestCase
from countableset import SynchronizedCountableSet


class TestSynchronizedCountableSet(TestCase):
    THREADS = 8
    ITERATIONS = 2000

    def run_in_threads(self, target, *args):
        barrier = threading.Barrier(self.THREADS)

        def worker():
            barrier.wait()
            target(*args)
        threads = [threading.Thread(target=worker) for _ in range(self.THREADS)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

    def test_concurrent_add(self):
        cs = SynchronizedCountableSet[int]()

        def add_many():
            for i in range(self.ITERATIONS):
                cs.add(i % 10)
        self.run_in_threads(add_many)
        self.assertEqual(cs.size(), 10)
        self.assertEqual(cs.length(), self.THREADS * self.ITERATIONS)
        self.assertTrue(all(cs.get(i) == self.THREADS * self.ITERATIONS // 10 for i in range(10)))

    def test_concurrent_add_and_remove(self):
        cs = SynchronizedCountableSet[str]()
        cs.add_with_count('x', self.THREADS * self.ITERATIONS)
        removed = []

        def add_then_remove():
            for _ in range(self.ITERATIONS):
                cs.add('y')
                removed.append(cs.remove('x'))
        self.run_in_threads(add_then_remove)
        self.assertEqual(len(removed), self.THREADS * self.ITERATIONS)
        self.assertTrue(all(removed))
        self.assertNotIn('x', cs)
        self.assertEqual(cs.get('y'), self.THREADS * self.ITERATIONS)
        self.assertEqual(cs.length(), self.THREADS * self.ITERATIONS)

    def test_add_all_is_atomic(self):
        cs = SynchronizedCountableSet[int]()
        batch = list(range(100))
        seen_lengths = []

        def add_batches():
            for _ in range(20):
                cs.add_all(batch)
                seen_lengths.append(cs.length() % len(batch))
        self.run_in_threads(add_batches)
        self.assertEqual(cs.length(), self.THREADS * 20 * len(batch))
        self.assertTrue(all(length == 0 for length in seen_lengths))

    def test_iteration_while_mutating(self):
        cs = SynchronizedCountableSet[int](range(50))
        stop = threading.Event()

        def mutate():
            i = 50
            while not stop.is_set():
                cs.add(i)
                cs.delete(i - 50)
                i += 1
        mutator = threading.Thread(target=mutate)
        mutator.start()
        try:
            for _ in range(200):
                snapshot = list(cs)
                self.assertEqual(len(snapshot), len(set(snapshot)))
        finally:
            stop.set()
            mutator.join()
        self.assertEqual(cs.size(), 50)
        self.assertEqual(cs.length(), 50)
