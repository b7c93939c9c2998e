import unittest

import numpy as np

from sgdopt.domain._errors import BatchSizeError
from sgdopt.infrastructure.batching import RandomBatch


def _rng(seed: int = 0) -> np.random.Generator:
    return np.random.default_rng(seed)


class TestRandomBatchWithoutReplacement(unittest.TestCase):
    def test_batches_are_distinct_and_in_range(self):
        b = RandomBatch(4, replacement=False, rng=_rng())
        b.init(10)
        for _ in range(200):
            idx = b.batch()
            self.assertEqual(len(idx), 4)
            self.assertEqual(len(set(idx.tolist())), 4)
            self.assertTrue(np.all((idx >= 0) & (idx < 10)))

    def test_full_size_batch_is_permutation(self):
        b = RandomBatch(6, rng=_rng(1))
        b.init(6)
        for _ in range(10):
            self.assertEqual(sorted(b.batch().tolist()), list(range(6)))

    def test_batch_larger_than_dataset_raises(self):
        b = RandomBatch(11, replacement=False, rng=_rng())
        with self.assertRaises(BatchSizeError) as ctx:
            b.init(10)
        self.assertEqual(ctx.exception.batch_size, 11)
        self.assertEqual(ctx.exception.dataset_size, 10)

    def test_every_index_is_reachable(self):
        b = RandomBatch(2, rng=_rng(2))
        b.init(5)
        counts = np.zeros(5, dtype=int)
        for _ in range(5000):
            for i in b.batch():
                counts[i] += 1
        # Each index appears in 2/5 of the batches.
        np.testing.assert_allclose(counts / 5000.0, np.full(5, 0.4), atol=0.03)


class TestRandomBatchWithReplacement(unittest.TestCase):
    def test_indices_in_range_and_duplicates_allowed(self):
        b = RandomBatch(50, replacement=True, rng=_rng())
        b.init(3)
        idx = b.batch()
        self.assertEqual(len(idx), 50)
        self.assertTrue(np.all((idx >= 0) & (idx < 3)))
        self.assertLess(len(set(idx.tolist())), 50)

    def test_empirical_distribution_is_uniform(self):
        b = RandomBatch(100, replacement=True, rng=_rng(3))
        b.init(4)
        counts = np.zeros(4, dtype=int)
        for _ in range(400):
            counts += np.bincount(b.batch(), minlength=4)
        np.testing.assert_allclose(counts / counts.sum(), np.full(4, 0.25), atol=0.01)

    def test_batch_larger_than_dataset_is_allowed(self):
        b = RandomBatch(20, replacement=True, rng=_rng())
        b.init(2)
        self.assertEqual(len(b.batch()), 20)


class TestRandomBatchBuffer(unittest.TestCase):
    def test_same_read_only_buffer_is_returned(self):
        b = RandomBatch(3, rng=_rng())
        b.init(100)
        first = b.batch()
        snapshot = first.copy()
        second = b.batch()
        self.assertIs(first, second)
        self.assertFalse(second.flags.writeable)
        with self.assertRaises(ValueError):
            second[0] = 1
        # The earlier result was overwritten in place.
        self.assertEqual(first.tolist(), second.tolist())
        self.assertEqual(len(snapshot), 3)

    def test_same_seed_gives_same_batches(self):
        a = RandomBatch(5, rng=_rng(7))
        b = RandomBatch(5, rng=_rng(7))
        a.init(50)
        b.init(50)
        for _ in range(10):
            np.testing.assert_array_equal(a.batch(), b.batch())

    def test_batch_before_init_raises(self):
        with self.assertRaises(RuntimeError):
            RandomBatch(3, rng=_rng()).batch()

    def test_invalid_arguments_raise(self):
        with self.assertRaises(ValueError):
            RandomBatch(0, rng=_rng())
        with self.assertRaises(ValueError):
            RandomBatch(-2, rng=_rng())
        with self.assertRaises(TypeError):
            RandomBatch(2, rng=None)  # type: ignore[arg-type]
        b = RandomBatch(2, rng=_rng())
        with self.assertRaises(ValueError):
            b.init(0)


if __name__ == "__main__":
    unittest.main()
