import unittest

import numpy as np

from sgdopt.infrastructure._buffers import resize_matrix, resize_zero


class TestResizeZero(unittest.TestCase):
    def test_allocates_when_none(self):
        x = resize_zero(None, 3)
        np.testing.assert_array_equal(x, np.zeros(3))
        self.assertEqual(x.dtype, np.float64)

    def test_reuses_and_zeroes_existing_storage(self):
        base = np.arange(5, dtype=np.float64)
        x = resize_zero(base, 3)
        self.assertTrue(np.shares_memory(x, base))
        np.testing.assert_array_equal(x, np.zeros(3))

    def test_grows_when_too_small(self):
        base = np.ones(2)
        x = resize_zero(base, 4)
        self.assertFalse(np.shares_memory(x, base))
        self.assertEqual(x.shape, (4,))


class TestResizeMatrix(unittest.TestCase):
    def test_reuses_matching_shape(self):
        m = np.ones((2, 3))
        self.assertIs(resize_matrix(m, 2, 3), m)

    def test_allocates_on_shape_change(self):
        m = np.ones((2, 3))
        out = resize_matrix(m, 4, 3)
        self.assertEqual(out.shape, (4, 3))
        self.assertTrue(out.flags.c_contiguous)

    def test_allocates_when_none(self):
        self.assertEqual(resize_matrix(None, 1, 2).shape, (1, 2))


if __name__ == "__main__":
    unittest.main()
