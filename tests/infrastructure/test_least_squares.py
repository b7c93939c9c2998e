import unittest

import numpy as np

from sgdopt.infrastructure.problems import LeastSquares, make_least_squares


class TestLeastSquares(unittest.TestCase):
    def setUp(self):
        self.ls = make_least_squares(
            [0.7, 0.8], noise=0.01, n_data=30, rng=np.random.default_rng(4)
        )

    def test_problem_view(self):
        p = self.ls.problem()
        self.assertEqual(p.dimension, 2)
        self.assertEqual(p.size, 30)

    def test_func_is_squared_residual(self):
        params = np.array([0.1, -0.2])
        batch = np.array([0, 5, 5])
        dst = np.zeros(3)
        self.ls.func(dst, params, batch)
        want = (self.ls.x[batch] @ params - self.ls.y[batch]) ** 2
        np.testing.assert_allclose(dst, want)

    def test_grad_matches_finite_differences(self):
        params = np.array([0.3, -0.4])
        batch = np.array([2, 7])
        dst = np.zeros((2, 2))
        self.ls.grad(dst, params, batch)

        h = 1e-6
        for j in range(2):
            e = np.zeros(2)
            e[j] = h
            fp, fm = np.zeros(2), np.zeros(2)
            self.ls.func(fp, params + e, batch)
            self.ls.func(fm, params - e, batch)
            np.testing.assert_allclose(dst[:, j], (fp - fm) / (2 * h), rtol=1e-5, atol=1e-8)

    def test_optimal_recovers_noise_free_parameters(self):
        ls = make_least_squares(
            [0.7, 0.8], noise=0.0, n_data=20, rng=np.random.default_rng(5), offset=True
        )
        np.testing.assert_allclose(ls.optimal(), [0.7, 0.8], atol=1e-10)
        np.testing.assert_array_equal(ls.x[:, 0], np.ones(20))

    def test_shape_validation(self):
        with self.assertRaises(ValueError):
            LeastSquares(x=np.zeros(3), y=np.zeros(3))
        with self.assertRaises(ValueError):
            LeastSquares(x=np.zeros((3, 2)), y=np.zeros(2))
        with self.assertRaises(ValueError):
            make_least_squares([1.0], noise=-1.0, n_data=5, rng=np.random.default_rng(0))


if __name__ == "__main__":
    unittest.main()
