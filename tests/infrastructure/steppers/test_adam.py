import math
import unittest

import numpy as np

from sgdopt.infrastructure.steppers import Adam


def _reference(grads, size=1e-3, b1=0.9, b2=0.999, eps=1e-8):
    m = 0.0
    v = 0.0
    steps = []
    for t, g in enumerate(grads, start=1):
        m = b1 * m + (1.0 - b1) * g
        v = b2 * v + (1.0 - b2) * g * g
        m_hat = m / (1.0 - b1**t)
        v_hat = v / (1.0 - b2**t)
        steps.append(-size * m_hat / (math.sqrt(v_hat) + eps))
    return steps


class TestAdam(unittest.TestCase):
    def test_first_step_is_bias_corrected(self):
        s = Adam()
        s.init(2)
        out = np.zeros(2)
        s.step(out, np.array([4.0, -0.5]))
        # m_hat = g, v_hat = g*g  ->  step = -size * g / (|g| + eps)
        np.testing.assert_allclose(
            out,
            [-1e-3 * 4.0 / (4.0 + 1e-8), 1e-3 * 0.5 / (0.5 + 1e-8)],
            rtol=1e-10,
        )

    def test_matches_scalar_reference(self):
        grads = [1.0, -0.3, 2.5, 0.0, 0.7, -1.1]
        s = Adam(size=0.05, mean_momentum=0.8, var_momentum=0.99, smooth=1e-6)
        s.init(1)
        out = np.zeros(1)
        want = _reference(grads, size=0.05, b1=0.8, b2=0.99, eps=1e-6)
        for g, w in zip(grads, want):
            s.step(out, np.array([g]))
            self.assertAlmostEqual(float(out[0]), w, places=12)

    def test_zero_hyperparameters_use_defaults(self):
        a = Adam(size=0.0, mean_momentum=0.0, var_momentum=0.0, smooth=0.0)
        a.init(1)
        out = np.zeros(1)
        grads = [1.0, 2.0, -1.0]
        for g, w in zip(grads, _reference(grads)):
            a.step(out, np.array([g]))
            self.assertAlmostEqual(float(out[0]), w, places=14)

    def test_init_resets_time_and_moments(self):
        s = Adam()
        s.init(1)
        out = np.zeros(1)
        for g in (3.0, -2.0, 1.0):
            s.step(out, np.array([g]))
        s.init(1)
        s.step(out, np.array([1.0]))
        self.assertAlmostEqual(float(out[0]), _reference([1.0])[0], places=14)

    def test_invalid_hyperparams_raise(self):
        with self.assertRaises(ValueError):
            Adam(size=-1e-3)
        with self.assertRaises(ValueError):
            Adam(mean_momentum=1.0)
        with self.assertRaises(ValueError):
            Adam(var_momentum=-0.5)
        with self.assertRaises(ValueError):
            Adam(smooth=-1.0)


if __name__ == "__main__":
    unittest.main()
