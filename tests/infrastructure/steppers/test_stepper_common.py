import unittest

import numpy as np

from sgdopt.domain._errors import StepperNotInitializedError
from sgdopt.domain._settings import DEFAULT_STEP_TOLERANCE
from sgdopt.infrastructure.steppers import (
    Adadelta,
    Adagrad,
    Adam,
    Anneal,
    Momentum,
    Nesterov,
    RMSProp,
)

ALL_STEPPERS = (Adadelta, Adagrad, Adam, Anneal, Momentum, Nesterov, RMSProp)


class TestStepperCommonBehavior(unittest.TestCase):
    def test_zero_gradient_converges_immediately(self):
        for cls in ALL_STEPPERS:
            with self.subTest(stepper=cls.__name__):
                s = cls()
                s.init(4)
                out = np.full(4, 99.0)
                s.step(out, np.zeros(4))
                self.assertLess(np.linalg.norm(out), DEFAULT_STEP_TOLERANCE)

    def test_step_length_matches_dimension(self):
        rng = np.random.default_rng(0)
        for cls in ALL_STEPPERS:
            for dim in (1, 3, 7):
                with self.subTest(stepper=cls.__name__, dim=dim):
                    s = cls()
                    s.init(dim)
                    out = np.zeros(dim)
                    for _ in range(20):
                        s.step(out, rng.standard_normal(dim))
                        self.assertEqual(out.shape, (dim,))
                        self.assertTrue(np.all(np.isfinite(out)))

    def test_step_before_init_raises(self):
        for cls in ALL_STEPPERS:
            with self.subTest(stepper=cls.__name__):
                with self.assertRaises(StepperNotInitializedError):
                    cls().step(np.zeros(2), np.zeros(2))

    def test_shape_mismatch_raises(self):
        for cls in ALL_STEPPERS:
            with self.subTest(stepper=cls.__name__):
                s = cls()
                s.init(3)
                with self.assertRaises(ValueError):
                    s.step(np.zeros(3), np.zeros(2))
                with self.assertRaises(ValueError):
                    s.step(np.zeros(2), np.zeros(3))

    def test_non_positive_dimension_raises(self):
        for cls in ALL_STEPPERS:
            with self.subTest(stepper=cls.__name__):
                with self.assertRaises(ValueError):
                    cls().init(0)

    def test_reinit_matches_fresh_instance(self):
        rng = np.random.default_rng(1)
        grads = [rng.standard_normal(3) for _ in range(5)]
        for cls in ALL_STEPPERS:
            with self.subTest(stepper=cls.__name__):
                used = cls()
                used.init(3)
                out = np.zeros(3)
                for g in grads:
                    used.step(out, g)

                fresh = cls()
                fresh.init(3)
                used.init(3)
                out_used, out_fresh = np.zeros(3), np.zeros(3)
                for g in grads:
                    used.step(out_used, g)
                    fresh.step(out_fresh, g)
                    np.testing.assert_array_equal(out_used, out_fresh)

    def test_reinit_with_new_dimension(self):
        for cls in ALL_STEPPERS:
            with self.subTest(stepper=cls.__name__):
                s = cls()
                s.init(5)
                s.step(np.zeros(5), np.ones(5))
                s.init(2)
                out = np.zeros(2)
                s.step(out, np.ones(2))
                self.assertEqual(out.shape, (2,))

    def test_step_points_downhill(self):
        # First step for a positive gradient must decrease every parameter.
        for cls in ALL_STEPPERS:
            with self.subTest(stepper=cls.__name__):
                s = cls()
                s.init(2)
                out = np.zeros(2)
                s.step(out, np.array([1.0, 0.5]))
                self.assertTrue(np.all(out < 0.0))


if __name__ == "__main__":
    unittest.main()
