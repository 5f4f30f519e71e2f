import math
from unittest import TestCase


# ======================================================================

class TestRootResult(TestCase):
    def test_value(self):
        from pyzero.solve.results import (CONVERGED, MAX_ITERATIONS,
                                          NO_BRACKET, RootResult,
                                          ZERO_DENOMINATOR, ZERO_DERIVATIVE)

        res = RootResult(1.5, True, 4, 6, CONVERGED)
        self.assertEqual(res.value, 1.5)

        # Out of iterations keeps the best estimate.
        res = RootResult(1.5, False, 4, 6, MAX_ITERATIONS)
        self.assertEqual(res.value, 1.5)

        for flag in (NO_BRACKET, ZERO_DERIVATIVE, ZERO_DENOMINATOR):
            res = RootResult(1.5, False, 4, 6, flag)
            self.assertTrue(math.isnan(res.value))

    def test_raise_if_failed(self):
        from pyzero.solve.exception import SolverError
        from pyzero.solve.results import RootResult, ZERO_DERIVATIVE

        self.assertEqual(RootResult(1.5, True, 4, 6).raise_if_failed(), 1.5)

        res = RootResult(0.0, False, 0, 1, ZERO_DERIVATIVE,
                         "Derivative was zero.")
        with self.assertRaises(SolverError) as cm:
            res.raise_if_failed('Newton')

        err = cm.exception
        self.assertEqual(err.flag, ZERO_DERIVATIVE)
        self.assertEqual(err.root, 0.0)
        self.assertIn("Newton failed to converge", str(err))
        self.assertIn("details -> Derivative was zero.", str(err))
