import math
from unittest import TestCase

from .scalar_tst_functions import SQRT2, f_flat_left, f_sqrt2


# ======================================================================

class TestSecant(TestCase):
    def test_secant(self):
        from pyzero.solve.secant import Secant

        solver = Secant(f_sqrt2, 0.0, 2.0, 1e-8, 1e-10, 50)
        res = solver.solve_full()
        self.assertTrue(res.converged)
        self.assertAlmostEqual(res.root, SQRT2, delta=1e-6)
        self.assertEqual(solver.history[0], 1.0)
        self.assertEqual(res.fevals, 2 + res.iterations)

    def test_zero_denominator(self):
        from pyzero.solve.secant import Secant

        # Second and third iterates both land on the flat part.
        solver = Secant(f_flat_left, 0.0, 2.0, 1e-8, 1e-10, 50)
        res = solver.solve_full()
        self.assertFalse(res.converged)
        self.assertEqual(res.flag, 4)
        self.assertEqual(res.iterations, 2)
        self.assertTrue(math.isfinite(res.root))
        self.assertTrue(math.isnan(solver.solve()))

    def test_budget(self):
        from pyzero.solve.secant import Secant

        res = Secant(f_sqrt2, 0.0, 2.0, 1e-8, 1e-10, 0).solve_full()
        self.assertEqual(res.root, 1.0)
        self.assertFalse(res.converged)
        self.assertEqual(res.iterations, 0)

        res = Secant(f_sqrt2, 0.0, 2.0, 1e-8, 1e-10, 1).solve_full()
        self.assertEqual(res.root, 1.0)
        self.assertFalse(res.converged)
        self.assertEqual(res.flag, 1)
        self.assertEqual(res.iterations, 1)
