import math
from unittest import TestCase

from .scalar_tst_functions import f_no_root, f_pm2, f_sqrt2


# ======================================================================

def _interval_solvers(f, a, b, **kwargs):
    from pyzero.solve import Bisection, Brent, RegulaFalsi, Secant

    return [Bisection(f, a, b, 1e-8, **kwargs),
            RegulaFalsi(f, a, b, 1e-8, 1e-10, **kwargs),
            Secant(f, a, b, 1e-8, 1e-10, 50, **kwargs),
            Brent(f, a, b, 1e-8, 50, **kwargs)]


class TestIntervalRepair(TestCase):
    def test_valid_interval_unchanged(self):
        for solver in _interval_solvers(f_sqrt2, 0.0, 2.0):
            self.assertIsNone(solver.repair)
            self.assertEqual((solver.a, solver.b), (0.0, 2.0))
            self.assertTrue(solver.bracket_found)

    def test_repaired_interval(self):
        for solver in _interval_solvers(f_pm2, 10.0, 20.0):
            with self.subTest(solver=solver.name):
                self.assertTrue(solver.repair.found)
                self.assertEqual(solver.x1, 15.0)
                self.assertLessEqual(f_pm2(solver.a) * f_pm2(solver.b), 0)
                self.assertTrue(solver.a <= 2.0 <= solver.b)
                self.assertAlmostEqual(solver.solve(), 2.0, places=6)

    def test_unrepairable_interval(self):
        # No root at all.
        for solver in _interval_solvers(f_no_root, 10.0, 20.0):
            with self.subTest(solver=solver.name):
                self.assertFalse(solver.bracket_found)
                self.assertTrue(math.isnan(solver.a))
                self.assertTrue(math.isnan(solver.b))

                res = solver.solve_full()
                self.assertTrue(math.isnan(solver.solve()))
                self.assertFalse(res.converged)
                self.assertEqual(res.flag, 2)
                self.assertEqual(res.iterations, 0)
                self.assertEqual(res.fevals, 0)

        # Roots exist but the search budget cannot reach them.
        for solver in _interval_solvers(f_pm2, 10.0, 20.0, max_iter=10):
            self.assertTrue(math.isnan(solver.solve()))

        # A zero step always fails the search.
        for solver in _interval_solvers(f_pm2, 10.0, 20.0, h_interval=0.0):
            self.assertFalse(solver.repair.found)
            self.assertTrue(math.isnan(solver.solve()))

    def test_nan_supplied(self):
        from pyzero.solve import Bisection

        solver = Bisection(f_sqrt2, math.nan, 2.0, 1e-8)
        self.assertFalse(solver.bracket_found)
        self.assertTrue(math.isnan(solver.solve()))

    def test_repair_messages(self):
        from pyzero.solve import Brent

        messages = []
        Brent(f_no_root, 10.0, 20.0, 1e-8, 50, max_iter=5,
              log=messages.append)
        self.assertIn("not valid", messages[0])
        self.assertIn("[nan, nan]", messages[-1])

    def test_illegal_arguments(self):
        from pyzero.solve import Bisection, RegulaFalsi

        with self.assertRaises(ValueError):
            Bisection(f_sqrt2, 0.0, 2.0, -1e-8)
        with self.assertRaises(ValueError):
            Bisection(f_sqrt2, 0.0, 2.0, math.nan)
        with self.assertRaises(ValueError):
            Bisection(f_sqrt2, 0.0, 2.0, 1e-8, max_it=-1)
        with self.assertRaises(ValueError):
            Bisection(2.0, 0.0, 2.0, 1e-8)
        with self.assertRaises(ValueError):
            RegulaFalsi(f_sqrt2, 0.0, 2.0, 1e-8, -1.0)
