from unittest import TestCase

from .scalar_tst_functions import SQRT2, f_sqrt2


# ======================================================================

class TestBisection(TestCase):
    def test_bisection(self):
        from pyzero.solve.bisection import Bisection

        # Check normal operation.  Width 2 halves below 1e-8 after 28 its.
        solver = Bisection(f_sqrt2, 0.0, 2.0, tol=1e-8)
        res = solver.solve_full()
        self.assertTrue(res.converged)
        self.assertEqual(res.iterations, 28)
        self.assertEqual(res.fevals, 2 + 28)
        self.assertAlmostEqual(res.root, SQRT2, delta=1e-6)
        self.assertEqual(solver.solve(), res.root)  # Repeatable.

        # Interval may be given in either order.
        x = Bisection(f_sqrt2, 2.0, 0.0, tol=1e-8).solve()
        self.assertAlmostEqual(x, SQRT2, delta=1e-6)

        # Check failure to converge is flagged.
        res = Bisection(f_sqrt2, 0.0, 2.0, tol=1e-8, max_it=5).solve_full()
        self.assertFalse(res.converged)
        self.assertEqual(res.flag, 1)
        self.assertEqual(res.iterations, 5)

    def test_no_iterations(self):
        from pyzero.solve.bisection import Bisection

        res = Bisection(f_sqrt2, 0.0, 2.0, tol=1e-8, max_it=0).solve_full()
        self.assertEqual(res.root, 1.0)
        self.assertFalse(res.converged)
        self.assertEqual(res.iterations, 0)

    def test_exact_roots(self):
        from pyzero.solve.bisection import Bisection

        # Solution in the centre takes one iteration.
        res = Bisection(lambda x: (2 * x - 1) * (x - 3), 0, 1,
                        tol=1e-8).solve_full()
        self.assertEqual(res.root, 0.5)
        self.assertEqual(res.iterations, 1)

        # Root at an end takes none.
        res = Bisection(lambda x: x, 0.0, 1.0, tol=1e-8).solve_full()
        self.assertEqual(res.root, 0.0)
        self.assertTrue(res.converged)
        self.assertEqual(res.iterations, 0)

    def test_bracket_narrowing(self):
        from pyzero.solve.bisection import Bisection

        solver = Bisection(f_sqrt2, 0.0, 2.0, tol=1e-8)
        solver.solve()
        widths = [abs(b - a) for a, b in solver.history]
        self.assertEqual(len(widths), 28)
        for w_prev, w in zip([2.0] + widths[:-1], widths):
            self.assertEqual(w, 0.5 * w_prev)
        for a, b in solver.history:
            self.assertLessEqual(f_sqrt2(a) * f_sqrt2(b), 0)
