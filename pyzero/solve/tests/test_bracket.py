import math
from unittest import TestCase

from .scalar_tst_functions import f_no_root, f_pm2


# ======================================================================

class TestBracketInterval(TestCase):
    def test_bracket_interval(self):
        from pyzero.solve.bracket import bracket_interval

        # Search from x = 15 walks left until it steps over x = 2.
        lo, hi, found, steps, fevals = bracket_interval(f_pm2, 15.0, 0.01)
        self.assertTrue(found)
        self.assertEqual(steps, 51)
        self.assertEqual(fevals, 1 + 2 * 51)
        self.assertAlmostEqual(lo, 1.74, places=9)
        self.assertAlmostEqual(hi, 2.25, places=9)
        self.assertLessEqual(f_pm2(lo) * f_pm2(hi), 0)

        # Root to the right of the seed.
        lo, hi, found, steps, _ = bracket_interval(lambda x: x - 0.25,
                                                   0.0, 0.1)
        self.assertTrue(found)
        self.assertEqual(steps, 2)
        self.assertTrue(lo <= 0.25 <= hi)

        # Only the magnitude of h is used.
        res_neg = bracket_interval(f_pm2, 15.0, -0.01)
        self.assertEqual(res_neg.steps, 51)
        self.assertAlmostEqual(res_neg.lo, 1.74, places=9)

    def test_seed_is_root(self):
        from pyzero.solve.bracket import bracket_interval

        res = bracket_interval(f_pm2, 2.0, 0.5)
        self.assertEqual((res.lo, res.hi, res.found), (2.0, 2.0, True))
        self.assertEqual(res.steps, 0)

    def test_failure(self):
        from pyzero.solve.bracket import bracket_interval

        # No root anywhere.
        lo, hi, found, steps, fevals = bracket_interval(f_no_root, 0.0, 0.1,
                                                        max_iter=10)
        self.assertFalse(found)
        self.assertTrue(math.isnan(lo) and math.isnan(hi))
        self.assertEqual(steps, 10)
        self.assertEqual(fevals, 21)

        # Budget too small to reach the roots of x**2 - 4.
        self.assertFalse(bracket_interval(f_pm2, 15.0, 0.01, 10).found)
        self.assertFalse(bracket_interval(f_pm2, 15.0, 0.01, 0).found)

        # Zero / non-finite step fails without evaluating f.
        calls = []

        def f_counted(x):
            calls.append(x)
            return f_pm2(x)

        for h in (0.0, math.inf, math.nan):
            res = bracket_interval(f_counted, 15.0, h)
            self.assertFalse(res.found)
            self.assertEqual(res.fevals, 0)
        self.assertEqual(calls, [])

        with self.assertRaises(ValueError):
            bracket_interval(f_pm2, 15.0, 0.01, max_iter=-1)

    def test_log(self):
        from pyzero.solve.bracket import bracket_interval

        messages = []
        bracket_interval(f_pm2, 15.0, 0.01, log=messages.append)
        self.assertEqual(len(messages), 51)  # 50 steps + found.
        self.assertIn("found", messages[-1])
