from __future__ import annotations

import numpy as np

from pyzero.solve.base import IntervalSolver
from pyzero.solve.results import CONVERGED, MAX_ITERATIONS, RootResult


# ======================================================================

class Bisection(IntervalSolver):
    r"""
    Approximate solution of :math:`f(x) = 0` on interval :math:`x \in
    [a, b]` by the bisection method.  The interval is halved each
    iteration, keeping the half over which :math:`f(x)` changes sign.
    Convergence is linear and guaranteed for a valid bracket.

    Stops when :math:`|b - a| <` `tol`, when the midpoint is an exact
    root or when `max_it` iterations are complete, returning the final
    midpoint.

    See `IntervalSolver` for parameters.

    Examples
    --------
    >>> x = Bisection(lambda x: x**2 - x - 1, 1.0, 2.0, tol=1e-6).solve()
    >>> abs(x - 1.618033988749895) < 1e-6
    True
    >>> Bisection(lambda x: (2*x - 1)*(x - 3), 0, 1, tol=1e-6).solve()
    0.5
    """
    name = 'Bisection'

    def _iterate(self) -> RootResult:
        start = self._start()
        if isinstance(start, RootResult):
            return start
        a, fa, b, fb = start

        it = 0
        while abs(b - a) >= self.tol:
            if it >= self.max_it:
                return self._finish(0.5 * (a + b), MAX_ITERATIONS, it)

            c = 0.5 * (a + b)
            fc = self._eval(c)
            it += 1

            if fc == 0:
                self._record(it, (c, c))
                return self._finish(c, CONVERGED, it)

            # Keep the half with the sign change.
            if np.sign(fa) == np.sign(fc):
                a, fa = c, fc
            else:
                b, fb = c, fc

            self._record(it, (a, b))

        return self._finish(0.5 * (a + b), CONVERGED, it)
