from __future__ import annotations

import math
from collections.abc import Callable

import numpy as np

from pyzero.solve.base import DEFAULT_H_INTERVAL, IntervalSolver
from pyzero.solve.bracket import DEFAULT_MAX_ITER
from pyzero.solve.results import CONVERGED, MAX_ITERATIONS, RootResult
from pyzero.util.print_styles import LogSink

_EPS = np.finfo(float).eps


# ======================================================================

class Brent(IntervalSolver):
    r"""
    Brent's method, combining bisection, secant and inverse quadratic
    interpolation.  The bracket is never lost, so convergence is never
    slower than bisection, while near a simple root it is superlinear.

    Three points are carried between iterations:

        - `b`: Current best estimate, with :math:`|f(b)| \le |f(c)|`.
        - `c`: Other end of the bracket, :math:`f(b) f(c) \le 0`.
        - `a`: Previous value of `b`.

    Each iteration the method stops if :math:`f(b) = 0` or if the
    half-width :math:`m = (c - b)/2` satisfies :math:`|m| \le \delta`,
    where :math:`\delta = 2 \epsilon |b| + tol/2`.  Otherwise an
    interpolated step is tried (inverse quadratic if `a`, `b`, `c` are
    distinct, secant otherwise).  It is accepted only if it falls
    within the bracket and is smaller than half the step made two
    iterations earlier; if not, the iteration bisects.

    Parameters
    ----------
    max_it : int
        Maximum number of iterations.  If reached, the best estimate
        `b` is returned (not converged).
    f, a, b, tol, h_interval, max_iter, log :
        See `IntervalSolver`.

    References
    ----------
    .. [1] Brent, R. P. *Algorithms for Minimization Without
       Derivatives*, Prentice-Hall, 1973. Chapter 4.
    .. [2] Press, W. H.; Teukolsky, S. A.; Vetterling, W. T.; and
       Flannery, B. P. *Numerical Recipes: The Art of Scientific
       Computing*, 3rd ed. Cambridge University Press, 2007. Section
       9.3: "Van Wijngaarden-Dekker-Brent Method".

    Examples
    --------
    >>> x = Brent(lambda x: x**3 - 2*x - 5, 2, 3, tol=1e-12,
    ...           max_it=50).solve()
    >>> abs(x - 2.0945514815423265) < 1e-10
    True
    """
    name = 'Brent'

    def __init__(self, f: Callable[[float], float], a: float, b: float,
                 tol: float, max_it: int, *,
                 h_interval: float = DEFAULT_H_INTERVAL,
                 max_iter: int = DEFAULT_MAX_ITER, log: LogSink = None):
        super().__init__(f, a, b, tol, max_it=max_it,
                         h_interval=h_interval, max_iter=max_iter, log=log)

    def _iterate(self) -> RootResult:
        start = self._start()
        if isinstance(start, RootResult):
            return start
        a, fa, b, fb = start

        if self.max_it == 0:
            return self._finish(0.5 * (a + b), MAX_ITERATIONS, 0)

        c, fc = b, fb
        d = e = b - a
        it = 0
        while True:
            if np.sign(fb) == np.sign(fc):
                # Root lies between a and b: restart the bracket.
                c, fc = a, fa
                d = e = b - a

            if abs(fc) < abs(fb):
                # Keep b as the best estimate.
                a, b, c = b, c, b
                fa, fb, fc = fb, fc, fb

            delta = 2 * _EPS * abs(b) + 0.5 * self.tol
            m = 0.5 * (c - b)
            if it > 0:
                self._record(it, (b, c))

            if fb == 0 or abs(m) <= delta:
                return self._finish(b, CONVERGED, it)

            if it >= self.max_it:
                return self._finish(b, MAX_ITERATIONS, it)

            if abs(e) >= delta and abs(fa) > abs(fb):
                s = fb / fa
                if a == c:
                    # Secant (linear interpolation).
                    p = 2 * m * s
                    q = 1 - s
                else:
                    # Inverse quadratic interpolation.
                    q, r = fa / fc, fb / fc
                    p = s * (2 * m * q * (q - r) - (b - a) * (r - 1))
                    q = (q - 1) * (r - 1) * (s - 1)

                if p > 0:
                    q = -q
                p = abs(p)

                if 2 * p < min(3 * m * q - abs(delta * q), abs(e * q)):
                    e, d = d, p / q
                else:
                    d = e = m  # Interpolation rejected, bisect.
            else:
                d = e = m  # Bounds decreasing too slowly, bisect.

            a, fa = b, fb
            if abs(d) > delta:
                b += d
            else:
                b += math.copysign(delta, m)
            fb = self._eval(b)
            it += 1
