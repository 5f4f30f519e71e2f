from __future__ import annotations

from collections.abc import Callable

import numpy as np

from pyzero.solve.base import DEFAULT_H_INTERVAL, DEFAULT_MAX_IT, \
    IntervalSolver
from pyzero.solve.bracket import DEFAULT_MAX_ITER
from pyzero.solve.results import CONVERGED, MAX_ITERATIONS, RootResult
from pyzero.util.print_styles import LogSink


# ======================================================================

class RegulaFalsi(IntervalSolver):
    r"""
    False position (regula falsi) method.  As for bisection the bracket
    is kept, but the trial point is the root of the chord joining
    :math:`(a, f(a))` and :math:`(b, f(b))`:

    .. math:: c = b - f(b) \frac{b - a}{f(b) - f(a)}

    Stops when :math:`|f(c)| <` `tola`, when the bracket width falls
    below `tol` or when `max_it` iterations are complete.

    .. note:: This is the plain method.  Where `f` is strongly convex or
       concave one end of the bracket can stay fixed for many
       iterations, giving slow linear convergence.

    Parameters
    ----------
    tola : float
        Absolute tolerance on :math:`|f(c)|` (>= 0).
    f, a, b, tol, max_it, h_interval, max_iter, log :
        See `IntervalSolver`.
    """
    name = 'RegulaFalsi'

    def __init__(self, f: Callable[[float], float], a: float, b: float,
                 tol: float, tola: float, *, max_it: int = DEFAULT_MAX_IT,
                 h_interval: float = DEFAULT_H_INTERVAL,
                 max_iter: int = DEFAULT_MAX_ITER, log: LogSink = None):
        if not tola >= 0:
            raise ValueError(f"tola must be >= 0, got {tola}.")

        super().__init__(f, a, b, tol, max_it=max_it,
                         h_interval=h_interval, max_iter=max_iter, log=log)
        self.tola = tola

    def _iterate(self) -> RootResult:
        start = self._start()
        if isinstance(start, RootResult):
            return start
        a, fa, b, fb = start

        c = 0.5 * (a + b)
        for it in range(1, self.max_it + 1):
            # fa, fb are non-zero with opposite signs, so fb != fa.
            c = b - fb * (b - a) / (fb - fa)
            fc = self._eval(c)

            if fc == 0 or abs(fc) < self.tola:
                self._record(it, (a, b))
                return self._finish(c, CONVERGED, it)

            if np.sign(fa) == np.sign(fc):
                a, fa = c, fc
            else:
                b, fb = c, fc

            self._record(it, (a, b))
            if abs(b - a) < self.tol:
                return self._finish(c, CONVERGED, it)

        return self._finish(c, MAX_ITERATIONS, self.max_it)
