from __future__ import annotations

from collections.abc import Callable

import numpy as np

from pyzero.solve.base import DEFAULT_H_INTERVAL, IntervalSolver
from pyzero.solve.bracket import DEFAULT_MAX_ITER
from pyzero.solve.results import (CONVERGED, MAX_ITERATIONS, RootResult,
                                  ZERO_DENOMINATOR)
from pyzero.util.print_styles import LogSink


# ======================================================================

class Secant(IntervalSolver):
    r"""
    Secant method, started from the (possibly repaired) interval ends
    :math:`x_0 = a`, :math:`x_1 = b`:

    .. math:: x_{n+1} = x_n - f(x_n) \frac{x_n - x_{n-1}}{f(x_n) -
       f(x_{n-1})}

    The iterates are not required to stay bracketed.  Stops when
    :math:`|f(x_{n+1})| <` `tola` or :math:`|x_{n+1} - x_n| <` `tol`,
    or when `max_it` iterations are complete.

    If :math:`f(x_n) = f(x_{n-1})` the step is undefined and the method
    stops without converging (flag ``ZERO_DENOMINATOR``); `solve()`
    then returns NaN.

    Parameters
    ----------
    tola : float
        Absolute tolerance on :math:`|f(x)|` (>= 0).
    max_it : int
        Maximum number of iterations.
    f, a, b, tol, h_interval, max_iter, log :
        See `IntervalSolver`.
    """
    name = 'Secant'

    def __init__(self, f: Callable[[float], float], a: float, b: float,
                 tol: float, tola: float, max_it: int, *,
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
        x_prev, f_prev, x, fx = start

        if self.max_it == 0:
            return self._finish(0.5 * (x_prev + x), MAX_ITERATIONS, 0)

        for it in range(1, self.max_it + 1):
            denom = fx - f_prev
            if denom == 0:
                return self._finish(x, ZERO_DENOMINATOR, it - 1)

            x_new = x - fx * (x - x_prev) / denom
            if not np.isfinite(x_new):
                return self._finish(x, ZERO_DENOMINATOR, it - 1,
                                    details="Secant step overflowed.")

            f_new = self._eval(x_new)
            self._record(it, x_new)

            if (f_new == 0 or abs(f_new) < self.tola or
                    abs(x_new - x) < self.tol):
                return self._finish(x_new, CONVERGED, it)

            x_prev, f_prev = x, fx
            x, fx = x_new, f_new

        return self._finish(x, MAX_ITERATIONS, self.max_it)
