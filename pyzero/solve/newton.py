from __future__ import annotations

from collections.abc import Callable

import numpy as np

from pyzero.solve.base import DEFAULT_MAX_IT, Solver
from pyzero.solve.results import (CONVERGED, MAX_ITERATIONS, RootResult,
                                  ZERO_DERIVATIVE)
from pyzero.util.print_styles import LogSink


# ======================================================================

def central_difference(f: Callable[[float], float], x: float,
                       h: float) -> float:
    r"""
    Centred finite difference approximation of :math:`f'(x)`:

    .. math:: f'(x) \approx \frac{f(x + h) - f(x - h)}{2h}

    The truncation error is :math:`O(h^2)`.
    """
    return (f(x + h) - f(x - h)) / (2 * h)


# ----------------------------------------------------------------------

class Newton(Solver):
    r"""
    Newton-Raphson method using a supplied derivative:

    .. math:: x_{n+1} = x_n - \frac{f(x_n)}{f'(x_n)}

    Stops when :math:`|f(x_{n+1})| <` `tola` or :math:`|x_{n+1} - x_n|
    <` `tol`, or when `max_it` iterations are complete.  The starting
    point is never accepted without taking a step.

    If :math:`f'(x_n)` is zero (or the step is not finite) the division
    is undefined and the method stops without converging (flag
    ``ZERO_DERIVATIVE``); `solve()` then returns NaN.

    Parameters
    ----------
    f : Callable[[float], float]
        Function to find the root of.
    df : Callable[[float], float]
        Derivative of `f`.
    x0 : float
        Starting point.
    tol : float
        Step size tolerance (>= 0).
    tola : float
        Absolute tolerance on :math:`|f(x)|` (>= 0).
    max_it : int
        Maximum number of iterations (>= 0).
    log : PrintStyles or Callable[[str], None], optional
        Diagnostic sink.

    Examples
    --------
    >>> x = Newton(lambda x: x**2 - 2, lambda x: 2*x, 1.0, 1e-12, 1e-12,
    ...            20).solve()
    >>> abs(x - 2**0.5) < 1e-12
    True
    """
    name = 'Newton'
    needs_df = True

    def __init__(self, f: Callable[[float], float],
                 df: Callable[[float], float] | None, x0: float,
                 tol: float, tola: float, max_it: int = DEFAULT_MAX_IT, *,
                 log: LogSink = None):
        super().__init__(f, tol, max_it=max_it, log=log)
        if self.needs_df and not callable(df):
            raise ValueError("df must be callable.")
        if not tola >= 0:
            raise ValueError(f"tola must be >= 0, got {tola}.")

        self.df, self.x0, self.tola = df, float(x0), tola

    def _derivative(self, x: float) -> float:
        return self.df(x)

    def _iterate(self) -> RootResult:
        x = self.x0
        if self.max_it == 0:
            return self._finish(x, MAX_ITERATIONS, 0)

        fx = self._eval(x)
        for it in range(1, self.max_it + 1):
            dfx = self._derivative(x)
            if dfx == 0 or not np.isfinite(dfx):
                return self._finish(x, ZERO_DERIVATIVE, it - 1)

            x_new = x - fx / dfx
            if not np.isfinite(x_new):
                return self._finish(x, ZERO_DERIVATIVE, it - 1,
                                    details="Newton step overflowed.")

            f_new = self._eval(x_new)
            self._record(it, x_new)

            if (f_new == 0 or abs(f_new) < self.tola or
                    abs(x_new - x) < self.tol):
                return self._finish(x_new, CONVERGED, it)

            x, fx = x_new, f_new

        return self._finish(x, MAX_ITERATIONS, self.max_it)


# ----------------------------------------------------------------------

class QuasiNewton(Newton):
    r"""
    Newton's method with the derivative replaced by the centred finite
    difference :math:`(f(x + h) - f(x - h)) / 2h`.  Each derivative
    costs two extra function evaluations.

    .. note:: The accuracy of the root is also limited by the
       :math:`O(h^2)` truncation error of the difference.

    Parameters
    ----------
    f, x0, tol, tola, max_it, log :
        See `Newton`.
    h : float
        Finite difference step.  Must be non-zero and finite.

    Raises
    ------
    ValueError
        If `h` is zero or not finite.
    """
    name = 'QuasiNewton'
    needs_df = False

    def __init__(self, f: Callable[[float], float], x0: float, h: float,
                 tol: float, tola: float, max_it: int = DEFAULT_MAX_IT, *,
                 log: LogSink = None):
        if h == 0 or not np.isfinite(h):
            raise ValueError(f"Finite difference step h must be non-zero "
                             f"and finite, got {h}.")

        super().__init__(f, None, x0, tol, tola, max_it, log=log)
        self.h = h

    def _derivative(self, x: float) -> float:
        return central_difference(self._eval, x, self.h)
