"""
Base classes shared by the root solvers.  `Solver` defines the common
capability (``solve()`` / ``solve_full()``) and `IntervalSolver` adds
the validated bracket ``[a, b]``, repairing it at construction if it
does not bracket a root.
"""
from __future__ import annotations

import operator
from abc import ABC, abstractmethod
from collections.abc import Callable

import numpy as np

from pyzero.solve.bracket import DEFAULT_MAX_ITER, bracket_interval
from pyzero.solve.results import (BracketResult, CONVERGED, FLAG_DETAILS,
                                  NO_BRACKET, RootResult)
from pyzero.util.print_styles import ITER_STYLE, SOLVER_STYLE, LogSink, \
    log_print

DEFAULT_H_INTERVAL = 0.01
DEFAULT_MAX_IT = 200


# ======================================================================

class Solver(ABC):
    """
    Abstract base of all root solvers of a scalar function ``f(x) =
    0``.  The function and tolerance are fixed at construction; call
    `solve()` (or `solve_full()`) to find the root.

    Parameters
    ----------
    f : Callable[[float], float]
        Function to find the root of.  Must be deterministic.
    tol : float
        Interval width / step size convergence tolerance (>= 0).
    max_it : int, default = 200
        Maximum number of refining iterations (>= 0).
    log : PrintStyles or Callable[[str], None], optional
        Diagnostic sink.  See `pyzero.util.print_styles.log_print`.

    Attributes
    ----------
    result : RootResult or None
        Result of the last call to `solve_full()`.
    history : list
        Per-iteration record of the working bracket or iterate from the
        last call to `solve_full()`.
    """
    name = 'Solver'

    def __init__(self, f: Callable[[float], float], tol: float, *,
                 max_it: int = DEFAULT_MAX_IT, log: LogSink = None):
        if not callable(f):
            raise ValueError("f must be callable.")
        if not tol >= 0:  # Also rejects NaN.
            raise ValueError(f"tol must be >= 0, got {tol}.")

        max_it = operator.index(max_it)
        if max_it < 0:
            raise ValueError(f"max_it must be >= 0, got {max_it}.")

        self.f, self.tol, self.max_it, self.log = f, tol, max_it, log
        self.result: RootResult | None = None
        self.history: list = []
        self._fevals = 0

    # -- Public Methods ------------------------------------------------

    def solve(self) -> float:
        """
        Find the root.  Returns the estimated root, or NaN if no root
        could be bracketed or the iteration broke down (zero
        derivative / denominator).  If the iteration limit is reached
        the best estimate is returned; use `solve_full()` to tell this
        apart from convergence.
        """
        return self.solve_full().value

    def solve_full(self) -> RootResult:
        """
        Find the root, returning a `RootResult` holding the estimate
        along with convergence information.  Each call starts again
        from the constructed starting point.
        """
        self._fevals = 0
        self.history = []
        log_print(self.log, SOLVER_STYLE, f"{self.name}:")

        self.result = self._iterate()

        log_print(self.log, SOLVER_STYLE,
                  f"... {self.result.details} x = {self.result.root}, "
                  f"{self.result.iterations} iterations, "
                  f"{self.result.fevals} evaluations.")
        return self.result

    # -- Protected Methods ---------------------------------------------

    def _eval(self, x: float) -> float:
        self._fevals += 1
        return self.f(x)

    def _finish(self, root: float, flag: int, iterations: int,
                details: str = None) -> RootResult:
        return RootResult(root=float(root), converged=(flag == CONVERGED),
                          iterations=iterations, fevals=self._fevals,
                          flag=flag,
                          details=details or FLAG_DETAILS[flag])

    @abstractmethod
    def _iterate(self) -> RootResult:
        """Run the method from its starting point."""
        raise NotImplementedError

    def _record(self, it: int, entry):
        self.history.append(entry)
        log_print(self.log, ITER_STYLE, f"Iteration {it}: {entry}")


# ----------------------------------------------------------------------

class IntervalSolver(Solver, ABC):
    """
    Base of solvers working from an interval ``[a, b]``.

    If ``f(a)`` and ``f(b)`` have the same sign the interval is not
    valid.  A bracket search (`bracket_interval`) is then made from the
    midpoint ``x1 = (a + b) / 2`` using step `h_interval` and at most
    `max_iter` steps.  If it succeeds the bracket replaces ``[a, b]``.
    If it fails both `a` and `b` are set to NaN and `solve()` returns
    NaN without iterating.

    Parameters
    ----------
    f, tol, max_it, log :
        See `Solver`.
    a, b : float
        Ends of the starting interval, in any order.
    h_interval : float, default = 0.01
        Initial step for the bracket search.  ``h_interval == 0``
        always fails the search.
    max_iter : int, default = 200
        Step limit for the bracket search.

    Attributes
    ----------
    x1 : float
        Seed point used for any bracket search.
    repair : BracketResult or None
        Outcome of the bracket search, `None` if ``[a, b]`` was valid.
    """

    def __init__(self, f: Callable[[float], float], a: float, b: float,
                 tol: float, *, max_it: int = DEFAULT_MAX_IT,
                 h_interval: float = DEFAULT_H_INTERVAL,
                 max_iter: int = DEFAULT_MAX_ITER, log: LogSink = None):
        super().__init__(f, tol, max_it=max_it, log=log)
        self.h_interval, self.max_iter = h_interval, max_iter
        self.x1 = 0.5 * (a + b)
        self.repair: BracketResult | None = None

        if np.sign(f(a)) * np.sign(f(b)) > 0:
            log_print(log, SOLVER_STYLE,
                      f"{self.name}: interval [{a}, {b}] is not valid, "
                      f"trying to find a valid one from x = {self.x1}.")
            self.repair = bracket_interval(f, self.x1, h_interval, max_iter,
                                           log=log)
            if self.repair.found:
                a, b = self.repair.lo, self.repair.hi
            else:
                log_print(log, SOLVER_STYLE,
                          f"{self.name}: could not find an interval, the "
                          f"function has no zero nearby. Interval set to "
                          f"[nan, nan].")
                a, b = np.nan, np.nan

        self._a, self._b = float(a), float(b)

    # -- Public Methods ------------------------------------------------

    @property
    def a(self) -> float:
        """Starting interval lower end (after any repair)."""
        return self._a

    @property
    def b(self) -> float:
        """Starting interval upper end (after any repair)."""
        return self._b

    @property
    def bracket_found(self) -> bool:
        """False if the interval was marked invalid (NaN)."""
        return not (np.isnan(self._a) or np.isnan(self._b))

    # -- Protected Methods ---------------------------------------------

    def _start(self) -> tuple[float, float, float, float] | RootResult:
        """
        Common start for the interval methods.  Returns a finished
        `RootResult` if there is no bracket or an end is exactly a
        root, otherwise the tuple ``(a, f(a), b, f(b))``.
        """
        if not self.bracket_found:
            return self._finish(np.nan, NO_BRACKET, 0)

        a, b = self._a, self._b
        fa, fb = self._eval(a), self._eval(b)
        if fa == 0:
            return self._finish(a, CONVERGED, 0)
        if fb == 0:
            return self._finish(b, CONVERGED, 0)

        return a, fa, b, fb
