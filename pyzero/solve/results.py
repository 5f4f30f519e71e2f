"""
Result types returned by the bracket finder and the root solvers, along
with the numeric status flags they carry.
"""
from __future__ import annotations

from typing import NamedTuple

import numpy as np

from pyzero.solve.exception import SolverError


# ======================================================================

# Status flags.  Zero means success, as for most error code systems.

CONVERGED = 0
MAX_ITERATIONS = 1
NO_BRACKET = 2
ZERO_DERIVATIVE = 3
ZERO_DENOMINATOR = 4

FLAG_DETAILS = {
    CONVERGED: "Converged.",
    MAX_ITERATIONS: "Reached iteration limit.",
    NO_BRACKET: "No bracket found near the given interval.",
    ZERO_DERIVATIVE: "Derivative was zero.",
    ZERO_DENOMINATOR: "Secant denominator f(x_n) - f(x_n-1) was zero.",
}

# Failures where the root estimate is meaningless and `value` gives NaN.
_NAN_FLAGS = (NO_BRACKET, ZERO_DERIVATIVE, ZERO_DENOMINATOR)


# ----------------------------------------------------------------------

class BracketResult(NamedTuple):
    """
    Outcome of a bracket search.  Unpacks as ``lo, hi, found, steps,
    fevals``.  When `found` is False, `lo` and `hi` are NaN and must not
    be used.
    """
    lo: float
    hi: float
    found: bool
    steps: int = 0
    fevals: int = 0


# ----------------------------------------------------------------------

class RootResult(NamedTuple):
    """
    Outcome of a call to `Solver.solve_full()`.

    Attributes
    ----------
    root : float
        Best estimate of the root found.  For a failed bracket this is
        NaN; for zero derivative / denominator failures it is the last
        finite iterate.
    converged : bool
        True if the convergence test was met.
    iterations : int
        Number of refining iterations performed.
    fevals : int
        Number of evaluations of the function made by `solve_full()`.
    flag : int
        Status code (``CONVERGED``, ``MAX_ITERATIONS``, ``NO_BRACKET``,
        ``ZERO_DERIVATIVE`` or ``ZERO_DENOMINATOR``).
    details : str
        Text description of `flag`.
    """
    root: float
    converged: bool
    iterations: int
    fevals: int
    flag: int = CONVERGED
    details: str = None

    @property
    def value(self) -> float:
        """
        The root with failures collapsed to the NaN sentinel.  Running
        out of iterations is not a failure here: the best estimate is
        kept.
        """
        if self.flag in _NAN_FLAGS:
            return np.nan
        return self.root

    def raise_if_failed(self, method: str = 'Solver') -> float:
        """
        Return `root` if converged, otherwise raise `SolverError`
        carrying the fields of this result.
        """
        if self.converged:
            return self.root

        raise SolverError(f"{method} failed to converge:", flag=self.flag,
                          details=self.details, root=self.root,
                          iterations=self.iterations, fevals=self.fevals)
