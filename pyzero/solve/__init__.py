"""
=====================================
Solvers (:mod:`pyzero.solve`)
=====================================

.. currentmodule:: pyzero.solve

Iterative methods for finding a root of a scalar function of one real
variable, starting from either an interval or a single point.  Interval
methods repair an interval that does not bracket a root by searching
outwards from its midpoint.

Classes
-------

.. autosummary::
    :toctree:

    Bisection
    Brent
    Newton
    QuasiNewton
    RegulaFalsi
    Secant
    Solver
    IntervalSolver
    RootResult
    BracketResult

Functions
---------

.. autosummary::
    :toctree:

    bracket_interval
    central_difference
    find_root

Exceptions
----------

.. autosummary::
    :toctree:

    SolverError

"""

from .base import (DEFAULT_H_INTERVAL, DEFAULT_MAX_IT, IntervalSolver,
                   Solver)
from .bisection import Bisection
from .bracket import DEFAULT_MAX_ITER, bracket_interval
from .brent import Brent
from .exception import SolverError
from .find_root import METHODS, find_root
from .newton import Newton, QuasiNewton, central_difference
from .regula_falsi import RegulaFalsi
from .results import (BracketResult, CONVERGED, MAX_ITERATIONS, NO_BRACKET,
                      RootResult, ZERO_DENOMINATOR, ZERO_DERIVATIVE)
from .secant import Secant
