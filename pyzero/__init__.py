"""
.. This module acts as the top-level API documentation.

.. module: pyzero

PyZero finds roots of scalar functions of one real variable.

.. autosummary::
    :toctree: generated/

    solve
    util
"""

__version__ = "0.1.0"

import sys

# ======================================================================

assert sys.version_info >= (3, 9)

from pyzero.solve import (Bisection, Brent, Newton, QuasiNewton, RegulaFalsi,
                          Secant, SolverError, bracket_interval, find_root)
