"""
Utilities (:mod:`pyzero.util`)
===============================

.. currentmodule:: pyzero.util

Supporting functions used throughout PyZero.

.. autosummary::
    :toctree:

    print_styles
"""
from .print_styles import (AddDotStyle, FormatStyle, PrintStyles, SkipStyle,
                           log_print, solver_printer)
