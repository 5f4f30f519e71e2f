from __future__ import annotations

import operator
from collections.abc import Callable

import numpy as np

from pyzero.solve.results import BracketResult
from pyzero.util.print_styles import ITER_STYLE, SOLVER_STYLE, LogSink, \
    log_print

DEFAULT_MAX_ITER = 200


# ======================================================================

def bracket_interval(f: Callable[[float], float], x1: float, h: float,
                     max_iter: int = DEFAULT_MAX_ITER, *,
                     log: LogSink = None) -> BracketResult:
    """
    Search outwards from `x1` in both directions for a pair of adjacent
    points where `f(x)` changes sign.  Only the first bracket
    encountered is returned.

    Probe pair `k` (``k = 1, 2, ...``) moves the right-hand point by
    ``+k*|h|`` and the left-hand point by ``-k*|h|`` from where each
    previously stood, so the step grows arithmetically.  After each
    probe the sign of `f` is compared with the previous probe on the
    same side.

    Parameters
    ----------
    f : Callable[[float], float]
        Scalar function to bracket root.
    x1 : float
        Seed point for the search.
    h : float
        Initial step.  Only the magnitude is used.  ``h == 0`` (or a
        non-finite value) is illegal and fails the search immediately.
    max_iter : int, default = 200
        Maximum number of probe pairs.
    log : PrintStyles or Callable[[str], None], optional
        Diagnostic sink (see `pyzero.util.print_styles.log_print`).

    Returns
    -------
    BracketResult
        ``(lo, hi, found, steps, fevals)``.  ``found == False`` means no
        sign change was seen and `lo`, `hi` are NaN.  If `x1` is itself
        a root the degenerate bracket ``(x1, x1)`` is returned.

    Raises
    ------
    ValueError
        If `max_iter` < 0.

    Notes
    -----
    Like any stepping search this can be foiled by a function with an
    extremum near the area of interest, or a pair of roots closer
    together than the current step.

    Examples
    --------
    >>> lo, hi, found, steps, fevals = bracket_interval(
    ...     lambda x: x - 0.25, 0.0, 0.1)
    >>> found, steps
    (True, 2)
    >>> lo <= 0.25 <= hi
    True
    """
    max_iter = operator.index(max_iter)
    if max_iter < 0:
        raise ValueError("max_iter must be >= 0.")

    if h == 0 or not np.isfinite(h):
        log_print(log, SOLVER_STYLE,
                  f"Bracket search: illegal step h = {h}.")
        return BracketResult(np.nan, np.nan, False, 0, 0)

    f1 = f(x1)
    fevals = 1
    if f1 == 0:
        return BracketResult(x1, x1, True, 0, fevals)

    x_lo, f_lo = x1, f1
    x_hi, f_hi = x1, f1
    dx = abs(h)

    for k in range(1, max_iter + 1):
        step = k * dx

        # Grow right ->
        x_new = x_hi + step
        f_new = f(x_new)
        fevals += 1
        if _sign_change(f_hi, f_new):
            log_print(log, SOLVER_STYLE, f"Bracket search: found "
                                         f"[{x_hi}, {x_new}] after {k} "
                                         f"steps.")
            return BracketResult(x_hi, x_new, True, k, fevals)
        x_hi, f_hi = x_new, f_new

        # <- Grow left
        x_new = x_lo - step
        f_new = f(x_new)
        fevals += 1
        if _sign_change(f_new, f_lo):
            log_print(log, SOLVER_STYLE, f"Bracket search: found "
                                         f"[{x_new}, {x_lo}] after {k} "
                                         f"steps.")
            return BracketResult(x_new, x_lo, True, k, fevals)
        x_lo, f_lo = x_new, f_new

        log_print(log, ITER_STYLE, f"Step {k}: x = [{x_lo}, {x_hi}], "
                                   f"f = [{f_lo}, {f_hi}]")

    log_print(log, SOLVER_STYLE, f"Bracket search: no sign change after "
                                 f"{max_iter} steps.")
    return BracketResult(np.nan, np.nan, False, max_iter, fevals)


def _sign_change(f_a: float, f_b: float) -> bool:
    # False if either value is NaN.
    return bool(np.sign(f_a) * np.sign(f_b) <= 0)
