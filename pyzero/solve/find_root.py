from __future__ import annotations

import warnings
from collections.abc import Callable

from pyzero.solve.base import DEFAULT_H_INTERVAL, DEFAULT_MAX_IT, Solver
from pyzero.solve.bisection import Bisection
from pyzero.solve.bracket import DEFAULT_MAX_ITER
from pyzero.solve.brent import Brent
from pyzero.solve.newton import Newton, QuasiNewton
from pyzero.solve.regula_falsi import RegulaFalsi
from pyzero.solve.results import RootResult
from pyzero.solve.secant import Secant
from pyzero.util.print_styles import LogSink

METHODS: dict[str, type[Solver]] = {
    'bisection': Bisection,
    'regula_falsi': RegulaFalsi,
    'secant': Secant,
    'brent': Brent,
    'newton': Newton,
    'quasi_newton': QuasiNewton,
}

_INTERVAL_METHODS = ('bisection', 'regula_falsi', 'secant', 'brent')


# ======================================================================

def find_root(f: Callable[[float], float], method: str = 'brent', *,
              a: float = None, b: float = None, x0: float = None,
              df: Callable[[float], float] = None, tol: float = 1e-8,
              tola: float = 1e-10, max_it: int = DEFAULT_MAX_IT,
              h: float = 1e-6, h_interval: float = DEFAULT_H_INTERVAL,
              max_iter: int = DEFAULT_MAX_ITER, log: LogSink = None,
              full_output: bool = False,
              disp: bool = False) -> float | RootResult:
    """
    Find a root of ``f(x) = 0`` using one of the solvers in `METHODS`.
    This builds the solver and calls it once.

    Parameters
    ----------
    f : Callable[[float], float]
        Function to find the root of.
    method : str, default = 'brent'
        One of ``'bisection'``, ``'regula_falsi'``, ``'secant'``,
        ``'brent'``, ``'newton'`` or ``'quasi_newton'`` (any case).
    a, b : float
        Starting interval, required by the interval methods.
    x0 : float
        Starting point, required by ``'newton'`` and ``'quasi_newton'``.
    df : Callable[[float], float]
        Derivative, required by ``'newton'``.
    tol : float, default = 1e-8
        Interval width / step size tolerance.
    tola : float, default = 1e-10
        Absolute tolerance on ``|f(x)|`` (methods that use it).
    max_it : int, default = 200
        Maximum number of iterations.
    h : float, default = 1e-6
        Finite difference step for ``'quasi_newton'``.
    h_interval : float, default = 0.01
        Initial step for the bracket search if ``[a, b]`` is not valid.
    max_iter : int, default = 200
        Step limit for the bracket search.
    log : PrintStyles or Callable[[str], None], optional
        Diagnostic sink.
    full_output : bool, default = False
        If True return the `RootResult`, otherwise the root alone (NaN
        on failure).
    disp : bool, default = False
        If True raise `SolverError` when the solver does not converge.
        Otherwise a `RuntimeWarning` is issued.

    Returns
    -------
    float or RootResult
        See `full_output`.

    Raises
    ------
    ValueError
        Unknown `method` or missing starting values.
    SolverError
        Failure to converge when ``disp=True``.

    Examples
    --------
    >>> x = find_root(lambda x: x**2 - 2, 'brent', a=0, b=2)
    >>> abs(x - 2**0.5) < 1e-8
    True
    """
    key = method.lower()
    try:
        solver_cls = METHODS[key]
    except KeyError:
        raise ValueError(f"Unknown method '{method}', expected one of: "
                         f"{', '.join(METHODS)}.")

    if key in _INTERVAL_METHODS:
        if a is None or b is None:
            raise ValueError(f"Method '{key}' requires interval a, b.")
        interval_kw = dict(h_interval=h_interval, max_iter=max_iter, log=log)

        if key == 'bisection':
            solver = Bisection(f, a, b, tol, max_it=max_it, **interval_kw)
        elif key == 'regula_falsi':
            solver = RegulaFalsi(f, a, b, tol, tola, max_it=max_it,
                                 **interval_kw)
        elif key == 'secant':
            solver = Secant(f, a, b, tol, tola, max_it, **interval_kw)
        else:
            solver = Brent(f, a, b, tol, max_it, **interval_kw)

    else:
        if x0 is None:
            raise ValueError(f"Method '{key}' requires starting point x0.")

        if solver_cls is Newton:
            if df is None:
                raise ValueError("Method 'newton' requires derivative df.")
            solver = Newton(f, df, x0, tol, tola, max_it, log=log)
        else:
            solver = QuasiNewton(f, x0, h, tol, tola, max_it, log=log)

    result = solver.solve_full()
    if not result.converged:
        if disp:
            result.raise_if_failed(solver.name)
        warnings.warn(f"{solver.name} failed to converge: {result.details}",
                      RuntimeWarning)

    if full_output:
        return result
    return result.value
