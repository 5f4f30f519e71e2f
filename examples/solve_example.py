#!/usr/bin/env python3

# Examples of finding the root of a scalar function by each method.

from math import cos, sin

from pyzero.solve import (Bisection, Brent, Newton, QuasiNewton, RegulaFalsi,
                          Secant, find_root)
from pyzero.util import solver_printer


def f(x):
    """Single root at the Dottie number, x = 0.739085..."""
    return cos(x) - x


def df(x):
    return -sin(x) - 1


tol, tola, max_it = 1e-10, 1e-12, 100

solvers = [Bisection(f, 0.0, 1.0, tol),
           RegulaFalsi(f, 0.0, 1.0, tol, tola),
           Secant(f, 0.0, 1.0, tol, tola, max_it),
           Brent(f, 0.0, 1.0, tol, max_it),
           Newton(f, df, 0.0, tol, tola, max_it),
           QuasiNewton(f, 0.0, 1e-6, tol, tola, max_it)]

print(f"{'Method':<12s} {'Root':>18s} {'Its':>4s} {'Evals':>5s}")
for solver in solvers:
    res = solver.solve_full()
    print(f"{solver.name:<12s} {res.root:18.15f} {res.iterations:4d} "
          f"{res.fevals:5d}")

# An interval without a sign change is repaired by searching outwards
# from its midpoint.  Show the progress.
print()
x = Brent(lambda x: x ** 2 - 4, 10.0, 20.0, tol, max_it,
          log=solver_printer(display_level=1)).solve()

# No root can be found for x**2 + 1, giving NaN.
print()
print(find_root(lambda x: x ** 2 + 1, 'brent', a=10.0, b=20.0, max_iter=20))
