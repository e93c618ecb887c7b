from itertools import count
import logging

from errors import RecursionSolveError
from powerseries import PowerSeries, memoizedGenerator, from_coeffs

logger = logging.getLogger(__name__)

def solve_recursive( f, kind, precision ):
    """
    Solve T = f(T) for a species T of the interpretation ``kind``,
    returned as the power series of T.

    The terms are found one degree at a time.  With the terms below n
    known, the n-th term is iterated from 0 on the truncated species:
    t -> f(T_{<n} + t x^n)[n], until it repeats.  For f of the form
    T = X*R(T) the n-th term of f(T) only depends on the terms below n,
    so in every degree the second step confirms the first.  ``precision``
    bounds the number of steps per degree; a definition that needs more
    did not settle, and one that comes back to an earlier value never will.

    >>> from labeled import EGF, labeled
    >>> L = solve_recursive( lambda t: EGF.one().cons(EGF.x() * t), EGF, 10 )
    >>> list(labeled(EGF(L))[:6])
    [1, 1, 2, 6, 24, 120]
    >>> labeled(EGF(L))[30] == labeled(EGF.lists())[30]
    True
    >>> solve_recursive( lambda t: 1 - t, EGF, 10 )[0]  # doctest: +ELLIPSIS
    Traceback (most recent call last):
    ...
    errors.RecursionSolveError: ... not of the form T = X*R(T): degree 0 cycles through 0, 1
    """
    if precision < 1:
        raise ValueError("Can't solve with precision %d" % precision)

    terms = []

    def unroll( n, t ):
        return f( kind( from_coeffs(terms + [t]) ) )[n]

    @memoizedGenerator
    def _solve():
        for n in count():
            seen = [0]
            for step in range(precision):
                t = unroll(n, seen[-1])
                if t == seen[-1]:
                    break
                if any( t == s for s in seen ):
                    raise RecursionSolveError(f, "not of the form T = X*R(T): degree %d cycles through %s"
                                                 % (n, ", ".join( str(s) for s in seen )))
                seen.append(t)
            else:
                raise RecursionSolveError(f, "degree %d did not settle within precision %d" % (n, precision))

            logger.debug("rec: degree %d settled after %d steps", n, step + 1)
            terms.append(t)
            yield t

    return PowerSeries(_solve)
