"""
An interpretation of species as exponential generating functions, which
count labeled structures.

The series are ordinary power series of rationals; factorials are only
multiplied in where an operation needs them and when the counts are read
off with labeled().
"""

from fractions import Fraction as F

from errors import IntegralityError
from factored import factorial
from powerseries import PowerSeries, memoizedGenerator, X, integral
from species import Species

class EGF(Species):
    rec_precision = 100

    @classmethod
    def singleton(cls):
        return cls(X)

    @classmethod
    def set(cls):
        return cls( (1/(1-X)).ord2exp )

    @classmethod
    def cycle(cls):
        return cls( integral(1/(1-X)) )

    def differentiate(self):
        return EGF( self.series.D() )

    def o(self, entry):
        return EGF( self.series.compose(entry.series) )

    def hadamard(self, entry):
        """
        >>> list(labeled(EGF.lists().hadamard(EGF.lists()))[:5])
        [1, 1, 4, 36, 576]
        """
        return EGF( self.series.hadamard(entry.series).exp2ord )

    def functor_compose(self, entry):
        """
        The n-th term is f[m] * m!/n!, where m = n! * g[n] is the number of
        labeled G-structures on n elements.

        >>> edges = EGF.set().of_size_exactly(2) * EGF.set()
        >>> graphs = EGF.subsets() @ edges
        >>> list(labeled(graphs)[:5])
        [1, 1, 2, 8, 64]
        """
        f = self.series
        counts = labeled(entry)

        @memoizedGenerator
        def _fcomp():
            for n, m in enumerate(counts):
                yield f[m] * (factorial(m) / factorial(n)).to_fraction()

        return EGF( PowerSeries(_fcomp) )

def labeled( egf ):
    """
    The number of labeled structures on 0, 1, 2, ... elements, as an
    unbounded series of integers.

    >>> list(labeled(EGF.octopi())[:10])
    [0, 1, 3, 14, 90, 744, 7560, 91440, 1285200, 20603520]
    """
    @memoizedGenerator
    def _labeled():
        for n, term in enumerate(egf.series.exp2ord):
            term = F(term)
            if term.denominator != 1:
                raise IntegralityError("%d! times the %d-th coefficient is %s" % (n, n, term))
            yield term.numerator

    return PowerSeries(_labeled)

labelled = labeled
