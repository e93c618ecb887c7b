from collections import Counter
from functools import lru_cache
from math import gcd

from factored import FactoredRational, factorial, ONE

class CycleType(tuple):
    """
    The cycle structure of a permutation, as (length, multiplicity) pairs
    with strictly increasing lengths.  Read as an integer partition it has
    ``multiplicity`` parts of size ``length``.

    >>> ct = CycleType([(1, 2), (3, 1)])
    >>> ct.degree, ct.counts()
    (5, {1: 2, 3: 1})
    >>> CycleType([(2, 1), (1, 1)])
    Traceback (most recent call last):
    ...
    ValueError: cycle lengths must be positive and strictly increasing: ((2, 1), (1, 1))
    """

    def __new__(cls, pairs=()):
        pairs = tuple( (k, m) for k, m in pairs )
        last = 0
        for k, m in pairs:
            if not isinstance(k, int) or not isinstance(m, int):
                raise ValueError("cycle lengths and multiplicities must be integers: %r" % (pairs,))
            if k <= last:
                raise ValueError("cycle lengths must be positive and strictly increasing: %r" % (pairs,))
            if m <= 0:
                raise ValueError("multiplicities must be positive: %r" % (pairs,))
            last = k
        return super().__new__(cls, pairs)

    @classmethod
    def from_counts(cls, counts):
        return cls( sorted( (k, m) for k, m in counts.items() if m != 0 ) )

    @classmethod
    def identity(cls, n):
        return cls([(1, n)] if n else [])

    def __repr__(self):
        return "CycleType(%r)" % list(self)

    @property
    def degree(self):
        return sum( k*m for k, m in self )

    @property
    def key(self):
        """
        Sort key for monomials: weighted degree first, then the order in
        which int_partitions produces partitions (largest part first).
        """
        return (self.degree, tuple( (-k, -m) for k, m in reversed(self) ))

    def counts(self):
        return dict(self)

    def merge(self, other):
        counts = Counter(dict(self))
        counts.update(dict(other))
        return CycleType.from_counts(counts)

    def stretch(self, i):
        return CycleType( (k*i, m) for k, m in self )

    def without(self, k):
        counts = dict(self)
        counts[k] -= 1
        return CycleType.from_counts(counts)

def as_cycle_type( ct ):
    return ct if isinstance(ct, CycleType) else CycleType(ct)

@lru_cache(maxsize=None)
def int_partitions( n ):
    """
    All partitions of n, in ascending monomial order.

    >>> [list(p) for p in int_partitions(4)]
    [[(4, 1)], [(1, 1), (3, 1)], [(2, 2)], [(1, 2), (2, 1)], [(1, 4)]]
    >>> int_partitions(0)
    (CycleType([]),)
    """
    if n < 0:
        raise ValueError("Can't partition %d" % n)

    def _partitions( n, k ):
        if n == 0:
            yield []
            return
        if k == 0:
            return
        for j in range(n // k, -1, -1):
            rest = n - j*k
            for js in _partitions( rest, min(k-1, rest) ):
                yield [(k, j)] + js if j else js

    return tuple( CycleType(reversed(js)) for js in _partitions(n, n) )

def aut( ct ):
    """
    Number of automorphisms of a permutation with cycle type ct, as a
    FactoredRational.  There are n!/aut(ct) permutations of n elements
    with that cycle type.

    >>> int(aut([(1, 4)])), int(aut([(4, 1)])), int(aut([(1, 2), (2, 1)]))
    (24, 4, 4)
    """
    return _aut( as_cycle_type(ct) )

@lru_cache(maxsize=None)
def _aut( ct ):
    a = ONE
    for k, m in ct:
        a = a * factorial(m) * FactoredRational.from_int(k)**m
    return a

def ez_coeff( ct ):
    """
    Coefficient of the monomial of cycle type ct in the cycle index
    series of the species of sets.

    >>> ez_coeff([(1, 1), (2, 1)])
    Fraction(1, 2)
    """
    return aut(ct).reciprocal().to_fraction()

def cycle_power( ct, m ):
    """
    Cycle type of sigma**m for any permutation sigma of cycle type ct.
    A k-cycle splits into gcd(m, k) cycles of length k/gcd(m, k).

    >>> cycle_power([(2, 1)], 2)
    CycleType([(1, 2)])
    >>> cycle_power([(1, 1), (4, 2), (6, 1)], 2)
    CycleType([(1, 1), (2, 4), (3, 2)])
    """
    if m < 1:
        raise ValueError("Can't take the %d-th power of a cycle type" % m)

    counts = Counter()
    for k, sk in as_cycle_type(ct):
        g = gcd(m, k)
        counts[k // g] += g * sk
    return CycleType.from_counts(counts)
