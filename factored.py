from fractions import Fraction as F
from functools import lru_cache
from sympy import factorint, primerange
from sympy import divisors as _divisors

from errors import IntegralityError

class FactoredRational(object):
    """
    An exact rational number kept as a product of prime powers.

    Automorphism counts are products of factorials and powers; keeping
    them factored makes reciprocals and products cheap and only expands
    the number when its value is asked for.

    >>> a = factorial(5) / FactoredRational.from_int(12)
    >>> int(a), a.factors
    (10, {2: 1, 5: 1})
    >>> a.reciprocal().to_fraction()
    Fraction(1, 10)
    >>> int(FactoredRational.from_int(2).reciprocal())
    Traceback (most recent call last):
    ...
    errors.IntegralityError: 1/2 is not an integer
    """

    def __init__(self, factors=None):
        self.factors = dict( (p, e) for p, e in (factors or {}).items() if e != 0 )

    @classmethod
    def from_int(cls, n):
        if n <= 0:
            raise ValueError("Can't factor %d" % n)
        return cls(factorint(n))

    def __mul__(self, entry):
        if not isinstance(entry, FactoredRational):
            entry = FactoredRational.from_int(entry)

        factors = dict(self.factors)
        for p, e in entry.factors.items():
            factors[p] = factors.get(p, 0) + e
        return FactoredRational(factors)

    __rmul__ = __mul__

    def __pow__(self, k):
        return FactoredRational( dict( (p, e*k) for p, e in self.factors.items() ) )

    def reciprocal(self):
        return self ** -1

    def __truediv__(self, entry):
        if not isinstance(entry, FactoredRational):
            entry = FactoredRational.from_int(entry)
        return self * entry.reciprocal()

    def __eq__(self, entry):
        if isinstance(entry, FactoredRational):
            return self.factors == entry.factors
        return self.to_fraction() == entry

    def __hash__(self):
        return hash(self.to_fraction())

    @property
    def numerator(self):
        n = 1
        for p, e in self.factors.items():
            if e > 0:
                n *= p**e
        return n

    @property
    def denominator(self):
        d = 1
        for p, e in self.factors.items():
            if e < 0:
                d *= p**-e
        return d

    def to_fraction(self):
        return F(self.numerator, self.denominator)

    def __int__(self):
        if self.denominator != 1:
            raise IntegralityError("%s is not an integer" % self.to_fraction())
        return self.numerator

    def __repr__(self):
        return "FactoredRational(%r)" % self.factors

    def __str__(self):
        return str(self.to_fraction())

ONE = FactoredRational()

def factorial( n ):
    """
    n! by Legendre's formula, without multiplying it out.

    >>> int(factorial(6)), factorial(6).factors
    (720, {2: 4, 3: 2, 5: 1})
    >>> factorial(0) == 1
    True
    """
    if n < 0:
        raise ValueError("Can't take factorial of %d" % n)

    factors = {}
    for p in primerange(2, n+1):
        e, q = 0, p
        while q <= n:
            e += n // q
            q *= p
        factors[p] = e
    return FactoredRational(factors)

@lru_cache(maxsize=None)
def divisors( n ):
    """
    >>> divisors(12)
    (1, 2, 3, 4, 6, 12)
    """
    return tuple(_divisors(n))

def euler_phi( n ):
    """
    >>> [euler_phi(n) for n in range(1, 11)]
    [1, 1, 2, 2, 4, 2, 6, 4, 6, 4]
    """
    phi = 1
    for p, e in factorint(n).items():
        phi *= (p - 1) * p**(e - 1)
    return phi

def mobius( n ):
    """
    >>> [mobius(n) for n in range(1, 11)]
    [1, -1, -1, 0, -1, 1, -1, 0, 0, 1]
    """
    factors = factorint(n)
    if any( e > 1 for e in factors.values() ):
        return 0
    return -1 if len(factors) % 2 else 1
