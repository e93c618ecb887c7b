from collections import namedtuple
from fractions import Fraction as F
from numbers import Rational

from partitions import CycleType, aut, as_cycle_type

class Monomial(namedtuple('Monomial', ['coeff', 'powers'])):
    """
    c * x_1**e_1 * x_2**e_2 * ..., with the exponents stored as a
    CycleType of (variable index, exponent) pairs.
    """
    __slots__ = ()

    @property
    def degree(self):
        return self.powers.degree

    def __str__(self):
        return term_to_str(self.coeff, self.powers)

def term_to_str( c, powers ):
    xs = " ".join( "x%d" % i if e == 1 else "x%d^%d" % (i, e) for i, e in powers )
    if not xs:
        return str(c)
    elif c == 1:
        return xs
    else:
        return "%s %s" % (c, xs)

def monomials_to_str( monomials ):
    s = ""
    for m in monomials:
        if not s:
            s = str(m)
        elif m.coeff < 0:
            s += " - " + term_to_str(-m.coeff, m.powers)
        else:
            s += " + " + str(m)
    return s or "0"

class Polynomial(object):
    """
    A polynomial in the variables x_1, x_2, ... with rational coefficients.

    Terms are keyed by their exponent pattern; zero coefficients are never
    stored.  Integers act as constant polynomials, so polynomials can be
    the terms of a PowerSeries.

    >>> x1 = Polynomial.variable(1)
    >>> x2 = Polynomial.variable(2)
    >>> p = (x1 + x2) * (x1 - x2)
    >>> print(p)
    x1^2 - x2^2
    >>> print(p.differentiate())
    2 x1
    >>> print(p.stretch(3))
    x3^2 - x6^2
    >>> p - x1*x1 + x2*x2 == 0
    True
    """

    def __init__(self, terms=None):
        self.terms = {}
        for ct, c in (terms or {}).items():
            if c != 0:
                self.terms[as_cycle_type(ct)] = F(c)

    @classmethod
    def constant(cls, c):
        return cls({CycleType(): c})

    @classmethod
    def variable(cls, i):
        return cls({CycleType([(i, 1)]): 1})

    @classmethod
    def from_monomials(cls, monomials):
        p = cls()
        for m in monomials:
            p._add_term(m.powers, m.coeff)
        return p

    @staticmethod
    def coerce(value):
        if isinstance(value, Polynomial):
            return value
        return Polynomial.constant(value)

    def _add_term(self, ct, c):
        c = self.terms.get(ct, 0) + c
        if c != 0:
            self.terms[ct] = c
        else:
            self.terms.pop(ct, None)

    def monomials(self):
        """ The terms in ascending monomial order. """
        return [ Monomial(self.terms[ct], ct) for ct in sorted(self.terms, key=lambda ct: ct.key) ]

    def __iter__(self):
        return iter(self.monomials())

    def __len__(self):
        return len(self.terms)

    def __bool__(self):
        return bool(self.terms)

    def coeff(self, ct):
        return self.terms.get(as_cycle_type(ct), F(0))

    def total(self):
        return sum( self.terms.values(), F(0) )

    def __eq__(self, entry):
        if isinstance(entry, Polynomial):
            return self.terms == entry.terms
        if isinstance(entry, Rational):
            return self.terms == Polynomial.constant(entry).terms
        return NotImplemented

    def __ne__(self, entry):
        eq = self.__eq__(entry)
        return eq if eq is NotImplemented else not eq

    __hash__ = None

    def __add__(self, entry):
        if isinstance(entry, Rational):
            entry = Polynomial.constant(entry)
        elif not isinstance(entry, Polynomial):
            return NotImplemented

        p = Polynomial(self.terms)
        for ct, c in entry.terms.items():
            p._add_term(ct, c)
        return p

    __radd__ = __add__

    def __neg__(self):
        return Polynomial( dict( (ct, -c) for ct, c in self.terms.items() ) )

    def __sub__(self, entry):
        return self + (-entry)

    def __rsub__(self, entry):
        return (-self) + entry

    def __mul__(self, entry):
        if isinstance(entry, Rational):
            return Polynomial( dict( (ct, c*entry) for ct, c in self.terms.items() ) )
        elif not isinstance(entry, Polynomial):
            return NotImplemented

        p = Polynomial()
        for ct1, c1 in self.terms.items():
            for ct2, c2 in entry.terms.items():
                p._add_term(ct1.merge(ct2), c1*c2)
        return p

    __rmul__ = __mul__

    def __truediv__(self, entry):
        if isinstance(entry, Rational):
            return self * (F(1) / entry)
        if isinstance(entry, Polynomial) and len(entry.terms) == 1 and CycleType() in entry.terms:
            return self * (1 / entry.terms[CycleType()])
        return NotImplemented

    def __rtruediv__(self, entry):
        if len(self.terms) == 1 and CycleType() in self.terms:
            return Polynomial.constant(entry / self.terms[CycleType()])
        return NotImplemented

    def differentiate(self):
        """ Partial derivative with respect to x_1. """
        p = Polynomial()
        for ct, c in self.terms.items():
            e = ct.counts().get(1, 0)
            if e:
                p._add_term(ct.without(1), c*e)
        return p

    def stretch(self, i):
        """ Substitute x_{i*j} for every x_j. """
        return Polynomial( dict( (ct.stretch(i), c) for ct, c in self.terms.items() ) )

    def hadamard(self, entry):
        """
        Keep the exponent patterns the two polynomials share, with
        coefficient c1 * c2 * aut(pattern).

        >>> e2 = Polynomial({((1, 2),): F(1, 2), ((2, 1),): F(1, 2)})
        >>> print(e2.hadamard(e2))
        1/2 x2 + 1/2 x1^2
        """
        entry = Polynomial.coerce(entry)
        return Polynomial( dict( (ct, c * entry.terms[ct] * aut(ct).to_fraction())
                                 for ct, c in self.terms.items() if ct in entry.terms ) )

    def __str__(self):
        return monomials_to_str(self.monomials())

    def __repr__(self):
        return "Polynomial(%s)" % self
