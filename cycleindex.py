"""
An interpretation of species expressions as cycle index series.

A cycle index series is kept as a power series in the degree: its n-th
term is the block of all monomials of weighted degree n, a Polynomial.
Only the blocks that are asked for are ever computed.

>>> print(CycleIndex.set().getstr(4))
1 + x1 + 1/2 x2 + 1/2 x1^2 + 1/3 x3 + 1/2 x1 x2 + 1/6 x1^3 + ...
>>> print(CycleIndex.cycle().getstr(4))
x1 + 1/2 x2 + 1/2 x1^2 + 2/3 x3 + 1/3 x1^3 + ...
"""

from fractions import Fraction as F
from itertools import count, chain, islice
import logging

from errors import IntegralityError
from factored import divisors, euler_phi, mobius
from labeled import EGF, labeled
from partitions import CycleType, int_partitions, ez_coeff, aut, cycle_power, as_cycle_type
from polynomial import Monomial, Polynomial, monomials_to_str
from powerseries import PowerSeries, memoizedGenerator, from_coeffs, pstestlimit
from species import Species

logger = logging.getLogger(__name__)

class CycleIndex(Species):
    rec_precision = 10

    def __init__(self, series):
        super().__init__( series.deep_apply(Polynomial.coerce) )

    @classmethod
    def from_monomials(cls, monomials):
        """ Build a series from monomials in ascending order. """
        @memoizedGenerator
        def _blocks():
            return insert_zeros(monomials)

        return cls( PowerSeries(_blocks) )

    def monomials(self):
        """ All monomials, in ascending order. """
        return chain.from_iterable( block.monomials() for block in self.series )

    def block(self, n):
        return self.series[n]

    def getstr(self, n=None):
        ms = chain.from_iterable( block.monomials() for block in islice(self.series, n or pstestlimit) )
        return monomials_to_str(ms) + " + ..."

    def __str__(self):
        return self.getstr()

    @classmethod
    def singleton(cls):
        return cls( from_coeffs([0, Polynomial.variable(1)]) )

    @classmethod
    def set(cls):
        return cls.from_monomials( Monomial(ez_coeff(p), p) for n in count() for p in int_partitions(n) )

    @classmethod
    def cycle(cls):
        return cls.from_monomials( cycle_monomial(n, d) for n in count(1) for d in divisors(n) )

    def differentiate(self):
        return CycleIndex( self.series.tail.deep_apply(lambda p: p.differentiate()) )

    def o(self, entry):
        """
        Partitional composition Z_F(Z_G(x_1, x_2, ...), Z_G(x_2, x_4, ...), ...).

        >>> E, C = CycleIndex.set(), CycleIndex.cycle()
        >>> list(unlabeled(E.o(C))[:8])
        [1, 1, 2, 3, 5, 7, 11, 15]
        """
        f, g = self.series, entry.series
        gs = []
        # products[ct][n]: n-th block of prod_i Z_G(x_i, x_2i, ...)**ct_i
        products = {}

        def stretched( i, m ):
            return gs[m // i].stretch(i) if m % i == 0 else Polynomial()

        def product( ct, n ):
            if not ct:
                return Polynomial.constant(1) if n == 0 else Polynomial()

            blocks = products.setdefault(ct, [])
            i = ct[-1][0]
            rest = ct.without(i)
            while len(blocks) <= n:
                m = len(blocks)
                blocks.append( sum( (product(rest, m-j) * stretched(i, j) for j in range(i, m+1)), Polynomial() ) )
            return blocks[n]

        @memoizedGenerator
        def _compose():
            fs = []
            for n, (fb, gb) in enumerate(zip(f, g)):
                if n == 0 and gb:
                    raise ValueError("Can't compose with a species that has structures on the empty set")
                fs.append(fb)
                gs.append(gb)
                yield sum( ( c * product(ct, n) for d in range(n+1) for ct, c in fs[d].terms.items() ), Polynomial() )

        return CycleIndex( PowerSeries(_compose) )

    def hadamard(self, entry):
        """
        >>> E = CycleIndex.set()
        >>> print(E.hadamard(E).getstr(3))
        1 + x1 + 1/2 x2 + 1/2 x1^2 + ...
        """
        @memoizedGenerator
        def _hadamard():
            return ( a.hadamard(b) for a, b in zip(self.series, entry.series) )

        return CycleIndex( PowerSeries(_hadamard) )

    def functor_compose(self, entry):
        """
        Z_{F@G}: the monomial of each cycle type nn gets the coefficient
        fix F[G[nn]] / aut(nn), where G[nn] is the cycle type of the
        permutation that any sigma of cycle type nn induces on G-structures.

        >>> graphs = CycleIndex.subsets() @ (CycleIndex.set().of_size_exactly(2) * CycleIndex.set())
        >>> list(unlabeled(graphs)[:6])
        [1, 1, 2, 4, 11, 34]
        """
        f, g = self, entry
        sizes = labeled(z_to_egf(g))

        def image( nn, n ):
            # G[nn]_k = 1/k sum_{d|k} mu(k/d) fix G[nn^d], taken until the
            # cycles account for all G-structures on n elements
            target = sizes[n]
            pairs, covered, k = [], 0, 0
            while covered < target:
                k += 1
                if k > target:
                    raise IntegralityError("image of %r under G does not cover %d structures" % (nn, target))
                count_k, r = divmod( sum( mobius(k // d) * z_fix(g, cycle_power(nn, d)) for d in divisors(k) ), k )
                if r:
                    raise IntegralityError("non-integral number of %d-cycles in the image of %r" % (k, nn))
                if count_k:
                    pairs.append((k, count_k))
                    covered += k * count_k
            if covered != target:
                raise IntegralityError("image of %r under G has %d elements, expected %d" % (nn, covered, target))
            return CycleType(pairs)

        @memoizedGenerator
        def _fcomp():
            for n in count():
                logger.debug("functor composition: block %d, %d structures", n, sizes[n])
                yield Polynomial( dict( (nn, z_fix(f, image(nn, n)) * ez_coeff(nn)) for nn in int_partitions(n) ) )

        return CycleIndex( PowerSeries(_fcomp) )

def cycle_monomial( n, d ):
    """ The monomial of x_{n/d}**d in the cycle index series of cycles. """
    return Monomial( F(euler_phi(n // d), n), CycleType([(n // d, d)]) )

def insert_zeros( monomials ):
    """
    Group an ascending stream of monomials into one block per degree,
    with zero blocks for the degrees it skips.

    >>> ms = [Monomial(F(1), CycleType([(1, 1)])), Monomial(F(2), CycleType([(3, 1)]))]
    >>> [str(b) for b in islice(insert_zeros(ms), 5)]
    ['0', 'x1', '0', '2 x3', '0']
    """
    block, degree, last = [], 0, None
    for m in monomials:
        if last is not None and m.powers.key < last:
            raise ValueError("monomial %s is out of order" % (m,))
        last = m.powers.key
        while m.degree > degree:
            yield Polynomial.from_monomials(block)
            block, degree = [], degree + 1
        block.append(m)

    yield Polynomial.from_monomials(block)
    while True:
        yield Polynomial()

def z_coeff( ci, ct ):
    """
    The coefficient of the monomial with exponents ct.

    >>> z_coeff(CycleIndex.set(), [(1, 1), (2, 1)])
    Fraction(1, 2)
    """
    ct = as_cycle_type(ct)
    return ci.block(ct.degree).coeff(ct)

def z_fix( ci, ct ):
    """
    The number of structures fixed by a permutation of cycle type ct,
    aut(ct) * z_coeff(ci, ct).

    >>> z_fix(CycleIndex.cycle(), [(2, 2)])
    2
    """
    c = aut(ct).to_fraction() * z_coeff(ci, ct)
    if c.denominator != 1:
        raise IntegralityError("fixed point count %s for cycle type %r is not an integer" % (c, ct))
    return c.numerator

def z_to_egf( ci ):
    """
    F(x) = Z_F(x, 0, 0, ...)

    >>> list(labeled(z_to_egf(CycleIndex.set()))[:5])
    [1, 1, 1, 1, 1]
    """
    @memoizedGenerator
    def _egf():
        for n, block in enumerate(ci.series):
            yield block.coeff(CycleType.identity(n))

    return EGF( PowerSeries(_egf) )

def z_to_gf( ci ):
    """
    F~(x) = Z_F(x, x^2, x^3, ...), the number of unlabeled structures.

    >>> list(z_to_gf(CycleIndex.cycle())[:6])
    [0, 1, 1, 1, 1, 1]
    """
    @memoizedGenerator
    def _gf():
        for n, block in enumerate(ci.series):
            total = block.total()
            if total.denominator != 1:
                raise IntegralityError("unlabeled count %s of size %d is not an integer" % (total, n))
            yield total.numerator

    return PowerSeries(_gf)

unlabeled = z_to_gf
unlabelled = z_to_gf
