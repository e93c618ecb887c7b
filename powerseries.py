from fractions import Fraction as F
from itertools import count, islice, repeat, chain, starmap
import logging

logger = logging.getLogger(__name__)

pstestlimit = 5

def memoizedGenerator( gen ):
    _iter = gen()
    _cache = []

    def _fill( n ):
        while len(_cache) <= n:
            _cache.append(next(_iter))

    def _gen():
        for n in count():
            if n >= len(_cache):
                try:
                    _fill(n)
                except StopIteration:
                    return
            yield _cache[n]

    def _term( n ):
        try:
            _fill(n)
        except StopIteration:
            raise IndexError("series has no term %d" % n) from None
        return _cache[n]

    _gen.term = _term
    return _gen

def num_to_str( term ):
    if isinstance(term, float):
        return "\t% .3e" % term
    else:
        return "\t"+str(term)

class PowerSeries(object):
    """
    A lazily evaluated power series in one variable.

    The coefficients only need to form a ring together with the integers,
    so a series can carry numbers as well as polynomials.

    >>> S = from_coeffs([1, 2, 3])
    >>> S[2], S[7]
    (3, 0)
    >>> list(S[1:4])
    [2, 3, 0]
    """

    def __init__(self, g=None):
        self.__g = g

    def __eq__(self, entry):
        logger.warning("comparing power series on the first %d terms", pstestlimit)
        return Equal( self, entry )

    __hash__ = object.__hash__

    def __iter__( self ):
        return self.__g() if self.__g else repeat(0)

    def __str__(self):
        return self.getstr()

    def getstr(self, nums=[], term_to_str=num_to_str):
        def gen_str():
            if isinstance(nums, int):
                n = nums
            else:
                n = nums[0] if nums else pstestlimit

            for term in islice(self, n):
                yield term_to_str(term) + ", "

        return "".join(gen_str()) + "..."

    def __getitem__(self, key):
        if isinstance(key, slice):
            return islice(self, key.start, key.stop, key.step)
        elif self.__g is not None and hasattr(self.__g, "term"):
            return self.__g.term(key)
        else:
            return next(islice(self, key, None))

    def deep_apply( self, func ):
        @memoizedGenerator
        def _deep_apply():
            return map( func, self )

        return PowerSeries( _deep_apply )

    @property
    def ord2exp(self):
        """
        >>> list((1/(1-X)).ord2exp[:5])
        [Fraction(1, 1), Fraction(1, 1), Fraction(1, 2), Fraction(1, 6), Fraction(1, 24)]
        """
        @memoizedGenerator
        def _ord2exp():
            f = 1
            for n,term in enumerate(self):
                yield F(term, f) if isinstance(term, int) else term / f
                f*= n+1

        return PowerSeries(_ord2exp)

    @property
    def exp2ord(self):
        """
        >>> Equal((1/(1-X)).ord2exp.exp2ord, 1/(1-X))
        True
        """
        @memoizedGenerator
        def _exp2ord():
            f = 1
            for n,term in enumerate(self):
                yield term * f
                f*= n+1

        return PowerSeries(_exp2ord)

    @property
    def zero(self):
        return self[0]

    @property
    def tail(self):
        def _tail():
            return islice(self, 1, None)

        return PowerSeries(_tail)

    @property
    def xmul(self):
        def _xmul():
            return chain( ( self.zero*0,), self )

        return PowerSeries(_xmul)

    def __add__(self, entry):
        if is_powerseries(entry):
            @memoizedGenerator
            def _add():
                return starmap( lambda a,b: a+b, zip( self, entry ) )
        else:
            def _add():
                return chain( map( lambda a: a+entry, islice(self, 0, 1) ), islice(self, 1, None) )

        return PowerSeries(_add)

    __radd__ = __add__

    def __sub__(self, entry):
        return self + (-entry)

    def __rsub__(self, entry):
        return entry + (-self)

    def __neg__(self):
        return self.deep_apply( lambda x: -x )

    def __mul__(self, entry):
        """
        >>> Equal((1+X)*(1-X), 1-X*X)
        True
        >>> list((1/(1-X)*(1/(1-X)))[:5])
        [Fraction(1, 1), Fraction(2, 1), Fraction(3, 1), Fraction(4, 1), Fraction(5, 1)]
        """
        if not is_powerseries(entry):
            if entry == 1:
                return self
            elif entry == 0:
                return PowerSeries()
            else:
                return self.deep_apply( lambda x: x*entry )

        @memoizedGenerator
        def _mul():
            fs, gs = [], []
            for f, g in zip(self, entry):
                fs.append(f)
                gs.append(g)
                n = len(fs) - 1
                yield sum( fs[i]*gs[n-i] for i in range(n+1) )

        return PowerSeries(_mul)

    def __rmul__(self, entry):
        return self * entry

    def __truediv__(self, entry):
        if is_powerseries(entry):
            return entry.__rtruediv__(self)
        elif entry == 1:
            return self
        elif entry == 0:
            raise ValueError("Zero division error")
        else:
            return self * (F(1, 1) / entry)

    def __rtruediv__(self, entry):
        """
        >>> A = 10/ (1 - X)
        >>> Equal(A, 1/(1-X) * 10 )
        True

        >>> B = 1 / (1 - X - X*X)
        >>> Equal(1/B, 1-X-X*X)
        True

        """

        @memoizedGenerator
        def _rdiv():
            f0 = self.zero
            if isinstance(f0, int):
                recip = F(1, f0)
            else:
                recip = 1 / f0

            if not is_powerseries(entry):
                yield entry * recip

                for term in ( (self.tail * R).deep_apply( lambda x: -x*recip ) ):
                    yield term
            else:
                yield entry.zero * recip

                for term in ( (entry.tail-self.tail * R).deep_apply( lambda x: x*recip ) ):
                    yield term

        R = PowerSeries(_rdiv)
        return R

    def compose(self, g):
        """
        Substitute the series g, which must vanish at zero, for the
        variable of this series.

        >>> Equal( (1/(1-X)).compose(2*X), 1/(1-2*X) )
        True

        >>> Equal( (1/(1-X)).compose(X/(1+X)), 1+X )
        True

        >>> X.compose(1+X)[0]
        Traceback (most recent call last):
        ...
        ValueError: Can't calculate powerseries at non-zero value
        """

        if not is_powerseries(g):
            if g == 0:
                return PowerSeries() + self.zero
            else:
                raise ValueError("Can't calculate powerseries at non-zero value")

        @memoizedGenerator
        def _compose():
            # powers[k][m] is the m-th term of g**k
            powers = []
            fs, gs = [], []
            for n, (f, g_n) in enumerate(zip(self, g)):
                fs.append(f)
                gs.append(g_n)

                if n == 0:
                    if g_n != 0:
                        raise ValueError("Can't calculate powerseries at non-zero value")
                    powers.append([1])
                else:
                    powers[0].append(0)
                    for k in range(1, n+1):
                        if k == len(powers):
                            powers.append([0]*n)
                        prev = powers[k-1]
                        powers[k].append( sum( prev[i]*gs[n-i] for i in range(n+1) ) )

                yield sum( fs[k]*powers[k][n] for k in range(n+1) )

        return PowerSeries(_compose)

    def __call__( self, g ):
        return self.compose(g)

    def hadamard(self, entry):
        """
        Multiply term by term.

        >>> list((1/(1-2*X)).hadamard(1/(1-3*X))[:4])
        [Fraction(1, 1), Fraction(6, 1), Fraction(36, 1), Fraction(216, 1)]
        """
        @memoizedGenerator
        def _hadamard():
            return starmap( lambda a,b: a*b, zip( self, entry ) )

        return PowerSeries(_hadamard)

    def select( self, pred ):
        """
        Keep the terms whose index satisfies pred, zero all others.

        >>> list(from_coeffs([5, 6, 7, 8]).select(lambda n: n % 2 == 0)[:5])
        [5, 0, 7, 0, 0]
        """
        @memoizedGenerator
        def _select():
            return ( term if pred(n) else term*0 for n, term in enumerate(self) )

        return PowerSeries(_select)

    def only( self, n ):
        """
        Keep the n-th term only.

        >>> list(from_coeffs([5, 6, 7, 8]).only(2)[:5])
        [0, 0, 7, 0, 0]
        """
        if n < 0:
            raise ValueError("Can't select the %d-th term" % n)

        def _only():
            term = self[n]
            return chain( repeat(term*0, n), (term,), repeat(term*0) )

        return PowerSeries(_only)

    def D( self, n=1 ):
        if n == 1:
            @memoizedGenerator
            def _D():
                return starmap( lambda n,x: (n+1)*x, enumerate(self.tail) )

            return PowerSeries(_D)
        elif n == 0:
            return self
        elif isinstance(n, int) and n > 1:
            return D( D(self), n-1 )
        else:
            raise ValueError("Can't take %d-th derivative" % n)

    def integral( self, const=0 ):
        """
        >>> list(integral(1/(1-X))[:4])
        [0, Fraction(1, 1), Fraction(1, 2), Fraction(1, 3)]
        """
        @memoizedGenerator
        def _int():
            return chain( (const,), starmap( lambda n,x: F(1,n+1)*x, enumerate(self) ) )

        return PowerSeries(_int)

def D( f, n=1 ):
    return f.D(n)

def integral( f, const=0 ):
    return f.integral(const)

def from_coeffs( coeffs ):
    coeffs = list(coeffs)

    def _coeffs():
        return chain( coeffs, repeat(0) )

    return PowerSeries(_coeffs)

def Equal( entry1, entry2, n=pstestlimit ):
    if not is_powerseries( entry1 ) and not is_powerseries( entry2 ):
        return entry1 == entry2
    elif not is_powerseries( entry1 ):
        return Equal(entry2.zero, entry1) and Equal(entry2.tail, PowerSeries(), n)
    elif not is_powerseries( entry2 ):
        return Equal(entry1.zero, entry2) and Equal(entry1.tail, PowerSeries(), n)
    else:
        return all( s == e for s,e in islice(zip(entry1, entry2), n) )

def is_powerseries( entry ):
    return isinstance(entry, PowerSeries)

ZERO = PowerSeries()
I = 1 + ZERO
X = I.xmul

if __name__ == '__main__':
    import doctest
    doctest.testmod()
