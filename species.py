"""
The operations every interpretation of species expressions provides.

A species expression is written once against the class methods below and
then evaluated by picking an interpretation: CycleIndex for cycle index
series, EGF for labeled counting.

>>> from labeled import EGF, labeled
>>> from cycleindex import CycleIndex, unlabeled
>>> list(labeled(EGF.octopi())[:6])
[0, 1, 3, 14, 90, 744]
>>> list(unlabeled(CycleIndex.octopi())[:6])
[0, 1, 2, 3, 5, 7]
"""

from abc import ABC, abstractmethod

from powerseries import PowerSeries, I
from recursive import solve_recursive

class Species(ABC):
    # default bound on the steps rec takes per degree
    rec_precision = 10

    def __init__(self, series):
        self.series = series

    # primitive species

    @classmethod
    @abstractmethod
    def singleton(cls):
        """ The species X of singletons. """

    @classmethod
    @abstractmethod
    def set(cls):
        """ The species E of sets. """

    @classmethod
    @abstractmethod
    def cycle(cls):
        """ The species C of cyclic orderings. """

    @classmethod
    def zero(cls):
        return cls(PowerSeries())

    @classmethod
    def one(cls):
        return cls(I)

    # primitive operations

    @abstractmethod
    def differentiate(self):
        """ F'-structures are F-structures with an extra "hole" element. """

    @abstractmethod
    def o(self, entry):
        """ Partitional composition: F-structures on blocks of G-structures. """

    @abstractmethod
    def hadamard(self, entry):
        """ Pairs of an F-structure and a G-structure on the same set. """

    @abstractmethod
    def functor_compose(self, entry):
        """ F-structures on the set of G-structures. """

    def of_size(self, pred):
        return type(self)( self.series.select(pred) )

    def of_size_exactly(self, n):
        return type(self)( self.series.only(n) )

    @classmethod
    def rec(cls, f, precision=None):
        """
        The species T with T = f(T), see recursive.solve_recursive.
        ``precision`` bounds the steps each degree may take to settle.
        """
        if precision is None:
            precision = cls.rec_precision
        return cls( solve_recursive(f, cls, precision) )

    # arithmetic

    def _series_of(self, entry):
        if isinstance(entry, Species):
            if type(entry) is not type(self):
                raise TypeError("Can't combine %s with %s" % (type(self).__name__, type(entry).__name__))
            return entry.series
        return entry

    def __add__(self, entry):
        return type(self)( self.series + self._series_of(entry) )

    __radd__ = __add__

    def __neg__(self):
        return type(self)( -self.series )

    def __sub__(self, entry):
        return self + (-entry)

    def __rsub__(self, entry):
        return (-self) + entry

    def __mul__(self, entry):
        return type(self)( self.series * self._series_of(entry) )

    def __rmul__(self, entry):
        return self * entry

    def __matmul__(self, entry):
        return self.functor_compose(entry)

    def __getitem__(self, n):
        return self.series[n]

    def __str__(self):
        return self.series.getstr()

    # derived operations

    def non_empty(self):
        """ Don't put a structure on the empty set. """
        return self.of_size(lambda n: n > 0)

    def cons(self, entry):
        """
        This species on the empty set and entry everywhere else.  Handy to
        get recursive definitions off the ground.
        """
        return self.of_size_exactly(0) + entry.non_empty()

    def one_hole(self):
        return self.differentiate()

    def made_of(self, entry):
        return self.o(entry)

    def pointed(self):
        """ Structures with a distinguished element: X * F'. """
        return type(self).singleton() * self.differentiate()

    # synonyms

    @classmethod
    def x(cls):
        return cls.singleton()

    @classmethod
    def e(cls):
        return cls.set()

    @classmethod
    def sets(cls):
        return cls.set()

    @classmethod
    def cycles(cls):
        return cls.cycle()

    # derived species

    @classmethod
    def lists(cls):
        """ Linear orders: lists are cycles with a hole, L = C'. """
        return cls.cycle().differentiate()

    @classmethod
    def elements(cls):
        """ An element of the underlying set: X * E. """
        return cls.singleton() * cls.set()

    @classmethod
    def octopi(cls):
        """ Cycles of non-empty lists: C o L+. """
        return cls.cycle().o( cls.lists().non_empty() )

    @classmethod
    def partitions(cls):
        """ Set partitions: E o E+. """
        return cls.set().o( cls.set().non_empty() )

    @classmethod
    def permutations(cls):
        """ Sets of disjoint cycles: E o C. """
        return cls.set().o( cls.cycle() )

    @classmethod
    def subsets(cls):
        return cls.set() * cls.set()

    @classmethod
    def ballots(cls):
        """ Linear orders of non-empty sets: L o E+. """
        return cls.lists().o( cls.set().non_empty() )
