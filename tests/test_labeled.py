from fractions import Fraction as F
from math import factorial

import pytest

from cycleindex import CycleIndex
from errors import IntegralityError, RecursionSolveError
from labeled import EGF, labeled, labelled
from powerseries import from_coeffs

def test_primitives():
    assert list(EGF.singleton()[:3]) == [0, 1, 0]
    assert list(EGF.set()[:5]) == [ F(1, factorial(n)) for n in range(5) ]
    assert list(EGF.cycle()[:5]) == [0, 1, F(1, 2), F(1, 3), F(1, 4)]

@pytest.mark.parametrize("name, counts", [
    ("singleton", [0, 1, 0, 0, 0, 0, 0]),
    ("set", [1, 1, 1, 1, 1, 1, 1]),
    ("cycle", [0, 1, 1, 2, 6, 24, 120]),
    ("lists", [1, 1, 2, 6, 24, 120, 720]),
    ("elements", [0, 1, 2, 3, 4, 5, 6]),
    ("octopi", [0, 1, 3, 14, 90, 744, 7560]),
    ("partitions", [1, 1, 2, 5, 15, 52, 203]),
    ("permutations", [1, 1, 2, 6, 24, 120, 720]),
    ("subsets", [1, 2, 4, 8, 16, 32, 64]),
    ("ballots", [1, 1, 3, 13, 75, 541, 4683]),
])
def test_labeled_counts(name, counts):
    assert list(labeled(getattr(EGF, name)())[:7]) == counts

def test_octopi():
    assert list(labeled(EGF.octopi())[:10]) == [0, 1, 3, 14, 90, 744, 7560, 91440, 1285200, 20603520]

def test_labelled_is_labeled():
    assert labelled is labeled

def test_labeled_is_unbounded():
    assert labeled(EGF.singleton())[50] == 0
    assert labeled(EGF.lists())[30] == factorial(30)

def test_labeled_rejects_fractions():
    third = EGF( from_coeffs([0, F(1, 3)]) )
    with pytest.raises(IntegralityError):
        labeled(third)[1]

def test_hadamard():
    E, L = EGF.set(), EGF.lists()
    assert list(labeled(E.hadamard(E))[:6]) == [1]*6
    assert list(labeled(L.hadamard(L))[:6]) == [ factorial(n)**2 for n in range(6) ]

def test_functor_composition():
    E = EGF.set()
    graphs = EGF.subsets() @ (E.of_size_exactly(2) * E)
    assert list(labeled(graphs)[:5]) == [1, 1, 2, 8, 64]
    # one set of all structures, whatever they are
    assert list(labeled(E @ EGF.cycle())[:6]) == [1]*6

def test_of_size():
    L = EGF.lists()
    assert list(labeled(L.of_size(lambda n: n >= 3))[:5]) == [0, 0, 0, 6, 24]
    assert list(labeled(L.of_size_exactly(4))[:6]) == [0, 0, 0, 0, 24, 0]
    assert list(labeled(L.non_empty())[:3]) == [0, 1, 2]

def test_composition_needs_empty_constant_term():
    with pytest.raises(ValueError):
        EGF.set().o(EGF.set())[0]

def test_rec_rooted_trees():
    X, E = EGF.singleton, EGF.set
    trees = EGF.rec( lambda t: X() * E().o(t) )
    assert list(labeled(trees)[:8]) == [ n**(n-1) if n else 0 for n in range(8) ]

def test_rec_binary_trees():
    # T = 1 + X*T^2, counted with labels: n! * Catalan(n)
    X = EGF.singleton
    T = EGF.rec( lambda t: EGF.one().cons(X() * t * t) )
    catalan = [1, 1, 2, 5, 14, 42]
    assert list(labeled(T)[:6]) == [ factorial(n) * c for n, c in enumerate(catalan) ]

def test_rec_reads_past_precision():
    assert EGF.rec_precision > CycleIndex.rec_precision
    lists = EGF.rec( lambda t: EGF.one().cons(EGF.x() * t) )
    assert labeled(lists)[99] == factorial(99)

def test_rec_failures_name_their_cause():
    f = lambda t: EGF.set() + t
    with pytest.raises(RecursionSolveError) as info:
        EGF.rec(f)[0]
    assert info.value.expression is f
    assert info.value.reason == "degree 0 did not settle within precision 100"

    g = lambda t: EGF.set() - t
    with pytest.raises(RecursionSolveError) as info:
        EGF.rec(g)[0]
    assert info.value.reason.startswith("not of the form T = X*R(T): degree 0 cycles")
