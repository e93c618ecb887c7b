from fractions import Fraction as F
from math import factorial as math_factorial, gcd

import pytest

from factored import FactoredRational, factorial, euler_phi, mobius, divisors
from errors import IntegralityError
from partitions import CycleType, int_partitions, aut, ez_coeff, cycle_power

PARTITION_NUMBERS = [1, 1, 2, 3, 5, 7, 11, 15, 22, 30, 42, 56, 77]

@pytest.mark.parametrize("n", range(len(PARTITION_NUMBERS)))
def test_int_partitions(n):
    ps = int_partitions(n)
    assert len(ps) == PARTITION_NUMBERS[n]
    assert len(set(ps)) == len(ps)
    assert all( p.degree == n for p in ps )

    keys = [ p.key for p in ps ]
    assert keys == sorted(keys)

def test_int_partitions_of_negative():
    with pytest.raises(ValueError):
        int_partitions(-1)

@pytest.mark.parametrize("n", range(9))
def test_every_permutation_has_one_cycle_type(n):
    assert sum( F(math_factorial(n)) / aut(p).to_fraction() for p in int_partitions(n) ) == math_factorial(n)

@pytest.mark.parametrize("n", range(1, 9))
def test_aut_of_identity_and_full_cycle(n):
    assert int(aut([(1, n)])) == math_factorial(n)
    assert int(aut([(n, 1)])) == n

def test_aut_of_empty_cycle_type():
    assert int(aut([])) == 1

def test_ez_coeff():
    assert ez_coeff([(1, 3)]) == F(1, 6)
    assert ez_coeff([(2, 2)]) == F(1, 8)

def test_cycle_power():
    assert list(cycle_power([(2, 1)], 2)) == [(1, 2)]
    assert list(cycle_power([(6, 1)], 4)) == [(3, 2)]
    assert list(cycle_power([(1, 2), (3, 1)], 1)) == [(1, 2), (3, 1)]
    assert list(cycle_power([], 5)) == []

@pytest.mark.parametrize("n", range(1, 7))
def test_cycle_power_of_order_is_identity(n):
    for p in int_partitions(n):
        order = 1
        for k, _ in p:
            order = order * k // gcd(order, k)
        assert cycle_power(p, order) == CycleType.identity(n)

def test_cycle_power_needs_positive_exponent():
    with pytest.raises(ValueError):
        cycle_power([(2, 1)], 0)

@pytest.mark.parametrize("pairs", [
    [(2, 1), (1, 1)],
    [(1, 1), (1, 2)],
    [(1, 0)],
    [(0, 3)],
    [(1.5, 2)],
])
def test_malformed_cycle_types(pairs):
    with pytest.raises(ValueError):
        CycleType(pairs)

def test_cycle_type_helpers():
    ct = CycleType.from_counts({3: 1, 1: 2, 2: 0})
    assert list(ct) == [(1, 2), (3, 1)]
    assert ct.merge(CycleType([(1, 1), (2, 1)])) == CycleType([(1, 3), (2, 1), (3, 1)])
    assert ct.stretch(2) == CycleType([(2, 2), (6, 1)])
    assert ct.without(3) == CycleType([(1, 2)])
    assert CycleType.identity(0) == CycleType()

@pytest.mark.parametrize("n", range(21))
def test_factorial(n):
    assert int(factorial(n)) == math_factorial(n)

def test_factored_arithmetic():
    a = FactoredRational.from_int(12)
    b = FactoredRational.from_int(18)
    assert (a * b).to_fraction() == 216
    assert (a / b).to_fraction() == F(2, 3)
    assert (a / b).numerator == 2 and (a / b).denominator == 3
    assert a ** 2 == 144
    assert a.reciprocal() * a == 1
    with pytest.raises(IntegralityError):
        int(a / b)
    with pytest.raises(ValueError):
        FactoredRational.from_int(0)

def test_number_theory():
    for n in range(1, 40):
        ds = [ d for d in range(1, n+1) if n % d == 0 ]
        assert list(divisors(n)) == ds
        assert euler_phi(n) == sum( 1 for k in range(1, n+1) if gcd(n, k) == 1 )
        # the Moebius function inverts summation over divisors
        assert sum( mobius(d) for d in ds ) == (1 if n == 1 else 0)
