from fractions import Fraction as F

from partitions import CycleType
from polynomial import Monomial, Polynomial

x1 = Polynomial.variable(1)
x2 = Polynomial.variable(2)
x3 = Polynomial.variable(3)

def test_ring_operations():
    p = (1 + x1) * (1 + x1)
    assert p == 1 + 2*x1 + x1*x1
    assert p - 1 == x1*(x1 + 2)
    assert (p - p) == 0
    assert not (p - p)
    assert F(1, 2) * x2 == x2 / 2

def test_zero_coefficients_are_dropped():
    p = Polynomial({((1, 1),): 1, ((2, 1),): 0})
    assert len(p) == 1
    assert (x1 - x1).terms == {}

def test_coeff_and_total():
    p = 3*x1*x2 + F(1, 2)*x3
    assert p.coeff([(1, 1), (2, 1)]) == 3
    assert p.coeff([(1, 3)]) == 0
    assert p.total() == F(7, 2)

def test_monomials_are_ordered():
    p = x1*x1*x1 + x3 + x1*x2 + x1 + 1
    assert [ m.powers for m in p.monomials() ] == [
        CycleType(),
        CycleType([(1, 1)]),
        CycleType([(3, 1)]),
        CycleType([(1, 1), (2, 1)]),
        CycleType([(1, 3)]),
    ]

def test_from_monomials_merges_duplicates():
    ct = CycleType([(2, 1)])
    p = Polynomial.from_monomials([Monomial(F(1, 3), ct), Monomial(F(2, 3), ct)])
    assert p == x2

def test_differentiate():
    p = x1*x1*x2 + x3 + 5
    assert p.differentiate() == 2*x1*x2

def test_stretch():
    assert (x1*x2 + x1).stretch(2) == Polynomial.variable(2)*Polynomial.variable(4) + x2

def test_hadamard_keeps_common_monomials():
    p = 2*x1*x1 + x2
    q = 3*x1*x1 + x3
    # aut of x1^2 is 2
    assert p.hadamard(q) == 12*x1*x1

def test_coerce():
    assert Polynomial.coerce(0) == Polynomial()
    assert Polynomial.coerce(x1) is x1
    assert Polynomial.coerce(F(1, 2)).coeff([]) == F(1, 2)

def test_str():
    assert str(Polynomial()) == "0"
    assert str(x1 - F(1, 2)*x2) == "x1 - 1/2 x2"
    assert str(-x1) == "-1 x1"
    assert str(Monomial(F(1, 6), CycleType([(1, 3)]))) == "1/6 x1^3"
