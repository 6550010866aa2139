import pytest

from edcurve.fields import Fq, Fq3, Fr
from edcurve.g2 import G2
from edcurve.params import TWIST_COEFF_A, TWIST_COEFF_D


def _point(k):
    return k * G2.one()


@pytest.fixture(scope="module")
def a():
    return _point(123456789123456789)


@pytest.fixture(scope="module")
def b():
    return _point(987654321987654321)


def test_zero_and_one_equal_themselves():
    assert G2.zero() == G2.zero()
    assert G2.one() == G2.one()
    assert G2.one() != G2.zero()


def test_small_multiples():
    one = G2.one()
    two = 2 * one
    three = 3 * one
    four = 4 * one
    five = 5 * one
    assert two == two
    assert two + five == three + four
    assert one.add(two) == three
    assert two.add(one) == three


def test_group_laws(a, b):
    zero = G2.zero()
    one = G2.one()
    assert a != zero
    assert a != one
    assert b != zero
    assert b != one
    assert a.dbl() == a + a
    assert b.dbl() == b + b
    assert a + b == b + a
    assert a - a == zero
    assert a - b == a + (-b)
    assert a - b == (-b) + a


def test_special_cases_with_zero(a):
    zero = G2.zero()
    assert zero + (-a) == -a
    assert zero - a == -a
    assert a - zero == a
    assert a + zero == a
    assert zero + a == a


def test_doubling_and_scalar_two(a, b):
    s = a + b
    assert s.dbl() == (a + b) + (b + a)
    assert 2 * s == (a + b) + (b + a)


def test_scalar_distributes(a):
    rand1 = 76749407
    rand2 = 44410867
    randsum = 121160274
    assert (rand1 * a) + (rand2 * a) == randsum * a


def test_order_annihilates(a):
    zero = G2.zero()
    one = G2.one()
    assert G2.order() * a == zero
    assert G2.order() * one == zero
    assert (G2.order() * a) - a != zero
    assert (G2.order() * one) - one != zero


def test_field_element_scalar(a):
    assert Fr(5) * a == 5 * a


@pytest.mark.parametrize("base_zero,el_zero", [(True, True), (True, False), (False, True), (False, False)])
def test_mixed_add(a, b, base_zero, el_zero):
    base = G2.zero() if base_zero else a
    el = G2.zero() if el_zero else b
    el = el._copy()
    el.to_special()
    assert base.mixed_add(el) == base + el


def test_mixed_add_same_point_doubles(a):
    el = a._copy()
    el.to_special()
    assert a.mixed_add(el) == a.dbl()


def test_mul_by_q(a):
    assert G2.base_field_char() * a == a.mul_by_q()


def test_random_element_is_well_formed():
    p = G2.random_element()
    assert p.is_well_formed()
    assert G2.order() * p == G2.zero()


def test_generator_well_formed_and_broken_point_not():
    assert G2.one().is_well_formed()
    assert G2.zero().is_well_formed()
    bad = G2(Fq3(1, 2, 3), Fq3(4, 5, 6))
    assert not bad.is_well_formed()


def test_mul_by_a_and_d_match_twist_coefficients():
    e = Fq3(11, 22, 33)
    assert G2.mul_by_a(e) == TWIST_COEFF_A * e
    assert G2.mul_by_d(e) == TWIST_COEFF_D * e
    assert G2.mul_by_a(Fq3(1, 0, 0)) == Fq3(0, 1, 0)


def test_zero_text_form():
    assert G2.zero().to_text() == "0 0 0 1"
    assert G2.from_text("0 0 0 1") == G2.zero()
    assert str(G2.zero()) == "O"
    assert G2.zero().coordinates_text() == "O"


@pytest.mark.parametrize("k", [1, 2, 7, 1234567890123])
def test_text_round_trip(k):
    g = _point(k)
    assert G2.from_text(g.to_text()) == g


def test_random_text_round_trip():
    g = G2.random_element()
    assert G2.from_text(g.to_text()) == g


@pytest.mark.parametrize("text", ["", "1 2 3", "1 2 3 4 5", "1 2 3 7", "a b c 1"])
def test_from_text_rejects_malformed(text):
    with pytest.raises(ValueError):
        G2.from_text(text)


def test_to_affine_and_special(a):
    p = a._copy()
    p.to_affine_coordinates()
    assert p.Z == Fq3.one()
    assert p.is_special()
    q = a.dbl()
    q.to_special()
    assert q.is_special()
    assert q == a.dbl()


def test_str_shows_affine_coordinates():
    one = G2.one()
    text = str(one)
    x, y = one.Y, one.X  # affine coordinates of the generator as constructed
    p = one._copy()
    p.to_affine_coordinates()
    assert p.X == x and p.Y == y
    assert text == (
        f"({x.c2}*z^2 + {x.c1}*z + {x.c0} , {y.c2}*z^2 + {y.c1}*z + {y.c0})"
    )
    assert one.coordinates_text().startswith("(") and " : " in one.coordinates_text()


def test_batch_to_special(a, b):
    points = [a.dbl(), b.dbl(), (a + b)]
    expected = [p._copy() for p in points]
    G2.batch_to_special_all_non_zeros(points)
    assert all(p.Z == Fq3.one() for p in points)
    assert points == expected


def test_sizes_and_characteristics():
    assert G2.size_in_bits() == 3 * 183 + 1
    assert G2.base_field_char() == Fq.modulus
    assert G2.order() == Fr.modulus


def test_hash_consistent_with_equality(a):
    p = a._copy()
    p.to_special()
    assert hash(p) == hash(a)
    assert len({p, a, G2.zero(), G2.zero()}) == 2


def test_constructor_rejects_non_fq3():
    with pytest.raises(TypeError):
        G2(1, 2)