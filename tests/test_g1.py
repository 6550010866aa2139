import pytest

from edcurve.fields import Fq, Fr
from edcurve.g1 import G1, dump_vector, load_vector

GEN_X = 3713709671941291996998665608188072510389821008693530490
GEN_Y = 4869953702976555123067178261685365085639705297852816679


def test_group_laws():
    rand1 = 76749407
    rand2 = 44410867
    randsum = 121160274

    zero = G1.zero()
    assert zero == zero
    one = G1.one()
    assert one == one
    two = 2 * G1.one()
    assert two == two
    five = 5 * G1.one()
    three = 3 * G1.one()
    four = 4 * G1.one()
    assert two + five == three + four

    a = G1.random_element()
    b = G1.random_element()

    assert not (one == zero)
    assert not (a == zero)
    assert not (a == one)
    assert not (b == zero)
    assert not (b == one)

    assert a.dbl() == a + a
    assert b.dbl() == b + b
    assert one.add(two) == three
    assert two.add(one) == three
    assert a + b == b + a
    assert a - a == zero
    assert a - b == a + (-b)
    assert a - b == (-b) + a

    assert zero + (-a) == -a
    assert zero - a == -a
    assert a - zero == a
    assert a + zero == a
    assert zero + a == a

    assert (a + b).dbl() == (a + b) + (b + a)
    assert 2 * (a + b) == (a + b) + (b + a)

    assert (rand1 * a) + (rand2 * a) == randsum * a

    assert G1.order() * a == zero
    assert G1.order() * one == zero
    assert not ((G1.order() * a) - a == zero)
    assert not ((G1.order() * one) - one == zero)


def test_field_element_scalar_matches_int():
    s = Fr(123456789)
    assert s * G1.one() == 123456789 * G1.one()


def _special(point):
    point.to_special()
    return point


def test_mixed_add_zero_zero():
    base = G1.zero()
    el = _special(G1.zero())
    assert base.mixed_add(el) == base + el


def test_mixed_add_zero_random():
    base = G1.zero()
    el = _special(G1.random_element())
    assert base.mixed_add(el) == base + el


def test_mixed_add_random_zero():
    base = G1.random_element()
    el = _special(G1.zero())
    assert base.mixed_add(el) == base + el


def test_mixed_add_random_random():
    base = G1.random_element()
    el = _special(G1.random_element())
    assert base.mixed_add(el) == base + el


def test_mixed_add_with_itself_is_doubling():
    base = G1.random_element()
    el = base + G1.zero()
    el = el.add(G1.zero()) if False else _special(7 * G1.zero() + base)
    assert el.is_special()
    assert base.mixed_add(el) == base.dbl()


def test_output_round_trip():
    g = G1.zero()
    for _ in range(20):
        gg = G1.from_text(g.to_text())
        assert g == gg
        g = G1.random_element()


def test_zero_text_and_str():
    assert G1.zero().to_text() == "0 1"
    assert str(G1.zero()) == "O"
    assert G1.zero().coordinates_text() == "O"
    assert G1.from_text("0 1").is_zero()


def test_generator_text():
    assert G1.one().to_text() == f"{GEN_X} 1"
    assert str(G1.one()) == f"({GEN_X} , {GEN_Y})"


def test_from_text_rejects_bad_input():
    with pytest.raises(ValueError):
        G1.from_text("12 2")
    with pytest.raises(ValueError):
        G1.from_text("only")
    with pytest.raises(ValueError):
        G1.from_text("abc 1")


def test_vector_round_trip():
    points = [G1.zero(), G1.one(), G1.random_element()]
    text = dump_vector(points)
    assert text.startswith("3\n")
    assert load_vector(text) == points


def test_load_vector_short():
    with pytest.raises(ValueError):
        load_vector("2\n0 1\n")


def test_well_formed():
    assert G1.zero().is_well_formed()
    assert G1.one().is_well_formed()
    assert G1.random_element().is_well_formed()
    assert not G1(Fq(2), Fq(3)).is_well_formed()


def test_to_special_keeps_point():
    p = 3 * G1.one()
    q = 3 * G1.one()
    q.to_special()
    assert q.is_special()
    assert q.Z == Fq.one()
    assert p == q


def test_to_affine_coordinates():
    p = 5 * G1.one()
    p.to_affine_coordinates()
    assert p.Z == Fq.one()
    rebuilt = G1(p.X, p.Y)
    assert rebuilt == 5 * G1.one()


def test_batch_to_special():
    points = [2 * G1.one(), 3 * G1.one(), 4 * G1.one()]
    G1.batch_to_special_all_non_zeros(points)
    assert all(p.is_special() for p in points)
    assert points == [2 * G1.one(), 3 * G1.one(), 4 * G1.one()]


def test_hash_consistent_with_equality():
    p = 6 * G1.one()
    q = 2 * G1.one() + 4 * G1.one()
    assert p == q
    assert hash(p) == hash(q)
    assert len({p, q, G1.zero(), G1.zero()}) == 2


def test_group_constants():
    assert G1.size_in_bits() == 184
    assert G1.order() == 1552511030102430251236801561344621993261920897571225601
    assert G1.base_field_char() == 6210044120409721004947206240885978274523751269793792001


def test_negative_scalar_rejected():
    with pytest.raises(ValueError):
        (-1) * G1.one()