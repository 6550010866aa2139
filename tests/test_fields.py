import pytest

from edcurve.fields import Fq, Fq3, Fq6, Fr, PrimeFieldElement, batch_invert


def _fq_samples():
    return [Fq(123456789), Fq(-7), Fq(2**150 + 17)]


def _fq3_sample():
    return Fq3(Fq(11), Fq(222222), Fq(-3333))


def _fq6_sample():
    return Fq6(Fq3(5, 6, 7), Fq3(-1, 9, 40000))


def test_field_constants_from_source():
    assert Fq.field_char() == 6210044120409721004947206240885978274523751269793792001
    assert Fr.field_char() == 1552511030102430251236801561344621993261920897571225601
    assert Fq.size_in_bits() == 183
    assert Fr.size_in_bits() == 181


@pytest.mark.parametrize("field", [Fq, Fr])
def test_two_adicity_constants(field):
    assert field.field_char() - 1 == field.t * 2**field.s
    assert field.t_minus_1_over_2 == (field.t - 1) // 2


def test_abstract_base_cannot_be_built():
    with pytest.raises(TypeError):
        PrimeFieldElement(1)


@pytest.mark.parametrize("a", _fq_samples())
def test_prime_field_ring_laws(a):
    b = Fq(987654321)
    assert a + b - b == a
    assert a * a.inverse() == Fq.one()
    assert a + (-a) == Fq.zero()
    assert a ** -1 == a.inverse()
    assert a.squared() == a * a
    assert a ** 3 == a * a * a


def test_negative_reduces_modulo():
    assert int(Fq(-1)) == Fq.field_char() - 1
    assert Fq("61") == Fq(61)


def test_zero_has_no_inverse():
    with pytest.raises(ZeroDivisionError):
        Fq.zero().inverse()


def test_fields_do_not_mix():
    with pytest.raises(TypeError):
        Fq(1) + Fr(1)


@pytest.mark.parametrize("field", [Fq, Fr])
def test_sqrt_roundtrip(field):
    for _ in range(5):
        x = field.random_element()
        root = x.squared().sqrt()
        assert root.squared() == x.squared()
    assert field.zero().sqrt() == field.zero()


@pytest.mark.parametrize("field", [Fq, Fr])
def test_sqrt_of_non_residue_raises(field):
    with pytest.raises(ValueError):
        field(field.nqr).sqrt()


def test_fermat():
    x = Fr.random_element()
    if x.is_zero():
        x = Fr.one()
    assert x ** (Fr.field_char() - 1) == Fr.one()


def test_fq3_inverse_and_distributivity():
    a = _fq3_sample()
    b = Fq3.random_element()
    c = Fq3.random_element()
    assert a * a.inverse() == Fq3.one()
    assert a * (b + c) == a * b + a * c
    assert a - a == Fq3.zero()
    assert a ** 2 == a.squared()


def test_fq3_scalar_multiplication():
    a = _fq3_sample()
    k = Fq(77)
    assert k * a == Fq3(k, 0, 0) * a
    assert a * k == k * a


def test_fq3_frobenius_matches_power():
    a = _fq3_sample()
    assert a.frobenius_map(1) == a ** Fq.field_char()
    assert a.frobenius_map(3) == a
    assert a.frobenius_map(1).frobenius_map(2) == a


def test_fq3_size_in_bits():
    assert Fq3.size_in_bits() == 3 * Fq.size_in_bits()


def test_fq3_sqrt_roundtrip():
    x = _fq3_sample()
    assert x.squared().sqrt().squared() == x.squared()
    assert Fq3.zero().sqrt().is_zero()


def test_fq3_non_residue_sqrt_raises():
    with pytest.raises(ValueError):
        Fq3.nqr.sqrt()


def test_fq3_zero_inverse_raises():
    with pytest.raises(ZeroDivisionError):
        Fq3.zero().inverse()


def test_fq6_field_laws():
    a = _fq6_sample()
    b = Fq6.random_element()
    assert a * a.inverse() == Fq6.one()
    assert a.squared() == a * a
    assert a * b == b * a
    assert a + (-a) == Fq6.zero()
    assert a ** -2 == a.inverse().squared()


def test_fq6_frobenius_matches_power():
    a = _fq6_sample()
    assert a.frobenius_map(1) == a ** Fq.field_char()
    assert a.frobenius_map(6) == a


def test_fq6_mul_by_non_residue_is_multiplication_by_x():
    a = Fq3.random_element()
    assert Fq6.mul_by_non_residue(a) == a * Fq3(0, 1, 0)


def test_fq6_cyclotomic_exp_on_unitary_element():
    x = _fq6_sample()
    u = x.frobenius_map(3) * x.inverse()
    assert u.unitary_inverse() == u.inverse()
    for e in (0, 1, 7, 17970038794095729281964441603):
        assert u.cyclotomic_exp(e) == u ** e


def test_fq6_power_with_field_exponent():
    a = _fq6_sample()
    assert a ** Fr(5) == a ** 5


def test_batch_invert():
    items = [Fq(3), Fq(-19), Fq.random_element() + Fq(1)]
    items = [x for x in items if not x.is_zero()]
    inverses = batch_invert(items)
    assert [x * y for x, y in zip(items, inverses)] == [Fq.one()] * len(items)
    fq3_items = [_fq3_sample(), Fq3.one()]
    assert [x * y for x, y in zip(fq3_items, batch_invert(fq3_items))] == [Fq3.one()] * 2


def test_batch_invert_empty_and_zero():
    assert batch_invert([]) == []
    with pytest.raises(ZeroDivisionError):
        batch_invert([Fq(1), Fq.zero()])