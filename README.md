# edcurve

This package does arithmetic on a pairing-friendly Edwards curve. It is written in pure Python and has no runtime dependencies.

## What it has

- `edcurve.fields` holds the finite fields:
  - the scalar field `Fr` (181 bits) and the base field `Fq` (183 bits). Both are subclasses of `PrimeFieldElement`.
  - the cubic extension `Fq3` = Fq[X]/(X^3 - 61) and the quadratic extension `Fq6` = Fq3[Y]/(Y^2 - X).
  - `batch_invert`, which inverts a whole list with a single field inversion.
- `edcurve.curve_utils.scalar_mul` is generic double-and-add scalar multiplication. It accepts a non-negative `int` or a prime-field element as the scalar. A negative scalar raises `ValueError`.
- `edcurve.params` holds the curve constants: the coefficients, the twist, the generators and the pairing exponents.
- `edcurve.g1.G1` is the group over `Fq`. `edcurve.g2.G2` is the twisted group over `Fq3`, and it adds `mul_by_q` (the Frobenius endomorphism). Both groups use inverted Edwards coordinates.
- `edcurve.tate` holds the Tate pairing and `final_exponentiation`, which both pairings share.
- `edcurve.ate` holds the ate pairing. Its module-level `precompute_g1`, `precompute_g2`, `miller_loop`, `double_miller_loop`, `pairing` and `reduced_pairing` select the ate pairing.
- `edcurve.pp.EdwardsPP` bundles the curve's types and pairing functions behind one class.

## Installation

```
pip install edcurve
```

## Fields

```python
from edcurve.fields import Fq, Fq3, batch_invert

a = Fq(12345)
assert a * a.inverse() == Fq.one()
assert a.squared().sqrt() in (a, -a)

x = Fq3(1, 2, 3)
assert x * x.inverse() == Fq3.one()
assert [v * w for v, w in zip(batch_invert([a, a + 1]), [a, a + 1])] == [Fq.one(), Fq.one()]
```

Some operations raise errors:

- Inverting zero raises `ZeroDivisionError`.
- Calling `sqrt` on a non-residue raises `ValueError`.

## Group arithmetic

```python
from edcurve.fields import Fr
from edcurve.g1 import G1
from edcurve.g2 import G2

p = 5 * G1.one()
assert p == G1.one() + (4 * G1.one())
assert G1.order() * p == G1.zero()

q = Fr.random_element() * G2.one()
assert q.dbl() == q + q
assert G2.base_field_char() * q == q.mul_by_q()
```

A scalar can be a plain `int` or a field element. It goes on the left of the point.

Points support these operations:

- `+`, `-` and unary `-`.
- `add` and `dbl`.
- `mixed_add`, for a second operand that is special (Z = 1).
- `to_special`, `to_affine_coordinates` and `is_well_formed`.
- `batch_to_special_all_non_zeros`, which makes every point in a list special with one inversion.

`str(point)` shows the affine coordinates. `point.coordinates_text()` shows the raw inverted coordinates. Both show `O` for the neutral element.

## Text format

Points are written in compressed form: the affine x coordinate followed by the low bit of y. For `G2`, the low bit comes from y's constant term.

```python
from edcurve.g1 import G1, dump_vector, load_vector

g = G1.random_element()
assert G1.from_text(g.to_text()) == g

points = [G1.random_element() for _ in range(3)]
assert load_vector(dump_vector(points)) == points
```

Precomputed pairing data can be written out and read back in the same way:

- For Tate, use `dump_tate_g1_precomp` / `load_tate_g1_precomp`, and `TateG2Precomp.to_text` / `from_text`.
- For ate, use `dump_ate_g2_precomp` / `load_ate_g2_precomp`, and `AteG1Precomp.to_text` / `from_text`.

Malformed text raises `ValueError`.

## Pairings

```python
from edcurve.fields import Fq6, Fr
from edcurve.g1 import G1
from edcurve.g2 import G2
from edcurve.pp import EdwardsPP

P = Fr.random_element() * G1.one()
Q = Fr.random_element() * G2.one()
s = Fr.random_element()

e1 = EdwardsPP.reduced_pairing(s * P, Q)
e2 = EdwardsPP.reduced_pairing(P, s * Q)
e3 = EdwardsPP.reduced_pairing(P, Q) ** int(s)
assert e1 == e2 == e3
assert e1 ** Fr.field_char() == Fq6.one()
```

Inputs can be precomputed once and reused. A double Miller loop equals the product of the two single loops:

```python
P2 = Fr.random_element() * G1.one()
Q2 = Fr.random_element() * G2.one()

prec_p1, prec_q1 = EdwardsPP.precompute_g1(P), EdwardsPP.precompute_g2(Q)
prec_p2, prec_q2 = EdwardsPP.precompute_g1(P2), EdwardsPP.precompute_g2(Q2)

f1 = EdwardsPP.miller_loop(prec_p1, prec_q1)
f2 = EdwardsPP.miller_loop(prec_p2, prec_q2)
assert EdwardsPP.double_miller_loop(prec_p1, prec_q1, prec_p2, prec_q2) == f1 * f2
```

The Tate pairing is available from `edcurve.tate` as `tate_pairing` and `tate_reduced_pairing`.

## What it does not do

This package is a library only:

- It has no command-line tool.
- It has no binary serialisation.
- It does not provide pairings on other curves.

All arithmetic is plain Python integers, so it is not constant-time and it is slow. Use it for experiments and testing, not for protecting secrets.

## Tests

```
pip install -e ".[test]"
pytest
```