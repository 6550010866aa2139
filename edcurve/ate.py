"""Ate pairing on the Edwards curve, and the pairing chosen for the curve's public API."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Iterable, Iterator, List, NamedTuple, Tuple

from edcurve.fields import Fq, Fq3, Fq6
from edcurve.g1 import G1
from edcurve.g2 import G2
from edcurve.params import ATE_LOOP_COUNT
from edcurve.tate import final_exponentiation


def _parse_ints(text: str, count: int, what: str) -> List[int]:
    parts = text.split()
    if len(parts) != count:
        raise ValueError(f"malformed {what}: expected {count} numbers in {text!r}")
    try:
        return [int(part, 10) for part in parts]
    except ValueError as exc:
        raise ValueError(f"malformed {what}: {text!r}") from exc


@dataclass(frozen=True)
class Fq3ConicCoefficients:
    """Coefficients of the conic through the points of one flipped Miller-loop step."""

    c_ZZ: Fq3
    c_XY: Fq3
    c_XZ: Fq3

    def to_text(self) -> str:
        return f"{self.c_ZZ} {self.c_XY} {self.c_XZ}"

    @classmethod
    def from_text(cls, text: str) -> "Fq3ConicCoefficients":
        values = _parse_ints(text, 9, "Fq3 conic coefficients")
        return cls(Fq3(*values[0:3]), Fq3(*values[3:6]), Fq3(*values[6:9]))


@dataclass(frozen=True)
class AteG1Precomp:
    """Precomputed values x*y, x*z and (z + y)*z of an affine G1 point."""

    P_XY: Fq
    P_XZ: Fq
    P_ZZplusYZ: Fq

    def to_text(self) -> str:
        return f"{self.P_XY} {self.P_XZ} {self.P_ZZplusYZ}"

    @classmethod
    def from_text(cls, text: str) -> "AteG1Precomp":
        xy, xz, zz_plus_yz = _parse_ints(text, 3, "ate G1 precomputation")
        return cls(Fq(xy), Fq(xz), Fq(zz_plus_yz))


def dump_ate_g2_precomp(precomp: Iterable[Fq3ConicCoefficients]) -> str:
    """Serialise a G2 precomputation: a count line, then one coefficient triple per line."""
    items = list(precomp)
    return f"{len(items)}\n" + "".join(f"{cc.to_text()}\n" for cc in items)


def load_ate_g2_precomp(text: str) -> List[Fq3ConicCoefficients]:
    """Read back the form written by :func:`dump_ate_g2_precomp`."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("missing coefficient count")
    try:
        count = int(lines[0].strip())
    except ValueError as exc:
        raise ValueError(f"malformed coefficient count: {lines[0]!r}") from exc
    if count < 0 or len(lines) - 1 < count:
        raise ValueError("fewer coefficients than announced")
    return [Fq3ConicCoefficients.from_text(line) for line in lines[1 : 1 + count]]


class _ExtendedPoint(NamedTuple):
    """Extended projective coordinates (X : Y : Z : T) over Fq3 with T*Z = X*Y."""

    X: Fq3
    Y: Fq3
    Z: Fq3
    T: Fq3


def _doubling_step(current: _ExtendedPoint) -> Tuple[_ExtendedPoint, Fq3ConicCoefficients]:
    X, Y, Z, T = current
    A = X.squared()
    B = Y.squared()
    C = Z.squared()
    D = (X + Y).squared()
    E = (Y + Z).squared()
    F = D - (A + B)
    G = E - (B + C)
    H = G2.mul_by_a(A)
    I = H + B
    J = C - I
    K = J + C

    c_ZZ = Y * (T - X)
    c_ZZ = c_ZZ + c_ZZ
    c_XY = C - G2.mul_by_a(A) - B
    c_XY = c_XY + c_XY + G
    c_XZ = G2.mul_by_a(X * T) - B
    c_XZ = c_XZ + c_XZ

    result = _ExtendedPoint(F * K, I * (B - H), I * K, F * (B - H))
    return result, Fq3ConicCoefficients(c_ZZ, c_XY, c_XZ)


def _mixed_addition_step(
    base: _ExtendedPoint, current: _ExtendedPoint
) -> Tuple[_ExtendedPoint, Fq3ConicCoefficients]:
    """Addition step where ``base`` has Z = 1."""
    X1, Y1, Z1, T1 = current
    X2, Y2, _, T2 = base
    A = X1 * X2
    B = Y1 * Y2
    C = Z1 * T2
    E = T1 + C
    F = (X1 - Y1) * (X2 + Y2) + B - A
    G = B + G2.mul_by_a(A)
    H = T1 - C
    I = T1 * T2

    c_ZZ = G2.mul_by_a((T1 - X1) * (T2 + X2) - I + A)
    c_XY = X1 - X2 * Z1 + F
    c_XZ = (Y1 - T1) * (Y2 + T2) - B + I - H

    result = _ExtendedPoint(E * F, G * H, F * G, E * H)
    return result, Fq3ConicCoefficients(c_ZZ, c_XY, c_XZ)


def _loop_bits(n: int) -> Iterator[bool]:
    """Bits of ``n`` below its most significant one, from high to low."""
    return (bit == "1" for bit in bin(n)[3:])


def _take(coefficients: Iterator[Fq3ConicCoefficients]) -> Fq3ConicCoefficients:
    try:
        return next(coefficients)
    except StopIteration:
        raise ValueError("G2 precomputation is too short") from None


def _line_rr(prec_p: AteG1Precomp, cc: Fq3ConicCoefficients) -> Fq6:
    return Fq6(prec_p.P_XY * cc.c_XY + prec_p.P_XZ * cc.c_XZ, prec_p.P_ZZplusYZ * cc.c_ZZ)


def _line_rq(prec_p: AteG1Precomp, cc: Fq3ConicCoefficients) -> Fq6:
    return Fq6(prec_p.P_ZZplusYZ * cc.c_ZZ, prec_p.P_XY * cc.c_XY + prec_p.P_XZ * cc.c_XZ)


def ate_precompute_g1(p: G1) -> AteG1Precomp:
    affine = copy.copy(p)
    affine.to_affine_coordinates()
    return AteG1Precomp(
        affine.X * affine.Y,
        affine.X,
        Fq.one() + affine.Y,
    )


def ate_precompute_g2(q: G2) -> List[Fq3ConicCoefficients]:
    """Conic coefficients of every Miller-loop step for the point ``q``."""
    affine = copy.copy(q)
    affine.to_affine_coordinates()
    q_ext = _ExtendedPoint(affine.X, affine.Y, affine.Z, affine.X * affine.Y)

    result: List[Fq3ConicCoefficients] = []
    r = q_ext
    for bit in _loop_bits(ATE_LOOP_COUNT):
        r, cc = _doubling_step(r)
        result.append(cc)
        if bit:
            r, cc = _mixed_addition_step(q_ext, r)
            result.append(cc)
    return result


def ate_miller_loop(prec_p: AteG1Precomp, prec_q: List[Fq3ConicCoefficients]) -> Fq6:
    coefficients = iter(prec_q)
    f = Fq6.one()
    for bit in _loop_bits(ATE_LOOP_COUNT):
        f = f.squared() * _line_rr(prec_p, _take(coefficients))
        if bit:
            f = f * _line_rq(prec_p, _take(coefficients))
    return f


def ate_double_miller_loop(
    prec_p1: AteG1Precomp,
    prec_q1: List[Fq3ConicCoefficients],
    prec_p2: AteG1Precomp,
    prec_q2: List[Fq3ConicCoefficients],
) -> Fq6:
    """The product of two Miller loops, computed in one pass."""
    coefficients1 = iter(prec_q1)
    coefficients2 = iter(prec_q2)
    f = Fq6.one()
    for bit in _loop_bits(ATE_LOOP_COUNT):
        cc1 = _take(coefficients1)
        cc2 = _take(coefficients2)
        f = f.squared() * _line_rr(prec_p1, cc1) * _line_rr(prec_p2, cc2)
        if bit:
            cc1 = _take(coefficients1)
            cc2 = _take(coefficients2)
            f = f * _line_rq(prec_p1, cc1) * _line_rq(prec_p2, cc2)
    return f


def ate_pairing(p: G1, q: G2) -> Fq6:
    return ate_miller_loop(ate_precompute_g1(p), ate_precompute_g2(q))


def ate_reduced_pairing(p: G1, q: G2) -> Fq6:
    return final_exponentiation(ate_pairing(p, q))


def precompute_g1(p: G1) -> AteG1Precomp:
    return ate_precompute_g1(p)


def precompute_g2(q: G2) -> List[Fq3ConicCoefficients]:
    return ate_precompute_g2(q)


def miller_loop(prec_p: AteG1Precomp, prec_q: List[Fq3ConicCoefficients]) -> Fq6:
    return ate_miller_loop(prec_p, prec_q)


def double_miller_loop(
    prec_p1: AteG1Precomp,
    prec_q1: List[Fq3ConicCoefficients],
    prec_p2: AteG1Precomp,
    prec_q2: List[Fq3ConicCoefficients],
) -> Fq6:
    return ate_double_miller_loop(prec_p1, prec_q1, prec_p2, prec_q2)


def pairing(p: G1, q: G2) -> Fq6:
    return ate_pairing(p, q)


def reduced_pairing(p: G1, q: G2) -> Fq6:
    return ate_reduced_pairing(p, q)