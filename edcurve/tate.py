"""Tate pairing on the Edwards curve, and the final exponentiation shared by all pairings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, NamedTuple, Tuple

from edcurve.fields import Fq, Fq3, Fq6, Fr
from edcurve.g1 import G1
from edcurve.g2 import G2
from edcurve.params import (
    FINAL_EXPONENT_LAST_CHUNK_ABS_OF_W0,
    FINAL_EXPONENT_LAST_CHUNK_IS_W0_NEG,
    FINAL_EXPONENT_LAST_CHUNK_W1,
)


def _parse_ints(text: str, count: int, what: str) -> List[int]:
    parts = text.split()
    if len(parts) != count:
        raise ValueError(f"malformed {what}: expected {count} numbers in {text!r}")
    try:
        return [int(part, 10) for part in parts]
    except ValueError as exc:
        raise ValueError(f"malformed {what}: {text!r}") from exc


@dataclass(frozen=True)
class FqConicCoefficients:
    """Coefficients of the conic through the points of one Miller-loop step."""

    c_ZZ: Fq
    c_XY: Fq
    c_XZ: Fq

    def to_text(self) -> str:
        return f"{self.c_ZZ} {self.c_XY} {self.c_XZ}"

    @classmethod
    def from_text(cls, text: str) -> "FqConicCoefficients":
        zz, xy, xz = _parse_ints(text, 3, "conic coefficients")
        return cls(Fq(zz), Fq(xy), Fq(xz))


@dataclass(frozen=True)
class TateG2Precomp:
    """Precomputed values y0 = y/z and eta = (z + y)/(X*x) of a G2 point."""

    y0: Fq3
    eta: Fq3

    def to_text(self) -> str:
        return f"{self.y0} {self.eta}"

    @classmethod
    def from_text(cls, text: str) -> "TateG2Precomp":
        values = _parse_ints(text, 6, "Tate G2 precomputation")
        return cls(Fq3(*values[:3]), Fq3(*values[3:]))


def dump_tate_g1_precomp(precomp: Iterable[FqConicCoefficients]) -> str:
    """Serialise a G1 precomputation: a count line, then one coefficient triple per line."""
    items = list(precomp)
    return f"{len(items)}\n" + "".join(f"{cc.to_text()}\n" for cc in items)


def load_tate_g1_precomp(text: str) -> List[FqConicCoefficients]:
    """Read back the form written by :func:`dump_tate_g1_precomp`."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("missing coefficient count")
    try:
        count = int(lines[0].strip())
    except ValueError as exc:
        raise ValueError(f"malformed coefficient count: {lines[0]!r}") from exc
    if count < 0 or len(lines) - 1 < count:
        raise ValueError("fewer coefficients than announced")
    return [FqConicCoefficients.from_text(line) for line in lines[1 : 1 + count]]


# ---------------------------------------------------------------- final exponentiation


def final_exponentiation_last_chunk(elt: Fq6, elt_inv: Fq6) -> Fq6:
    """Raise to w1*q + w0, the hard part of the final exponent."""
    elt_q = elt.frobenius_map(1)
    w1_part = elt_q.cyclotomic_exp(FINAL_EXPONENT_LAST_CHUNK_W1)
    if FINAL_EXPONENT_LAST_CHUNK_IS_W0_NEG:
        w0_part = elt_inv.cyclotomic_exp(FINAL_EXPONENT_LAST_CHUNK_ABS_OF_W0)
    else:
        w0_part = elt.cyclotomic_exp(FINAL_EXPONENT_LAST_CHUNK_ABS_OF_W0)
    return w1_part * w0_part


def final_exponentiation_first_chunk(elt: Fq6, elt_inv: Fq6) -> Fq6:
    """Raise to (q^3 - 1)(q + 1), the easy part of the final exponent."""
    elt_q3_over_elt = elt.frobenius_map(3) * elt_inv
    alpha = elt_q3_over_elt.frobenius_map(1)
    return alpha * elt_q3_over_elt


def final_exponentiation(elt: Fq6) -> Fq6:
    """Map a Miller-loop output into the target group GT."""
    elt_inv = elt.inverse()
    elt_to_first_chunk = final_exponentiation_first_chunk(elt, elt_inv)
    elt_inv_to_first_chunk = final_exponentiation_first_chunk(elt_inv, elt)
    return final_exponentiation_last_chunk(elt_to_first_chunk, elt_inv_to_first_chunk)


# ---------------------------------------------------------------- Tate pairing


class _ExtendedPoint(NamedTuple):
    """Extended projective coordinates (X : Y : Z : T) with T*Z = X*Y."""

    X: Fq
    Y: Fq
    Z: Fq
    T: Fq


def _doubling_step(current: _ExtendedPoint) -> Tuple[_ExtendedPoint, FqConicCoefficients]:
    X, Y, Z, T = current
    A = X.squared()
    B = Y.squared()
    C = Z.squared()
    D = (X + Y).squared()
    E = (Y + Z).squared()
    F = D - (A + B)
    G = E - (B + C)
    H = A  # a = 1
    I = H + B
    J = C - I
    K = J + C

    c_ZZ = Y * (T - X)
    c_ZZ = c_ZZ + c_ZZ
    c_XY = J + J + G
    c_XZ = X * T - B
    c_XZ = c_XZ + c_XZ

    result = _ExtendedPoint(F * K, I * (B - H), I * K, F * (B - H))
    return result, FqConicCoefficients(c_ZZ, c_XY, c_XZ)


def _full_addition_step(
    base: _ExtendedPoint, current: _ExtendedPoint
) -> Tuple[_ExtendedPoint, FqConicCoefficients]:
    X1, Y1, Z1, T1 = current
    X2, Y2, Z2, T2 = base
    A = X1 * X2
    B = Y1 * Y2
    C = Z1 * T2
    D = T1 * Z2
    E = D + C
    F = (X1 - Y1) * (X2 + Y2) + B - A
    G = B + A  # a = 1
    H = D - C
    I = T1 * T2

    c_ZZ = (T1 - X1) * (T2 + X2) - I + A
    c_XY = X1 * Z2 - X2 * Z1 + F
    c_XZ = (Y1 - T1) * (Y2 + T2) - B + I - H

    result = _ExtendedPoint(E * F, G * H, F * G, E * H)
    return result, FqConicCoefficients(c_ZZ, c_XY, c_XZ)


def _mixed_addition_step(
    base: _ExtendedPoint, current: _ExtendedPoint
) -> Tuple[_ExtendedPoint, FqConicCoefficients]:
    """Addition step where ``base`` has Z = 1."""
    X1, Y1, Z1, T1 = current
    X2, Y2, _, T2 = base
    A = X1 * X2
    B = Y1 * Y2
    C = Z1 * T2
    D = T1
    E = D + C
    F = (X1 - Y1) * (X2 + Y2) + B - A
    G = B + A  # a = 1
    H = D - C
    I = T1 * T2

    c_ZZ = (T1 - X1) * (T2 + X2) - I + A
    c_XY = X1 - X2 * Z1 + F
    c_XZ = (Y1 - T1) * (Y2 + T2) - B + I - H

    result = _ExtendedPoint(E * F, G * H, F * G, E * H)
    return result, FqConicCoefficients(c_ZZ, c_XY, c_XZ)


def _loop_bits(n: int) -> Iterator[bool]:
    """Bits of ``n`` below its most significant one, from high to low."""
    return (bit == "1" for bit in bin(n)[3:])


def tate_precompute_g1(p: G1) -> List[FqConicCoefficients]:
    """Conic coefficients of every Miller-loop step for the point ``p``."""
    copy = G1._from_xyz(p.X, p.Y, p.Z)
    copy.to_affine_coordinates()
    p_ext = _ExtendedPoint(copy.X, copy.Y, copy.Z, copy.X * copy.Y)

    result: List[FqConicCoefficients] = []
    r = p_ext
    for bit in _loop_bits(Fr.modulus):
        r, cc = _doubling_step(r)
        result.append(cc)
        if bit:
            r, cc = _mixed_addition_step(p_ext, r)
            result.append(cc)
    return result


def tate_precompute_g2(q: G2) -> TateG2Precomp:
    copy = G2._from_xyz(q.X, q.Y, q.Z)
    copy.to_affine_coordinates()
    y0 = copy.Y * copy.Z.inverse()
    eta = (copy.Z + copy.Y) * Fq6.mul_by_non_residue(copy.X).inverse()
    return TateG2Precomp(y0, eta)


def _conic_at_q(cc: FqConicCoefficients, prec_q: TateG2Precomp) -> Fq6:
    return Fq6(Fq3(cc.c_XZ, 0, 0) + cc.c_XY * prec_q.y0, cc.c_ZZ * prec_q.eta)


def tate_miller_loop(prec_p: List[FqConicCoefficients], prec_q: TateG2Precomp) -> Fq6:
    coefficients = iter(prec_p)

    def next_cc() -> FqConicCoefficients:
        try:
            return next(coefficients)
        except StopIteration:
            raise ValueError("G1 precomputation is too short") from None

    f = Fq6.one()
    for bit in _loop_bits(Fr.modulus):
        f = f.squared() * _conic_at_q(next_cc(), prec_q)
        if bit:
            f = f * _conic_at_q(next_cc(), prec_q)
    return f


def tate_pairing(p: G1, q: G2) -> Fq6:
    return tate_miller_loop(tate_precompute_g1(p), tate_precompute_g2(q))


def tate_reduced_pairing(p: G1, q: G2) -> Fq6:
    return final_exponentiation(tate_pairing(p, q))