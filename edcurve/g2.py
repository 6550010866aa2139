"""The group G2: points of the twisted Edwards curve a'x^2 + y^2 = 1 + d'x^2y^2 over Fq3.

Points are kept in inverted coordinates (X : Y : Z), which stand for the
affine point (Z/X, Z/Y).
"""

from __future__ import annotations

from typing import List

from edcurve.curve_utils import scalar_mul
from edcurve.fields import Fq, Fq3, Fr, PrimeFieldElement, batch_invert
from edcurve.params import (
    G2_ONE_XY,
    G2_ZERO_XY,
    TWIST_MUL_BY_A_C0,
    TWIST_MUL_BY_D_C0,
    TWIST_MUL_BY_D_C1,
    TWIST_MUL_BY_D_C2,
    TWIST_MUL_BY_Q_Y,
    TWIST_MUL_BY_Q_Z,
)


def _as_fq3(value) -> Fq3:
    if isinstance(value, Fq3):
        return value
    raise TypeError(f"G2 coordinates must be Fq3 elements, not {type(value).__name__}")


def _poly_text(elt: Fq3) -> str:
    return f"{elt.c2}*z^2 + {elt.c1}*z + {elt.c0}"


class G2:
    """A point of G2 in inverted coordinates."""

    __slots__ = ("X", "Y", "Z")

    wnaf_window_table = (6, 12, 42, 97)

    def __init__(self, x, y):
        x = _as_fq3(x)
        y = _as_fq3(y)
        self.X = y
        self.Y = x
        self.Z = x * y

    @classmethod
    def _from_xyz(cls, X: Fq3, Y: Fq3, Z: Fq3) -> "G2":
        point = object.__new__(cls)
        point.X = X
        point.Y = Y
        point.Z = Z
        return point

    def _copy(self) -> "G2":
        return self._from_xyz(self.X, self.Y, self.Z)

    @staticmethod
    def mul_by_a(elt: Fq3) -> Fq3:
        """Multiply by the twist coefficient a' (a times X, with a = 1)."""
        return Fq3(TWIST_MUL_BY_A_C0 * elt.c2, elt.c0, elt.c1)

    @staticmethod
    def mul_by_d(elt: Fq3) -> Fq3:
        """Multiply by the twist coefficient d' (d times X)."""
        return Fq3(
            TWIST_MUL_BY_D_C0 * elt.c2,
            TWIST_MUL_BY_D_C1 * elt.c0,
            TWIST_MUL_BY_D_C2 * elt.c1,
        )

    def __repr__(self):
        return f"G2(X={self.X!r}, Y={self.Y!r}, Z={self.Z!r})"

    def __str__(self):
        if self.is_zero():
            return "O"
        copy = self._copy()
        copy.to_affine_coordinates()
        return f"({_poly_text(copy.X)} , {_poly_text(copy.Y)})"

    def coordinates_text(self) -> str:
        """The raw inverted coordinates, or ``O`` for the neutral element."""
        if self.is_zero():
            return "O"
        return f"({_poly_text(self.X)} : {_poly_text(self.Y)} : {_poly_text(self.Z)})"

    def to_affine_coordinates(self) -> None:
        """Replace X, Y by the affine x, y and set Z to one (in place)."""
        if self.is_zero():
            self.X = Fq3.zero()
            self.Y = Fq3.one()
            self.Z = Fq3.one()
            return
        tX = self.Y * self.Z
        tY = self.X * self.Z
        tZ_inv = (self.X * self.Y).inverse()
        self.X = tX * tZ_inv
        self.Y = tY * tZ_inv
        self.Z = Fq3.one()

    def to_special(self) -> None:
        """Scale the coordinates so that Z is one (in place)."""
        if self.Z.is_zero():
            return
        z_inv = self.Z.inverse()
        self.X = self.X * z_inv
        self.Y = self.Y * z_inv
        self.Z = Fq3.one()

    def is_special(self) -> bool:
        return self.is_zero() or self.Z == Fq3.one()

    def is_zero(self) -> bool:
        return self.Y.is_zero() and self.Z.is_zero()

    def __eq__(self, other):
        if not isinstance(other, G2):
            return NotImplemented
        if self.is_zero():
            return other.is_zero()
        if other.is_zero():
            return False
        if self.X * other.Z != other.X * self.Z:
            return False
        return self.Y * other.Z == other.Y * self.Z

    def __hash__(self):
        if self.is_zero():
            return hash(("G2", "zero"))
        if self.Z.is_zero():
            return hash(("G2", "degenerate"))
        z_inv = self.Z.inverse()
        return hash(("G2", self.X * z_inv, self.Y * z_inv))

    def __add__(self, other):
        if not isinstance(other, G2):
            return NotImplemented
        if self.is_zero():
            return other
        if other.is_zero():
            return self
        return self.add(other)

    def __neg__(self):
        return self._from_xyz(-self.X, self.Y, self.Z)

    def __sub__(self, other):
        if not isinstance(other, G2):
            return NotImplemented
        return self + (-other)

    def __rmul__(self, scalar):
        if isinstance(scalar, PrimeFieldElement) or (
            isinstance(scalar, int) and not isinstance(scalar, bool)
        ):
            return scalar_mul(self, scalar)
        return NotImplemented

    def add(self, other: "G2") -> "G2":
        """Addition formula; does not handle the neutral element or points of order 2, 4."""
        A = self.Z * other.Z
        B = self.mul_by_d(A.squared())
        C = self.X * other.X
        D = self.Y * other.Y
        E = C * D
        H = C - self.mul_by_a(D)
        I = (self.X + self.Y) * (other.X + other.Y) - C - D
        X3 = (E + B) * H
        Y3 = (E - B) * I
        Z3 = A * H * I
        return self._from_xyz(X3, Y3, Z3)

    def mixed_add(self, other: "G2") -> "G2":
        """Addition where ``other`` is special (Z = 1)."""
        if self.is_zero():
            return other
        if other.is_zero():
            return self
        A = self.Z
        B = self.mul_by_d(A.squared())
        C = self.X * other.X
        D = self.Y * other.Y
        E = C * D
        H = C - self.mul_by_a(D)
        I = (self.X + self.Y) * (other.X + other.Y) - C - D
        X3 = (E + B) * H
        Y3 = (E - B) * I
        Z3 = A * H * I
        return self._from_xyz(X3, Y3, Z3)

    def dbl(self) -> "G2":
        if self.is_zero():
            return self
        A = self.X.squared()
        B = self.Y.squared()
        U = self.mul_by_a(B)
        C = A + U
        D = A - U
        E = (self.X + self.Y).squared() - A - B
        X3 = C * D
        dZZ = self.mul_by_d(self.Z.squared())
        Y3 = E * (C - dZZ - dZZ)
        Z3 = D * E
        return self._from_xyz(X3, Y3, Z3)

    def mul_by_q(self) -> "G2":
        """Apply the q-power Frobenius endomorphism."""
        return self._from_xyz(
            self.X.frobenius_map(1),
            TWIST_MUL_BY_Q_Y * self.Y.frobenius_map(1),
            TWIST_MUL_BY_Q_Z * self.Z.frobenius_map(1),
        )

    def is_well_formed(self) -> bool:
        """Check the inverted curve equation z^2 (a'y^2 + x^2 - d'z^2) = x^2 y^2."""
        if self.is_zero():
            return True
        X2 = self.X.squared()
        Y2 = self.Y.squared()
        Z2 = self.Z.squared()
        aY2 = self.mul_by_a(Y2)
        dZ2 = self.mul_by_d(Z2)
        return Z2 * (aY2 + X2 - dZ2) == X2 * Y2

    @classmethod
    def zero(cls) -> "G2":
        return cls(*G2_ZERO_XY)

    @classmethod
    def one(cls) -> "G2":
        return cls(*G2_ONE_XY)

    @classmethod
    def random_element(cls) -> "G2":
        return Fr.random_element().value * cls.one()

    @classmethod
    def size_in_bits(cls) -> int:
        return Fq3.size_in_bits() + 1

    @classmethod
    def base_field_char(cls) -> int:
        return Fq.field_char()

    @classmethod
    def order(cls) -> int:
        return Fr.field_char()

    def to_text(self) -> str:
        """Compressed text form: affine x and the low bit of affine y's constant term."""
        copy = self._copy()
        copy.to_affine_coordinates()
        return f"{copy.X} {copy.Y.c0.value & 1}"

    @classmethod
    def from_text(cls, text: str) -> "G2":
        """Decode the compressed form written by :meth:`to_text`."""
        parts = text.split()
        if len(parts) != 4:
            raise ValueError(f"malformed G2 point: {text!r}")
        *x_parts, lsb_text = parts
        if lsb_text not in ("0", "1"):
            raise ValueError(f"malformed low bit of y: {lsb_text!r}")
        try:
            x = Fq3(*(Fq(int(part, 10)) for part in x_parts))
        except ValueError as exc:
            raise ValueError(f"malformed x coordinate: {' '.join(x_parts)!r}") from exc
        y_lsb = int(lsb_text)
        x2 = x.squared()
        y2 = (Fq3.one() - cls.mul_by_a(x2)) * (Fq3.one() - cls.mul_by_d(x2)).inverse()
        y = y2.sqrt()
        if (y.c0.value & 1) != y_lsb:
            y = -y
        return cls._from_xyz(y, x, x * y)

    @staticmethod
    def batch_to_special_all_non_zeros(points: List["G2"]) -> None:
        """Make every (non-zero) point special, with a single inversion."""
        inverses = batch_invert(point.Z for point in points)
        one = Fq3.one()
        for point, z_inv in zip(points, inverses):
            point.X = point.X * z_inv
            point.Y = point.Y * z_inv
            point.Z = one