"""The group G1: points of the Edwards curve x^2 + y^2 = 1 + d*x^2*y^2 over Fq.

Points are kept in inverted coordinates (X : Y : Z), which stand for the
affine point (Z/X, Z/Y).
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from edcurve.curve_utils import scalar_mul
from edcurve.fields import Fq, Fr, PrimeFieldElement, batch_invert
from edcurve.params import COEFF_D, G1_ONE_XY, G1_ZERO_XY


class G1:
    """A point of G1 in inverted coordinates."""

    __slots__ = ("X", "Y", "Z")

    wnaf_window_table = (9, 14, 24, 117)

    def __init__(self, x, y):
        x = x if type(x) is Fq else Fq(x)
        y = y if type(y) is Fq else Fq(y)
        self.X = y
        self.Y = x
        self.Z = x * y

    @classmethod
    def _from_xyz(cls, X: Fq, Y: Fq, Z: Fq) -> "G1":
        point = object.__new__(cls)
        point.X = X
        point.Y = Y
        point.Z = Z
        return point

    def _copy(self) -> "G1":
        return self._from_xyz(self.X, self.Y, self.Z)

    def _affine_copy(self) -> "G1":
        copy = self._copy()
        copy.to_affine_coordinates()
        return copy

    def _scale_to_one(self, z_inv: Fq) -> None:
        self.X = self.X * z_inv
        self.Y = self.Y * z_inv
        self.Z = Fq.one()

    def __repr__(self):
        return f"G1(X={self.X.value}, Y={self.Y.value}, Z={self.Z.value})"

    def __str__(self):
        if self.is_zero():
            return "O"
        copy = self._affine_copy()
        return f"({copy.X} , {copy.Y})"

    def coordinates_text(self) -> str:
        """The raw inverted coordinates, or ``O`` for the neutral element."""
        if self.is_zero():
            return "O"
        return f"({self.X} : {self.Y} : {self.Z})"

    def to_affine_coordinates(self) -> None:
        """Replace X, Y by the affine x, y and set Z to one (in place)."""
        if self.is_zero():
            self.X, self.Y, self.Z = Fq.zero(), Fq.one(), Fq.one()
            return
        tX = self.Y * self.Z
        tY = self.X * self.Z
        self.X, self.Y = tX, tY
        self._scale_to_one((self.X * self.Y * self.Z.inverse().squared()).inverse())

    def to_special(self) -> None:
        """Scale the coordinates so that Z is one (in place)."""
        if self.Z.is_zero():
            return
        self._scale_to_one(self.Z.inverse())

    def is_special(self) -> bool:
        return self.is_zero() or self.Z == Fq.one()

    def is_zero(self) -> bool:
        return self.Y.is_zero() and self.Z.is_zero()

    def __eq__(self, other):
        if not isinstance(other, G1):
            return NotImplemented
        if self.is_zero() or other.is_zero():
            return self.is_zero() and other.is_zero()
        return (
            self.X * other.Z == other.X * self.Z
            and self.Y * other.Z == other.Y * self.Z
        )

    def __hash__(self):
        if self.is_zero():
            return hash(("G1", "zero"))
        if self.Z.is_zero():
            return hash(("G1", "degenerate"))
        z_inv = self.Z.inverse()
        return hash(("G1", (self.X * z_inv).value, (self.Y * z_inv).value))

    def _zero_shortcut(self, other: "G1") -> Optional["G1"]:
        if self.is_zero():
            return other
        if other.is_zero():
            return self
        return None

    def __add__(self, other):
        if not isinstance(other, G1):
            return NotImplemented
        shortcut = self._zero_shortcut(other)
        return shortcut if shortcut is not None else self.add(other)

    def __neg__(self):
        return self._from_xyz(-self.X, self.Y, self.Z)

    def __sub__(self, other):
        if not isinstance(other, G1):
            return NotImplemented
        return self + (-other)

    def __rmul__(self, scalar):
        if isinstance(scalar, PrimeFieldElement) or (
            isinstance(scalar, int) and not isinstance(scalar, bool)
        ):
            return scalar_mul(self, scalar)
        return NotImplemented

    def _add_with(self, other: "G1", A: Fq) -> "G1":
        B = COEFF_D * A.squared()
        C = self.X * other.X
        D = self.Y * other.Y
        E = C * D
        H = C - D
        I = (self.X + self.Y) * (other.X + other.Y) - C - D
        return self._from_xyz((E + B) * H, (E - B) * I, A * H * I)

    def add(self, other: "G1") -> "G1":
        """Addition formula; does not handle the neutral element or points of order 2, 4."""
        return self._add_with(other, self.Z * other.Z)

    def mixed_add(self, other: "G1") -> "G1":
        """Addition where ``other`` is special (Z = 1)."""
        shortcut = self._zero_shortcut(other)
        return shortcut if shortcut is not None else self._add_with(other, self.Z)

    def dbl(self) -> "G1":
        if self.is_zero():
            return self
        A = self.X.squared()
        B = self.Y.squared()
        C = A + B
        D = A - B
        E = (self.X + self.Y).squared() - C
        dZZ = COEFF_D * self.Z.squared()
        return self._from_xyz(C * D, E * (C - dZZ - dZZ), D * E)

    def is_well_formed(self) -> bool:
        """Check the inverted curve equation z^2 (y^2 + x^2 - d z^2) = x^2 y^2."""
        if self.is_zero():
            return True
        X2 = self.X.squared()
        Y2 = self.Y.squared()
        Z2 = self.Z.squared()
        return Z2 * (Y2 + X2 - COEFF_D * Z2) == X2 * Y2

    @classmethod
    def zero(cls) -> "G1":
        return cls(*G1_ZERO_XY)

    @classmethod
    def one(cls) -> "G1":
        return cls(*G1_ONE_XY)

    @classmethod
    def random_element(cls) -> "G1":
        return Fr.random_element().value * cls.one()

    @classmethod
    def size_in_bits(cls) -> int:
        return Fq.size_in_bits() + 1

    @classmethod
    def base_field_char(cls) -> int:
        return Fq.field_char()

    @classmethod
    def order(cls) -> int:
        return Fr.field_char()

    def to_text(self) -> str:
        """Compressed text form: affine x and the low bit of affine y."""
        copy = self._affine_copy()
        return f"{copy.X} {copy.Y.value & 1}"

    @classmethod
    def from_text(cls, text: str) -> "G1":
        """Decode the compressed form written by :meth:`to_text`."""
        parts = text.split()
        if len(parts) != 2:
            raise ValueError(f"malformed G1 point: {text!r}")
        x_text, lsb_text = parts
        if lsb_text not in ("0", "1"):
            raise ValueError(f"malformed low bit of y: {lsb_text!r}")
        try:
            x = Fq(int(x_text, 10))
        except ValueError as exc:
            raise ValueError(f"malformed x coordinate: {x_text!r}") from exc
        x2 = x.squared()
        y = ((Fq.one() - x2) * (Fq.one() - COEFF_D * x2).inverse()).sqrt()
        if (y.value & 1) != int(lsb_text):
            y = -y
        return cls._from_xyz(y, x, x * y)

    @staticmethod
    def batch_to_special_all_non_zeros(points: List["G1"]) -> None:
        """Make every (non-zero) point special, with a single inversion."""
        for point, z_inv in zip(points, batch_invert(point.Z for point in points)):
            point._scale_to_one(z_inv)


def dump_vector(points: Iterable[G1]) -> str:
    """Serialise a sequence of points: a count line, then one point per line."""
    items = list(points)
    return f"{len(items)}\n" + "".join(f"{point.to_text()}\n" for point in items)


def load_vector(text: str) -> List[G1]:
    """Read back the form written by :func:`dump_vector`."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("missing point count")
    try:
        count = int(lines[0].strip())
    except ValueError as exc:
        raise ValueError(f"malformed point count: {lines[0]!r}") from exc
    if count < 0 or len(lines) - 1 < count:
        raise ValueError("fewer points than announced")
    return [G1.from_text(line) for line in lines[1 : 1 + count]]