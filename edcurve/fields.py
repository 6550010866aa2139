"""Finite fields underlying the Edwards curve: Fr, Fq, Fq3 = Fq[X]/(X^3 - 61)
and Fq6 = Fq3[Y]/(Y^2 - X)."""

from __future__ import annotations

import operator
import secrets
from typing import Callable, ClassVar, Iterable, List, Optional, Tuple


def _exponent(exponent) -> int:
    if isinstance(exponent, PrimeFieldElement):
        return exponent.value
    if isinstance(exponent, int):
        return exponent
    raise TypeError(f"unsupported exponent type: {type(exponent).__name__}")


def _square_and_multiply(base, exponent: int, one):
    result = one
    for bit in bin(exponent)[2:]:
        result = result.squared()
        if bit == "1":
            result = result * base
    return result


def _tonelli_shanks(elt, one, s: int, t_minus_1_over_2: int, nqr_to_t):
    v = s
    z = nqr_to_t
    w = elt ** t_minus_1_over_2
    x = elt * w
    b = x * w
    while b != one:
        m = 0
        b2m = b
        while b2m != one:
            b2m = b2m.squared()
            m += 1
        w = z
        for _ in range(v - m - 1):
            w = w.squared()
        z = w.squared()
        b = b * z
        x = x * w
        v = m
    return x


def _naf(n: int) -> List[int]:
    """Non-adjacent form of ``n``, least significant digit first."""
    digits = []
    while n > 0:
        if n & 1:
            digit = 2 - (n % 4)
            n -= digit
        else:
            digit = 0
        digits.append(digit)
        n >>= 1
    return digits


class _FieldElement:
    """Behaviour shared by every field element: powers and square roots."""

    __slots__ = ()

    def _pow_nonneg(self, e: int):
        return _square_and_multiply(self, e, self.one())

    def __pow__(self, exponent):
        e = _exponent(exponent)
        if e < 0:
            return self.inverse() ** (-e)
        return self._pow_nonneg(e)

    def __str__(self):
        return " ".join(str(c) for c in self._coeffs())

    def is_square(self) -> bool:
        return self.is_zero() or self ** self.euler == self.one()

    def _nqr_to_t(self):
        return self.nqr_to_t

    def sqrt(self):
        """A square root; raises ValueError for a non-residue."""
        if self.is_zero():
            return self
        if not self.is_square():
            raise ValueError(f"{self!r} is not a square in the field")
        return _tonelli_shanks(
            self, self.one(), self.s, self.t_minus_1_over_2, self._nqr_to_t()
        )


def _prime_op(op: Callable[[int, int], int]):
    def method(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._make(op(self.value, o))

    return method


class PrimeFieldElement(_FieldElement):
    """An element of a prime field; concrete fields subclass this and set the modulus."""

    __slots__ = ("value",)

    modulus: ClassVar[int] = 0
    num_bits: ClassVar[int] = 0
    euler: ClassVar[int] = 0
    s: ClassVar[int] = 0
    t: ClassVar[int] = 0
    t_minus_1_over_2: ClassVar[int] = 0
    multiplicative_generator: ClassVar[int] = 0
    root_of_unity: ClassVar[int] = 0
    nqr: ClassVar[int] = 0
    nqr_to_t: ClassVar[int] = 0

    def __init__(self, value=0):
        if not self.modulus:
            raise TypeError("PrimeFieldElement needs a concrete field subclass")
        if isinstance(value, PrimeFieldElement):
            if type(value) is not type(self):
                raise TypeError("cannot convert between different fields")
            value = value.value
        elif isinstance(value, str):
            value = int(value, 10)
        elif not isinstance(value, int):
            raise TypeError(f"cannot build a field element from {type(value).__name__}")
        self.value = value % self.modulus

    @classmethod
    def _make(cls, value: int):
        obj = object.__new__(cls)
        obj.value = value % cls.modulus
        return obj

    def _coerce(self, other) -> Optional[int]:
        if type(other) is type(self):
            return other.value
        if isinstance(other, int) and not isinstance(other, PrimeFieldElement):
            return other
        return None

    def _coeffs(self) -> Tuple[int]:
        return (self.value,)

    __radd__ = _prime_op(operator.add)
    __rsub__ = _prime_op(lambda a, b: b - a)
    __rmul__ = _prime_op(operator.mul)

    def __add__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._make(self.value + o)

    def __sub__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._make(self.value - o)

    def __mul__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._make(self.value * o)

    def __neg__(self):
        return self._make(-self.value)

    def __eq__(self, other):
        if type(other) is type(self):
            return self.value == other.value
        if isinstance(other, int):
            return self.value == other % self.modulus
        return NotImplemented

    def __hash__(self):
        return hash((type(self).__name__, self.value))

    def __pow__(self, exponent):
        e = _exponent(exponent)
        if e < 0:
            return self.inverse() ** (-e)
        return self._make(pow(self.value, e, self.modulus))

    def __int__(self):
        return self.value

    def __index__(self):
        return self.value

    def __repr__(self):
        return f"{type(self).__name__}({self.value})"

    def _nqr_to_t(self):
        return self._make(self.nqr_to_t)

    def squared(self):
        return self._make(self.value * self.value)

    def inverse(self):
        if self.value == 0:
            raise ZeroDivisionError("zero has no inverse")
        return self._make(pow(self.value, -1, self.modulus))

    def sqrt(self):
        """A square root; raises ValueError for a non-residue."""
        return super().sqrt()

    def is_zero(self) -> bool:
        return self.value == 0

    @classmethod
    def zero(cls):
        return cls._make(0)

    @classmethod
    def one(cls):
        return cls._make(1)

    @classmethod
    def random_element(cls):
        return cls._make(secrets.randbelow(cls.modulus))

    @classmethod
    def field_char(cls) -> int:
        return cls.modulus

    @classmethod
    def size_in_bits(cls) -> int:
        return cls.num_bits


class Fr(PrimeFieldElement):
    """Scalar field of the Edwards curve groups."""

    __slots__ = ()
    modulus = 1552511030102430251236801561344621993261920897571225601
    num_bits = 181
    euler = 776255515051215125618400780672310996630960448785612800
    s = 31
    t = 722944284836962004768104088187507350585386575
    t_minus_1_over_2 = 361472142418481002384052044093753675292693287
    multiplicative_generator = 19
    root_of_unity = 695314865466598274460565335217615316274564719601897184
    nqr = 11
    nqr_to_t = 1326707053668679463752768729767248251415639579872144553


class Fq(PrimeFieldElement):
    """Base field of the Edwards curve."""

    __slots__ = ()
    modulus = 6210044120409721004947206240885978274523751269793792001
    num_bits = 183
    euler = 3105022060204860502473603120442989137261875634896896000
    s = 31
    t = 2891777139347848019072416350658041552884388375
    t_minus_1_over_2 = 1445888569673924009536208175329020776442194187
    multiplicative_generator = 61
    root_of_unity = 4692813029219384139894873043933463717810008194158530536
    nqr = 23
    nqr_to_t = 2626736066325740702418554487368721595489070118548299138


# A primitive cube root of unity in Fq and its square; the Frobenius
# coefficients of both extensions are built from them.
_OMEGA = Fq(1073752683758513276629212192812154536507607213288832061)
_OMEGA2 = Fq(5136291436651207728317994048073823738016144056504959939)
_NON_RESIDUE = Fq(61)


def _as_fq(value) -> Fq:
    return value if type(value) is Fq else Fq(value)


class _ExtensionElement(_FieldElement):
    """Coefficient access and representation of an extension field element."""

    __slots__ = ()

    def _coeffs(self) -> tuple:
        return tuple(getattr(self, name) for name in type(self).__slots__)

    def __repr__(self):
        inner = ", ".join(
            str(c) if isinstance(c, PrimeFieldElement) else repr(c) for c in self._coeffs()
        )
        return f"{type(self).__name__}({inner})"


class Fq3(_ExtensionElement):
    """Cubic extension Fq[X]/(X^3 - non_residue)."""

    __slots__ = ("c0", "c1", "c2")

    non_residue: ClassVar[Fq] = _NON_RESIDUE
    euler: ClassVar[int] = int(
        "119744082713971502962992613191067836698205043373978948903839934564152994858051284658545502971203325031831647424413111161318314144765646525057914792711854057586688000"
    )
    s: ClassVar[int] = 31
    t: ClassVar[int] = int(
        "111520367408144756185815309352304634357062208814526860512643991563611659089151103662834971185031649686239331424621037357783237607000066456438894190557165125"
    )
    t_minus_1_over_2: ClassVar[int] = int(
        "55760183704072378092907654676152317178531104407263430256321995781805829544575551831417485592515824843119665712310518678891618803500033228219447095278582562"
    )
    nqr: ClassVar["Fq3"]
    nqr_to_t: ClassVar["Fq3"]
    frobenius_coeffs_c1: ClassVar[Tuple[Fq, Fq, Fq]] = (Fq(1), _OMEGA, _OMEGA2)
    frobenius_coeffs_c2: ClassVar[Tuple[Fq, Fq, Fq]] = (Fq(1), _OMEGA2, _OMEGA)

    def __init__(self, c0, c1, c2):
        self.c0 = _as_fq(c0)
        self.c1 = _as_fq(c1)
        self.c2 = _as_fq(c2)

    def __add__(self, other):
        if type(other) is not Fq3:
            return NotImplemented
        return Fq3(self.c0 + other.c0, self.c1 + other.c1, self.c2 + other.c2)

    def __sub__(self, other):
        if type(other) is not Fq3:
            return NotImplemented
        return Fq3(self.c0 - other.c0, self.c1 - other.c1, self.c2 - other.c2)

    def __neg__(self):
        return Fq3(-self.c0, -self.c1, -self.c2)

    def __eq__(self, other):
        if type(other) is not Fq3:
            return NotImplemented
        return (self.c0, self.c1, self.c2) == (other.c0, other.c1, other.c2)

    def __hash__(self):
        return hash(("Fq3", self.c0, self.c1, self.c2))

    def __pow__(self, exponent):
        return super().__pow__(exponent)

    def _scale(self, scalar):
        if isinstance(scalar, Fq) or (
            isinstance(scalar, int) and not isinstance(scalar, PrimeFieldElement)
        ):
            return Fq3(self.c0 * scalar, self.c1 * scalar, self.c2 * scalar)
        return NotImplemented

    def __mul__(self, other):
        if not isinstance(other, Fq3):
            return self._scale(other)
        a0, a1, a2 = self.c0, self.c1, self.c2
        b0, b1, b2 = other.c0, other.c1, other.c2
        nr = self.non_residue
        return Fq3(
            a0 * b0 + nr * (a1 * b2 + a2 * b1),
            a0 * b1 + a1 * b0 + nr * (a2 * b2),
            a0 * b2 + a1 * b1 + a2 * b0,
        )

    def __rmul__(self, other):
        return self._scale(other)

    def squared(self):
        return self * self

    def inverse(self):
        if self.is_zero():
            raise ZeroDivisionError("zero has no inverse")
        a0, a1, a2 = self.c0, self.c1, self.c2
        nr = self.non_residue
        c0 = a0.squared() - nr * (a1 * a2)
        c1 = nr * a2.squared() - a0 * a1
        c2 = a1.squared() - a0 * a2
        t = (a0 * c0 + nr * (a2 * c1 + a1 * c2)).inverse()
        return Fq3(t * c0, t * c1, t * c2)

    def sqrt(self):
        """A square root; raises ValueError for a non-residue."""
        return super().sqrt()

    def frobenius_map(self, power: int):
        k = power % 3
        return Fq3(
            self.c0,
            self.frobenius_coeffs_c1[k] * self.c1,
            self.frobenius_coeffs_c2[k] * self.c2,
        )

    def is_zero(self) -> bool:
        return self.c0.is_zero() and self.c1.is_zero() and self.c2.is_zero()

    @classmethod
    def zero(cls):
        return cls(Fq.zero(), Fq.zero(), Fq.zero())

    @classmethod
    def one(cls):
        return cls(Fq.one(), Fq.zero(), Fq.zero())

    @classmethod
    def random_element(cls):
        return cls(Fq.random_element(), Fq.random_element(), Fq.random_element())

    @classmethod
    def size_in_bits(cls) -> int:
        return 3 * Fq.size_in_bits()


Fq3.nqr = Fq3(23, 0, 0)
Fq3.nqr_to_t = Fq3(104810943629412208121981114244673004633270996333237516, 0, 0)


class Fq6(_ExtensionElement):
    """Quadratic extension Fq3[Y]/(Y^2 - X); the pairing target group lives here."""

    __slots__ = ("c0", "c1")

    non_residue: ClassVar[Fq] = _NON_RESIDUE
    frobenius_coeffs_c1: ClassVar[Tuple[Fq, ...]] = (
        Fq(1),
        _OMEGA + 1,
        _OMEGA,
        Fq(-1),
        _OMEGA2,
        _OMEGA2 + 1,
    )

    def __init__(self, c0: Fq3, c1: Fq3):
        if not isinstance(c0, Fq3) or not isinstance(c1, Fq3):
            raise TypeError("Fq6 coefficients must be Fq3 elements")
        self.c0 = c0
        self.c1 = c1

    @staticmethod
    def mul_by_non_residue(elt: Fq3) -> Fq3:
        """Multiply an Fq3 element by X."""
        return Fq3(Fq6.non_residue * elt.c2, elt.c0, elt.c1)

    def __add__(self, other):
        if type(other) is not Fq6:
            return NotImplemented
        return Fq6(self.c0 + other.c0, self.c1 + other.c1)

    def __sub__(self, other):
        if type(other) is not Fq6:
            return NotImplemented
        return Fq6(self.c0 - other.c0, self.c1 - other.c1)

    def __neg__(self):
        return Fq6(-self.c0, -self.c1)

    def __eq__(self, other):
        if type(other) is not Fq6:
            return NotImplemented
        return self.c0 == other.c0 and self.c1 == other.c1

    def __hash__(self):
        return hash(("Fq6", self.c0, self.c1))

    def __pow__(self, exponent):
        return super().__pow__(exponent)

    def __mul__(self, other):
        if not isinstance(other, Fq6):
            return NotImplemented
        a0b0 = self.c0 * other.c0
        a1b1 = self.c1 * other.c1
        return Fq6(
            a0b0 + self.mul_by_non_residue(a1b1),
            (self.c0 + self.c1) * (other.c0 + other.c1) - a0b0 - a1b1,
        )

    def squared(self):
        ab = self.c0 * self.c1
        return Fq6(
            self.c0.squared() + self.mul_by_non_residue(self.c1.squared()),
            ab + ab,
        )

    def inverse(self):
        if self.is_zero():
            raise ZeroDivisionError("zero has no inverse")
        t = (self.c0.squared() - self.mul_by_non_residue(self.c1.squared())).inverse()
        return Fq6(self.c0 * t, -(self.c1 * t))

    def unitary_inverse(self):
        return Fq6(self.c0, -self.c1)

    def frobenius_map(self, power: int):
        return Fq6(
            self.c0.frobenius_map(power),
            self.frobenius_coeffs_c1[power % 6] * self.c1.frobenius_map(power),
        )

    def cyclotomic_exp(self, exponent):
        """Power of an element of the cyclotomic subgroup, using signed digits."""
        e = _exponent(exponent)
        if e < 0:
            raise ValueError("exponent must be non-negative")
        result = Fq6.one()
        inv = self.unitary_inverse()
        found_nonzero = False
        for digit in reversed(_naf(e)):
            if found_nonzero:
                result = result.squared()
            if digit:
                found_nonzero = True
                result = result * (self if digit > 0 else inv)
        return result

    def is_zero(self) -> bool:
        return self.c0.is_zero() and self.c1.is_zero()

    @classmethod
    def zero(cls):
        return cls(Fq3.zero(), Fq3.zero())

    @classmethod
    def one(cls):
        return cls(Fq3.one(), Fq3.zero())

    @classmethod
    def random_element(cls):
        return cls(Fq3.random_element(), Fq3.random_element())


def batch_invert(elements: Iterable):
    """Invert every element with a single field inversion; returns a new list."""
    items = list(elements)
    if not items:
        return []
    prefix = []
    acc = type(items[0]).one()
    for elt in items:
        if elt.is_zero():
            raise ZeroDivisionError("cannot invert zero")
        prefix.append(acc)
        acc = acc * elt
    acc_inv = acc.inverse()
    result = [None] * len(items)
    for position in reversed(range(len(items))):
        result[position] = acc_inv * prefix[position]
        acc_inv = acc_inv * items[position]
    return result