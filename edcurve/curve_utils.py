"""Generic group helpers."""

from __future__ import annotations

from edcurve.fields import PrimeFieldElement


def scalar_mul(base, scalar):
    """Multiply a group element by a non-negative scalar with double-and-add.

    ``base`` must offer ``zero()``, ``dbl()`` and ``+``; ``scalar`` is an int or
    a prime-field element.
    """
    if isinstance(scalar, PrimeFieldElement):
        scalar = scalar.value
    if not isinstance(scalar, int):
        raise TypeError(f"unsupported scalar type: {type(scalar).__name__}")
    if scalar < 0:
        raise ValueError("scalar must be non-negative")
    result = type(base).zero()
    found_one = False
    for bit in bin(scalar)[2:]:
        if found_one:
            result = result.dbl()
        if bit == "1":
            found_one = True
            result = result + base
    return result