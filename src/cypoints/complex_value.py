"""Immutable complex values for the surface generator.

``Complex`` is a small frozen value type rather than the builtin ``complex``
so that the power operation is explicit about its branch: ``pow`` always
returns the principal value, with the angle taken from ``atan2`` in the range
(-pi, pi], and collapses near-zero magnitudes to an exact zero.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import atan2, cos, exp, sin, sqrt

__all__ = ['Complex', 'POW_ZERO_THRESHOLD']

# Squared magnitudes below this are treated as zero by ``Complex.pow``.
POW_ZERO_THRESHOLD = 1e-20


@dataclass(frozen=True)
class Complex:
    """A complex number as an immutable ``(re, im)`` pair."""

    re: float
    im: float

    def add(self, other: Complex) -> Complex:
        return Complex(self.re + other.re, self.im + other.im)

    def sub(self, other: Complex) -> Complex:
        return Complex(self.re - other.re, self.im - other.im)

    def mul(self, other: Complex) -> Complex:
        return Complex(
            self.re * other.re - self.im * other.im,
            self.re * other.im + self.im * other.re,
        )

    def scale(self, s: float) -> Complex:
        """Multiply both components by the real number ``s``."""
        return Complex(self.re * s, self.im * s)

    __add__ = add
    __sub__ = sub
    __mul__ = mul

    @classmethod
    def exp(cls, theta: float) -> Complex:
        """Return the unit-modulus value ``(cos theta, sin theta)``."""
        return cls(cos(theta), sin(theta))

    @classmethod
    def exp_full(cls, a: float, b: float) -> Complex:
        """Return ``e**(a + ib)``, i.e. ``e**a * (cos b, sin b)``."""
        r = exp(a)
        return cls(r * cos(b), r * sin(b))

    def pow(self, p: float) -> Complex:
        """Return the principal ``p``-th power of this value.

        Parameters
        ----------
        p : float
            Real exponent.

        Returns
        -------
        Complex
            ``r**p * (cos(p*theta), sin(p*theta))`` where ``theta`` is the
            principal argument. Values with ``re**2 + im**2 < 1e-20`` return
            exactly ``Complex(0.0, 0.0)``.
        """
        r_sq = self.re * self.re + self.im * self.im
        if r_sq < POW_ZERO_THRESHOLD:
            return Complex(0.0, 0.0)
        r = sqrt(r_sq)
        theta = atan2(self.im, self.re)
        rp = r ** p
        phi = theta * p
        return Complex(rp * cos(phi), rp * sin(phi))

    def as_tuple(self):
        return (self.re, self.im)
