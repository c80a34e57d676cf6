"""Hyperbolic kernels of the surface parameterization.

Both kernels are built directly from two ``Complex.exp_full`` evaluations
instead of ``cmath.cosh``/``cmath.sinh`` so that rounding matches the
exponential form term for term.
"""

from __future__ import annotations

from cypoints.complex_value import Complex

__all__ = ['u1', 'u3']


def u1(a: float, b: float) -> Complex:
    """Return ``cosh(a + ib) = (e**(a+ib) + e**(-a-ib)) / 2``."""
    exp1 = Complex.exp_full(a, b)
    exp2 = Complex.exp_full(-a, -b)
    return exp1.add(exp2).scale(0.5)


def u3(a: float, b: float) -> Complex:
    """Return ``sinh(a + ib) = (e**(a+ib) - e**(-a-ib)) / 2``."""
    exp1 = Complex.exp_full(a, b)
    exp2 = Complex.exp_full(-a, -b)
    return exp1.sub(exp2).scale(0.5)
