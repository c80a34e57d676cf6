"""Tests for the immutable complex value type."""

import dataclasses
from math import pi, sqrt

import pytest

from cypoints.complex_value import Complex


class TestArithmetic:
    """Test basic complex arithmetic."""

    def test_add_sub(self):
        a = Complex(1.0, 2.0)
        b = Complex(0.5, -3.0)
        assert a.add(b) == Complex(1.5, -1.0)
        assert a.sub(b) == Complex(0.5, 5.0)

    def test_mul(self):
        """(1 + 2i)(3 + 4i) = -5 + 10i"""
        assert Complex(1.0, 2.0).mul(Complex(3.0, 4.0)) == Complex(-5.0, 10.0)

    def test_operators_match_methods(self):
        a = Complex(1.25, -0.5)
        b = Complex(-2.0, 0.75)
        assert a + b == a.add(b)
        assert a - b == a.sub(b)
        assert a * b == a.mul(b)

    def test_scale(self):
        assert Complex(2.0, -4.0).scale(0.5) == Complex(1.0, -2.0)

    def test_operations_return_new_values(self):
        a = Complex(1.0, 1.0)
        b = a.scale(2.0)
        assert a == Complex(1.0, 1.0)
        assert b is not a

    def test_immutable(self):
        c = Complex(1.0, 0.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.re = 2.0


class TestExponentials:
    """Test the exponential constructors."""

    def test_exp_zero(self):
        assert Complex.exp(0.0) == Complex(1.0, 0.0)

    def test_exp_quarter_turn(self):
        c = Complex.exp(pi / 2)
        assert abs(c.re) < 1e-15
        assert abs(c.im - 1.0) < 1e-15

    def test_exp_full_zero(self):
        assert Complex.exp_full(0.0, 0.0) == Complex(1.0, 0.0)

    def test_exp_full_modulus(self):
        c = Complex.exp_full(1.5, 0.3)
        r = sqrt(c.re ** 2 + c.im ** 2)
        assert abs(r - 4.4816890703380645) < 1e-12


class TestPow:
    """Test the principal-branch power."""

    def test_near_zero_collapses_to_exact_zero(self):
        result = Complex(1e-12, 1e-12).pow(0.7)
        assert result == Complex(0.0, 0.0)
        assert result.as_tuple() == (0.0, 0.0)

    def test_just_above_threshold_is_not_zero(self):
        result = Complex(1e-9, 0.0).pow(1.0)
        assert result.re > 0.0

    def test_square_of_i(self):
        c = Complex(0.0, 1.0).pow(2.0)
        assert abs(c.re + 1.0) < 1e-12
        assert abs(c.im) < 1e-12

    def test_square_root_positive_real(self):
        c = Complex(4.0, 0.0).pow(0.5)
        assert abs(c.re - 2.0) < 1e-12
        assert c.im == 0.0

    def test_principal_branch_on_negative_axis(self):
        """atan2 returns +pi on the upper side of the cut."""
        c = Complex(-1.0, 0.0).pow(0.5)
        assert abs(c.re) < 1e-12
        assert abs(c.im - 1.0) < 1e-12

    def test_principal_branch_below_the_cut(self):
        """A negative zero imaginary part selects -pi."""
        c = Complex(-1.0, -0.0).pow(0.5)
        assert abs(c.re) < 1e-12
        assert abs(c.im + 1.0) < 1e-12

    def test_pow_one_is_identity(self):
        c = Complex(0.3, -0.8).pow(1.0)
        assert abs(c.re - 0.3) < 1e-12
        assert abs(c.im + 0.8) < 1e-12
