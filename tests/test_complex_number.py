import cmath
import math

import pytest

from gadgetkit.complex_number import Complex

POINTS = [(0.3, 0.4), (-1.2, 0.7), (2.0, -1.5), (-0.5, -0.25)]


def test_str_format():
    assert str(Complex(1.5, -2)) == "1.500 -2.000i"


def test_equality_with_numbers_and_hash():
    assert Complex(2, 0) == 2
    assert Complex(1, 2) == Complex(1.0, 2.0)
    assert hash(Complex(1, 2)) == hash(Complex(1.0, 2.0))
    assert Complex(1, 2) != Complex(2, 1)


def test_from_polar_matches_rect():
    c = Complex.from_polar(2.0, 0.7)
    expected = cmath.rect(2.0, 0.7)
    assert c.real() == pytest.approx(expected.real)
    assert c.imag() == pytest.approx(expected.imag)
    assert c.modulus() == pytest.approx(2.0)
    assert c.phase() == pytest.approx(0.7)


def test_conjugate_and_negation():
    c = Complex(3, -4)
    assert c.conjugate() == Complex(3, 4)
    assert -c + c == Complex(0, 0)


@pytest.mark.parametrize("re, im", POINTS)
def test_arithmetic_matches_builtin(re, im):
    z = Complex(re, im)
    w = Complex(0.9, -0.3)
    b = complex(re, im)
    c = complex(0.9, -0.3)
    cases = {
        "add": (z + w, b + c),
        "sub": (z - w, b - c),
        "mul": (z * w, b * c),
        "div": (z / w, b / c),
        "rsub": (1 - z, 1 - b),
        "reciprocal": (z.reciprocal(), 1 / b),
    }
    for name, (got, want) in cases.items():
        assert complex(got.real(), got.imag()) == pytest.approx(want, abs=1e-9), name


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Complex(1, 1) / Complex(0, 0)
    with pytest.raises(ZeroDivisionError):
        Complex(0, 0).reciprocal()


@pytest.mark.parametrize("re, im", POINTS)
def test_powers_match_cmath(re, im):
    z = Complex(re, im)
    b = complex(re, im)
    cases = {
        "sqr": (z.sqr(), b * b),
        "sqrt": (z.sqrt(), cmath.sqrt(b)),
        "exp": (z.exp(), cmath.exp(b)),
        "log": (z.log(), cmath.log(b)),
        "log10": (z.log10(), cmath.log10(b)),
        "logn": (z.logn(2), cmath.log(b, 2)),
        "pow": (z.pow(Complex(0.5, 0.2)), cmath.exp(complex(0.5, 0.2) * cmath.log(b))),
    }
    for name, (got, want) in cases.items():
        assert complex(got.real(), got.imag()) == pytest.approx(want, abs=1e-9), name


@pytest.mark.parametrize("re, im", POINTS)
def test_forward_functions_match_cmath(re, im):
    z = Complex(re, im)
    b = complex(re, im)
    cases = {
        "sin": (z.sin(), cmath.sin(b)),
        "cos": (z.cos(), cmath.cos(b)),
        "tan": (z.tan(), cmath.tan(b)),
        "sinh": (z.sinh(), cmath.sinh(b)),
        "cosh": (z.cosh(), cmath.cosh(b)),
        "tanh": (z.tanh(), cmath.tanh(b)),
        "csc": (z.csc(), 1 / cmath.sin(b)),
        "sec": (z.sec(), 1 / cmath.cos(b)),
        "cot": (z.cot(), 1 / cmath.tan(b)),
        "csch": (z.csch(), 1 / cmath.sinh(b)),
        "sech": (z.sech(), 1 / cmath.cosh(b)),
        "coth": (z.coth(), 1 / cmath.tanh(b)),
    }
    for name, (got, want) in cases.items():
        assert complex(got.real(), got.imag()) == pytest.approx(want, abs=1e-9), name


@pytest.mark.parametrize("re, im", POINTS)
def test_inverse_round_trip(re, im):
    z = Complex(re, im)
    b = complex(re, im)
    cases = {
        "asin": z.asin().sin(),
        "acos": z.acos().cos(),
        "atan": z.atan().tan(),
        "acsc": z.acsc().csc(),
        "asec": z.asec().sec(),
        "acot": z.acot().cot(),
        "asinh": z.asinh().sinh(),
        "acosh": z.acosh().cosh(),
        "atanh": z.atanh().tanh(),
        "acsch": z.acsch().csch(),
        "asech": z.asech().sech(),
        "acoth": z.acoth().coth(),
    }
    for name, got in cases.items():
        assert complex(got.real(), got.imag()) == pytest.approx(b, abs=1e-7), name


def test_sqrt_squares_back():
    result = Complex(-3.0, 4.0).sqrt().sqr()
    assert result.real() == pytest.approx(-3.0, abs=1e-9)
    assert result.imag() == pytest.approx(4.0, abs=1e-9)


def test_log_of_zero_raises():
    with pytest.raises(ValueError):
        Complex(0, 0).log()


def test_exp_of_pi_i():
    result = Complex(0, math.pi).exp()
    assert result.real() == pytest.approx(-1.0, abs=1e-9)
    assert result.imag() == pytest.approx(0.0, abs=1e-9)