"""Complex numbers with the full set of trigonometric and hyperbolic functions."""

from __future__ import annotations

import math


class Complex:
    """An immutable complex number."""

    __slots__ = ("_re", "_im")

    def __init__(self, real=0.0, imag=0.0):
        self._re = float(real)
        self._im = float(imag)

    @classmethod
    def from_polar(cls, modulus, phase):
        return cls(modulus * math.cos(phase), modulus * math.sin(phase))

    def real(self):
        return self._re

    def imag(self):
        return self._im

    def phase(self):
        return math.atan2(self._im, self._re)

    def modulus(self):
        return math.hypot(self._re, self._im)

    def conjugate(self):
        """The number mirrored in the real axis."""
        return Complex(self._re, -self._im)

    def reciprocal(self):
        f = 1.0 / (self._re * self._re + self._im * self._im)
        return Complex(self._re * f, -self._im * f)

    def __str__(self):
        return f"{self._re:.3f} {self._im:.3f}i"

    def __repr__(self):
        return f"Complex({self._re!r}, {self._im!r})"

    @staticmethod
    def _coerce(value):
        if isinstance(value, Complex):
            return value
        if isinstance(value, (int, float)):
            return Complex(value, 0.0)
        if isinstance(value, complex):
            return Complex(value.real, value.imag)
        return None

    def __eq__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._re == other._re and self._im == other._im

    def __hash__(self):
        return hash((self._re, self._im))

    def __neg__(self):
        return Complex(-self._re, -self._im)

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Complex(self._re + other._re, self._im + other._im)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Complex(self._re - other._re, self._im - other._im)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Complex(
            self._re * other._re - self._im * other._im,
            self._re * other._im + self._im * other._re,
        )

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        f = 1.0 / (other._re * other._re + other._im * other._im)
        return Complex(
            (self._re * other._re + self._im * other._im) * f,
            (self._im * other._re - self._re * other._im) * f,
        )

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other / self

    # powers

    def sqr(self):
        return Complex(self._re * self._re - self._im * self._im, 2 * self._re * self._im)

    def sqrt(self):
        m = self.modulus()
        r = math.sqrt(max(0.0, 0.5 * (m + self._re)))
        i = math.sqrt(max(0.0, 0.5 * (m - self._re)))
        if self._im < 0:
            i = -i
        return Complex(r, i)

    def exp(self):
        e = math.exp(self._re)
        return Complex(e * math.cos(self._im), e * math.sin(self._im))

    def log(self):
        p = self.phase()
        if p > math.pi:
            p -= 2 * math.pi
        return Complex(math.log(self.modulus()), p)

    def pow(self, other):
        return (self.log() * other).exp()

    def logn(self, base):
        base = self._coerce(base)
        return self.log() / base.log()

    def log10(self):
        return self.logn(10)

    # trigonometric

    def sin(self):
        return Complex(math.sin(self._re) * math.cosh(self._im), math.cos(self._re) * math.sinh(self._im))

    def cos(self):
        return Complex(math.cos(self._re) * math.cosh(self._im), -math.sin(self._re) * math.sinh(self._im))

    def tan(self):
        return self.sin() / self.cos()

    def _inverse_trig(self, cosine):
        c = (_ONE - self.sqr()).sqrt()
        if cosine:
            c = self + c * Complex(0, -1)
        else:
            c = c + self * Complex(0, -1)
        return c.log() * Complex(0, 1)

    def asin(self):
        return self._inverse_trig(False)

    def acos(self):
        return self._inverse_trig(True)

    def atan(self):
        ratio = Complex(self._re, self._im - 1) / Complex(-self._re, -self._im - 1)
        return (Complex(0, -1) * ratio.log()) * 0.5

    def csc(self):
        return _ONE / self.sin()

    def sec(self):
        return _ONE / self.cos()

    def cot(self):
        return _ONE / self.tan()

    def acsc(self):
        return (_ONE / self).asin()

    def asec(self):
        return (_ONE / self).acos()

    def acot(self):
        return (_ONE / self).atan()

    # hyperbolic

    def sinh(self):
        return Complex(math.cos(self._im) * math.sinh(self._re), math.sin(self._im) * math.cosh(self._re))

    def cosh(self):
        return Complex(math.cos(self._im) * math.cosh(self._re), math.sin(self._im) * math.sinh(self._re))

    def tanh(self):
        return self.sinh() / self.cosh()

    def _inverse_hyperbolic(self, cosine):
        c = self.sqr()
        c = c - 1 if cosine else c + 1
        return (self + c.sqrt()).log()

    def asinh(self):
        return self._inverse_hyperbolic(False)

    def acosh(self):
        return self._inverse_hyperbolic(True)

    def atanh(self):
        c = (self + _ONE).log()
        c = c - (-(self - _ONE)).log()
        return c * 0.5

    def csch(self):
        return _ONE / self.sinh()

    def sech(self):
        return _ONE / self.cosh()

    def coth(self):
        return _ONE / self.tanh()

    def acsch(self):
        return (_ONE / self).asinh()

    def asech(self):
        return (_ONE / self).acosh()

    def acoth(self):
        return (_ONE / self).atanh()


_ONE = Complex(1.0, 0.0)