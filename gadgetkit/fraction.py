"""Fractions with a bounded denominator and conversion from floats."""

from __future__ import annotations

import math
import operator

_PRECISION = 0.000001
_MAX_DENOMINATOR = 10000


def _round_half_away(value):
    return int(math.floor(abs(value) + 0.5)) * (1 if value >= 0 else -1)


def _fractionize(val):
    """Nearest fraction n/d for 0 < val <= 1, by alternating mediant steps."""
    low_n, low_d = 0, 1
    high_n, high_d = 1, 1
    for i in range(100):
        test_low = low_d * val - low_n
        test_high = high_n - high_d * val
        if test_high < _PRECISION * high_d:
            break
        if test_low < _PRECISION * low_d:
            high_n, high_d = low_n, low_d
            break
        if i & 1:
            count = int(test_high / test_low)
            n = (count + 1) * low_n + high_n
            d = (count + 1) * low_d + high_d
            if n > 0x8000 or d > 0x10000:
                break
            high_n, high_d = n - low_n, d - low_d
            low_n, low_d = n, d
        else:
            count = int(test_low / test_high)
            n = low_n + (count + 1) * high_n
            d = low_d + (count + 1) * high_d
            if n > 0x10000 or d > 0x10000:
                break
            low_n, low_d = n - high_n, d - high_d
            high_n, high_d = n, d
    return high_n, high_d


def _simplify(n, d):
    if d == 0:
        raise ZeroDivisionError("fraction with zero denominator")
    if n == 0:
        return 0, 1
    negative = (n < 0) != (d < 0)
    p, q = abs(n), abs(d)
    x = math.gcd(p, q)
    p //= x
    q //= x
    # keep the denominator at four digits at most
    while q > _MAX_DENOMINATOR:
        p = (p + 5) // 10
        q = (q + 5) // 10
        x = math.gcd(p, q)
        p //= x
        q //= x
    return (-p if negative else p), q


class Fraction:
    """A simplified fraction whose denominator is kept at most 10000."""

    __slots__ = ("_n", "_d")

    def __init__(self, numerator, denominator=1):
        self._n, self._d = _simplify(operator.index(numerator), operator.index(denominator))

    @classmethod
    def _make(cls, n, d):
        fraction = cls.__new__(cls)
        fraction._n = n
        fraction._d = d
        return fraction

    @classmethod
    def from_float(cls, value):
        """Approximate a float by a fraction."""
        f = float(value)
        if not math.isfinite(f):
            raise ValueError(f"cannot make a fraction of {value!r}")
        if abs(f) < 0.00001:
            return cls._make(0, 1)
        negative = f < 0
        f = abs(f)
        reciprocal = f > 1
        if reciprocal:
            f = 1 / f
        n, d = _simplify(*_fractionize(f))
        if reciprocal:
            n, d = d, n
        if negative:
            n = -n
        return cls._make(n, d)

    def numerator(self):
        return self._n

    def denominator(self):
        return self._d

    def __str__(self):
        return f"{self._n}/{self._d}"

    def __repr__(self):
        return f"Fraction({self._n}, {self._d})"

    @staticmethod
    def _coerce(value):
        if isinstance(value, Fraction):
            return value
        if isinstance(value, int):
            return Fraction(value)
        return None

    def _cross(self, other):
        return self._n * other._d, self._d * other._n

    def __eq__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        left, right = self._cross(other)
        return left == right

    def __lt__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        left, right = self._cross(other)
        return left < right

    def __le__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        left, right = self._cross(other)
        return left <= right

    def __gt__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        left, right = self._cross(other)
        return left > right

    def __ge__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        left, right = self._cross(other)
        return left >= right

    def __hash__(self):
        return hash((self._n, self._d))

    def __neg__(self):
        return Fraction(-self._n, self._d)

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        if self._d == other._d:
            return Fraction(self._n + other._n, self._d)
        return Fraction(self._n * other._d + other._n * self._d, self._d * other._d)

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        if self._d == other._d:
            return Fraction(self._n - other._n, self._d)
        return Fraction(self._n * other._d - other._n * self._d, self._d * other._d)

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Fraction(self._n * other._n, self._d * other._d)

    def __truediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Fraction(self._n * other._d, self._d * other._n)

    def __float__(self):
        return self._n / self._d

    def is_proper(self):
        """True when the absolute value is below one."""
        return abs(self._n) < abs(self._d)

    def to_angle(self):
        """The fraction seen as a slope, in degrees."""
        return math.degrees(math.atan2(self._n, self._d))

    @staticmethod
    def mediant(a, b):
        """The fraction (a.n + b.n) / (a.d + b.d), which lies between a and b."""
        return Fraction(a._n + b._n, a._d + b._d)

    @staticmethod
    def set_denominator(a, denominator):
        """Approximate *a* with the given denominator."""
        n = _round_half_away(a._n * denominator / a._d)
        return Fraction(n, denominator)