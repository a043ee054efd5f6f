"""Angles held as degrees, minutes, seconds and ten-thousandths of a second."""

from __future__ import annotations

import enum
import math

_DIGITS = "0123456789"


class AngleFormat(enum.IntEnum):
    """How much of an angle to show: degrees, minutes, seconds or ten-thousandths."""

    D = 1
    M = 2
    S = 3
    T = 4


class Angle:
    """A signed angle with sub-second precision.

    The magnitude is kept as whole degrees, minutes (0..59), seconds (0..59)
    and ten-thousandths of a second (0..9999); the sign is kept apart.
    """

    __slots__ = ("_neg", "_d", "_m", "_s", "_t")

    def __init__(self, degrees=0, minutes=0, seconds=0, tenthousands=0):
        parts = (degrees, minutes, seconds, tenthousands)
        negative = any(p < 0 for p in parts)
        d, m, s, t = (abs(int(p)) for p in parts)
        s += t // 10000
        t %= 10000
        m += s // 60
        s %= 60
        d += m // 60
        m %= 60
        self._assign(negative and any((d, m, s, t)), d, m, s, t)

    def _assign(self, neg, d, m, s, t):
        self._neg = bool(neg)
        self._d = d
        self._m = m
        self._s = s
        self._t = t

    @classmethod
    def _make(cls, neg, d, m, s, t):
        angle = cls.__new__(cls)
        angle._assign(neg, d, m, s, t)
        return angle

    @classmethod
    def _normalized(cls, neg, d, m, s, t):
        s += t // 10000
        t %= 10000
        m += s // 60
        s %= 60
        d += m // 60
        m %= 60
        if d < 0:
            if t != 0:
                t = 10000 - t
                s += 1
            if s != 0:
                s = (60 - s) % 60
                m += 1
            if m != 0:
                m = (60 - m) % 60
                d += 1
            d = -d
            neg = not neg
        if d == 0 and m == 0 and s == 0 and t == 0:
            neg = False
        return cls._make(neg, d, m, s, t)

    @classmethod
    def from_float(cls, value):
        """Build an angle from a number of degrees."""
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"angle must be finite, got {value!r}")
        neg = value < 0
        a = abs(value)
        d = int(a)
        a = (a - d) * 256
        p = math.floor(a * 140625.0 + 0.5)
        t = p % 10000
        p //= 10000
        return cls._make(neg, d, p // 60, p % 60, t)

    @classmethod
    def parse(cls, text):
        """Parse a decimal degree string such as ``"-12.3456"``.

        Leading characters that are neither digits nor ``-`` are skipped;
        up to nine decimals are used.
        """
        if not any(c in _DIGITS for c in text):
            raise ValueError(f"no digits in angle text {text!r}")
        n = len(text)
        i = 0
        while i < n and text[i] not in _DIGITS and text[i] != "-":
            i += 1
        neg = False
        if i < n and text[i] == "-":
            neg = True
            i += 1
        if i < n and text[i] == "+":
            i += 1
        d = 0
        while i < n and text[i] in _DIGITS:
            d = d * 10 + int(text[i])
            i += 1
        fraction = 0
        count = 0
        if i < n:
            i += 1
            while i < n and text[i] in _DIGITS and count < 9:
                fraction = fraction * 10 + int(text[i])
                count += 1
                i += 1
        fraction *= 10 ** (9 - count)
        fraction = fraction * 4 // 125
        fraction = fraction + (fraction + 4) // 8
        t = fraction % 10000
        fraction //= 10000
        return cls._make(neg, d, fraction // 60, fraction % 60, t)

    @classmethod
    def from_radians(cls, radians):
        """Build an angle from radians."""
        return cls.from_float(radians * 180.0 / math.pi)

    def sign(self):
        """-1 for a negative angle, otherwise 1."""
        return -1 if self._neg else 1

    def degree(self):
        return self._d

    def minute(self):
        return self._m

    def second(self):
        return self._s

    def tenthousand(self):
        return self._t

    def format(self, mode=AngleFormat.T):
        """Render as ``D.MM'SS"TTTT``, cut off after the part that *mode* names."""
        mode = AngleFormat(mode)
        out = ["-" if self._neg else "", str(self._d), "."]
        if mode >= AngleFormat.M:
            out.append(f"{self._m:02d}'")
        if mode >= AngleFormat.S:
            out.append(f'{self._s:02d}"')
        if mode >= AngleFormat.T:
            out.append(f"{self._t:04d}")
        return "".join(out)

    def __str__(self):
        return self.format(AngleFormat.T)

    def __repr__(self):
        return f"Angle({str(self)!r})"

    def __float__(self):
        v = self._t + self._s * 10000 + self._m * 600000
        value = ((1.0 / 140625.0) / 256) * v + self._d
        return -value if self._neg else value

    def to_radians(self):
        return float(self) * math.pi / 180.0

    def __neg__(self):
        zero = not any((self._d, self._m, self._s, self._t))
        return Angle._make(False if zero else not self._neg, self._d, self._m, self._s, self._t)

    def _combine(self, other, same_sign_adds):
        k = 1 if (self._neg == other._neg) == same_sign_adds else -1
        return Angle._normalized(
            self._neg,
            self._d + k * other._d,
            self._m + k * other._m,
            self._s + k * other._s,
            self._t + k * other._t,
        )

    def __add__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return self._combine(other, True)

    def __sub__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return self._combine(other, False)

    def __mul__(self, factor):
        if isinstance(factor, Angle):
            return NotImplemented
        return Angle.from_float(float(self) * factor)

    def __truediv__(self, other):
        if isinstance(other, Angle):
            return float(self) / float(other)
        return Angle.from_float(float(self) / other)

    def _compare(self, other):
        if not self._neg and other._neg:
            return 1
        if self._neg and not other._neg:
            return -1
        mine = (self._d, self._m, self._s, self._t)
        theirs = (other._d, other._m, other._s, other._t)
        rv = (mine > theirs) - (mine < theirs)
        return -rv if self._neg else rv

    def __eq__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return self._compare(other) == 0

    def __lt__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return self._compare(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return self._compare(other) >= 0

    def __hash__(self):
        return hash((self._neg, self._d, self._m, self._s, self._t))