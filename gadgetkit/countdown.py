"""Countdown timer in milliseconds, microseconds or seconds."""

from __future__ import annotations

import enum
import time

_MAX_SECONDS = 4294967


class Resolution(enum.Enum):
    """Unit of the ticks a countdown counts."""

    MILLIS = "millis"
    MICROS = "micros"
    SECONDS = "seconds"


class _State(enum.Enum):
    RUNNING = "running"
    STOPPED = "stopped"


class CountDown:
    """Counts a number of ticks down against a clock.

    *clock* returns the current time in seconds; it defaults to
    :func:`time.monotonic`.
    """

    def __init__(self, resolution=Resolution.MILLIS, clock=None):
        self._clock = clock if clock is not None else time.monotonic
        self._state = _State.STOPPED
        self._remaining = 0
        self._start_time = 0
        self.set_resolution(resolution)
        self.stop()

    def set_resolution(self, resolution=Resolution.MILLIS):
        """Change the tick unit; this drops the current tick count."""
        self._resolution = Resolution(resolution)
        self._ticks = 0

    def resolution(self):
        return self._resolution

    def _now(self):
        seconds = self._clock()
        if self._resolution is Resolution.MICROS:
            return int(seconds * 1_000_000)
        millis = int(seconds * 1000)
        if self._resolution is Resolution.SECONDS:
            return millis // 1000
        return millis

    def start(self, ticks):
        """Start counting *ticks* down from now."""
        self._state = _State.RUNNING
        self._start_time = self._now()
        self._ticks = ticks

    def start_time(self, days, hours, minutes, seconds):
        """Count down a duration, in seconds resolution."""
        ticks = 86400 * days + 3600 * hours + 60 * minutes + seconds
        ticks = min(ticks, _MAX_SECONDS)
        self.set_resolution(Resolution.SECONDS)
        self.start(ticks)

    def stop(self):
        self._calc_remaining()
        self._state = _State.STOPPED

    def cont(self):
        """Resume a stopped countdown from what was left."""
        if self._state is _State.STOPPED:
            self.start(self._remaining)

    def remaining(self):
        self._calc_remaining()
        return self._remaining

    def is_running(self):
        return self._state is _State.RUNNING

    def _calc_remaining(self):
        if self._state is _State.RUNNING:
            elapsed = self._now() - self._start_time
            self._remaining = self._ticks - elapsed if self._ticks > elapsed else 0
            if self._remaining == 0:
                self._state = _State.STOPPED