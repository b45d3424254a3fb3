"""
A Timer class for timing the phases of an experiment.

:copyright: Copyright 2006-2024 by the PyNN team, see AUTHORS.
:license: CeCILL, see LICENSE for details.
"""

import time
from contextlib import contextmanager

from ..errors import PhaseError


class Timer(object):
    """
    For timing script execution.

    Timing starts on creation of the timer. Phases are timed with
    :meth:`phase`, which restarts the clock on entry and records the
    elapsed time, read exactly once, on exit::

        >>> timer = Timer()
        >>> with timer.phase("build"):
        ...     build_network()
        >>> timer.marks
        [('build', 0.42)]
    """

    def __init__(self):
        self.start()
        self.marks = []
        self._current_phase = None

    def start(self):
        """Start/restart timing."""
        self._start_time = time.perf_counter()
        self._last_check = self._start_time

    def reset(self):
        """Reset the time to zero, and start the clock."""
        self.start()

    def diff(self):
        """
        Return the time since the clock was started or :meth:`diff()` was
        last called.
        """
        current_time = time.perf_counter()
        time_since_last_check = current_time - self._last_check
        self._last_check = current_time
        return time_since_last_check

    def mark(self, label):
        """
        Store the time since the clock was started or :meth:`diff()` or
        :meth:`mark()` was last called, together with the
        provided label, in the attribute 'marks'. Returns that time.
        """
        interval = self.diff()
        self.marks.append((label, interval))
        return interval

    def get_mark(self, label):
        """Return the time recorded for `label`."""
        for name, interval in self.marks:
            if name == label:
                return interval
        raise KeyError(label)

    @contextmanager
    def phase(self, label):
        """
        Time the enclosed block and store it as mark `label`.

        Phases may not be nested. If the block raises, nothing is recorded.
        """
        if self._current_phase is not None:
            raise PhaseError("Cannot start timing '%s' while '%s' is being timed"
                             % (label, self._current_phase))
        self._current_phase = label
        self.reset()
        try:
            yield self
            self.mark(label)
        finally:
            self._current_phase = None

    @staticmethod
    def time_in_words(s):
        """
        Formats a time in seconds as a string containing the time in days,
        hours, minutes, seconds. Examples::

            >>> Timer.time_in_words(1)
            1 second
            >>> Timer.time_in_words(123)
            2 minutes, 3 seconds
            >>> Timer.time_in_words(24*3600)
            1 day
        """
        T = {}
        T["year"], s = divmod(int(s), 31556952)
        min, T["second"] = divmod(s, 60)
        h, T["minute"] = divmod(min, 60)
        T["day"], T["hour"] = divmod(h, 24)

        def add_units(val, units):
            return "%d %s" % (int(val), units) + (val > 1 and "s" or "")

        return ", ".join(
            [
                add_units(T[part], part)
                for part in ("year", "day", "hour", "minute", "second")
                if T[part] > 0
            ]
        ) or "less than a second"
