#! /usr/bin/env python3
#
# Copyright (c) 2024 SUSE LLC
# Written by Claudio Fontana <claudio.fontana@suse.com>
#
# This program is free software; you can redistribute it and/or
# modify it under the terms of the GNU General Public License
# as published by the Free Software Foundation; either version 2
# of the License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program; if not, write to the Free Software
# Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA  02110-1301, USA.
#
# Stopwatch for high resolution elapsed time measurement
#
#   sw = Stopwatch()
#   sw.start()
#   # do something and get the elapsed time
#   e1 = sw.elapsed()
#   # do something other and get the total elapsed time
#   sw.stop()
#   total = sw.elapsed()
#
# Durations are integer nanoseconds. Multiple start/stop cycles accumulate.

import enum
import typing

from hrsw.log import log
from hrsw.clock import Clock, MonotonicClock, clock_delta


class State(enum.Enum):
    STOPPED = "stopped"
    RUNNING = "running"


class StopwatchError(Exception):
    pass


class AlreadyRunning(StopwatchError):
    def __init__(self):
        super().__init__("stopwatch is already running")


class NotRunning(StopwatchError):
    def __init__(self):
        super().__init__("stopwatch is not running")


class Stopwatch:
    def __init__(self, clock: typing.Optional[Clock] = None):
        self._clock: Clock = clock if (clock is not None) else MonotonicClock()
        self._accumulated: int = 0
        self._segment_start: typing.Optional[int] = None

    @classmethod
    def started(cls, clock: typing.Optional[Clock] = None) -> "Stopwatch":
        """Create a stopwatch and immediately start the measurement."""
        sw: Stopwatch = cls(clock)
        sw.start()
        return sw

    @property
    def state(self) -> State:
        return State.STOPPED if (self._segment_start is None) else State.RUNNING

    def is_running(self) -> bool:
        return self._segment_start is not None

    def start(self) -> None:
        """
        Start a new run segment.

        Raises AlreadyRunning if a segment is in progress, in which case
        nothing changes and the running segment keeps its start instant.
        """
        if (self._segment_start is not None):
            log.debug("[STOPWATCH] start refused, already running")
            raise AlreadyRunning()
        self._segment_start = self._clock.now()
        log.debug("[STOPWATCH] start at %s, accumulated %s ns",
                  self._segment_start, self._accumulated)

    def stop(self) -> None:
        """
        End the current run segment and add its duration to the total.

        The total is obtained with elapsed(). Raises NotRunning if the
        stopwatch has never been started or is already stopped.
        """
        if (self._segment_start is None):
            log.debug("[STOPWATCH] stop refused, not running")
            raise NotRunning()
        now: int = self._clock.now()
        segment: int = clock_delta(self._segment_start, now)
        self._accumulated += segment
        self._segment_start = None
        log.debug("[STOPWATCH] stop at %s, segment %s ns, accumulated %s ns",
                  now, segment, self._accumulated)

    def elapsed(self) -> int:
        """
        Return the accumulated nanoseconds of all completed segments, plus
        the live segment if running. Never changes state.
        """
        if (self._segment_start is None):
            return self._accumulated
        return self._accumulated + clock_delta(self._segment_start, self._clock.now())

    def elapsed_seconds(self) -> float:
        return self.elapsed() / 1e9

    def reset(self) -> None:
        """Stop and clear, discarding any segment in progress."""
        if (self._segment_start is not None):
            log.debug("[STOPWATCH] reset discards running segment")
        self._segment_start = None
        self._accumulated = 0

    def reset_and_start(self) -> None:
        self.reset()
        self.start()

    def __enter__(self) -> "Stopwatch":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        # the block may have stopped or reset the stopwatch itself
        if (self._segment_start is not None):
            self.stop()

    def __repr__(self) -> str:
        return f"Stopwatch(state={self.state.value}, elapsed={self.elapsed()}ns)"
