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
# Monotonic clock sources
#
# An instant is an opaque integer count of nanoseconds, only meaningful
# when subtracted from another instant of the same clock.

import time
import typing

from hrsw.log import log


class Clock(typing.Protocol):
    def now(self) -> int:
        ...


class MonotonicClock:
    """Default clock, backed by the highest resolution monotonic counter."""

    def now(self) -> int:
        return time.perf_counter_ns()


class ManualClock:
    """Clock that only moves when told to, for tests and simulations."""

    def __init__(self, start: int = 0):
        self._now: int = start

    def now(self) -> int:
        return self._now

    def advance(self, ns: int) -> int:
        if (ns < 0):
            raise ValueError(f"cannot move a monotonic clock backward by {-ns} ns")
        self._now += ns
        return self._now

    def set(self, ns: int) -> int:
        if (ns < self._now):
            raise ValueError(f"cannot set clock to {ns}, already at {self._now}")
        self._now = ns
        return self._now


def clock_delta(start: int, end: int) -> int:
    if (end < start):
        log.warning("clock went backward by %s ns, ignoring segment", start - end)
        return 0
    return end - start
