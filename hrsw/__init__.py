#! /usr/bin/env python3
#
# Copyright (c) 2024 SUSE LLC
# Written by Claudio Fontana <claudio.fontana@suse.com>
#
# hrsw: high resolution stopwatch

from hrsw.clock import Clock, MonotonicClock, ManualClock, clock_delta
from hrsw.stopwatch import State, Stopwatch, StopwatchError, AlreadyRunning, NotRunning
from hrsw.log import log

__version__: str = "0.1"
