#! /usr/bin/env python3
#
# Copyright (c) 2024 SUSE LLC
# Written by Claudio Fontana <claudio.fontana@suse.com>
#
# Stopwatch submodule

from .stopwatch import State, Stopwatch, StopwatchError, AlreadyRunning, NotRunning
