#! /usr/bin/env python3
#
# Copyright (c) 2024 SUSE LLC
# Written by Claudio Fontana <claudio.fontana@suse.com>
#
# Clock submodule

from .clock import Clock, MonotonicClock, ManualClock, clock_delta
