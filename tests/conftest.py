#
# Copyright (c) 2024 SUSE LLC
#

import pytest

from hrsw.clock import ManualClock
from hrsw.stopwatch import Stopwatch


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock(1000)


@pytest.fixture
def sw(clock: ManualClock) -> Stopwatch:
    return Stopwatch(clock)
