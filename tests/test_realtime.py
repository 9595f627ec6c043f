#
# Copyright (c) 2024 SUSE LLC
#

import time

import pytest

from hrsw.stopwatch import Stopwatch, AlreadyRunning, NotRunning

MS: int = 1_000_000


def test_sleep_scenario():
    sw = Stopwatch()
    sw.start()
    time.sleep(0.05)
    e1: int = sw.elapsed()
    assert 45 * MS <= e1 <= 200 * MS
    time.sleep(0.05)
    sw.stop()
    e2: int = sw.elapsed()
    assert e1 + 45 * MS <= e2 <= e1 + 200 * MS
    time.sleep(0.01)
    assert sw.elapsed() == e2
    assert sw.elapsed() == sw.elapsed()


def test_double_start():
    sw = Stopwatch()
    sw.start()
    with pytest.raises(AlreadyRunning):
        sw.start()
    assert sw.is_running()


def test_stop_never_started():
    sw = Stopwatch()
    with pytest.raises(NotRunning):
        sw.stop()
    assert sw.elapsed() == 0


def test_multiple_segments():
    sw = Stopwatch()
    for _ in range(2):
        sw.start()
        time.sleep(0.005)
        sw.stop()
        time.sleep(0.005)
    assert 10 * MS <= sw.elapsed() < 110 * MS
