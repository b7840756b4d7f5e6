"""Tests for time sources."""

import re
import time as _time

from pewbench.time import cpu_time_ns, datetime_now


class TestTimeSources:
    def test_types(self):
        assert isinstance(cpu_time_ns(), int)

    def test_cpu_time_monotonic(self):
        t0 = cpu_time_ns()
        sum(range(100_000))
        assert cpu_time_ns() >= t0

    def test_cpu_time_excludes_sleep(self):
        t0 = cpu_time_ns()
        _time.sleep(0.05)
        assert cpu_time_ns() - t0 < 40_000_000

    def test_datetime_now_format(self):
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{3}", datetime_now())
