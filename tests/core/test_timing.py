"""
Tests for Timer and timed().
"""

import pytest

from pylinstat.core.compute.timing import Timer, timed


class TestTimer:

    def test_sections_reported(self):
        timer = Timer()
        timer.start()
        with timer.section('qr_decomposition'):
            pass
        with timer.section('solve'):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'qr_decomposition', 'solve'}
        assert all(v >= 0.0 for v in result.values())

    def test_repeated_section_accumulates(self):
        timer = Timer()
        timer.start()
        for _ in range(3):
            with timer.section('mean'):
                pass
        timer.stop()
        assert list(timer.result()) == ['total_seconds', 'mean']

    def test_section_recorded_on_exception(self):
        timer = Timer()
        timer.start()
        with pytest.raises(ZeroDivisionError):
            with timer.section('solve'):
                1 / 0
        timer.stop()
        assert 'solve' in timer.result()

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()


class TestTimed:

    def test_total_available_after_block(self):
        with timed() as timer:
            sum(range(100))
        assert timer.result()['total_seconds'] >= 0.0
