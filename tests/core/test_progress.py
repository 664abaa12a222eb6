"""
Tests for the background "still searching" ticker.
"""

import threading

import pytest

from token_chains.core.progress import ProgressTicker


class TestProgressTicker:
    """Start / stop handshake and message emission."""

    def test_emits_until_stopped(self):
        messages = []
        two_ticks = threading.Event()

        def emit(message):
            messages.append(message)
            if len(messages) >= 2:
                two_ticks.set()

        ticker = ProgressTicker(interval=0.01, message="still going", emit=emit)
        ticker.start()
        assert two_ticks.wait(timeout=5)
        ticker.stop()

        assert not ticker.is_running
        assert ticker.ticks == len(messages)
        assert set(messages) == {"still going"}

    def test_stop_returns_before_first_interval(self):
        """A long interval does not delay stop(); the event wakes the thread."""
        messages = []
        with ProgressTicker(interval=3600, emit=messages.append) as ticker:
            assert ticker.is_running

        assert not ticker.is_running
        assert messages == []
        assert ticker.ticks == 0

    def test_stop_without_start_is_a_no_op(self):
        ticker = ProgressTicker(interval=1)
        ticker.stop()

        assert not ticker.is_running

    def test_cannot_start_twice(self):
        ticker = ProgressTicker(interval=3600, emit=lambda message: None)
        ticker.start()
        try:
            with pytest.raises(RuntimeError):
                ticker.start()
        finally:
            ticker.stop()

    def test_rejects_non_positive_interval(self):
        with pytest.raises(ValueError):
            ProgressTicker(interval=0)
