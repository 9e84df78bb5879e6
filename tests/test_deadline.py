"""Tests for Deadline (remaining time, timeout capping, cancellation)."""

import pytest

from prtoolbox.deadline import Deadline, DeadlineExceeded


class FakeClock:
    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def test_unbounded_deadline() -> None:
    """Without seconds, remaining is None and timeouts use the default."""
    d = Deadline()
    assert d.remaining() is None
    assert not d.expired
    assert d.timeout(30) == 30
    d.check()


def test_remaining_counts_down() -> None:
    """Remaining time follows the clock and never goes negative."""
    clock = FakeClock()
    d = Deadline(10, clock=clock)
    assert d.remaining() == 10
    clock.now += 4
    assert d.remaining() == 6
    clock.now += 100
    assert d.remaining() == 0.0
    assert d.expired


def test_timeout_capped_by_remaining() -> None:
    """timeout() returns min(default, remaining)."""
    clock = FakeClock()
    d = Deadline(5, clock=clock)
    assert d.timeout(30) == 5
    assert d.timeout(2) == 2


def test_check_raises_when_expired() -> None:
    """check() raises DeadlineExceeded once time is up."""
    clock = FakeClock()
    d = Deadline(1, clock=clock)
    d.check()
    clock.now += 1
    with pytest.raises(DeadlineExceeded, match="deadline exceeded"):
        d.check()


def test_cancel() -> None:
    """Cancelled deadline is expired with zero remaining time."""
    d = Deadline()
    d.cancel()
    assert d.cancelled
    assert d.expired
    assert d.remaining() == 0.0
    with pytest.raises(DeadlineExceeded, match="cancelled"):
        d.check()


def test_after_constructor() -> None:
    """Deadline.after(seconds) sets a bounded deadline."""
    d = Deadline.after(60)
    remaining = d.remaining()
    assert remaining is not None and 0 < remaining <= 60
