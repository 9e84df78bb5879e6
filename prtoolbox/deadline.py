"""Request deadline and cancellation token.

A Deadline is created by the caller (CLI, serving layer) and passed down
through the data source and generator so that slow upstreams never block
longer than the caller allows. Every HTTP call derives its timeout from
the remaining time.
"""

import threading
import time
from typing import Callable


class DeadlineExceeded(Exception):
    """Raised when a request runs past its deadline or is cancelled."""

    pass


class Deadline:
    """Optional absolute expiry plus a cancellation flag.

    Safe to share between the threads of one request.
    """

    def __init__(
        self,
        seconds: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._clock = clock
        self._expires_at = None if seconds is None else clock() + seconds
        self._cancelled = threading.Event()

    @classmethod
    def after(cls, seconds: float) -> "Deadline":
        return cls(seconds)

    def cancel(self) -> None:
        """Mark the request cancelled; pending work stops at the next check."""
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def remaining(self) -> float | None:
        """Seconds left, 0.0 when cancelled or expired, None when unbounded."""
        if self.cancelled:
            return 0.0
        if self._expires_at is None:
            return None
        return max(0.0, self._expires_at - self._clock())

    @property
    def expired(self) -> bool:
        return self.remaining() == 0.0

    def timeout(self, default: float) -> float:
        """Per-call timeout: the configured default, capped by the time left."""
        left = self.remaining()
        if left is None:
            return default
        return min(default, left)

    def check(self) -> None:
        """Raise DeadlineExceeded if cancelled or out of time."""
        if self.cancelled:
            raise DeadlineExceeded("request cancelled")
        if self.expired:
            raise DeadlineExceeded("deadline exceeded")
