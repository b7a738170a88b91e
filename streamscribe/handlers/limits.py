"""Sliding-window rate limiter for inbound WebSocket frames."""

from __future__ import annotations

import time
import math
import collections
from collections.abc import Callable

from streamscribe.errors import RateLimitError

TimeFn = Callable[[], float]


class SlidingWindowRateLimiter:
    """Track events over a rolling time window.

    Disabled if limit <= 0 or window_seconds <= 0.
    """

    def __init__(
        self,
        *,
        limit: int,
        window_seconds: float,
        now_fn: TimeFn | None = None,
    ) -> None:
        self.limit = max(0, int(limit))
        self.window_seconds = max(0.0, float(window_seconds))
        self._now = now_fn or time.monotonic
        self._events: collections.deque[float] = collections.deque()
        self._enabled = self.limit > 0 and self.window_seconds > 0

    @property
    def enabled(self) -> bool:
        return self._enabled

    def consume(self) -> None:
        """Record one frame, or raise `RateLimitError` without recording it."""
        if not self._enabled:
            return

        now = self._now()
        cutoff = now - self.window_seconds

        events = self._events
        while events and events[0] <= cutoff:
            events.popleft()

        if len(events) >= self.limit:
            raise RateLimitError(
                retry_in=max(0.0, (events[0] + self.window_seconds) - now),
                limit=self.limit,
                window_seconds=self.window_seconds,
            )

        events.append(now)


def rate_limit_message(exc: RateLimitError) -> str:
    """Client-facing text for a rejected frame; the retry hint is whole seconds, at least 1."""
    retry_in_s = max(1, math.ceil(float(exc.retry_in))) if exc.retry_in else 1
    return (
        f"message rate limit: at most {exc.limit} per {exc.window_seconds:g} seconds; "
        f"retry in {retry_in_s} seconds"
    )


__all__ = ["RateLimitError", "SlidingWindowRateLimiter", "rate_limit_message"]
