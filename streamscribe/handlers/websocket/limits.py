"""Rate limiting utilities for WebSocket message handling."""

from __future__ import annotations

import logging

from streamscribe.errors import RateLimitError
from streamscribe.transcription.messages import build_error_message
from streamscribe.transcription.coordinator import StreamingCoordinator
from streamscribe.handlers.limits import SlidingWindowRateLimiter, rate_limit_message

logger = logging.getLogger(__name__)


def consume_limiter(
    limiter: SlidingWindowRateLimiter,
    coordinator: StreamingCoordinator,
    session_id: str,
) -> bool:
    """Charge one frame; on saturation queue an error for the client and return False.

    The error goes through the session's outbound queue so it cannot overtake
    transcription results that are already waiting to be sent.
    """
    try:
        limiter.consume()
    except RateLimitError as exc:
        logger.info("frame rejected by rate limit session_id=%s retry_in=%.1fs", session_id, exc.retry_in)
        coordinator.notify(session_id, build_error_message(rate_limit_message(exc)))
        return False
    return True


__all__ = ["consume_limiter"]
