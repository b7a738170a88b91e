"""Partial/final transcription settings (env-resolved constants only)."""

from __future__ import annotations

from .env import get_int, get_float

# Number of most recent fragments re-transcribed for every partial result.
# A partial fires whenever the buffered fragment count is a multiple of it.
STT_PARTIAL_WINDOW: int = max(1, get_int("STT_PARTIAL_WINDOW", 5))

# Upper bound on one provider call; expiry is reported like any provider failure.
STT_PROVIDER_TIMEOUT_S: float = get_float("STT_PROVIDER_TIMEOUT_S", 60.0)
if STT_PROVIDER_TIMEOUT_S <= 0:
    STT_PROVIDER_TIMEOUT_S = 60.0

__all__ = [
    "STT_PARTIAL_WINDOW",
    "STT_PROVIDER_TIMEOUT_S",
]
