"""Test doubles for the coordinator: an instrumented provider and an outbound message sink."""

from __future__ import annotations

import asyncio
from typing import Any
from collections import defaultdict
from collections.abc import Callable

from streamscribe.errors import ProviderError
from streamscribe.transcription.store import SessionStore
from streamscribe.state.settings import StreamingSettings
from streamscribe.transcription.coordinator import StreamingCoordinator

Responder = Callable[[bytes, int], str]


def _echo(audio: bytes, _call: int) -> str:
    return audio.decode("utf-8")


class FakeProvider:
    """Records every call and how many overlap per session.

    The session id is recovered from the upload filename (`<session>-<seq>.<ext>`).
    Calls listed in `fail_calls` (1-based) raise `ProviderError`; `delays` maps
    a call number to how long it takes.
    """

    def __init__(
        self,
        *,
        responder: Responder | None = None,
        fail_calls: set[int] | None = None,
        delays: dict[int, float] | None = None,
        default_delay: float = 0.0,
    ) -> None:
        self.responder = responder or _echo
        self.fail_calls = fail_calls or set()
        self.delays = delays or {}
        self.default_delay = default_delay
        self.calls: list[dict[str, Any]] = []
        self.in_flight: dict[str, int] = defaultdict(int)
        self.max_in_flight: dict[str, int] = defaultdict(int)
        self.cancelled = 0

    async def transcribe(self, audio: bytes, content_type: str, *, filename: str = "audio.webm") -> str:
        session_id = filename.rsplit("-", 1)[0]
        self.calls.append({"audio": audio, "content_type": content_type, "filename": filename})
        call = len(self.calls)
        self.in_flight[session_id] += 1
        self.max_in_flight[session_id] = max(self.max_in_flight[session_id], self.in_flight[session_id])
        try:
            await asyncio.sleep(self.delays.get(call, self.default_delay))
            if call in self.fail_calls:
                raise ProviderError(f"call {call} failed")
            return self.responder(audio, call)
        except asyncio.CancelledError:
            self.cancelled += 1
            raise
        finally:
            self.in_flight[session_id] -= 1


class Outbox:
    def __init__(self) -> None:
        self.messages: list[dict[str, Any]] = []

    async def __call__(self, message: dict[str, Any]) -> bool:
        self.messages.append(message)
        return True

    def of_type(self, msg_type: str) -> list[dict[str, Any]]:
        return [m for m in self.messages if m["type"] == msg_type]


def frame(i: int) -> bytes:
    return f"[{i}]".encode()


def frames(start: int, stop: int) -> str:
    return "".join(f"[{i}]" for i in range(start, stop))


async def wait_idle(coordinator: StreamingCoordinator, session_id: str, timeout: float = 2.0) -> None:
    async def _poll() -> None:
        while coordinator.is_busy(session_id):
            await asyncio.sleep(0.001)
        # Let the worker run any completion callback queued behind the last send.
        await asyncio.sleep(0)

    await asyncio.wait_for(_poll(), timeout=timeout)


def make_coordinator(
    provider: FakeProvider,
    *,
    window: int = 5,
    timeout_s: float = 5.0,
    max_audio_bytes: int = 0,
    store: SessionStore | None = None,
) -> StreamingCoordinator:
    return StreamingCoordinator(
        provider=provider,
        store=store,
        settings=StreamingSettings(
            partial_window=window,
            provider_timeout_s=timeout_s,
            max_session_audio_bytes=max_audio_bytes,
        ),
        content_type="audio/webm",
    )




__all__ = ["FakeProvider", "Outbox", "frame", "frames", "make_coordinator", "wait_idle"]
