"""WebSocket receive loop feeding the streaming coordinator."""

from __future__ import annotations

import asyncio
import logging

from fastapi import WebSocket, WebSocketDisconnect

from streamscribe.handlers.limits import SlidingWindowRateLimiter
from streamscribe.transcription.coordinator import StreamingCoordinator

from .limits import consume_limiter
from .lifecycle import WebSocketLifecycle

logger = logging.getLogger(__name__)


async def _receive_frame(ws: WebSocket) -> bytes:
    """Return the next frame as bytes; text frames are UTF-8 encoded."""
    message = await ws.receive()
    if message["type"] == "websocket.disconnect":
        raise WebSocketDisconnect(code=message.get("code", 1000), reason=message.get("reason"))
    data = message.get("bytes")
    if data is not None:
        return data
    return (message.get("text") or "").encode("utf-8")


async def _recv_with_watchdog(ws: WebSocket, lifecycle: WebSocketLifecycle) -> tuple[bytes | None, bool]:
    try:
        frame = await asyncio.wait_for(
            _receive_frame(ws),
            timeout=lifecycle.watchdog_tick_s * 2,
        )
        return frame, False
    except TimeoutError:
        return None, lifecycle.should_close()


async def run_message_loop(
    ws: WebSocket,
    lifecycle: WebSocketLifecycle,
    message_limiter: SlidingWindowRateLimiter,
    coordinator: StreamingCoordinator,
    session_id: str,
) -> None:
    try:
        while not lifecycle.should_close():
            frame, should_exit = await _recv_with_watchdog(ws, lifecycle)
            if should_exit:
                return
            if frame is None:
                continue

            lifecycle.touch()

            if not consume_limiter(message_limiter, coordinator, session_id):
                continue

            coordinator.handle_message(session_id, frame)
    except WebSocketDisconnect as exc:
        logger.debug("client disconnected session_id=%s code=%s", session_id, exc.code)


__all__ = ["run_message_loop"]
