"""Primary WebSocket connection handler orchestration."""

from __future__ import annotations

import logging
import contextlib
from functools import partial

from fastapi import WebSocket

from streamscribe.state import RuntimeDeps
from streamscribe.handlers.limits import SlidingWindowRateLimiter
from streamscribe.config.websocket import WS_CLOSE_BUSY_CODE, WS_ERROR_SERVER_AT_CAPACITY

from .lifecycle import WebSocketLifecycle
from .message_loop import run_message_loop
from .errors import reject_connection, safe_send_message

logger = logging.getLogger(__name__)


def _create_rate_limiter(runtime_deps: RuntimeDeps) -> SlidingWindowRateLimiter:
    return SlidingWindowRateLimiter(
        limit=runtime_deps.settings.limits.ws_max_messages_per_window,
        window_seconds=runtime_deps.settings.limits.ws_message_window_seconds,
    )


async def _prepare_connection(ws: WebSocket, runtime_deps: RuntimeDeps) -> bool:
    if not await runtime_deps.connections.connect(ws):
        await reject_connection(
            ws,
            message=WS_ERROR_SERVER_AT_CAPACITY,
            close_code=WS_CLOSE_BUSY_CODE,
        )
        return False

    try:
        await ws.accept()
    except Exception:
        with contextlib.suppress(Exception):
            await runtime_deps.connections.disconnect(ws)
        raise
    return True


async def handle_websocket_connection(ws: WebSocket, runtime_deps: RuntimeDeps) -> None:
    coordinator = runtime_deps.coordinator
    lifecycle: WebSocketLifecycle | None = None
    admitted = False
    session_id: str | None = None
    try:
        if not await _prepare_connection(ws, runtime_deps):
            return
        admitted = True

        session = coordinator.open_session(partial(safe_send_message, ws))
        session_id = session.id

        lifecycle = WebSocketLifecycle(
            ws,
            is_busy_fn=lambda: coordinator.is_busy(session.id),
            idle_timeout_s=runtime_deps.settings.websocket.idle_timeout_s,
            watchdog_tick_s=runtime_deps.settings.websocket.watchdog_tick_s,
            max_connection_duration_s=runtime_deps.settings.websocket.max_connection_duration_s,
        )
        lifecycle.start()

        logger.info(
            "WebSocket connection accepted session_id=%s. Active: %s",
            session_id,
            runtime_deps.connections.get_connection_count(),
        )
        await run_message_loop(ws, lifecycle, _create_rate_limiter(runtime_deps), coordinator, session_id)
    finally:
        if lifecycle is not None:
            with contextlib.suppress(Exception):
                await lifecycle.stop()

        # Disconnect is never an implicit stop: buffered audio is dropped.
        if session_id is not None:
            with contextlib.suppress(Exception):
                await coordinator.close_session(session_id)

        if admitted:
            with contextlib.suppress(Exception):
                await runtime_deps.connections.disconnect(ws)
            logger.info(
                "WebSocket connection closed session_id=%s. Active: %s",
                session_id,
                runtime_deps.connections.get_connection_count(),
            )


__all__ = ["handle_websocket_connection"]
