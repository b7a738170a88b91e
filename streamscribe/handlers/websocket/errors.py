"""Send and reject helpers for the WebSocket transport."""

from __future__ import annotations

import logging
from typing import Any

import orjson
from fastapi import WebSocket, WebSocketDisconnect

from streamscribe.transcription.messages import build_error_message

logger = logging.getLogger(__name__)


async def safe_send_text(ws: WebSocket, text: str) -> bool:
    try:
        await ws.send_text(text)
    except WebSocketDisconnect:
        return False
    except Exception:
        logger.debug("WebSocket send failed", exc_info=True)
        return False
    return True


async def safe_send_message(ws: WebSocket, message: dict[str, Any]) -> bool:
    return await safe_send_text(ws, orjson.dumps(message).decode("utf-8"))


async def send_error(ws: WebSocket, message: str) -> bool:
    return await safe_send_message(ws, build_error_message(message))


async def reject_connection(ws: WebSocket, *, message: str, close_code: int) -> None:
    # Accept so we can send a structured error, then close.
    try:
        await ws.accept()
    except Exception:
        return
    await send_error(ws, message)
    try:
        await ws.close(code=close_code, reason=message)
    except Exception:
        return


__all__ = [
    "reject_connection",
    "safe_send_message",
    "safe_send_text",
    "send_error",
]
