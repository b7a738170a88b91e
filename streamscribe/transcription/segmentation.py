"""Inbound frame classification and the partial-trigger rule."""

from __future__ import annotations

import orjson

from streamscribe.state import InboundMessage
from streamscribe.errors import MalformedControlMessage
from streamscribe.config.websocket import WS_KEY_TYPE, WS_TYPE_STOP

# Only the head of a frame is inspected before attempting a JSON parse, so
# large binary fragments are never decoded.
_CONTROL_SNIFF_BYTES = 16


def should_trigger_partial(chunk_count: int, window: int) -> bool:
    """A partial fires each time the buffered fragment count fills another window."""
    if window <= 0 or chunk_count <= 0:
        return False
    return chunk_count % window == 0


def _looks_like_control(data: bytes) -> bool:
    return data[:_CONTROL_SNIFF_BYTES].lstrip().startswith(b"{")


def classify_message(data: bytes) -> InboundMessage:
    """Classify one inbound frame as a control signal or an audio fragment.

    The control parse is tried first and anything that is not a JSON object
    carrying a string `type` is audio. A JSON object whose `type` is not
    recognized raises `MalformedControlMessage`.
    """
    if not _looks_like_control(data):
        return InboundMessage(kind="audio", audio=data)

    try:
        msg = orjson.loads(data)
    except orjson.JSONDecodeError:
        return InboundMessage(kind="audio", audio=data)

    if not isinstance(msg, dict):
        return InboundMessage(kind="audio", audio=data)

    msg_type = msg.get(WS_KEY_TYPE)
    if not isinstance(msg_type, str):
        return InboundMessage(kind="audio", audio=data)

    if msg_type == WS_TYPE_STOP:
        return InboundMessage(kind="stop")
    raise MalformedControlMessage(msg_type)


__all__ = ["classify_message", "should_trigger_partial"]
