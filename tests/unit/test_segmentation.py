from __future__ import annotations

import orjson
import pytest

from streamscribe.errors import MalformedControlMessage
from streamscribe.transcription.segmentation import classify_message, should_trigger_partial


@pytest.mark.parametrize(
    ("chunk_count", "window", "expected"),
    [
        (0, 5, False),
        (1, 5, False),
        (4, 5, False),
        (5, 5, True),
        (7, 5, False),
        (10, 5, True),
        (1, 1, True),
        (3, 0, False),
    ],
)
def test_should_trigger_partial(chunk_count: int, window: int, expected: bool) -> None:
    assert should_trigger_partial(chunk_count, window) is expected


@pytest.mark.parametrize("raw", [b'{"type":"stop"}', b'  {"type": "stop"}', b'{"type": "stop", "extra": 1}'])
def test_stop_is_control(raw: bytes) -> None:
    assert classify_message(raw).kind == "stop"


@pytest.mark.parametrize(
    "raw",
    [
        b"\x1a\x45\xdf\xa3\x9f\x42\x86\x81\x01",
        b"",
        b"{not json at all",
        b"{" + b"\xff\xfe" * 8,
        b'{"kind": "stop"}',
        b'{"type": 7}',
        b'["type", "stop"]',
        b"stop",
    ],
)
def test_everything_else_is_audio(raw: bytes) -> None:
    message = classify_message(raw)
    assert message.kind == "audio"
    assert message.audio == raw


def test_unknown_control_type_raises() -> None:
    with pytest.raises(MalformedControlMessage) as exc:
        classify_message(b'{"type":"pause"}')
    assert exc.value.msg_type == "pause"
    assert str(exc.value) == "unsupported control message type 'pause'"


@pytest.mark.parametrize("msg_type", [" stop ", "STOP", "stop\n"])
def test_stop_type_must_match_exactly(msg_type: str) -> None:
    raw = b'{"type": ' + orjson.dumps(msg_type) + b"}"
    with pytest.raises(MalformedControlMessage) as exc:
        classify_message(raw)
    assert exc.value.msg_type == msg_type
