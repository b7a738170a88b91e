"""Outbound message builders."""

from __future__ import annotations

from typing import Any

from streamscribe.config.websocket import (
    WS_KEY_TEXT,
    WS_KEY_TYPE,
    WS_TYPE_ERROR,
    WS_KEY_MESSAGE,
    WS_KEY_IS_FINAL,
    WS_TYPE_TRANSCRIPTION,
    WS_ERROR_TRANSCRIBE_FAILED,
)


def build_transcription_message(text: str, *, is_final: bool) -> dict[str, Any]:
    return {WS_KEY_TYPE: WS_TYPE_TRANSCRIPTION, WS_KEY_TEXT: text, WS_KEY_IS_FINAL: is_final}


def build_error_message(message: str) -> dict[str, Any]:
    return {WS_KEY_TYPE: WS_TYPE_ERROR, WS_KEY_MESSAGE: message}


def build_provider_error_message(cause: str, *, is_final: bool) -> dict[str, Any]:
    kind = "final" if is_final else "partial, non-fatal"
    return build_error_message(f"{WS_ERROR_TRANSCRIBE_FAILED} ({kind}): {cause}")


__all__ = [
    "build_error_message",
    "build_provider_error_message",
    "build_transcription_message",
]
