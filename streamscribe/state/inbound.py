"""Classified inbound WebSocket message (dataclass only)."""

from __future__ import annotations

from typing import Literal
from dataclasses import dataclass

InboundKind = Literal["audio", "stop"]


@dataclass(frozen=True, slots=True)
class InboundMessage:
    kind: InboundKind
    audio: bytes = b""


__all__ = ["InboundKind", "InboundMessage"]
