"""Queued provider request (dataclass only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TranscriptionRequest:
    seq: int
    is_final: bool
    payload: bytes

    @property
    def kind(self) -> str:
        return "final" if self.is_final else "partial"


__all__ = ["TranscriptionRequest"]
