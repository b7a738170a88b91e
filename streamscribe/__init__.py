"""Streaming speech-to-text relay: live audio in over WebSocket, partial and final transcripts out."""

__version__ = "0.1.0"
