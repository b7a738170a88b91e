#!/usr/bin/env python3
"""Stream a local recording to a running server and print partial/final transcripts.

The file is sent as-is in fixed-size fragments at a steady pace, mimicking a
browser recorder's timeslices, followed by {"type": "stop"}.
"""

from __future__ import annotations

import json
import time
import asyncio
import argparse
from pathlib import Path

import websockets


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Stream an audio file over WebSocket")
    p.add_argument("file", type=Path, help="Audio file in the container the server expects (e.g. .webm)")
    p.add_argument("--server", default="ws://localhost:3001/", help="ws:// or wss:// URL of the endpoint")
    p.add_argument("--chunk-bytes", type=int, default=16000, help="Bytes per fragment")
    p.add_argument("--interval-s", type=float, default=1.0, help="Delay between fragments")
    p.add_argument("--timeout-s", type=float, default=120.0, help="Give up waiting for the final result")
    return p.parse_args()


def _chunks(data: bytes, size: int) -> list[bytes]:
    size = max(1, size)
    return [data[i : i + size] for i in range(0, len(data), size)]


async def _send_audio(ws, chunks: list[bytes], interval_s: float) -> None:
    for chunk in chunks:
        await ws.send(chunk)
        await asyncio.sleep(interval_s)
    await ws.send(json.dumps({"type": "stop"}))


async def _read_results(ws, started: float) -> str | None:
    async for raw in ws:
        msg = json.loads(raw)
        elapsed = time.perf_counter() - started
        if msg.get("type") == "error":
            print(f"[{elapsed:6.2f}s] error: {msg.get('message')}")
            if "(final)" in (msg.get("message") or ""):
                return None
            continue
        if msg.get("type") != "transcription":
            continue
        label = "final  " if msg.get("isFinal") else "partial"
        print(f"[{elapsed:6.2f}s] {label}: {msg.get('text')}")
        if msg.get("isFinal"):
            return msg.get("text") or ""
    return None


async def run(args: argparse.Namespace) -> None:
    chunks = _chunks(args.file.read_bytes(), args.chunk_bytes)
    print(f"server: {args.server}  fragments: {len(chunks)}  interval: {args.interval_s}s")

    async with websockets.connect(args.server, max_size=None) as ws:
        started = time.perf_counter()
        sender = asyncio.create_task(_send_audio(ws, chunks, args.interval_s))
        try:
            final = await asyncio.wait_for(_read_results(ws, started), timeout=args.timeout_s)
        finally:
            sender.cancel()

    if final is None:
        print("no final transcript received")


def main() -> None:
    asyncio.run(run(parse_args()))


if __name__ == "__main__":
    main()
