"""Main FastAPI server for streaming speech-to-text over WebSocket."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, WebSocket
from fastapi.responses import ORJSONResponse

from streamscribe.runtime.logging import configure_logging
from streamscribe.runtime.dependencies import build_runtime_deps
from streamscribe.handlers.websocket.manager import handle_websocket_connection
from streamscribe.config.websocket import WS_PORT, SERVER_HOST, WS_ENDPOINT_PATH

logger = logging.getLogger(__name__)

configure_logging()


@asynccontextmanager
async def _lifespan(app: FastAPI):
    runtime_deps = await build_runtime_deps()
    app.state.runtime_deps = runtime_deps
    logger.info("runtime: ready")
    try:
        yield
    finally:
        deps = getattr(app.state, "runtime_deps", None)
        if deps is not None:
            await deps.shutdown()


app = FastAPI(default_response_class=ORJSONResponse, lifespan=_lifespan)


@app.get("/")
async def root() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@app.websocket(WS_ENDPOINT_PATH)
async def websocket_endpoint(websocket: WebSocket) -> None:
    runtime_deps = getattr(app.state, "runtime_deps", None)
    if runtime_deps is None:
        raise RuntimeError("Runtime dependencies are not initialized")
    await handle_websocket_connection(websocket, runtime_deps)


def main() -> None:
    logger.info("WebSocket server running on %s:%d%s", SERVER_HOST, WS_PORT, WS_ENDPOINT_PATH)
    uvicorn.run(app, host=SERVER_HOST, port=WS_PORT, log_config=None)


if __name__ == "__main__":
    main()
