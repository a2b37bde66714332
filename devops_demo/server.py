"""Listener setup and uvicorn run loop.

The socket is bound here rather than inside uvicorn so a bind failure can be
reported and turned into a non-zero exit before any server starts.
"""

import contextlib
import logging
import signal
import socket
import threading
from typing import Iterator

import uvicorn
from fastapi import FastAPI

from .core.config import BIND_HOST, Settings

logger = logging.getLogger(__name__)

HANDLED_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class DemoServer(uvicorn.Server):
    """uvicorn server whose SIGINT/SIGTERM shutdown ends in a normal return.

    Stock uvicorn re-raises the captured signal once shutdown completes,
    which kills the process by signal instead of exiting 0.
    """

    @contextlib.contextmanager
    def capture_signals(self) -> Iterator[None]:
        if threading.current_thread() is not threading.main_thread():
            yield
            return
        previous = {sig: signal.signal(sig, self.handle_exit) for sig in HANDLED_SIGNALS}
        try:
            yield
        finally:
            for sig, handler in previous.items():
                signal.signal(sig, handler)


def bind_listener(host: str, port: int) -> socket.socket:
    return socket.create_server((host, port))


def serve(settings: Settings, app: FastAPI) -> int:
    """Serve until shutdown; return the process exit code."""
    try:
        sock = bind_listener(BIND_HOST, settings.port)
    except OSError as exc:
        logger.error("Could not bind %s:%d: %s", BIND_HOST, settings.port, exc)
        return 1

    logger.info("DevOps demo app running on port %d", settings.port)

    config = uvicorn.Config(
        app, host=BIND_HOST, port=settings.port, log_level=settings.log_level.lower()
    )
    server = DemoServer(config)
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()

    if not server.started:
        logger.error("Server failed to start on port %d", settings.port)
        return 1
    return 0
