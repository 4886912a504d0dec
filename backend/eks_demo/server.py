#!/usr/bin/env python3
"""Process entrypoint: bind the port, log startup, serve until SIGTERM.

Lifecycle is STARTING -> SERVING -> TERMINATED. A bind failure is fatal
(exit 1, no retry). SIGTERM exits immediately with status 0; in-flight
requests are not drained.
"""
from __future__ import annotations

import enum
import logging
import os
import signal
import socket
import sys
from datetime import datetime, timezone

import uvicorn
from pydantic import ValidationError

from eks_demo.core.config import get_settings
from eks_demo.core.logging import get_logger
from eks_demo.core.system_info import isoformat_utc

log = get_logger("eks_demo.server")


class ServerState(str, enum.Enum):
    STARTING = "starting"
    SERVING = "serving"
    TERMINATED = "terminated"


state = ServerState.STARTING


def _set_state(new_state: ServerState) -> None:
    global state
    log.debug("[server] %s -> %s", state.value, new_state.value)
    state = new_state


def bind_socket(host: str, port: int, backlog: int = 2048) -> socket.socket:
    """Bind and listen on host:port. Raises OSError on failure."""
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.listen(backlog)
    except OSError:
        sock.close()
        raise
    sock.set_inheritable(True)
    return sock


def handle_sigterm(signum=None, frame=None) -> None:
    """Log and hard-exit with status 0."""
    log.info("SIGTERM signal received: closing HTTP server")
    _set_state(ServerState.TERMINATED)
    for h in logging.getLogger().handlers:
        h.flush()
    sys.stdout.flush()
    os._exit(0)


class DemoServer(uvicorn.Server):
    """uvicorn server whose SIGTERM handling is an immediate exit.

    SIGINT keeps uvicorn's normal shutdown for local Ctrl-C.
    """

    def handle_exit(self, sig, frame):
        if sig == signal.SIGTERM:
            handle_sigterm(sig, frame)
        super().handle_exit(sig, frame)


def main() -> None:
    """Main entry point."""
    try:
        settings = get_settings()
    except ValidationError as e:
        log.critical("[server] Invalid configuration: %s", e)
        _set_state(ServerState.TERMINATED)
        sys.exit(1)

    from eks_demo.main import create_app
    app = create_app(settings)

    try:
        sock = bind_socket(settings.HOST, settings.PORT)
    except OSError as e:
        log.critical(
            "[server] Cannot listen on %s:%s: %s",
            settings.HOST, settings.PORT, e,
        )
        _set_state(ServerState.TERMINATED)
        sys.exit(1)

    port = sock.getsockname()[1]
    log.info("[startup] Server is running on port %s", port)
    log.info("[startup] Environment: %s", settings.APP_ENV)
    log.info("[startup] Started at: %s", isoformat_utc(datetime.now(timezone.utc)))

    # Covers the window before uvicorn installs its own handlers
    signal.signal(signal.SIGTERM, handle_sigterm)
    _set_state(ServerState.SERVING)

    server = DemoServer(
        uvicorn.Config(
            app,
            log_config=None,
            log_level=settings.log_level,
            access_log=True,
        )
    )
    server.run(sockets=[sock])

    log.info("[server] Server stopped")
    _set_state(ServerState.TERMINATED)


if __name__ == "__main__":
    main()
