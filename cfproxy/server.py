"""Process entry point and explicit start/stop control of the HTTP server."""
from __future__ import annotations

import logging
import signal
import threading
import time
from typing import Optional

import uvicorn
from fastapi import FastAPI

from .config import Settings, get_settings
from .logging_setup import configure_logging

logger = logging.getLogger(__name__)


class ProblemServer:
    """Runs uvicorn on a background thread so a supervisor can stop it."""

    def __init__(self, app: FastAPI, settings: Settings):
        self.settings = settings
        config = uvicorn.Config(
            app,
            host=settings.host,
            port=settings.port,
            timeout_keep_alive=settings.idle_timeout,
            timeout_graceful_shutdown=settings.grace_period,
            log_config=None,
        )
        self._server = uvicorn.Server(config)
        self._thread: Optional[threading.Thread] = None

    @property
    def started(self) -> bool:
        return self._server.started

    def start(self, timeout: float = 10.0) -> None:
        """Start serving and block until the socket is accepting connections."""
        self._thread = threading.Thread(target=self._server.run, name="cfproxy-server", daemon=True)
        self._thread.start()
        deadline = time.monotonic() + timeout
        while not self._server.started:
            if not self._thread.is_alive():
                raise RuntimeError("HTTP server exited during startup")
            if time.monotonic() > deadline:
                raise RuntimeError(f"HTTP server did not start within {timeout}s")
            time.sleep(0.05)
        logger.info("HTTP server started on %s:%s", self.settings.host, self.settings.port)

    def stop(self, grace_period: Optional[float] = None) -> None:
        """Stop accepting connections and wait for in-flight requests.

        Requests still running after ``grace_period`` seconds are abandoned.
        """
        if self._thread is None:
            return
        grace = self.settings.grace_period if grace_period is None else grace_period
        logger.info("Shutting down server, grace=%.1fs", grace)
        self._server.config.timeout_graceful_shutdown = grace
        self._server.should_exit = True
        self._thread.join(grace)
        if self._thread.is_alive():
            logger.warning("Graceful shutdown timed out, forcing exit")
            self._server.force_exit = True
            self._thread.join()
        self._thread = None
        logger.info("Server shut down")


def main() -> None:
    from .api.main import create_app

    settings = get_settings()
    configure_logging(settings.log_level)

    server = ProblemServer(create_app(settings), settings)
    server.start()

    stop_requested = threading.Event()

    def _request_stop(signum, frame):
        stop_requested.set()

    signal.signal(signal.SIGINT, _request_stop)
    signal.signal(signal.SIGTERM, _request_stop)
    while not stop_requested.wait(0.5):
        pass

    server.stop()


if __name__ == "__main__":
    main()
