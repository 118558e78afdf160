"""Entry points for uvicorn/gunicorn and ``python -m proverbs``."""
from __future__ import annotations

import logging
import signal
import sys

import uvicorn
from uvicorn.main import STARTUP_FAILURE

from proverbs.app import create_app
from proverbs.core.config import ConfigError, get_settings, load_env_file
from proverbs.core.observability import configure_logging

logger = logging.getLogger(__name__)


def _exit_cleanly(signum, frame) -> None:
    sys.exit(0)


def run() -> None:
    try:
        load_env_file()
    except ConfigError as exc:
        configure_logging()
        logger.critical("%s", exc)
        sys.exit(1)
    settings = get_settings()
    configure_logging(settings.log_level)

    server: uvicorn.Server | None = None
    app = create_app(settings, listening=lambda: server is not None and server.started)
    config = uvicorn.Config(app, host=settings.host_address, port=settings.host_port, lifespan="on")
    server = uvicorn.Server(config)
    logger.info("API Server starting on %s:%s ...", settings.host_address, settings.host_port)
    # uvicorn owns SIGINT/SIGTERM; it runs the lifespan shutdown (save) and then exits.
    # Load and bind failures make it exit non-zero before any request is served,
    # and server.started stays False so nothing is saved.
    for sig in (signal.SIGINT, signal.SIGTERM):
        # uvicorn re-delivers the signal to this handler once it has shut down
        signal.signal(sig, _exit_cleanly)
    server.run()
    if not server.started:
        sys.exit(STARTUP_FAILURE)


__all__ = ["create_app", "run"]
