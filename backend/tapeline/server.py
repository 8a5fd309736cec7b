"""Run the measurement service under uvicorn."""

from __future__ import annotations

import logging
import socket

import uvicorn

from tapeline.config import settings

LOGGER = logging.getLogger(__name__)


def find_free_port() -> int:
    """Find a free TCP port to avoid conflicts."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind((settings.host, 0))
        return s.getsockname()[1]


def main() -> None:
    logging.basicConfig(level=logging.DEBUG if settings.debug else settings.log_level.upper())
    # Port 0 asks for any free port.
    port = settings.port or find_free_port()
    LOGGER.info("Starting %s on http://%s:%d", settings.app_name, settings.host, port)
    uvicorn.run(
        "tapeline.main:app",
        host=settings.host,
        port=port,
        log_level="debug" if settings.debug else settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
