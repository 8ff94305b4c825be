from __future__ import annotations

import socket
from typing import Mapping

import uvicorn

from canarysim.app import create_app
from canarysim.log import get_logger
from canarysim.settings import Settings, load_settings

logger = get_logger("canarysim.server")


def bind_socket(host: str, port: int) -> socket.socket:
    """Bind the listening socket up front; a failure here is fatal."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
    except (OSError, OverflowError) as e:
        sock.close()
        logger.critical("Cannot listen on %s:%s: %s", host, port, e)
        raise SystemExit(1) from e
    sock.set_inheritable(True)
    return sock


def serve(settings: Settings) -> None:
    logger.info("Starting server on port %s (version %s)", settings.port, settings.version)
    logger.info(
        "channel=%s error_rate=%s latency_ms=%s status_page=%s",
        settings.channel,
        settings.error_rate,
        settings.latency_ms,
        settings.status_page,
    )
    sock = bind_socket(settings.host, settings.port)
    config = uvicorn.Config(create_app(settings), log_level="info")
    server = uvicorn.Server(config)
    server.run(sockets=[sock])


def run(environ: Mapping[str, str] | None = None) -> int:
    serve(load_settings(environ))
    return 0


# `uvicorn main:app` also works; configuration comes from the environment.
app = create_app()


if __name__ == "__main__":
    raise SystemExit(run())
