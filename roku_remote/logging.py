"""Logging setup for the roku-remote CLI and scripts."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Per-request chatter from the HTTP stack; the client logs its own requests
# under ``roku_remote.adapters``.
NETWORK_LOGGERS = ("aiohttp.client", "aiohttp.internal", "asyncio")


def configure_logging(
    level: str = "INFO", *, log_path: Optional[Path] = None, log_network: bool = False
) -> None:
    """Route roku-remote logs to the console and, optionally, a file.

    Existing root handlers are replaced so repeated CLI invocations in one
    process do not duplicate output. Unknown level names fall back to INFO.
    Unless ``log_network`` is set, :data:`NETWORK_LOGGERS` are held at WARNING
    so DEBUG output shows the device requests rather than connection pooling.
    """

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_path:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
    )

    network_level = logging.NOTSET if log_network else logging.WARNING
    for name in NETWORK_LOGGERS:
        logging.getLogger(name).setLevel(network_level)
