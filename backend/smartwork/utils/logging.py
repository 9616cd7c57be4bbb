from __future__ import annotations

import logging
import sys

from smartwork.config import settings

# Third-party loggers pinned regardless of APP_LOG_LEVEL; httpx logs every
# RSS fetch at INFO.
_LIBRARY_LEVELS = {
    "uvicorn": logging.INFO,
    "uvicorn.access": logging.INFO,
    "fastapi": logging.INFO,
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
    "openai": logging.WARNING,
}


def setup_logging(level: str | None = None) -> None:
    """Configure stdout logging once per process."""
    level_name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
    )
    for name, lib_level in _LIBRARY_LEVELS.items():
        logging.getLogger(name).setLevel(lib_level)

    logging.getLogger("smartwork").info("Logging configured at %s", level_name)


def get_logger(name: str | None = None) -> logging.Logger:
    return logging.getLogger(name)
