"""
Logging setup for the catalog service.

Everything logs under the "catalog" namespace: request lines from the
middleware, error envelopes from the responder and store mutations. The
namespace gets a single stdout handler and does not propagate, so uvicorn's
own root configuration does not print each line twice.

LOG_LEVEL sets the level at import; create_app() applies the level from
CatalogConfig afterwards.
"""
import logging
import os
import sys
from typing import Optional, TextIO

ROOT_LOGGER_NAME = "catalog"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Marks the handler installed here, so reconfiguring replaces it
_HANDLER_ATTR = "_catalog_handler"

logger = logging.getLogger(ROOT_LOGGER_NAME)


def _build_handler(stream: TextIO) -> logging.Handler:
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    setattr(handler, _HANDLER_ATTR, True)
    return handler


def configure_logging(level: Optional[str] = None, stream: Optional[TextIO] = None) -> logging.Logger:
    """
    (Re)configure the "catalog" logger.

    Args:
        level: Level name such as "DEBUG"; defaults to LOG_LEVEL or INFO
        stream: Output stream; defaults to stdout

    Returns:
        The root "catalog" logger

    Handlers attached by other code (pytest's caplog, for one) are left alone.
    """
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

    for existing in list(logger.handlers):
        if getattr(existing, _HANDLER_ATTR, False):
            logger.removeHandler(existing)

    logger.addHandler(_build_handler(stream or sys.stdout))
    logger.setLevel(level_name)
    logger.propagate = False
    return logger


def get_logger(name: str = None) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Optional dotted suffix, e.g. "api.routes" -> "catalog.api.routes"

    Returns:
        Logger instance
    """
    if name:
        return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
    return logger


def set_log_level(level: str) -> None:
    """Change the level of the "catalog" logger without touching its handlers."""
    logger.setLevel(level.upper())


configure_logging()
