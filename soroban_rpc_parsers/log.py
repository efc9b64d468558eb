"""
Logging helpers.

The parsers log through stdlib ``logging`` under the ``soroban_rpc_parsers``
namespace and never install handlers on import. Applications that have not
configured logging themselves can call :func:`configure_logging` once.
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import DEFAULT, ParserConfig

ROOT_LOGGER = "soroban_rpc_parsers"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if not name:
        return logging.getLogger(ROOT_LOGGER)
    return logging.getLogger(name)


def configure_logging(cfg: Optional[ParserConfig] = None) -> logging.Logger:
    """
    Set the package log level from ``cfg`` and, if the caller hasn't
    configured logging, install a basic stderr handler.
    """
    cfg = cfg or DEFAULT
    if not logging.getLogger().handlers:
        logging.basicConfig(level=cfg.log_level_no, format=LOG_FORMAT)
    log = get_logger()
    log.setLevel(cfg.log_level_no)
    return log


__all__ = ["ROOT_LOGGER", "LOG_FORMAT", "get_logger", "configure_logging"]
