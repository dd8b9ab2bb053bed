"""Structured logging configuration.

This module builds structlog loggers with a stable JSON format.
Loggers are wrapped per module so no global logging state is touched.
An invalid level in the environment degrades to the default level and
never prevents a module from importing.
"""

from __future__ import annotations

import sys
from typing import Any

import structlog

from core.config import FoldkitConfig
from core.errors import FoldkitConfigError


def get_logger(name: str, config: FoldkitConfig | None = None) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.
        config: Optional diagnostic configuration, read from env when absent.

    Returns:
        A structlog bound logger with structured output on stderr.
    """
    if config is not None:
        return _build_logger(name, config)
    try:
        return _build_logger(name, FoldkitConfig.from_env())
    except FoldkitConfigError as error:
        logger = _build_logger(name, FoldkitConfig())
        logger.warning("invalid_log_level", detail=str(error))
        return logger


def _build_logger(name: str, config: FoldkitConfig) -> Any:
    """Wrap a stderr printer with the JSON processor chain.

    Args:
        name: Logger name bound into every event.
        config: Diagnostic configuration supplying the level filter.

    Returns:
        A filtering structlog bound logger.
    """
    return structlog.wrap_logger(
        structlog.PrintLogger(file=sys.stderr),
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(config.log_level_number),
        logger_name=name,
    )
