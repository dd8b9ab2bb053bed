"""Core constants used across Foldkit modules.

This module centralizes defaults shared by the collection families.
Keeping values here avoids magic literals in operation code.
"""

from __future__ import annotations

import logging

DEFAULT_JOIN_SEPARATOR = ", "
DEFAULT_INTERSPERSE_INTERVAL = 1
DEFAULT_WINDOW_STEP = 1
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVEL_ENV_VAR = "FOLDKIT_LOG_LEVEL"
SUPPORTED_LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}
