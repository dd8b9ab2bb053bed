"""Diagnostic configuration model for Foldkit.

This module owns the only environment variable Foldkit reads.
It controls log verbosity and never changes an operation result.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR, SUPPORTED_LOG_LEVELS
from core.errors import FoldkitConfigError


@dataclass(frozen=True)
class FoldkitConfig:
    """Validated diagnostic configuration.

    Attributes:
        log_level: Upper-case standard logging level name.
    """

    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "FoldkitConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            FoldkitConfigError: If environment values are invalid.
        """
        raw_level = os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL)
        return cls(log_level=_parse_log_level(raw_level))

    @property
    def log_level_number(self) -> int:
        """Return the numeric stdlib level for the configured name."""
        return SUPPORTED_LOG_LEVELS[self.log_level]


def _parse_log_level(raw_value: str) -> str:
    """Parse the log level environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Normalized level name.

    Raises:
        FoldkitConfigError: If the level name is unknown.
    """
    normalized = raw_value.strip().upper()
    if normalized not in SUPPORTED_LOG_LEVELS:
        supported = ", ".join(SUPPORTED_LOG_LEVELS)
        raise FoldkitConfigError(
            f"Invalid {LOG_LEVEL_ENV_VAR} value: "
            f"expected one of {supported}, got '{raw_value}'."
        )
    return normalized
