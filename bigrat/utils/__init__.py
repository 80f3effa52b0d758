"""Utilities shared across bigrat subpackages."""

from .logging import (
    LEVEL_ENV_VAR,
    PACKAGE_LOGGER,
    StructuredLogger,
    configure_logging,
    get_logger,
)

__all__ = [
    "LEVEL_ENV_VAR",
    "PACKAGE_LOGGER",
    "StructuredLogger",
    "configure_logging",
    "get_logger",
]
