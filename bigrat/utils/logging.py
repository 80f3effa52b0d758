"""Structured logging helpers.

The library never configures handlers on import; it only attaches a
``NullHandler`` to the package logger. Applications (and the test suite)
call :func:`configure_logging` to see records.
"""

import logging
import os
from typing import Any, Optional, Union

PACKAGE_LOGGER = "bigrat"
LEVEL_ENV_VAR = "BIGRAT_LOG_LEVEL"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def _render(value: Any) -> str:
    text = str(value)
    if not text or any(c.isspace() for c in text):
        return repr(text)
    return text


class StructuredLogger:
    """
    Thin wrapper over :class:`logging.Logger` emitting ``event key=value`` lines.

    Field rendering is skipped entirely when the level is disabled, so
    callers may pass rationals with huge numerators without paying for
    ``str()`` on them.
    """

    def __init__(self, logger: logging.Logger):
        self._logger = logger

    @property
    def name(self) -> str:
        return self._logger.name

    def is_enabled_for(self, level: int) -> bool:
        return self._logger.isEnabledFor(level)

    def log(self, level: int, event: str, **fields: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return
        if fields:
            rendered = " ".join(f"{key}={_render(val)}" for key, val in fields.items())
            self._logger.log(level, "%s %s", event, rendered)
        else:
            self._logger.log(level, "%s", event)

    def debug(self, event: str, **fields: Any) -> None:
        self.log(logging.DEBUG, event, **fields)

    def info(self, event: str, **fields: Any) -> None:
        self.log(logging.INFO, event, **fields)

    def warning(self, event: str, **fields: Any) -> None:
        self.log(logging.WARNING, event, **fields)


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger below the package logger."""
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return StructuredLogger(logging.getLogger(name))


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Args:
        level: Logging level; defaults to ``$BIGRAT_LOG_LEVEL`` or WARNING

    Returns:
        The configured package logger

    Raises:
        ValueError: If the level name is unknown
    """
    if level is None:
        level = os.environ.get(LEVEL_ENV_VAR, "WARNING")
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    if not any(getattr(h, "_bigrat_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
        handler._bigrat_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
