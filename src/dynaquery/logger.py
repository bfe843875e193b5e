"""Logging helpers for dynaquery.

The root logger is configured once, lazily, using ``settings.LOG_LEVEL``.
Modules obtain a :class:`Logger` through :func:`get_logger`.
"""

import logging
from typing import Optional

from dynaquery.settings import settings as api_settings

_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def resolve_level(level: Optional[str]) -> int:
    """Map a level name to a ``logging`` level, falling back to INFO."""
    return _LEVELS.get((level or "").upper(), logging.INFO)


def setup_global_logging(level: str = "INFO") -> None:
    """Configure the root logger once.

    Args:
        level: Log level name (e.g., "DEBUG", "INFO")
    """
    global _configured
    if _configured:
        return
    logging.basicConfig(level=resolve_level(level), format=LOG_FORMAT)
    _configured = True


def get_logger(name: Optional[str] = None) -> "Logger":
    """Return a module/class logger.

    Args:
        name: Logger name, usually __name__
    """
    return Logger(name or "dynaquery")


class Logger:
    """Wrapper over a standard library logger.

    ``message`` logs request-level chatter at the configured LOG_LEVEL, so
    table and query traffic shows up only when the application asks for it.
    """

    def __init__(self, name: Optional[str] = None) -> None:
        if not _configured:
            setup_global_logging(api_settings.LOG_LEVEL)
        self._logger = logging.getLogger(name or "dynaquery")

    @property
    def name(self) -> str:
        return self._logger.name

    def debug(self, msg: str, *args, **kwargs) -> None:
        self._logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        self._logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self._logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        self._logger.error(msg, *args, **kwargs)

    def critical(self, msg: str, *args, **kwargs) -> None:
        self._logger.critical(msg, *args, **kwargs)

    def message(self, msg: str, *args, **kwargs) -> None:
        level = (api_settings.LOG_LEVEL or "").upper()
        if level in ("", "INFO"):
            self.info(msg, *args, **kwargs)
        else:
            self._logger.log(resolve_level(level), msg, *args, **kwargs)
