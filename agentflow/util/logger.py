"""A printf-style facade over the standard logging module."""

from __future__ import annotations

import logging
from typing import Any


def _format(fmt: str, args: tuple[Any, ...]) -> str:
    return fmt % args if args else fmt


class LoggingAdapter:
    """Logs plain and printf-style messages, carrying structured attributes."""

    def __init__(self, logger: logging.Logger | None = None, attrs: dict[str, Any] | None = None) -> None:
        self._logger = logger if logger is not None else logging.getLogger()
        self._attrs = dict(attrs or {})

    @property
    def underlying(self) -> logging.Logger:
        return self._logger

    @property
    def attrs(self) -> dict[str, Any]:
        return dict(self._attrs)

    def _log(self, level: int, msg: str) -> None:
        self._logger.log(level, msg, extra={"attrs": dict(self._attrs)})

    def printf(self, fmt: str, *args: Any) -> None:
        """Log a formatted message at info level."""
        self._log(logging.INFO, _format(fmt, args))

    def info(self, msg: str) -> None:
        self._log(logging.INFO, msg)

    def infof(self, fmt: str, *args: Any) -> None:
        self._log(logging.INFO, _format(fmt, args))

    def error(self, msg: str) -> None:
        self._log(logging.ERROR, msg)

    def errorf(self, fmt: str, *args: Any) -> None:
        self._log(logging.ERROR, _format(fmt, args))

    def debug(self, msg: str) -> None:
        self._log(logging.DEBUG, msg)

    def debugf(self, fmt: str, *args: Any) -> None:
        self._log(logging.DEBUG, _format(fmt, args))

    def with_attrs(self, **kwargs: Any) -> "LoggingAdapter":
        """Return a new adapter whose records also carry these attributes."""
        return LoggingAdapter(self._logger, {**self._attrs, **kwargs})