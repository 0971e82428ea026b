"""Engine and application loggers writing coloured lines to stdout."""

from __future__ import annotations

import logging
import sys

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_LEVEL_NAMES = {
    TRACE: "trace",
    logging.DEBUG: "debug",
    logging.INFO: "info",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "critical",
}
_LEVEL_COLOURS = {
    TRACE: "\033[37m",
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33;1m",
    logging.ERROR: "\033[31;1m",
    logging.CRITICAL: "\033[1;41m",
}
_RESET = "\033[m"


class HazelLogger(logging.Logger):
    """Logger with an extra ``trace`` level below debug."""

    def trace(self, msg, *args, **kwargs) -> None:
        if self.isEnabledFor(TRACE):
            self._log(TRACE, msg, args, **kwargs)


class _Formatter(logging.Formatter):
    def __init__(self) -> None:
        super().__init__(datefmt=_DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        level = _LEVEL_NAMES.get(record.levelno, record.levelname.lower())
        stamp = self.formatTime(record, self.datefmt)
        return f"[{stamp}] [{level}] {record.name}: {record.getMessage()}"


class _StdoutHandler(logging.Handler):
    """Writes to whatever ``sys.stdout`` is at the time of each record."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = self.format(record)
            stream = sys.stdout
            isatty = getattr(stream, "isatty", None)
            if isatty is not None and isatty():
                colour = _LEVEL_COLOURS.get(record.levelno, "")
                line = f"{colour}{line}{_RESET}"
            stream.write(line + "\n")
            stream.flush()
        except Exception:
            self.handleError(record)


_core_logger: HazelLogger | None = None
_client_logger: HazelLogger | None = None


def _make_logger(name: str) -> HazelLogger:
    logger = HazelLogger(name, TRACE)
    handler = _StdoutHandler(TRACE)
    handler.setFormatter(_Formatter())
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def init() -> None:
    """Create the 'Hazel' engine logger and the 'App' client logger."""
    global _core_logger, _client_logger
    _core_logger = _make_logger("Hazel")
    _client_logger = _make_logger("App")


def get_core_logger() -> HazelLogger:
    """Return the engine logger, creating the loggers if needed."""
    if _core_logger is None:
        init()
    return _core_logger


def get_client_logger() -> HazelLogger:
    """Return the application logger, creating the loggers if needed."""
    if _client_logger is None:
        init()
    return _client_logger