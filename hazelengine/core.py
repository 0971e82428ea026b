"""Core helpers: bit flags and engine assertions."""

from __future__ import annotations

from hazelengine import log


class HazelAssertionError(AssertionError):
    """Raised when an engine assertion fails."""


def bit(x: int) -> int:
    """Return an integer with only bit ``x`` set."""
    return 1 << x


def _check(logger_getter, check, message) -> None:
    if check:
        return
    text = f"Assertion failed: {message}"
    logger_getter().error(text)
    raise HazelAssertionError(text)


def core_assert(check, message) -> None:
    """Log to the engine logger and raise if ``check`` is false."""
    _check(log.get_core_logger, check, message)


def client_assert(check, message) -> None:
    """Log to the application logger and raise if ``check`` is false."""
    _check(log.get_client_logger, check, message)