"""Library-wide state: initialisation, verbosity and the last error code."""

from __future__ import annotations

import threading

from fswpoll.errors import ErrorCode

__all__ = [
    "init_library",
    "is_verbose",
    "last_error",
    "set_last_error",
    "set_verbose",
]

_verbose = False
_state = threading.local()


def init_library() -> ErrorCode:
    """Initialise the library; returns ErrorCode.OK."""
    return ErrorCode.OK


def is_verbose() -> bool:
    """Whether verbose logging is enabled."""
    return _verbose


def set_verbose(verbose: bool) -> None:
    """Enable or disable verbose logging for the whole process."""
    global _verbose
    _verbose = bool(verbose)


def last_error() -> ErrorCode:
    """The last status code recorded by the calling thread."""
    return getattr(_state, "last_error", ErrorCode.OK)


def set_last_error(code: int) -> ErrorCode:
    """Record ``code`` as the calling thread's last status and return it."""
    error = ErrorCode(code)
    _state.last_error = error
    return error