"""Diagnostic logging that is active only in verbose mode."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from fswpoll.library import is_verbose

__all__ = [
    "flog",
    "flogf",
    "log",
    "log_perror",
    "logf",
    "logf_perror",
    "string_from_format",
]


def string_from_format(fmt: str, *args: Any) -> str:
    """Format ``args`` with the printf-style ``fmt``.

    A format that cannot be applied yields an empty string.
    """
    try:
        return fmt % args
    except (TypeError, ValueError):
        return ""


def _write(stream: TextIO, text: str) -> None:
    stream.write(text)
    stream.flush()


def log(msg: str) -> None:
    """Write ``msg`` to standard output."""
    if is_verbose():
        _write(sys.stdout, msg)


def flog(stream: TextIO, msg: str) -> None:
    """Write ``msg`` to ``stream``."""
    if is_verbose():
        _write(stream, msg)


def logf(fmt: str, *args: Any) -> None:
    """Format a printf-style message and write it to standard output."""
    if is_verbose():
        _write(sys.stdout, string_from_format(fmt, *args))


def flogf(stream: TextIO, fmt: str, *args: Any) -> None:
    """Format a printf-style message and write it to ``stream``."""
    if is_verbose():
        _write(stream, string_from_format(fmt, *args))


def _perror(msg: str) -> None:
    exc = sys.exc_info()[1]
    reason = exc.strerror if isinstance(exc, OSError) and exc.strerror else None
    if reason is None:
        line = msg
    elif msg:
        line = f"{msg}: {reason}"
    else:
        line = reason
    _write(sys.stderr, line + "\n")


def log_perror(msg: str) -> None:
    """Write ``msg`` to standard error, followed by the reason of the OSError
    being handled, if any."""
    if is_verbose():
        _perror(msg)


def logf_perror(fmt: str, *args: Any) -> None:
    """Like log_perror, with a printf-style formatted message."""
    if is_verbose():
        _perror(string_from_format(fmt, *args))