"""Status codes and the exception that carries them."""

from __future__ import annotations

import enum

__all__ = ["ErrorCode", "WatchError"]


class ErrorCode(enum.IntEnum):
    """Status of a library call."""

    OK = 0
    UNKNOWN_ERROR = 1 << 0
    SESSION_UNKNOWN = 1 << 1
    MONITOR_ALREADY_EXISTS = 1 << 2
    MEMORY = 1 << 3
    UNKNOWN_MONITOR_TYPE = 1 << 4
    CALLBACK_NOT_SET = 1 << 5
    PATHS_NOT_SET = 1 << 6
    MISSING_CONTEXT = 1 << 7
    INVALID_PATH = 1 << 8
    INVALID_CALLBACK = 1 << 9
    INVALID_LATENCY = 1 << 10
    INVALID_REGEX = 1 << 11
    MONITOR_ALREADY_RUNNING = 1 << 12
    UNKNOWN_VALUE = 1 << 13
    INVALID_PROPERTY = 1 << 14

    @property
    def description(self) -> str:
        """A short human-readable description of the code."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ErrorCode.OK: "The call was successful.",
    ErrorCode.UNKNOWN_ERROR: "An unknown error has occurred.",
    ErrorCode.SESSION_UNKNOWN: "The session specified by the handle is unknown.",
    ErrorCode.MONITOR_ALREADY_EXISTS: "The session already contains a monitor.",
    ErrorCode.MEMORY: "An error occurred while invoking a memory management routine.",
    ErrorCode.UNKNOWN_MONITOR_TYPE: "The specified monitor type does not exist.",
    ErrorCode.CALLBACK_NOT_SET: "The callback has not been set.",
    ErrorCode.PATHS_NOT_SET: "The paths to watch have not been set.",
    ErrorCode.MISSING_CONTEXT: "The callback context has not been set.",
    ErrorCode.INVALID_PATH: "The path is invalid.",
    ErrorCode.INVALID_CALLBACK: "The callback is invalid.",
    ErrorCode.INVALID_LATENCY: "The latency is invalid.",
    ErrorCode.INVALID_REGEX: "The regular expression is invalid.",
    ErrorCode.MONITOR_ALREADY_RUNNING: "A monitor is already running in the specified session.",
    ErrorCode.UNKNOWN_VALUE: "The value is unknown.",
    ErrorCode.INVALID_PROPERTY: "The property is invalid.",
}


class WatchError(Exception):
    """An error raised by the library, carrying an ErrorCode."""

    def __init__(self, code: int, message: str | None = None) -> None:
        self.code = ErrorCode(code)
        self.message = message if message is not None else self.code.description
        super().__init__(self.message)