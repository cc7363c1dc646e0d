"""Monitoring sessions: collect settings, then run a monitor with them."""

from __future__ import annotations

import os
from typing import Any

from fswpoll.config import SessionCallback, SessionConfig, callback_proxy
from fswpoll.errors import ErrorCode, WatchError
from fswpoll.filters import EventTypeFilter, MonitorType, PathFilter
from fswpoll.library import set_last_error
from fswpoll.poll_monitor import PollMonitor

__all__ = ["Session"]

_AVAILABLE_MONITORS = {
    MonitorType.SYSTEM_DEFAULT: PollMonitor,
    MonitorType.POLL: PollMonitor,
}


def _fail(code: ErrorCode, message: str | None = None) -> WatchError:
    set_last_error(code)
    return WatchError(code, message)


def _ok() -> None:
    set_last_error(ErrorCode.OK)


class Session:
    """A monitoring session.

    Settings changed through the session take effect the next time the
    monitor is started.  The paths and the callback are bound when the
    monitor is first created by start().  Every call records its status,
    readable with ``fswpoll.library.last_error()``; failures also raise
    WatchError carrying the same code.
    """

    def __init__(self, monitor_type: int = MonitorType.SYSTEM_DEFAULT) -> None:
        try:
            kind = MonitorType(monitor_type)
        except ValueError:
            raise _fail(
                ErrorCode.UNKNOWN_MONITOR_TYPE,
                f"Unknown monitor type: {monitor_type}",
            ) from None
        self.config = SessionConfig(monitor_type=kind)
        self._monitor: PollMonitor | None = None
        self._closed = False

    def _check_open(self) -> None:
        if self._closed:
            raise _fail(ErrorCode.SESSION_UNKNOWN)

    # Configuration ----------------------------------------------------

    def add_path(self, path: str | os.PathLike[str]) -> None:
        """Add a path to watch; at least one is needed to start."""
        if path is None:
            raise _fail(ErrorCode.INVALID_PATH)
        self._check_open()
        self.config.paths.append(os.fspath(path))
        _ok()

    def add_property(self, name: str, value: str) -> None:
        """Set a monitor property."""
        if name is None or value is None:
            raise _fail(ErrorCode.INVALID_PROPERTY)
        self._check_open()
        self.config.properties[name] = value
        _ok()

    def set_callback(self, callback: SessionCallback, data: Any = None) -> None:
        """Set the function called with ``(events, data)`` on changes."""
        if callback is None or not callable(callback):
            raise _fail(ErrorCode.INVALID_CALLBACK)
        self._check_open()
        self.config.callback = callback
        self.config.data = data
        _ok()

    def set_allow_overflow(self, allow_overflow: bool) -> None:
        """Allow the monitor to report overflows as change events."""
        self._check_open()
        self.config.allow_overflow = bool(allow_overflow)
        _ok()

    def set_latency(self, latency: float) -> None:
        """Set the monitor latency in seconds; zero keeps the default."""
        if latency < 0:
            raise _fail(ErrorCode.INVALID_LATENCY, f"Invalid latency: {latency}")
        self._check_open()
        self.config.latency = float(latency)
        _ok()

    def set_recursive(self, recursive: bool) -> None:
        """Scan watched directories recursively or not."""
        self._check_open()
        self.config.recursive = bool(recursive)
        _ok()

    def set_directory_only(self, directory_only: bool) -> None:
        """Watch only directories during a recursive scan."""
        self._check_open()
        self.config.directory_only = bool(directory_only)
        _ok()

    def set_follow_symlinks(self, follow_symlinks: bool) -> None:
        """Follow symbolic links or not."""
        self._check_open()
        self.config.follow_symlinks = bool(follow_symlinks)
        _ok()

    def add_filter(self, path_filter: PathFilter) -> None:
        """Add a path filter."""
        self._check_open()
        self.config.filters.append(path_filter)
        _ok()

    def add_event_type_filter(self, event_type_filter: EventTypeFilter) -> None:
        """Add an event type filter."""
        self._check_open()
        self.config.event_type_filters.append(event_type_filter)
        _ok()

    # Life cycle -------------------------------------------------------

    def _create_monitor(self) -> PollMonitor:
        config = self.config
        if config.callback is None:
            raise _fail(ErrorCode.CALLBACK_NOT_SET)
        if self._monitor is not None:
            raise _fail(ErrorCode.MONITOR_ALREADY_EXISTS)
        if not config.paths:
            raise _fail(ErrorCode.PATHS_NOT_SET)
        factory = _AVAILABLE_MONITORS.get(config.monitor_type)
        if factory is None:
            raise _fail(
                ErrorCode.UNKNOWN_MONITOR_TYPE,
                f"Unavailable monitor type: {config.monitor_type.name}",
            )
        return factory(
            list(config.paths), callback_proxy(config.callback, config.data)
        )

    def start(self) -> None:
        """Start the monitor; blocks until it is stopped."""
        self._check_open()
        if self._monitor is None:
            self._monitor = self._create_monitor()
        monitor = self._monitor
        if monitor.is_running():
            raise _fail(ErrorCode.MONITOR_ALREADY_RUNNING)
        self.config.apply(monitor)
        try:
            monitor.start()
        except WatchError as exc:
            set_last_error(exc.code)
            raise
        _ok()

    def stop(self) -> None:
        """Ask a running monitor to stop."""
        self._check_open()
        if self._monitor is None:
            raise _fail(ErrorCode.UNKNOWN_MONITOR_TYPE)
        if self._monitor.is_running():
            self._monitor.stop()
        _ok()

    def is_running(self) -> bool:
        """Whether the session has a monitor and it is running."""
        self._check_open()
        return self._monitor is not None and self._monitor.is_running()

    def close(self) -> None:
        """Release the session; it cannot be used afterwards."""
        if self._closed:
            _ok()
            return
        if self._monitor is not None and self._monitor.is_running():
            raise _fail(ErrorCode.MONITOR_ALREADY_RUNNING)
        self._monitor = None
        self._closed = True
        _ok()

    def __enter__(self) -> Session:
        self._check_open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._closed:
            return
        if self._monitor is not None and self._monitor.is_running():
            self._monitor.stop()
        self._monitor = None
        self._closed = True
        _ok()