"""Session settings and the bridge between monitors and session callbacks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from fswpoll.errors import ErrorCode, WatchError
from fswpoll.events import Event
from fswpoll.filters import EventTypeFilter, MonitorType, PathFilter

__all__ = ["SessionCallback", "SessionConfig", "callback_proxy"]

SessionCallback = Callable[[list[Event], Any], None]


@dataclass
class SessionConfig:
    """Everything a session collects before its monitor is started."""

    monitor_type: MonitorType = MonitorType.SYSTEM_DEFAULT
    paths: list[str] = field(default_factory=list)
    callback: SessionCallback | None = None
    data: Any = None
    latency: float = 0.0
    allow_overflow: bool = False
    recursive: bool = False
    directory_only: bool = False
    follow_symlinks: bool = False
    filters: list[PathFilter] = field(default_factory=list)
    event_type_filters: list[EventTypeFilter] = field(default_factory=list)
    properties: dict[str, str] = field(default_factory=dict)

    def apply(self, monitor: Any) -> Any:
        """Copy the settings onto ``monitor`` and return it.

        A latency of zero means "not set" and leaves the monitor's own
        latency untouched.
        """
        monitor.allow_overflow = self.allow_overflow
        monitor.filters = list(self.filters)
        monitor.event_type_filters = list(self.event_type_filters)
        monitor.follow_symlinks = self.follow_symlinks
        if self.latency:
            monitor.latency = self.latency
        monitor.recursive = self.recursive
        monitor.directory_only = self.directory_only
        return monitor


def callback_proxy(
    callback: SessionCallback | None, data: Any
) -> Callable[[list[Event]], None]:
    """Wrap a session callback so a monitor can call it with events only.

    The wrapped callback receives its own copy of the event list and
    ``data``.  Raises WatchError with MISSING_CONTEXT without a callback.
    """
    if callback is None:
        raise WatchError(ErrorCode.MISSING_CONTEXT)

    def proxy(events: list[Event]) -> None:
        callback(list(events), data)

    return proxy