"""A monitor that periodically stats the watched paths to detect changes."""

from __future__ import annotations

import os
import stat
import sys
import threading
import time
from typing import Callable, Iterable, NamedTuple, Sequence, Union

from fswpoll.errors import ErrorCode, WatchError
from fswpoll.events import Event, EventFlag
from fswpoll.filters import EventTypeFilter, PathFilter, accept_event, accept_path
from fswpoll.log import flogf

__all__ = ["PollMonitor"]

PathLike = Union[str, "os.PathLike[str]"]
EventCallback = Callable[[list[Event]], None]
_Visitor = Callable[[str, os.stat_result], bool]


class _FileInfo(NamedTuple):
    mtime: int
    ctime: int


def _file_info(st: os.stat_result) -> _FileInfo:
    return _FileInfo(st.st_mtime_ns, st.st_ctime_ns)


def _elog(function: str, fmt: str, *args: object) -> None:
    flogf(sys.stderr, "%s: ", function)
    flogf(sys.stderr, fmt, *args)


class PollMonitor:
    """Detect changes by comparing modification and status-change times.

    Every ``latency`` seconds (never less than MIN_POLL_LATENCY) the watched
    paths are scanned and compared with the previous scan.  New paths are
    reported as Created, a newer modification time as Updated, a newer
    status-change time as AttributeModified and vanished paths as Removed.
    Accepted events are handed to ``callback`` as a list.
    """

    MIN_POLL_LATENCY = 1.0

    def __init__(
        self,
        paths: PathLike | Iterable[PathLike],
        callback: EventCallback,
        *,
        latency: float = 1.0,
        recursive: bool = False,
        follow_symlinks: bool = False,
        allow_overflow: bool = False,
        directory_only: bool = False,
        filters: Sequence[PathFilter] = (),
        event_type_filters: Sequence[EventTypeFilter] = (),
    ) -> None:
        if isinstance(paths, (str, os.PathLike)):
            paths = [paths]
        self.paths = [os.fspath(path) for path in paths]
        self.callback = callback
        self.latency = latency
        self.recursive = recursive
        self.follow_symlinks = follow_symlinks
        self.allow_overflow = allow_overflow
        self.directory_only = directory_only
        self.filters = list(filters)
        self.event_type_filters = list(event_type_filters)

        self._previous: dict[str, _FileInfo] = {}
        self._new: dict[str, _FileInfo] = {}
        self._events: list[Event] = []
        self._time = time.time()
        self._stop = threading.Event()
        self._lock = threading.Lock()
        self._running = False

    # Scanning ---------------------------------------------------------

    def _scan(self, path: str, visitor: _Visitor) -> None:
        try:
            try:
                link_stat = os.lstat(path)
            except (FileNotFoundError, NotADirectoryError):
                return

            if self.follow_symlinks and stat.S_ISLNK(link_stat.st_mode):
                target = os.readlink(path)
                resolved = os.path.normpath(
                    os.path.join(os.path.dirname(path), target)
                )
                self._scan(resolved, visitor)
                return

            if not accept_path(path, self.filters):
                return

            st = os.stat(path) if self.follow_symlinks else link_stat

            if not visitor(path, st):
                return
            if not self.recursive:
                return
            if not stat.S_ISDIR(st.st_mode):
                return

            with os.scandir(path) as entries:
                children = sorted(entry.path for entry in entries)

            for child in children:
                self._scan(child, visitor)
        except OSError as exc:
            _elog("scan", "Filesystem error: %s\n", exc)

    def _initial_visit(self, path: str, st: os.stat_result) -> bool:
        if path in self._previous:
            return False
        self._previous[path] = _file_info(st)
        return True

    def _intermediate_visit(self, path: str, st: os.stat_result) -> bool:
        if path in self._new:
            return False

        info = _file_info(st)
        self._new[path] = info

        previous = self._previous.pop(path, None)
        if previous is None:
            self._events.append(Event(path, self._time, (EventFlag.Created,)))
            return True

        flags = []
        if info.mtime > previous.mtime:
            flags.append(EventFlag.Updated)
        if info.ctime > previous.ctime:
            flags.append(EventFlag.AttributeModified)
        if flags:
            self._events.append(Event(path, self._time, tuple(flags)))
        return True

    def _find_removed_files(self) -> None:
        self._events.extend(
            Event(path, self._time, (EventFlag.Removed,)) for path in self._previous
        )

    def _collect_data(self) -> None:
        for path in self.paths:
            self._scan(path, self._intermediate_visit)
        self._find_removed_files()
        self._previous, self._new = self._new, {}

    def _notify_events(self, events: Iterable[Event]) -> list[Event]:
        accepted = []
        for event in events:
            if not accept_path(event.path, self.filters):
                continue
            filtered = accept_event(event, self.event_type_filters)
            if filtered is not None:
                accepted.append(filtered)
        if accepted:
            self.callback(accepted)
        return accepted

    # Public interface -------------------------------------------------

    def initial_scan(self) -> None:
        """Record the current state of the watched paths without reporting."""
        for path in self.paths:
            self._scan(path, self._initial_visit)

    def poll(self) -> list[Event]:
        """Scan once, notify the callback and return the events delivered."""
        self._time = time.time()
        self._collect_data()
        events, self._events = self._events, []
        if not events:
            return []
        return self._notify_events(events)

    def run(self) -> None:
        """Scan until stop() is called; blocks the calling thread."""
        self.initial_scan()
        while True:
            with self._lock:
                if self._stop.is_set():
                    break
            _elog("run", "Done scanning.\n")
            if self._stop.wait(max(self.latency, self.MIN_POLL_LATENCY)):
                break
            self.poll()

    def start(self) -> None:
        """Run the monitor until it is stopped.

        Raises WatchError with MONITOR_ALREADY_RUNNING if it is running.
        """
        with self._lock:
            if self._running:
                raise WatchError(ErrorCode.MONITOR_ALREADY_RUNNING)
            self._running = True
            self._stop.clear()
        try:
            self.run()
        finally:
            with self._lock:
                self._running = False

    def stop(self) -> None:
        """Ask a running monitor to stop."""
        with self._lock:
            self._stop.set()

    def is_running(self) -> bool:
        """Whether the monitor is currently running."""
        with self._lock:
            return self._running