# fswpoll

`fswpoll` watches files and directories for changes by periodically
calling `stat()` on them. It needs no operating-system notification
service and works wherever Python can stat a path.

Between two scans it compares modification and status-change times:

* a path seen for the first time produces a `Created` event,
* a newer modification time produces `Updated`,
* a newer status-change time produces `AttributeModified`,
* a path that is no longer found produces `Removed`.

Events are reported as `fswpoll.events.Event` objects with a `path`,
a `time` (seconds since the epoch, taken when the scan started) and a
tuple of `flags`. `Event.mask` combines the flags into one bit mask.

## Installation

```
pip install fswpoll
```

The package has no dependencies outside the standard library.

## Quick start: a session

A `Session` collects configuration and builds a monitor when it is
started. It needs at least one path and a callback; the callback is
called with `(events, data)`.

```python
from fswpoll.session import Session
from fswpoll.filters import MonitorType

def on_events(events, data):
    for event in events:
        print(event.path, [flag.name for flag in event.flags])

with Session(MonitorType.POLL) as session:
    session.add_path("/tmp/watched")
    session.set_callback(on_events, None)
    session.set_recursive(True)
    session.set_latency(2.0)
    session.start()   # blocks until session.stop() is called from another thread
```

Settings changed on a session take effect the next time `start()` is
called. The paths and the callback are bound when the monitor is first
created, on the first `start()`. A latency of zero (the default) leaves
the monitor's own latency of one second in place; the poll interval is
never shorter than one second.

`Session.close()` releases the session; leaving a `with` block stops a
running monitor and closes the session. A closed session raises
`WatchError` with `ErrorCode.SESSION_UNKNOWN`.

### Errors and status

Failures are raised as `fswpoll.errors.WatchError`; its `code`
attribute holds an `ErrorCode` such as `ErrorCode.PATHS_NOT_SET`,
`ErrorCode.CALLBACK_NOT_SET`, `ErrorCode.INVALID_LATENCY` or
`ErrorCode.MONITOR_ALREADY_RUNNING`. Every session call also records
its status for the calling thread, readable with
`fswpoll.library.last_error()`.

## Using the monitor directly

```python
from fswpoll.poll_monitor import PollMonitor

def on_events(events):
    for event in events:
        print(event)

monitor = PollMonitor(["/tmp/watched"], on_events, latency=1.0, recursive=True)
monitor.initial_scan()   # record the current state without reporting
delivered = monitor.poll()   # one scan; calls on_events and returns what it delivered
```

`monitor.start()` runs `initial_scan()` and then polls in a loop until
`monitor.stop()` is called; `monitor.is_running()` tells whether the
loop is active. With `follow_symlinks=True` a symbolic link is replaced
by its target while scanning.

## Filtering

Path filters (`fswpoll.filters.PathFilter`) are regular expressions
searched anywhere in the path. By default the text is a POSIX basic
regular expression; pass `extended=True` for the usual Python syntax
and `case_sensitive=False` to ignore case. An invalid expression raises
`WatchError` with `ErrorCode.INVALID_REGEX`.

* a path that matches an include filter is always accepted;
* otherwise, a path that matches an exclude filter is rejected;
* a path that matches no filter is accepted.

Path filters are applied both while scanning (a rejected directory is
not descended into) and to the events before they are delivered.

```python
from fswpoll.filters import PathFilter, FilterType, EventTypeFilter
from fswpoll.events import EventFlag

session.add_filter(PathFilter(r"\.swp$", FilterType.EXCLUDE))
session.add_event_type_filter(EventTypeFilter(EventFlag.Updated))
```

When event type filters are set, each event keeps only the flags that a
filter names, and events left with no flags are dropped.

## Event flags

`fswpoll.events.EventFlag` lists every flag, and `ALL_EVENT_FLAGS`
holds them in order. Names and flags are converted with
`event_flag_by_name("Created")` and `event_flag_name(EventFlag.Created)`;
an unknown name or value raises `WatchError` with
`ErrorCode.UNKNOWN_VALUE`.

## Diagnostics

`fswpoll.library.set_verbose(True)` turns on the output of the
functions in `fswpoll.log` (`log`, `flog`, `logf`, `flogf`,
`log_perror`, `logf_perror`); the monitor uses them to report scan
progress and filesystem errors on standard error.
`fswpoll.log.string_from_format` formats a printf-style message and
returns an empty string if the format cannot be applied.

## What this package does not do

* Only the stat-based monitor exists. `MonitorType.POLL` and
  `MonitorType.SYSTEM_DEFAULT` both use it; the other monitor types
  (`FSEVENTS`, `KQUEUE`, `INOTIFY`, `WINDOWS`, `FEN`) are listed but
  starting a session with them raises `WatchError` with
  `ErrorCode.UNKNOWN_MONITOR_TYPE`.
* There is no command-line program; the package is a library.
* `set_allow_overflow`, `set_directory_only` and `add_property` are
  stored and passed on, but the stat-based monitor does not act on
  them.