"""Change events and the backend-agnostic event flags they carry."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from fswpoll.errors import ErrorCode, WatchError

__all__ = [
    "ALL_EVENT_FLAGS",
    "Event",
    "EventFlag",
    "event_flag_by_name",
    "event_flag_name",
]


class EventFlag(enum.IntFlag):
    """Backend-agnostic change flags; every value is a power of two."""

    NoOp = 0
    PlatformSpecific = 1 << 0
    Created = 1 << 1
    Updated = 1 << 2
    Removed = 1 << 3
    Renamed = 1 << 4
    OwnerModified = 1 << 5
    AttributeModified = 1 << 6
    MovedFrom = 1 << 7
    MovedTo = 1 << 8
    IsFile = 1 << 9
    IsDir = 1 << 10
    IsSymLink = 1 << 11
    Link = 1 << 12
    Overflow = 1 << 13
    CloseWrite = 1 << 14


ALL_EVENT_FLAGS: tuple[EventFlag, ...] = (
    EventFlag.NoOp,
    EventFlag.PlatformSpecific,
    EventFlag.Created,
    EventFlag.Updated,
    EventFlag.Removed,
    EventFlag.Renamed,
    EventFlag.OwnerModified,
    EventFlag.AttributeModified,
    EventFlag.MovedFrom,
    EventFlag.MovedTo,
    EventFlag.IsFile,
    EventFlag.IsDir,
    EventFlag.IsSymLink,
    EventFlag.Link,
    EventFlag.Overflow,
    EventFlag.CloseWrite,
)

_FLAGS_BY_NAME = {flag.name: flag for flag in ALL_EVENT_FLAGS}
_NAMES_BY_VALUE = {int(flag): flag.name for flag in ALL_EVENT_FLAGS}


def event_flag_by_name(name: str) -> EventFlag:
    """Return the event flag called ``name``.

    Raises WatchError with ErrorCode.UNKNOWN_VALUE if no such flag exists.
    """
    try:
        return _FLAGS_BY_NAME[name]
    except (KeyError, TypeError):
        raise WatchError(
            ErrorCode.UNKNOWN_VALUE, f"Unknown event type: {name}"
        ) from None


def event_flag_name(flag: int) -> str:
    """Return the name of a single event flag.

    Raises WatchError with ErrorCode.UNKNOWN_VALUE for values that are not
    one of the defined flags (including combinations of flags).
    """
    try:
        return _NAMES_BY_VALUE[int(flag)]
    except (KeyError, TypeError, ValueError):
        raise WatchError(
            ErrorCode.UNKNOWN_VALUE, f"Unknown event type: {flag}"
        ) from None


@dataclass(frozen=True)
class Event:
    """A change detected on ``path`` at ``time`` (seconds since the epoch)."""

    path: str
    time: float
    flags: tuple[EventFlag, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "flags", tuple(EventFlag(flag) for flag in self.flags)
        )

    @property
    def mask(self) -> EventFlag:
        """All flags of the event combined into one bit mask."""
        combined = EventFlag.NoOp
        for flag in self.flags:
            combined |= flag
        return combined