"""Monitor types, path filters and event type filters."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field
from typing import Iterable

from fswpoll.errors import ErrorCode, WatchError
from fswpoll.events import Event, EventFlag

__all__ = [
    "EventTypeFilter",
    "FilterType",
    "MonitorType",
    "PathFilter",
    "accept_event",
    "accept_path",
]


class MonitorType(enum.IntEnum):
    """Available monitors; SYSTEM_DEFAULT means the platform default."""

    SYSTEM_DEFAULT = 0
    FSEVENTS = 1
    KQUEUE = 2
    INOTIFY = 3
    WINDOWS = 4
    POLL = 5
    FEN = 6


class FilterType(enum.IntEnum):
    """Whether a path filter includes or excludes matching paths."""

    INCLUDE = 0
    EXCLUDE = 1


_BASIC_ELEMENT = re.compile(r"\\.|\[\^?\]?[^\]]*\]|.", re.DOTALL)
_BASIC_LITERALS = frozenset("(){}+?|")


def _translate_basic(pattern: str) -> str:
    """Translate a POSIX basic regular expression into Python syntax."""
    parts: list[str] = []
    star_is_literal = True
    for match in _BASIC_ELEMENT.finditer(pattern):
        element = match.group()
        if len(element) == 2 and element[0] == "\\":
            if element[1] in "(){}":
                parts.append(element[1])
                star_is_literal = element[1] == "("
            else:
                parts.append(element)
                star_is_literal = False
        elif element == "*" and star_is_literal:
            parts.append(r"\*")
            star_is_literal = False
        elif element in _BASIC_LITERALS:
            parts.append(re.escape(element))
            star_is_literal = False
        else:
            parts.append(element)
            star_is_literal = element == "^" and not parts[:-1]
    return "".join(parts)


@dataclass(frozen=True)
class PathFilter:
    """A regular expression that includes or excludes event paths.

    Without ``extended`` the text is a POSIX basic regular expression.
    """

    text: str
    filter_type: FilterType
    case_sensitive: bool = True
    extended: bool = False
    _regex: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "filter_type", FilterType(self.filter_type))
        source = self.text if self.extended else _translate_basic(self.text)
        flags = 0 if self.case_sensitive else re.IGNORECASE
        try:
            regex = re.compile(source, flags)
        except re.error as exc:
            raise WatchError(
                ErrorCode.INVALID_REGEX, f"Invalid regular expression: {self.text}"
            ) from exc
        object.__setattr__(self, "_regex", regex)

    def matches(self, path: str) -> bool:
        """Whether the expression matches anywhere in ``path``."""
        return self._regex.search(path) is not None


@dataclass(frozen=True)
class EventTypeFilter:
    """Accept only events carrying ``flag``."""

    flag: EventFlag

    def __post_init__(self) -> None:
        object.__setattr__(self, "flag", EventFlag(self.flag))


def accept_path(path: str, filters: Iterable[PathFilter]) -> bool:
    """Decide whether ``path`` passes the filters.

    A matching inclusion filter accepts the path regardless of any other
    filter; otherwise a matching exclusion filter rejects it; a path that
    matches nothing is accepted.
    """
    excluded = False
    for path_filter in filters:
        if not path_filter.matches(path):
            continue
        if path_filter.filter_type is FilterType.INCLUDE:
            return True
        excluded = True
    return not excluded


def accept_event(
    event: Event, event_type_filters: Iterable[EventTypeFilter]
) -> Event | None:
    """Apply event type filters to ``event``.

    With no filters the event is returned unchanged.  Otherwise only the
    flags named by a filter are kept; the event is returned with those
    flags, or None if none are left.
    """
    allowed = {type_filter.flag for type_filter in event_type_filters}
    if not allowed:
        return event
    kept = tuple(flag for flag in event.flags if flag in allowed)
    if not kept:
        return None
    return Event(event.path, event.time, kept)