import pytest

from fswpoll.config import SessionConfig, callback_proxy
from fswpoll.errors import ErrorCode, WatchError
from fswpoll.events import Event, EventFlag
from fswpoll.filters import EventTypeFilter, FilterType, MonitorType, PathFilter
from fswpoll.poll_monitor import PollMonitor


def make_monitor(tmp_path):
    return PollMonitor([str(tmp_path)], lambda events: None)


def test_defaults():
    config = SessionConfig()
    assert config.monitor_type == MonitorType.SYSTEM_DEFAULT
    assert config.paths == []
    assert config.callback is None
    assert config.properties == {}


def test_apply_copies_settings(tmp_path):
    path_filter = PathFilter("x", FilterType.INCLUDE)
    type_filter = EventTypeFilter(EventFlag.Created)
    config = SessionConfig(
        latency=2.5,
        allow_overflow=True,
        recursive=True,
        directory_only=True,
        follow_symlinks=True,
        filters=[path_filter],
        event_type_filters=[type_filter],
    )
    monitor = config.apply(make_monitor(tmp_path))
    assert monitor.latency == 2.5
    assert monitor.allow_overflow is True
    assert monitor.recursive is True
    assert monitor.directory_only is True
    assert monitor.follow_symlinks is True
    assert monitor.filters == [path_filter]
    assert monitor.event_type_filters == [type_filter]


def test_zero_latency_keeps_monitor_latency(tmp_path):
    monitor = make_monitor(tmp_path)
    original = monitor.latency
    SessionConfig(latency=0.0).apply(monitor)
    assert monitor.latency == original


def test_apply_copies_filter_lists(tmp_path):
    config = SessionConfig(filters=[PathFilter("a", FilterType.EXCLUDE)])
    monitor = config.apply(make_monitor(tmp_path))
    config.filters.append(PathFilter("b", FilterType.EXCLUDE))
    assert len(monitor.filters) == 1


def test_proxy_passes_events_and_data():
    received = []
    proxy = callback_proxy(lambda events, data: received.append((events, data)), "ctx")
    events = [Event("/tmp/a", 1.0, (EventFlag.Created,))]
    proxy(events)
    assert received == [(events, "ctx")]
    assert received[0][0] is not events


def test_proxy_without_callback_raises():
    with pytest.raises(WatchError) as info:
        callback_proxy(None, None)
    assert info.value.code == ErrorCode.MISSING_CONTEXT


def test_proxy_drives_monitor(tmp_path):
    received = []
    proxy = callback_proxy(lambda events, data: received.append((events, data)), 7)
    monitor = PollMonitor([str(tmp_path)], proxy, recursive=True)
    monitor.initial_scan()
    (tmp_path / "f.txt").write_text("x")
    events = monitor.poll()
    assert received == [(events, 7)]