"""Stat-based file change monitoring with sessions, path filters and event type filters."""

__version__ = "1.0.0"
__all__ = ["config", "errors", "events", "filters", "library", "log", "poll_monitor", "session"]