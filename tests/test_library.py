import threading

import pytest

from fswpoll.errors import ErrorCode
from fswpoll.library import (
    init_library,
    is_verbose,
    last_error,
    set_last_error,
    set_verbose,
)


@pytest.fixture(autouse=True)
def _reset():
    set_verbose(False)
    set_last_error(ErrorCode.OK)
    yield
    set_verbose(False)
    set_last_error(ErrorCode.OK)


def test_init_library_returns_ok():
    assert init_library() == ErrorCode.OK


def test_verbose_defaults_off_and_toggles():
    assert is_verbose() is False
    set_verbose(True)
    assert is_verbose() is True
    set_verbose(False)
    assert is_verbose() is False


def test_set_last_error_returns_code_and_records_it():
    result = set_last_error(ErrorCode.INVALID_LATENCY)
    assert result == ErrorCode.INVALID_LATENCY
    assert last_error() == ErrorCode.INVALID_LATENCY


def test_set_last_error_accepts_int():
    assert set_last_error(1 << 5) == ErrorCode.CALLBACK_NOT_SET
    assert last_error() is ErrorCode.CALLBACK_NOT_SET


def test_set_last_error_rejects_unknown_code():
    with pytest.raises(ValueError):
        set_last_error(3)


def test_last_error_is_per_thread():
    set_last_error(ErrorCode.PATHS_NOT_SET)
    seen = []

    def worker():
        seen.append(last_error())
        set_last_error(ErrorCode.MEMORY)
        seen.append(last_error())

    thread = threading.Thread(target=worker)
    thread.start()
    thread.join()

    assert seen == [ErrorCode.OK, ErrorCode.MEMORY]
    assert last_error() == ErrorCode.PATHS_NOT_SET


def test_verbose_is_shared_between_threads():
    assert is_verbose() is False
    thread = threading.Thread(target=set_verbose, args=(True,))
    thread.start()
    thread.join()
    assert is_verbose() is True