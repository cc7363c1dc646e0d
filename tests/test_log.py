import io

import pytest

from fswpoll.library import set_verbose
from fswpoll.log import (
    flog,
    flogf,
    log,
    log_perror,
    logf,
    logf_perror,
    string_from_format,
)


@pytest.fixture
def verbose():
    set_verbose(True)
    yield
    set_verbose(False)


@pytest.fixture
def quiet():
    set_verbose(False)
    yield


def test_string_from_format_substitutes_arguments():
    assert string_from_format("%s has %d", "dir", 3) == "dir has 3"


def test_string_from_format_without_arguments():
    assert string_from_format("Done scanning.\n") == "Done scanning.\n"
    assert string_from_format("100%%") == "100%"


def test_string_from_format_long_output_is_complete():
    text = "x" * 2000
    assert string_from_format("%s", text) == text


def test_string_from_format_bad_format_gives_empty():
    assert string_from_format("%d", "not a number") == ""
    assert string_from_format("%s %s", "one") == ""


def test_log_writes_to_stdout_when_verbose(verbose, capsys):
    log("hello")
    assert capsys.readouterr().out == "hello"


def test_log_silent_when_not_verbose(quiet, capsys):
    log("hello")
    logf("%s", "hello")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_logf_formats(verbose, capsys):
    logf("Processing %s.\n", "/tmp/a")
    assert capsys.readouterr().out == "Processing /tmp/a.\n"


def test_flog_and_flogf_write_to_stream(verbose):
    stream = io.StringIO()
    flog(stream, "a")
    flogf(stream, "-%s-", "b")
    assert stream.getvalue() == "a-b-"


def test_flog_silent_when_not_verbose(quiet):
    stream = io.StringIO()
    flog(stream, "a")
    flogf(stream, "%s", "b")
    assert stream.getvalue() == ""


def test_log_perror_without_error(verbose, capsys):
    log_perror("scan")
    assert capsys.readouterr().err == "scan\n"


def test_log_perror_with_handled_oserror(verbose, capsys):
    try:
        raise FileNotFoundError(2, "No such file or directory")
    except OSError:
        log_perror("scan")
    assert capsys.readouterr().err == "scan: No such file or directory\n"


def test_logf_perror_formats_message(verbose, capsys):
    try:
        raise PermissionError(13, "Permission denied")
    except OSError:
        logf_perror("open %s", "/root")
    assert capsys.readouterr().err == "open /root: Permission denied\n"


def test_perror_silent_when_not_verbose(quiet, capsys):
    log_perror("scan")
    logf_perror("%s", "scan")
    assert capsys.readouterr().err == ""