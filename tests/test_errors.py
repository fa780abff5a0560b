import pytest

from portwatch.errors import (
    CommandError,
    InvalidPortError,
    KillFailedError,
    ParseError,
    PermissionDeniedError,
    PortWatcherError,
    ProcessNotFoundError,
    SysinfoError,
    UnsupportedOsError,
)


def test_parse_error_message():
    err = ParseError("bad line")
    assert str(err) == "Failed to parse command output: bad line"
    assert err.detail == "bad line"


def test_command_error_message_and_fields():
    err = CommandError("ss/netstat", "boom")
    assert str(err) == "Command execution failed: ss/netstat, stderr: boom"
    assert (err.command, err.stderr) == ("ss/netstat", "boom")


def test_invalid_port_message():
    err = InvalidPortError("Port number cannot be 0")
    assert str(err) == "Invalid port specification: Port number cannot be 0"


def test_invalid_port_is_value_error():
    err = InvalidPortError("x")
    assert isinstance(err, ValueError)
    assert str(err) == "Invalid port specification: x"


def test_process_not_found_message():
    err = ProcessNotFoundError(42)
    assert str(err) == "Process with PID 42 not found"
    assert err.pid == 42


def test_kill_failed_message():
    err = KillFailedError(7, "denied")
    assert str(err) == "Failed to kill process with PID 7: denied"
    assert err.reason == "denied"


def test_fixed_messages():
    assert str(PermissionDeniedError()) == (
        "Permission denied. Try running with sudo/administrator privileges."
    )
    assert str(UnsupportedOsError()) == "Unsupported OS for specific operation"


def test_sysinfo_error_message():
    assert str(SysinfoError("gone")) == "Sysinfo error: gone"


@pytest.mark.parametrize(
    ("err", "expected"),
    [
        (ParseError("a"), "Failed to parse command output: a"),
        (CommandError("a", "b"), "Command execution failed: a, stderr: b"),
        (InvalidPortError("a"), "Invalid port specification: a"),
        (ProcessNotFoundError(1), "Process with PID 1 not found"),
        (KillFailedError(1, "a"), "Failed to kill process with PID 1: a"),
        (
            PermissionDeniedError(),
            "Permission denied. Try running with sudo/administrator privileges.",
        ),
        (UnsupportedOsError(), "Unsupported OS for specific operation"),
        (SysinfoError("a"), "Sysinfo error: a"),
    ],
)
def test_all_errors_share_base(err, expected):
    assert isinstance(err, PortWatcherError)
    assert str(err) == expected