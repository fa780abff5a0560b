"""Discovery of listening TCP ports and control of the owning processes."""

from __future__ import annotations

import re
import subprocess
import sys
from dataclasses import asdict, dataclass
from typing import Any

import psutil

from .errors import CommandError, KillFailedError, ProcessNotFoundError, UnsupportedOsError

LISTENING = "Listening"
FREE = "Free"

_U16_MAX = 0xFFFF
_U32_MAX = 0xFFFF_FFFF
_UNSIGNED = re.compile(r"\+?[0-9]+")

_LINUX_SS = re.compile(
    r"^\s*tcp\s+LISTEN\s+[0-9]+\s+[0-9]+\s+(?:\*|\[::\]):([0-9]+)\s+.*?users:.*?pid=([0-9]+)",
    re.MULTILINE,
)
_WINDOWS_NETSTAT = re.compile(
    r"^\s*TCP\s+\S+:([0-9]+)\s+\S+\s+LISTENING\s+([0-9]+)",
    re.MULTILINE,
)

_KILL_FAILURE = (
    "Failed to send kill signal. Insufficient permissions or process already exited."
)


@dataclass
class PortInfo:
    """A TCP port together with the process that owns it, if any."""

    port: int
    protocol: str = "TCP"
    pid: int | None = None
    process_name: str | None = None
    status: str = LISTENING

    def to_dict(self) -> dict[str, Any]:
        """Return the fields as a JSON-ready mapping."""
        return asdict(self)


def _parse_uint(text: str, limit: int) -> int | None:
    if not _UNSIGNED.fullmatch(text):
        return None
    value = int(text)
    return value if value <= limit else None


def _port_pid_pairs(pattern: re.Pattern[str], text: str) -> list[tuple[int, int]]:
    pairs = []
    for match in pattern.finditer(text):
        port = _parse_uint(match.group(1), _U16_MAX)
        pid = _parse_uint(match.group(2), _U32_MAX)
        if port is not None and pid is not None:
            pairs.append((port, pid))
    return pairs


def parse_linux_ss(text: str) -> list[tuple[int, int]]:
    """Extract (port, pid) pairs from ``ss -ltnp`` style output."""
    return _port_pid_pairs(_LINUX_SS, text)


def parse_windows_netstat(text: str) -> list[tuple[int, int]]:
    """Extract (port, pid) pairs from ``netstat -ano -p TCP`` output."""
    return _port_pid_pairs(_WINDOWS_NETSTAT, text)


def parse_macos_lsof(text: str) -> list[tuple[int, int, str]]:
    """Extract (port, pid, command) triples from ``lsof -iTCP -sTCP:LISTEN`` output.

    The first line is treated as the column header and skipped.
    """
    entries = []
    for line in text.splitlines()[1:]:
        fields = line.split()
        if len(fields) < 9:
            continue
        pid = _parse_uint(fields[1], _U32_MAX)
        if pid is None:
            continue
        port = _parse_uint(fields[8].rsplit(":", 1)[-1], _U16_MAX)
        if port is None:
            continue
        entries.append((port, pid, fields[0]))
    return entries


def process_name(pid: int, default: str) -> str:
    """Return the name of process *pid*, or *default* if it cannot be read."""
    try:
        return psutil.Process(pid).name()
    except psutil.Error:
        return default


def _listening(port: int, pid: int, name: str) -> PortInfo:
    return PortInfo(port=port, protocol="TCP", pid=pid, process_name=name, status=LISTENING)


def _run(args: list[str]) -> subprocess.CompletedProcess:
    return subprocess.run(args, capture_output=True, check=False)


def _decode(data: bytes | None) -> str:
    return (data or b"").decode("utf-8", errors="replace")


def _checked(result: subprocess.CompletedProcess, command: str) -> str:
    if result.returncode != 0:
        raise CommandError(command, _decode(result.stderr))
    return _decode(result.stdout)


def _linux_ports() -> dict[int, PortInfo]:
    try:
        result = _run(["ss", "-ltnp"])
    except OSError:
        result = None
    if result is None or result.returncode != 0:
        result = _run(["netstat", "-ltnp"])
    stdout = _checked(result, "ss/netstat")
    return {
        port: _listening(port, pid, process_name(pid, "N/A"))
        for port, pid in parse_linux_ss(stdout)
    }


def _macos_ports() -> dict[int, PortInfo]:
    stdout = _checked(_run(["lsof", "-iTCP", "-sTCP:LISTEN", "-P", "-n"]), "lsof")
    return {
        port: _listening(port, pid, process_name(pid, command))
        for port, pid, command in parse_macos_lsof(stdout)
    }


def _windows_ports() -> dict[int, PortInfo]:
    stdout = _checked(_run(["netstat", "-ano", "-p", "TCP"]), "netstat")
    # PID 0 is the idle process, not something a user can act on.
    return {
        port: _listening(port, pid, process_name(pid, "N/A"))
        for port, pid in parse_windows_netstat(stdout)
        if pid != 0
    }


def get_all_listening_tcp_ports() -> dict[int, PortInfo]:
    """Map every listening TCP port on this machine to its owner.

    Raises CommandError when the system tool fails, OSError when it cannot
    be started, and UnsupportedOsError on other platforms.
    """
    platform = sys.platform
    if platform.startswith("linux"):
        return _linux_ports()
    if platform == "darwin":
        return _macos_ports()
    if platform == "win32":
        return _windows_ports()
    raise UnsupportedOsError()


def kill_process_by_pid(pid: int) -> None:
    """Forcefully terminate process *pid*."""
    try:
        proc = psutil.Process(pid)
    except psutil.NoSuchProcess:
        raise ProcessNotFoundError(pid) from None
    except psutil.Error:
        raise KillFailedError(pid, _KILL_FAILURE) from None
    try:
        proc.kill()
    except psutil.Error:
        raise KillFailedError(pid, _KILL_FAILURE) from None