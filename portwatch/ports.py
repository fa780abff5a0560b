"""Parsing of user-supplied port specifications."""

from __future__ import annotations

import re

from .errors import InvalidPortError

_UNSIGNED = re.compile(r"\+?[0-9]+")
_MAX_PORT = 0xFFFF


def _parse_port(text: str) -> int | None:
    """Return the port number in *text*, or None if it is not a valid u16."""
    if not _UNSIGNED.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _MAX_PORT else None


def parse_ports_spec(ports_str: str) -> set[int]:
    """Expand a spec such as ``"80,443,8000-8010"`` into a set of ports.

    Raises InvalidPortError for malformed items, reversed ranges or port 0.
    """
    ports: set[int] = set()
    for part in ports_str.split(","):
        item = part.strip()
        if "-" in item:
            bounds = item.split("-")
            if len(bounds) != 2:
                raise InvalidPortError(f"Invalid range format: {item}")
            low_text, high_text = bounds
            start = _parse_port(low_text)
            if start is None:
                raise InvalidPortError(f"Invalid range start: {low_text}")
            end = _parse_port(high_text)
            if end is None:
                raise InvalidPortError(f"Invalid range end: {high_text}")
            if start > end:
                raise InvalidPortError(
                    f"Invalid range: start ({start}) > end ({end})"
                )
            if start == 0 or end == 0:
                raise InvalidPortError("Port number cannot be 0")
            ports.update(range(start, end + 1))
        else:
            port = _parse_port(item)
            if port is None:
                raise InvalidPortError(f"Invalid port number: {item}")
            if port == 0:
                raise InvalidPortError("Port number cannot be 0")
            ports.add(port)
    if not ports:
        raise InvalidPortError("No ports specified")
    return ports