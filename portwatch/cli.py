"""Command-line entry point: report and optionally kill owners of TCP ports."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Iterable, Mapping

from .errors import PortWatcherError
from .ports import parse_ports_spec
from .scanner import (
    FREE,
    LISTENING,
    PortInfo,
    get_all_listening_tcp_ports,
    kill_process_by_pid,
)

_VERSION = "0.1.0"
_ROW = "{:<8} {:<8} {:<8} {:<25} {:<10}"
_NOTHING_FOUND = "No specified ports are currently in use or no listening ports found."
_NOTHING_IN_USE = "No specified ports are currently in use."


def format_table(infos: Iterable[PortInfo], show_free: bool) -> str:
    """Render port information as a fixed-width text table."""
    infos = list(infos)
    if not infos:
        return _NOTHING_FOUND

    lines = [
        _ROW.format("PORT", "PROTOCOL", "PID", "PROCESS NAME", "STATUS"),
        " ".join("-" * width for width in (8, 8, 8, 25, 10)),
    ]
    displayed_any = False
    for info in infos:
        if not show_free and info.status == FREE:
            continue
        displayed_any = True
        lines.append(
            _ROW.format(
                info.port,
                info.protocol,
                "N/A" if info.pid is None else str(info.pid),
                info.process_name if info.process_name is not None else "N/A",
                info.status,
            )
        )
    if not displayed_any and not show_free:
        lines.append(_NOTHING_IN_USE)
    return "\n".join(lines)


def print_human_readable(infos: Iterable[PortInfo], show_free: bool) -> None:
    """Print the table produced by :func:`format_table`."""
    print(format_table(infos, show_free))


def select_infos(
    listening: Mapping[int, PortInfo],
    target_ports: Iterable[int] | None,
    json_output: bool,
) -> list[PortInfo]:
    """Choose which entries to report, ordered by port.

    With *target_ports* given, each requested port that is listening is
    reported; ports that are not listening are reported as free unless the
    output is JSON. Without target ports every listening port is reported.
    """
    if target_ports is None:
        chosen = [info for _, info in sorted(listening.items())]
        if json_output:
            chosen = [info for info in chosen if info.status == LISTENING]
        return chosen

    chosen = []
    for port in sorted(set(target_ports)):
        info = listening.get(port)
        if info is not None:
            chosen.append(info)
        elif not json_output:
            chosen.append(PortInfo(port=port, protocol="TCP", status=FREE))
    return chosen


def _kill_owners(infos: Iterable[PortInfo]) -> None:
    for info in infos:
        if info.status != LISTENING:
            continue
        if info.pid is None:
            print(
                f"Cannot kill process on port {info.port}: PID not found.",
                file=sys.stderr,
            )
            continue
        name = info.process_name if info.process_name is not None else "N/A"
        print(
            f"Attempting to kill process '{name}' (PID: {info.pid}) on port {info.port}..."
        )
        try:
            kill_process_by_pid(info.pid)
        except PortWatcherError as exc:
            print(f"Failed to kill process PID {info.pid}: {exc}", file=sys.stderr)
        else:
            print(f"Successfully killed process PID {info.pid}.")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="port-watcher",
        description="Show which processes listen on TCP ports, and optionally kill them.",
    )
    parser.add_argument(
        "ports",
        nargs="?",
        metavar="PORTS",
        help="Ports to check. Can be single (80), comma-separated (80,443), "
        "range (8000-8010), or mixed.",
    )
    parser.add_argument(
        "-k", "--kill", action="store_true",
        help="Kill the processes found on the specified ports",
    )
    parser.add_argument("--json", action="store_true", help="Output in JSON format")
    parser.add_argument(
        "-a", "--all", action="store_true",
        help="List all listening TCP ports",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {_VERSION}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.all and args.ports is not None:
        parser.error("argument -a/--all cannot be used with PORTS")
    if args.ports is None and not args.all and not args.json:
        parser.error("the following arguments are required: PORTS")

    try:
        target_ports = None if args.all or args.ports is None else parse_ports_spec(args.ports)
        listening = get_all_listening_tcp_ports()
    except (PortWatcherError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    infos = select_infos(listening, target_ports, args.json)

    if args.kill:
        if target_ports is None:
            print(
                "Warning: --kill is ignored when --all is used without specific ports. "
                "Please specify ports to kill.",
                file=sys.stderr,
            )
        else:
            _kill_owners(infos)

    if args.json:
        print(json.dumps([info.to_dict() for info in infos], indent=2))
    else:
        print_human_readable(infos, target_ports is not None)
    return 0


if __name__ == "__main__":
    sys.exit(main())