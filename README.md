# portwatch

Find out which processes are listening on TCP ports, and stop them if you want to.

portwatch asks the system's own tools which TCP ports are in the listening state. On Linux it runs `ss -ltnp`, and falls back to `netstat -ltnp` if `ss` fails. On macOS it runs `lsof -iTCP -sTCP:LISTEN -P -n`. On Windows it runs `netstat -ano -p TCP`. Process names come from `psutil`. Other platforms are not supported.

## Installation

```
pip install .
```

## Usage

Check one port, a list of ports, a range, or a mix of them:

```
portwatch 80
portwatch 80,443
portwatch 8000-8010
portwatch 80,443,8000-8002,3000
```

The result is a table with the columns PORT, PROTOCOL, PID, PROCESS NAME and STATUS, sorted by port. Requested ports that nothing is listening on appear with the status `Free`.

List every listening TCP port:

```
portwatch --all
```

`--all` cannot be combined with a port list.

Print the results as JSON, a list of objects with the keys `port`, `protocol`, `pid`, `process_name` and `status`:

```
portwatch --json
portwatch 8080 --json
```

Without ports, `--json` lists all listening ports. With ports, JSON output includes only the requested ports that are listening; free ports are left out.

Stop the processes listening on the given ports:

```
portwatch 8080 --kill
```

Each owning process is killed outright, and success or failure is reported per PID. `--kill` is ignored, with a warning, when no ports are given (`--all`, or `--json` alone). Stopping another user's process may need administrator rights.

`portwatch --version` prints the version. If the port specification is invalid or the system tool fails, an error message is printed and the exit status is 1.

## Port specifications

- Port numbers run from 1 to 65535. `0` is rejected.
- A range is written `start-end`, includes both ends, and must have `start <= end`.
- Separate parts with commas. Whitespace around each part is ignored, and duplicate ports are merged.

## Library use

```python
from portwatch.ports import parse_ports_spec
from portwatch.scanner import get_all_listening_tcp_ports

wanted = parse_ports_spec("80,8000-8002")
listening = get_all_listening_tcp_ports()
for port in sorted(wanted):
    info = listening.get(port)
    print(port, info.to_dict() if info else "free")
```

- `portwatch.ports.parse_ports_spec` turns a specification string into a set of ports.
- `portwatch.scanner.get_all_listening_tcp_ports` returns a dict mapping each listening port to a `PortInfo`. `kill_process_by_pid` kills a process, and `process_name` looks up a process name. The output parsers `parse_linux_ss`, `parse_macos_lsof` and `parse_windows_netstat` can be used on captured text.
- `portwatch.cli` has `format_table`, `print_human_readable`, `select_infos` and `main`.

Errors are raised as subclasses of `portwatch.errors.PortWatcherError`. Examples are `InvalidPortError` for a bad port specification, `CommandError` when a system tool fails, `UnsupportedOsError` on an unsupported platform, and `ProcessNotFoundError` or `KillFailedError` when killing a process.

## What it does not do

portwatch only looks at TCP ports in the listening state. It does not report UDP sockets or established connections, and it takes a single snapshot rather than watching ports over time.

## Running the tests

```
pip install .[test]
pytest
```