"""Exception hierarchy for port inspection and process control."""


class PortWatcherError(Exception):
    """Base class for every error raised by the package."""


class ParseError(PortWatcherError):
    """Output of a system command could not be understood."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Failed to parse command output: {detail}")


class CommandError(PortWatcherError):
    """A system command ran but reported failure."""

    def __init__(self, command: str, stderr: str) -> None:
        self.command = command
        self.stderr = stderr
        super().__init__(f"Command execution failed: {command}, stderr: {stderr}")


class InvalidPortError(PortWatcherError, ValueError):
    """A port specification given by the user is malformed."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid port specification: {detail}")


class ProcessNotFoundError(PortWatcherError):
    """No running process has the requested PID."""

    def __init__(self, pid: int) -> None:
        self.pid = pid
        super().__init__(f"Process with PID {pid} not found")


class KillFailedError(PortWatcherError):
    """A process exists but could not be terminated."""

    def __init__(self, pid: int, reason: str) -> None:
        self.pid = pid
        self.reason = reason
        super().__init__(f"Failed to kill process with PID {pid}: {reason}")


class PermissionDeniedError(PortWatcherError):
    """The operation needs elevated privileges."""

    def __init__(self) -> None:
        super().__init__(
            "Permission denied. Try running with sudo/administrator privileges."
        )


class UnsupportedOsError(PortWatcherError):
    """The current operating system is not supported for this operation."""

    def __init__(self) -> None:
        super().__init__("Unsupported OS for specific operation")


class SysinfoError(PortWatcherError):
    """Querying process information failed."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Sysinfo error: {detail}")