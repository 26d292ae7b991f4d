"""
Error types for the discovery stage.

Resolution and connection failures are captured as values inside scan
results; only configuration errors are raised, and those never reach the
scanner itself.
"""
import errno
import socket
from typing import Optional


def error_code_name(exc: BaseException) -> str:
    """
    Symbolic name for the error code carried by a socket-level exception.

    Examples: EAI_NONAME for an unknown host, ECONNREFUSED for a closed port.
    """
    code = getattr(exc, "errno", None)

    if isinstance(exc, socket.gaierror) and code is not None:
        for name in dir(socket):
            if name.startswith("EAI_") and getattr(socket, name) == code:
                return name

    if code is not None:
        return errno.errorcode.get(code, str(code))

    if isinstance(exc, TimeoutError):
        return "ETIMEDOUT"
    if isinstance(exc, ValueError):
        return "EINVAL"
    return type(exc).__name__


def error_message(exc: BaseException) -> str:
    message = getattr(exc, "strerror", None)
    if message:
        return message
    return str(exc) or type(exc).__name__


class ScanError(Exception):
    """Base error with a symbolic code and a human readable message."""

    def __init__(self, code: str, message: str):
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message

    @classmethod
    def from_os_error(cls, exc: BaseException):
        return cls(error_code_name(exc), error_message(exc))

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return (self.code, self.message) == (other.code, other.message)

    def __hash__(self):
        return hash((type(self), self.code, self.message))


class ResolutionError(ScanError):
    """DNS lookup failed for a hostname."""


class PortConnectionError(ScanError):
    """A TCP connect attempt failed."""


class ConfigurationError(ScanError):
    """
    Invalid command line input. Raised before any probing starts.

    Args:
        option: Long name of the offending option
        value: The raw value given on the command line
        reason: Why the value was rejected
        exit_code: Process exit code (-1 unparsable value, -2 bad bound order)
    """

    def __init__(self, option: str, value: Optional[str], reason: str, exit_code: int = -1):
        super().__init__("EINVAL", reason)
        self.option = option
        self.value = value
        self.reason = reason
        self.exit_code = exit_code
