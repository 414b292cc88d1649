"""
runcmd error types.

Provides a hierarchy of exceptions for different failure modes.
"""

__all__ = ['RunCmdError', 'ExecError', 'SpawnError', 'DecodeError']


class RunCmdError(Exception):
    """Base exception for all runcmd errors."""
    pass


class ExecError(RunCmdError):
    """
    Raised by execute_or_panic() when a command exits non-zero.

    Attributes:
        command: The command that failed
        exit_code: The non-zero exit code
        stderr: Standard error output from the command
    """
    def __init__(self, command: str, exit_code: int, stderr: str):
        self.command = command
        self.exit_code = exit_code
        self.stderr = stderr
        super().__init__(f"Command '{command}' failed with exit code {exit_code}: {stderr}")


class SpawnError(RunCmdError):
    """
    Raised when the process cannot be started at all.

    Attributes:
        command: The command that could not be spawned
        reason: Description of the underlying failure
    """
    def __init__(self, command: str, reason: str):
        self.command = command
        self.reason = reason
        super().__init__(f"Failed to spawn '{command}': {reason}")


class DecodeError(RunCmdError):
    """
    Raised when captured output is not valid text.

    Attributes:
        command: The command whose output failed to decode
        stream: Which stream held the bad bytes ('stdout' or 'stderr')
        reason: Description of the decoding failure
    """
    def __init__(self, command: str, stream: str, reason: str):
        self.command = command
        self.stream = stream
        self.reason = reason
        super().__init__(f"Could not decode {stream} of '{command}': {reason}")
