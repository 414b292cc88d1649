"""
runcmd - Run external commands with a small builder API.

    from runcmd import CommandRunner

    result = CommandRunner('echo "Hello World"').execute()
    CommandRunner("ls | wc -l").with_shell().with_verbose().execute_or_panic()
"""

from .runner import CommandRunner
from .exec import ExecutionResult
from .errors import RunCmdError, ExecError, SpawnError, DecodeError

__all__ = [
    "CommandRunner",
    "ExecutionResult",
    # Error types
    "RunCmdError",
    "ExecError",
    "SpawnError",
    "DecodeError",
]

# Get version from package metadata
try:
    from importlib.metadata import version, PackageNotFoundError
    __version__ = version("runcmd")
except PackageNotFoundError:
    # Package not installed (e.g., development mode)
    __version__ = "0.0.0+dev"
