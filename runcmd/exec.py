"""
Execution result - the record returned by CommandRunner.execute().
"""

from dataclasses import dataclass

__all__ = [
    'ExecutionResult',
]


@dataclass
class ExecutionResult:
    """
    Result from a command execution.

    Attributes:
        command: The command text exactly as given to CommandRunner
        stdout: Standard output as string (empty if nothing was captured)
        stderr: Standard error as string (empty if nothing was captured)
        exit_code: Exit code from the command (-1 if terminated by signal)
    """
    command: str
    stdout: str = ""
    stderr: str = ""
    exit_code: int = 0

    @property
    def success(self) -> bool:
        """True when the process reported a zero exit status."""
        return self.exit_code == 0
