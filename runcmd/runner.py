"""
CommandRunner - Builder for running a single external command.

Configure with chained calls, then run with execute() for a result or
execute_or_panic() to raise on failure.
"""

import dataclasses
import logging
import os
import shlex
import subprocess
from typing import List, Optional, Union

from . import constants as const
from .errors import DecodeError, ExecError, SpawnError
from .exec import ExecutionResult

# Configure logger
logger = logging.getLogger("runcmd.runner")

__all__ = ['CommandRunner']


class CommandRunner:
    """
    Runs one command, directly or through the shell, and records the outcome.

    Usage:
        >>> result = CommandRunner('echo "Hello World"').execute()
        >>> result.stdout
        'Hello World\\n'

        >>> CommandRunner("make build").with_shell().with_verbose().execute_or_panic()

    Output is captured into the result whenever it is consumed through
    execute() or verbose mode is on. Only a non-verbose execute_or_panic()
    lets the child write straight to the terminal.
    """

    def __init__(self, command: str):
        """
        Create a runner for a command.

        Args:
            command: Full command text, including arguments and/or shell syntax
        """
        self._command = command
        self._use_shell = False
        self._verbose = False
        self._passthrough = False
        self._last_result = ExecutionResult(command=command)

    @property
    def command(self) -> str:
        """The command text as given at construction."""
        return self._command

    @property
    def use_shell(self) -> bool:
        return self._use_shell

    @property
    def verbose(self) -> bool:
        return self._verbose

    @property
    def last_result(self) -> ExecutionResult:
        """Copy of the result of the most recent execution."""
        return dataclasses.replace(self._last_result)

    def with_shell(self) -> "CommandRunner":
        """
        Run the command through the system shell.

        Enables pipes, redirection, globbing and command chaining.
        """
        self._use_shell = True
        return self

    def with_verbose(self) -> "CommandRunner":
        """
        Print the command, stdout, stderr and exit code after running.

        This also disables real time output: everything is captured.
        """
        self._verbose = True
        return self

    def execute(self) -> ExecutionResult:
        """
        Run the command and wait for it to finish.

        Returns:
            ExecutionResult with the command, captured output and exit code.
            A non-zero exit code is reported, not raised.

        Raises:
            SpawnError: If the process could not be started
            DecodeError: If a normally exiting command wrote invalid UTF-8
        """
        capture = self._verbose or not self._passthrough
        pipe = subprocess.PIPE if capture else None

        args = self._spawn_args()
        logger.debug(f"spawning ({'shell' if self._use_shell else 'direct'}): {args!r}")

        try:
            with subprocess.Popen(
                    args,
                    shell=self._use_shell,
                    stdout=pipe,
                    stderr=pipe,
            ) as proc:
                raw_stdout, raw_stderr = proc.communicate()
        except OSError as e:
            logger.error(f"failed to spawn '{self._command}': {e}")
            raise SpawnError(self._command, str(e)) from e

        returncode = proc.returncode

        if returncode >= 0:
            result = ExecutionResult(
                command=self._command,
                stdout=self._decode(raw_stdout, "stdout"),
                stderr=self._decode(raw_stderr, "stderr"),
                exit_code=returncode,
            )
        else:
            # Negative return codes mean the child was killed by a signal
            logger.warning(f"'{self._command}' terminated by signal {-returncode}")
            result = ExecutionResult(
                command=self._command,
                stdout=(raw_stdout or b"").decode(const.OUTPUT_ENCODING, errors="replace"),
                stderr=const.INTERRUPTED_MESSAGE,
                exit_code=const.INTERRUPTED_EXIT_CODE,
            )

        logger.debug(f"exec finish, exit_code: {result.exit_code}")
        self._last_result = result

        if self._verbose:
            self._print()

        return dataclasses.replace(result)

    def execute_or_panic(self) -> None:
        """
        Run the command, raising if it does not succeed.

        Meant for trivial call sites that do not want to inspect the result.
        Unless verbose, the child's output goes straight to the terminal.

        Raises:
            ExecError: If the command exits with a non-zero code
            SpawnError: If the process could not be started
            DecodeError: If captured output is not valid UTF-8
        """
        self._passthrough = True
        try:
            result = self.execute()
        finally:
            self._passthrough = False

        if result.exit_code != 0:
            if self._verbose:
                self._print()
            raise ExecError(result.command, result.exit_code, result.stderr)

    def _spawn_args(self) -> Union[str, List[str]]:
        """Build the Popen argument for the selected spawn mode."""
        if self._use_shell or os.name == "nt":
            # The shell, or CreateProcess on Windows, does the splitting
            return self._command

        try:
            argv = shlex.split(self._command)
        except ValueError as e:
            logger.error(f"cannot parse '{self._command}': {e}")
            raise SpawnError(self._command, str(e)) from e

        if not argv:
            logger.error("refusing to spawn an empty command")
            raise SpawnError(self._command, "empty command")
        return argv

    def _decode(self, raw: Optional[bytes], stream: str) -> str:
        if not raw:
            return ""
        try:
            return raw.decode(const.OUTPUT_ENCODING)
        except UnicodeDecodeError as e:
            logger.error(f"{stream} of '{self._command}' is not valid {const.OUTPUT_ENCODING}: {e}")
            raise DecodeError(self._command, stream, str(e)) from e

    def _print(self) -> None:
        result = self._last_result
        print(f"cmd:\n '{result.command}'\n")
        print(f"stdout:\n '{result.stdout}'\n")
        print(f"stderr:\n '{result.stderr}'\n")
        print(f"exitcode: '{result.exit_code}'\n\n")
