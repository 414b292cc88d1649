#!/usr/bin/env python3
"""
CommandRunner Example - Running external commands

Demonstrates core runcmd features:
- Command execution with results
- Separate stdout and stderr handling
- Shell mode for pipes and redirection
- Verbose reports
- Error handling and exit codes
"""

import logging
import sys

import runcmd

logger = logging.getLogger("runcmd_example")


def setup_logging():
    """Configure stdout logging for the example."""
    logging.basicConfig(
        level=logging.ERROR,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def example_basic():
    """Example 1: Basic command execution."""
    print("\n=== Example 1: Basic Command Execution ===")

    result = runcmd.CommandRunner("ls -lh /").execute()
    print(result.stdout)

    if result.stderr:
        print(f"Stderr: {result.stderr}")
    print(f"Exit code: {result.exit_code}")


def example_stdout_stderr():
    """Example 2: Separate stdout and stderr."""
    print("\n\n=== Example 2: Separate stdout and stderr ===")

    result = runcmd.CommandRunner('sh -c \'echo "to stdout" && echo "to stderr" >&2\'').execute()
    print(f"stdout: {result.stdout!r}")
    print(f"stderr: {result.stderr!r}")


def example_shell():
    """Example 3: Pipes through the shell."""
    print("\n\n=== Example 3: Shell Mode ===")

    result = runcmd.CommandRunner("ls / | wc -l").with_shell().execute()
    print(f"Entries in /: {result.stdout.strip()}")


def example_verbose():
    """Example 4: Verbose report."""
    print("\n\n=== Example 4: Verbose Mode ===")

    runcmd.CommandRunner("echo foobar; exit 0").with_shell().with_verbose().execute()


def example_error_handling():
    """Example 5: Exit codes and execute_or_panic()."""
    print("\n\n=== Example 5: Error Handling ===")

    result = runcmd.CommandRunner("false").execute()
    print(f"Command failed as expected with exit code: {result.exit_code}")

    print("\nRunning a passing command with execute_or_panic (output goes to the terminal):")
    runcmd.CommandRunner('echo "Hello World"').execute_or_panic()

    try:
        runcmd.CommandRunner('sh -c "exit 3"').execute_or_panic()
    except runcmd.ExecError as e:
        print(f"Caught: {e}")


def main():
    """Run all examples."""
    print("CommandRunner Examples")
    print("=" * 60)

    example_basic()
    example_stdout_stderr()
    example_shell()
    example_verbose()
    example_error_handling()

    print("\n" + "=" * 60)
    print("All examples completed!")


if __name__ == "__main__":
    setup_logging()
    logger.info("Python logging configured; runtime logs will emit to stdout.")
    main()
