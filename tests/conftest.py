"""
Pytest configuration and shared fixtures for runcmd tests.

Most tests spawn real processes. Tests that need bash or a POSIX shell
are skipped on hosts that lack them.
"""

from __future__ import annotations

import os
import shutil

import pytest

HAS_BASH = shutil.which("bash") is not None
IS_POSIX = os.name == "posix"

requires_bash = pytest.mark.skipif(not HAS_BASH, reason="bash not installed")
requires_posix = pytest.mark.skipif(not IS_POSIX, reason="POSIX shell semantics required")


@pytest.fixture
def counter_file(tmp_path):
    """A scratch file that shell commands can append to, one line per run."""
    path = tmp_path / "runs.txt"
    path.write_text("")
    return path
