"""
Pytest configuration and shared fixtures for wish-shell tests.

This module provides reusable test fixtures for:
- A temporary bin directory populated with small executable scripts
- Shell and executor instances whose search path points at it
- A working directory that is restored after each test
"""

import os
from pathlib import Path
from typing import Callable

import pytest

from wish_shell.config import ShellConfig
from wish_shell.context import CommandContext
from wish_shell.executor import ShellExecutor
from wish_shell.path_manager import PathManager
from wish_shell.shell import Shell


# ============================================================================
# Executable Scripts
# ============================================================================

SCRIPTS = {
    'hello': 'echo hello\n',
    'both': 'echo out\necho err >&2\necho out2\n',
    'args': 'echo "$#" "$@"\n',
    'fail': 'exit 3\n',
    # sleep for $1 seconds, then create the file $2
    'slowtouch': 'sleep "$1"\ntouch "$2"\n',
    'where': 'pwd\n',
}


def write_script(directory: Path, name: str, body: str, mode: int = 0o755) -> Path:
    """Create a /bin/sh script and set its permission bits."""
    script = directory / name
    script.write_text('#!/bin/sh\n' + body)
    os.chmod(script, mode)
    return script


@pytest.fixture
def bin_dir(tmp_path) -> Path:
    """A directory holding the standard test scripts."""
    directory = tmp_path / 'bin'
    directory.mkdir()
    for name, body in SCRIPTS.items():
        write_script(directory, name, body)
    return directory


@pytest.fixture
def make_script() -> Callable[..., Path]:
    """Factory for extra scripts in arbitrary directories."""
    return write_script


# ============================================================================
# Working Directory
# ============================================================================

@pytest.fixture
def workdir(tmp_path, monkeypatch) -> Path:
    """Run the test inside a scratch directory; the old cwd comes back afterwards."""
    directory = tmp_path / 'work'
    directory.mkdir()
    monkeypatch.chdir(directory)
    return directory


# ============================================================================
# Shell Components
# ============================================================================

@pytest.fixture
def path_manager(bin_dir) -> PathManager:
    return PathManager([str(bin_dir)])


@pytest.fixture
def context(path_manager) -> CommandContext:
    return CommandContext(path_manager=path_manager)


@pytest.fixture
def executor(context, workdir) -> ShellExecutor:
    """Executor searching only the test bin directory."""
    return ShellExecutor(context)


@pytest.fixture
def shell(bin_dir, workdir) -> Shell:
    """Shell whose default search path is the test bin directory."""
    return Shell(ShellConfig(default_path=(str(bin_dir),)))
