"""
Tests for CommandContext.

This module tests the CommandContext dataclass that encapsulates
command execution context.
"""

import os

from wish_shell.context import CommandContext
from wish_shell.path_manager import PathManager


class TestCommandContextCreation:
    """Test CommandContext creation and initialization"""

    def test_default_creation(self):
        """Test creating context with default values"""
        ctx = CommandContext()
        assert list(ctx.search_path) == ['/bin']
        assert ctx.interactive is False
        assert ctx._shell is None

    def test_creation_with_values(self):
        """Test creating context with specific values"""
        ctx = CommandContext(path_manager=PathManager(['/usr/bin']), interactive=True)
        assert list(ctx.search_path) == ['/usr/bin']
        assert ctx.interactive is True

    def test_contexts_do_not_share_defaults(self):
        """Test each default context gets its own PathManager"""
        first = CommandContext()
        second = CommandContext()
        first.path_manager.clear()
        assert list(second.search_path) == ['/bin']


class TestDelegation:
    """Test methods delegated to the PathManager"""

    def test_search_path_follows_manager(self):
        ctx = CommandContext()
        ctx.path_manager.set_search_path(['/a', '/b'])
        assert list(ctx.search_path) == ['/a', '/b']

    def test_resolve_command(self, bin_dir):
        ctx = CommandContext(path_manager=PathManager([str(bin_dir)]))
        assert ctx.resolve_command('hello') == f"{bin_dir}/hello"
        assert ctx.resolve_command('missing') is None

    def test_cwd(self, workdir):
        ctx = CommandContext()
        assert ctx.cwd == os.getcwd() == str(workdir)


class TestRepr:
    """Test string representation"""

    def test_repr(self):
        ctx = CommandContext(path_manager=PathManager(['/bin']))
        assert repr(ctx) == "CommandContext(search_path=['/bin'], interactive=False)"
