"""Shell implementation with the read-execute loop"""

import logging
from typing import Optional, TextIO

from rich.console import Console

from .config import ShellConfig
from .context import CommandContext
from .control_flow import ExitShell
from .executor import ShellExecutor
from .exit_codes import EXIT_SUCCESS
from .path_manager import PathManager, SearchPath

logger = logging.getLogger(__name__)


class Shell:
    """Reads lines from a stream and hands them to the executor"""

    def __init__(self, config: Optional[ShellConfig] = None, interactive: bool = False):
        self.config = config or ShellConfig()
        self.path_manager = PathManager(self.config.default_path)
        self.context = CommandContext(
            path_manager=self.path_manager,
            interactive=interactive,
            _shell=self,
        )
        self.executor = ShellExecutor(self.context)
        self.console = Console(highlight=False, soft_wrap=True)  # Rich console for the prompt

    @property
    def interactive(self) -> bool:
        return self.context.interactive

    @interactive.setter
    def interactive(self, value: bool):
        self.context.interactive = value

    @property
    def search_path(self) -> SearchPath:
        return self.path_manager.search_path

    @property
    def cwd(self) -> str:
        return self.path_manager.get_cwd()

    def execute(self, command_line: str) -> None:
        """
        Execute one command line.

        Raises:
            ExitShell: If the line ran the ``exit`` built-in in this process
            FatalShellError: If the shell cannot go on
        """
        self.executor.execute_line(command_line)

    def show_prompt(self):
        self.console.print(self.config.prompt, end='', markup=False)

    def run(self, stream: TextIO, interactive: Optional[bool] = None) -> int:
        """
        Read and execute lines until end of input or ``exit``.

        Each line, including every child it started, is finished before
        the next one is read.

        Args:
            stream: Source of command lines
            interactive: Show the prompt before each read (default: the
                shell's own interactive flag)

        Returns:
            Exit status for the whole shell
        """
        if interactive is not None:
            self.interactive = interactive

        while True:
            if self.interactive:
                self.show_prompt()

            line = stream.readline()
            if not line:
                logger.debug("end of input")
                return EXIT_SUCCESS

            try:
                self.execute(line)
            except ExitShell as e:
                logger.debug("exit requested with status %d", e.exit_code)
                return e.exit_code
