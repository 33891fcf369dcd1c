"""
Command line parsing for wish-shell.

A raw line is cut into jobs on '&', and each job is tokenized on runs of
spaces and tabs. There is no quoting, no escaping and no variable
expansion: a token is just a run of non-blank characters.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

from .exceptions import InvalidRedirectionError, MissingCommandError, MultipleRedirectionError

JOB_SEPARATOR = '&'
REDIRECT_OPERATOR = '>'

_BLANKS = re.compile(r'[ \t]+')


@dataclass
class ParsedCommand:
    """
    A single job after parsing.

    Attributes:
        args: Argument vector; args[0] is the command name as typed
        redirect: File receiving stdout and stderr, or None
    """

    args: List[str]
    redirect: Optional[str] = None

    @property
    def command(self) -> str:
        return self.args[0]

    def __repr__(self):
        target = f" > {self.redirect}" if self.redirect is not None else ""
        return f"ParsedCommand({' '.join(self.args)}{target})"


class CommandParser:
    """Splits lines into jobs and jobs into ParsedCommand objects"""

    @staticmethod
    def clean_line(line: str) -> str:
        """Strip one trailing newline, if present."""
        if line.endswith('\n'):
            return line[:-1]
        return line

    @staticmethod
    def is_blank(line: str) -> bool:
        """True for an empty line or one holding only spaces and tabs."""
        return not line.strip(' \t')

    @staticmethod
    def tokenize(job: str) -> List[str]:
        """
        Split a job on runs of spaces and tabs.

        Example:
            >>> CommandParser.tokenize('ls \\t-l  /tmp')
            ['ls', '-l', '/tmp']
        """
        return [token for token in _BLANKS.split(job) if token]

    def split_jobs(self, line: str) -> List[str]:
        """
        Split a cleaned line on the job separator.

        Empty pieces (from '&&', or a leading/trailing '&') are dropped.
        Pieces holding only blanks are kept; parse_job skips them.

        Example:
            >>> CommandParser().split_jobs('ls & pwd &')
            ['ls ', ' pwd ']
        """
        return [job for job in line.split(JOB_SEPARATOR) if job]

    def parse_job(self, job: str) -> Optional[ParsedCommand]:
        """
        Parse one job string.

        Args:
            job: Command text without any '&'

        Returns:
            ParsedCommand, or None when the job holds no tokens at all

        Raises:
            InvalidRedirectionError: '>' with no target, or tokens after the target
            MultipleRedirectionError: More than one '>' in the job
            MissingCommandError: A redirection with no command before it
        """
        tokens = self.tokenize(job)
        args: List[str] = []
        redirect: Optional[str] = None

        for index, token in enumerate(tokens):
            if token != REDIRECT_OPERATOR:
                args.append(token)
                continue

            remaining = tokens[index + 1:]
            if not remaining:
                raise InvalidRedirectionError(job, "missing redirection target")
            if REDIRECT_OPERATOR in remaining:
                raise MultipleRedirectionError(job)
            if len(remaining) > 1:
                raise InvalidRedirectionError(job, f"unexpected token '{remaining[1]}' after target")
            redirect = remaining[0]
            break

        if not args:
            if redirect is not None:
                raise MissingCommandError(job)
            return None

        return ParsedCommand(args=args, redirect=redirect)
