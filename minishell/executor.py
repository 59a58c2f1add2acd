"""Running a command with its redirections."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Mapping, Optional

from .command import Command, tester_command
from .pathfind import CommandNotFound, resolve
from .redirect import RedirectError, open_redirections


def execute(command: Command, env: Optional[Mapping[str, str]] = None) -> int:
    """Run ``command`` with its redirections and wait for it to finish.

    Returns the program's exit status. A redirection or start-up failure is
    reported on standard error and gives status 1.
    """
    environment = dict(os.environ if env is None else env)
    try:
        with open_redirections(command) as redir:
            try:
                completed = subprocess.run(
                    command.args,
                    stdin=redir.stdin,
                    stdout=redir.stdout,
                    env=environment,
                    check=False,
                )
            except OSError as exc:
                print(f"{command.name}: {exc.strerror or exc}", file=sys.stderr)
                return 1
    except RedirectError as exc:
        print(exc, file=sys.stderr)
        return 1
    return completed.returncode


def executor(env: Optional[Mapping[str, str]] = None) -> Optional[int]:
    """Resolve and run the sample command.

    Returns its exit status, or None after printing a message when the
    program cannot be found.
    """
    command = tester_command()
    try:
        command.args = resolve(command.args, env)
    except CommandNotFound as exc:
        print(exc)
        return None
    return execute(command, env)