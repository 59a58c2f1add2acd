"""Locating the executable a command name refers to."""

from __future__ import annotations

import os
from typing import List, Mapping, Optional


class CommandNotFound(LookupError):
    """Raised when a command name does not lead to an executable file."""

    def __init__(self, name: Optional[str]) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"command not found: {self.name or ''}"


def _environment(env: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return os.environ if env is None else env


def search_path(env: Optional[Mapping[str, str]] = None) -> List[str]:
    """Return the directories of ``PATH``, each ending in ``/``.

    Empty entries are skipped. Without a ``PATH`` variable the list is empty.
    ``env`` defaults to the process environment.
    """
    path = _environment(env).get("PATH")
    if path is None:
        return []
    return [directory + "/" for directory in path.split(":") if directory]


def resolve(args: List[str], env: Optional[Mapping[str, str]] = None) -> List[str]:
    """Return ``args`` with the program name replaced by its executable's path.

    A name containing ``/`` is used as it stands, provided it is executable.
    Otherwise each ``PATH`` directory is tried in order. Raises
    :class:`CommandNotFound` when no executable is found.
    """
    if not args or not args[0]:
        raise CommandNotFound(args[0] if args else None)
    name = args[0]
    if "/" in name:
        if os.access(name, os.X_OK):
            return list(args)
        raise CommandNotFound(name)
    for directory in search_path(env):
        candidate = directory + name
        if os.access(candidate, os.X_OK):
            return [candidate, *args[1:]]
    raise CommandNotFound(name)