"""Splitting command lines and finding executables on the search path."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from typing import Optional, Union

from pipechain.strings import split

__all__ = ["parse_command", "search_paths", "resolve_command"]

Environment = Union[Mapping[str, str], Iterable[str], None]


def parse_command(cmd: str) -> list[str]:
    """Split a command on spaces into its name and arguments.

    Raises ValueError when the command holds nothing but spaces.
    """
    words = split(cmd, " ")
    if not words:
        raise ValueError("Command empty")
    return words


def _path_value(env: Environment) -> Optional[str]:
    if env is None:
        env = os.environ
    if isinstance(env, Mapping):
        return env.get("PATH")
    for entry in env:
        name, _, value = entry.partition("=")
        if name == "PATH":
            return value
    return None


def search_paths(env: Environment = None) -> Optional[list[str]]:
    """Return the directories named by PATH, or None when PATH is not set.

    env is a mapping or a sequence of NAME=VALUE strings; the process
    environment is used when it is None. Empty entries are dropped.
    """
    value = _path_value(env)
    if value is None:
        return None
    return split(value, ":")


def resolve_command(name: str, env: Environment = None) -> str:
    """Return the first PATH directory joined with name that is executable.

    When no directory holds it, or PATH is not set, name is returned as it is.
    """
    for directory in search_paths(env) or ():
        candidate = directory + "/" + name
        if os.access(candidate, os.F_OK | os.X_OK):
            return candidate
    return name