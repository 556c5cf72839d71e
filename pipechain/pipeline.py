"""Running a chain of commands connected by pipes, between two files."""

from __future__ import annotations

import contextlib
import os
import subprocess
import sys
from collections.abc import Iterable, Mapping, Sequence
from typing import IO, Any, BinaryIO, Optional, Union

from pipechain.output import put_endl
from pipechain.resolve import parse_command, resolve_command

__all__ = [
    "COMMAND_NOT_FOUND",
    "NOT_EXECUTABLE",
    "PipelineError",
    "InfileError",
    "OutfileError",
    "Pipeline",
    "open_input",
    "open_output",
    "run_pipeline",
]

COMMAND_NOT_FOUND = 127
NOT_EXECUTABLE = 126

Environment = Union[Mapping[str, str], Iterable[str], None]
Endpoint = Union[int, IO[Any], None]


class PipelineError(Exception):
    """Base class for errors raised while setting up a pipeline."""


class InfileError(PipelineError):
    """The input file could not be opened for reading."""

    def __init__(self, path: Any) -> None:
        super().__init__("Could not read infile!")
        self.path = path


class OutfileError(PipelineError):
    """The output file could not be opened for writing."""

    def __init__(self, path: Any) -> None:
        super().__init__("Could not open outfile!")
        self.path = path


def open_input(path: Union[str, os.PathLike]) -> BinaryIO:
    """Open path for reading; raise InfileError when that fails."""
    try:
        fd = os.open(path, os.O_RDONLY)
    except (OSError, TypeError, ValueError) as exc:
        raise InfileError(path) from exc
    return os.fdopen(fd, "rb")


def open_output(path: Union[str, os.PathLike], append: bool = False) -> BinaryIO:
    """Open path for writing, creating it with mode 0777 if needed.

    The file is truncated, or appended to when append is true. Raises
    OutfileError when it cannot be opened.
    """
    flags = os.O_WRONLY | os.O_CREAT | (os.O_APPEND if append else os.O_TRUNC)
    try:
        fd = os.open(path, flags, 0o777)
    except (OSError, TypeError, ValueError) as exc:
        raise OutfileError(path) from exc
    return os.fdopen(fd, "ab" if append else "wb")


def _env_mapping(env: Environment) -> Optional[dict[str, str]]:
    if env is None:
        return None
    if isinstance(env, Mapping):
        return dict(env)
    mapping: dict[str, str] = {}
    for entry in env:
        name, _, value = entry.partition("=")
        mapping.setdefault(name, value)
    return mapping


class Pipeline:
    """A sequence of commands, each reading what the one before it wrote.

    Each command is a string split on spaces into a program name and its
    arguments. The name is looked up in the PATH of env; a name that is
    not found there is executed as a path relative to the working
    directory.
    """

    def __init__(self, commands: Sequence[str], env: Environment = None) -> None:
        self.commands = list(commands)
        if not self.commands:
            raise ValueError("a pipeline needs at least one command")
        self.env = env

    def _start(self, command: str, stdin: Any, stdout: Any) -> Union[subprocess.Popen, int]:
        """Start one command, or report why it cannot start and return a status."""
        try:
            argv = parse_command(command)
        except ValueError:
            put_endl("Command empty", sys.stderr)
            return COMMAND_NOT_FOUND
        path = resolve_command(argv[0], self.env)
        executable = path if "/" in path else os.path.join(".", path)
        try:
            return subprocess.Popen(
                argv,
                executable=executable,
                stdin=stdin,
                stdout=stdout,
                env=_env_mapping(self.env),
            )
        except PermissionError:
            put_endl(f"command not found: {argv[0]}", sys.stderr)
            return NOT_EXECUTABLE
        except OSError:
            put_endl(f"command not found: {argv[0]}", sys.stderr)
            return COMMAND_NOT_FOUND

    def run(self, stdin: Endpoint = None, stdout: Endpoint = None) -> list[int]:
        """Run every command and wait for all of them.

        stdin feeds the first command and stdout receives the last one's
        output; None inherits the current process's stream. A command that
        cannot start is reported on standard error and the next command
        reads empty input. Returns the exit status of each command in order.
        """
        started: list[Union[subprocess.Popen, int]] = []
        source: Any = stdin
        last_index = len(self.commands) - 1
        for index, command in enumerate(self.commands):
            sink = stdout if index == last_index else subprocess.PIPE
            stage = self._start(command, source, sink)
            if index > 0 and source is not subprocess.DEVNULL:
                source.close()
            started.append(stage)
            if isinstance(stage, subprocess.Popen):
                source = stage.stdout
            else:
                source = subprocess.DEVNULL
        return [
            stage.wait() if isinstance(stage, subprocess.Popen) else stage
            for stage in started
        ]


def run_pipeline(
    commands: Sequence[str],
    infile: Optional[Union[str, os.PathLike]],
    outfile: Union[str, os.PathLike],
    here_doc: bool = False,
    env: Environment = None,
) -> list[int]:
    """Run commands from infile to outfile and return their exit statuses.

    The output file is truncated first. In here_doc mode infile is not
    opened: the first command reads standard input and the output file
    is appended to.
    """
    pipeline = Pipeline(commands, env)
    with contextlib.ExitStack() as stack:
        source = None if here_doc else stack.enter_context(open_input(infile))
        sink = stack.enter_context(open_output(outfile, append=here_doc))
        return pipeline.run(source, sink)