"""Command-line entry point: run commands between an input and an output file."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional

from pipechain.output import put_endl, put_str
from pipechain.pipeline import PipelineError, run_pipeline

__all__ = ["HERE_DOC", "is_here_doc", "main"]

HERE_DOC = "here_doc"

USAGE = (
    "usage: pipechain infile cmd1 cmd2 ... outfile\n"
    "       pipechain here_doc LIMITER cmd1 cmd2 ... outfile\n"
)


def is_here_doc(arg: str) -> bool:
    """True when arg selects here-document mode."""
    return arg == HERE_DOC


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the pipeline described by argv and return the exit status.

    The arguments are an input file, two or more commands and an output
    file. With here_doc in place of the input file, the next argument is
    the limiter, the first command reads standard input and the output
    file is appended to rather than truncated.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 4:
        put_str("Not enough arguments!\n", sys.stdout)
        return 0

    here_doc = is_here_doc(args[0])
    outfile = args[-1]
    if here_doc:
        infile = None
        commands = args[2:-1]
    else:
        infile = args[0]
        commands = args[1:-1]

    try:
        run_pipeline(commands, infile, outfile, here_doc=here_doc)
    except PipelineError as exc:
        put_endl(str(exc), sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())