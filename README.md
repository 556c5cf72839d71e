# pipechain

`pipechain` runs a chain of commands the way a shell pipeline does. It reads
from an input file, feeds the output of each command to the next one and
writes what the last command prints to an output file.

## Installation

```
pip install .
```

Add the `test` extra (`pip install .[test]`) to run the test suite.

## Command line

```
pipechain infile "cmd1" "cmd2" ... "cmdN" outfile
```

This does the same job as

```
< infile cmd1 | cmd2 | ... | cmdN > outfile
```

For example, this counts the lines of `infile.txt` that contain `Hello`:

```
pipechain infile.txt "grep Hello" "wc -l" outfile.txt
```

The same entry point can be run as `python -m pipechain.cli`.

- At least four arguments are needed. With fewer, `Not enough arguments!` is
  printed on standard output and the exit status is 0.
- Each command is split on spaces into a program name and its arguments.
  Shell quoting, globbing and redirection are not interpreted.
- The program name is looked up in the directories listed in `PATH`. A name
  not found there is run as a path relative to the working directory.
- The input file is opened first. If it cannot be read, `Could not read
  infile!` goes to standard error and the exit status is 1. If the output file
  cannot be opened, `Could not open outfile!` is reported the same way.
- The output file is created with mode 0777 (less the umask) when it does not
  exist, and truncated when it does.
- A command that cannot be started is reported on standard error as
  `command not found: NAME` (or `Command empty` for a blank command), and the
  command after it reads empty input. The exit status of `pipechain` is 0
  once the files are open, whatever the commands return.

### here_doc mode

```
pipechain here_doc LIMITER "cmd1" "cmd2" ... outfile
```

When the first argument is `here_doc`, no input file is opened: the first
command reads `pipechain`'s own standard input, and the output file is
appended to instead of truncated.

## Library

```python
from pipechain.pipeline import run_pipeline

statuses = run_pipeline(["grep Hello", "wc -l"], "infile.txt", "outfile.txt")
```

`run_pipeline(commands, infile, outfile, here_doc=False, env=None)` returns
the exit status of every command, in order. A command that could not be
started has status 127, or 126 when it was found but could not be executed.
`env` is a mapping or a sequence of `NAME=VALUE` strings; it is used both for
the `PATH` lookup and as the environment of the commands. `None` means the
current process environment.

`pipechain.pipeline` also provides:

- `Pipeline(commands, env)` with `run(stdin, stdout)`, which takes file
  descriptors, file objects or `None` (inherit the current stream) for the two
  ends and returns the exit statuses;
- `open_input(path)` and `open_output(path, append)`, which open the two files
  as binary file objects;
- the exceptions `PipelineError`, `InfileError` and `OutfileError`, the last
  two carrying the offending `path`.

`pipechain.resolve` holds the helpers behind the command lookup:
`parse_command(cmd)` splits a command on spaces (and raises `ValueError` for a
blank one), `search_paths(env)` returns the `PATH` directories or `None`, and
`resolve_command(name, env)` returns the first executable match or the name
unchanged.

The package also carries a few small helpers:

- `pipechain.chars`: ASCII classification (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`), `to_lower`/`to_upper`, C-style `atoi`
  and `itoa`, and byte-wise `strcmp`/`strncmp`;
- `pipechain.strings`: `split`, `strchr`, `strrchr`, `strnstr`, `strtrim`,
  `substr`, `strjoin`, `strlcpy`, `strlcat`, `strmapi` and `striteri`;
- `pipechain.linkedlist`: a singly linked `LinkedList` of `Node`s with
  `push_front`, `push_back`, `last`, `iterate`, `clear` and `map`;
- `pipechain.output`: `put_char`, `put_str`, `put_endl` and `put_nbr` for
  writing to a stream or file descriptor, and a small printf-style formatter,
  `format_string` and `print_format`, supporting `%c %s %d %i %u %x %X %p %%`.

## What it does not do

- In `here_doc` mode the limiter argument is accepted but not used: no
  here-document is collected line by line up to the limiter. The first command
  simply reads standard input until it ends.
- Commands are not parsed by a shell, so quoted arguments containing spaces
  cannot be passed.