# pipex

`pipex` runs two commands connected by a pipe. The first command reads its
input from a file, and the second command's output goes to a file. It
behaves like this shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

## Usage

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

Exactly four arguments are required. With any other count, `pipex` prints
`Error: usage: infile cmd1 cmd2 outfile` to standard error and exits with
status 1.

Example:

```sh
pipex input.txt "grep error" "wc -l" count.txt
```

Details:

- The input file is opened for reading. If it cannot be opened, `pipex`
  reports the error on standard error and exits with status 1. In that case
  no command runs and the output file is not touched.
- The output file is created if it does not exist and truncated if it does.
  New files get mode `0644`. If it cannot be opened, the error is reported
  and `pipex` exits with status 1.
- A command string is split on spaces and empty pieces are dropped. There is
  no quoting and no shell expansion.
- The program name is looked up as `/bin/<name>` first and then as
  `/usr/bin/<name>`. `PATH` is not searched. If neither candidate is
  executable, `Error: command not found: <name>: <reason>` is written to
  standard error. That command does not run, and the other command still
  runs. A first command that cannot run leaves the second command with empty
  input.
- Once both files are open, `pipex` exits with status 0. This holds whatever
  the commands themselves return.

## Library use

The pipeline can also be run from Python:

```python
from pipex.pipeline import run_pipeline

status1, status2 = run_pipeline("input.txt", "grep error", "wc -l", "count.txt")
```

`run_pipeline(infile, cmd1, cmd2, outfile, env=None)` returns the exit status
of each command. A command that could not be started counts as `1`. Set `env`
to a mapping to give the commands that environment; with `None` they inherit
the current one. If a file cannot be opened, it raises
`pipex.pipeline.PipexError`.

The other parts of `pipex.pipeline` are:

- `check_args(args)` raises `UsageError`, a subclass of `PipexError`, unless
  exactly four arguments are given.
- `open_infile(path)` and `open_outfile(path)` open the two files and raise
  `PipexError` on failure.
- `main(argv=None)` is the command entry point and returns the exit status.

`pipex.resolve` provides `split_command(arg)` and
`find_executable(name, prefixes)`. By default `prefixes` is `("/bin/",
"/usr/bin/")`. When nothing matches, `find_executable` raises
`CommandNotFoundError`.

`pipex.report` provides `format_message(template, value)` and
`report(template, value=None, stream=None)`. `format_message` replaces each
two-character `%` directive with the value, and a `None` value appears as
`(null)`. `report` writes the formatted message to standard error by default
and returns the text it wrote.

The package also has small helper modules:

- `pipex.chars`: character classes, case conversion, `atoi` and `itoa`.
- `pipex.search`: character and substring search and string comparison.
- `pipex.strops`: bounded copy and concatenation, substrings, joining,
  trimming, splitting and indexed mapping.
- `pipex.memory`: operations on byte buffers.
- `pipex.linked`: a singly linked list, made of `LinkedList` and `Node`.

## Running the tests

```sh
pip install ".[test]"
pytest
```