# pipex

`pipex` connects a series of commands with pipes. The first command reads from
a file, or from a here-document typed on the terminal. The last command writes
into a file. It behaves like the shell constructions shown below.

## Installation

```
pip install .
```

This installs the `pipex` command. You can also run the same entry point with
`python -m pipex.pipeline`.

## Usage

Normal mode:

```
pipex infile "cmd1 args" "cmd2 args" ... "cmdN args" outfile
```

This behaves like:

```
< infile cmd1 args | cmd2 args | ... | cmdN args > outfile
```

The output file is created if it does not exist and truncated if it does. New
files get mode 0644.

Here-document mode:

```
pipex here_doc LIMITER "cmd1 args" ... "cmdN args" outfile
```

This behaves like:

```
cmd1 args << LIMITER | ... | cmdN args >> outfile
```

Before each line is read, a `heredoc> ` prompt is written to standard output.
Input stops at a line equal to `LIMITER` or at end of input. The whole document
is read before any command starts. The output file is opened for appending.

### Details

- Each command string is split on spaces, and runs of spaces count as a single
  separator. No quoting and no shell expansion are done. At most 63 words are
  kept.
- If the command name is itself an executable file, it is run as given. The
  name may be absolute or relative to the current directory. Otherwise each
  directory in `PATH` is tried in order.
- If a command cannot be found, pipex prints `Command not found: NAME` to
  standard error, and that command's status is 127. An empty command produces
  no output, and its status is 0.
- If the input or output file cannot be opened, pipex prints `FILE: reason` to
  standard error.
  - When the input file cannot be opened, the first command is not run.
  - When the output file cannot be opened, the last command is not run and the
    exit status is 1.
- Otherwise the exit status is that of the last command. If a command is killed
  by a signal, it leaves the status of the command before it in place.
- With fewer than four arguments, pipex prints a usage message to standard
  error and the exit status is 1.

## Library use

```python
from pipex.pipeline import parse_args, run_pipeline

config = parse_args(["pipex", "in.txt", "grep foo", "wc -l", "out.txt"])
status = run_pipeline(config)
```

`pipex.pipeline` provides these names:

- `parse_args` returns a `PipexConfig`, or raises `UsageError`.
- `PipexConfig` has a `mode` field, which is a `Mode`: either `NORMAL` or
  `HERE_DOC`.
- `usage_text`
- `run_pipeline`, which accepts an optional environment mapping, an input
  stream for the here-document and a stream for the prompts.
- `main`

`pipex.commands` has the helpers for splitting commands and searching `PATH`:
`parse_cmd`, `find_path_line`, `get_paths`, `create_full_path`,
`check_path_access` and `find_command_path`.

`pipex.heredoc` reads here-documents, with `heredoc_lines` as a generator and
`read_heredoc` returning one string.

## What it does not do

pipex is not a shell. It does not interpret quotes, variables, globs,
redirections or operators inside command strings. It offers no job control and
no interactive session.