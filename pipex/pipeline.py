"""Argument handling and execution of a chain of piped commands."""

from __future__ import annotations

import enum
import os
import subprocess
import sys
import tempfile
from collections.abc import Mapping, Sequence
from contextlib import ExitStack
from dataclasses import dataclass
from typing import TextIO, Union

from pipex.commands import find_command_path, parse_cmd
from pipex.heredoc import read_heredoc

HERE_DOC_KEYWORD = "here_doc"
MIN_ARGC = 5
FILE_MODE = 0o644
EXIT_FAILURE = 1
EXIT_NOT_FOUND = 127

_Outcome = Union[int, "subprocess.Popen[bytes]"]


class UsageError(Exception):
    """Raised when the command line has too few arguments."""


class Mode(enum.Enum):
    """Where the first command takes its input from."""

    NORMAL = "normal"
    HERE_DOC = "here_doc"


@dataclass(frozen=True)
class PipexConfig:
    """A parsed command line."""

    program_name: str
    mode: Mode
    commands: tuple[str, ...]
    outfile: str
    infile: str | None = None
    limiter: str | None = None

    def command_strings(self) -> list[str]:
        """Return the command strings in pipeline order."""
        return list(self.commands)


def usage_text(program_name: str) -> str:
    """Return the usage message for ``program_name``."""
    return (
        "Usage:\n"
        f"Normal: {program_name} infile cmd1 cmd2 ... cmdN outfile\n"
        f"here_doc: {program_name} here_doc LIMITER cmd1 cmd2 ... cmdN outfile\n"
    )


def parse_args(argv: Sequence[str]) -> PipexConfig:
    """Build a configuration from a full argument vector, program name first.

    Raises UsageError when fewer than five arguments are given.
    """
    program_name = argv[0] if argv else "pipex"
    if len(argv) < MIN_ARGC:
        raise UsageError(usage_text(program_name))
    if argv[1] == HERE_DOC_KEYWORD:
        return PipexConfig(
            program_name=program_name,
            mode=Mode.HERE_DOC,
            commands=tuple(argv[3:-1]),
            outfile=argv[-1],
            limiter=argv[2],
        )
    return PipexConfig(
        program_name=program_name,
        mode=Mode.NORMAL,
        commands=tuple(argv[2:-1]),
        outfile=argv[-1],
        infile=argv[1],
    )


def _report(name: str, error: OSError) -> None:
    print(f"{name}: {error.strerror or error}", file=sys.stderr)


def _open_reporting(path: str, flags: int) -> int | None:
    """Open ``path``; on failure print the reason and return None."""
    try:
        return os.open(path, flags, FILE_MODE)
    except OSError as error:
        _report(path, error)
        return None


def _launch(
    command: str,
    stdin_fd: int | None,
    stdout_fd: int | None,
    env: dict[str, str],
) -> _Outcome:
    """Start one command, or return the exit status it would have had."""
    args = parse_cmd(command)
    if not args:
        return 0
    path = find_command_path(args[0], env)
    if path is None:
        print(f"Command not found: {args[0]}", file=sys.stderr)
        return EXIT_NOT_FOUND
    try:
        return subprocess.Popen(
            args, executable=path, stdin=stdin_fd, stdout=stdout_fd, env=env
        )
    except OSError as error:
        _report("execve", error)
        return EXIT_FAILURE


def _status(outcome: _Outcome, previous: int) -> int:
    if isinstance(outcome, int):
        return outcome
    code = outcome.wait()
    # A command killed by a signal leaves the previous status in place.
    return code if code >= 0 else previous


def run_pipeline(
    config: PipexConfig,
    env: Mapping[str, str] | None = None,
    stdin: TextIO | None = None,
    prompt_stream: TextIO | None = None,
) -> int:
    """Run the configured commands connected by pipes and return the exit status.

    The status is that of the last command, or 1 when the output file could
    not be opened.
    """
    environment = dict(os.environ if env is None else env)
    commands = config.command_strings()
    if not commands:
        return EXIT_FAILURE
    outcomes: list[_Outcome] = []

    with ExitStack() as stack:

        def own(fd: int | None) -> int | None:
            if fd is not None:
                stack.callback(os.close, fd)
            return fd

        if config.mode is Mode.HERE_DOC:
            outfile_fd = own(
                _open_reporting(config.outfile, os.O_CREAT | os.O_WRONLY | os.O_APPEND)
            )
            document = read_heredoc(config.limiter, stdin, prompt_stream)
            buffer = stack.enter_context(tempfile.TemporaryFile())
            buffer.write(os.fsencode(document))
            buffer.flush()
            buffer.seek(0)
            first_input: int | None = buffer.fileno()
        else:
            first_input = own(_open_reporting(config.infile or "", os.O_RDONLY))
            outfile_fd = own(
                _open_reporting(config.outfile, os.O_CREAT | os.O_WRONLY | os.O_TRUNC)
            )

        links: list[tuple[int, int]] = []
        for _ in commands[1:]:
            read_end, write_end = os.pipe()
            own(read_end)
            own(write_end)
            links.append((read_end, write_end))

        sys.stdout.flush()
        last = len(commands) - 1
        for position, command in enumerate(commands):
            if position == 0:
                if first_input is None:
                    outcomes.append(EXIT_FAILURE)
                    continue
                stdout_fd = links[0][1] if links else None
                outcomes.append(_launch(command, first_input, stdout_fd, environment))
            elif position == last:
                if outfile_fd is None:
                    outcomes.append(EXIT_FAILURE)
                    continue
                outcomes.append(
                    _launch(command, links[position - 1][0], outfile_fd, environment)
                )
            else:
                outcomes.append(
                    _launch(
                        command,
                        links[position - 1][0],
                        links[position][1],
                        environment,
                    )
                )
        outfile_failed = outfile_fd is None

    last_status = 0
    for outcome in outcomes:
        last_status = _status(outcome, last_status)
    return EXIT_FAILURE if outfile_failed else last_status


def main(argv: Sequence[str] | None = None) -> int:
    """Run pipex on a full argument vector (program name first)."""
    arguments = list(sys.argv if argv is None else argv)
    try:
        config = parse_args(arguments)
    except UsageError as error:
        sys.stderr.write(str(error))
        return EXIT_FAILURE
    try:
        return run_pipeline(config)
    except OSError as error:
        _report("Error", error)
        return EXIT_FAILURE


if __name__ == "__main__":
    raise SystemExit(main())