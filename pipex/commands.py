"""Command-line splitting and executable lookup along PATH."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping

MAX_ARGS = 63
MAX_PATH_ENTRIES = 63


def _tokens(text: str, separator: str, limit: int) -> list[str]:
    """Split on ``separator``, dropping empty pieces, keeping at most ``limit``."""
    return [piece for piece in text.split(separator) if piece][:limit]


def parse_cmd(cmd: str | None) -> list[str]:
    """Split a command string on spaces into an argument list.

    Runs of spaces count as one separator; no quoting is recognised.
    At most 63 arguments are kept. An empty or missing command gives [].
    """
    if not cmd:
        return []
    return _tokens(cmd, " ", MAX_ARGS)


def find_path_line(env: Mapping[str, str] | None) -> str | None:
    """Return the value of PATH in ``env``, or None if it is not set."""
    if env is None:
        return None
    return env.get("PATH")


def get_paths(env: Mapping[str, str] | None) -> list[str] | None:
    """Return the directories listed in PATH, empty entries skipped.

    At most 63 directories are kept. Returns None when PATH is not set.
    """
    path_line = find_path_line(env)
    if path_line is None:
        return None
    return _tokens(path_line, ":", MAX_PATH_ENTRIES)


def create_full_path(base_path: str, cmd: str) -> str:
    """Join a directory and a command name with a single slash."""
    return f"{base_path}/{cmd}"


def _is_executable(path: str) -> bool:
    return os.access(path, os.F_OK | os.X_OK)


def check_path_access(cmd: str | None, paths: Iterable[str] | None) -> str | None:
    """Return the first ``dir/cmd`` that exists and is executable, else None."""
    if not cmd or paths is None:
        return None
    for directory in paths:
        candidate = create_full_path(directory, cmd)
        if _is_executable(candidate):
            return candidate
    return None


def find_command_path(cmd: str | None, env: Mapping[str, str] | None) -> str | None:
    """Locate an executable for ``cmd``.

    ``cmd`` itself is used when it names an executable file (relative to the
    current directory or absolute); otherwise each PATH directory is tried
    in order. Returns None when nothing is found or ``env`` is None.
    """
    if not cmd or env is None:
        return None
    if _is_executable(cmd):
        return cmd
    paths = get_paths(env)
    if paths is None:
        return None
    return check_path_access(cmd, paths)