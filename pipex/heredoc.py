"""Interactive here-document reading."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import TextIO

PROMPT = "heredoc> "


def heredoc_lines(
    limiter: str | None,
    stream: TextIO | None = None,
    prompt_stream: TextIO | None = None,
) -> Iterator[str]:
    """Yield here-document lines, each ending in a newline.

    A prompt is written before every read. Reading stops at end of input or
    at a line equal to ``limiter`` once one trailing newline is removed; the
    limiter line itself is not yielded. Nothing is read when ``limiter`` is
    None.
    """
    if limiter is None:
        return
    source = sys.stdin if stream is None else stream
    prompts = sys.stdout if prompt_stream is None else prompt_stream
    while True:
        prompts.write(PROMPT)
        prompts.flush()
        line = source.readline()
        if not line:
            return
        if line.endswith("\n"):
            line = line[:-1]
        if line == limiter:
            return
        yield line + "\n"


def read_heredoc(
    limiter: str | None,
    stream: TextIO | None = None,
    prompt_stream: TextIO | None = None,
) -> str:
    """Read a whole here-document and return it as one string."""
    return "".join(heredoc_lines(limiter, stream, prompt_stream))