import io

from pipex.heredoc import PROMPT, heredoc_lines, read_heredoc


def test_prompt_written_before_reading():
    prompts = io.StringIO()
    assert read_heredoc("EOF", io.StringIO("EOF\n"), prompts) == ""
    assert prompts.getvalue() == "heredoc> "


def test_reads_until_limiter():
    source = io.StringIO("a\nb\nEOF\nc\n")
    prompts = io.StringIO()
    assert read_heredoc("EOF", source, prompts) == "a\nb\n"
    assert prompts.getvalue() == PROMPT * 3
    assert source.read() == "c\n"


def test_stops_at_end_of_input_and_adds_newline():
    prompts = io.StringIO()
    assert read_heredoc("EOF", io.StringIO("a\nb"), prompts) == "a\nb\n"
    assert prompts.getvalue() == PROMPT * 3


def test_limiter_without_trailing_newline():
    assert read_heredoc("END", io.StringIO("x\nEND"), io.StringIO()) == "x\n"


def test_limiter_must_match_whole_line():
    text = "EOFx\n EOF\nEOF\n"
    assert read_heredoc("EOF", io.StringIO(text), io.StringIO()) == "EOFx\n EOF\n"


def test_empty_limiter_ends_at_blank_line():
    assert read_heredoc("", io.StringIO("one\n\ntwo\n"), io.StringIO()) == "one\n"


def test_none_limiter_reads_nothing():
    source = io.StringIO("a\n")
    prompts = io.StringIO()
    assert read_heredoc(None, source, prompts) == ""
    assert prompts.getvalue() == ""
    assert source.read() == "a\n"


def test_generator_yields_lines_lazily():
    source = io.StringIO("first\nsecond\nSTOP\n")
    prompts = io.StringIO()
    lines = heredoc_lines("STOP", source, prompts)
    assert next(lines) == "first\n"
    assert prompts.getvalue() == PROMPT
    assert list(lines) == ["second\n"]
    assert prompts.getvalue() == PROMPT * 3


def test_empty_input():
    prompts = io.StringIO()
    assert list(heredoc_lines("EOF", io.StringIO(""), prompts)) == []
    assert prompts.getvalue() == PROMPT