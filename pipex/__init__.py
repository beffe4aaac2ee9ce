"""Run a chain of commands joined by pipes between an input and an output file."""

__version__ = "0.1.0"
__all__ = ["commands", "heredoc", "pipeline"]