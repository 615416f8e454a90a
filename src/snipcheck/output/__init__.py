"""Output formatting."""

from snipcheck.output.diff import DiffLine, LineChange, diff_lines
from snipcheck.output.formatter import (
  JsonFormatter,
  MarkdownFormatter,
  OutputFormatter,
  TerminalFormatter,
  get_formatter,
)

__all__ = [
  "DiffLine",
  "JsonFormatter",
  "LineChange",
  "MarkdownFormatter",
  "OutputFormatter",
  "TerminalFormatter",
  "diff_lines",
  "get_formatter",
]
