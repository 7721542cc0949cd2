"""Output formatting."""

from rulekit.output.formatter import (
  JsonFormatter,
  OutputFormatter,
  TerminalFormatter,
  get_formatter,
)

__all__ = [
  "OutputFormatter",
  "TerminalFormatter",
  "JsonFormatter",
  "get_formatter",
]
