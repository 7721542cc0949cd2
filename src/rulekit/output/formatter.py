"""Output formatting for evaluations and rule listings."""

import json
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from rulekit.models import Evaluation, RuleListing


class OutputFormatter(ABC):
  """Base output formatter."""

  @abstractmethod
  def format_evaluation(self, evaluation: Evaluation) -> str:
    """Format a single evaluation."""
    ...

  @abstractmethod
  def format_listing(self, listing: RuleListing) -> str:
    """Format the registered rules."""
    ...


class TerminalFormatter(OutputFormatter):
  """Rich terminal output formatter."""

  def __init__(self, console: Console | None = None):
    self.console = console or Console()

  def format_evaluation(self, evaluation: Evaluation) -> str:
    self.console.print(Panel(
      self._result_text(evaluation.result),
      title=f"[bold]{escape(evaluation.rule)}[/bold] ({escape(evaluation.signature.describe())})",
      subtitle=escape(f"input: {evaluation.value!r}"),
      border_style="blue",
    ))
    return ""

  def format_listing(self, listing: RuleListing) -> str:
    if not listing.rules:
      self.console.print("[yellow]No rules registered.[/yellow]")
      return ""

    table = Table(show_header=True, header_style="bold")
    table.add_column("Rule", min_width=20)
    table.add_column("Input", width=12)
    table.add_column("Output", width=12)

    for name, signature in listing.rules:
      input_name, output_name = signature.describe().split(" -> ")
      table.add_row(escape(name), escape(input_name), escape(output_name))

    self.console.print(table)
    self.console.print(f"\n[dim]{len(listing.rules)} rule(s)[/dim]")
    return ""

  def _result_text(self, result: Any) -> Text:
    if result is None:
      return Text("no match", style="dim")
    if isinstance(result, bool):
      return Text(str(result), style="green" if result else "red")
    if isinstance(result, list):
      return Text(", ".join(result) if result else "no match", style="" if result else "dim")
    return Text(str(result), style="bold")


class JsonFormatter(OutputFormatter):
  """JSON output formatter."""

  def format_evaluation(self, evaluation: Evaluation) -> str:
    data = {
      "rule": evaluation.rule,
      "signature": evaluation.signature.describe(),
      "value": _jsonable(evaluation.value),
      "result": _jsonable(evaluation.result),
    }
    return json.dumps(data, indent=2)

  def format_listing(self, listing: RuleListing) -> str:
    data = {
      "rules": [
        {"name": name, "signature": signature.describe()}
        for name, signature in listing.rules
      ],
    }
    return json.dumps(data, indent=2)


def _jsonable(value: Any) -> Any:
  if isinstance(value, datetime):
    return value.isoformat()
  return value


def get_formatter(format_type: str) -> OutputFormatter:
  """Get formatter by type name."""
  formatters = {
    "terminal": TerminalFormatter,
    "json": JsonFormatter,
  }
  formatter_class = formatters.get(format_type)
  if not formatter_class:
    raise ValueError(f"Unknown format: {format_type}")
  return formatter_class()
