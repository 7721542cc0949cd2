"""CLI interface using Typer."""

import logging
import os
import traceback
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from rulekit import __version__
from rulekit.config import load_config
from rulekit.errors import RulekitError
from rulekit.evaluation import run_evaluation, run_listing
from rulekit.notify import notifier_from_settings
from rulekit.output import get_formatter

app = typer.Typer(
  name="rulekit",
  help="Typed rule evaluation engine",
  no_args_is_help=True,
)

console = Console()
_err_console = Console(stderr=True)


def _is_debug() -> bool:
  return os.environ.get("RULEKIT_DEBUG", "").lower() in ("1", "true", "yes")


def _configure_logging(level: str) -> None:
  logging.basicConfig(
    level=level.upper(),
    format="%(message)s",
    handlers=[RichHandler(console=_err_console, show_path=False)],
    force=True,
  )


def version_callback(value: bool) -> None:
  if value:
    console.print(f"rulekit {__version__}")
    raise typer.Exit()


@app.callback()
def main(
  version: bool = typer.Option(None, "--version", "-v", callback=version_callback, is_eager=True),
) -> None:
  """Evaluate named classification and decision rules."""


def _fail(error: Exception, debug: bool) -> None:
  console.print(f"[red]Error:[/red] {escape(str(error))}")
  if debug or _is_debug():
    console.print("\n[dim]Traceback:[/dim]")
    console.print(traceback.format_exc())
  raise typer.Exit(1) from None


@app.command("list")
def list_command(
  rules: Path = typer.Option(None, "--rules", "-r", help="Rules YAML file"),
  config: Path = typer.Option(None, "--config", "-c", help="Config file path"),
  format_type: str = typer.Option(None, "--format", help="Output format: terminal, json"),
  debug: bool = typer.Option(False, "--debug", "-d", help="Show full traceback on errors"),
) -> None:
  """List registered rules and their types."""
  try:
    settings = load_config(config)
    _configure_logging("DEBUG" if debug else settings.log_level)
    listing = run_listing(rules_path=rules, settings=settings)
    output = get_formatter(format_type or settings.output_format).format_listing(listing)
    if output:
      console.print(output, markup=False, soft_wrap=True)
  except (RulekitError, FileNotFoundError, ValueError) as e:
    _fail(e, debug)


@app.command("evaluate")
def evaluate_command(
  name: str = typer.Argument(..., help="Rule name"),
  value: str = typer.Argument(..., help="Input value (int, ISO-8601 datetime or text)"),
  rules: Path = typer.Option(None, "--rules", "-r", help="Rules YAML file"),
  config: Path = typer.Option(None, "--config", "-c", help="Config file path"),
  format_type: str = typer.Option(None, "--format", help="Output format: terminal, json"),
  debug: bool = typer.Option(False, "--debug", "-d", help="Show full traceback on errors"),
) -> None:
  """Evaluate a rule against a value."""
  try:
    settings = load_config(config)
    _configure_logging("DEBUG" if debug else settings.log_level)
    evaluation = run_evaluation(name, value, rules_path=rules, settings=settings)
    output = get_formatter(format_type or settings.output_format).format_evaluation(evaluation)
    if output:
      console.print(output, markup=False, soft_wrap=True)
  except (RulekitError, FileNotFoundError, ValueError) as e:
    _fail(e, debug)


@app.command("notify")
def notify_command(
  to: str = typer.Argument(..., help="Recipient address"),
  subject: str = typer.Option(..., "--subject", "-s", help="Email subject"),
  template: int = typer.Option(0, "--template", "-t", help="Template ID"),
  fields: Optional[list[str]] = typer.Option(
    None, "--set", help="Template placeholder as key=value (repeatable)"
  ),
  sender: str = typer.Option(None, "--from", help="Sender address (defaults to config)"),
  config: Path = typer.Option(None, "--config", "-c", help="Config file path"),
  debug: bool = typer.Option(False, "--debug", "-d", help="Show full traceback on errors"),
) -> None:
  """Send a templated notification email."""
  try:
    settings = load_config(config)
    _configure_logging("DEBUG" if debug else settings.log_level)
    placeholders = _parse_fields(fields or [])
    result = notifier_from_settings(settings).send_template(
      sender, to, subject, template, placeholders
    )
  except (RulekitError, FileNotFoundError, ValueError) as e:
    _fail(e, debug)
  else:
    if not result.ok:
      console.print(f"[red]Error:[/red] Failed to send email: {result.error}")
      raise typer.Exit(1)
    console.print(f"[green]Sent[/green] to {to}" + (f" ({result.message_id})" if result.message_id else ""))


def _parse_fields(fields: list[str]) -> dict[str, str]:
  """Parse key=value pairs into a dict."""
  data: dict[str, str] = {}
  for field in fields:
    key, sep, value = field.partition("=")
    if not sep or not key:
      raise ValueError(f"Expected key=value, got '{field}'")
    data[key.strip()] = value
  return data


if __name__ == "__main__":
  app()
