"""Evaluation orchestration for the CLI."""

from datetime import datetime
from pathlib import Path
from typing import Any

from rulekit.config import Settings, load_config, load_rules
from rulekit.errors import RuleTypeMismatchError
from rulekit.models import Evaluation, RuleListing
from rulekit.rules import RulesManager


def coerce_value(raw: str, input_type: Any) -> Any:
  """Convert a command-line string to a rule's declared input type.

  Supports str, int and ISO-8601 datetime.

  Raises:
    RuleTypeMismatchError: If the string cannot be read as `input_type`.
  """
  if input_type is str:
    return raw

  try:
    if input_type is int:
      return int(raw)
    if input_type is datetime:
      return datetime.fromisoformat(raw)
  except ValueError as e:
    raise RuleTypeMismatchError(
      f"Cannot read {raw!r} as {input_type.__name__}"
    ) from e

  raise RuleTypeMismatchError(f"Unsupported command-line input type: {input_type!r}")


class RuleEvaluator:
  """Evaluates rules from a loaded RulesManager by name."""

  def __init__(self, manager: RulesManager):
    self.manager = manager

  def evaluate(self, name: str, raw_value: str) -> Evaluation:
    """Evaluate a rule, converting the raw value to its input type."""
    signature = self.manager.get_signature(name)
    value = coerce_value(raw_value, signature.input_type)
    result = self.manager.evaluate(name, signature.input_type, signature.output_type, value)
    return Evaluation(rule=name, signature=signature, value=value, result=result)

  def listing(self) -> RuleListing:
    """All rules with their declared types."""
    return RuleListing(rules=[
      (name, self.manager.get_signature(name)) for name in self.manager.names()
    ])


def _load_evaluator(settings: Settings, rules_path: Path | None) -> RuleEvaluator:
  path = rules_path or Path(settings.rules_file)
  return RuleEvaluator(load_rules(path))


def run_evaluation(
  name: str,
  raw_value: str,
  rules_path: Path | None = None,
  settings: Settings | None = None,
) -> Evaluation:
  """Load rules and evaluate one of them."""
  settings = settings or load_config()
  return _load_evaluator(settings, rules_path).evaluate(name, raw_value)


def run_listing(
  rules_path: Path | None = None,
  settings: Settings | None = None,
) -> RuleListing:
  """Load rules and list them."""
  settings = settings or load_config()
  return _load_evaluator(settings, rules_path).listing()
