"""Rule registry with type-checked evaluation."""

import logging
from types import GenericAlias
from typing import Any, Iterator

from rulekit.errors import DuplicateRuleNameError, RuleNotFoundError, RuleTypeMismatchError
from rulekit.models import RuleSignature, type_name
from rulekit.rules.base import Rule

logger = logging.getLogger(__name__)


class RulesManager:
  """Stores rules of different types under unique names.

  Rules are add-only: there is no removal or replacement. Evaluation
  never mutates the registry, so a fully built manager can be shared by
  many readers. Registration is not synchronized; add every rule before
  evaluation starts.

  Example:
    manager = RulesManager()
    manager.add_rule(StringRule("DomainCheck", ["google.com"],
                                ComparisonMode.FULL_MATCH, AggregationMode.ANY))
    manager.evaluate("DomainCheck", str, bool, "Google.com")  # True
  """

  def __init__(self) -> None:
    self._rules: dict[str, Rule[Any, Any]] = {}

  def add_rule(self, rule: Rule[Any, Any]) -> None:
    """Register a rule under its name.

    Raises:
      DuplicateRuleNameError: If the name is already registered. The
        existing rule is left untouched.
    """
    if rule.name in self._rules:
      raise DuplicateRuleNameError(f"Rule '{rule.name}' already exists")

    self._rules[rule.name] = rule
    logger.debug("Registered rule %s (%s)", rule.name, rule.signature.describe())

  def evaluate(self, name: str, input_type: Any, output_type: Any, value: Any) -> Any:
    """Evaluate a rule by name.

    The requested types are compared with the rule's declared types
    before the rule runs; a mismatched rule is never invoked.

    Args:
      name: Registered rule name.
      input_type: Type the caller is passing (e.g. str, int, datetime).
      output_type: Type the caller expects back (e.g. bool, list[str]).
      value: The input value.

    Returns:
      The rule's result, unchanged.

    Raises:
      RuleNotFoundError: If no rule has this name.
      RuleTypeMismatchError: If the requested types differ from the
        declared ones, or `value` is not an `input_type`.
    """
    rule = self._get(name)
    requested = RuleSignature(input_type, output_type)

    if requested != rule.signature:
      raise RuleTypeMismatchError(
        f"Rule '{name}' expects {rule.signature.describe()}, "
        f"got {requested.describe()}"
      )
    if not _is_instance(value, rule.input_type):
      raise RuleTypeMismatchError(
        f"Rule '{name}' expects input of type {type_name(rule.input_type)}, "
        f"got {type(value).__name__}"
      )

    result = rule.evaluate(value)
    logger.debug("Evaluated rule %s: %r -> %r", name, value, result)
    return result

  def get_signature(self, name: str) -> RuleSignature:
    """Declared types of a registered rule."""
    return self._get(name).signature

  def names(self) -> list[str]:
    """Registered rule names in registration order."""
    return list(self._rules)

  def __contains__(self, name: object) -> bool:
    return name in self._rules

  def __len__(self) -> int:
    return len(self._rules)

  def __iter__(self) -> Iterator[str]:
    return iter(list(self._rules))

  def _get(self, name: str) -> Rule[Any, Any]:
    rule = self._rules.get(name)
    if rule is None:
      raise RuleNotFoundError(f"Rule '{name}' not found")
    return rule


def _is_instance(value: Any, expected: Any) -> bool:
  """isinstance() that rejects bool for int and checks list[str] as list."""
  if isinstance(expected, GenericAlias):
    expected = expected.__origin__
  if not isinstance(expected, type):
    return True
  if expected is int and isinstance(value, bool):
    return False
  return isinstance(value, expected)
