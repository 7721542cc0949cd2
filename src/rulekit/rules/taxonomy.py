"""Taxonomy rules built from ordered sub-rules."""

from typing import Any, Iterable

from rulekit.errors import InvalidRuleConfigurationError
from rulekit.models import AggregationMode, ComparisonMode, SubRule
from rulekit.rules.base import Rule
from rulekit.rules.matcher import match


def _matches(value: str, sub_rule: SubRule) -> bool:
  return match(value, sub_rule.criteria, sub_rule.comparison, sub_rule.aggregation)


class _TaxonomyBase(Rule[str, Any]):
  """Holds the append-only sub-rule list shared by both variants."""

  def __init__(self, name: str, output_type: Any):
    super().__init__(name, str, output_type)
    self._sub_rules: list[SubRule] = []

  @property
  def sub_rules(self) -> tuple[SubRule, ...]:
    """Sub-rules in registration (and evaluation) order."""
    return tuple(self._sub_rules)

  def add_sub_rule(
    self,
    criteria: Iterable[str],
    match: AggregationMode,
    result: str,
    comparison: ComparisonMode,
  ) -> SubRule:
    """Append a sub-rule.

    Args:
      criteria: Criterion strings for this sub-rule.
      match: Aggregation over the criteria.
      result: Label reported when the sub-rule matches.
      comparison: Per-criterion comparison.

    Returns:
      The stored SubRule.

    Raises:
      InvalidRuleConfigurationError: If the result label is empty.
    """
    if not result:
      raise InvalidRuleConfigurationError(
        f"Taxonomy rule '{self.name}' sub-rule needs a non-empty result label"
      )
    sub_rule = SubRule(
      criteria=tuple(criteria),
      aggregation=match,
      comparison=comparison,
      result=result,
    )
    self._sub_rules.append(sub_rule)
    return sub_rule


class TaxonomyRule(_TaxonomyBase):
  """First matching sub-rule wins.

  Sub-rules after the first match are not evaluated. Returns None when
  no sub-rule matches.
  """

  def __init__(self, name: str):
    super().__init__(name, str)

  def evaluate(self, value: str) -> str | None:
    for sub_rule in self._sub_rules:
      if _matches(value, sub_rule):
        return sub_rule.result
    return None


class TaxonomyRuleMulti(_TaxonomyBase):
  """Collects the label of every matching sub-rule, in registration order."""

  def __init__(self, name: str):
    super().__init__(name, list[str])

  def evaluate(self, value: str) -> list[str]:
    return [
      sub_rule.result for sub_rule in self._sub_rules
      if _matches(value, sub_rule)
    ]
