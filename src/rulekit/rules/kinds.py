"""Predicate, numeric and temporal rules."""

from datetime import datetime
from typing import Any, Callable, Iterable

from rulekit.models import AggregationMode, ComparisonMode, MatchConfig
from rulekit.rules.base import Rule, R
from rulekit.rules.matcher import match_config


class StringRule(Rule[str, bool]):
  """Boolean rule over a string, driven by one MatchConfig.

  Example:
    StringRule(
      "DomainCheck",
      ["google.com", "microsoft.com"],
      ComparisonMode.FULL_MATCH,
      AggregationMode.ANY,
    )
  """

  def __init__(
    self,
    name: str,
    criteria: Iterable[str],
    comparison: ComparisonMode,
    match: AggregationMode,
  ):
    super().__init__(name, str, bool)
    self._config = MatchConfig(tuple(criteria), comparison, match)

  @property
  def config(self) -> MatchConfig:
    return self._config

  def evaluate(self, value: str) -> bool:
    return match_config(value, self._config)


class NumberRule(Rule[int, R]):
  """Maps an integer to a caller-chosen result type.

  The mapping function must be total over int; use an open-ended last
  bucket (see rulekit.rules.functions.threshold_buckets).
  """

  def __init__(self, name: str, mapping: Callable[[int], R], output_type: Any):
    super().__init__(name, int, output_type)
    self._mapping = mapping

  def evaluate(self, value: int) -> R:
    return self._mapping(value)


class DateTimeRule(Rule[datetime, R]):
  """Maps a timestamp to a result, typically a calendar classification."""

  def __init__(
    self,
    name: str,
    mapping: Callable[[datetime], R],
    output_type: Any = str,
  ):
    super().__init__(name, datetime, output_type)
    self._mapping = mapping

  def evaluate(self, value: datetime) -> R:
    return self._mapping(value)
