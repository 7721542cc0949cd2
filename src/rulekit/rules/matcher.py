"""Criteria matching shared by string and taxonomy rules."""

from typing import Callable, Sequence

from rulekit.models import AggregationMode, ComparisonMode, MatchConfig

_COMPARATORS: dict[ComparisonMode, Callable[[str, str], bool]] = {
  ComparisonMode.FULL_MATCH: lambda value, criterion: value == criterion,
  ComparisonMode.CONTAINS: lambda value, criterion: criterion in value,
  ComparisonMode.STARTS_WITH: lambda value, criterion: value.startswith(criterion),
  ComparisonMode.ENDS_WITH: lambda value, criterion: value.endswith(criterion),
}


def compare(value: str, criterion: str, comparison: ComparisonMode) -> bool:
  """Compare one criterion against a value, ignoring case."""
  return _COMPARATORS[comparison](value.lower(), criterion.lower())


def match(
  value: str,
  criteria: Sequence[str],
  comparison: ComparisonMode,
  aggregation: AggregationMode,
) -> bool:
  """Decide whether a value satisfies a set of criteria.

  Each criterion is compared with `comparison`, then the verdicts are
  reduced with `aggregation`. An empty criteria list follows quantifier
  conventions: ALL and NONE are true, ANY is false.

  Args:
    value: The string being classified.
    criteria: Criterion strings, evaluated in order.
    comparison: Per-criterion comparison.
    aggregation: How verdicts combine.

  Returns:
    The combined verdict.
  """
  verdicts = (compare(value, criterion, comparison) for criterion in criteria)

  if aggregation is AggregationMode.ALL:
    return all(verdicts)
  if aggregation is AggregationMode.ANY:
    return any(verdicts)
  return not any(verdicts)


def match_config(value: str, config: MatchConfig) -> bool:
  """Apply a MatchConfig to a value."""
  return match(value, config.criteria, config.comparison, config.aggregation)
