"""Reusable mapping functions for numeric and temporal rules."""

from datetime import datetime
from typing import Callable, Sequence, TypeVar

from rulekit.errors import InvalidRuleConfigurationError

L = TypeVar("L")

_WEEKDAY_NAMES = (
  "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)


def threshold_buckets(
  bounds: Sequence[tuple[int, L]],
  default: L | None,
) -> Callable[[int], L]:
  """Build a total int -> label mapping from inclusive upper bounds.

  `threshold_buckets([(50, "red"), (85, "yellow")], "green")` maps
  values <= 50 to "red", 51..85 to "yellow" and everything above to
  "green".

  Args:
    bounds: (upper_bound_inclusive, label) pairs, strictly ascending.
    default: Label for values above the last bound.

  Returns:
    The mapping function.

  Raises:
    InvalidRuleConfigurationError: If bounds are not strictly ascending
      or no default is given (the mapping would not be total).
  """
  if default is None:
    raise InvalidRuleConfigurationError(
      "Bucketing needs a default label for values above the last bound"
    )

  ordered = list(bounds)
  for (prev, _), (cur, _) in zip(ordered, ordered[1:]):
    if cur <= prev:
      raise InvalidRuleConfigurationError(
        f"Bucket bounds must be strictly ascending: {prev} then {cur}"
      )

  def _bucket(value: int) -> L:
    for upper, label in ordered:
      if value <= upper:
        return label
    return default

  return _bucket


def greater_than(limit: int) -> Callable[[int], bool]:
  """Return a predicate true for values strictly above `limit`."""
  return lambda value: value > limit


def weekend_or_weekday(
  weekend_label: str = "Weekend",
  weekday_label: str = "Weekday",
) -> Callable[[datetime], str]:
  """Classify a timestamp as weekend (Saturday/Sunday) or weekday."""
  def _classify(value: datetime) -> str:
    return weekend_label if value.weekday() >= 5 else weekday_label

  return _classify


def day_of_week_name() -> Callable[[datetime], str]:
  """Return the English day name of a timestamp."""
  return lambda value: _WEEKDAY_NAMES[value.weekday()]
