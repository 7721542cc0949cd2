"""Core domain models for rule evaluation."""

from dataclasses import dataclass
from enum import Enum
from types import GenericAlias
from typing import Any, Sequence


class ComparisonMode(Enum):
  """How a single criterion is compared against a value.

  All comparisons are case-insensitive.
  """

  FULL_MATCH = "full_match"
  CONTAINS = "contains"
  STARTS_WITH = "starts_with"
  ENDS_WITH = "ends_with"


class AggregationMode(Enum):
  """How per-criterion verdicts combine into one verdict."""

  ALL = "all"
  ANY = "any"
  NONE = "none"


@dataclass(frozen=True)
class MatchConfig:
  """Criteria plus the comparison and aggregation applied to them."""

  criteria: tuple[str, ...]
  comparison: ComparisonMode
  aggregation: AggregationMode


@dataclass(frozen=True)
class SubRule:
  """One entry of a taxonomy rule.

  Matching reuses the same vocabulary as MatchConfig; `result` is the
  label reported when the sub-rule matches.
  """

  criteria: tuple[str, ...]
  aggregation: AggregationMode
  comparison: ComparisonMode
  result: str


@dataclass(frozen=True)
class RuleSignature:
  """Declared input and output types of a rule."""

  input_type: Any
  output_type: Any

  def describe(self) -> str:
    """Readable form, e.g. 'str -> bool'."""
    return f"{type_name(self.input_type)} -> {type_name(self.output_type)}"


@dataclass(frozen=True)
class Evaluation:
  """Outcome of evaluating one rule against one value."""

  rule: str
  signature: RuleSignature
  value: Any
  result: Any


@dataclass(frozen=True)
class RuleListing:
  """Registered rules, in registration order."""

  rules: Sequence[tuple[str, RuleSignature]]


def type_name(tp: Any) -> str:
  """Short readable name of a declared type, e.g. 'int' or 'list[str]'."""
  if isinstance(tp, type) and not isinstance(tp, GenericAlias):
    return tp.__name__
  return repr(tp)
