"""Rule definitions loaded from YAML."""

import logging
from pathlib import Path
from typing import Annotated, Any, Literal, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from rulekit.errors import DuplicateRuleNameError, InvalidRuleConfigurationError
from rulekit.models import AggregationMode, ComparisonMode
from rulekit.rules import (
  DateTimeRule,
  NumberRule,
  Rule,
  RulesManager,
  StringRule,
  TaxonomyRule,
  TaxonomyRuleMulti,
)
from rulekit.rules.functions import (
  day_of_week_name,
  greater_than,
  threshold_buckets,
  weekend_or_weekday,
)

logger = logging.getLogger(__name__)


class _Definition(BaseModel):
  model_config = ConfigDict(extra="forbid")

  name: str = Field(min_length=1)


class StringRuleDefinition(_Definition):
  kind: Literal["string"]
  criteria: list[str]
  comparison: ComparisonMode = ComparisonMode.FULL_MATCH
  match: AggregationMode = AggregationMode.ANY


class NumberRuleDefinition(_Definition):
  """Either threshold buckets (str result) or a greater-than test (bool)."""

  kind: Literal["number"]
  buckets: list[tuple[int, str]] | None = None
  default: str | None = None
  greater_than: int | None = None

  @model_validator(mode="after")
  def _one_mapping(self) -> "NumberRuleDefinition":
    if (self.buckets is None) == (self.greater_than is None):
      raise ValueError("number rule needs exactly one of 'buckets' or 'greater_than'")
    return self


class DateTimeRuleDefinition(_Definition):
  kind: Literal["datetime"]
  classifier: Literal["weekend", "day_name"] = "weekend"
  weekend_label: str = "Weekend"
  weekday_label: str = "Weekday"


class SubRuleDefinition(BaseModel):
  model_config = ConfigDict(extra="forbid")

  criteria: list[str]
  match: AggregationMode = AggregationMode.ANY
  comparison: ComparisonMode = ComparisonMode.FULL_MATCH
  result: str


class TaxonomyRuleDefinition(_Definition):
  kind: Literal["taxonomy", "taxonomy_multi"]
  sub_rules: list[SubRuleDefinition] = Field(default_factory=list)


RuleDefinition = Annotated[
  Union[
    StringRuleDefinition,
    NumberRuleDefinition,
    DateTimeRuleDefinition,
    TaxonomyRuleDefinition,
  ],
  Field(discriminator="kind"),
]


class RulesFile(BaseModel):
  """Top-level layout of a rules file."""

  rules: list[RuleDefinition] = Field(default_factory=list)


def build_rule(definition: RuleDefinition) -> Rule[Any, Any]:
  """Turn one validated definition into a Rule."""
  if isinstance(definition, StringRuleDefinition):
    return StringRule(
      definition.name,
      definition.criteria,
      definition.comparison,
      definition.match,
    )

  if isinstance(definition, NumberRuleDefinition):
    if definition.greater_than is not None:
      return NumberRule(definition.name, greater_than(definition.greater_than), bool)
    mapping = threshold_buckets(definition.buckets or [], definition.default)
    return NumberRule(definition.name, mapping, str)

  if isinstance(definition, DateTimeRuleDefinition):
    if definition.classifier == "day_name":
      return DateTimeRule(definition.name, day_of_week_name())
    return DateTimeRule(
      definition.name,
      weekend_or_weekday(definition.weekend_label, definition.weekday_label),
    )

  taxonomy = (
    TaxonomyRuleMulti(definition.name)
    if definition.kind == "taxonomy_multi"
    else TaxonomyRule(definition.name)
  )
  for sub in definition.sub_rules:
    taxonomy.add_sub_rule(sub.criteria, sub.match, sub.result, sub.comparison)
  return taxonomy


def parse_rules(data: dict, manager: RulesManager | None = None) -> RulesManager:
  """Validate a rules mapping and register every rule.

  Either every rule is registered or none is: all rules are built and
  their names checked before the manager is touched.

  Args:
    data: Parsed YAML content (a mapping with a 'rules' list).
    manager: Manager to add to. A new one is created if omitted.

  Returns:
    The populated manager.

  Raises:
    InvalidRuleConfigurationError: If a definition is invalid.
    DuplicateRuleNameError: If two definitions share a name, or a name is
      already registered in `manager`.
  """
  try:
    rules_file = RulesFile.model_validate(data)
  except ValidationError as e:
    raise InvalidRuleConfigurationError(f"Invalid rule definitions:\n{e}") from e

  manager = manager if manager is not None else RulesManager()
  rules = [build_rule(definition) for definition in rules_file.rules]

  seen: set[str] = set()
  for rule in rules:
    if rule.name in seen or rule.name in manager:
      raise DuplicateRuleNameError(f"Rule '{rule.name}' already exists")
    seen.add(rule.name)

  for rule in rules:
    manager.add_rule(rule)
  return manager


def load_rules(path: Path, manager: RulesManager | None = None) -> RulesManager:
  """Load rules from a YAML file."""
  if not path.exists():
    raise FileNotFoundError(f"Rules file not found: {path}")

  with open(path) as f:
    data = yaml.safe_load(f) or {}

  if not isinstance(data, dict):
    raise InvalidRuleConfigurationError(f"Rules file must contain a mapping: {path}")

  manager = parse_rules(data, manager)
  logger.info("Loaded %d rules from %s", len(manager), path)
  return manager
