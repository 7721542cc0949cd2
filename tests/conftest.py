"""Pytest fixtures."""

from datetime import datetime

import pytest
from rulekit.models import AggregationMode, ComparisonMode
from rulekit.rules import (
  DateTimeRule,
  NumberRule,
  RulesManager,
  StringRule,
  TaxonomyRule,
  TaxonomyRuleMulti,
)
from rulekit.rules.functions import greater_than, threshold_buckets, weekend_or_weekday

RULES_YAML = """
rules:
  - name: DomainCheck
    kind: string
    criteria: [google.com, microsoft.com]
    comparison: full_match
    match: any
  - name: ColorGrade
    kind: number
    buckets: [[50, red], [85, yellow]]
    default: green
  - name: WeekendCheck
    kind: datetime
  - name: Taxonomy
    kind: taxonomy
    sub_rules:
      - {criteria: [red, blue, green], match: any, comparison: contains, result: color}
      - {criteria: [bmw, audi, merc], match: any, comparison: starts_with, result: car brands}
  - name: Taxonomy2
    kind: taxonomy_multi
    sub_rules:
      - {criteria: [red, blue, green], match: any, comparison: contains, result: color}
      - {criteria: [square, triangle], match: all, comparison: full_match, result: shape}
      - {criteria: [bmw, audi, merc], match: any, comparison: starts_with, result: car brands}
"""


def _add_sample_sub_rules(rule: TaxonomyRule | TaxonomyRuleMulti) -> None:
  rule.add_sub_rule(
    ["red", "blue", "green"], AggregationMode.ANY, "color", ComparisonMode.CONTAINS
  )
  rule.add_sub_rule(
    ["square", "triangle"], AggregationMode.ALL, "shape", ComparisonMode.FULL_MATCH
  )
  rule.add_sub_rule(
    ["bmw", "audi", "merc"], AggregationMode.ANY, "car brands", ComparisonMode.STARTS_WITH
  )


@pytest.fixture
def taxonomy_rule() -> TaxonomyRule:
  rule = TaxonomyRule("Taxonomy")
  _add_sample_sub_rules(rule)
  return rule


@pytest.fixture
def taxonomy_multi_rule() -> TaxonomyRuleMulti:
  rule = TaxonomyRuleMulti("Taxonomy2")
  _add_sample_sub_rules(rule)
  return rule


@pytest.fixture
def manager(
  taxonomy_rule: TaxonomyRule,
  taxonomy_multi_rule: TaxonomyRuleMulti,
) -> RulesManager:
  manager = RulesManager()
  manager.add_rule(StringRule(
    "DomainCheck",
    ["google.com", "microsoft.com"],
    ComparisonMode.FULL_MATCH,
    AggregationMode.ANY,
  ))
  manager.add_rule(NumberRule(
    "ColorGrade",
    threshold_buckets([(50, "red"), (85, "yellow")], "green"),
    str,
  ))
  manager.add_rule(NumberRule("GreaterThan50", greater_than(50), bool))
  manager.add_rule(DateTimeRule("WeekendCheck", weekend_or_weekday()))
  manager.add_rule(taxonomy_rule)
  manager.add_rule(taxonomy_multi_rule)
  return manager


@pytest.fixture
def saturday() -> datetime:
  return datetime(2024, 6, 15, 10, 30)


@pytest.fixture
def rules_file(tmp_path):
  path = tmp_path / "rules.yaml"
  path.write_text(RULES_YAML)
  return path
