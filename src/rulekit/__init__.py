"""rulekit: typed rule evaluation engine."""

from rulekit.errors import (
  DuplicateRuleNameError,
  InvalidRuleConfigurationError,
  RuleNotFoundError,
  RulekitError,
  RuleTypeMismatchError,
)
from rulekit.models import AggregationMode, ComparisonMode, RuleSignature, SubRule
from rulekit.rules import (
  DateTimeRule,
  NumberRule,
  Rule,
  RulesManager,
  StringRule,
  TaxonomyRule,
  TaxonomyRuleMulti,
  match,
)

__version__ = "0.1.0"

__all__ = [
  "AggregationMode",
  "ComparisonMode",
  "DateTimeRule",
  "DuplicateRuleNameError",
  "InvalidRuleConfigurationError",
  "NumberRule",
  "Rule",
  "RuleNotFoundError",
  "RuleSignature",
  "RuleTypeMismatchError",
  "RulekitError",
  "RulesManager",
  "StringRule",
  "SubRule",
  "TaxonomyRule",
  "TaxonomyRuleMulti",
  "match",
]
