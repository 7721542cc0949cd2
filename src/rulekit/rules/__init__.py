"""Typed rule evaluation engine."""

from rulekit.rules.base import Rule
from rulekit.rules.kinds import DateTimeRule, NumberRule, StringRule
from rulekit.rules.manager import RulesManager
from rulekit.rules.matcher import match
from rulekit.rules.taxonomy import TaxonomyRule, TaxonomyRuleMulti

__all__ = [
  "DateTimeRule",
  "NumberRule",
  "Rule",
  "RulesManager",
  "StringRule",
  "TaxonomyRule",
  "TaxonomyRuleMulti",
  "match",
]
