"""Tests for the rules registry."""

from datetime import datetime
from unittest.mock import Mock

import pytest
from rulekit.errors import (
  DuplicateRuleNameError,
  RuleNotFoundError,
  RuleTypeMismatchError,
)
from rulekit.models import AggregationMode, ComparisonMode, RuleSignature
from rulekit.rules import NumberRule, RulesManager, StringRule


class TestAddRule:
  def test_duplicate_name_rejected(self) -> None:
    manager = RulesManager()
    first = StringRule("X", ["a"], ComparisonMode.CONTAINS, AggregationMode.ANY)
    second = NumberRule("X", lambda n: n, int)
    manager.add_rule(first)

    with pytest.raises(DuplicateRuleNameError, match="'X' already exists"):
      manager.add_rule(second)

    assert len(manager) == 1
    assert manager.evaluate("X", str, bool, "abc") is True

  def test_names_are_case_sensitive(self) -> None:
    manager = RulesManager()
    manager.add_rule(NumberRule("rule", lambda n: n, int))
    manager.add_rule(NumberRule("Rule", lambda n: -n, int))

    assert manager.names() == ["rule", "Rule"]
    assert manager.evaluate("Rule", int, int, 2) == -2

  def test_stores_rule_without_invoking_it(self) -> None:
    mapping = Mock(return_value="x")
    manager = RulesManager()

    manager.add_rule(NumberRule("Lazy", mapping, str))

    mapping.assert_not_called()
    assert "Lazy" in manager


class TestEvaluate:
  def test_evaluates_each_rule_kind(self, manager: RulesManager, saturday: datetime) -> None:
    assert manager.evaluate("DomainCheck", str, bool, "google.com") is True
    assert manager.evaluate("ColorGrade", int, str, 80) == "yellow"
    assert manager.evaluate("GreaterThan50", int, bool, 45) is False
    assert manager.evaluate("WeekendCheck", datetime, str, saturday) == "Weekend"
    assert manager.evaluate("Taxonomy", str, str, "bmw320i") == "car brands"
    assert manager.evaluate("Taxonomy2", str, list[str], "blue bmw") == ["color"]
    assert manager.evaluate("Taxonomy2", str, list[str], "bmw blue") == ["color", "car brands"]

  def test_missing_rule(self, manager: RulesManager) -> None:
    with pytest.raises(RuleNotFoundError, match="'Nope' not found"):
      manager.evaluate("Nope", str, bool, "x")

  def test_type_mismatch_never_invokes_rule(self) -> None:
    predicate = Mock(return_value=True)
    manager = RulesManager()
    manager.add_rule(NumberRule("X", predicate, bool))

    with pytest.raises(RuleTypeMismatchError, match="expects int -> bool"):
      manager.evaluate("X", int, str, 1)
    with pytest.raises(RuleTypeMismatchError):
      manager.evaluate("X", str, bool, 1)

    assert predicate.call_count == 0

  def test_string_rule_requested_as_int_to_str(self, manager: RulesManager) -> None:
    with pytest.raises(RuleTypeMismatchError):
      manager.evaluate("DomainCheck", int, str, 5)

  def test_list_output_must_match_exactly(self, manager: RulesManager) -> None:
    with pytest.raises(RuleTypeMismatchError):
      manager.evaluate("Taxonomy2", str, list, "red")
    with pytest.raises(RuleTypeMismatchError):
      manager.evaluate("Taxonomy2", str, str, "red")

  def test_value_must_match_declared_input(self) -> None:
    mapping = Mock(return_value="x")
    manager = RulesManager()
    manager.add_rule(NumberRule("N", mapping, str))

    with pytest.raises(RuleTypeMismatchError, match="got str"):
      manager.evaluate("N", int, str, "12")
    with pytest.raises(RuleTypeMismatchError, match="got bool"):
      manager.evaluate("N", int, str, True)

    mapping.assert_not_called()

  def test_result_returned_unchanged(self) -> None:
    sentinel = ["a", "b"]
    manager = RulesManager()
    manager.add_rule(NumberRule("Same", lambda n: sentinel, list[str]))

    assert manager.evaluate("Same", int, list[str], 1) is sentinel

  def test_evaluation_is_idempotent(self, manager: RulesManager) -> None:
    first = manager.evaluate("Taxonomy2", str, list[str], "audi green")
    second = manager.evaluate("Taxonomy2", str, list[str], "audi green")

    assert first == second == ["color", "car brands"]
    assert len(manager) == 6


class TestIntrospection:
  def test_get_signature(self, manager: RulesManager) -> None:
    assert manager.get_signature("ColorGrade") == RuleSignature(int, str)
    assert manager.get_signature("Taxonomy2").describe() == "str -> list[str]"

  def test_get_signature_missing(self, manager: RulesManager) -> None:
    with pytest.raises(RuleNotFoundError):
      manager.get_signature("Nope")

  def test_iterates_in_registration_order(self, manager: RulesManager) -> None:
    assert list(manager) == [
      "DomainCheck",
      "ColorGrade",
      "GreaterThan50",
      "WeekendCheck",
      "Taxonomy",
      "Taxonomy2",
    ]
