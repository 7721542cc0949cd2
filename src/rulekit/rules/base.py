"""Rule abstractions."""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from rulekit.models import RuleSignature

T = TypeVar("T")
R = TypeVar("R")


class Rule(ABC, Generic[T, R]):
  """A named, pure mapping from one input type to one output type.

  The declared types are fixed at construction and exposed through
  `signature`. RulesManager compares them with the types a caller asks
  for before calling `evaluate`, so subclasses can rely on receiving a
  value of `input_type`.

  Example:
    class LengthRule(Rule[str, int]):
      def __init__(self, name: str):
        super().__init__(name, str, int)

      def evaluate(self, value: str) -> int:
        return len(value)
  """

  def __init__(self, name: str, input_type: Any, output_type: Any):
    self._name = name
    self._signature = RuleSignature(input_type, output_type)

  @property
  def name(self) -> str:
    """Unique rule name (case-sensitive)."""
    return self._name

  @property
  def signature(self) -> RuleSignature:
    """Declared input and output types."""
    return self._signature

  @property
  def input_type(self) -> Any:
    return self._signature.input_type

  @property
  def output_type(self) -> Any:
    return self._signature.output_type

  @abstractmethod
  def evaluate(self, value: T) -> R:
    """Evaluate the rule. Must not mutate any state."""
    ...

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self._name!r}, {self._signature.describe()})"
