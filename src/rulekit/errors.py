"""Exception hierarchy for rulekit."""


class RulekitError(Exception):
  """Base for all rulekit errors."""


class DuplicateRuleNameError(RulekitError):
  """A rule with the same name is already registered."""


class RuleNotFoundError(RulekitError):
  """No rule is registered under the requested name."""


class RuleTypeMismatchError(RulekitError):
  """Requested input/output types disagree with the rule's declared types."""


class InvalidRuleConfigurationError(RulekitError):
  """A rule definition or rule helper was configured incorrectly."""


class TemplateError(RulekitError):
  """An email template could not be filled."""


class EmailDeliveryError(RulekitError):
  """An email could not be prepared for delivery."""
