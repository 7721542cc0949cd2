"""HTML email templates."""

import re
from typing import Mapping, Sequence

from rulekit.errors import TemplateError

# Named placeholders, e.g. {firstName}
NAMED_TEMPLATES = [
  "<html><body><h1>Hello, {salutation} {fullName}!</h1><p>Welcome to our service.</p></body></html>",
  "<html><body><h1>Dear {firstName},</h1><p>Your order #{projectName} has been shipped.</p></body></html>",
  "<html><body><h1>Hi {firstName},</h1><p>We have received your request and will respond shortly.</p></body></html>",
]

# Positional placeholders, e.g. {0}
POSITIONAL_TEMPLATES = [
  "<html><body><h1>Hello, {0} {1}!</h1><p>Welcome to our service.</p></body></html>",
  "<html><body><h1>Dear {0},</h1><p>Your order #{1} has been shipped.</p></body></html>",
  "<html><body><h1>Hi {0},</h1><p>We have received your request and will respond shortly.</p></body></html>",
]

_POSITIONAL = re.compile(r"\{(\d+)\}")
_UNREPLACED = re.compile(r"\{[A-Za-z0-9_]+\}")


def _template(templates: Sequence[str], template_id: int) -> str:
  if not 0 <= template_id < len(templates):
    raise TemplateError(f"Invalid template ID: {template_id}")
  return templates[template_id]


def format_template(
  template_id: int,
  values: Sequence[str],
  templates: Sequence[str] = POSITIONAL_TEMPLATES,
) -> str:
  """Fill a positional template.

  Raises:
    TemplateError: Unknown template ID, or the number of values differs
      from the number of distinct placeholders.
  """
  template = _template(templates, template_id)
  expected = len(set(_POSITIONAL.findall(template)))
  if len(values) != expected:
    raise TemplateError(
      f"Template {template_id} requires {expected} placeholders, "
      f"but {len(values)} were provided"
    )
  return _POSITIONAL.sub(lambda m: str(values[int(m.group(1))]), template)


def fill_template(
  template_id: int,
  data: Mapping[str, str],
  templates: Sequence[str] = NAMED_TEMPLATES,
) -> str:
  """Fill a named template.

  Keys without a matching placeholder are ignored.

  Raises:
    TemplateError: Unknown template ID, or a placeholder left unfilled.
  """
  template = _template(templates, template_id)
  for key, value in data.items():
    template = template.replace(f"{{{key}}}", value)

  missing = _UNREPLACED.findall(template)
  if missing:
    raise TemplateError(f"Not all placeholders were replaced: {', '.join(missing)}")
  return template
