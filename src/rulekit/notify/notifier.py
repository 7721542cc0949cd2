"""Templated email notifications."""

import logging
from typing import Mapping, Sequence

from rulekit.config.settings import Settings
from rulekit.errors import EmailDeliveryError
from rulekit.notify.base import EmailSender, SendResult
from rulekit.notify.http import HttpEmailSender
from rulekit.notify.templates import fill_template, format_template

logger = logging.getLogger(__name__)


class EmailNotifier:
  """Fills templates and hands the result to an EmailSender.

  Example:
    notifier = EmailNotifier(HttpEmailSender(), default_from="noreply@example.com")
    notifier.send_template(None, "ann@example.com", "Welcome", 0,
                           {"salutation": "Ms", "fullName": "Ann Lee"})
  """

  def __init__(self, sender: EmailSender, default_from: str | None = None):
    self._sender = sender
    self._default_from = default_from

  def send_template(
    self,
    from_address: str | None,
    to_address: str,
    subject: str,
    template_id: int,
    placeholders: Mapping[str, str],
  ) -> SendResult:
    """Send a named-placeholder template."""
    sender_address = self._resolve_addresses(from_address, to_address)
    body = fill_template(template_id, placeholders)
    return self._send(sender_address, to_address, subject, body)

  def send_positional(
    self,
    from_address: str | None,
    to_address: str,
    subject: str,
    template_id: int,
    values: Sequence[str],
  ) -> SendResult:
    """Send a positional-placeholder template."""
    sender_address = self._resolve_addresses(from_address, to_address)
    body = format_template(template_id, values)
    return self._send(sender_address, to_address, subject, body)

  def _resolve_addresses(self, from_address: str | None, to_address: str) -> str:
    """Apply the default sender and validate both addresses."""
    if not from_address or not from_address.strip():
      from_address = self._default_from

    if not from_address or not from_address.strip():
      raise EmailDeliveryError("The sender's email address must be provided")
    if not to_address or not to_address.strip():
      raise EmailDeliveryError("The recipient's email address must be provided")

    return from_address

  def _send(self, from_address: str, to_address: str, subject: str, body: str) -> SendResult:
    result = self._sender.send(from_address, to_address, subject, body)
    if result.ok:
      logger.info("Sent '%s' to %s via %s", subject, to_address, self._sender.name)
    else:
      logger.warning("Sending '%s' to %s failed: %s", subject, to_address, result.error)
    return result


def notifier_from_settings(settings: Settings, sender: EmailSender | None = None) -> EmailNotifier:
  """Build a notifier from application settings.

  Uses an HttpEmailSender configured from `settings.email` unless a
  sender is given.
  """
  return EmailNotifier(
    sender or HttpEmailSender(settings.email),
    default_from=settings.email.default_from,
  )
