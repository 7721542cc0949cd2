"""Email notifications."""

from rulekit.notify.base import EmailSender, SendResult
from rulekit.notify.http import HttpEmailSender
from rulekit.notify.notifier import EmailNotifier, notifier_from_settings
from rulekit.notify.templates import fill_template, format_template

__all__ = [
  "EmailNotifier",
  "EmailSender",
  "HttpEmailSender",
  "SendResult",
  "fill_template",
  "format_template",
  "notifier_from_settings",
]
