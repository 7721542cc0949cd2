"""Email sending capability."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class SendResult:
  """Outcome of a send attempt."""

  ok: bool
  message_id: str | None = None
  error: str | None = None


class EmailSender(ABC):
  """Abstract base for transactional email services."""

  @abstractmethod
  def send(
    self,
    from_address: str,
    to_address: str,
    subject: str,
    html_body: str,
  ) -> SendResult:
    """Send one HTML email. Delivery failures are reported, not raised."""
    ...

  @property
  @abstractmethod
  def name(self) -> str:
    """Sender name."""
    ...
