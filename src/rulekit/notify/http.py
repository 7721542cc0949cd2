"""HTTP transactional email sender."""

import logging
import os

import httpx

from rulekit.config.settings import EmailSettings
from rulekit.notify.base import EmailSender, SendResult

logger = logging.getLogger(__name__)

API_KEY_ENV = "RULEKIT_EMAIL_API_KEY"


class HttpEmailSender(EmailSender):
  """Sends mail through a JSON HTTP API.

  POSTs to `{endpoint}/emails` with a bearer API key and treats any 2xx
  response as delivered.
  """

  def __init__(
    self,
    settings: EmailSettings | None = None,
    api_key: str | None = None,
    client: httpx.Client | None = None,
  ):
    self._settings = settings or EmailSettings()
    self._api_key = api_key or os.environ.get(API_KEY_ENV)
    self._client = client

  @property
  def name(self) -> str:
    return "http"

  def send(
    self,
    from_address: str,
    to_address: str,
    subject: str,
    html_body: str,
  ) -> SendResult:
    payload = {
      "from": from_address,
      "to": [to_address],
      "subject": subject,
      "html": html_body,
    }

    try:
      response = self._post_with_retry(payload)
    except httpx.HTTPStatusError as e:
      logger.warning("Email to %s rejected: HTTP %s", to_address, e.response.status_code)
      return SendResult(ok=False, error=f"HTTP {e.response.status_code}")
    except httpx.RequestError as e:
      logger.warning("Email to %s failed: %s", to_address, e)
      return SendResult(ok=False, error=str(e))

    return SendResult(ok=True, message_id=_message_id(response))

  def _post_with_retry(self, payload: dict) -> httpx.Response:
    """Post with retry on transient failures."""
    last_error: Exception | None = None
    headers = {"Authorization": f"Bearer {self._api_key}"} if self._api_key else {}
    url = f"{self._settings.endpoint.rstrip('/')}/emails"

    for attempt in range(self._settings.max_retries + 1):
      try:
        response = self._http().post(
          url,
          json=payload,
          headers=headers,
          timeout=self._settings.timeout,
        )
        response.raise_for_status()
        return response
      except (httpx.ConnectError, httpx.ConnectTimeout, httpx.ReadTimeout) as e:
        last_error = e
        if attempt < self._settings.max_retries:
          logger.debug("Retrying email send (attempt %d): %s", attempt + 1, e)
          continue

    raise last_error or httpx.RequestError("Request failed")

  def _http(self) -> httpx.Client:
    if self._client is None:
      self._client = httpx.Client()
    return self._client


def _message_id(response: httpx.Response) -> str | None:
  """Read the message id from a success body, if it carries one."""
  if not response.content:
    return None
  try:
    data = response.json()
  except ValueError:
    return None
  return data.get("id") if isinstance(data, dict) else None
