"""Application settings."""

from pydantic import BaseModel, Field


class EmailSettings(BaseModel):
  """Transactional email service settings."""

  endpoint: str = "https://api.mail.example.com/v1"
  default_from: str | None = None
  timeout: float = 30.0
  max_retries: int = 2


class Settings(BaseModel):
  """Application configuration."""

  rules_file: str = "rules.yaml"
  output_format: str = "terminal"
  log_level: str = "WARNING"
  email: EmailSettings = Field(default_factory=EmailSettings)
