"""Configuration file loading."""

from pathlib import Path

import yaml

from rulekit.config.settings import Settings

CONFIG_FILENAMES = [".rulekit.yaml", ".rulekit.yml", "rulekit.yaml", "rulekit.yml"]


def _find_config_file(config_path: Path | None = None) -> Path | None:
  """Find config file path, or None if no config exists.

  An explicit path must exist; only the default names are searched for.
  """
  if config_path:
    if not config_path.exists():
      raise FileNotFoundError(f"Config file not found: {config_path}")
    return config_path

  for filename in CONFIG_FILENAMES:
    path = Path.cwd() / filename
    if path.exists():
      return path

  return None


def load_config(config_path: Path | None = None) -> Settings:
  """Load configuration from file or defaults."""
  path = _find_config_file(config_path)
  if path:
    return _load_from_file(path)
  return Settings()


def _load_from_file(path: Path) -> Settings:
  """Load settings from a YAML file."""
  with open(path) as f:
    data = yaml.safe_load(f) or {}

  return _parse_config(data)


def _parse_config(data: dict) -> Settings:
  """Parse config dict into Settings."""
  if "log_level" in data:
    data["log_level"] = str(data["log_level"]).upper()

  return Settings(**data)
