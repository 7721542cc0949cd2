"""Configuration management."""

from rulekit.config.loader import load_config
from rulekit.config.rules_file import load_rules, parse_rules
from rulekit.config.settings import EmailSettings, Settings

__all__ = ["EmailSettings", "Settings", "load_config", "load_rules", "parse_rules"]
