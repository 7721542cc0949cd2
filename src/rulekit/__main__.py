"""Allow `python -m rulekit`."""

from rulekit.cli import app

app()
