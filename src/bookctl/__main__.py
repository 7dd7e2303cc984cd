"""Allow ``python -m bookctl``."""

from bookctl.cli import cli

cli()
