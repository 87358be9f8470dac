"""Allow ``python -m newx``."""

from newx.cli import cli

cli()
