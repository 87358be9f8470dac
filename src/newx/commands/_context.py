"""AppContext — per-invocation state for the newx command.

Configures logging from settings, decides where step lines go, and
centralizes result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from newx.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from newx.config.settings import NewxSettings
    from newx.infrastructure.generator import ProjectGenerator
    from newx.services.create import Reporter
    from newx.services.result import ServiceResult


class AppContext:
    """Shared context built once per invocation."""

    def __init__(self, settings: NewxSettings) -> None:
        self.settings = settings

        from newx.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def reporter(self) -> Reporter | None:
        """Echo step lines to stdout, unless output is JSON or quiet."""
        if self.settings.json_output or self.settings.quiet:
            return None
        return click.echo

    def generator(self) -> ProjectGenerator:
        from newx.infrastructure.generator import CargoGenerator

        return CargoGenerator(program=self.settings.generator.program)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
