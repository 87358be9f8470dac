"""Root ``newx`` command: parse arguments and create the project."""

from __future__ import annotations

import click
from pydantic import ValidationError

from newx import __version__
from newx.commands._base import NewxCommand
from newx.commands._context import AppContext
from newx.config.settings import NewxSettings
from newx.domain.request import CreationRequest

_EXAMPLES = """\
  newx demo
  newx demo --lib
  newx demo --clippy
  newx demo --lib --all
  newx --json demo --all
  NEWX_GENERATOR__PROGRAM=/opt/rust/bin/cargo newx demo"""


@click.command(
    "newx",
    cls=NewxCommand,
    examples=_EXAMPLES,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(version=__version__, prog_name="cargo-newx")
@click.argument("project_name")
@click.option("--lib", is_flag=True, help="Create a library project instead of a binary.")
@click.option("--clippy", is_flag=True, help="Add clippy.toml configuration.")
@click.option(
    "--all", "all_", is_flag=True, help="Add both rustfmt.toml and clippy.toml configurations."
)
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
def cli(
    project_name: str,
    lib: bool,
    clippy: bool,
    all_: bool,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """Creates a new Rust project with best practice configuration files."""
    try:
        request = CreationRequest.from_flags(project_name, lib=lib, clippy=clippy, all_=all_)
    except ValidationError as exc:
        raise click.BadParameter("must not be empty", param_hint="'PROJECT_NAME'") from exc

    settings = NewxSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    app = AppContext(settings)

    from newx.services.create import ProjectService

    svc = ProjectService(generator=app.generator(), reporter=app.reporter)
    app.emit(svc.create_project(request))
