"""Click command group inspecting the environment-driven logger setup.

Purpose
-------
Give operators a way to see which ambient level and which per-class
overrides the current environment produces, without starting the host
application.

Contents
--------
* :func:`cli` – root group with ``--version``, ``--use-dotenv`` and
  ``--traceback`` switches.
* ``info`` / ``config`` / ``check`` subcommands.
* :func:`main` – entry point routed through :mod:`lib_cli_exit_tools`.
"""

from __future__ import annotations

import os
from typing import Sequence

import click
import lib_cli_exit_tools

from . import __init__conf__
from . import config as log_config
from .runtime import LogSettings, summary_info

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    default=False,
    help="Show full Python tracebacks on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load variables from the nearest .env before reading LOG_* settings (default: ${log_config.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool) -> None:
    """Inspect the logger configuration derived from the environment."""

    if _explicit(ctx, "traceback"):
        lib_cli_exit_tools.config.traceback = traceback
        lib_cli_exit_tools.config.traceback_force_color = traceback
    if log_config.should_use_dotenv(explicit=use_dotenv if _explicit(ctx, "use_dotenv") else None, env_value=os.getenv(log_config.DOTENV_ENV_VAR)):
        log_config.enable_dotenv()
    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


def _explicit(ctx: click.Context, name: str) -> bool:
    return ctx.get_parameter_source(name) is not click.core.ParameterSource.DEFAULT


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""

    click.echo(summary_info(), nl=False)


@cli.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_config() -> None:
    """Print the default level, verbosity and per-level class lists."""

    settings = LogSettings.from_environment()
    click.echo(f"level   = {settings.level.severity}")
    click.echo(f"verbose = {str(settings.verbose).lower()}")
    for level in sorted(settings.level_groups):
        click.echo(f"{level.env_key} = {', '.join(settings.level_groups[level])}")


@cli.command("check", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("names", nargs=-1, required=True)
def cli_check(names: tuple[str, ...]) -> None:
    """Print the effective level each dotted NAME would receive."""

    settings = LogSettings.from_environment()
    width = max(len(name) for name in names)
    for name in names:
        click.echo(f"{name:<{width}}  {settings.level_for(name).severity}")


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the command group and return its exit code.

    Traceback preferences changed by ``--traceback`` are restored afterwards
    unless ``restore_traceback`` is ``False``.
    """

    previous = (lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = previous


__all__ = ["cli", "main"]
