"""Click command line for ``lib_log_bridge``.

Purpose
-------
Expose the metadata banner and a demo that pushes sample records through the
bridge, with traceback and dotenv toggles shared by all subcommands.

Contents
--------
* :func:`cli` - root group (``--traceback``, ``--use-dotenv``).
* ``info`` / ``demo`` subcommands.
* :func:`main` - entry point delegating to :func:`lib_cli_exit_tools.run_cli`.
"""

from __future__ import annotations

import os
from typing import Sequence

import click
import lib_cli_exit_tools
from click.core import ParameterSource

from . import __init__conf__
from . import config as bridge_config
from .adapters import RENDERERS
from .lib_log_bridge import demo as _demo
from .lib_log_bridge import summary_info

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(help=__init__conf__.title, context_settings=CLICK_CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load environment variables from the nearest .env (also via {bridge_config.DOTENV_ENV_VAR}=1).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool) -> None:
    """Root command storing global flags on the click context."""

    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not ParameterSource.DEFAULT:
        explicit = use_dotenv
    if bridge_config.should_use_dotenv(explicit=explicit, env_value=os.getenv(bridge_config.DOTENV_ENV_VAR)):
        bridge_config.enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata so users can inspect installation details."""

    click.echo(summary_info(), nl=False)


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--renderer", type=click.Choice(list(RENDERERS)), default="console", show_default=True)
@click.option("--report-caller/--no-report-caller", default=True, show_default=True, help="Forward call-site metadata.")
@click.option("--color/--no-color", default=False, help="Colourise console output.")
def cli_demo(renderer: str, report_caller: bool, color: bool) -> None:
    """Send sample stdlib records through the bridge to a structlog renderer."""

    click.echo(f"=== Renderer: {renderer} ===")
    result = _demo(renderer=renderer, report_caller=report_caller, colors=color)
    click.echo(f"emitted {result['records']} records")


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI and return the exit code.

    Traceback preferences changed by ``--traceback`` are restored afterwards
    unless ``restore_traceback`` is ``False``.
    """
    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main"]
