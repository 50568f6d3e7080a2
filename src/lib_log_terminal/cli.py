"""Click command group exposing metadata and the renderer demo.

Purpose
-------
Provide the ``lib_log_terminal`` console script (and ``python -m
lib_log_terminal``): ``info`` prints the metadata banner and ``logdemo`` walks
through boxed messages, key/value pairs, a sticky status line and a progress
bar.

Contents
--------
* :func:`cli` - command group with ``--use-dotenv`` and ``--version``.
* :func:`cli_info` / :func:`cli_logdemo` - subcommands.
* :func:`main` - test-friendly runner returning an exit code.
"""

from __future__ import annotations

import os
import sys
from typing import Any, Sequence

import click

from . import __init__conf__
from . import config as log_config
from .runtime import logdemo as _logdemo

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def summary_info() -> str:
    """Return the metadata banner printed by ``info``.

    >>> "version" in summary_info()
    True
    """

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


@click.group(context_settings=CLICK_CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help=f"Load the nearest .env before running (defaults to ${log_config.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, use_dotenv: bool | None) -> None:
    """Render structured logs in the terminal."""

    env_toggle = os.getenv(log_config.DOTENV_ENV_VAR)
    if log_config.should_use_dotenv(explicit=use_dotenv, env_value=env_toggle):
        log_config.enable_dotenv()
    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata so users can inspect installation details."""

    click.echo(summary_info(), nl=False)


@cli.command("logdemo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--right-justify", type=click.IntRange(min=0), default=0, show_default=True, help="Column the location suffix is aligned to (0 puts it on its own line).")
@click.option("--steps", type=click.IntRange(min=1), default=20, show_default=True, help="Number of progress updates.")
@click.option("--delay", type=click.FloatRange(min=0.0), default=0.05, show_default=True, help="Seconds to sleep between progress updates.")
@click.option("--force-color/--no-force-color", default=False, show_default=True, help="Emit colours and cursor control even when stdout is not a terminal.")
def cli_logdemo(*, right_justify: int, steps: int, delay: float, force_color: bool) -> None:
    """Run the renderer demo on standard output."""

    result: dict[str, Any] = _logdemo(
        stream=sys.stdout,
        right_justify=right_justify,
        steps=steps,
        delay=delay,
        force_color=force_color,
    )
    click.echo(f"emitted {result['emitted']} events, suppressed {result['suppressed']}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command group and return its exit code.

    Examples
    --------
    >>> main(["--version"])  # doctest: +ELLIPSIS
    lib_log_terminal version ...
    0
    """

    args = list(argv) if argv is not None else None
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.ClickException as error:
        error.show()
        return error.exit_code
    except click.exceptions.Exit as exit_request:
        return exit_request.exit_code
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    return 0


__all__ = ["cli", "main", "summary_info"]
