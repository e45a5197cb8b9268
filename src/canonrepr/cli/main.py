# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : main.py
#   file_relpath : src/canonrepr/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

"""The ``canonrepr`` command group.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj`` for the subcommands:

- ``ctx.obj["console"]``: the `ClickConsole` for program output;
- ``ctx.obj["log_level"]``: the effective logging level;
- ``ctx.obj["log_level_explicit"]``: whether the level came from the
  environment or from ``-v``/``-q`` (and therefore wins over config files).
"""

from __future__ import annotations

import click

from canonrepr.cli.commands.render import render_command
from canonrepr.cli.commands.version import version_command
from canonrepr.cli.console import ClickConsole
from canonrepr.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from canonrepr.config.logging import get_logger, resolve_env_log_level, setup_logging
from canonrepr.constants import CLI_PROG_NAME

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (logging and console) on the Click context.

    The ``CANONREPR_LOG_LEVEL`` environment variable wins over ``-v``/``-q``.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.obj = ctx.obj or {}

    level_cli: int = resolve_verbosity(verbose, quiet)
    level_env: int | None = resolve_env_log_level()
    level: int = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = level
    ctx.obj["log_level_explicit"] = level_env is not None or verbose > 0 or quiet > 0
    setup_logging(level=level)

    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


@click.group(
    cls=click.Group,
    name=CLI_PROG_NAME,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Render values as deterministic, type-annotated text.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the CanonRepr CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'canonrepr render FILE' to render a JSON or TOML document.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(render_command)

if __name__ == "__main__":
    cli()
