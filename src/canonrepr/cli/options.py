# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : options.py
#   file_relpath : src/canonrepr/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

"""Common CLI options and their resolution logic.

Verbosity flags map to logging levels; they only affect diagnostics written
to ``stderr``, never the rendered output.
"""

from __future__ import annotations

import logging
from typing import Callable, ParamSpec, TypeVar

import click

from canonrepr.cli.errors import CanonReprUsageError
from canonrepr.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from ``-v``/``-q`` counts.

    Args:
        verbose_count (int): Number of ``-v`` flags.
        quiet_count (int): Number of ``-q`` flags.

    Returns:
        int: The logging level: TRACE for ``-vvv``, DEBUG for ``-vv``, INFO for
        ``-v``, ERROR for ``-q``, CRITICAL for ``-qq`` and WARNING otherwise.

    Raises:
        CanonReprUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise CanonReprUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO

    if quiet_count >= 2:
        return logging.CRITICAL
    if quiet_count == 1:
        return logging.ERROR

    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the counting ``-v/--verbose`` and ``-q/--quiet`` options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity (up to three times).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Decrease log verbosity (up to twice).",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--no-color`` flag."""
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        default=False,
        help="Disable ANSI colors in console output.",
    )(f)
    return f
