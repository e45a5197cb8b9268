# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : render.py
#   file_relpath : src/canonrepr/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

"""CanonRepr ``render`` command.

Loads a JSON or TOML document from a file (or ``-`` for stdin) and prints its
canonical rendering:

    ```console
    $ echo '{"b": [1, 2], "a": null}' | canonrepr render -
    map[string]any{"a":any(nil), "b":[]int{1, 2}}
    ```

Configuration is resolved from ``canonrepr.toml`` or ``[tool.canonrepr]`` in
``pyproject.toml`` (discovered from the working directory), then any
``--config`` files, then command-line options.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click
import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from canonrepr.cli.errors import (
    CanonReprCliError,
    CanonReprConfigError,
    CanonReprEncodingError,
    CanonReprFileNotFoundError,
)
from canonrepr.config.logging import get_logger, parse_log_level, setup_logging
from canonrepr.config.model import MutableRenderConfig
from canonrepr.core.errors import ConfigError
from canonrepr.rendering.api import Renderer

if TYPE_CHECKING:
    from canonrepr.cli.console import ClickConsole
    from canonrepr.config.model import RenderConfig

logger = get_logger(__name__)

STDIN_MARKER: str = "-"


class InputFormat(str, Enum):
    """Document formats accepted by ``render``."""

    JSON = "json"
    TOML = "toml"


def detect_format(source: str) -> InputFormat:
    """Guess the input format from a file name (``.toml`` is TOML, else JSON)."""
    if source != STDIN_MARKER and Path(source).suffix.lower() == ".toml":
        return InputFormat.TOML
    return InputFormat.JSON


def read_source(source: str) -> str:
    """Return the text of ``source`` (a path, or ``-`` for stdin).

    Raises:
        CanonReprFileNotFoundError: If the path does not exist or is a directory.
        CanonReprEncodingError: If the content is not valid UTF-8.
        CanonReprCliError: For other I/O errors.
    """
    if source == STDIN_MARKER:
        logger.debug("Reading document from stdin")
        try:
            return click.get_text_stream("stdin", encoding="utf-8").read()
        except UnicodeDecodeError as exc:
            raise CanonReprEncodingError(f"stdin is not valid UTF-8: {exc}") from exc

    path = Path(source)
    logger.debug("Reading document from %s", path)
    try:
        return path.read_text(encoding="utf-8")
    except (FileNotFoundError, IsADirectoryError) as exc:
        raise CanonReprFileNotFoundError(f"No such file: {source}") from exc
    except UnicodeDecodeError as exc:
        raise CanonReprEncodingError(f"{source} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise CanonReprCliError(f"Cannot read {source}: {exc}") from exc


def parse_document(text: str, fmt: InputFormat, *, source: str) -> Any:
    """Parse ``text`` as JSON or TOML into plain Python values.

    Raises:
        CanonReprEncodingError: If the document is malformed.
    """
    if fmt == InputFormat.TOML:
        try:
            return tomlkit.parse(text).unwrap()
        except TomlkitParseError as exc:
            raise CanonReprEncodingError(f"Invalid TOML in {source}: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise CanonReprEncodingError(f"Invalid JSON in {source}: {exc}") from exc


def resolve_render_config(
    *,
    no_config: bool,
    config_files: tuple[str, ...],
    pointer_token: str | None,
) -> RenderConfig:
    """Merge discovered config, explicit config files and CLI options.

    Raises:
        CanonReprConfigError: If a config file is missing or malformed.
    """
    try:
        draft: MutableRenderConfig = MutableRenderConfig.load_merged(
            start=None if no_config else Path.cwd(),
            extra_config_files=[Path(p) for p in config_files],
        )
        draft.apply_cli_args({"pointer_token": pointer_token})
        return draft.freeze()
    except ConfigError as exc:
        raise CanonReprConfigError(str(exc)) from exc


@click.command(
    name="render",
    help="Render a JSON or TOML document (FILE, or '-' for stdin) as canonical text.",
)
@click.argument("source", metavar="FILE", type=str, default=STDIN_MARKER, required=False)
@click.option(
    "--format",
    "input_format",
    type=click.Choice([f.value for f in InputFormat]),
    default=None,
    help="Input format (default: from the file suffix, JSON for stdin).",
)
@click.option(
    "--pointer-token",
    "pointer_token",
    type=str,
    default=None,
    help="Render every pointer identity as this constant text.",
)
@click.option(
    "--config",
    "config_files",
    type=str,
    multiple=True,
    help="Extra config file(s) overriding discovered configuration.",
)
@click.option(
    "--no-config",
    "no_config",
    is_flag=True,
    default=False,
    help="Do not discover canonrepr.toml / pyproject.toml.",
)
def render_command(
    *,
    source: str = STDIN_MARKER,
    input_format: str | None = None,
    pointer_token: str | None = None,
    config_files: tuple[str, ...] = (),
    no_config: bool = False,
) -> None:
    """Render a JSON or TOML document as canonical text.

    Args:
        source (str): Path to the document, or ``-`` for stdin.
        input_format (str | None): ``json`` or ``toml``; guessed when ``None``.
        pointer_token (str | None): Constant identity token text.
        config_files (tuple[str, ...]): Extra config files.
        no_config (bool): Skip config discovery.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    config: RenderConfig = resolve_render_config(
        no_config=no_config,
        config_files=config_files,
        pointer_token=pointer_token,
    )
    if config.log_level is not None and not ctx.obj.get("log_level_explicit", False):
        setup_logging(level=parse_log_level(config.log_level))

    fmt: InputFormat = InputFormat(input_format) if input_format else detect_format(source)
    value: Any = parse_document(read_source(source), fmt, source=source)
    logger.debug("Rendering %s document from %s", fmt.value, source)

    console.print(Renderer.from_config(config).render(value))
