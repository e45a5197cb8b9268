# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : io.py
#   file_relpath : src/canonrepr/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

"""TOML I/O helpers for CanonRepr configuration.

Configuration lives either in a dedicated ``canonrepr.toml`` (keys at the top
level) or in ``pyproject.toml`` under ``[tool.canonrepr]``:

    ```toml
    [tool.canonrepr]
    pointer_token = "PTR"
    log_level = "DEBUG"
    ```

Typical flow:
    1. Locate a config file (``discover_config_file``).
    2. Parse it with tomlkit (``load_toml_dict``) and extract the CanonRepr
       section (``extract_section``).
    3. Read values with the checked getters (``get_string_value_or_none``),
       which log and ignore values of the wrong type.

Malformed or unreadable files raise
[`ConfigError`][canonrepr.core.errors.ConfigError].
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Final, TypeGuard

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from canonrepr.config.logging import get_logger
from canonrepr.core.errors import ConfigError

if TYPE_CHECKING:
    from canonrepr.config.logging import CanonreprLogger

logger: CanonreprLogger = get_logger(__name__)

TomlTable = dict[str, Any]

CONFIG_FILE_NAME: Final[str] = "canonrepr.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
TOOL_SECTION: Final[tuple[str, str]] = ("tool", "canonrepr")

__all__: list[str] = [
    "CONFIG_FILE_NAME",
    "PYPROJECT_FILE_NAME",
    "TomlTable",
    "discover_config_file",
    "extract_section",
    "get_string_value_or_none",
    "is_toml_table",
    "load_toml_dict",
    "parse_toml_text",
]


def is_toml_table(val: Any) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping.

    Args:
        val (Any): Value to test.

    Returns:
        TypeGuard[TomlTable]: ``True`` if ``val`` is a ``dict[str, Any]``.
    """
    return isinstance(val, dict)


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Integers, floats and booleans are coerced with ``str(...)``. Any other
    type is logged and ignored.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        str | None: The string value, or ``None`` when absent or not coercible.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float, bool)):
        return str(value)
    logger.warning(
        "Ignoring config key %r: expected a string, got %s", key, type(value).__name__
    )
    return None


def parse_toml_text(text: str, *, source: str = "<string>") -> TomlTable:
    """Parse a TOML document into plain Python values.

    Args:
        text (str): The TOML document.
        source (str): Name of the document, used in error messages.

    Returns:
        TomlTable: The document as plain ``dict``/``list``/scalar values.

    Raises:
        ConfigError: If the document is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {source}: {exc}") from exc
    return doc.unwrap()


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``canonrepr.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    logger.debug("Loading TOML config from %s", path)
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    return parse_toml_text(text, source=str(path))


def extract_section(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the CanonRepr section of a parsed config file.

    Args:
        path (Path): The file ``data`` was read from.
        data (TomlTable): The parsed document.

    Returns:
        TomlTable | None: The whole document for ``canonrepr.toml`` (and any
        other file name), the ``[tool.canonrepr]`` table for ``pyproject.toml``,
        or ``None`` when a ``pyproject.toml`` has no such table.

    Raises:
        ConfigError: If ``[tool.canonrepr]`` exists but is not a table.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    section: Any = data
    for key in TOOL_SECTION:
        section = section.get(key) if is_toml_table(section) else None
        if section is None:
            return None
    if not is_toml_table(section):
        raise ConfigError(f"[tool.canonrepr] in {path} must be a table")
    return section


def discover_config_file(start: Path) -> Path | None:
    """Find the nearest config file in ``start`` or its parents.

    In each directory, ``canonrepr.toml`` wins over ``pyproject.toml``; a
    ``pyproject.toml`` only counts when it has a ``[tool.canonrepr]`` table.

    Args:
        start (Path): Directory (or file) to start from.

    Returns:
        Path | None: The config file, or ``None`` if none was found.
    """
    current: Path = start.resolve()
    if current.is_file():
        current = current.parent
    for directory in (current, *current.parents):
        candidate: Path = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            logger.debug("Discovered config file %s", candidate)
            return candidate
        pyproject: Path = directory / PYPROJECT_FILE_NAME
        if pyproject.is_file():
            try:
                section: TomlTable | None = extract_section(pyproject, load_toml_dict(pyproject))
            except ConfigError as exc:
                logger.warning("Skipping %s: %s", pyproject, exc)
                continue
            if section is not None:
                logger.debug("Discovered config section in %s", pyproject)
                return pyproject
    return None
