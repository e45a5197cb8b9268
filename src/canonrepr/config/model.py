# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : model.py
#   file_relpath : src/canonrepr/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

"""Configuration model and merge policy.

This module defines:
    - `RenderConfig`: an immutable snapshot used to build renderers.
    - `MutableRenderConfig`: a mutable builder used while loading and merging
      configuration layers; it can be frozen into `RenderConfig` and thawed
      back for edits.

Precedence (last wins): defaults, discovered config file, explicit config
files, CLI arguments.

TOML I/O lives in ``canonrepr.config.io``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from canonrepr.config.io import (
    discover_config_file,
    extract_section,
    get_string_value_or_none,
    load_toml_dict,
)
from canonrepr.config.logging import get_logger, parse_log_level
from canonrepr.core.errors import ConfigError
from canonrepr.rendering.addresses import constant_address, hex_address

if TYPE_CHECKING:
    from collections.abc import Iterable

    from canonrepr.config.io import TomlTable
    from canonrepr.config.logging import CanonreprLogger
    from canonrepr.rendering.addresses import AddressFormatter

# Generic mapping accepted by ``apply_cli_args`` (click params or plain dicts).
ArgsLike = Mapping[str, Any]

logger: CanonreprLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable rendering configuration.

    Attributes:
        pointer_token (str | None): When set, every identity token renders as
            this constant text; otherwise tokens render as hexadecimal addresses.
        log_level (str | None): Log level name (``"TRACE"``, ``"DEBUG"``, ...).
        config_files (tuple[Path, ...]): Config files that contributed values.
    """

    pointer_token: str | None = None
    log_level: str | None = None
    config_files: tuple[Path, ...] = ()

    def address_formatter(self) -> AddressFormatter:
        """Return the address formatter selected by this configuration."""
        if self.pointer_token is not None:
            return constant_address(self.pointer_token)
        return hex_address

    def log_level_value(self) -> int | None:
        """Return ``log_level`` as a numeric logging level (``None`` if unset)."""
        return parse_log_level(self.log_level)

    def to_toml_dict(self) -> TomlTable:
        """Return the configured values as a TOML table (unset keys omitted)."""
        out: TomlTable = {}
        if self.pointer_token is not None:
            out["pointer_token"] = self.pointer_token
        if self.log_level is not None:
            out["log_level"] = self.log_level
        return out

    def thaw(self) -> MutableRenderConfig:
        """Return a mutable copy of this frozen config."""
        return MutableRenderConfig(
            pointer_token=self.pointer_token,
            log_level=self.log_level,
            config_files=list(self.config_files),
        )


# -------------------------- Mutable builder --------------------------
@dataclass
class MutableRenderConfig:
    """Mutable configuration used while loading and merging layers.

    ``None`` means "inherit": merging keeps the value of the lower layer.
    """

    pointer_token: str | None = None
    log_level: str | None = None
    config_files: list[Path] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> RenderConfig:
        """Validate this builder and freeze it into a `RenderConfig`.

        Raises:
            ConfigError: If ``pointer_token`` is empty or ``log_level`` is not
                a known level.
        """
        if self.pointer_token is not None and not self.pointer_token:
            raise ConfigError("pointer_token must not be empty")
        if self.log_level is not None and parse_log_level(self.log_level) is None:
            raise ConfigError(f"Unknown log_level: {self.log_level!r}")
        return RenderConfig(
            pointer_token=self.pointer_token,
            log_level=self.log_level,
            config_files=tuple(self.config_files),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableRenderConfig:
        """Return the built-in defaults (hexadecimal tokens, no log level)."""
        return cls()

    @classmethod
    def from_toml_dict(
        cls, data: TomlTable, *, config_file: Path | None = None
    ) -> MutableRenderConfig:
        """Build a draft from a parsed CanonRepr section.

        Unknown keys are logged and ignored.

        Args:
            data (TomlTable): The section (top-level keys of ``canonrepr.toml``
                or ``[tool.canonrepr]``).
            config_file (Path | None): The file the section came from.

        Returns:
            MutableRenderConfig: The draft.
        """
        known: set[str] = {"pointer_token", "log_level"}
        for key in data:
            if key not in known:
                logger.warning("Ignoring unknown config key %r in %s", key, config_file)
        return cls(
            pointer_token=get_string_value_or_none(data, "pointer_token"),
            log_level=get_string_value_or_none(data, "log_level"),
            config_files=[config_file] if config_file is not None else [],
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableRenderConfig | None:
        """Load configuration from a ``canonrepr.toml`` or ``pyproject.toml`` file.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableRenderConfig | None: The draft, or ``None`` when a
            ``pyproject.toml`` has no ``[tool.canonrepr]`` table.

        Raises:
            ConfigError: If the file cannot be read or parsed.
        """
        logger.debug("Creating MutableRenderConfig from TOML config: %s", path)
        section: TomlTable | None = extract_section(path, load_toml_dict(path))
        if section is None:
            logger.warning("[tool.canonrepr] section missing in %s", path)
            return None
        return cls.from_toml_dict(section, config_file=path)

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
    ) -> MutableRenderConfig:
        """Merge defaults, the discovered config file and explicit config files.

        Args:
            start (Path | None): Directory to start discovery from; discovery is
                skipped when ``None``.
            extra_config_files (Iterable[Path] | None): Files that override
                discovered values, in order.

        Returns:
            MutableRenderConfig: The merged draft.

        Raises:
            ConfigError: If an explicit config file cannot be read or parsed.
        """
        draft: MutableRenderConfig = cls.from_defaults()
        if start is not None:
            discovered: Path | None = discover_config_file(start)
            if discovered is not None:
                layer: MutableRenderConfig | None = cls.from_toml_file(discovered)
                if layer is not None:
                    draft = draft.merge_with(layer)
        for extra in extra_config_files or ():
            if not extra.is_file():
                raise ConfigError(f"Config file not found: {extra}")
            layer = cls.from_toml_file(extra)
            if layer is not None:
                draft = draft.merge_with(layer)
        logger.debug("Merged render config: %s", draft)
        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableRenderConfig) -> MutableRenderConfig:
        """Return a new draft where values set in ``other`` override this draft."""
        return MutableRenderConfig(
            pointer_token=other.pointer_token
            if other.pointer_token is not None
            else self.pointer_token,
            log_level=other.log_level if other.log_level is not None else self.log_level,
            config_files=self.config_files + other.config_files,
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableRenderConfig:
        """Override values with CLI arguments that were given.

        Args:
            args (ArgsLike): Mapping with optional ``pointer_token`` and ``log_level``.

        Returns:
            MutableRenderConfig: ``self``, updated in place.
        """
        token: Any = args.get("pointer_token")
        if token is not None:
            self.pointer_token = str(token)
        level: Any = args.get("log_level")
        if level is not None:
            self.log_level = str(level)
        return self
