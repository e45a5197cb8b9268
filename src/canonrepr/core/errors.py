# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : errors.py
#   file_relpath : src/canonrepr/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

"""Exceptions shared by the CanonRepr library layers.

Rendering itself never raises for a value the introspector can describe; the
exceptions below describe failures *around* rendering:

- `IntrospectionError`: the introspection capability could not describe a
  value. The traversal engine catches it per branch and renders a placeholder.
- `ConfigError`: a configuration source is missing or malformed.

CLI-facing errors live in ``canonrepr.cli.errors`` and wrap these.
"""

from __future__ import annotations


class CanonReprError(Exception):
    """Base class for all CanonRepr library errors."""


class IntrospectionError(CanonReprError):
    """Raised when a value cannot be described by the introspector.

    Attributes:
        type_text (str): Best-effort text of the static type of the value that
            failed, used for the ``<unrenderable:...>`` placeholder.
    """

    def __init__(self, message: str, *, type_text: str = "") -> None:
        super().__init__(message)
        self.type_text = type_text


class ConfigError(CanonReprError):
    """Raised for missing or malformed configuration sources."""
