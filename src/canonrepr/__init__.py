# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : __init__.py
#   file_relpath : src/canonrepr/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

"""CanonRepr package.

CanonRepr renders arbitrary values as deterministic, human-readable text that
spells out their static types: map keys are canonically ordered, cycles are
cut with ``<REC(T)>`` markers and pointer identities can be replaced by a
constant token so that output is stable across runs.

Examples:
    ```python
    >>> from canonrepr import render, constant_address
    >>> render([1, "two", None], address_formatter=constant_address())
    '[]any{1, "two", any(nil)}'
    ```
"""

from __future__ import annotations

from canonrepr.core.errors import CanonReprError, ConfigError, IntrospectionError
from canonrepr.core.values import Cell, Typed, new
from canonrepr.rendering.addresses import constant_address, hex_address
from canonrepr.rendering.api import Renderer, render

__all__ = [
    "CanonReprError",
    "Cell",
    "ConfigError",
    "IntrospectionError",
    "Renderer",
    "Typed",
    "constant_address",
    "hex_address",
    "new",
    "render",
]
