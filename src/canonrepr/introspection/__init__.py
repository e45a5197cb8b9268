# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : __init__.py
#   file_relpath : src/canonrepr/introspection/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

"""Introspection capability for the CanonRepr renderer.

Public modules:
    - canonrepr.introspection.base
    - canonrepr.introspection.native
    - canonrepr.introspection.names
"""

from __future__ import annotations

from canonrepr.introspection.base import NIL, Introspector, Reflection
from canonrepr.introspection.native import DefaultIntrospector

__all__ = [
    "NIL",
    "DefaultIntrospector",
    "Introspector",
    "Reflection",
]
