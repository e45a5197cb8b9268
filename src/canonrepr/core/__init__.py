# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : __init__.py
#   file_relpath : src/canonrepr/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

"""Core, rendering-agnostic primitives shared across CanonRepr.

The ``canonrepr.core`` package provides the vocabulary every other layer
speaks, without pulling in rendering, configuration or CLI concerns.

Included modules:

- ``kinds``
  The `Kind` enum: structural categories of static types, plus the kind
  groupings (numeric families, handle kinds, reference kinds).

- ``types``
  `TypeDesc` descriptors and builders for basic, named and composite types.

- ``values``
  The typed value model (`Typed`, `Cell`, `zero_value`, `new`).

- ``errors``
  Library exceptions (`CanonReprError`, `IntrospectionError`, `ConfigError`).

Design goals:

- Keep this package free of side effects and third-party dependencies.
- Prefer small, well-typed helpers over framework-specific utilities.
"""

from __future__ import annotations
