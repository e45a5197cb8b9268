# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : __init__.py
#   file_relpath : src/canonrepr/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

"""Configuration and logging for CanonRepr.

Public modules:
    - canonrepr.config.io: TOML discovery and loading.
    - canonrepr.config.logging: TRACE-aware logging setup.
    - canonrepr.config.model: `RenderConfig` and its mutable builder.

This package initializer stays import-free: the rendering layer imports
``canonrepr.config.logging`` and the model imports the rendering layer.
"""
