# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : __init__.py
#   file_relpath : src/canonrepr/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

"""Rendering layer: traversal engine, shape formatters and literal text.

Public modules:
    - canonrepr.rendering.api
    - canonrepr.rendering.addresses
    - canonrepr.rendering.engine
    - canonrepr.rendering.formatters
    - canonrepr.rendering.literals
    - canonrepr.rendering.ordering
"""
