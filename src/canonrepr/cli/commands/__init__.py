# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : __init__.py
#   file_relpath : src/canonrepr/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

"""Subcommands of the ``canonrepr`` command group."""
