# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : constants.py
#   file_relpath : src/canonrepr/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

"""CanonRepr constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

CANONREPR_VERSION: str = get_version("canonrepr")

CLI_PROG_NAME: str = "canonrepr"
