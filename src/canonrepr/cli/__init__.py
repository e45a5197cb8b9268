# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : __init__.py
#   file_relpath : src/canonrepr/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

"""Click-based command line interface for CanonRepr.

Public modules:
    - canonrepr.cli.main: the ``canonrepr`` command group.
    - canonrepr.cli.errors: CLI exceptions with standardized exit codes.
    - canonrepr.cli.exit_codes: the `ExitCode` enumeration.
"""
