# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : __main__.py
#   file_relpath : src/canonrepr/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

"""Module entry point for running CanonRepr via ``python -m canonrepr``.

Delegates to [`cli`][canonrepr.cli.main.cli], the same entry point as the
``canonrepr`` console script.

Examples:
    Render a JSON document from stdin::

        echo '{"a": [1, 2]}' | python -m canonrepr render -
"""

from __future__ import annotations

from canonrepr.cli.main import cli

if __name__ == "__main__":
    cli()
