# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : exit_codes.py
#   file_relpath : src/canonrepr/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

"""Exit codes for the CanonRepr CLI.

CanonRepr aligns with the BSD ``sysexits`` convention where practical, so that
other tooling can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the CanonRepr CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: Input that cannot be decoded or parsed (bad UTF-8,
            malformed JSON/TOML). Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        CONFIG_ERROR: Configuration error (missing/invalid/malformed config).
            Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    CONFIG_ERROR = 78  # EX_CONFIG
