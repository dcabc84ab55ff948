# topmark:header:start
#
#   project      : Harmonizer
#   file         : exit_codes.py
#   file_relpath : src/harmonizer/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the Harmonizer CLI.

Harmonizer aligns with the BSD `sysexits` convention where practical, so that other tooling
can interpret failures consistently. `COMPOSITION_FAILED=1` signals that the engine output
was understood and reports build errors; malformed engine output that could not be decoded
maps to `DECODE_ERROR=65` (``EX_DATAERR``).
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Harmonizer CLI.

    Attributes:
        SUCCESS: Composition output decoded; no build errors.
        COMPOSITION_FAILED: Composition output decoded; it reports build errors.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        DECODE_ERROR: A diagnostic could not be decoded. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading input. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid configuration. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    COMPOSITION_FAILED = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    DECODE_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
