# topmark:header:start
#
#   project      : ShebangScan
#   file         : exit_codes.py
#   file_relpath : src/shebangscan/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the ShebangScan CLI.

ShebangScan follows the BSD `sysexits` convention so other tooling can
interpret failures consistently. Recognizing a file never fails; only reading
inputs, resolving configuration and detecting languages can.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the ShebangScan CLI.

    When several files fail in one run, the highest code is returned.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: Input is not valid UTF-8. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        UNSUPPORTED_FILE_TYPE: No registered language matches a file. Mirrors
            BSD ``EX_UNAVAILABLE (69)``.
        IO_ERROR: I/O error reading a file. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions. Mirrors BSD ``EX_NOPERM (77)``.
        CONFIG_ERROR: Missing/invalid/malformed config. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    UNSUPPORTED_FILE_TYPE = 69  # EX_UNAVAILABLE
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG
