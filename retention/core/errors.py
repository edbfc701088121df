"""Error codes for CLI exit status.

Every failure surfaced by the command line maps to one of these codes. The
values are used as process exit codes and should remain stable:
- 0: Success
- 1: User error (invalid number of releases, unknown project or environment)
- 2: Data error (dataset or config present but malformed)
- 5: I/O error (file not found, permission denied)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands."""

    OK = 0
    USER_ERROR = 1
    DATA_ERROR = 2
    IO_ERROR = 5
