"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from retention.core.config import ConfigError
from retention.core.errors import ErrorCode
from retention.output.console import Style
from retention.services.retention.errors import DatasetError, InvalidArgument

if TYPE_CHECKING:
    from retention.output.console import ConsoleProtocol

__all__ = ["PresentableError", "print_retention_error", "retention_error_exit_code"]

type PresentableError = InvalidArgument | DatasetError | ConfigError


def print_retention_error(error: PresentableError, console: ConsoleProtocol) -> None:
    """Print an error to the console with appropriate formatting."""
    match error:
        case InvalidArgument(argument=argument, message=message, hint=hint):
            console.error(f"invalid {argument}: {message}")
            if hint:
                console.print(f"hint: {hint}", Style.DIM)
        case DatasetError(message=message, hint=hint):
            console.error(message)
            if hint:
                console.print(f"hint: {hint}", Style.DIM)
        case ConfigError(message=message):
            console.error(message)


def retention_error_exit_code(error: PresentableError) -> int:
    """Get the process exit code for an error."""
    match error:
        case InvalidArgument():
            return int(ErrorCode.USER_ERROR)
        case DatasetError(kind="file_not_found" | "unreadable"):
            return int(ErrorCode.IO_ERROR)
        case DatasetError():
            return int(ErrorCode.DATA_ERROR)
        case ConfigError():
            return int(ErrorCode.DATA_ERROR)
    # Fallback for exhaustiveness
    return int(ErrorCode.DATA_ERROR)
